"""Settings read from the environment, and optionally a .env file.

Nothing here runs on import or inside build(). Applications call
load_settings() once at startup and pass the result into their validator
configs:

    settings = load_settings(Path(config_folder) / ".env")
    validator = build({"rules": rules, "failure_event_type": settings.failure_event_type})
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values

from tactical_alert.actions import ValidationActions


@dataclass(frozen=True)
class Settings:
    failure_event_type: str = ValidationActions.VALIDATION_FAILED


def load_settings(dotenv_path: str | Path | None = None) -> Settings:
    """Read TACTICAL_ALERT_FAILURE_ACTION from the process environment, then dotenv_path.

    The .env file is only read when dotenv_path is given, and os.environ is
    never modified.
    """
    file_values = dotenv_values(dotenv_path) if dotenv_path is not None else {}
    failure_event_type = (
        os.getenv("TACTICAL_ALERT_FAILURE_ACTION")
        or file_values.get("TACTICAL_ALERT_FAILURE_ACTION")
        or ""
    ).strip()
    return Settings(failure_event_type=failure_event_type or ValidationActions.VALIDATION_FAILED)
