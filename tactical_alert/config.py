"""Config-driven validators: rules named in a JSON file, resolved via the rule registry.

A config file looks like

    {
        "failure_event_type": "MESSAGE_VALIDATION_FAILED",
        "rules": {
            "sender_id": ["is_integer"],
            "text": ["contains_text", {"rule": "max_length", "params": {"limit": 250}}]
        }
    }
"""
import json
import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from tactical_alert.errors import ConfigError
from tactical_alert.rules import RULE_REGISTRY, max_length, one_of
from tactical_alert.validator import Validator, build

logger = logging.getLogger(__name__)

RULE_FACTORIES: dict[str, Callable[..., Callable[[Any], bool | str]]] = {
    "max_length": max_length,
    "one_of": one_of,
}


def _resolve_rule(field_name: str, entry: Any) -> Callable[[Any], bool | str] | None:
    if isinstance(entry, str):
        fn = RULE_REGISTRY.get(entry)
        if fn is None:
            logger.warning("Unknown rule %s for field %s", entry, field_name)
        return fn

    if isinstance(entry, Mapping):
        name = entry.get("rule")
        params = entry.get("params") or {}
        if not isinstance(name, str):
            raise ConfigError(f"Rule name for field {field_name} must be a string, got {name!r}")
        if not isinstance(params, Mapping):
            raise ConfigError(f"Params for rule {name} on field {field_name} must be a mapping")
        if name in RULE_REGISTRY:
            if params:
                raise ConfigError(f"Rule {name} on field {field_name} takes no params")
            return RULE_REGISTRY[name]
        factory = RULE_FACTORIES.get(name)
        if factory is None:
            logger.warning("Unknown rule %s for field %s", name, field_name)
            return None
        try:
            return factory(**params)
        except TypeError as e:
            raise ConfigError(f"Bad params for rule {name} on field {field_name}: {e}") from e

    logger.warning("Unrecognised rule entry %r for field %s", entry, field_name)
    return None


def build_from_config(
    project_config: Mapping[str, Any],
    dispatch: Callable[[dict], None] | None = None,
) -> Validator:
    """Build a Validator from a config dict whose rules are given by name."""
    rules_config = project_config.get("rules", {})
    if not isinstance(rules_config, Mapping):
        raise ConfigError(f"'rules' must be a mapping, got {type(rules_config).__name__}")

    rules: dict[str, list] = {}
    for field_name, entries in rules_config.items():
        if not isinstance(entries, list):
            raise ConfigError(f"Rules for field {field_name} must be a list")
        resolved = (_resolve_rule(field_name, entry) for entry in entries)
        rules[field_name] = [fn for fn in resolved if fn is not None]

    config: dict[str, Any] = {"rules": rules}
    if "failure_event_type" in project_config:
        config["failure_event_type"] = project_config["failure_event_type"]
    return build(config, dispatch=dispatch)


def load_validator(path: str | Path, dispatch: Callable[[dict], None] | None = None) -> Validator:
    """Read a JSON config file and build its Validator."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            project_config = json.load(f)
    except (OSError, ValueError) as e:
        raise ConfigError(f"Could not load validator config {path}: {e}") from e
    if not isinstance(project_config, dict):
        raise ConfigError(f"Validator config {path} must contain a JSON object")

    logger.info("Loaded validator config from %s", path)
    return build_from_config(project_config, dispatch=dispatch)
