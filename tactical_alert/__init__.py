"""Build per-field data validators that dispatch an action when validation fails."""

from .actions import ValidationActions
from .config import build_from_config, load_validator
from .dispatcher import Dispatcher, QtDispatcher, default_dispatcher
from .errors import ConfigError, InvalidRuleResult, TacticalAlertError
from .settings import Settings, load_settings
from .validator import MISSING, NOT_REGISTERED, Marker, Validator, ValidatorConfig, build

__all__ = [
    "build",
    "build_from_config",
    "load_validator",
    "Validator",
    "ValidatorConfig",
    "MISSING",
    "NOT_REGISTERED",
    "Marker",
    "ValidationActions",
    "Dispatcher",
    "QtDispatcher",
    "default_dispatcher",
    "Settings",
    "load_settings",
    "TacticalAlertError",
    "InvalidRuleResult",
    "ConfigError",
]
