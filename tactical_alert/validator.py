"""
Validator factory.

build() takes a config of the form

    {
        "rules": {
            "sender_id": [is_integer],
            "text": [contains_text, max_length(250)],
        },
        "failure_event_type": "MESSAGE_VALIDATION_FAILED",
    }

and returns a Validator. Each rule takes the field's value and returns True if
the value is valid, or an error message if it is not.

The config is shallow-merged over the defaults: a supplied "rules" mapping
replaces the default one outright, and only "rules" and "failure_event_type"
are read.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from tactical_alert.dispatcher import default_dispatcher
from tactical_alert.errors import InvalidRuleResult
from tactical_alert.actions import ValidationActions

logger = logging.getLogger(__name__)

CONFIG_KEYS = ("rules", "failure_event_type")


class Marker:
    """Falsy named singleton used for MISSING and NOT_REGISTERED."""

    def __init__(self, name: str):
        self._name = name

    def __bool__(self):
        return False

    def __repr__(self):
        return self._name


# Absence marker: no value was supplied for the field. None is a value.
MISSING = Marker("MISSING")
# Returned by get_field_errors for a field without a rule list.
NOT_REGISTERED = Marker("NOT_REGISTERED")


@dataclass(frozen=True)
class ValidatorConfig:
    rules: Mapping[str, Any]
    failure_event_type: Any


class Validator:
    """Runs per-field rules. Holds no state between calls."""

    def __init__(self, config: ValidatorConfig, dispatch: Callable[[dict], None]):
        self._config = config
        self._dispatch = dispatch

    @property
    def failure_event_type(self) -> Any:
        return self._config.failure_event_type

    @property
    def fields(self) -> list[str]:
        return list(self._config.rules)

    def get_field_errors(self, field: str, value: Any = MISSING) -> list[str] | Marker:
        """Run the rules for field against value.

        Returns the error messages in rule order, [] if every rule passed or
        the value is MISSING, and NOT_REGISTERED if field has no rule list.
        """
        rules = self._config.rules.get(field)
        if not isinstance(rules, (list, tuple)):
            return NOT_REGISTERED

        errors: list[str] = []
        if value is MISSING:
            return errors

        for rule in rules:
            result = rule(value)
            if result is True:
                continue
            if isinstance(result, str) and result:
                errors.append(result)
                continue
            raise InvalidRuleResult(field, rule, result)
        return errors

    get_validation_errors = get_field_errors

    def is_valid(self, data: Mapping[str, Any], event_options: Any = None) -> bool:
        """Check every configured field in data.

        On failure one event is dispatched with the failure event type, the
        caller's event_options and the errors per failing field.
        """
        errors: dict[str, list[str]] = {}
        for name in self._config.rules:
            field_errors = self.get_field_errors(name, data.get(name, MISSING))
            if field_errors:
                errors[name] = field_errors

        if not errors:
            return True

        logger.debug("Validation failed for fields: %s", ", ".join(errors))
        self._dispatch(
            {
                "type": self._config.failure_event_type,
                "options": event_options,
                "errors": errors,
            }
        )
        return False

    def __repr__(self):
        return f"Validator(fields={self.fields}, failure_event_type={self.failure_event_type!r})"


def build(
    config: Mapping[str, Any] | None = None,
    dispatch: Callable[[dict], None] | None = None,
) -> Validator:
    """Create a new Validator from config. See the module docstring."""
    config = config or {}
    ignored = [key for key in config if key not in CONFIG_KEYS]
    if ignored:
        logger.debug("Ignoring unknown validator config keys: %s", ignored)

    merged = {
        "rules": {},
        "failure_event_type": ValidationActions.VALIDATION_FAILED,
    }
    merged.update({key: config[key] for key in CONFIG_KEYS if key in config})

    return Validator(
        ValidatorConfig(
            rules=MappingProxyType(dict(merged["rules"])),
            failure_event_type=merged["failure_event_type"],
        ),
        dispatch if dispatch is not None else default_dispatcher,
    )
