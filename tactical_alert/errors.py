"""Exception types raised by tactical_alert."""


class TacticalAlertError(Exception):
    """Base class for tactical_alert errors."""


class InvalidRuleResult(TacticalAlertError, TypeError):
    """A rule returned something other than True or a non-empty string."""

    def __init__(self, field: str, rule, result):
        self.field = field
        self.rule = rule
        self.result = result
        name = getattr(rule, "__name__", repr(rule))
        super().__init__(
            f"Rule {name} for field {field!r} returned {result!r}; "
            "rules must return True or an error message."
        )


class ConfigError(TacticalAlertError, ValueError):
    """A validator config file could not be read or is malformed."""
