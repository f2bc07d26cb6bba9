"""Action types emitted by validators."""


class ValidationActions:
    VALIDATION_FAILED = "VALIDATION_FAILED"
