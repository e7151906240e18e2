"""Exceptions raised by divemath calculations."""


class DiveMathError(ValueError):
    """Base class for invalid-input failures in divemath."""


class DomainError(DiveMathError):
    """Input outside the domain of a formula, e.g. a zero divisor."""

    def __init__(self, parameter: str, value, reason: str = "must be non-zero"):
        self.parameter = parameter
        self.value = value
        super().__init__(f"{parameter} {reason}, got {value}")
