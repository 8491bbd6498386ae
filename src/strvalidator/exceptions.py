"""
strvalidator Exceptions

Exception hierarchy surfaced by validators. Only the error-style
evaluation operations raise `ValidationError`; the boolean-returning
operations report failures through their return value and callback.
"""

from typing import Any, Dict, Optional


class StrValidatorError(Exception):
    """Base class for every error raised by strvalidator."""


class ValidationError(StrValidatorError):
    """
    Raised when an evaluated string breaks a rule.

    Attributes:
        message: Message of the first failing rule, or the mismatch message
        evaluated: The offending input; None when no input was given
    """

    def __init__(self, message: str, evaluated: Optional[str]):
        self.message = message
        self.evaluated = evaluated
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "evaluated": self.evaluated,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, evaluated={self.evaluated!r})"


class NoRulesConfiguredError(StrValidatorError):
    """Raised when a missing input is evaluated by a validator without rules."""

    def __init__(self, message: str = "No rules configured; cannot evaluate a missing input"):
        self.message = message
        super().__init__(message)
