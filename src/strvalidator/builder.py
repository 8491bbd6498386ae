"""
strvalidator Builder

Fluent assembly of a `Validator`. Every call returns the builder; the
accumulated rules only take effect when `build()` copies them into a new
validator.
"""

from typing import List, Optional

from .messages import Messages
from .rules.base import Predicate, Rule, RuleType
from .rules.factories import RuleFactoryMixin
from .validator import FailureCallback, Validator


class Builder(RuleFactoryMixin):
    """
    Accumulates rules and configuration for a validator.

    Usage:

    ```python
    validator = (
        Builder()
        .required()
        .min_length(3)
        .set_mismatch_message("Passwords do not match")
        .on_failure(show_error)
        .build()
    )
    ```

    Each `build()` produces an independent validator; later calls on the
    builder do not reach validators already built.
    """

    def __init__(self, messages: Optional[Messages] = None):
        """
        Initialize an empty builder.

        Args:
            messages: Catalog used by the rule factories and for the default
                mismatch message; the process-wide catalog is used when omitted
        """
        self._messages = messages
        self._rules: List[Rule] = []
        self._mismatch_message = self._catalog().not_match
        self._on_failure: Optional[FailureCallback] = None

    def rule(
        self,
        message: str,
        predicate: Predicate,
        name: str = "rule",
        rule_type: RuleType = RuleType.CUSTOM
    ) -> "Builder":
        """
        Append a rule.

        Args:
            message: Error message reported when the predicate returns False
            predicate: Returns True when the evaluated string is acceptable
            name: Identifier used in logs and `Rule.to_dict()`
            rule_type: Category of the rule

        Returns:
            This builder
        """
        self._rules.append(Rule(message, predicate, name, rule_type))
        return self

    def set_mismatch_message(self, message: str) -> "Builder":
        self._mismatch_message = message
        return self

    def on_failure(self, callback: Optional[FailureCallback]) -> "Builder":
        self._on_failure = callback
        return self

    def build(self) -> Validator:
        """
        Create a validator from the accumulated state.

        Returns:
            A new validator owning its own copy of the rule list
        """
        return Validator(
            rules=list(self._rules),
            mismatch_message=self._mismatch_message,
            on_failure=self._on_failure,
            messages=self._messages
        )
