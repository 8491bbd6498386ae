"""
strvalidator Validator

This module implements the evaluation engine: an ordered list of rules
checked against a string, stopping at the first failing rule.

Two failure-signaling styles are offered, chosen per call:
- `is_valid` / `compare` return a bool and invoke the failure callback
- `is_valid_or_fail` / `compare_or_fail` raise `ValidationError` and never
  touch the callback
"""

import logging
from typing import Callable, Iterable, List, Optional, Tuple

from .exceptions import NoRulesConfiguredError, ValidationError
from .messages import Messages
from .rules.base import Predicate, Rule, RuleType
from .rules.factories import RuleFactoryMixin

logger = logging.getLogger(__name__)

FailureCallback = Callable[[str], None]


class Validator(RuleFactoryMixin):
    """
    Reusable, ordered validation policy for strings.

    Rules are checked in insertion order. A validator can be filled
    directly (every factory returns the validator, so calls may be
    chained) or produced by `Builder.build()`.

    Usage:

    ```python
    validator = Validator()
    validator.required().min_length(8)
    validator.on_failure(print)
    validator.is_valid("secret")  # prints "Minimum 8 characters"
    ```

    There is no internal locking. Concurrent evaluations of one instance
    are safe only while nobody adds rules, changes the mismatch message
    or replaces the callback.

    Attributes:
        rules: The rules, in checking order
        mismatch_message: Reported when compared strings differ
    """

    def __init__(
        self,
        rules: Optional[Iterable[Rule]] = None,
        mismatch_message: Optional[str] = None,
        on_failure: Optional[FailureCallback] = None,
        messages: Optional[Messages] = None
    ):
        """
        Initialize a validator.

        Args:
            rules: Initial rules; copied into a list owned by this validator
            mismatch_message: Message for failed comparisons; defaults to the
                catalog's `not_match`
            on_failure: Callback receiving the message of a failed evaluation
            messages: Catalog used by the rule factories; the process-wide
                catalog is used when omitted
        """
        self._messages = messages
        self._rules: List[Rule] = list(rules) if rules is not None else []
        self._mismatch_message = (
            mismatch_message if mismatch_message is not None else self._catalog().not_match
        )
        self._on_failure = on_failure

    @property
    def rules(self) -> Tuple[Rule, ...]:
        return tuple(self._rules)

    @property
    def mismatch_message(self) -> str:
        return self._mismatch_message

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        names = ", ".join(rule.name for rule in self._rules)
        return f"<{self.__class__.__name__}: [{names}]>"

    # Configuration

    def rule(
        self,
        message: str,
        predicate: Predicate,
        name: str = "rule",
        rule_type: RuleType = RuleType.CUSTOM
    ) -> "Validator":
        """
        Append a rule.

        Example:

        ```python
        Validator().rule("The text is different from 'xxx'", lambda it: it == "xxx")
        ```

        Args:
            message: Error message reported when the predicate returns False
            predicate: Returns True when the evaluated string is acceptable
            name: Identifier used in logs and `Rule.to_dict()`
            rule_type: Category of the rule

        Returns:
            This validator
        """
        self._rules.append(Rule(message, predicate, name, rule_type))
        return self

    def set_mismatch_message(self, message: str) -> "Validator":
        """Set the message reported by `compare` and `compare_or_fail` on mismatch."""
        self._mismatch_message = message
        return self

    def on_failure(self, callback: Optional[FailureCallback]) -> "Validator":
        """
        Register the callback invoked when `is_valid` or `compare` fails.

        Args:
            callback: Receives the failure message; None removes the callback
        """
        self._on_failure = callback
        return self

    # Evaluation

    def _first_failure(self, evaluate: Optional[str]) -> Optional[Tuple[int, Rule]]:
        """Return the position and rule of the first failing rule, or None."""
        if evaluate is None:
            if not self._rules:
                raise NoRulesConfiguredError()
            return 0, self._rules[0]
        for index, rule in enumerate(self._rules):
            if not rule.check(evaluate):
                return index, rule
        return None

    def _log_failure(self, index: int, rule: Rule, missing: bool) -> None:
        # The evaluated value stays out of the log record.
        logger.debug(
            "Validation failed",
            extra={
                "rule_name": rule.name,
                "rule_index": index,
                "reason": rule.message,
                "missing_input": missing,
            }
        )

    def _notify(self, message: str) -> None:
        if self._on_failure is not None:
            self._on_failure(message)

    def is_valid(self, evaluate: Optional[str]) -> bool:
        """
        Check a string against every rule.

        A None input fails with the first rule's message. Otherwise the
        first failing rule stops the evaluation; its message is passed to
        the failure callback, if one is registered.

        Args:
            evaluate: String to evaluate

        Returns:
            True if every rule passes

        Raises:
            NoRulesConfiguredError: If evaluate is None and there are no rules
        """
        failure = self._first_failure(evaluate)
        if failure is None:
            return True
        index, rule = failure
        self._log_failure(index, rule, evaluate is None)
        self._notify(rule.message)
        return False

    def is_valid_or_fail(self, evaluate: Optional[str]) -> None:
        """
        Check a string against every rule, raising on the first failure.

        Args:
            evaluate: String to evaluate

        Raises:
            ValidationError: With the failing rule's message and the input
            NoRulesConfiguredError: If evaluate is None and there are no rules
        """
        failure = self._first_failure(evaluate)
        if failure is None:
            return
        index, rule = failure
        self._log_failure(index, rule, evaluate is None)
        raise ValidationError(rule.message, evaluate)

    def compare(self, evaluate: Optional[str], compare: Optional[str]) -> bool:
        """
        Check that both strings are equal and satisfy every rule.

        On a mismatch, or if either string is None, the failure callback
        receives the mismatch message and no rule is evaluated.

        Args:
            evaluate: String to evaluate
            compare: String it must equal

        Returns:
            True if the strings match and every rule passes
        """
        if evaluate is None or compare is None or evaluate != compare:
            logger.debug("Comparison failed", extra={"reason": self._mismatch_message})
            self._notify(self._mismatch_message)
            return False
        return self.is_valid(evaluate)

    def compare_or_fail(self, evaluate: Optional[str], compare: Optional[str]) -> None:
        """
        Check that both strings are equal and satisfy every rule, raising on failure.

        Raises:
            ValidationError: With the mismatch message if the strings differ
                or either is None; otherwise as `is_valid_or_fail`
        """
        if evaluate is None or compare is None or evaluate != compare:
            logger.debug("Comparison failed", extra={"reason": self._mismatch_message})
            raise ValidationError(self._mismatch_message, evaluate)
        self.is_valid_or_fail(evaluate)

    # Copying

    def copy(self) -> "Validator":
        """
        Create an independent validator with the same configuration.

        Rule instances are shared; the list holding them is not, so rules
        added to the copy do not reach this validator. The failure callback
        is carried over by reference.
        """
        return self.__class__(
            rules=self._rules,
            mismatch_message=self._mismatch_message,
            on_failure=self._on_failure,
            messages=self._messages
        )

    def __copy__(self) -> "Validator":
        return self.copy()