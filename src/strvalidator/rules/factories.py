"""
strvalidator Rule Factories

Named rule factories shared by `Validator` and `Builder`. Each factory
formats its message from the supplied template (or the catalog default),
binds its condition values to a predicate from the predicate library and
appends the resulting `Rule` through the owner's `rule()` method.

Default messages are looked up when the factory runs, never afterwards.
"""

import re
from functools import partial
from typing import Optional, Pattern, TypeVar, Union

from ..constants import NUMBER
from ..messages import Messages, get_messages
from . import predicates
from .base import Predicate, RuleType

T = TypeVar("T", bound="RuleFactoryMixin")


class RuleFactoryMixin:
    """
    Adds the built-in rule factories to a class exposing `rule()`.

    Subclasses must set `_messages` (an optional catalog) and implement
    `rule(message, predicate, name, rule_type)` returning self.
    """

    _messages: Optional[Messages] = None

    def rule(
        self: T,
        message: str,
        predicate: Predicate,
        name: str = "rule",
        rule_type: RuleType = RuleType.CUSTOM
    ) -> T:
        raise NotImplementedError

    def _catalog(self) -> Messages:
        return self._messages if self._messages is not None else get_messages()

    # Length rules

    def required(self: T, message: Optional[str] = None) -> T:
        """
        The input must be present and non-empty.

        Args:
            message: Error message; defaults to the catalog's `required`
        """
        message = message if message is not None else self._catalog().required
        return self.rule(message, predicates.required, "required", RuleType.PRESENCE)

    def length(self: T, condition: int, message: Optional[str] = None) -> T:
        """
        The input must have exactly `condition` characters.

        Args:
            condition: Exact character count
            message: Template receiving `condition`; defaults to the catalog's `length`
        """
        template = message if message is not None else self._catalog().length
        return self.rule(
            template.format(condition),
            partial(predicates.length, condition=condition),
            "length",
            RuleType.LENGTH
        )

    def min_length(self: T, condition: int, message: Optional[str] = None) -> T:
        """
        The input must have at least `condition` characters.

        Args:
            condition: Minimum character count
            message: Template receiving `condition`; defaults to the catalog's `min_length`
        """
        template = message if message is not None else self._catalog().min_length
        return self.rule(
            template.format(condition),
            partial(predicates.min_length, condition=condition),
            "min_length",
            RuleType.LENGTH
        )

    def max_length(self: T, condition: int, message: Optional[str] = None) -> T:
        """
        The input must have at most `condition` characters.

        Args:
            condition: Maximum character count
            message: Template receiving `condition`; defaults to the catalog's `max_length`
        """
        template = message if message is not None else self._catalog().max_length
        return self.rule(
            template.format(condition),
            partial(predicates.max_length, condition=condition),
            "max_length",
            RuleType.LENGTH
        )

    # Format rules

    def email(self: T, message: Optional[str] = None) -> T:
        """The input must contain an email address."""
        message = message if message is not None else self._catalog().email
        return self.rule(message, predicates.email, "email", RuleType.FORMAT)

    def numeric_format(self: T, message: Optional[str] = None) -> T:
        """The input must parse as a number."""
        message = message if message is not None else self._catalog().numeric_format
        return self.rule(message, predicates.numeric_format, "numeric_format", RuleType.FORMAT)

    def reg_exp(self: T, pattern: Union[str, Pattern[str]], message: Optional[str] = None) -> T:
        """
        The whole input must match a regular expression.

        Args:
            pattern: Pattern text or compiled pattern; compiled once here
            message: Template receiving the pattern text; defaults to the catalog's `reg_exp`

        Raises:
            re.error: If the pattern does not compile
        """
        compiled = re.compile(pattern)
        template = message if message is not None else self._catalog().reg_exp
        return self.rule(
            template.format(compiled.pattern),
            partial(predicates.reg_exp, pattern=compiled),
            "reg_exp",
            RuleType.FORMAT
        )

    # Content rules

    def should_only_contain(self: T, condition: str, message: Optional[str] = None) -> T:
        """
        Every character of the input must belong to `condition`.

        Args:
            condition: Allowed characters
            message: Template receiving `condition`; defaults to the catalog's `should_only_contain`
        """
        template = message if message is not None else self._catalog().should_only_contain
        return self.rule(
            template.format(condition),
            partial(predicates.should_only_contain, condition=condition),
            "should_only_contain",
            RuleType.CONTENT
        )

    def only_numbers(self: T, message: Optional[str] = None) -> T:
        """The input must consist of decimal digits only."""
        template = message if message is not None else self._catalog().only_numbers
        return self.rule(
            template.format(NUMBER),
            partial(predicates.should_only_contain, condition=NUMBER),
            "only_numbers",
            RuleType.CONTENT
        )

    def not_contain(self: T, condition: str, message: Optional[str] = None) -> T:
        """
        No character of `condition` may appear in the input.

        Args:
            condition: Rejected characters
            message: Template receiving `condition`; defaults to the catalog's `not_contain`
        """
        template = message if message is not None else self._catalog().not_contain
        return self.rule(
            template.format(condition),
            partial(predicates.not_contain, condition=condition),
            "not_contain",
            RuleType.CONTENT
        )

    def must_contain_one(self: T, condition: str, message: Optional[str] = None) -> T:
        """At least one character of `condition` must appear in the input."""
        template = message if message is not None else self._catalog().must_contain_one
        return self.rule(
            template.format(condition),
            partial(predicates.must_contain_one, condition=condition),
            "must_contain_one",
            RuleType.CONTENT
        )

    def must_contain_minimum(
        self: T,
        condition: str,
        minimum: int,
        message: Optional[str] = None
    ) -> T:
        """
        At least `minimum` characters of the input must belong to `condition`.

        Args:
            condition: Wanted characters
            minimum: Required number of matching characters
            message: Template receiving `minimum` then `condition`;
                defaults to the catalog's `must_contain_minimum`
        """
        template = message if message is not None else self._catalog().must_contain_minimum
        return self.rule(
            template.format(minimum, condition),
            partial(predicates.must_contain_minimum, condition=condition, minimum=minimum),
            "must_contain_minimum",
            RuleType.CONTENT
        )
