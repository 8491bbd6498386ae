"""
strvalidator Rules Base Module

This module defines the rule abstraction evaluated by validators: an
immutable pairing of a human-readable error message and a predicate over
the evaluated string.

A rule provides:
- The message reported when the predicate rejects the input
- A pure predicate; it always receives a str, never None
- A name and category used for introspection and logging
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict

Predicate = Callable[[str], bool]


class RuleType(str, Enum):
    """
    Categories of rules.

    - PRESENCE: The input must be present and non-empty
    - LENGTH: Character-count bounds
    - FORMAT: Shape of the whole input (email, number, pattern)
    - CONTENT: Character-set membership
    - CUSTOM: Caller-supplied predicate
    """
    PRESENCE = "presence"
    LENGTH = "length"
    FORMAT = "format"
    CONTENT = "content"
    CUSTOM = "custom"


@dataclass(frozen=True)
class Rule:
    """
    A single validation check.

    Rules hold no mutable state, so validators and their copies share
    the same instances.

    Attributes:
        message: Error message, with any condition already interpolated
        predicate: Returns True when the input satisfies the rule
        name: Identifier of the factory that produced the rule
        rule_type: Category of the rule
    """
    message: str
    predicate: Predicate
    name: str = "rule"
    rule_type: RuleType = RuleType.CUSTOM

    def __post_init__(self) -> None:
        if self.message is None:
            raise TypeError("Rule message must not be None")
        if not callable(self.predicate):
            raise TypeError(f"Rule predicate must be callable, got {type(self.predicate).__name__}")

    def check(self, evaluate: str) -> bool:
        """
        Run the predicate against a string.

        Args:
            evaluate: The string to check

        Returns:
            The predicate's result, unchanged
        """
        return self.predicate(evaluate)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "name": self.name,
            "rule_type": self.rule_type.value,
            "message": self.message,
        }

    def __str__(self) -> str:
        return f"{self.name} ({self.rule_type.value}): {self.message}"
