"""
strvalidator Rules Package

Rule abstraction, predicate library and the named rule factories shared
by validators and builders.
"""

from .base import Predicate, Rule, RuleType
from .factories import RuleFactoryMixin
from . import predicates

__all__ = [
    "Predicate",
    "Rule",
    "RuleType",
    "RuleFactoryMixin",
    "predicates",
]
