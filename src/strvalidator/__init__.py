"""
strvalidator - Declarative String Validation

Build an ordered list of rules, each an error message paired with a
predicate, then evaluate strings against it. Evaluation stops at the
first failing rule and reports its message either through a callback or
by raising `ValidationError`.
"""

__version__ = "1.1.0"

from .builder import Builder
from .config import ValidatorConfig, default_config
from .exceptions import NoRulesConfiguredError, StrValidatorError, ValidationError
from .messages import (
    MESSAGE_CATALOGS,
    Messages,
    MessagesEn,
    MessagesEs,
    get_messages,
    messages_for_locale,
    reset_messages,
    set_messages,
)
from .rules import Predicate, Rule, RuleType, predicates
from .validator import FailureCallback, Validator

__all__ = [
    # Engine
    "Validator",
    "Builder",
    "Rule",
    "RuleType",
    "Predicate",
    "FailureCallback",
    "predicates",
    # Errors
    "StrValidatorError",
    "ValidationError",
    "NoRulesConfiguredError",
    # Messages
    "Messages",
    "MessagesEn",
    "MessagesEs",
    "MESSAGE_CATALOGS",
    "get_messages",
    "set_messages",
    "reset_messages",
    "messages_for_locale",
    # Configuration
    "ValidatorConfig",
    "default_config",
]
