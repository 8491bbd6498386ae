"""
strvalidator Predicate Library

Pure checks behind the built-in rules. Each function takes the evaluated
string followed by its condition values and returns a bool. The rule
factories close over the condition; these functions can also be called
directly.

Available predicates:
- required: non-empty
- length / min_length / max_length: character-count bounds
- email: contains an email-shaped substring
- numeric_format: parses as a float that is not NaN
- should_only_contain: every character is in an allow-list
- not_contain: no character of a deny-list appears
- must_contain_one: at least one character of a set appears
- must_contain_minimum: at least N characters belong to a set
- reg_exp: whole input matches a pattern
"""

import math
import re
from typing import Optional, Pattern, Union

from ..constants import EMAIL_RE

_EMAIL_PATTERN = re.compile(EMAIL_RE)


def required(evaluate: Optional[str]) -> bool:
    """True iff the input is present and non-empty."""
    return evaluate is not None and evaluate != ""


def length(evaluate: str, condition: int) -> bool:
    return len(evaluate) == condition


def min_length(evaluate: str, condition: int) -> bool:
    return len(evaluate) >= condition


def max_length(evaluate: str, condition: int) -> bool:
    return len(evaluate) <= condition


def email(evaluate: str) -> bool:
    """
    True iff the input contains an email-shaped substring.

    The pattern is searched, not matched against the whole input, so
    "contact: me@example.com" passes.
    """
    return _EMAIL_PATTERN.search(evaluate) is not None


def numeric_format(evaluate: str) -> bool:
    """
    True iff the whole input parses as a floating-point number that is not NaN.

    Surrounding whitespace is tolerated, digit-group underscores are not.
    """
    if "_" in evaluate:
        return False
    try:
        number = float(evaluate)
    except ValueError:
        return False
    return not math.isnan(number)


def should_only_contain(evaluate: str, condition: str) -> bool:
    """
    True iff every character of the input appears in `condition`.

    An empty input fails.
    """
    if not evaluate:
        return False
    allowed = set(condition)
    return all(char in allowed for char in evaluate)


def not_contain(evaluate: str, condition: str) -> bool:
    """
    True iff no character of `condition` appears in the input.

    An empty input fails.
    """
    if not evaluate:
        return False
    return not any(char in evaluate for char in condition)


def must_contain_one(evaluate: str, condition: str) -> bool:
    return any(char in evaluate for char in condition)


def must_contain_minimum(evaluate: Optional[str], condition: str, minimum: int) -> bool:
    """
    True iff at least `minimum` characters of the input belong to `condition`.

    Every occurrence counts, so "aab" holds two lowercase "a" characters.
    A missing input fails.
    """
    if evaluate is None:
        return False
    wanted = set(condition)
    count = sum(1 for char in evaluate if char in wanted)
    return count >= minimum


def reg_exp(evaluate: str, pattern: Union[str, Pattern[str]]) -> bool:
    """True iff the whole input matches `pattern`."""
    return re.fullmatch(pattern, evaluate) is not None
