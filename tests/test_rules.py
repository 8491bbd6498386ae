"""
Tests for the rule abstraction and the predicate library.

These tests cover:
- Rule construction, immutability and serialization
- Each built-in predicate, including its empty and missing input cases
"""

import dataclasses
import re

import pytest

from strvalidator import Rule, RuleType, predicates
from strvalidator.constants import ALPHABET_LOWERCASE, NUMBER


class TestRule:
    """Tests for the Rule dataclass."""

    def test_check_returns_predicate_result(self):
        """Test that check passes the predicate result through."""
        rule = Rule("Must be xxx", lambda it: it == "xxx")

        assert rule.check("xxx") is True
        assert rule.check("yyy") is False

    def test_defaults(self):
        """Test the default name and category."""
        rule = Rule("message", lambda it: True)

        assert rule.name == "rule"
        assert rule.rule_type == RuleType.CUSTOM

    def test_rule_is_immutable(self):
        """Test that rule fields cannot be reassigned."""
        rule = Rule("message", lambda it: True)

        with pytest.raises(dataclasses.FrozenInstanceError):
            rule.message = "other"

    def test_none_message_rejected(self):
        """Test that a missing message is refused."""
        with pytest.raises(TypeError):
            Rule(None, lambda it: True)

    def test_non_callable_predicate_rejected(self):
        """Test that the predicate must be callable."""
        with pytest.raises(TypeError):
            Rule("message", "not callable")

    def test_predicate_errors_propagate(self):
        """Test that exceptions from a predicate are not translated."""
        def broken(value):
            raise RuntimeError("boom")

        rule = Rule("message", broken)

        with pytest.raises(RuntimeError):
            rule.check("abc")

    def test_to_dict(self):
        """Test conversion to dictionary."""
        rule = Rule("Minimum 3 characters", lambda it: len(it) >= 3, "min_length", RuleType.LENGTH)

        data = rule.to_dict()

        assert data == {
            "name": "min_length",
            "rule_type": "length",
            "message": "Minimum 3 characters",
        }


class TestLengthPredicates:
    """Tests for presence and length predicates."""

    def test_required(self):
        assert predicates.required("x") is True
        assert predicates.required("") is False
        assert predicates.required(None) is False

    def test_required_accepts_whitespace(self):
        """Test that whitespace counts as content."""
        assert predicates.required(" ") is True

    def test_length(self):
        assert predicates.length("abc", 3) is True
        assert predicates.length("ab", 3) is False
        assert predicates.length("abcd", 3) is False

    def test_length_counts_characters_not_bytes(self):
        """Test that multi-byte characters count once."""
        assert predicates.length("ñáé", 3) is True
        assert predicates.max_length("ñáé", 3) is True

    def test_min_length(self):
        assert predicates.min_length("abc", 3) is True
        assert predicates.min_length("abcd", 3) is True
        assert predicates.min_length("ab", 3) is False

    def test_max_length(self):
        assert predicates.max_length("abc", 3) is True
        assert predicates.max_length("", 3) is True
        assert predicates.max_length("abcd", 3) is False


class TestFormatPredicates:
    """Tests for email, numeric and regular expression predicates."""

    @pytest.mark.parametrize("value", [
        "user@example.com",
        "first.last+tag@sub.example.org",
        "contact: me@example.com",
    ])
    def test_email_accepts(self, value):
        assert predicates.email(value) is True

    @pytest.mark.parametrize("value", ["", "example.com", "user@", "@example.com", "plain text"])
    def test_email_rejects(self, value):
        assert predicates.email(value) is False

    @pytest.mark.parametrize("value", ["1", "-1", "3.14", ".5", "1e10", " 42 ", "inf"])
    def test_numeric_format_accepts(self, value):
        assert predicates.numeric_format(value) is True

    @pytest.mark.parametrize("value", ["", "abc", "1.2.3", "12a", "nan", "NaN", "1_000"])
    def test_numeric_format_rejects(self, value):
        assert predicates.numeric_format(value) is False

    def test_reg_exp_matches_whole_input(self):
        """Test that a partial match is not enough."""
        assert predicates.reg_exp("2024-01-15", r"\d{4}-\d{2}-\d{2}") is True
        assert predicates.reg_exp("on 2024-01-15", r"\d{4}-\d{2}-\d{2}") is False

    def test_reg_exp_with_compiled_pattern(self):
        pattern = re.compile(r"[A-Z]+", re.IGNORECASE)

        assert predicates.reg_exp("abc", pattern) is True
        assert predicates.reg_exp("ab1", pattern) is False


class TestContentPredicates:
    """Tests for character-set predicates."""

    def test_should_only_contain(self):
        assert predicates.should_only_contain("123", NUMBER) is True
        assert predicates.should_only_contain("12a", NUMBER) is False

    def test_should_only_contain_rejects_empty(self):
        assert predicates.should_only_contain("", NUMBER) is False

    def test_not_contain(self):
        assert predicates.not_contain("hello", "@#") is True
        assert predicates.not_contain("he@llo", "@#") is False

    def test_not_contain_rejects_empty(self):
        assert predicates.not_contain("", "@#") is False

    def test_must_contain_one(self):
        assert predicates.must_contain_one("abc1", NUMBER) is True
        assert predicates.must_contain_one("abc", NUMBER) is False

    def test_must_contain_one_fails_on_empty(self):
        """Test that an empty input finds nothing."""
        assert predicates.must_contain_one("", NUMBER) is False

    @pytest.mark.parametrize("value", [None, "", "ABC", "123", "abC"])
    def test_must_contain_minimum_rejects(self, value):
        assert predicates.must_contain_minimum(value, ALPHABET_LOWERCASE, 3) is False

    @pytest.mark.parametrize("value", ["abc", "abcd", "aBcDe", "abcABC123..."])
    def test_must_contain_minimum_accepts(self, value):
        assert predicates.must_contain_minimum(value, ALPHABET_LOWERCASE, 3) is True

    def test_must_contain_minimum_counts_repeats(self):
        """Test that every occurrence counts toward the minimum."""
        assert predicates.must_contain_minimum("aaa", ALPHABET_LOWERCASE, 3) is True
