import re

import pytest

from env_enforcer.core.errors import MatcherTypeError
from env_enforcer.validators.matchers import (
    ListMatcher,
    LiteralMatcher,
    NumericMatcher,
    PatternMatcher,
    PredicateMatcher,
    build_matchers,
    describe_matcher,
    loose_equals,
    to_matcher,
)


@pytest.mark.parametrize(
    "observed, expected, outcome",
    [
        ("1", 1, True),
        ("1.0", 1, True),
        (" 42 ", 42, True),
        ("1", 2, False),
        ("", 0, False),
        ("one", 1, False),
        ("1", "1", True),
        ("1.0", "1", False),
        ("Test", "test", False),
        ("1e3", 1000, True),
        (".5", 0.5, True),
        ("-2", -2, True),
        ("1_000", 1000, False),
        ("inf", float("inf"), False),
        ("nan", float("nan"), False),
        ("0x10", 16, False),
        ("\u0663", 3, False),
    ],
)
def test_loose_equals(observed, expected, outcome):
    assert loose_equals(observed, expected) is outcome


@pytest.mark.parametrize(
    "raw, matcher_type",
    [
        ("value", LiteralMatcher),
        (3, NumericMatcher),
        (2.5, NumericMatcher),
        (["a", 1], ListMatcher),
        (("a", "b"), ListMatcher),
        (re.compile("^a"), PatternMatcher),
        (lambda value: True, PredicateMatcher),
    ],
)
def test_to_matcher_picks_declared_variant(raw, matcher_type):
    assert isinstance(to_matcher(raw), matcher_type)


def test_to_matcher_passes_matchers_through():
    matcher = LiteralMatcher("x")

    assert to_matcher(matcher) is matcher


@pytest.mark.parametrize("raw", [True, None, {"a": 1}, object()])
def test_to_matcher_rejects_unsupported_values(raw):
    with pytest.raises(MatcherTypeError):
        to_matcher(raw)


def test_list_matcher_rejects_nested_values():
    with pytest.raises(MatcherTypeError):
        ListMatcher((["nested"],))


def test_matcher_type_error_is_a_type_error():
    with pytest.raises(TypeError):
        to_matcher(None)


def test_numeric_literal_matches_string_form():
    assert NumericMatcher(8080).matches("8080")
    assert not NumericMatcher(8080).matches("80")


def test_literal_is_exact():
    assert LiteralMatcher("prod").matches("prod")
    assert not LiteralMatcher("prod").matches("production")


def test_pattern_uses_search_semantics():
    matcher = PatternMatcher(re.compile("test", re.I))

    assert matcher.matches("my TEST value")
    assert not matcher.matches("nothing here")


def test_pattern_accepts_string_source():
    assert PatternMatcher("^v\\d+$").matches("v12")


def test_build_matchers_keeps_order_and_kinds():
    built = build_matchers({"B": 1, "A": "a", "C": ["c"], "D": re.compile("d"), "E": str.isdigit})

    assert list(built) == ["B", "A", "C", "D", "E"]
    assert [m.kind for m in built.values()] == ["numeric", "literal", "list", "pattern", "predicate"]


@pytest.mark.parametrize(
    "matcher, text",
    [
        (LiteralMatcher("tester"), "tester"),
        (NumericMatcher(1.0), "1"),
        (NumericMatcher(1.5), "1.5"),
        (ListMatcher(("a", 1, 2.0)), "a,1,2"),
        (PatternMatcher(re.compile("te+st")), "te+st"),
        (PredicateMatcher(lambda v: True, label="custom"), "custom"),
        ("already a label", "already a label"),
        (None, "None"),
    ],
)
def test_describe_matcher(matcher, text):
    assert describe_matcher(matcher) == text


def test_predicate_default_label_is_qualified_name():
    def is_enabled(value):
        return value == "on"

    assert PredicateMatcher(is_enabled).label.endswith("is_enabled")


def test_predicate_requires_callable():
    with pytest.raises(MatcherTypeError):
        PredicateMatcher("not callable")
