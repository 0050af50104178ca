"""
Matcher variants for environment validation.

Each matcher is a small frozen dataclass with a ``kind`` tag. Callers may
build them directly or hand raw Python values to ``to_matcher``:

    str           -> LiteralMatcher
    int / float   -> NumericMatcher
    list / tuple  -> ListMatcher
    re.Pattern    -> PatternMatcher
    callable      -> PredicateMatcher

Coercion rule used by NumericMatcher and ListMatcher (``loose_equals``):
string operands compare exactly; numeric operands compare against the
observed value parsed as a decimal numeral after stripping surrounding
whitespace (optional sign, digits, optional fraction and exponent).
Empty values, digit separators (``1_000``), ``inf``/``nan`` and any other
text never equal a number.
"""

import inspect
import re
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Mapping, Optional, Tuple, Union

from ..core.errors import MatcherTypeError

Number = Union[int, float]
ListElement = Union[str, int, float]
PredicateFunc = Callable[[str], Union[bool, Awaitable[bool]]]


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a sensible env matcher
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _format_number(value: Number) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


_DECIMAL_NUMERAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def loose_equals(observed: str, expected: ListElement) -> bool:
    """Compare an observed env string against a string or numeric literal."""
    if isinstance(expected, str):
        return observed == expected
    if not _is_number(expected):
        return False
    text = observed.strip()
    if not _DECIMAL_NUMERAL.fullmatch(text):
        return False
    return float(text) == float(expected)


@dataclass(frozen=True)
class LiteralMatcher:
    """Exact string equality."""
    value: str
    kind: str = field(default="literal", init=False)

    def matches(self, observed: str) -> bool:
        return observed == self.value

    def describe(self) -> str:
        return self.value


@dataclass(frozen=True)
class NumericMatcher:
    """Numeric equality against the observed value parsed as a number."""
    value: Number
    kind: str = field(default="numeric", init=False)

    def matches(self, observed: str) -> bool:
        return loose_equals(observed, self.value)

    def describe(self) -> str:
        return _format_number(self.value)


@dataclass(frozen=True)
class ListMatcher:
    """Membership test; each element is compared with ``loose_equals``."""
    values: Tuple[ListElement, ...]
    kind: str = field(default="list", init=False)

    def __post_init__(self):
        object.__setattr__(self, "values", tuple(self.values))
        for element in self.values:
            if not (isinstance(element, str) or _is_number(element)):
                raise MatcherTypeError(
                    f"List matcher elements must be str or number, got {type(element).__name__}"
                )

    def matches(self, observed: str) -> bool:
        return any(loose_equals(observed, element) for element in self.values)

    def describe(self) -> str:
        return ",".join(
            element if isinstance(element, str) else _format_number(element)
            for element in self.values
        )


@dataclass(frozen=True)
class PatternMatcher:
    """Regular expression search against the observed value."""
    pattern: "re.Pattern[str]"
    kind: str = field(default="pattern", init=False)

    def __post_init__(self):
        if isinstance(self.pattern, str):
            object.__setattr__(self, "pattern", re.compile(self.pattern))

    def matches(self, observed: str) -> bool:
        return self.pattern.search(observed) is not None

    def describe(self) -> str:
        return self.pattern.pattern


@dataclass(frozen=True)
class PredicateMatcher:
    """
    Custom callable invoked with the observed value.

    The callable may be sync or async. ``label`` is what gets recorded in
    results and log lines instead of the callable itself.
    """
    func: PredicateFunc
    label: Optional[str] = None
    kind: str = field(default="predicate", init=False)

    def __post_init__(self):
        if not callable(self.func):
            raise MatcherTypeError("Predicate matcher requires a callable")
        if self.label is None:
            object.__setattr__(self, "label", _callable_label(self.func))

    async def evaluate(self, observed: str) -> bool:
        outcome = self.func(observed)
        if inspect.isawaitable(outcome):
            outcome = await outcome
        return bool(outcome)

    def describe(self) -> str:
        return self.label


Matcher = Union[LiteralMatcher, NumericMatcher, ListMatcher, PatternMatcher, PredicateMatcher]
MATCHER_TYPES = (LiteralMatcher, NumericMatcher, ListMatcher, PatternMatcher, PredicateMatcher)

MatcherSpec = Mapping[str, Any]


def _callable_label(func: Callable) -> str:
    name = getattr(func, "__qualname__", None) or getattr(func, "__name__", None)
    if name:
        return name
    return repr(func)


def to_matcher(value: Any) -> Matcher:
    """
    Build a matcher from a raw spec value.

    Raises:
        MatcherTypeError: value is not one of the supported kinds
    """
    if isinstance(value, MATCHER_TYPES):
        return value
    if isinstance(value, str):
        return LiteralMatcher(value)
    if _is_number(value):
        return NumericMatcher(value)
    if isinstance(value, (list, tuple)):
        return ListMatcher(tuple(value))
    if isinstance(value, re.Pattern):
        return PatternMatcher(value)
    if callable(value):
        return PredicateMatcher(value)
    raise MatcherTypeError(f"Unsupported matcher value of type {type(value).__name__}")


def build_matchers(spec: MatcherSpec) -> "dict[str, Matcher]":
    """Normalise a raw matcher spec, keeping its key order."""
    return {key: to_matcher(value) for key, value in spec.items()}


def describe_matcher(matcher: Union[Matcher, str, None]) -> str:
    if matcher is None:
        return "None"
    if isinstance(matcher, str):
        return matcher
    return matcher.describe()
