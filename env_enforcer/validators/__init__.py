"""
Validators Package

Matcher variants and the environment validator built on them.
"""

from .env_validator import (
    EnvValidator,
    ValidationResult,
    format_failures,
    summarize,
    verify_env,
    verify_env_sync,
)
from .matchers import (
    ListMatcher,
    LiteralMatcher,
    Matcher,
    NumericMatcher,
    PatternMatcher,
    PredicateMatcher,
    build_matchers,
    loose_equals,
    to_matcher,
)

__all__ = [
    "EnvValidator",
    "ValidationResult",
    "format_failures",
    "summarize",
    "verify_env",
    "verify_env_sync",
    "ListMatcher",
    "LiteralMatcher",
    "Matcher",
    "NumericMatcher",
    "PatternMatcher",
    "PredicateMatcher",
    "build_matchers",
    "loose_equals",
    "to_matcher",
]
