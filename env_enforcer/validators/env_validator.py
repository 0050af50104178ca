"""
Environment Validation

Checks environment variables against a matcher spec and reports one
verdict per key. Expected failures (missing key, value rejected, empty
spec) come back as ValidationResult values; only a predicate that raises
escapes as an exception.
"""

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence, Union

from ..core.environment import EnvironmentLookup, ProcessEnvironment
from .matchers import (
    Matcher,
    MatcherSpec,
    ListMatcher,
    PatternMatcher,
    PredicateMatcher,
    build_matchers,
    describe_matcher,
)

logger = logging.getLogger("env_enforcer.validator")

EMPTY_SPEC_MESSAGE = "No validation passed to helper."
MISSING_KEY_MESSAGE = "The key or validator did not exist."
PATTERN_MESSAGE = "The key failed a RegExp match."
PREDICATE_MESSAGE = "The key failed a custom matcher function."
LIST_MESSAGE = "The key was not included in the array you passed to match against."
LITERAL_MESSAGE = "The value failed a direct check"

SENSITIVE_KEYWORDS = ("password", "secret", "key", "token")


@dataclass(frozen=True)
class ValidationResult:
    """Verdict for one key of a validation run."""
    is_valid: bool
    message: str
    matcher: Union[Matcher, str, None] = None
    observed_value: Optional[str] = None
    key: Optional[str] = None

    def describe_failure(self) -> str:
        """Format the result the way failure reports list it."""
        return (
            f"{self.message}\n validator: {describe_matcher(self.matcher)}"
            f"\n value: {self.observed_value}"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for JSON logging; values of sensitive keys are masked."""
        return {
            "key": self.key,
            "is_valid": self.is_valid,
            "message": self.message,
            "matcher": describe_matcher(self.matcher) if self.matcher is not None else None,
            "observed_value": self._mask_sensitive(self.observed_value),
        }

    def _mask_sensitive(self, value: Optional[str]) -> Optional[str]:
        if value is None or self.key is None:
            return value
        key_lower = self.key.lower()
        if any(keyword in key_lower for keyword in SENSITIVE_KEYWORDS):
            return "***MASKED***"
        return value


class EnvValidator:
    """
    Validates environment variables against a matcher spec.

    The environment is read through ``environment.lookup`` on every call,
    never cached, so changes between calls are always observed.
    """

    def __init__(self, environment: Optional[EnvironmentLookup] = None):
        self.environment = environment if environment is not None else ProcessEnvironment()

    async def verify(self, matcher_spec: MatcherSpec) -> List[ValidationResult]:
        """
        Run every check concurrently and return results in spec key order.

        Args:
            matcher_spec: mapping of env key -> matcher (or raw matcher value)

        Returns:
            One ValidationResult per key, or the single empty-spec sentinel

        Raises:
            MatcherTypeError: a spec value is not a supported matcher
            Exception: whatever a predicate matcher raised
        """
        if len(matcher_spec) == 0:
            logger.debug("No matchers supplied; returning sentinel result")
            return [ValidationResult(is_valid=False, message=EMPTY_SPEC_MESSAGE)]

        matchers = build_matchers(matcher_spec)
        # Every check settles before a predicate fault is re-raised
        outcomes = await asyncio.gather(
            *(self._check_key(key, matcher) for key, matcher in matchers.items()),
            return_exceptions=True,
        )
        for outcome in outcomes:
            if isinstance(outcome, BaseException):
                logger.debug(f"Predicate matcher raised {type(outcome).__name__}")
                raise outcome

        results = list(outcomes)
        failed = sum(1 for result in results if not result.is_valid)
        logger.debug(f"Environment validation finished: {len(results) - failed}/{len(results)} passed")
        return results

    async def _check_key(self, key: str, matcher: Matcher) -> ValidationResult:
        observed = self.environment.lookup(key)
        if observed is None:
            return ValidationResult(is_valid=False, message=MISSING_KEY_MESSAGE, key=key)

        if isinstance(matcher, PatternMatcher):
            is_valid, message, recorded = matcher.matches(observed), PATTERN_MESSAGE, matcher
        elif isinstance(matcher, PredicateMatcher):
            is_valid, message, recorded = await matcher.evaluate(observed), PREDICATE_MESSAGE, matcher.label
        elif isinstance(matcher, ListMatcher):
            is_valid, message, recorded = matcher.matches(observed), LIST_MESSAGE, matcher
        else:
            is_valid, message, recorded = matcher.matches(observed), LITERAL_MESSAGE, matcher

        return ValidationResult(
            is_valid=is_valid,
            message=message,
            matcher=recorded,
            observed_value=observed,
            key=key,
        )


def format_failures(results: Sequence[ValidationResult]) -> List[str]:
    """Failure report lines for every invalid result, in order."""
    return [result.describe_failure() for result in results if not result.is_valid]


def summarize(results: Sequence[ValidationResult]) -> Dict[str, Any]:
    """Build a summary dict in the shape used for structured logs."""
    passed = len([r for r in results if r.is_valid])
    return {
        "status": "PASS" if passed == len(results) else "FAIL",
        "total_checks": len(results),
        "passed": passed,
        "failed": len(results) - passed,
        "validation_results": [r.to_dict() for r in results],
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


async def verify_env(
    matcher_spec: MatcherSpec, environment: Optional[EnvironmentLookup] = None
) -> List[ValidationResult]:
    """
    Validate the environment against ``matcher_spec``.

    Returns:
        List of ValidationResult in spec key order
    """
    return await EnvValidator(environment).verify(matcher_spec)


def verify_env_sync(
    matcher_spec: MatcherSpec, environment: Optional[EnvironmentLookup] = None
) -> List[ValidationResult]:
    """
    Synchronous wrapper for environment validation.

    Must not be called from inside a running event loop.
    """
    return asyncio.run(verify_env(matcher_spec, environment))
