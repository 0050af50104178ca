"""Exception types raised by env-enforcer."""

from typing import List, Sequence


class EnvEnforcerError(Exception):
    """Base exception for env-enforcer failures."""


class MatcherTypeError(EnvEnforcerError, TypeError):
    """Raised when a matcher spec value is not a supported matcher kind."""


class EnvValidationError(EnvEnforcerError):
    """Raised (or handed to the pipeline) when the environment failed validation."""

    def __init__(self, messages: Sequence[str], results: Sequence = ()):
        self.messages: List[str] = list(messages)
        self.results = list(results)
        super().__init__("\n\n".join(self.messages))
