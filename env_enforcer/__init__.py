# env-enforcer package
"""
env-enforcer - declarative validation of process environment variables.

This package provides:
- Matcher variants for literal, numeric, list, regex and predicate checks
- An async validator producing one verdict per checked key
- Starlette/FastAPI integration that gates requests on a valid environment
"""

from .validators import (
    EnvValidator,
    ValidationResult,
    verify_env,
    verify_env_sync,
    to_matcher,
)
from .middleware import EnvEnforcerMiddleware, EnvGate, Overrides, require_valid_env

__version__ = "1.0.0"

__all__ = [
    "EnvValidator",
    "ValidationResult",
    "verify_env",
    "verify_env_sync",
    "to_matcher",
    "EnvEnforcerMiddleware",
    "EnvGate",
    "Overrides",
    "require_valid_env",
]
