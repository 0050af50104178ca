"""Core building blocks shared by the validator and the adapters."""

from .environment import EnvironmentLookup, MappingEnvironment, ProcessEnvironment
from .errors import EnvEnforcerError, EnvValidationError, MatcherTypeError

__all__ = [
    "EnvironmentLookup",
    "MappingEnvironment",
    "ProcessEnvironment",
    "EnvEnforcerError",
    "EnvValidationError",
    "MatcherTypeError",
]
