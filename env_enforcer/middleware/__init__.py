"""Request-pipeline integration for environment validation."""

from .env_enforcement import EnvEnforcerMiddleware, EnvGate, Overrides, require_valid_env

__all__ = [
    "EnvEnforcerMiddleware",
    "EnvGate",
    "Overrides",
    "require_valid_env",
]
