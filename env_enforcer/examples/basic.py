"""
Basic example: a FastAPI app whose /health route only answers cleanly when
the environment holds USERNAME=hammy.
"""

from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from ..core.environment import EnvironmentLookup
from ..middleware import EnvEnforcerMiddleware, Overrides
from ..utils.logging_config import get_logger
from ..validators.matchers import MatcherSpec

logger = get_logger("env_enforcer.examples.basic")

DEFAULT_MATCHERS = {
    "USERNAME": "hammy",
}


def create_app(
    matchers: Optional[MatcherSpec] = None,
    overrides: Optional[Overrides] = None,
    environment: Optional[EnvironmentLookup] = None,
) -> FastAPI:
    """
    Build the example app.

    Args:
        matchers: env spec to enforce (defaults to DEFAULT_MATCHERS)
        overrides: adapter hooks; info/error go to this module's logger by default
        environment: lookup override, mostly for tests
    """
    if overrides is None:
        overrides = Overrides.from_config(
            info_logger=logger.info,
            error_logger=logger.error,
        )

    app = FastAPI(title="env-enforcer example")
    app.add_middleware(
        EnvEnforcerMiddleware,
        matchers=DEFAULT_MATCHERS if matchers is None else matchers,
        overrides=overrides,
        environment=environment,
    )

    @app.get("/health", response_class=PlainTextResponse)
    async def health() -> str:
        return "ok"

    return app


def get_app() -> FastAPI:
    """Load a local .env, if present, and build the app from DEFAULT_MATCHERS."""
    load_dotenv()
    return create_app()
