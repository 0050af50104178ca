"""
Environment enforcement middleware for request pipelines.

Runs the environment validator before a request is handled and turns a
failing environment into log lines, a 500 status and/or a pipeline error,
each opt-in through ``Overrides``.
"""

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

from fastapi import HTTPException, Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import PlainTextResponse, Response

from ..config import EnforcerConfig, get_enforcer_config
from ..core.environment import EnvironmentLookup
from ..core.errors import EnvValidationError
from ..validators.env_validator import EnvValidator, format_failures, summarize
from ..validators.matchers import MatcherSpec, build_matchers

logger = logging.getLogger("env_enforcer.middleware")

START_MESSAGE = "Validating env via env-enforcer middleware"
VALID_MESSAGE = "Env is valid, proceeding"

LogCallback = Callable[[str], None]


@dataclass
class Overrides:
    """Caller-supplied hooks and switches for the gate."""
    info_logger: Optional[LogCallback] = None
    error_logger: Optional[LogCallback] = None
    should_update_status: bool = True
    should_throw: bool = False

    @classmethod
    def from_config(cls, config: Optional[EnforcerConfig] = None, **kwargs) -> "Overrides":
        """Build overrides whose switches default to the configured values."""
        config = config if config is not None else get_enforcer_config()
        kwargs.setdefault("should_update_status", config.update_status)
        kwargs.setdefault("should_throw", config.should_throw)
        return cls(**kwargs)


async def _maybe_await(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


class EnvGate:
    """
    Pipeline-agnostic gate around the environment validator.

    ``await gate(request, response, next)`` validates the environment, then
    calls ``next()`` exactly once: ``next(error)`` when the environment is
    invalid and ``should_throw`` is set, plain ``next()`` otherwise.
    ``response`` only needs a writable ``status_code``.
    """

    def __init__(
        self,
        matchers: MatcherSpec,
        overrides: Optional[Overrides] = None,
        environment: Optional[EnvironmentLookup] = None,
    ):
        self.matchers = build_matchers(matchers)
        self.overrides = overrides if overrides is not None else Overrides()
        self.validator = EnvValidator(environment)
        if self.overrides.info_logger:
            self.overrides.info_logger(START_MESSAGE)

    async def __call__(self, request: Any, response: Any, call_next: Callable[..., Any]) -> Any:
        results = await self.validator.verify(self.matchers)

        if all(result.is_valid for result in results):
            if self.overrides.info_logger:
                self.overrides.info_logger(VALID_MESSAGE)
            return await _maybe_await(call_next())

        messages = format_failures(results)
        joined = "\n\n".join(messages)
        logger.warning(
            f"Environment validation failed for {len(messages)} check(s)",
            extra={"validation_summary": summarize(results)},
        )

        if self.overrides.should_update_status:
            response.status_code = 500
        if self.overrides.error_logger:
            self.overrides.error_logger(joined)
        if self.overrides.should_throw:
            return await _maybe_await(call_next(EnvValidationError(messages, results)))
        return await _maybe_await(call_next())


class _StatusSlot:
    """Holds a status code until the downstream response exists."""

    def __init__(self):
        self.status_code: Optional[int] = None


class EnvEnforcerMiddleware(BaseHTTPMiddleware):
    """Gates every request on a valid environment."""

    def __init__(
        self,
        app,
        matchers: MatcherSpec,
        overrides: Optional[Overrides] = None,
        environment: Optional[EnvironmentLookup] = None,
        exclude_paths: Iterable[str] = (),
    ):
        """
        Initialize environment enforcement middleware.

        Args:
            app: ASGI application
            matchers: env key -> matcher spec checked on every request
            overrides: logging hooks and failure switches
            environment: lookup to read values from (process env by default)
            exclude_paths: request paths that bypass the gate
        """
        super().__init__(app)
        self.gate = EnvGate(matchers, overrides, environment)
        self.exclude_paths = frozenset(exclude_paths)

    async def dispatch(self, request: Request, call_next) -> Response:
        """Process request behind the environment gate."""
        if request.url.path in self.exclude_paths:
            return await call_next(request)

        status = _StatusSlot()
        outcome = {}

        async def _continue(error: Optional[Exception] = None) -> None:
            if error is not None:
                outcome["error"] = error
                return
            outcome["response"] = await call_next(request)

        await self.gate(request, status, _continue)

        if "error" in outcome:
            return PlainTextResponse(str(outcome["error"]), status_code=500)

        response = outcome["response"]
        if status.status_code is not None:
            response.status_code = status.status_code
        return response


def require_valid_env(
    matchers: MatcherSpec,
    overrides: Optional[Overrides] = None,
    environment: Optional[EnvironmentLookup] = None,
):
    """
    Build a FastAPI dependency that gates a single route.

    With ``should_throw`` a failing environment raises HTTP 500 carrying the
    failure report; otherwise the route runs and its status is set to 500
    when ``should_update_status`` is on.
    """
    gate = EnvGate(matchers, overrides, environment)

    async def dependency(request: Request, response: Response) -> None:
        def _continue(error: Optional[Exception] = None) -> None:
            if error is not None:
                raise HTTPException(status_code=500, detail=str(error))

        await gate(request, response, _continue)

    return dependency
