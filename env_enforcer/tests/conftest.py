import logging
from typing import Callable

import httpx
import pytest

from env_enforcer.config import reload_enforcer_config


@pytest.fixture(scope="session")
def anyio_backend():
    # Tests rely on asyncio.sleep for ordering checks
    return "asyncio"


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch):
    """Keep adapter defaults independent of the developer's shell."""
    for name in (
        "ENV_ENFORCER_UPDATE_STATUS",
        "ENV_ENFORCER_SHOULD_THROW",
        "ENV_ENFORCER_LOG_LEVEL",
        "ENV_ENFORCER_STRUCTURED_LOGS",
        "ENV_ENFORCER_HOST",
        "ENV_ENFORCER_PORT",
    ):
        monkeypatch.delenv(name, raising=False)
    reload_enforcer_config()
    yield
    reload_enforcer_config()


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def make_client() -> Callable[..., httpx.AsyncClient]:
    def _make(app) -> httpx.AsyncClient:
        transport = httpx.ASGITransport(app=app)
        return httpx.AsyncClient(transport=transport, base_url="http://test")
    return _make
