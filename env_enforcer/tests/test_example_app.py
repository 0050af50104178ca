import pytest

from env_enforcer.core.environment import MappingEnvironment
from env_enforcer.examples.basic import DEFAULT_MATCHERS, create_app
from env_enforcer.middleware import Overrides


@pytest.mark.anyio
async def test_health_ok_when_username_matches(make_client):
    app = create_app(environment=MappingEnvironment({"USERNAME": "hammy"}))

    async with make_client(app) as client:
        resp = await client.get("/health")

    assert resp.status_code == 200
    assert resp.text == "ok"


@pytest.mark.anyio
async def test_health_fails_when_username_differs(make_client):
    app = create_app(environment=MappingEnvironment({"USERNAME": "someone"}))

    async with make_client(app) as client:
        resp = await client.get("/health")

    assert resp.status_code == 500


@pytest.mark.anyio
async def test_health_reports_failure_text_when_throwing(make_client):
    app = create_app(
        environment=MappingEnvironment({}),
        overrides=Overrides(should_throw=True),
    )

    async with make_client(app) as client:
        resp = await client.get("/health")

    assert resp.status_code == 500
    assert resp.text.startswith("The key or validator did not exist.")


@pytest.mark.anyio
async def test_check_health_exit_codes():
    from run_example import _check_health

    good = create_app(environment=MappingEnvironment({"USERNAME": "hammy"}))
    bad = create_app(environment=MappingEnvironment({}))

    assert await _check_health(good) == 0
    assert await _check_health(bad) == 1


def test_default_matchers():
    assert DEFAULT_MATCHERS == {"USERNAME": "hammy"}


def test_import_has_no_side_effects():
    from env_enforcer.examples import basic

    assert not hasattr(basic, "app")


def test_get_app_loads_dotenv_before_building(monkeypatch):
    from env_enforcer.examples import basic

    calls = []
    monkeypatch.setattr(basic, "load_dotenv", lambda: calls.append("dotenv"))
    monkeypatch.setattr(basic, "create_app", lambda: calls.append("app") or "built")

    assert basic.get_app() == "built"
    assert calls == ["dotenv", "app"]
