#!/usr/bin/env python3
"""
Launcher for the env-enforcer example app.

    python run_example.py           # serve the app with uvicorn
    python run_example.py --check   # request /health once and exit 0/1

Environment variables can be configured in a local .env file.
"""

import argparse
import asyncio
import sys

import httpx
import uvicorn


async def _check_health(app) -> int:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://example") as client:
        response = await client.get("/health")
    if response.status_code > 399:
        print("oops, all wrong!", file=sys.stderr)
        print(response.text, file=sys.stderr)
        return 1
    print("it worked!")
    return 0


def main() -> int:
    """Start the example server, or run a single health check."""
    parser = argparse.ArgumentParser(description="env-enforcer example app")
    parser.add_argument("--check", action="store_true", help="request /health once and exit")
    args = parser.parse_args()

    from env_enforcer.config import get_enforcer_config
    from env_enforcer.examples.basic import get_app
    from env_enforcer.utils.logging_config import setup_logging

    app = get_app()
    setup_logging()

    if args.check:
        return asyncio.run(_check_health(app))

    server_config = get_enforcer_config().get_server_config()
    uvicorn.run(
        app,
        host=server_config["host"],
        port=server_config["port"],
        log_level="info",
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
