"""Command-line entrypoint that serves the marketplace API with uvicorn."""

from __future__ import annotations

import uvicorn

from unity_mall.api.api_config import get_api_config
from unity_mall.common.logging import configure_logging, resolve_log_level


def run() -> None:
    """Serve the API on the configured host and port until interrupted.

    uvicorn turns SIGINT/SIGTERM into the application's shutdown hook, which closes
    the database connections before the process exits.
    """

    configure_logging()
    config = get_api_config()
    uvicorn.run(
        "unity_mall.api.app:app",
        host=config.host,
        port=config.port,
        log_level=resolve_log_level(config.log_level),
    )


if __name__ == "__main__":
    run()
