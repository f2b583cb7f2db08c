#!/usr/bin/env python3
"""Serve the posts API with uvicorn."""

import sys

import logfire
import uvicorn

from foro.config import Settings
from foro.util.observability import configure_logfire


def main() -> int:
    """Start the API; startup failures are logged to Logfire before exiting."""
    settings = Settings()

    # Logfire must be up before the app factory runs
    configure_logfire(settings)

    logfire.info(
        "Starting posts API",
        host=settings.api.host,
        port=settings.api.port,
        environment=settings.environment,
        git_sha=settings.git_sha,
    )

    try:
        uvicorn.run(
            "foro.interface.api.app:create_app",
            factory=True,
            host=settings.api.host,
            port=settings.api.port,
            reload=settings.environment == "development",
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Posts API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
