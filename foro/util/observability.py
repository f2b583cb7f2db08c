"""Logfire setup for the posts service.

Repositories and use cases log through the ``logfire`` module directly;
this module only configures it and wires the optional instrumentation.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from foro.config import ObservabilitySettings, Settings

SERVICE_NAME = "foro-backend"

# Health checks hit these constantly; tracing them is noise
UNTRACED_URLS = "/health.*"


def should_send_to_logfire(observability: ObservabilitySettings) -> bool:
    """An explicit ``send_to_logfire`` wins; otherwise send when a token is set."""
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is built.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send = should_send_to_logfire(observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        token=observability.logfire_token,
        send_to_logfire=send,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace API requests, leaving out health checks."""
    logfire.instrument_fastapi(app, excluded_urls=UNTRACED_URLS)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued through ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
