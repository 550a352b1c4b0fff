"""Logfire setup and instrumentation.

Domain code logs and traces through the ``logfire`` module directly::

    logfire.info("Comment created", comment_id=str(comment.id))

    with logfire.span("comment_service.restore_comment", comment_id=...):
        ...

Nothing leaves the process unless a Logfire token is configured or
``OBSERVABILITY__SEND_TO_LOGFIRE`` is true.
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from discuss.config import ObservabilitySettings, Settings

SERVICE_NAME = "discuss-api"
SERVICE_VERSION = "0.1.0"


def _should_send(observability: ObservabilitySettings) -> bool:
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is created."""
    observability = settings.observability
    send = _should_send(observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send,
        token=observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def _connection_attributes(connection: Any, attributes: dict[str, Any]) -> dict:
    # HTTP requests and WebSocket sessions share this mapper; only the
    # former has a method.
    result = {**attributes, "path": connection.url.path}
    method = getattr(connection, "method", None)
    if method:
        result["method"] = method
    if connection.client:
        result["client_host"] = connection.client.host
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace HTTP requests and WebSocket sessions."""
    logfire.instrument_fastapi(
        app,
        capture_headers=True,
        request_attributes_mapper=_connection_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued through ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
