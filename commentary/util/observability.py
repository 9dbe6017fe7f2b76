"""Observability configuration using Logfire.

Domain services open a span per operation and log outcomes inside it:

    with logfire.span("comment_service.save_comment", thread_id=thread_id):
        ...
        logfire.info("Comment created", comment_id=str(saved.id))
"""

import logfire
from sqlalchemy.ext.asyncio import AsyncEngine

from commentary import __version__
from commentary.config import ObservabilitySettings, Settings


def should_send_to_logfire(observability: ObservabilitySettings) -> bool:
    """Explicit send_to_logfire wins; otherwise send only when a token is set."""
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the current environment.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send_to_logfire = should_send_to_logfire(observability)

    logfire.configure(
        service_name="commentary",
        service_version=__version__,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
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
        send_to_logfire=send_to_logfire,
        has_token=observability.logfire_token is not None,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every SQL statement run through engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # Tag SQL with the active span context
    )
    logfire.info("SQLAlchemy instrumented")
