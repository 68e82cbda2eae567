"""Logfire setup.

Services emit structured events and spans directly::

    logfire.info("Problem registered", problem_id=str(problem.id))

    with logfire.span("tag_registry.resolve", names=names):
        ...
"""

import logfire
from sqlalchemy.ext.asyncio import AsyncEngine

from algonote.config import Settings
from algonote.util.error import ConfigurationError


def _should_send(settings: Settings) -> bool:
    obs = settings.observability
    if obs.send_to_logfire is not None:
        return obs.send_to_logfire
    return bool(obs.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for this process.

    Telemetry leaves the machine only when a token is configured, unless
    ``OBSERVABILITY__SEND_TO_LOGFIRE`` says otherwise. Without sending,
    spans still render on the console.

    Raises:
        ConfigurationError: Sending was forced on but no token is set.
    """
    obs = settings.observability
    send = _should_send(settings)
    if send and not obs.logfire_token:
        raise ConfigurationError(
            "OBSERVABILITY__SEND_TO_LOGFIRE is set but no Logfire token is configured"
        )

    options = {}
    if obs.logfire_token:
        options["token"] = obs.logfire_token

    logfire.configure(
        service_name="algonote",
        service_version="0.1.0",
        environment=settings.environment,
        send_to_logfire=send,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
        **options,
    )
    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
        tag_conflict_retries=settings.tags.conflict_retries,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement, including the SAVEPOINTs around tag inserts."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
