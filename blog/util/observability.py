"""Logfire setup for scripts and services that run the blog core.

Domain services and use cases call ``logfire.span`` and ``logfire.info``
directly; until ``configure_logfire`` runs those calls are no-ops apart from
a one-time warning from logfire.
"""

import logfire

from blog.config import ObservabilitySettings, Settings

SERVICE_NAME = "blog-core"
SERVICE_VERSION = "1.0.0"


def _send_to_cloud(observability: ObservabilitySettings) -> bool:
    # An explicit flag wins; otherwise send only when a token is configured
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings, console: bool = True) -> None:
    """Configure Logfire once per process.

    Set OBSERVABILITY__LOGFIRE_TOKEN to ship spans to Logfire cloud, or
    OBSERVABILITY__SEND_TO_LOGFIRE to force it on or off.

    Args:
        settings: Application settings
        console: Print spans and logs to the terminal
    """
    observability = settings.observability
    send = _send_to_cloud(observability)

    console_options: logfire.ConsoleOptions | bool = False
    if console:
        console_options = logfire.ConsoleOptions(
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        )

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send,
        token=observability.logfire_token,
        console=console_options,
    )

    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        send_to_logfire=send,
    )
