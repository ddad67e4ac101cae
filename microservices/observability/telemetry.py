"""
OpenTelemetry tracing setup.

Builds a TracerProvider carrying the service resource and wires the span
exporter: OTLP/HTTP when a collector endpoint is configured, console output
in development, nothing otherwise.

Dependencies: opentelemetry-sdk, opentelemetry-exporter-otlp-proto-http
System role: Distributed tracing bootstrap
"""

import logging

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SimpleSpanProcessor,
)

from microservices.configs import Settings
from microservices.core.exceptions import ObservabilityError

logger = logging.getLogger(__name__)

# Paths never traced (probes hit them every few seconds)
UNTRACED_PATH_MARKERS = ("/health", "/ready", "/live")

_provider: TracerProvider | None = None


def build_resource(settings: Settings) -> Resource:
    """Create the resource describing this service instance."""
    return Resource.create({
        "service.name": settings.service_name,
        "service.version": settings.service_version,
        "deployment.environment": settings.environment,
    })


def setup_telemetry(settings: Settings) -> TracerProvider | None:
    """
    Initialize OpenTelemetry tracing for the service.

    Args:
        settings: Service settings

    Returns:
        TracerProvider | None: Configured provider, or None when tracing is disabled

    Raises:
        ObservabilityError: If the OTLP exporter cannot be created
    """
    global _provider

    if not settings.observability.enable_tracing:
        logger.info("OpenTelemetry tracing disabled")
        return None

    provider = TracerProvider(resource=build_resource(settings))

    endpoint = settings.observability.exporter_otlp_endpoint
    if endpoint:
        from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter

        try:
            exporter = OTLPSpanExporter(endpoint=_traces_url(endpoint))
        except Exception as e:
            raise ObservabilityError(
                "Failed to configure OTLP exporter",
                details={"endpoint": endpoint, "error": str(e)},
            ) from e
        provider.add_span_processor(BatchSpanProcessor(exporter))
        logger.info("OpenTelemetry OTLP exporter configured", extra={"endpoint": endpoint})
    elif settings.environment == "development" and settings.observability.console_exporter:
        provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter()))
        logger.info("OpenTelemetry console exporter configured")

    if _provider is None:
        trace.set_tracer_provider(provider)
    _provider = provider

    logger.info("OpenTelemetry initialized successfully")
    return provider


def shutdown_telemetry() -> None:
    """Flush and shut down the active tracer provider."""
    global _provider

    if _provider is None:
        return
    try:
        _provider.shutdown()
        logger.info("OpenTelemetry terminated")
    except Exception as e:
        logger.warning("Error terminating OpenTelemetry", extra={"error": str(e)})


def get_tracer(name: str) -> trace.Tracer:
    """
    Get a tracer from the service provider.

    Falls back to the global (no-op until configured) provider.

    Args:
        name: Instrumentation scope name (usually __name__)

    Returns:
        trace.Tracer: Tracer instance
    """
    if _provider is not None:
        return _provider.get_tracer(name)
    return trace.get_tracer(name)


def is_traced_path(path: str) -> bool:
    """Return False for probe endpoints excluded from tracing."""
    return not any(marker in path for marker in UNTRACED_PATH_MARKERS)


def _traces_url(endpoint: str) -> str:
    endpoint = endpoint.rstrip("/")
    if endpoint.endswith("/v1/traces"):
        return endpoint
    return f"{endpoint}/v1/traces"
