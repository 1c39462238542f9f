"""OpenTelemetry tracing for the cache.

Cache and repository spans are produced through the global tracer provider;
this module installs one (console or OTLP export) and instruments the Redis
client and stdlib logging so Redis commands and log lines carry the
cache span context.
"""

import logging
import threading

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from opentelemetry.instrumentation.redis import RedisInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import ParentBased, TraceIdRatioBased

from assignment_cache.core.config import Settings
from assignment_cache.domain.exceptions import ConfigurationException

logger = logging.getLogger(__name__)


def _build_span_exporter(exporter_type: str, otlp_endpoint: str | None) -> SpanExporter | None:
    """Return the exporter for exporter_type; None means spans are not exported."""
    if exporter_type == "none":
        return None
    if exporter_type == "console":
        return ConsoleSpanExporter()
    if exporter_type == "otlp":
        if not otlp_endpoint:
            raise ConfigurationException(
                "OTLP exporter requires an endpoint", option="telemetry_otlp_endpoint"
            )
        return OTLPSpanExporter(
            endpoint=otlp_endpoint, insecure=otlp_endpoint.startswith("http://")
        )
    raise ConfigurationException(
        f"Unknown telemetry exporter '{exporter_type}'", option="telemetry_exporter"
    )


class TelemetryConfig:
    """Owns the tracer provider used for cache spans.

    Exporters: console, otlp, or none (spans recorded but not exported).
    """

    def __init__(
        self,
        service_name: str,
        service_version: str,
        enabled: bool = True,
        environment: str = "development",
    ) -> None:
        self.service_name = service_name
        self.service_version = service_version
        self.enabled = enabled
        self.environment = environment
        self.tracer_provider: TracerProvider | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "TelemetryConfig":
        return cls(
            service_name=settings.app_name,
            service_version=settings.app_version,
            enabled=settings.telemetry_enabled,
            environment=settings.telemetry_environment,
        )

    def setup_telemetry(
        self,
        exporter_type: str = "console",
        otlp_endpoint: str | None = None,
        sample_rate: float = 1.0,
    ) -> TracerProvider | None:
        """Create the tracer provider and install it globally.

        Args:
            exporter_type: "console", "otlp", or "none".
            otlp_endpoint: OTLP gRPC endpoint (e.g. http://localhost:4317).
            sample_rate: Ratio of new traces sampled, 0.0-1.0.

        Returns:
            The installed provider, or None when telemetry is disabled.

        Raises:
            ConfigurationException: If the exporter type or endpoint is invalid.
        """
        if not self.enabled:
            logger.info("Telemetry disabled")
            return None

        exporter = _build_span_exporter(exporter_type, otlp_endpoint)
        resource = Resource(
            attributes={
                SERVICE_NAME: self.service_name,
                SERVICE_VERSION: self.service_version,
                "deployment.environment": self.environment,
            }
        )
        provider = TracerProvider(
            resource=resource, sampler=ParentBased(TraceIdRatioBased(sample_rate))
        )
        if exporter is not None:
            provider.add_span_processor(BatchSpanProcessor(exporter))
        trace.set_tracer_provider(provider)
        self.tracer_provider = provider
        logger.info(
            "OpenTelemetry initialized: service=%s, exporter=%s, sample_rate=%s",
            self.service_name,
            exporter_type,
            sample_rate,
        )
        return provider

    def instrument(self) -> None:
        """Trace Redis commands and inject trace ids into log records."""
        if self.tracer_provider is None:
            return
        try:
            RedisInstrumentor().instrument(tracer_provider=self.tracer_provider)
            LoggingInstrumentor().instrument(
                tracer_provider=self.tracer_provider, set_logging_format=True
            )
        except Exception as e:
            # Instrumentation only adds detail to spans; cache calls work without it.
            logger.exception("Failed to instrument Redis/logging: %s", e)
            return
        logger.info("Redis and logging instrumentation enabled")

    def shutdown(self) -> None:
        """Flush pending spans and release the provider."""
        if self.tracer_provider is None:
            return
        self.tracer_provider.shutdown()
        self.tracer_provider = None
        logger.info("Telemetry shutdown complete")


_telemetry: TelemetryConfig | None = None
_telemetry_lock = threading.RLock()


def get_telemetry() -> TelemetryConfig | None:
    """Return the process telemetry instance (set by cache_lifespan)."""
    with _telemetry_lock:
        return _telemetry


def set_telemetry(telemetry: TelemetryConfig | None) -> None:
    """Set (or clear, with None) the process telemetry instance."""
    global _telemetry
    with _telemetry_lock:
        _telemetry = telemetry


def get_tracer(name: str) -> trace.Tracer:
    """Return a tracer from the current global provider (no-op until one is installed)."""
    return trace.get_tracer(name)
