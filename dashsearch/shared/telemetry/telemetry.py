"""OpenTelemetry tracing setup.

Spans come from SearchService.search and DashboardSearchRepository
(see tracing.traced). When telemetry is enabled the SQLAlchemy engine and
the logging module are instrumented as well, so SQL statements appear as
child spans and log records carry trace ids.
"""

import logging

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased
from sqlalchemy.ext.asyncio import AsyncEngine

from dashsearch.core.config import Settings

logger = logging.getLogger(__name__)

EXPORTERS = ("console", "otlp", "none")


def build_exporter(exporter_type: str, otlp_endpoint: str | None = None) -> SpanExporter | None:
    """Return the span exporter for exporter_type, or None for "none".

    "otlp" without an endpoint and unknown names fall back to the console
    exporter with a warning.
    """
    if exporter_type == "none":
        return None
    if exporter_type == "otlp" and otlp_endpoint:
        return OTLPSpanExporter(
            endpoint=otlp_endpoint, insecure=otlp_endpoint.startswith("http://")
        )
    if exporter_type != "console":
        logger.warning(
            "Exporter %r unusable (endpoint=%r), using console", exporter_type, otlp_endpoint
        )
    return ConsoleSpanExporter()


class TelemetryConfig:
    """Tracer provider lifecycle for one process.

    Disabled configs do nothing: spans from traced() then go to the
    no-op global provider.
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

        Returns:
            TracerProvider, or None when telemetry is disabled or setup fails.
        """
        if not self.enabled:
            logger.info("Telemetry disabled")
            return None
        try:
            provider = TracerProvider(
                resource=Resource(
                    attributes={
                        SERVICE_NAME: self.service_name,
                        SERVICE_VERSION: self.service_version,
                        "deployment.environment": self.environment,
                    }
                ),
                sampler=TraceIdRatioBased(sample_rate),
            )
            exporter = build_exporter(exporter_type, otlp_endpoint)
            if exporter is not None:
                provider.add_span_processor(BatchSpanProcessor(exporter))
            trace.set_tracer_provider(provider)
        except Exception as e:
            logger.exception("Failed to initialize telemetry: %s", e)
            return None
        self.tracer_provider = provider
        logger.info(
            "OpenTelemetry initialized: service=%s version=%s exporter=%s",
            self.service_name,
            self.service_version,
            exporter_type,
        )
        return provider

    def instrument(self, engine: AsyncEngine | None = None) -> None:
        """Instrument the engine (when given) and logging. No-op until setup_telemetry succeeded."""
        if self.tracer_provider is None:
            return
        try:
            if engine is not None:
                SQLAlchemyInstrumentor().instrument(
                    engine=engine.sync_engine, tracer_provider=self.tracer_provider
                )
            LoggingInstrumentor().instrument(
                tracer_provider=self.tracer_provider, set_logging_format=True
            )
        except Exception as e:
            logger.exception("Failed to instrument SQLAlchemy/logging: %s", e)

    def shutdown(self) -> None:
        """Flush remaining spans and shut the provider down."""
        if self.tracer_provider is None:
            return
        self.tracer_provider.shutdown()
        self.tracer_provider = None
        logger.info("Telemetry shutdown complete")


def setup_telemetry(settings: Settings, engine: AsyncEngine | None = None) -> TelemetryConfig:
    """Build TelemetryConfig from settings, start tracing and instrument engine and logging."""
    telemetry = TelemetryConfig.from_settings(settings)
    telemetry.setup_telemetry(
        exporter_type=settings.telemetry_exporter,
        otlp_endpoint=settings.telemetry_otlp_endpoint,
        sample_rate=settings.telemetry_sample_rate,
    )
    telemetry.instrument(engine)
    return telemetry
