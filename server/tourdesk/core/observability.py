"""Observability setup for OpenTelemetry, metrics, and structured logging."""

import logging

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.resources import Resource
from prometheus_client import Counter, Histogram, Gauge, generate_latest, CollectorRegistry
import structlog

from .config import settings

SERVICE_NAME = "tourdesk-api"
SERVICE_VERSION = "1.0.0"

# Prometheus metrics
REGISTRY = CollectorRegistry()

# Request metrics
REQUEST_COUNT = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status_code'],
    registry=REGISTRY
)

REQUEST_DURATION = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint'],
    registry=REGISTRY
)

# Business metrics
RECORDS_CREATED = Counter(
    'tourdesk_records_created_total',
    'Total records created',
    ['kind'],
    registry=REGISTRY
)

RECORDS_DELETED = Counter(
    'tourdesk_records_deleted_total',
    'Total records deleted',
    ['kind'],
    registry=REGISTRY
)

EXPORTS_REQUESTED = Counter(
    'tourdesk_exports_requested_total',
    'Total export requests',
    ['kind', 'format'],
    registry=REGISTRY
)

UPLOADED_BYTES = Counter(
    'tourdesk_uploaded_bytes_total',
    'Total bytes accepted through file uploads',
    registry=REGISTRY
)

ACTIVE_TOURS = Gauge(
    'tourdesk_active_tours',
    'Number of tours with status active at the last dashboard computation',
    registry=REGISTRY
)

TOTAL_TOURISTS = Gauge(
    'tourdesk_total_tourists',
    'Number of tourists at the last dashboard computation',
    registry=REGISTRY
)


def setup_structured_logging():
    """Configure structured logging with structlog."""

    def add_trace_context(logger, method_name, event_dict):
        """Add trace context to log events."""
        span = trace.get_current_span()
        if span and span.is_recording():
            ctx = span.get_span_context()
            event_dict['trace_id'] = format(ctx.trace_id, '032x')
            event_dict['span_id'] = format(ctx.span_id, '016x')
        return event_dict

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            add_trace_context,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.ConsoleRenderer() if settings.debug else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, settings.log_level)
        ),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def setup_tracing(app_name: str = SERVICE_NAME):
    """Setup OpenTelemetry tracing."""

    resource = Resource.create({
        "service.name": app_name,
        "service.version": SERVICE_VERSION,
        "environment": settings.environment,
    })

    provider = TracerProvider(resource=resource)

    # Export spans only when a collector is configured
    if settings.otlp_endpoint:
        otlp_exporter = OTLPSpanExporter(endpoint=settings.otlp_endpoint)
        provider.add_span_processor(BatchSpanProcessor(otlp_exporter))

    trace.set_tracer_provider(provider)

    return trace.get_tracer(__name__)


def instrument_fastapi(app):
    """Instrument FastAPI with OpenTelemetry."""
    FastAPIInstrumentor.instrument_app(app)


class MetricsCollector:
    """Collector for business metrics."""

    @staticmethod
    def record_request(method: str, endpoint: str, status_code: int, duration_seconds: float):
        """Record a completed HTTP request."""
        REQUEST_COUNT.labels(method=method, endpoint=endpoint, status_code=str(status_code)).inc()
        REQUEST_DURATION.labels(method=method, endpoint=endpoint).observe(duration_seconds)

    @staticmethod
    def record_created(kind: str):
        """Record a record creation."""
        RECORDS_CREATED.labels(kind=kind).inc()

    @staticmethod
    def record_deleted(kind: str):
        """Record a record deletion."""
        RECORDS_DELETED.labels(kind=kind).inc()

    @staticmethod
    def record_export(kind: str, export_format: str):
        """Record an export request."""
        EXPORTS_REQUESTED.labels(kind=kind, format=export_format).inc()

    @staticmethod
    def record_upload(size_bytes: int):
        """Record accepted upload bytes."""
        UPLOADED_BYTES.inc(size_bytes)

    @staticmethod
    def set_dashboard_gauges(active_tours: int, total_tourists: int):
        """Publish the latest dashboard counts."""
        ACTIVE_TOURS.set(active_tours)
        TOTAL_TOURISTS.set(total_tourists)


def get_prometheus_metrics():
    """Get Prometheus metrics for the /metrics endpoint."""
    return generate_latest(REGISTRY)


# Global metrics collector instance
metrics_collector = MetricsCollector()


def get_logger(name: str):
    """Get a structured logger instance."""
    return structlog.get_logger(name)
