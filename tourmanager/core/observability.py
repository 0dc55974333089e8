"""Observability setup for structured logging, client metrics and tracing."""

import logging
from typing import Optional

import structlog
from opentelemetry import trace
from prometheus_client import CollectorRegistry, Counter, Histogram, generate_latest

from .config import Settings, settings as default_settings

# Prometheus metrics
REGISTRY = CollectorRegistry()

REQUEST_COUNT = Counter(
    'tourmanager_client_requests_total',
    'Total requests sent to the Tour Manager API',
    ['method', 'resource', 'status_code'],
    registry=REGISTRY
)

REQUEST_DURATION = Histogram(
    'tourmanager_client_request_duration_seconds',
    'Tour Manager API request duration in seconds',
    ['method', 'resource'],
    registry=REGISTRY
)

tracer = trace.get_tracer("tourmanager")


def setup_structured_logging(config: Optional[Settings] = None):
    """Configure structured logging with structlog."""
    config = config or default_settings

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
            structlog.dev.ConsoleRenderer() if config.debug else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, config.log_level)
        ),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def resource_label(path: str) -> str:
    """
    Reduce a request path to a low-cardinality metric label.

    The first path segment names the collection (``/holidays/abc`` and
    ``/holiday/abc/categories`` become ``holidays`` and ``holiday``).
    """
    segments = [s for s in path.split("/") if s]
    return segments[0] if segments else "/"


class MetricsCollector:
    """Collector for client request metrics."""

    @staticmethod
    def record_request(method: str, path: str, status_code: int, duration: float):
        """Record a completed request."""
        resource = resource_label(path)
        REQUEST_COUNT.labels(method=method, resource=resource, status_code=str(status_code)).inc()
        REQUEST_DURATION.labels(method=method, resource=resource).observe(duration)


def get_prometheus_metrics():
    """Render the client metrics in the Prometheus text format."""
    return generate_latest(REGISTRY)


# Global metrics collector instance
metrics_collector = MetricsCollector()


class StructuredLogger:
    """Structured logger with request context."""

    def __init__(self, name_or_logger):
        if isinstance(name_or_logger, str):
            self.logger = structlog.get_logger(name_or_logger)
        else:
            self.logger = name_or_logger

    def info(self, message: str, **kwargs):
        """Log info message with context."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message with context."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message with context."""
        self.logger.error(message, **kwargs)

    def debug(self, message: str, **kwargs):
        """Log debug message with context."""
        self.logger.debug(message, **kwargs)

    def with_context(self, **kwargs):
        """Add context to logger."""
        return StructuredLogger(self.logger.bind(**kwargs))


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger instance."""
    return StructuredLogger(name)
