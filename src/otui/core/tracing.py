"""
Request Tracing
Lightweight spans for parse/export operations, reported through structlog.
"""

import contextvars
import time
import uuid
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Iterator

import structlog

logger: structlog.BoundLogger | None = None


def _get_logger() -> structlog.BoundLogger:
    """Get or create logger instance."""
    global logger
    if logger is None:
        logger = structlog.get_logger(__name__)
    return logger


# Context variables for trace propagation
_trace_id: contextvars.ContextVar[str] = contextvars.ContextVar("trace_id", default="")
_span_id: contextvars.ContextVar[str] = contextvars.ContextVar("span_id", default="")


@dataclass
class Span:
    """Represents a single traced operation."""

    trace_id: str
    span_id: str
    parent_id: str
    name: str
    service: str
    start_time: float
    end_time: float = 0.0
    duration: float = 0.0
    tags: dict[str, str] = field(default_factory=dict)
    error: Exception | None = None
    status_code: int = 200

    def finish(self) -> None:
        """Mark span as complete."""
        self.end_time = time.time()
        self.duration = self.end_time - self.start_time

    def set_tag(self, key: str, value: str) -> None:
        """Add a tag to the span."""
        self.tags[key] = value

    def set_error(self, error: Exception) -> None:
        """Record an error in the span."""
        self.error = error
        self.status_code = 500


class Tracer:
    """Creates spans and reports them when they finish."""

    def __init__(self, service: str) -> None:
        self.service = service

    def start_span(self, name: str, **tags: str) -> Span:
        """Create a new span."""
        trace_id = _trace_id.get() or str(uuid.uuid4())
        parent_id = _span_id.get()
        span_id = str(uuid.uuid4())

        span = Span(
            trace_id=trace_id,
            span_id=span_id,
            parent_id=parent_id,
            name=name,
            service=self.service,
            start_time=time.time(),
            tags=tags,
        )

        _trace_id.set(trace_id)
        _span_id.set(span_id)

        return span

    def submit(self, span: Span) -> None:
        """Process completed span."""
        log = _get_logger()
        fields = {
            "trace_id": span.trace_id,
            "span_id": span.span_id,
            "operation": span.name,
            "duration_ms": span.duration * 1000,
            "service": span.service,
            "status_code": span.status_code,
            **span.tags,
        }

        if span.parent_id:
            fields["parent_id"] = span.parent_id

        if span.error:
            log.error("span_completed_with_error", error=str(span.error), **fields)
        elif span.duration > 1.0:
            log.warning("span_completed_slow", **fields)
        else:
            log.info("span_completed", **fields)

        # Restore the parent span for siblings
        _span_id.set(span.parent_id)


# Global tracer instance
_tracer: Tracer | None = None


def init_tracer(service: str) -> Tracer:
    """Initialize global tracer."""
    global _tracer
    _tracer = Tracer(service)
    return _tracer


def reset_tracer() -> None:
    """Drop the global tracer (tracing becomes a no-op)."""
    global _tracer
    _tracer = None


@contextmanager
def trace_operation(operation: str, **kwargs: Any) -> Iterator[Span | None]:
    """Context manager for tracing operations."""
    if _tracer is None:
        yield None
        return

    span = _tracer.start_span(operation, **{k: str(v) for k, v in kwargs.items()})
    try:
        yield span
    except Exception as e:
        span.set_error(e)
        raise
    finally:
        span.finish()
        _tracer.submit(span)


def get_trace_id() -> str:
    """Get current trace ID from context."""
    return _trace_id.get()
