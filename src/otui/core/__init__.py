"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .logging_config import configure_logging, get_logger, LogContext
from .tracing import init_tracer, reset_tracer, trace_operation, get_trace_id
from .validate import (
    ValidationError,
    ParseRequest,
    ExportRequest,
    validate_request,
    validate_source_size,
    validate_tree_depth,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # Validation
    "ValidationError",
    "ParseRequest",
    "ExportRequest",
    "validate_request",
    "validate_source_size",
    "validate_tree_depth",
    # Tracing
    "init_tracer",
    "reset_tracer",
    "trace_operation",
    "get_trace_id",
]
