"""OTUI Handler."""

import time
from typing import Any

from otui.core import (
    Settings,
    get_logger,
    get_trace_id,
    LogContext,
    ParseRequest,
    ExportRequest,
    ValidationError,
    validate_request,
    validate_source_size,
    validate_tree_depth,
)
from otui.dsl import OTUIParser, OTUIExporter
from otui.models import ParseResult
from otui.monitoring import metrics_collector, trace_operation


logger = get_logger(__name__)


class OTUIHandler:
    """Handles parse and export requests."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.exporter = OTUIExporter()

    def parse(self, payload: Any) -> ParseResult:
        """Parse ``{code, widgetDefinitions?}`` into a ParseResult."""
        start_time = time.time()

        try:
            request: ParseRequest = validate_request(ParseRequest, payload)
            validate_source_size(request.code, self.settings.max_source_length)
            logger.info("otui_parse", length=len(request.code))

            with trace_operation("otui_parse", length=len(request.code)) as span:
                with LogContext(operation="otui_parse", trace_id=get_trace_id()):
                    parser = OTUIParser(request.widget_definitions)
                    result = parser.parse(request.code)
                if span is not None:
                    span.set_tag("widgets", str(len(result.widgets)))
                    span.set_tag("diagnostics", str(len(result.diagnostics)))

            duration = time.time() - start_time
            metrics_collector.record_parse_request("success", duration)
            metrics_collector.record_parse_result(
                len(result.widgets), [d.level for d in result.diagnostics]
            )
            logger.info(
                "parse_complete",
                widgets=len(result.widgets),
                diagnostics=len(result.diagnostics),
                duration_ms=duration * 1000,
            )
            return result

        except ValidationError as e:
            duration = time.time() - start_time
            metrics_collector.record_parse_request("validation_error", duration)
            logger.warning("parse_rejected", error=str(e))
            raise
        except Exception as e:
            duration = time.time() - start_time
            metrics_collector.record_parse_request("error", duration)
            metrics_collector.record_error(type(e).__name__, "otui_handler")
            logger.error("parse_failed", error=str(e))
            raise

    def export(self, payload: Any) -> str:
        """Export ``{widgets}`` back to OTUI source."""
        start_time = time.time()

        try:
            request: ExportRequest = validate_request(ExportRequest, payload)
            validate_tree_depth(request.widgets, self.settings.max_tree_depth)
            logger.info("otui_export", widgets=len(request.widgets))

            with trace_operation("otui_export", widgets=len(request.widgets)) as span:
                with LogContext(operation="otui_export", trace_id=get_trace_id()):
                    code = self.exporter.export(request.widgets)
                if span is not None:
                    span.set_tag("lines", str(code.count("\n") + 1 if code else 0))

            duration = time.time() - start_time
            metrics_collector.record_export_request("success", duration)
            logger.info("export_complete", length=len(code), duration_ms=duration * 1000)
            return code

        except ValidationError as e:
            duration = time.time() - start_time
            metrics_collector.record_export_request("validation_error", duration)
            logger.warning("export_rejected", error=str(e))
            raise
        except Exception as e:
            duration = time.time() - start_time
            metrics_collector.record_export_request("error", duration)
            metrics_collector.record_error(type(e).__name__, "otui_handler")
            logger.error("export_failed", error=str(e))
            raise
