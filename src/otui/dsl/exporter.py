"""OTUI Exporter - widget tree back to OTUI source."""

from typing import Sequence

from otui.core import get_logger
from otui.models import WidgetNode
from .properties import strip_marker

logger = get_logger(__name__)

INDENT = "  "


class OTUIExportError(Exception):
    """Export was called with something that is not a widget list."""

    pass


def _indent(level: int) -> str:
    return INDENT * max(0, level)


class OTUIExporter:
    """
    Writes widget trees as OTUI text.

    Properties are emitted in two passes: first ``property_list`` (source
    order and relative indentation), then whatever is left in
    ``properties``, such as values added programmatically after parsing.
    """

    def export(self, widgets: Sequence[WidgetNode]) -> str:
        """
        Export root widgets to OTUI source.

        Args:
            widgets: Root widgets, in order

        Returns:
            OTUI source text (no trailing blank lines)

        Raises:
            OTUIExportError: If ``widgets`` is None
        """
        if widgets is None:
            raise OTUIExportError("widgets must be a sequence of WidgetNode, got None")

        out: list[str] = []
        for widget in widgets:
            self._write_widget(widget, out, 0)
            out.append("")  # blank line between root widgets

        while out and not out[-1].strip():
            out.pop()

        logger.debug("export_complete", widgets=len(widgets), lines=len(out))
        return "\n".join(out)

    def _write_widget(self, node: WidgetNode, out: list[str], depth: int) -> None:
        out.append(f"{_indent(depth)}{node.original_type_name or node.type}")

        printed: set[str] = set()
        for entry in node.property_list:
            out.append(f"{_indent(depth + 1 + entry.indent)}{entry.key}: {entry.value}")
            printed.add(strip_marker(entry.key))

        for key, value in node.properties.items():
            if key in printed:
                continue
            # width/height already written as "size"
            if key in ("width", "height") and node.size_defined:
                continue
            out.append(f"{_indent(depth + 1)}{node.original_keys.get(key, key)}: {value}")

        for child in node.children:
            self._write_widget(child, out, depth + 1)


def export_otui(widgets: Sequence[WidgetNode]) -> str:
    """
    Convenience function to export a widget tree

    Args:
        widgets: Root widgets

    Returns:
        OTUI source text
    """
    return OTUIExporter().export(widgets)
