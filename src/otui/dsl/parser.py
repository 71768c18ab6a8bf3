"""OTUI Parser - indentation-structured source to widget tree."""

import re
from typing import Any, Mapping

from otui.core import get_logger
from otui.models import ParseResult, WidgetNode
from .diagnostics import DiagnosticsCollector
from .properties import PropertyKind, PropertyLine, apply_property, unquote
from .scope import ScopeStack, leading_whitespace, INDENT_WIDTH
from .templates import TemplateTracker
from .types import resolve_widget_type

logger = get_logger(__name__)

# "Type" or "Type < Base"
WIDGET_HEADER = re.compile(r"^([A-Z][a-zA-Z0-9_]*)(?:\s*<\s*([A-Za-z][A-Za-z0-9_]*))?$")
# "key: value"; keys may carry the !, $ and @ markers
COLON_PROPERTY = re.compile(r"^([!$@a-zA-Z0-9_.-]+):\s*(.*)$")
# "key value"
SPACE_PROPERTY = re.compile(r"^([a-zA-Z0-9_.-]+)\s+(.+)$")
# "focusable" on its own, indented line
FLAG_PROPERTY = re.compile(r"^([a-z-]+)$")

COMMENT_PREFIXES = ("//", "#")


class OTUIParseError(Exception):
    """Parsing could not run (bad arguments or a broken internal invariant)."""

    pass


class OTUIParser:
    """
    Single-pass, line-based OTUI parser.

    Lines are read once, top to bottom. Leading whitespace decides which open
    widget a line belongs to; the line itself is classified as a comment, a
    widget or template header, or a property. Malformed input never raises:
    it is reported through ``ParseResult.diagnostics`` instead.
    """

    def __init__(self, widget_definitions: Mapping[str, Any] | None = None):
        self.widget_definitions = dict(widget_definitions or {})
        self._reset()

    def _reset(self) -> None:
        self.widgets: list[WidgetNode] = []
        self.template_map: dict[str, WidgetNode] = {}
        self.scope = ScopeStack()
        self.templates = TemplateTracker()
        self.diagnostics = DiagnosticsCollector()

    def parse(self, code: str) -> ParseResult:
        """
        Parse OTUI source into a widget tree.

        Args:
            code: OTUI source text

        Returns:
            ParseResult with root widgets, template captures, the template map
            and diagnostics

        Raises:
            OTUIParseError: If ``code`` is not a string
        """
        if not isinstance(code, str):
            raise OTUIParseError(f"OTUI source must be a string, got {type(code).__name__}")

        self._reset()
        lines = code.replace("\r\n", "\n").split("\n")

        for line_no, raw_line in enumerate(lines, start=1):
            self._parse_line(line_no, raw_line)

        result = ParseResult(
            widgets=self.widgets,
            templates=self.templates.captures,
            template_map=self.template_map,
            diagnostics=self.diagnostics.to_list(),
        )
        logger.debug(
            "parse_complete",
            lines=len(lines),
            widgets=len(result.widgets),
            templates=len(result.templates),
            diagnostics=len(result.diagnostics),
        )
        return result

    def _parse_line(self, line_no: int, raw_line: str) -> None:
        stripped = raw_line.strip()
        if not stripped or stripped.startswith(COMMENT_PREFIXES):
            self.templates.capture(raw_line)
            return

        indent = leading_whitespace(raw_line)
        level = indent // INDENT_WIDTH

        for node in self.scope.unwind(level):
            if self.templates.owns(node):
                self.templates.close()

        header = WIDGET_HEADER.match(stripped)
        if header:
            name, base = header.groups()
            if base:
                self._open_template(name, base, level, raw_line)
            else:
                self._open_widget(name, level, indent, raw_line)
            return

        self.templates.capture(raw_line)

        node = self.scope.current
        if node is None:
            self.diagnostics.warning(line_no, "Property without a parent widget ignored")
            return

        self._parse_property(node, line_no, stripped, level, indent)

    def _open_template(self, name: str, base: str, level: int, raw_line: str) -> None:
        node = WidgetNode(
            type=name,
            original_type_name=name,
            parent_type=base,
            indent_level=level,
        )
        self.templates.begin(node, base, resolve_widget_type(base, self.widget_definitions))
        self.templates.capture(raw_line)
        self.template_map[name] = node
        self.scope.push(node)

    def _open_widget(self, name: str, level: int, indent: int, raw_line: str) -> None:
        # A bare widget at column zero always starts a new tree
        if self.templates.active and indent == 0:
            self.templates.close()
        self.templates.capture(raw_line)

        node = WidgetNode(
            type=resolve_widget_type(name, self.widget_definitions),
            original_type_name=name,
            indent_level=level,
        )
        parent = self.scope.current
        if parent is None:
            self.widgets.append(node)
        else:
            if parent.indent_level >= level:
                raise OTUIParseError(
                    f"Scope stack out of order: parent level {parent.indent_level}, child level {level}"
                )
            parent.children.append(node)
        self.scope.push(node)

    def _parse_property(self, node: WidgetNode, line_no: int, stripped: str, level: int, indent: int) -> None:
        relative_indent = max(0, level - node.indent_level - 1)

        match = COLON_PROPERTY.match(stripped) or SPACE_PROPERTY.match(stripped)
        if match:
            key = match.group(1)
            written = match.group(2).strip()
            prop = PropertyLine(
                key=key,
                value=unquote(written),
                written=written,
                raw=stripped,
                indent=relative_indent,
                line=line_no,
            )
            apply_property(node, prop, self.diagnostics)
            return

        flag = FLAG_PROPERTY.match(stripped)
        if flag and indent > 0:
            prop = PropertyLine(
                key=flag.group(1),
                value="true",
                written="true",
                raw=stripped,
                indent=relative_indent,
                line=line_no,
            )
            apply_property(node, prop, self.diagnostics, kind=PropertyKind.PLAIN)
            return

        self.diagnostics.warning(line_no, "Unrecognized line")


def parse_otui(code: str, widget_definitions: Mapping[str, Any] | None = None) -> ParseResult:
    """
    Convenience function to parse OTUI source

    Args:
        code: OTUI source text
        widget_definitions: Optional catalog of known widget type names

    Returns:
        ParseResult
    """
    parser = OTUIParser(widget_definitions)
    return parser.parse(code)
