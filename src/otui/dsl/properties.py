"""
Property normalization.

Each property key falls into one ``PropertyKind``; every kind has a single
handler that decides what lands in ``WidgetNode.properties`` and what is
recorded in ``WidgetNode.property_list``.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from otui.models import PropertyEntry, WidgetNode
from .diagnostics import DiagnosticsCollector
from .types import translate_anchor_edge

LITERAL_MARKER = "!"
ANCHOR_PREFIX = "anchors."

SIZE_KEY = "size"
TEXT_OFFSET_KEY = "text-offset"

# Keys that only ever exist as parser side effects
SYNTHETIC_KEYS = ("width", "height", "text-offset-x", "text-offset-y")

ANCHOR_VALUE = re.compile(r"^[a-zA-Z0-9_-]+\.[a-zA-Z-]+$")


class PropertyKind(str, Enum):
    """How a property key is stored."""

    PLAIN = "plain"
    COMPOSITE_SIZE = "composite_size"
    COMPOSITE_OFFSET = "composite_offset"
    MARKED = "marked"
    ANCHOR_EDGE = "anchor_edge"


@dataclass(frozen=True)
class PropertyLine:
    """A property parsed out of one source line."""

    key: str  # as written, marker included
    value: str  # quotes stripped
    written: str  # value text as written
    raw: str  # trimmed source line
    indent: int  # relative to the owning widget's property block
    line: int


def classify_property(key: str) -> PropertyKind:
    """Pick the storage rule for a key as written."""
    if key == SIZE_KEY:
        return PropertyKind.COMPOSITE_SIZE
    if key == TEXT_OFFSET_KEY:
        return PropertyKind.COMPOSITE_OFFSET
    if key.startswith(LITERAL_MARKER):
        return PropertyKind.MARKED
    if key.startswith(ANCHOR_PREFIX):
        return PropertyKind.ANCHOR_EDGE
    return PropertyKind.PLAIN


def strip_marker(key: str) -> str:
    """Normalized key: the literal marker removed."""
    return key[1:] if key.startswith(LITERAL_MARKER) else key


def unquote(value: str) -> str:
    """Strip one pair of matching surrounding quotes."""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def _split_pair(value: str) -> tuple[str, str] | None:
    parts = value.split()
    if len(parts) < 2:
        return None
    return parts[0], parts[1]


def _record(node: WidgetNode, prop: PropertyLine) -> None:
    node.property_list.append(
        PropertyEntry(key=prop.key, value=prop.written, raw=prop.raw, indent=max(0, prop.indent))
    )


def _apply_size(node: WidgetNode, prop: PropertyLine, diagnostics: DiagnosticsCollector) -> None:
    pair = _split_pair(prop.value)
    if pair:
        node.properties["width"], node.properties["height"] = pair
        node.size_defined = True
    else:
        diagnostics.warning(prop.line, "Invalid size format")
    _record(node, prop)


def _apply_text_offset(node: WidgetNode, prop: PropertyLine, diagnostics: DiagnosticsCollector) -> None:
    pair = _split_pair(prop.value)
    if pair:
        node.properties["text-offset-x"], node.properties["text-offset-y"] = pair
    _record(node, prop)


def _apply_anchor(node: WidgetNode, prop: PropertyLine, diagnostics: DiagnosticsCollector) -> None:
    if prop.key in node.properties:
        return
    node.properties[prop.key] = prop.value

    if not ANCHOR_VALUE.match(prop.value):
        diagnostics.warning(prop.line, f'Possibly invalid anchor value "{prop.value}"')
    else:
        edge = prop.value.split(".")[1]
        if translate_anchor_edge(edge) is None:
            diagnostics.warning(prop.line, f'Unknown anchor edge "{edge}"')
    _record(node, prop)


def _apply_marked(node: WidgetNode, prop: PropertyLine, diagnostics: DiagnosticsCollector) -> None:
    key = strip_marker(prop.key)
    if key in node.properties:
        return
    node.properties[key] = prop.value
    node.original_keys[key] = prop.key
    _record(node, prop)


def _apply_plain(node: WidgetNode, prop: PropertyLine, diagnostics: DiagnosticsCollector) -> None:
    if prop.key in node.properties:
        return
    node.properties[prop.key] = prop.value
    _record(node, prop)


PropertyHandler = Callable[[WidgetNode, PropertyLine, DiagnosticsCollector], None]

HANDLERS: dict[PropertyKind, PropertyHandler] = {
    PropertyKind.PLAIN: _apply_plain,
    PropertyKind.COMPOSITE_SIZE: _apply_size,
    PropertyKind.COMPOSITE_OFFSET: _apply_text_offset,
    PropertyKind.MARKED: _apply_marked,
    PropertyKind.ANCHOR_EDGE: _apply_anchor,
}


def apply_property(
    node: WidgetNode,
    prop: PropertyLine,
    diagnostics: DiagnosticsCollector,
    kind: PropertyKind | None = None,
) -> PropertyKind:
    """Store ``prop`` on ``node`` according to its kind; returns the kind used."""
    if kind is None:
        kind = classify_property(prop.key)
    HANDLERS[kind](node, prop, diagnostics)
    return kind
