"""Widget type-name resolution and anchor edge names."""

import re
from typing import Any, Mapping

# Prefix carried by every canonical widget type
UI_PREFIX = "UI"

# Historical OTUI names whose canonical type is not simply "UI" + name
WIDGET_ALIASES: dict[str, str] = {
    "VerticalScrollBar": "UIScrollBar",
    "HorizontalScrollBar": "UIScrollBar",
    "ScrollBar": "UIScrollBar",
    "MainWindow": "UIWindow",
    "GameLabel": "UILabel",
    "FlatPanel": "UIPanel",
    "ButtonBox": "UIButtonBox",
    "TextList": "UITextList",
    "ComboBox": "UIComboBox",
    "HorizontalSeparator": "UIHorizontalSeparator",
    "VerticalSeparator": "UIVerticalSeparator",
    "ScrollablePanel": "UIScrollArea",
}

ANCHOR_EDGES: dict[str, str] = {
    "left": "left",
    "right": "right",
    "top": "top",
    "bottom": "bottom",
    "horizontalcenter": "horizontalCenter",
    "horizontal-center": "horizontalCenter",
    "verticalcenter": "verticalCenter",
    "vertical-center": "verticalCenter",
}

_WHITESPACE = re.compile(r"\s+")


def resolve_widget_type(name: str, widget_definitions: Mapping[str, Any] | None = None) -> str:
    """
    Map an OTUI type name to its canonical widget type.

    Best effort only: unknown names still resolve (by gaining the ``UI``
    prefix), they are never rejected.

    Args:
        name: Type name as written in the source
        widget_definitions: Optional catalog of known type names

    Returns:
        Canonical type name
    """
    if name in WIDGET_ALIASES:
        return WIDGET_ALIASES[name]

    catalog = widget_definitions or {}
    if name in catalog:
        return name

    if name.startswith(UI_PREFIX):
        return name
    return f"{UI_PREFIX}{name}"


def translate_anchor_edge(edge: str) -> str | None:
    """Canonical edge name, or None when the edge is unknown."""
    normalized = _WHITESPACE.sub("", edge.lower())
    return ANCHOR_EDGES.get(normalized)
