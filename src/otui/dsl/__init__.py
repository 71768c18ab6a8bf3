"""
OTUI DSL
Parses OTUI source into widget trees and writes them back out.
"""

from .parser import OTUIParser, OTUIParseError, parse_otui
from .exporter import OTUIExporter, OTUIExportError, export_otui
from .properties import PropertyKind, classify_property
from .types import resolve_widget_type, translate_anchor_edge

__all__ = [
    "OTUIParser",
    "OTUIParseError",
    "parse_otui",
    "OTUIExporter",
    "OTUIExportError",
    "export_otui",
    "PropertyKind",
    "classify_property",
    "resolve_widget_type",
    "translate_anchor_edge",
]
