"""
Models package - OTUI widget tree.
Pydantic types exchanged between the parser, exporter and HTTP layer.
"""

from .widget import (
    Diagnostic,
    DiagnosticLevel,
    ParseResult,
    PropertyEntry,
    TemplateCapture,
    WidgetNode,
)

__all__ = [
    "Diagnostic",
    "DiagnosticLevel",
    "ParseResult",
    "PropertyEntry",
    "TemplateCapture",
    "WidgetNode",
]
