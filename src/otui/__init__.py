"""
OTUI toolkit.

Parse OTUI source into widget trees and export trees back to source::

    from otui import parse_otui, export_otui

    result = parse_otui(code)
    code = export_otui(result.widgets)
"""

__version__ = "0.1.0"

from .dsl import (
    OTUIParser,
    OTUIParseError,
    OTUIExporter,
    OTUIExportError,
    parse_otui,
    export_otui,
)
from .models import (
    Diagnostic,
    DiagnosticLevel,
    ParseResult,
    PropertyEntry,
    TemplateCapture,
    WidgetNode,
)

# Short names used by editor integrations
parse = parse_otui
serialize = export_otui

__all__ = [
    "__version__",
    "OTUIParser",
    "OTUIParseError",
    "OTUIExporter",
    "OTUIExportError",
    "parse_otui",
    "export_otui",
    "parse",
    "serialize",
    "Diagnostic",
    "DiagnosticLevel",
    "ParseResult",
    "PropertyEntry",
    "TemplateCapture",
    "WidgetNode",
]
