"""Widget tree models shared by the parser, the exporter and the HTTP layer."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class OTUIModel(BaseModel):
    """Base model: snake_case attributes, camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )

    def to_json_dict(self) -> dict[str, Any]:
        """Export with the camelCase field names consumers expect."""
        return self.model_dump(by_alias=True)


class DiagnosticLevel(str, Enum):
    """Diagnostic severity."""

    WARNING = "warning"
    ERROR = "error"


class Diagnostic(OTUIModel):
    """A single parser finding tied to a 1-based source line."""

    line: int = Field(..., ge=1)
    level: DiagnosticLevel = Field(default=DiagnosticLevel.WARNING)
    message: str


class PropertyEntry(OTUIModel):
    """One property as written in the source, in source order."""

    key: str
    value: str
    raw: str = Field(default="", description="Trimmed source line")
    indent: int = Field(default=0, ge=0, description="Indent relative to the property block")


class WidgetNode(OTUIModel):
    """A widget instance or template definition."""

    type: str = Field(..., description="Resolved widget type")
    original_type_name: str = Field(default="", description="Type name as written")
    parent_type: str | None = Field(default=None, description="Base type of a template")
    indent_level: int = Field(default=0, ge=0)
    properties: dict[str, str] = Field(default_factory=dict)
    children: list["WidgetNode"] = Field(default_factory=list)
    size_defined: bool = Field(default=False)
    property_list: list[PropertyEntry] = Field(default_factory=list)
    original_keys: dict[str, str] = Field(default_factory=dict)

    @property
    def is_template(self) -> bool:
        """True for template definitions (``Name < Base``)."""
        return self.parent_type is not None


class TemplateCapture(OTUIModel):
    """Verbatim source text of a template definition."""

    name: str
    base_type: str
    resolved_base_type: str = Field(default="")
    lines: list[str] = Field(default_factory=list)

    @property
    def source(self) -> str:
        """Captured lines joined back into text."""
        return "\n".join(self.lines)


class ParseResult(OTUIModel):
    """Everything produced by a single parse call."""

    model_config = ConfigDict(frozen=True)

    widgets: list[WidgetNode] = Field(default_factory=list)
    templates: list[TemplateCapture] = Field(default_factory=list)
    template_map: dict[str, WidgetNode] = Field(default_factory=dict)
    diagnostics: list[Diagnostic] = Field(default_factory=list)

    @property
    def warnings(self) -> list[Diagnostic]:
        """Diagnostics at warning level."""
        return [d for d in self.diagnostics if d.level == DiagnosticLevel.WARNING.value]


WidgetNode.model_rebuild()
