"""Diagnostics collected while parsing OTUI source."""

from otui.models import Diagnostic, DiagnosticLevel


class DiagnosticsCollector:
    """Append-only, ordered list of parser findings."""

    def __init__(self) -> None:
        self._items: list[Diagnostic] = []

    def warning(self, line: int, message: str) -> None:
        self._items.append(Diagnostic(line=line, level=DiagnosticLevel.WARNING, message=message))

    def __len__(self) -> int:
        return len(self._items)

    def to_list(self) -> list[Diagnostic]:
        """Snapshot in emission order."""
        return list(self._items)
