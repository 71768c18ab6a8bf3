"""Raw-text capture of template definitions."""

from otui.models import TemplateCapture, WidgetNode


class TemplateTracker:
    """
    Records the verbatim source lines of each ``Name < Base`` definition.

    At most one capture is active at a time. It is opened by a template
    header and closed either when the template's own node leaves the scope
    stack or when a bare widget starts at column zero.
    """

    def __init__(self) -> None:
        self.captures: list[TemplateCapture] = []
        self._active: TemplateCapture | None = None
        self._node: WidgetNode | None = None

    @property
    def active(self) -> bool:
        return self._active is not None

    def begin(self, node: WidgetNode, base_type: str, resolved_base_type: str) -> TemplateCapture:
        """Start capturing a new template, replacing any open capture."""
        capture = TemplateCapture(
            name=node.original_type_name,
            base_type=base_type,
            resolved_base_type=resolved_base_type,
        )
        self.captures.append(capture)
        self._active = capture
        self._node = node
        return capture

    def capture(self, raw_line: str) -> None:
        """Append a physical line to the active capture, if any."""
        if self._active is not None:
            self._active.lines.append(raw_line)

    def owns(self, node: WidgetNode) -> bool:
        """True when ``node`` is the node of the template being captured."""
        return self._node is not None and node is self._node

    def close(self) -> None:
        self._active = None
        self._node = None
