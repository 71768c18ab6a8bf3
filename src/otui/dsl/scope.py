"""Indentation levels and the stack of open widget scopes."""

from otui.models import WidgetNode

# Leading whitespace characters per indentation level
INDENT_WIDTH = 2


def leading_whitespace(line: str) -> int:
    """Count leading whitespace characters; each one is a single unit."""
    return len(line) - len(line.lstrip())


def indent_level(line: str) -> int:
    """Indentation level of a physical line (odd counts round down)."""
    return leading_whitespace(line) // INDENT_WIDTH


class ScopeStack:
    """
    Stack of currently open widget nodes.

    A node stays open while following lines are indented deeper than the
    line that created it. ``unwind`` closes every scope that a line at the
    given level no longer belongs to.
    """

    def __init__(self) -> None:
        self._nodes: list[WidgetNode] = []

    def unwind(self, level: int) -> list[WidgetNode]:
        """Pop every open node with ``indent_level >= level``; return them innermost first."""
        popped = []
        while self._nodes and self._nodes[-1].indent_level >= level:
            popped.append(self._nodes.pop())
        return popped

    def push(self, node: WidgetNode) -> None:
        self._nodes.append(node)

    @property
    def current(self) -> WidgetNode | None:
        """Innermost open node, if any."""
        return self._nodes[-1] if self._nodes else None

    @property
    def depth(self) -> int:
        return len(self._nodes)

    def __bool__(self) -> bool:
        return bool(self._nodes)
