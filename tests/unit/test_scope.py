"""Tests for indentation levels, the scope stack and template capture."""

import pytest
from hypothesis import given, strategies as st

from otui import parse_otui
from otui.dsl.scope import ScopeStack, indent_level, leading_whitespace
from otui.dsl.templates import TemplateTracker
from otui.models import WidgetNode


def node(level, name="Panel"):
    return WidgetNode(type=f"UI{name}", original_type_name=name, indent_level=level)


@pytest.mark.unit
def test_indent_level():
    """Test whitespace counts map to levels by floor division."""
    assert indent_level("Panel") == 0
    assert indent_level(" Panel") == 0
    assert indent_level("  Panel") == 1
    assert indent_level("     Panel") == 2
    assert leading_whitespace("\tid: a") == 1


@pytest.mark.unit
def test_unwind_pops_same_and_deeper():
    """Test unwinding closes siblings and deeper scopes only."""
    stack = ScopeStack()
    root, child, grandchild = node(0), node(1), node(2)
    for n in (root, child, grandchild):
        stack.push(n)

    popped = stack.unwind(1)

    assert popped == [grandchild, child]
    assert popped[0] is grandchild
    assert stack.current is root
    assert stack.depth == 1


@pytest.mark.unit
def test_unwind_to_root_empties_stack():
    """Test a column-zero line closes every scope."""
    stack = ScopeStack()
    stack.push(node(0))
    stack.push(node(1))

    assert len(stack.unwind(0)) == 2
    assert not stack
    assert stack.current is None


@pytest.mark.unit
def test_template_tracker_lifecycle():
    """Test capture opens, records and closes around its own node."""
    tracker = TemplateTracker()
    template = node(0, "MyButton")
    other = node(1, "Label")

    tracker.capture("ignored")
    tracker.begin(template, "Button", "UIButton")
    tracker.capture("MyButton < Button")
    tracker.capture("  id: a")

    assert tracker.active
    assert tracker.owns(template)
    assert not tracker.owns(other)

    tracker.close()
    tracker.capture("after")

    assert not tracker.active
    assert len(tracker.captures) == 1
    assert tracker.captures[0].lines == ["MyButton < Button", "  id: a"]


@given(st.integers(min_value=0, max_value=40), st.booleans())
def test_indentation_determinism(spaces, with_parent):
    """Property test: k leading spaces always give level k // 2."""
    prefix = "Window\n  id: w\n" if with_parent else ""
    result = parse_otui(f"{prefix}{' ' * spaces}Panel\n")

    stack = list(result.widgets)
    panels = []
    while stack:
        current = stack.pop()
        if current.original_type_name == "Panel":
            panels.append(current)
        stack.extend(current.children)

    assert len(panels) == 1
    assert panels[0].indent_level == spaces // 2
