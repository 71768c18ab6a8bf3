"""Tests for property kinds and their handlers in isolation."""

import pytest

from otui.dsl.diagnostics import DiagnosticsCollector
from otui.dsl.properties import (
    PropertyKind,
    PropertyLine,
    apply_property,
    classify_property,
    strip_marker,
    unquote,
)
from otui.models import WidgetNode


def prop(key, value, line=2):
    return PropertyLine(
        key=key, value=unquote(value), written=value, raw=f"{key}: {value}", indent=0, line=line
    )


@pytest.fixture
def widget():
    return WidgetNode(type="UIPanel", original_type_name="Panel")


@pytest.fixture
def diagnostics():
    return DiagnosticsCollector()


@pytest.mark.unit
@pytest.mark.parametrize(
    "key,kind",
    [
        ("size", PropertyKind.COMPOSITE_SIZE),
        ("text-offset", PropertyKind.COMPOSITE_OFFSET),
        ("!text", PropertyKind.MARKED),
        ("anchors.left", PropertyKind.ANCHOR_EDGE),
        ("@onClick", PropertyKind.PLAIN),
        ("$hover", PropertyKind.PLAIN),
        ("id", PropertyKind.PLAIN),
        ("sizes", PropertyKind.PLAIN),
    ],
)
def test_classify_property(key, kind):
    """Test each key maps to one storage rule."""
    assert classify_property(key) == kind


@pytest.mark.unit
def test_unquote():
    """Test only matching outer quotes are removed."""
    assert unquote('"a b"') == "a b"
    assert unquote("'a'") == "a"
    assert unquote("\"a'") == "\"a'"
    assert unquote("plain") == "plain"
    assert unquote('"') == '"'


@pytest.mark.unit
def test_strip_marker():
    """Test the literal marker is removed from keys."""
    assert strip_marker("!text") == "text"
    assert strip_marker("text") == "text"


@pytest.mark.unit
def test_size_handler(widget, diagnostics):
    """Test size splits into width and height."""
    kind = apply_property(widget, prop("size", "32 16"), diagnostics)

    assert kind == PropertyKind.COMPOSITE_SIZE
    assert widget.properties == {"width": "32", "height": "16"}
    assert widget.size_defined is True
    assert len(diagnostics) == 0


@pytest.mark.unit
def test_quoted_size(widget, diagnostics):
    """Test quoted composite values are split after unquoting."""
    apply_property(widget, prop("size", '"32 16"'), diagnostics)

    assert widget.properties["width"] == "32"
    assert widget.property_list[0].value == '"32 16"'


@pytest.mark.unit
def test_size_handler_malformed(widget, diagnostics):
    """Test a malformed size warns with the source line."""
    apply_property(widget, prop("size", "", line=7), diagnostics)

    assert widget.properties == {}
    assert [(d.line, d.message) for d in diagnostics.to_list()] == [(7, "Invalid size format")]
    assert len(widget.property_list) == 1


@pytest.mark.unit
def test_marked_handler(widget, diagnostics):
    """Test marked keys store under the bare key and remember the marker."""
    apply_property(widget, prop("!text", "tr('Hi')"), diagnostics)

    assert widget.properties == {"text": "tr('Hi')"}
    assert widget.original_keys == {"text": "!text"}
    assert widget.property_list[0].key == "!text"


@pytest.mark.unit
def test_anchor_handler_first_write_wins(widget, diagnostics):
    """Test repeated anchors keep the first value and warn once."""
    apply_property(widget, prop("anchors.left", "parent"), diagnostics)
    apply_property(widget, prop("anchors.left", "other"), diagnostics)

    assert widget.properties == {"anchors.left": "parent"}
    assert len(widget.property_list) == 1
    assert len(diagnostics) == 1


@pytest.mark.unit
def test_forced_plain_kind(widget, diagnostics):
    """Test callers can bypass classification (bare flags)."""
    apply_property(widget, prop("size", "true"), diagnostics, kind=PropertyKind.PLAIN)

    assert widget.properties == {"size": "true"}
    assert widget.size_defined is False
    assert len(diagnostics) == 0
