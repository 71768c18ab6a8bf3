"""Validation tests."""

import pytest

from otui.core import (
    ParseRequest,
    ExportRequest,
    ValidationError,
    validate_request,
    validate_source_size,
    validate_tree_depth,
)
from otui.models import WidgetNode


def test_parse_request_valid():
    """Test valid parse request with a catalog."""
    req = validate_request(ParseRequest, {"code": "Panel", "widgetDefinitions": {"Custom": {}}})
    assert req.code == "Panel"
    assert req.widget_definitions == {"Custom": {}}


def test_parse_request_ignores_extra_fields():
    """Test unknown fields are dropped."""
    req = validate_request(ParseRequest, {"code": "Panel", "editor": "v2"})
    assert req.code == "Panel"


@pytest.mark.parametrize("payload", [{}, {"code": ""}, {"code": "  \n "}, {"code": None}, None])
def test_parse_request_missing_code(payload):
    """Test missing or blank code is rejected."""
    with pytest.raises(ValidationError, match="Missing OTUI code"):
        validate_request(ParseRequest, payload)


def test_parse_request_wrong_type():
    """Test non-string code is rejected with its field name."""
    with pytest.raises(ValidationError, match="code"):
        validate_request(ParseRequest, {"code": 42})


def test_parse_request_not_an_object():
    """Test a JSON array body is rejected."""
    with pytest.raises(ValidationError):
        validate_request(ParseRequest, ["Panel"])


def test_export_request_valid():
    """Test camelCase widget dictionaries become models."""
    req = validate_request(
        ExportRequest,
        {"widgets": [{"type": "UIPanel", "originalTypeName": "Panel", "sizeDefined": False}]},
    )
    assert isinstance(req.widgets[0], WidgetNode)
    assert req.widgets[0].original_type_name == "Panel"


@pytest.mark.parametrize("payload", [{}, {"widgets": None}, {"widgets": "Panel"}, {"widgets": {}}])
def test_export_request_missing_widgets(payload):
    """Test a missing or non-array widgets field is rejected."""
    with pytest.raises(ValidationError, match="Missing widgets array"):
        validate_request(ExportRequest, payload)


def test_export_request_bad_node():
    """Test a node without a type is rejected."""
    with pytest.raises(ValidationError, match="type"):
        validate_request(ExportRequest, {"widgets": [{"originalTypeName": "Panel"}]})


def test_validate_source_size():
    """Test source size limit."""
    validate_source_size("Panel", 10)  # Should pass

    with pytest.raises(ValidationError):
        validate_source_size("x" * 11, 10)


def test_validate_tree_depth():
    """Test nesting limit."""
    root = WidgetNode(type="UIPanel")
    root.children.append(WidgetNode(type="UIPanel", children=[WidgetNode(type="UILabel")]))

    validate_tree_depth([root], max_depth=3)  # Should pass

    with pytest.raises(ValidationError):
        validate_tree_depth([root], max_depth=2)
