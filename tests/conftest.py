"""Pytest configuration and fixtures."""

import os
import pytest

from fastapi.testclient import TestClient

from otui.core import Settings
from otui.dsl import OTUIParser, OTUIExporter


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ['OTUI_LOG_LEVEL'] = 'DEBUG'
    os.environ['OTUI_ENABLE_TRACING'] = 'false'


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Test settings."""
    return Settings(enable_tracing=False)


@pytest.fixture
def parser():
    """Parser without a widget catalog."""
    return OTUIParser()


@pytest.fixture
def exporter():
    """Exporter fixture."""
    return OTUIExporter()


# ============================================================================
# HTTP Fixtures
# ============================================================================

@pytest.fixture
def client(settings):
    """FastAPI test client."""
    from otui.server import create_app

    with TestClient(create_app(settings)) as test_client:
        yield test_client


# ============================================================================
# Data Fixtures
# ============================================================================

@pytest.fixture
def sample_otui():
    """Window with nested widgets and most property notations."""
    return """MainWindow
  id: main
  size: 200 100
  !text: tr('Hello')
  anchors.top: parent.top
  focusable

  Label
    id: title
    text: "Hi there"
    text-offset: 1 2

  ScrollablePanel
    id: list
    margin-top 4
    VerticalScrollBar
      id: scroll
"""


@pytest.fixture
def sample_templates():
    """Two template definitions followed by an instance."""
    return """// buttons
MyButton < Button
  size: 80 20
  // hover state
  $hover:
    color: red

MyWindow < MainWindow
  Label
    id: caption

Panel
  id: root
"""
