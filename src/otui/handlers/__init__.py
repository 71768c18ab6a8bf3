"""Handlers for HTTP requests."""

from .otui import OTUIHandler

__all__ = ["OTUIHandler"]
