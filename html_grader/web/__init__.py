"""Minimal preview server for the graded HTML file."""

from .server import PREVIEW_BYTES, create_app, main

__all__ = ["PREVIEW_BYTES", "create_app", "main"]
