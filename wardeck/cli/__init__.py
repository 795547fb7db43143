"""Command-line interface for wardeck."""

from .main import app, main

__all__ = ["app", "main"]
