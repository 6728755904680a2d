
"""
CLI package for households.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from households.cli.app import app, main

__all__ = [
    "app",
    "main",
]
