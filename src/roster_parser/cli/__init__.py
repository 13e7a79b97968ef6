"""
CLI package for roster_parser.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from roster_parser.cli.app import app, main

__all__ = [
    "app",
    "main",
]
