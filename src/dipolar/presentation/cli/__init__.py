"""Command-line interface modules."""

from .dipolar_cli import main as dipolar_main

__all__ = ["dipolar_main"]
