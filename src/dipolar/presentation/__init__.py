"""Command-line interfaces and other presentation layer components."""

from .cli.dipolar_cli import main as dipolar_main

__all__ = ["dipolar_main"]
