"""Configuration resources."""

from .electronegativity_loader import (
    DEFAULT_CONFIG_PATH,
    load_electronegativity_table,
    write_default_config,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "load_electronegativity_table",
    "write_default_config",
]
