# src/dipolar/infrastructure/config/electronegativity_loader.py
"""Loader for the ``config/electroneg.toml`` electronegativity resource."""

import logging
from pathlib import Path
from typing import Dict, Mapping, Union

try:
    import tomllib  # py>=3.11
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib

from ...core.domain.models.electronegativity import (
    DEFAULT_ELECTRONEGATIVITY,
    ElectronegativityTable,
)
from ...core.exceptions import ConfigurationError
from ...core.validation import parse_number

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config") / "electroneg.toml"


def render_table(values: Mapping[str, float]) -> str:
    """Render a table in the ``Symbol = value`` form of the resource."""
    lines = [
        "# This text is generated automatically",
        "# Electronegativity of atoms",
    ]
    lines.extend(f"{symbol} = {value!r}" for symbol, value in values.items())
    return "\n".join(lines) + "\n"


def write_default_config(path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> Path:
    """Create ``path`` (and its directory) holding the built-in table."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_table(DEFAULT_ELECTRONEGATIVITY), encoding="utf-8")
    logger.warning(f"No electronegativity table found; wrote defaults to {path}")
    return path


def _load_toml(path: Path) -> dict:
    with path.open("rb") as f:
        return tomllib.load(f)


def _load_key_values(path: Path) -> Dict[str, float]:
    """
    Read plain ``Symbol = value`` lines where values may use a decimal comma.

    Raises:
        ValueError: If a line is not a ``Symbol = number`` pair
    """
    values: Dict[str, float] = {}
    text = path.read_text(encoding="utf-8-sig")
    for number, line in enumerate(text.splitlines(), start=1):
        content = line.split("#", 1)[0].strip()
        if not content:
            continue
        symbol, separator, value = content.partition("=")
        if not separator:
            raise ValueError(f"line {number}: expected 'Symbol = value', got {line!r}")
        field = f"electronegativity on line {number}"
        values[symbol.strip()] = parse_number(value.strip(), field)
    return values


def load_electronegativity_table(
    path: Union[str, Path] = DEFAULT_CONFIG_PATH,
) -> ElectronegativityTable:
    """
    Load the electronegativity table, persisting the default first if absent.

    Args:
        path: Location of the TOML resource

    Returns:
        Immutable ElectronegativityTable in file order

    Raises:
        ConfigurationError: If the file holds anything but ``Symbol = number``
            pairs, in TOML or with decimal commas
    """
    path = Path(path)
    if not path.exists():
        write_default_config(path)

    try:
        payload = _load_toml(path)
    except tomllib.TOMLDecodeError as exc:
        try:
            payload = _load_key_values(path)
        except ValueError:
            raise ConfigurationError(f"{path}: {exc}") from exc
        logger.info(f"Read {path} as Symbol = value lines with decimal commas")

    values: Dict[str, float] = {}
    for symbol, value in payload.items():
        if not symbol.strip():
            raise ConfigurationError(f"{path}: empty element symbol")
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigurationError(
                f"{path}: electronegativity of {symbol!r} must be a number, got {value!r}"
            )
        values[symbol.strip()] = float(value)
    if not values:
        raise ConfigurationError(f"{path}: no elements configured")

    logger.info(f"Loaded {len(values)} electronegativities from {path}")
    return ElectronegativityTable(values)
