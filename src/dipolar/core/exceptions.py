"""Exception taxonomy for the dipole calculator core."""

from typing import Optional, Tuple


class DipolarError(Exception):
    """Base class for all errors raised by the dipole calculator."""


class UnknownElement(DipolarError, KeyError):
    """An element symbol is not present in the electronegativity table."""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(symbol)

    def __str__(self) -> str:
        return f"{self.symbol!r} is not an available atom type"


class MissingAdjacentBond(DipolarError):
    """An angle was requested before one of its two supporting bonds exists."""

    def __init__(self, pair: Tuple[object, object]):
        self.pair = pair
        super().__init__(f"No bond {pair[0]} - {pair[1]}; add the bond first")


class UnknownAngle(DipolarError, LookupError):
    """A group entry references an angle that is not in the angle ledger."""

    def __init__(self, triple: Tuple[object, object, object]):
        self.triple = triple
        super().__init__(f"No angle {' - '.join(str(a) for a in triple)}")


class CorruptedFile(DipolarError):
    """A project or geometry file could not be parsed."""

    def __init__(
        self, reason: str, path: Optional[str] = None, line: Optional[int] = None
    ):
        self.reason = reason
        self.path = path
        self.line = line
        super().__init__(reason)

    def __str__(self) -> str:
        location = ""
        if self.path:
            location = f"{self.path}"
            if self.line is not None:
                location += f":{self.line}"
            location += ": "
        elif self.line is not None:
            location = f"line {self.line}: "
        return f"{location}corrupted file ({self.reason})"


class InvalidNumeric(DipolarError, ValueError):
    """Text entered for a numeric field is not a number."""

    def __init__(self, text: str, field: str = "value"):
        self.text = text
        self.field = field
        super().__init__(f"Invalid {field}: {text!r} is not a number")


class ConfigurationError(DipolarError):
    """The electronegativity configuration resource is malformed."""
