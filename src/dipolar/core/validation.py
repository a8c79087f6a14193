"""Caller-boundary helpers turning user text into numbers."""

import math

from .exceptions import InvalidNumeric


def parse_number(text: str, field: str = "value") -> float:
    """
    Parse a finite real number, accepting ``.`` or ``,`` as decimal separator.

    Args:
        text: Raw text from a form field or file
        field: Name used in the error message

    Raises:
        InvalidNumeric: If the text is not a finite number
    """
    if text is None:
        raise InvalidNumeric("", field)
    cleaned = str(text).strip().replace(",", ".")
    try:
        value = float(cleaned)
    except ValueError:
        raise InvalidNumeric(text, field) from None
    if not math.isfinite(value):
        raise InvalidNumeric(text, field)
    return value
