"""Project file codecs."""

from .text_codec import TextProjectCodec, format_number
from .cml_codec import CMLGeometryCodec

__all__ = ["TextProjectCodec", "CMLGeometryCodec", "format_number"]
