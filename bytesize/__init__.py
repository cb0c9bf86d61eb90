from .api import convert, format, parse
from .core.format_options import FormatOptions
from .core.size_formatter import SizeFormatter
from .core.size_parser import ParsedQuantity, SizeParser
from .core.units import ByteUnit, scale_of

__all__ = [
    "ByteUnit",
    "FormatOptions",
    "ParsedQuantity",
    "SizeFormatter",
    "SizeParser",
    "convert",
    "format",
    "parse",
    "scale_of",
]
