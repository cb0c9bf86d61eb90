from __future__ import annotations

import dataclasses
from typing import Any

from .core.format_options import FormatOptions
from .core.size_formatter import SizeFormatter
from .core.size_parser import SizeParser


def parse(value: str | int | float) -> int | float | None:
    return SizeParser.parse(value)


def format(
    value: int | float,
    options: FormatOptions | None = None,
    **overrides: Any,
) -> str | None:
    if overrides:
        options = dataclasses.replace(options or FormatOptions(), **overrides)
    return SizeFormatter.format(value, options)


def convert(
    value: str | int | float,
    options: FormatOptions | None = None,
    **overrides: Any,
) -> int | float | str | None:
    """Parse size strings, format numbers.

    ``options`` and ``overrides`` only apply to the formatting branch.
    """
    if isinstance(value, str):
        return parse(value)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return format(value, options, **overrides)
