from __future__ import annotations

from collections.abc import Sequence

from ..core.format_options import FormatOptions
from ..core.protocols import SizeFormatterProtocol
from .base import Command


def coerce_number(text: str) -> int | float | None:
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return None


class FormatCommand(Command):
    def __init__(
        self,
        values: Sequence[str],
        options: FormatOptions,
        formatter: SizeFormatterProtocol,
    ) -> None:
        self._values = values
        self._options = options
        self._formatter = formatter

    def run(self) -> int:
        for value in self._values:
            number = coerce_number(value)
            result = None if number is None else self._formatter.format(number, self._options)
            if result is None:
                raise SystemExit(f"Invalid byte count: {value}")
            print(result)
        return 0
