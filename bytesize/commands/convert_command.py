from __future__ import annotations

from collections.abc import Sequence

from ..core.format_options import FormatOptions
from ..core.protocols import SizeFormatterProtocol, SizeParserProtocol
from .base import Command
from .format_command import coerce_number


class ConvertCommand(Command):
    """Format arguments that read as numbers, parse everything else."""

    def __init__(
        self,
        values: Sequence[str],
        options: FormatOptions,
        parser: SizeParserProtocol,
        formatter: SizeFormatterProtocol,
    ) -> None:
        self._values = values
        self._options = options
        self._parser = parser
        self._formatter = formatter

    def run(self) -> int:
        for value in self._values:
            print(self._convert(value))
        return 0

    def _convert(self, value: str) -> int | float | str:
        number = coerce_number(value)
        if number is None:
            parsed = self._parser.parse(value)
            if parsed is None:
                raise SystemExit(f"Invalid size format: {value}")
            return parsed

        formatted = self._formatter.format(number, self._options)
        if formatted is None:
            raise SystemExit(f"Invalid byte count: {value}")
        return formatted
