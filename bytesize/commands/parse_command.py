from __future__ import annotations

from collections.abc import Sequence

from ..core.protocols import SizeParserProtocol
from .base import Command


class ParseCommand(Command):
    def __init__(self, values: Sequence[str], parser: SizeParserProtocol) -> None:
        self._values = values
        self._parser = parser

    def run(self) -> int:
        for value in self._values:
            result = self._parser.parse(value)
            if result is None:
                raise SystemExit(f"Invalid size format: {value}")
            print(result)
        return 0
