from __future__ import annotations

from typing import Protocol

from .format_options import FormatOptions


class SizeParserProtocol(Protocol):
    def parse(self, value: str | int | float) -> int | float | None:
        ...


class SizeFormatterProtocol(Protocol):
    def format(
        self,
        value: int | float,
        options: FormatOptions | None = None,
    ) -> str | None:
        ...
