from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence
from typing import Any

from ..core.config_loader import ConfigLoader
from ..core.protocols import SizeFormatterProtocol, SizeParserProtocol
from ..core.size_formatter import SizeFormatter
from ..core.size_parser import SizeParser
from .base import Command
from .convert_command import ConvertCommand
from .format_command import FormatCommand
from .parse_command import ParseCommand


class CommandFactory:
    def __init__(
        self,
        *,
        config_loader: ConfigLoader | None = None,
        parser: SizeParserProtocol | None = None,
        formatter: SizeFormatterProtocol | None = None,
    ) -> None:
        self._config_loader = config_loader or ConfigLoader()
        self._parser = parser or SizeParser()
        self._formatter = formatter or SizeFormatter()

    def create(
        self,
        action: str,
        values: Sequence[str],
        env_file: str | None = None,
        overrides: Mapping[str, Any] | None = None,
    ) -> Command:
        options = self._config_loader.load(env_file)
        if overrides:
            options = dataclasses.replace(options, **overrides)

        if action == "parse":
            return ParseCommand(values, self._parser)
        if action == "format":
            return FormatCommand(values, options, self._formatter)
        if action == "convert":
            return ConvertCommand(values, options, self._parser, self._formatter)
        raise SystemExit(f"Unsupported action: {action}")
