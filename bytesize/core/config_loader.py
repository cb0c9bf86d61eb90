from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from .format_options import FormatOptions
from .units import ByteUnit

_PREFIX = "BYTESIZE_"
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class ConfigLoader:
    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    def load(self, env_path: str | None = None) -> FormatOptions:
        values = {
            key: value for key, value in self._environ.items() if key.startswith(_PREFIX)
        }
        if env_path:
            env_file = Path(env_path).expanduser()
            if not env_file.is_file():
                raise SystemExit(f"Missing env file: {env_file}")
            values.update(self._parse_env_file(env_file))

        return FormatOptions(
            decimal_places=self._decimal_places(values.get("BYTESIZE_DECIMAL_PLACES")),
            fixed_decimals=self._flag(values.get("BYTESIZE_FIXED_DECIMALS")),
            thousands_separator=values.get("BYTESIZE_THOUSANDS_SEPARATOR", ""),
            unit=self._unit(values.get("BYTESIZE_UNIT")),
            unit_separator=values.get("BYTESIZE_UNIT_SEPARATOR", ""),
        )

    def _parse_env_file(self, env_file: Path) -> dict[str, str]:
        values: dict[str, str] = {}
        for raw_line in env_file.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                continue
            key, value = line.split("=", 1)
            cleaned = value.strip().strip('"').strip("'")
            values[key.strip()] = os.path.expandvars(cleaned)
        return values

    def _decimal_places(self, raw: str | None) -> int | None:
        if raw is None or raw == "":
            return None
        try:
            places = int(raw)
        except ValueError:
            places = -1
        if places < 0:
            raise SystemExit(f"Invalid config value for BYTESIZE_DECIMAL_PLACES: {raw}")
        return places

    def _flag(self, raw: str | None) -> bool | None:
        if raw is None or raw == "":
            return None
        lowered = raw.lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise SystemExit(f"Invalid config value for BYTESIZE_FIXED_DECIMALS: {raw}")

    def _unit(self, raw: str | None) -> ByteUnit | None:
        if raw is None or raw == "":
            return None
        unit = ByteUnit.from_label(raw)
        if unit is None:
            raise SystemExit(f"Invalid config value for BYTESIZE_UNIT: {raw}")
        return unit
