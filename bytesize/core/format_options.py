from __future__ import annotations

from dataclasses import dataclass

from .units import ByteUnit

DEFAULT_DECIMAL_PLACES = 2


@dataclass(frozen=True)
class FormatOptions:
    decimal_places: int | None = None
    fixed_decimals: bool | None = None
    thousands_separator: str = ""
    unit: ByteUnit | str | None = None
    unit_separator: str = ""

    def __post_init__(self) -> None:
        places = self.decimal_places
        if places is None:
            return
        if isinstance(places, bool) or not isinstance(places, int) or places < 0:
            raise ValueError(f"decimal_places must be a non-negative integer: {places!r}")

    @property
    def effective_decimal_places(self) -> int:
        if self.decimal_places is None:
            return DEFAULT_DECIMAL_PLACES
        return self.decimal_places

    @property
    def effective_fixed_decimals(self) -> bool:
        # An explicit decimal_places asks for that many digits unless told otherwise.
        if self.fixed_decimals is None:
            return self.decimal_places is not None
        return self.fixed_decimals

    def resolve_unit(self) -> ByteUnit | None:
        if isinstance(self.unit, ByteUnit):
            return self.unit
        if isinstance(self.unit, str):
            return ByteUnit.from_label(self.unit)
        return None
