from __future__ import annotations

from enum import Enum


class ByteUnit(Enum):
    B = 0
    KB = 1
    MB = 2
    GB = 3
    TB = 4
    PB = 5

    @property
    def label(self) -> str:
        return self.name

    @property
    def scale(self) -> int:
        return 1024**self.value

    @classmethod
    def from_label(cls, label: str) -> ByteUnit | None:
        return _UNITS_BY_LABEL.get(label.lower())

    @classmethod
    def largest_fitting(cls, magnitude: float) -> ByteUnit:
        """Largest unit whose scale does not exceed ``magnitude``; ``B`` below 1 KB."""
        for unit in reversed(cls):
            if magnitude >= unit.scale:
                return unit
        return cls.B


_UNITS_BY_LABEL: dict[str, ByteUnit] = {unit.label.lower(): unit for unit in ByteUnit}


def scale_of(unit: str) -> int | None:
    resolved = ByteUnit.from_label(unit)
    if resolved is None:
        return None
    return resolved.scale
