from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass

from .rounding import round_half_away
from .units import ByteUnit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedQuantity:
    sign: int
    mantissa: float
    unit: ByteUnit

    def to_bytes(self) -> int | None:
        value = self.sign * self.mantissa * self.unit.scale
        if not math.isfinite(value):
            return None
        return int(round_half_away(value))


class SizeParser:
    _pattern = re.compile(
        r"([+-])?(\d+(?:\.\d+)?) ?(b|kb|mb|gb|tb|pb)",
        re.IGNORECASE | re.ASCII,
    )

    @classmethod
    def tokenize(cls, value: str) -> ParsedQuantity | None:
        match = cls._pattern.fullmatch(value)
        if not match:
            logger.debug("Rejected size string: %r", value)
            return None
        sign_text, mantissa_text, unit_text = match.groups()
        mantissa = float(mantissa_text)
        if not math.isfinite(mantissa):
            logger.debug("Non-finite mantissa in size string: %r", value)
            return None
        unit = ByteUnit.from_label(unit_text)
        if unit is None:
            return None
        return ParsedQuantity(
            sign=-1 if sign_text == "-" else 1,
            mantissa=mantissa,
            unit=unit,
        )

    @classmethod
    def parse(cls, value: str | int | float) -> int | float | None:
        """Convert a size string such as ``"1.5GB"`` to a byte count.

        Numbers pass through untouched. Anything that is not a well-formed
        size string gives ``None``.
        """
        if isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            return value
        if not isinstance(value, str):
            return None
        quantity = cls.tokenize(value)
        if quantity is None:
            return None
        return quantity.to_bytes()

    @classmethod
    def is_valid(cls, value: object) -> bool:
        return isinstance(value, str) and cls.tokenize(value) is not None
