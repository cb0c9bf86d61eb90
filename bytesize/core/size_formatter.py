from __future__ import annotations

import logging
import math

from .format_options import FormatOptions
from .rounding import round_half_away
from .units import ByteUnit

logger = logging.getLogger(__name__)


class SizeFormatter:
    @classmethod
    def format(
        cls,
        value: int | float,
        options: FormatOptions | None = None,
    ) -> str | None:
        """Render a byte count as a human-readable string such as ``"1.5GB"``.

        Returns ``None`` when ``value`` is not a finite number.
        """
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        try:
            finite = math.isfinite(value)
        except OverflowError:
            # ints past the float range
            finite = False
        if not finite:
            return None

        options = options or FormatOptions()
        unit = cls.select_unit(value, options)
        places = options.effective_decimal_places

        rounded = round_half_away(value / unit.scale, places)
        negative = rounded < 0
        digits = f"{rounded.copy_abs():f}"
        integer_part, _, fraction = digits.partition(".")

        if not options.effective_fixed_decimals:
            fraction = fraction.rstrip("0")
        if options.thousands_separator:
            integer_part = cls._group_thousands(integer_part, options.thousands_separator)

        number = f"{integer_part}.{fraction}" if fraction else integer_part
        sign = "-" if negative else ""
        return f"{sign}{number}{options.unit_separator}{unit.label}"

    @classmethod
    def select_unit(cls, value: int | float, options: FormatOptions) -> ByteUnit:
        if options.unit is not None:
            forced = options.resolve_unit()
            if forced is not None:
                return forced
            logger.warning("Unknown unit %r, selecting one automatically", options.unit)
        return ByteUnit.largest_fitting(abs(value))

    @staticmethod
    def _group_thousands(integer_part: str, separator: str) -> str:
        return f"{int(integer_part):,}".replace(",", separator)
