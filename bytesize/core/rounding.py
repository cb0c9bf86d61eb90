from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext


def round_half_away(value: float, places: int = 0) -> Decimal:
    """Round ``value`` to ``places`` fractional digits, ties away from zero.

    Rounding works on the shortest repr of the float, so ``1.005`` rounds to
    ``1.01`` the way it reads rather than the way it is stored.
    """
    exact = Decimal(repr(value))
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, exact.adjusted() + places + 2)
        return exact.quantize(quantum, rounding=ROUND_HALF_UP)
