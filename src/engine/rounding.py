"""Half-up rounding for displayed figures."""

from decimal import Decimal, ROUND_HALF_UP, localcontext

WHOLE = Decimal("1")
ONE_PLACE = Decimal("0.1")


def round_half_up(value: Decimal, places: Decimal = WHOLE) -> Decimal:
    """Quantize ``value`` to ``places``, half away from zero.

    Precision is widened to fit the result, so very large volumes and costs
    round instead of raising ``InvalidOperation``.
    """
    digits = value.adjusted() - places.as_tuple().exponent + 2
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, digits)
        return value.quantize(places, ROUND_HALF_UP)
