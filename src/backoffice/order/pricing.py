"""Order pricing — the line total of a single-product order.

Amounts are computed with ``Decimal`` so that, for example, 19.99 x 3 is
exactly 59.97 rather than 59.97000000000001.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENT = Decimal("0.01")


def to_decimal(value) -> Decimal:
    """Convert a price to Decimal through its string form, so 19.99 stays 19.99.

    Infinity and NaN are not amounts and raise ValueError.
    """
    if isinstance(value, bool) or value is None:
        raise TypeError(f"Not a price: {value!r}")
    amount = value if isinstance(value, Decimal) else Decimal(str(value))
    if not amount.is_finite():
        raise ValueError(f"Not a finite amount: {value!r}")
    return amount


def is_whole_cents(value) -> bool:
    """True when ``value`` is a finite amount with no digits below the cent."""
    try:
        amount = to_decimal(value)
        return amount == amount.quantize(CENT)
    except (TypeError, ValueError):
        return False
    except InvalidOperation:
        # Too many digits to represent at cent precision
        return False


def line_total(unit_price, quantity) -> Decimal:
    """Return ``unit_price * quantity`` rounded half-up to the cent.

    Both operands must be finite and non-negative, and ``quantity`` must be a
    whole number.
    """
    price = to_decimal(unit_price)
    count = to_decimal(quantity)

    if price < 0:
        raise ValueError(f"Unit price cannot be negative: {unit_price!r}")
    if count < 0:
        raise ValueError(f"Quantity cannot be negative: {quantity!r}")
    if count != count.to_integral_value():
        raise ValueError(f"Quantity must be a whole number: {quantity!r}")

    try:
        return (price * count).quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValueError(f"Total of {unit_price!r} x {quantity!r} is out of range") from None
