"""
Numeric contract shared by every pricing calculation.

Values arriving from the console forms may be missing or malformed, so
every calculation first checks its inputs with `is_number` and degrades to
the zero sentinel instead of raising. All displayable values are rounded
once, half-up, to two fraction digits.
"""
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Any


DISPLAY_QUANTUM = Decimal("0.01")
ROUNDING = ROUND_HALF_UP

ZERO_AMOUNT = Decimal("0.00")
ZERO_DISPLAY = "0.00"


class InvalidNumberError(ValueError):
    """Raised when a value cannot be read as a finite decimal number."""

    def __init__(self, value: Any):
        super().__init__(f"Not a number: {value!r}")
        self.value = value


def to_decimal(value: Any) -> Decimal:
    """
    Convert a form or payload value to a finite Decimal.

    Floats are converted through their shortest repr so that 0.1 becomes
    Decimal("0.1") rather than its binary expansion.
    """
    if value is None or isinstance(value, bool):
        raise InvalidNumberError(value)

    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, (int, float)):
        number = Decimal(str(value))
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            raise InvalidNumberError(value)
        try:
            number = Decimal(text)
        except InvalidOperation:
            raise InvalidNumberError(value) from None
    else:
        raise InvalidNumberError(value)

    if not number.is_finite():
        raise InvalidNumberError(value)
    return number


def is_number(value: Any) -> bool:
    """True when `value` converts to a finite decimal."""
    try:
        to_decimal(value)
    except InvalidNumberError:
        return False
    return True


def round_display(value: Any) -> Decimal:
    """
    Round to two fraction digits, half-up.

    The working precision is widened to hold every integer digit, so large
    finite amounts round instead of failing. Magnitudes beyond the context
    exponent range raise InvalidNumberError.
    """
    number = to_decimal(value)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, min(number.adjusted(), ctx.Emax) + 3)
        try:
            return number.quantize(DISPLAY_QUANTUM, rounding=ROUNDING)
        except InvalidOperation:
            raise InvalidNumberError(value) from None


def format_display(value: Any) -> str:
    """Fixed-point string with exactly two fraction digits, e.g. "25.00"."""
    return format(round_display(value), "f")
