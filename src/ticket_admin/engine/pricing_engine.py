"""
Pricing Engine - derived pricing figures for the event editor.

Computes the values the console shows next to the price inputs:
- Total event price with or without VAT
- Category price with VAT applied
- Category price as a percentage of the event price
- Seat allocation bars

Every method is a pure function of its arguments. Invalid numeric input
never raises: it degrades to the "0.00" sentinel so the pricing UI keeps
rendering while the user is still typing.
"""
import functools
from decimal import Decimal
from typing import Any

from .models import Event, TicketCategory
from .numbers import (
    ZERO_AMOUNT,
    ZERO_DISPLAY,
    InvalidNumberError,
    format_display,
    is_number,
    round_display,
    to_decimal,
)


def _or_sentinel(sentinel):
    """Return `sentinel` when the wrapped calculation cannot be carried out."""
    def decorate(method):
        @functools.wraps(method)
        def wrapper(*args, **kwargs):
            try:
                return method(*args, **kwargs)
            except (InvalidNumberError, ArithmeticError):
                return sentinel
        return wrapper
    return decorate


def _share(fraction, total):
    if not (is_number(fraction) and is_number(total)):
        return ZERO_AMOUNT

    total = to_decimal(total)
    if total == 0:
        return ZERO_AMOUNT
    return round_display(to_decimal(fraction) / total * 100)


def _percent_of(total, percentage):
    if not (is_number(total) and is_number(percentage)):
        return ZERO_AMOUNT
    return round_display(to_decimal(percentage) / 100 * to_decimal(total))


class PricingEngine:
    """
    Stateless calculator over Event / TicketCategory snapshots.

    VAT policy:
    1. A persisted event opened for editing stores its price without VAT,
       so VAT is always added on top
    2. A price entered with `vat_included` off gets VAT added on top
    3. Otherwise the entered price already includes VAT
    """

    @_or_sentinel(ZERO_AMOUNT)
    def total_price(self, event: Event, is_editing_existing: bool) -> Decimal:
        """
        Total event price, rounded to two decimals.

        The VAT amount is rounded before it is added to the base price.
        """
        if not (is_number(event.regular_price) and is_number(event.vat)):
            return ZERO_AMOUNT

        vat_amount = ZERO_AMOUNT
        if (is_editing_existing and event.is_persisted) or not event.vat_included:
            vat_amount = _percent_of(event.regular_price, event.vat)

        return round_display(vat_amount + to_decimal(event.regular_price))

    @_or_sentinel(ZERO_AMOUNT)
    def category_price(self, category: TicketCategory, event: Event) -> Decimal:
        """Category price, with the event VAT added when prices include VAT."""
        if not (is_number(event.vat) and is_number(category.price)):
            return ZERO_AMOUNT

        vat_amount = ZERO_AMOUNT
        if event.vat_included:
            vat_amount = _percent_of(category.price, event.vat)

        return round_display(to_decimal(category.price) + vat_amount)

    @_or_sentinel(ZERO_DISPLAY)
    def category_price_percent(self, category: TicketCategory, event: Event) -> str:
        """Category price as a percentage of the event's regular price."""
        if not (is_number(event.regular_price) and is_number(category.price)):
            return ZERO_DISPLAY
        return format_display(_share(category.price, event.regular_price))

    @_or_sentinel(ZERO_DISPLAY)
    def bar_value(self, category_seats: Any, event_seats: Any) -> str:
        """Share of the event seats held by a category, for progress bars."""
        return format_display(_share(category_seats, event_seats))

    @staticmethod
    @_or_sentinel(ZERO_AMOUNT)
    def percentage(fraction: Any, total: Any) -> Decimal:
        """`fraction` as a rounded percentage of `total`; zero when undefined."""
        return _share(fraction, total)

    @staticmethod
    @_or_sentinel(ZERO_AMOUNT)
    def apply_percentage(total: Any, percentage: Any) -> Decimal:
        """`percentage` percent of `total`, rounded."""
        return _percent_of(total, percentage)


# Default engine for the plain function-call interface
_engine = PricingEngine()


def total_price(event: Event, view_mode: bool) -> Decimal:
    return _engine.total_price(event, view_mode)


def category_price(category: TicketCategory, event: Event) -> Decimal:
    return _engine.category_price(category, event)


def category_price_percent(category: TicketCategory, event: Event) -> str:
    return _engine.category_price_percent(category, event)


def bar_value(category_seats: Any, event_seats: Any) -> str:
    return _engine.bar_value(category_seats, event_seats)
