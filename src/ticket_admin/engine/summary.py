"""
Pricing summary - table and seat figures for the category grid.

Builds on PricingEngine to produce one row per ticket category, ready to
be shown in the event editor's category table.
"""
from dataclasses import dataclass
from typing import Iterable, Optional

import pandas as pd

from .models import Event, TicketCategory
from .numbers import is_number, to_decimal
from .pricing_engine import PricingEngine


BREAKDOWN_COLUMNS = [
    'id', 'name', 'price', 'price_with_vat', 'price_percent', 'seats', 'bar_value'
]


@dataclass(frozen=True)
class SeatAllocation:
    """How the event seats are split between bounded categories and the free pool."""
    available: int
    bounded: int
    unbounded: int
    overflow: bool  # the backend would reject this split


def _seats(value) -> int:
    """Seat count from a payload value; unknown counts as 0."""
    if not is_number(value):
        return 0
    return int(to_decimal(value))


def category_breakdown(
    event: Event,
    categories: Iterable[TicketCategory],
    engine: Optional[PricingEngine] = None
) -> pd.DataFrame:
    """
    Build the category pricing table.

    Monetary columns hold Decimals; percentage columns hold display strings.
    """
    engine = engine or PricingEngine()
    event_seats = _seats(event.available_seats)

    rows = []
    for category in categories:
        seats = _seats(category.max_tickets)
        rows.append({
            'id': category.id,
            'name': category.name or "",
            'price': category.price,
            'price_with_vat': engine.category_price(category, event),
            'price_percent': engine.category_price_percent(category, event),
            'seats': seats,
            'bar_value': engine.bar_value(seats, event_seats),
        })

    return pd.DataFrame(rows, columns=BREAKDOWN_COLUMNS)


def seat_allocation(event: Event, categories: Iterable[TicketCategory]) -> SeatAllocation:
    """
    Split the event seats between bounded categories and the unbounded pool.

    An unbounded category needs at least one seat left in the pool.
    """
    categories = list(categories)
    available = _seats(event.available_seats)
    bounded = sum(_seats(c.max_tickets) for c in categories if c.bounded)
    unbounded = max(available - bounded, 0)
    has_unbounded = any(not c.bounded for c in categories)

    return SeatAllocation(
        available=available,
        bounded=bounded,
        unbounded=unbounded,
        overflow=bounded > available or (has_unbounded and unbounded == 0),
    )
