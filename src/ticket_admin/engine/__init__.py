"""Engine subpackage - pricing calculations for the event editor."""
from .pricing_engine import PricingEngine, total_price, category_price, category_price_percent, bar_value
from .models import Event, TicketCategory
from .summary import SeatAllocation, category_breakdown, seat_allocation

__all__ = [
    'PricingEngine', 'Event', 'TicketCategory',
    'total_price', 'category_price', 'category_price_percent', 'bar_value',
    'SeatAllocation', 'category_breakdown', 'seat_allocation',
]
