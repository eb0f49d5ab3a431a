"""
Data models for the pricing engine.

Read-only snapshots of the records the console edits. Numeric fields are
kept exactly as received (numbers, numeric strings, None or NaN) so the
engine can apply its own validity contract.
"""
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Event:
    """Event pricing fields as shown in the event editor."""
    regular_price: Any
    vat: Any  # percentage, 0-100
    vat_included: bool = False
    id: Optional[int] = None  # set once the event is persisted
    available_seats: Any = None
    name: Optional[str] = None

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    @classmethod
    def from_payload(cls, payload: dict) -> 'Event':
        """Create an Event from the backend's JSON representation."""
        return cls(
            regular_price=payload.get('regularPrice'),
            vat=payload.get('vat'),
            vat_included=bool(payload.get('vatIncluded', False)),
            id=payload.get('id'),
            available_seats=payload.get('availableSeats'),
            name=payload.get('name') or payload.get('shortName'),
        )


@dataclass(frozen=True)
class TicketCategory:
    """A ticket class within an event."""
    price: Any
    id: Optional[int] = None
    name: Optional[str] = None
    max_tickets: Any = None
    bounded: bool = False

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    @classmethod
    def from_payload(cls, payload: dict) -> 'TicketCategory':
        """Create a TicketCategory from the backend's JSON representation."""
        return cls(
            price=payload.get('price'),
            id=payload.get('id'),
            name=payload.get('name'),
            max_tickets=payload.get('maxTickets'),
            bounded=bool(payload.get('bounded', False)),
        )
