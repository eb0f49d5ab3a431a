#!/usr/bin/env python
"""
Price preview - prints the pricing figures the event editor would show.

Usage:
    python scripts/price_preview.py event.json [--editing]

The JSON file holds an event as returned by the admin API, with its
`ticketCategories` list.
"""
import argparse
import json
import logging
import sys
from pathlib import Path

import pandas as pd

# Add src to path
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from ticket_admin.engine import (
    Event,
    PricingEngine,
    TicketCategory,
    category_breakdown,
    seat_allocation,
)


logger = logging.getLogger("price_preview")


def overflow_reason(allocation):
    """Why the backend would reject this seat split, or None."""
    if allocation.bounded > allocation.available:
        return "bounded categories exceed the available seats"
    if allocation.overflow:
        return "no seats left for the unbounded categories"
    return None


def main(argv=None):
    parser = argparse.ArgumentParser(description="Preview event pricing figures")
    parser.add_argument('event_json', type=Path, help="Event payload (JSON)")
    parser.add_argument('--editing', action='store_true', help="Preview as editing a persisted event")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    with open(args.event_json, 'r', encoding='utf-8') as f:
        payload = json.load(f)

    event = Event.from_payload(payload)
    categories = [TicketCategory.from_payload(c) for c in payload.get('ticketCategories', [])]
    logger.info("Loaded %s with %d ticket categories", args.event_json, len(categories))
    engine = PricingEngine()

    print("=" * 60)
    print(f"EVENT {event.name or event.id or ''}".rstrip())
    print("=" * 60)
    print(f"Regular price: {event.regular_price}  VAT: {event.vat}%  VAT included: {event.vat_included}")
    print(f"Total price:   {engine.total_price(event, args.editing)}")
    print()

    table = category_breakdown(event, categories, engine)
    if table.empty:
        print("No ticket categories.")
    else:
        with pd.option_context('display.max_columns', None, 'display.width', 120):
            print(table.to_string(index=False))
    print()

    allocation = seat_allocation(event, categories)
    print(f"Seats: {allocation.available} available, {allocation.bounded} bounded, "
          f"{allocation.unbounded} unbounded")
    reason = overflow_reason(allocation)
    if reason:
        print(f"WARNING: {reason}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
