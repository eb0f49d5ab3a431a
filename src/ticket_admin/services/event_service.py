"""
Event Service - events and their ticket categories.
"""
from typing import Any

from ..api import routes
from ..api.models import ReallocationRequest
from .base import ApiService, id_of, require_id, to_body


class EventService(ApiService):
    """Event CRUD, price updates and category management."""

    def get_all_events(self) -> list:
        return self.http.get(routes.events())

    def get_event(self, name: str) -> dict:
        return self.http.get(routes.event(name))

    def get_event_for_update(self, name: str) -> dict:
        """Event as stored, with prices excluding VAT, for the edit form."""
        return self.http.get(routes.event_for_update(name))

    def check_event(self, event) -> Any:
        """Validate an event without saving it."""
        return self.http.post(routes.event_check(), to_body(event))

    def create_event(self, event) -> Any:
        return self.http.post(routes.event_new(), to_body(event))

    def update_event(self, event) -> Any:
        event_id = require_id(event, "Event")
        return self.http.post(routes.event_update(event_id), to_body(event))

    def update_event_header(self, event_header) -> Any:
        event_id = require_id(event_header, "Event header")
        return self.http.post(routes.event_header_update(event_id), to_body(event_header))

    def update_event_prices(self, event_prices) -> Any:
        event_id = require_id(event_prices, "Event prices")
        return self.http.post(routes.event_prices_update(event_id), to_body(event_prices))

    def save_ticket_category(self, event, ticket_category) -> Any:
        """
        Create or update a ticket category.

        A category with an id is updated in place; otherwise it is created.
        """
        event_id = require_id(event, "Event")
        category_id = id_of(ticket_category)
        if category_id is not None:
            path = routes.category_update(event_id, category_id)
        else:
            path = routes.category_new(event_id)
        return self.http.post(path, to_body(ticket_category))

    def reallocate_orphans(self, src_category, target_category_id, event_id) -> Any:
        """Move the tickets left in `src_category` to another category."""
        request = ReallocationRequest(
            src_category_id=require_id(src_category, "Source category"),
            target_category_id=target_category_id,
            event_id=event_id,
        )
        return self.http.put(routes.events_reallocate(), request.to_payload())
