"""
Request bodies for the admin API.

Fields are snake_case in Python and camelCase on the wire.
"""
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base model: camelCase aliases, unknown backend fields kept."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra='allow')

    def to_payload(self) -> dict:
        """JSON-ready body, camelCase keys, unset optional fields dropped."""
        return self.model_dump(by_alias=True, mode='json', exclude_none=True)


class OrganizationModification(ApiModel):
    """Request model for creating or checking an organization."""
    id: Optional[int] = None
    name: str
    email: str
    description: Optional[str] = None


class UserModification(ApiModel):
    """Request model for creating or checking a user."""
    id: Optional[int] = None
    organization_id: int
    username: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email_address: Optional[str] = None


class DateTimeModification(ApiModel):
    """Date and time as entered in the editor (ISO date, HH:MM time)."""
    date: str
    time: str


class LocationDescriptor(ApiModel):
    time_zone: Optional[str] = None
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    map_url: Optional[str] = None


class TicketCategoryModification(ApiModel):
    """Request model for a ticket category."""
    id: Optional[int] = None
    name: str
    max_tickets: int = 0
    inception: Optional[DateTimeModification] = None
    expiration: Optional[DateTimeModification] = None
    description: Optional[str] = None
    price: Decimal = Decimal("0")
    token_generation_requested: bool = False
    date_string: Optional[str] = None
    bounded: bool = False


class EventModification(ApiModel):
    """
    Request model for an event.

    Every field is optional so the same model serves full updates, header
    updates and price updates.
    """
    id: Optional[int] = None
    website_url: Optional[str] = None
    terms_and_conditions_url: Optional[str] = None
    image_url: Optional[str] = None
    short_name: Optional[str] = None
    organization_id: Optional[int] = None
    location: Optional[str] = None
    description: Optional[str] = None
    begin: Optional[DateTimeModification] = None
    end: Optional[DateTimeModification] = None
    regular_price: Optional[Decimal] = None
    currency: Optional[str] = None
    available_seats: Optional[int] = None
    vat: Optional[Decimal] = None
    vat_included: Optional[bool] = None
    allowed_payment_proxies: Optional[list[str]] = None
    ticket_categories: Optional[list[TicketCategoryModification]] = None
    free_of_charge: Optional[bool] = None
    location_descriptor: Optional[LocationDescriptor] = None


class ReallocationRequest(ApiModel):
    """Move the orphan tickets of a category to another one."""
    src_category_id: int
    target_category_id: int
    event_id: int


class ConfigurationModification(ApiModel):
    """Request model for a configuration entry."""
    id: Optional[int] = None
    key: str
    value: str
