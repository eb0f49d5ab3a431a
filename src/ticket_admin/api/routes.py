"""
Admin API routes.

One builder per endpoint. Identifiers are quoted as single path segments;
query values are passed separately as request params.
"""
from typing import Union
from urllib.parse import quote


Identifier = Union[int, str]

API_ROOT = '/admin/api'


def _segment(value: Identifier) -> str:
    if value is None or str(value) == '':
        raise ValueError("Identifier is required to build the route")
    return quote(str(value), safe='')


# Organizations

def organizations() -> str:
    return f'{API_ROOT}/organizations.json'


def organization(organization_id: Identifier) -> str:
    return f'{API_ROOT}/organizations/{_segment(organization_id)}.json'


def organization_new() -> str:
    return f'{API_ROOT}/organizations/new'


def organization_check() -> str:
    return f'{API_ROOT}/organizations/check'


# Payment proxies

def payment_proxies() -> str:
    return f'{API_ROOT}/paymentProxies.json'


# Users

def users() -> str:
    return f'{API_ROOT}/users.json'


def user_new() -> str:
    return f'{API_ROOT}/users/new'


def user_check() -> str:
    return f'{API_ROOT}/users/check'


# Events

def events() -> str:
    return f'{API_ROOT}/events.json'


def event(name: str) -> str:
    return f'{API_ROOT}/events/{_segment(name)}.json'


def event_for_update(name: str) -> str:
    return f'{API_ROOT}/events/{_segment(name)}/for-update.json'


def event_check() -> str:
    return f'{API_ROOT}/events/check'


def event_new() -> str:
    return f'{API_ROOT}/events/new'


def event_update(event_id: Identifier) -> str:
    return f'{API_ROOT}/events/{_segment(event_id)}/update'


def event_header_update(event_id: Identifier) -> str:
    return f'{API_ROOT}/events/{_segment(event_id)}/header/update'


def event_prices_update(event_id: Identifier) -> str:
    return f'{API_ROOT}/events/{_segment(event_id)}/prices/update'


def category_new(event_id: Identifier) -> str:
    return f'{API_ROOT}/events/{_segment(event_id)}/categories/new'


def category_update(event_id: Identifier, category_id: Identifier) -> str:
    return f'{API_ROOT}/events/{_segment(event_id)}/categories/{_segment(category_id)}/update'


def events_reallocate() -> str:
    return f'{API_ROOT}/events/reallocate'


# Locations

def location_geo() -> str:
    return f'{API_ROOT}/location/geo.json'


def location_map() -> str:
    return f'{API_ROOT}/location/map.json'


# Configuration

def configuration_load() -> str:
    return f'{API_ROOT}/configuration/load'


def configuration_update() -> str:
    return f'{API_ROOT}/configuration/update'


def configuration_key(key: str) -> str:
    return f'{API_ROOT}/configuration/key/{_segment(key)}'
