"""
Base class for admin API services.

Services are thin: one method per backend operation, one HTTP call each.
Failures are reported and raised by HttpClient.
"""
from typing import Any, Optional

from pydantic import BaseModel

from ..api.client import HttpClient
from ..api.models import ApiModel


def to_body(payload: Any) -> Any:
    """Request body from a pydantic model or a plain dict."""
    if isinstance(payload, ApiModel):
        return payload.to_payload()
    if isinstance(payload, BaseModel):
        return payload.model_dump(by_alias=True, mode='json')
    return payload


def id_of(record: Any, field: str = 'id') -> Optional[Any]:
    """Identifier of a model, dataclass or dict; None when missing."""
    if record is None:
        return None
    if isinstance(record, dict):
        return record.get(field)
    return getattr(record, field, None)


def require_id(record: Any, what: str) -> Any:
    record_id = id_of(record)
    if record_id is None:
        raise ValueError(f"{what} has no id")
    return record_id


class ApiService:
    """Shared plumbing for services bound to one HttpClient."""

    def __init__(self, http: HttpClient):
        self.http = http
