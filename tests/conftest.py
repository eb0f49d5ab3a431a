import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import pytest

# Add src to path for internal imports
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@dataclass
class RecordedCall:
    """A request received by the stub admin backend."""
    method: str
    path: str
    query: dict
    headers: dict
    json: Optional[Any]


class StubBackend:
    """
    FastAPI app standing in for the admin backend.

    Records every request. Responses default to 200 with a small JSON body
    and can be overridden per (method, path).
    """

    def __init__(self):
        from fastapi import FastAPI, Request
        from fastapi.responses import JSONResponse, Response

        self.calls: list[RecordedCall] = []
        self.responses: dict[tuple[str, str], tuple[int, Any]] = {}
        self.app = FastAPI()

        async def handle(request: Request, path: str):
            body = await request.body()
            self.calls.append(RecordedCall(
                method=request.method,
                path=request.url.path,
                query=dict(request.query_params),
                headers=dict(request.headers),
                json=json.loads(body) if body else None,
            ))
            status, payload = self.responses.get(
                (request.method, request.url.path),
                (200, {"path": request.url.path}),
            )
            if payload is None:
                return Response(status_code=status)
            if isinstance(payload, str):
                return Response(content=payload, status_code=status, media_type="text/plain")
            return JSONResponse(payload, status_code=status)

        self.app.add_api_route("/{path:path}", handle, methods=["GET", "POST", "PUT", "DELETE"])

    def respond(self, method: str, path: str, status: int, payload: Any = None):
        self.responses[(method, path)] = (status, payload)

    @property
    def last_call(self) -> RecordedCall:
        return self.calls[-1]


@pytest.fixture
def settings():
    from ticket_admin.config.settings import Settings

    return Settings(api_base_url="http://testserver", csrf_header="X-CSRF-TOKEN", csrf_token="token-123")


@pytest.fixture
def backend():
    return StubBackend()


@pytest.fixture
def reporter():
    from ticket_admin.api.errors import ErrorReporter

    return ErrorReporter()


@pytest.fixture
def broadcasts(reporter):
    """Events received by an error banner subscribed to the reporter."""
    received = []
    reporter.subscribe(lambda name, message: received.append((name, message)))
    return received


@pytest.fixture
def http(settings, reporter, backend):
    from fastapi.testclient import TestClient
    from ticket_admin.api.client import HttpClient

    client = HttpClient(settings=settings, reporter=reporter, client=TestClient(backend.app))
    yield client
    client._client.close()


@pytest.fixture
def engine():
    from ticket_admin.engine import PricingEngine

    return PricingEngine()
