"""
Admin service tests: each operation maps to one verb and one route.
"""
from decimal import Decimal

import pytest

from ticket_admin.api import ApiError
from ticket_admin.api.models import (
    ConfigurationModification,
    EventModification,
    OrganizationModification,
    TicketCategoryModification,
    UserModification,
)
from ticket_admin.engine import Event
from ticket_admin.services import (
    ConfigurationService,
    EventService,
    LocationService,
    OrganizationService,
    PaymentProxyService,
    UserService,
)


@pytest.fixture
def events(http):
    return EventService(http)


class TestOrganizationService:

    def test_read_operations(self, http, backend):
        service = OrganizationService(http)
        backend.respond("GET", "/admin/api/organizations.json", 200, [{"id": 1, "name": "acme"}])

        assert service.get_all_organizations() == [{"id": 1, "name": "acme"}]
        service.get_organization(1)

        assert [(c.method, c.path) for c in backend.calls] == [
            ("GET", "/admin/api/organizations.json"),
            ("GET", "/admin/api/organizations/1.json"),
        ]

    def test_create_and_check_send_camel_case_body(self, http, backend):
        service = OrganizationService(http)
        organization = OrganizationModification(name="acme", email="info@acme.test")

        service.check_organization(organization)
        service.create_organization(organization)

        assert [c.path for c in backend.calls] == [
            "/admin/api/organizations/check",
            "/admin/api/organizations/new",
        ]
        assert backend.last_call.method == "POST"
        assert backend.last_call.json == {"name": "acme", "email": "info@acme.test"}


class TestUserService:

    def test_operations(self, http, backend):
        service = UserService(http)
        user = UserModification(organization_id=1, username="jdoe", first_name="Jane",
                                last_name="Doe", email_address="jane@acme.test")

        service.get_all_users()
        service.check_user(user)
        service.create_user(user)

        assert [(c.method, c.path) for c in backend.calls] == [
            ("GET", "/admin/api/users.json"),
            ("POST", "/admin/api/users/check"),
            ("POST", "/admin/api/users/new"),
        ]
        assert backend.last_call.json == {
            "organizationId": 1,
            "username": "jdoe",
            "firstName": "Jane",
            "lastName": "Doe",
            "emailAddress": "jane@acme.test",
        }


def test_payment_proxies(http, backend):
    backend.respond("GET", "/admin/api/paymentProxies.json", 200, ["STRIPE", "ON_SITE"])

    assert PaymentProxyService(http).get_all_proxies() == ["STRIPE", "ON_SITE"]


class TestEventService:

    def test_read_operations(self, events, backend):
        events.get_all_events()
        events.get_event("devoxx")
        events.get_event_for_update("devoxx")

        assert [c.path for c in backend.calls] == [
            "/admin/api/events.json",
            "/admin/api/events/devoxx.json",
            "/admin/api/events/devoxx/for-update.json",
        ]

    def test_check_and_create(self, events, backend):
        event = EventModification(short_name="devoxx", organization_id=1, vat_included=True,
                                  regular_price=Decimal("100"), available_seats=20)

        events.check_event(event)
        events.create_event(event)

        assert [c.path for c in backend.calls] == ["/admin/api/events/check", "/admin/api/events/new"]
        body = backend.last_call.json
        assert body["shortName"] == "devoxx"
        assert body["vatIncluded"] is True
        assert body["availableSeats"] == 20
        assert "id" not in body

    def test_updates_use_event_id(self, events, backend):
        events.update_event(EventModification(id=42, location="Antwerp"))
        events.update_event_header({"id": 42, "description": "new"})
        events.update_event_prices(EventModification(id=42, regular_price=Decimal("90"), vat=Decimal("21")))

        assert [c.path for c in backend.calls] == [
            "/admin/api/events/42/update",
            "/admin/api/events/42/header/update",
            "/admin/api/events/42/prices/update",
        ]
        assert backend.calls[1].json == {"id": 42, "description": "new"}

    def test_update_without_id_sends_nothing(self, events, backend):
        with pytest.raises(ValueError):
            events.update_event_prices(EventModification(regular_price=Decimal("90")))
        assert backend.calls == []

    def test_save_new_category(self, events, backend):
        category = TicketCategoryModification(name="student", max_tickets=5, price=Decimal("25"),
                                              bounded=True)

        events.save_ticket_category(Event(regular_price=100, vat=22, id=4), category)

        assert backend.last_call.path == "/admin/api/events/4/categories/new"
        assert backend.last_call.json["maxTickets"] == 5
        assert backend.last_call.json["bounded"] is True

    def test_save_existing_category(self, events, backend):
        events.save_ticket_category({"id": 4}, {"id": 9, "name": "vip", "price": 250})

        assert backend.last_call.path == "/admin/api/events/4/categories/9/update"
        assert backend.last_call.json == {"id": 9, "name": "vip", "price": 250}

    def test_reallocate_orphans(self, events, backend):
        events.reallocate_orphans({"id": 3}, 7, 4)

        call = backend.last_call
        assert (call.method, call.path) == ("PUT", "/admin/api/events/reallocate")
        assert call.json == {"srcCategoryId": 3, "targetCategoryId": 7, "eventId": 4}

    def test_failure_reaches_error_banner(self, events, backend, broadcasts):
        backend.respond("POST", "/admin/api/events/new", 422, {"message": "invalid dates"})

        with pytest.raises(ApiError):
            events.create_event({"shortName": "x"})

        assert broadcasts == [("applicationError", "invalid dates")]


class TestLocationService:

    def test_geolocate_passes_location_as_query(self, http, backend):
        LocationService(http).geolocate("Piazza Grande, Locarno")

        call = backend.last_call
        assert call.path == "/admin/api/location/geo.json"
        assert call.query == {"location": "Piazza Grande, Locarno"}

    def test_map_url(self, http, backend):
        LocationService(http).get_map_url("46.17", "8.79")

        assert backend.last_call.path == "/admin/api/location/map.json"
        assert backend.last_call.query == {"lat": "46.17", "long": "8.79"}


class TestConfigurationService:

    def test_operations(self, http, backend):
        service = ConfigurationService(http)
        backend.respond("DELETE", "/admin/api/configuration/key/SMTP_HOST", 200, True)

        service.load_all()
        service.update(ConfigurationModification(key="SMTP_HOST", value="mail.local"))
        assert service.remove("SMTP_HOST") is True

        assert [(c.method, c.path) for c in backend.calls] == [
            ("GET", "/admin/api/configuration/load"),
            ("POST", "/admin/api/configuration/update"),
            ("DELETE", "/admin/api/configuration/key/SMTP_HOST"),
        ]
        assert backend.calls[1].json == {"key": "SMTP_HOST", "value": "mail.local"}
