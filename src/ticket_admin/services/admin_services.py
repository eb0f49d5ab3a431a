"""
Admin Services - organizations, users, payment proxies, locations and
configuration.
"""
from typing import Any

from ..api import routes
from .base import ApiService, to_body


class OrganizationService(ApiService):
    """Organizations owning events and users."""

    def get_all_organizations(self) -> list:
        return self.http.get(routes.organizations())

    def get_organization(self, organization_id) -> dict:
        return self.http.get(routes.organization(organization_id))

    def create_organization(self, organization) -> Any:
        return self.http.post(routes.organization_new(), to_body(organization))

    def check_organization(self, organization) -> Any:
        """Validate an organization without saving it."""
        return self.http.post(routes.organization_check(), to_body(organization))


class PaymentProxyService(ApiService):

    def get_all_proxies(self) -> list:
        return self.http.get(routes.payment_proxies())


class UserService(ApiService):
    """Console users."""

    def get_all_users(self) -> list:
        return self.http.get(routes.users())

    def create_user(self, user) -> Any:
        return self.http.post(routes.user_new(), to_body(user))

    def check_user(self, user) -> Any:
        """Validate a user without saving it."""
        return self.http.post(routes.user_check(), to_body(user))


class LocationService(ApiService):
    """Geolocation helpers for the event location field."""

    def geolocate(self, location: str) -> dict:
        return self.http.get(routes.location_geo(), params={'location': location})

    def get_map_url(self, latitude, longitude) -> Any:
        return self.http.get(routes.location_map(), params={'lat': latitude, 'long': longitude})


class ConfigurationService(ApiService):
    """System configuration entries."""

    def load_all(self) -> Any:
        return self.http.get(routes.configuration_load())

    def update(self, configuration) -> Any:
        return self.http.post(routes.configuration_update(), to_body(configuration))

    def remove(self, key: str) -> Any:
        return self.http.delete(routes.configuration_key(key))
