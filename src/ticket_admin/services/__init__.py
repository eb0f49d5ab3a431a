"""Services subpackage - one service per admin API resource."""
from .admin_services import (
    ConfigurationService,
    LocationService,
    OrganizationService,
    PaymentProxyService,
    UserService,
)
from .event_service import EventService

__all__ = [
    'OrganizationService', 'PaymentProxyService', 'UserService',
    'EventService', 'LocationService', 'ConfigurationService',
]
