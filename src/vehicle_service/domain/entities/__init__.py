"""Domain entities."""

from vehicle_service.domain.entities.metrics import DashboardMetrics
from vehicle_service.domain.entities.service_request import ServiceRequest, ServiceStatus
from vehicle_service.domain.entities.user import Session, User, UserRole
from vehicle_service.domain.entities.vehicle import Vehicle

__all__ = [
    "DashboardMetrics",
    "ServiceRequest",
    "ServiceStatus",
    "Session",
    "User",
    "UserRole",
    "Vehicle",
]
