"""Backend API access."""

from vehicle_service.infrastructure.api.auth import AuthService
from vehicle_service.infrastructure.api.errors import (
    ApiError,
    AuthenticationFailed,
    HttpError,
    NetworkUnavailableError,
    RequestTimeoutError,
)
from vehicle_service.infrastructure.api.gateway import ApiGateway
from vehicle_service.infrastructure.api.metrics import MetricsService
from vehicle_service.infrastructure.api.service_requests import ServiceRequestService
from vehicle_service.infrastructure.api.users import UserService
from vehicle_service.infrastructure.api.vehicles import VehicleService

__all__ = [
    "ApiError",
    "ApiGateway",
    "AuthService",
    "AuthenticationFailed",
    "HttpError",
    "MetricsService",
    "NetworkUnavailableError",
    "RequestTimeoutError",
    "ServiceRequestService",
    "UserService",
    "VehicleService",
]
