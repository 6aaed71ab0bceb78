"""Service request endpoints."""

from collections.abc import Mapping
from typing import Any

from vehicle_service.domain.entities.service_request import ServiceRequest, ServiceStatus
from vehicle_service.infrastructure.api._payload import as_list, blank_to_none, unwrap
from vehicle_service.infrastructure.api.gateway import ApiGateway
from vehicle_service.infrastructure.api.schemas import ServiceRequestCreate, StatusUpdate


class ServiceRequestService:
    """Create and track service requests."""

    def __init__(self, gateway: ApiGateway):
        self.gateway = gateway

    async def list_requests(self, status: ServiceStatus | None = None) -> list[ServiceRequest]:
        params = {"status": status.value if status else None}
        response = await self.gateway.get("/service-requests", params)
        return [ServiceRequest.from_api(item) for item in as_list(response)]

    async def get_request(self, request_id: str) -> ServiceRequest:
        response = await self.gateway.get(f"/service-requests/{request_id}")
        return ServiceRequest.from_api(unwrap(response))

    async def create_request(self, form_values: Mapping[str, Any]) -> ServiceRequest:
        """Submit validated service request form values."""
        values = blank_to_none(dict(form_values))
        body = ServiceRequestCreate(
            vehicle_id=str(values["vehicle_id"]),
            service_type=values["service_type"],
            description=values["description"],
            preferred_date=values.get("preferred_date"),
            notes=values.get("notes"),
        ).to_payload()
        response = await self.gateway.post("/service-requests", body)
        return ServiceRequest.from_api(unwrap(response))

    async def update_status(self, request_id: str, status: ServiceStatus,
                            notes: str | None = None) -> ServiceRequest:
        body = StatusUpdate(status=status.value, notes=notes).to_payload()
        response = await self.gateway.patch(f"/service-requests/{request_id}/status", body)
        return ServiceRequest.from_api(unwrap(response))
