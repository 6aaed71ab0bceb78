"""Vehicle endpoints."""

from collections.abc import Mapping
from typing import Any

from vehicle_service.domain.entities.vehicle import Vehicle
from vehicle_service.domain.services.form_schemas import vehicle_payload
from vehicle_service.infrastructure.api._payload import as_list, blank_to_none, unwrap
from vehicle_service.infrastructure.api.gateway import ApiGateway
from vehicle_service.infrastructure.api.schemas import VehicleRequest


class VehicleService:
    """CRUD for vehicles."""

    def __init__(self, gateway: ApiGateway):
        self.gateway = gateway

    async def list_vehicles(self, **params: Any) -> list[Vehicle]:
        response = await self.gateway.get("/vehicles", params)
        return [Vehicle.from_api(item) for item in as_list(response)]

    async def get_vehicle(self, vehicle_id: str) -> Vehicle:
        response = await self.gateway.get(f"/vehicles/{vehicle_id}")
        return Vehicle.from_api(unwrap(response))

    async def create_vehicle(self, form_values: Mapping[str, Any]) -> Vehicle:
        """Create a vehicle from validated vehicle form values."""
        body = self._request_body(form_values)
        response = await self.gateway.post("/vehicles", body)
        return Vehicle.from_api(unwrap(response))

    async def update_vehicle(self, vehicle_id: str, form_values: Mapping[str, Any]) -> Vehicle:
        body = self._request_body(form_values)
        response = await self.gateway.put(f"/vehicles/{vehicle_id}", body)
        return Vehicle.from_api(unwrap(response))

    async def delete_vehicle(self, vehicle_id: str) -> None:
        await self.gateway.delete(f"/vehicles/{vehicle_id}")

    @staticmethod
    def _request_body(form_values: Mapping[str, Any]) -> dict[str, Any]:
        payload = blank_to_none(vehicle_payload(form_values))
        return VehicleRequest(**payload).to_payload()
