"""Dashboard metrics endpoint."""

from vehicle_service.domain.entities.metrics import DashboardMetrics
from vehicle_service.infrastructure.api._payload import unwrap
from vehicle_service.infrastructure.api.gateway import ApiGateway


class MetricsService:
    def __init__(self, gateway: ApiGateway):
        self.gateway = gateway

    async def dashboard(self) -> DashboardMetrics:
        response = await self.gateway.get("/metrics/dashboard")
        return DashboardMetrics.from_api(unwrap(response) or {})
