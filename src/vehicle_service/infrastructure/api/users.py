"""User listing endpoint."""

from vehicle_service.domain.entities.user import User, UserRole
from vehicle_service.infrastructure.api._payload import as_list
from vehicle_service.infrastructure.api.gateway import ApiGateway


class UserService:
    def __init__(self, gateway: ApiGateway):
        self.gateway = gateway

    async def list_users(self, role: UserRole | None = None) -> list[User]:
        response = await self.gateway.get("/users", {"role": role.value if role else None})
        return [User.from_api(item) for item in as_list(response)]
