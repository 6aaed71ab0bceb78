"""Request and response models exchanged with the backend."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base model using the backend's camelCase field names."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        """Serialize for a request body."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class LoginRequest(ApiModel):
    email: str
    password: str


class RegisterRequest(ApiModel):
    first_name: str
    last_name: str
    email: str
    password: str
    phone_number: str | None = None
    role: str = "CLIENT"


class AuthResponse(ApiModel):
    """Successful login/register answer."""
    model_config = ConfigDict(extra="allow")

    token: str
    user: dict[str, Any] = Field(default_factory=dict)


class VehicleRequest(ApiModel):
    make: str
    model: str
    year: int
    color: str | None = None
    license_plate: str | None = None
    vin: str | None = None
    mileage: int | None = None
    image: str | None = None


class ServiceRequestCreate(ApiModel):
    vehicle_id: str
    service_type: str
    description: str
    preferred_date: str | None = None
    notes: str | None = None


class StatusUpdate(ApiModel):
    status: str
    notes: str | None = None
