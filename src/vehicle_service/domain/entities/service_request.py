"""Service request entity."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class ServiceStatus(Enum):
    """Service request lifecycle states."""
    PENDING_QUOTE = "PENDING_QUOTE"
    QUOTE_SENT = "QUOTE_SENT"
    APPROVED = "APPROVED"
    DECLINED = "DECLINED"
    CONFIRMED = "CONFIRMED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


ACTIVE_STATUSES = frozenset({
    ServiceStatus.APPROVED,
    ServiceStatus.CONFIRMED,
    ServiceStatus.IN_PROGRESS,
})


def _parse_datetime(value: Any) -> datetime | None:
    if not value:
        return None
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return None


@dataclass
class ServiceRequest:
    """A request for work on a vehicle."""

    id: str = ""
    vehicle_id: str = ""
    service_type: str = ""
    description: str = ""
    status: ServiceStatus = ServiceStatus.PENDING_QUOTE
    notes: str | None = None
    client_id: str | None = None
    preferred_date: datetime | None = None
    created_at: datetime | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "ServiceRequest":
        """Create a ServiceRequest from a backend JSON record."""
        known = {"id", "vehicleId", "vehicle", "serviceType", "description",
                 "status", "notes", "clientId", "preferredDate", "createdAt"}
        vehicle_id = data.get("vehicleId")
        if vehicle_id is None and isinstance(data.get("vehicle"), dict):
            vehicle_id = data["vehicle"].get("id")
        try:
            status = ServiceStatus(str(data.get("status", "")).upper())
        except ValueError:
            status = ServiceStatus.PENDING_QUOTE
        client_id = data.get("clientId")
        return cls(
            id=str(data.get("id", "")),
            vehicle_id=str(vehicle_id) if vehicle_id is not None else "",
            service_type=data.get("serviceType", ""),
            description=data.get("description", ""),
            status=status,
            notes=data.get("notes"),
            client_id=str(client_id) if client_id is not None else None,
            preferred_date=_parse_datetime(data.get("preferredDate")),
            created_at=_parse_datetime(data.get("createdAt")),
            metadata={k: v for k, v in data.items() if k not in known},
        )

    @property
    def is_active(self) -> bool:
        """Check if work is approved or underway."""
        return self.status in ACTIVE_STATUSES

    def __str__(self) -> str:
        return f"ServiceRequest({self.service_type}, {self.status.value})"
