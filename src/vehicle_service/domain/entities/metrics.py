"""Dashboard metrics entity."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class DashboardMetrics:
    """Headline numbers shown on the dashboard."""

    total_vehicles: int = 0
    active_services: int = 0
    completed_services: int = 0
    pending_quotes: int = 0
    total_users: int = 0
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "DashboardMetrics":
        """Create metrics from the ``/metrics/dashboard`` payload."""
        fields = {
            "totalVehicles": "total_vehicles",
            "activeServices": "active_services",
            "completedServices": "completed_services",
            "pendingQuotes": "pending_quotes",
            "totalUsers": "total_users",
        }
        values = {attr: int(data.get(key) or 0) for key, attr in fields.items()}
        extra = {k: v for k, v in data.items() if k not in fields}
        return cls(**values, extra=extra)

    def as_rows(self) -> list[tuple[str, int]]:
        """Get (label, value) pairs for display."""
        return [
            ("Vehicles", self.total_vehicles),
            ("Active services", self.active_services),
            ("Completed services", self.completed_services),
            ("Pending quotes", self.pending_quotes),
            ("Users", self.total_users),
        ]
