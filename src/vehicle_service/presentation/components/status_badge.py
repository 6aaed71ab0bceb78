"""Status badge colors and labels for service requests."""

from dataclasses import dataclass

from vehicle_service.domain.entities.service_request import ServiceStatus
from vehicle_service.domain.value_objects.theme import ResolvedTheme

_STATUS_TOKENS = {
    ServiceStatus.PENDING_QUOTE: "warning",
    ServiceStatus.QUOTE_SENT: "info",
    ServiceStatus.APPROVED: "success",
    ServiceStatus.DECLINED: "error",
    ServiceStatus.CONFIRMED: "primary",
    ServiceStatus.IN_PROGRESS: "primary",
    ServiceStatus.COMPLETED: "success",
    ServiceStatus.CANCELLED: "error",
}


@dataclass(frozen=True)
class StatusBadge:
    label: str
    color: str
    background_color: str
    token: str


def status_badge(status: ServiceStatus, theme: ResolvedTheme) -> StatusBadge:
    token = _STATUS_TOKENS[status]
    return StatusBadge(
        label=status.label,
        color=getattr(theme.colors, token),
        background_color=theme.colors.tinted(token),
        token=token,
    )
