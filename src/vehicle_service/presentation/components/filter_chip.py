"""Filter chip used above list screens."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from vehicle_service.domain.value_objects.theme import ResolvedTheme


@dataclass(frozen=True)
class FilterChipConfig:
    label: str
    value: str | None = None
    selected: bool = False
    count: int | None = None

    @property
    def display_label(self) -> str:
        if self.count is None:
            return self.label
        return f"{self.label} ({self.count})"


def filter_chip_style(config: FilterChipConfig, theme: ResolvedTheme) -> dict[str, Any]:
    colors = theme.colors
    if config.selected:
        return {
            "background_color": colors.primary,
            "border_color": colors.primary,
            "text_color": "#fff",
            "border_radius": 16,
        }
    return {
        "background_color": colors.surface,
        "border_color": colors.border,
        "text_color": colors.text,
        "border_radius": 16,
    }


def select_chip(chips: Iterable[FilterChipConfig], value: str | None) -> list[FilterChipConfig]:
    """Mark exactly the chip with ``value`` as selected."""
    return [
        FilterChipConfig(chip.label, chip.value, chip.value == value, chip.count)
        for chip in chips
    ]
