"""Button configuration and theme-driven styling."""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any

from vehicle_service.domain.value_objects.theme import ResolvedTheme

ON_PRIMARY_TEXT = "#fff"


class ButtonVariant(Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    OUTLINE = "outline"
    GHOST = "ghost"
    DANGER = "danger"
    SUCCESS = "success"

    @property
    def is_transparent(self) -> bool:
        return self in (ButtonVariant.SECONDARY, ButtonVariant.OUTLINE, ButtonVariant.GHOST)


class ButtonSize(Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


@dataclass(frozen=True)
class ButtonConfig:
    """Options for a button."""
    title: str
    variant: ButtonVariant = ButtonVariant.PRIMARY
    size: ButtonSize = ButtonSize.MEDIUM
    disabled: bool = False
    loading: bool = False

    @property
    def is_interactive(self) -> bool:
        """A loading button cannot be pressed again."""
        return not (self.disabled or self.loading)


@dataclass(frozen=True)
class ButtonStyle:
    """Resolved style records for one button."""
    container: dict[str, Any]
    text: dict[str, Any]
    spinner_color: str


def button_style(config: ButtonConfig, theme: ResolvedTheme) -> ButtonStyle:
    """Resolve container, text and spinner styles for a button."""
    colors = theme.colors
    spacing = theme.spacing
    container: dict[str, Any] = {
        "border_radius": theme.sizing.border_radius,
        "background_color": colors.primary,
    }

    if config.size == ButtonSize.SMALL:
        container.update(padding_horizontal=spacing.lg, padding_vertical=spacing.sm, min_height=32)
    elif config.size == ButtonSize.LARGE:
        container.update(padding_horizontal=spacing.xxl, padding_vertical=spacing.lg,
                         min_height=theme.sizing.button_height)
    else:
        container.update(padding_horizontal=spacing.xl, padding_vertical=spacing.md,
                         min_height=theme.sizing.input_height)

    container.update(_variant_overrides(config.variant, theme))

    if not config.is_interactive:
        container["opacity"] = 0.5

    text_style = theme.typography.button.with_overrides(
        color=colors.primary if config.variant.is_transparent else ON_PRIMARY_TEXT
    )
    if config.size == ButtonSize.SMALL:
        text_style = text_style.with_overrides(font_size=14)

    return ButtonStyle(container=container, text=asdict(text_style), spinner_color=text_style.color)


def _variant_overrides(variant: ButtonVariant, theme: ResolvedTheme) -> dict[str, Any]:
    colors = theme.colors
    overrides: dict[ButtonVariant, dict[str, Any]] = {
        ButtonVariant.PRIMARY: {},
        ButtonVariant.SECONDARY: {
            "background_color": "transparent",
            "border_width": 1,
            "border_color": colors.primary,
        },
        ButtonVariant.OUTLINE: {
            "background_color": "transparent",
            "border_width": 1,
            "border_color": colors.border,
        },
        ButtonVariant.GHOST: {"background_color": "transparent"},
        ButtonVariant.DANGER: {"background_color": colors.error},
        ButtonVariant.SUCCESS: {"background_color": colors.success},
    }
    return overrides[variant]
