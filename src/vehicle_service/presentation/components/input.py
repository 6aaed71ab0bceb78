"""Text input configuration bound to the form controller's field/error contract."""

from dataclasses import asdict, dataclass
from typing import Any

from vehicle_service.domain.services.form_state import FormStateController
from vehicle_service.domain.value_objects.theme import ResolvedTheme


@dataclass(frozen=True)
class InputConfig:
    """Options for a text input."""
    label: str | None = None
    placeholder: str = ""
    value: str = ""
    error: str | None = None
    secure: bool = False
    multiline: bool = False
    editable: bool = True
    required: bool = False

    @classmethod
    def bind(cls, controller: FormStateController, key: str, **options: Any) -> "InputConfig":
        """Build a config from the current value and error of a form field."""
        value = controller.value(key)
        return cls(
            value="" if value is None else str(value),
            error=controller.error(key),
            **options,
        )

    @property
    def display_label(self) -> str | None:
        if self.label and self.required:
            return f"{self.label} *"
        return self.label


@dataclass(frozen=True)
class InputStyle:
    """Resolved style records for one input."""
    container: dict[str, Any]
    label: dict[str, Any]
    text: dict[str, Any]
    error_text: dict[str, Any] | None
    placeholder_color: str


def input_style(config: InputConfig, theme: ResolvedTheme, focused: bool = False) -> InputStyle:
    """Resolve styles; an error border takes precedence over the focus border."""
    colors = theme.colors
    container: dict[str, Any] = {
        "border_width": 1,
        "border_color": colors.border,
        "background_color": colors.surface,
        "border_radius": theme.sizing.border_radius,
        "min_height": theme.sizing.input_height * (2 if config.multiline else 1),
    }
    if focused:
        container.update(border_color=colors.primary, border_width=2)
    if config.error:
        container.update(border_color=colors.error, border_width=2)
    if not config.editable:
        container.update(background_color=colors.disabled, opacity=0.6)

    return InputStyle(
        container=container,
        label=asdict(theme.typography.label),
        text=asdict(theme.typography.input),
        error_text=asdict(theme.typography.error) if config.error else None,
        placeholder_color=colors.text_light,
    )
