"""Theme value objects: color palettes, typography and the resolved theme."""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any


class ColorScheme(Enum):
    """Light or dark appearance."""
    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def from_dark_flag(cls, is_dark: bool) -> "ColorScheme":
        """Map the rendering flag back to a scheme."""
        return cls.DARK if is_dark else cls.LIGHT


@dataclass(frozen=True)
class ColorPalette:
    """Named color tokens. Both palettes expose the same keys."""
    primary: str
    secondary: str
    success: str
    warning: str
    error: str
    info: str
    background: str
    surface: str
    card: str
    text: str
    text_secondary: str
    text_light: str
    border: str
    separator: str
    placeholder: str
    disabled: str
    overlay: str
    backdrop: str

    def as_dict(self) -> dict[str, str]:
        """Get the palette as a token -> color mapping."""
        return asdict(self)

    def tinted(self, token: str, alpha_hex: str = "20") -> str:
        """Get a translucent variant of a hex color token."""
        return f"{getattr(self, token)}{alpha_hex}"


@dataclass(frozen=True)
class TypographyStyle:
    """A single text style record."""
    font_size: int
    font_weight: str
    line_height: int
    color: str | None = None

    def with_overrides(self, **changes: Any) -> "TypographyStyle":
        """Create a copy with some fields replaced."""
        values = asdict(self)
        values.update(changes)
        return TypographyStyle(**values)


@dataclass(frozen=True)
class Typography:
    """Typography tokens for one palette."""
    h1: TypographyStyle
    h2: TypographyStyle
    h3: TypographyStyle
    h4: TypographyStyle
    h5: TypographyStyle
    h6: TypographyStyle
    body1: TypographyStyle
    body2: TypographyStyle
    caption: TypographyStyle
    label: TypographyStyle
    input: TypographyStyle
    button: TypographyStyle
    error: TypographyStyle

    def as_dict(self) -> dict[str, dict[str, Any]]:
        """Get typography as token -> style record mapping."""
        return asdict(self)


@dataclass(frozen=True)
class Spacing:
    """Spacing scale in density-independent pixels."""
    xs: int = 4
    sm: int = 8
    md: int = 16
    lg: int = 24
    xl: int = 32
    xxl: int = 48
    container: int = 20
    section: int = 16
    item: int = 12


@dataclass(frozen=True)
class Sizing:
    """Fixed component dimensions."""
    input_height: int = 48
    button_height: int = 52
    border_radius: int = 8
    icon_size: int = 24


@dataclass(frozen=True)
class ResolvedTheme:
    """The concrete theme selected for a render pass.

    Immutable; a new instance is produced whenever the dark flag changes.
    """
    scheme: ColorScheme
    colors: ColorPalette
    typography: Typography
    spacing: Spacing = field(default_factory=Spacing)
    sizing: Sizing = field(default_factory=Sizing)

    @property
    def is_dark(self) -> bool:
        """Check if this is the dark theme."""
        return self.scheme == ColorScheme.DARK

    def as_dict(self) -> dict[str, Any]:
        """Get the public theme contract as plain data."""
        return {
            "colors": self.colors.as_dict(),
            "typography": self.typography.as_dict(),
            "spacing": asdict(self.spacing),
            "sizing": asdict(self.sizing),
            "is_dark": self.is_dark,
        }

    def __str__(self) -> str:
        return f"ResolvedTheme({self.scheme.value})"
