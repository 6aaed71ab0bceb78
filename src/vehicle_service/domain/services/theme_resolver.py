"""Theme resolution: picks the light or dark theme from preference and system scheme."""

import logging
from collections.abc import Callable

from vehicle_service.domain.repositories.preference_store import (
    THEME_PREFERENCE_KEY,
    PreferenceStore,
    PreferenceStoreError,
)
from vehicle_service.domain.value_objects.theme import (
    ColorPalette,
    ColorScheme,
    ResolvedTheme,
    Typography,
    TypographyStyle,
)

logger = logging.getLogger("vehicle_service.theme")

ThemeListener = Callable[[ResolvedTheme], None]

LIGHT_COLORS = ColorPalette(
    primary="#007AFF",
    secondary="#FF9500",
    success="#34C759",
    warning="#FF9500",
    error="#FF3B30",
    info="#5AC8FA",
    background="#FFFFFF",
    surface="#F8F9FA",
    card="#FFFFFF",
    text="#1C1C1E",
    text_secondary="#6C7B7F",
    text_light="#8E8E93",
    border="#E5E5EA",
    separator="#C6C6C8",
    placeholder="#C7C7CC",
    disabled="#F2F2F7",
    overlay="rgba(0,0,0,0.4)",
    backdrop="rgba(0,0,0,0.3)",
)

DARK_COLORS = ColorPalette(
    primary="#0A84FF",
    secondary="#FF9F0A",
    success="#32D74B",
    warning="#FF9F0A",
    error="#FF453A",
    info="#64D2FF",
    background="#000000",
    surface="#1C1C1E",
    card="#1C1C1E",
    text="#FFFFFF",
    text_secondary="#AEAEB2",
    text_light="#8E8E93",
    border="#38383A",
    separator="#48484A",
    placeholder="#48484A",
    disabled="#1C1C1E",
    overlay="rgba(0,0,0,0.6)",
    backdrop="rgba(0,0,0,0.5)",
)


def build_typography(colors: ColorPalette) -> Typography:
    """Build the typography table for a palette."""
    return Typography(
        h1=TypographyStyle(32, "700", 40, colors.text),
        h2=TypographyStyle(28, "700", 36, colors.text),
        h3=TypographyStyle(24, "600", 32, colors.text),
        h4=TypographyStyle(20, "600", 28, colors.text),
        h5=TypographyStyle(18, "600", 24, colors.text),
        h6=TypographyStyle(16, "600", 22, colors.text),
        body1=TypographyStyle(16, "400", 22, colors.text),
        body2=TypographyStyle(14, "400", 20, colors.text),
        caption=TypographyStyle(12, "400", 16, colors.text_secondary),
        label=TypographyStyle(14, "500", 20, colors.text_secondary),
        input=TypographyStyle(16, "400", 22, colors.text),
        button=TypographyStyle(16, "600", 22),
        error=TypographyStyle(12, "400", 16, colors.error),
    )


LIGHT_THEME = ResolvedTheme(
    scheme=ColorScheme.LIGHT,
    colors=LIGHT_COLORS,
    typography=build_typography(LIGHT_COLORS),
)

DARK_THEME = ResolvedTheme(
    scheme=ColorScheme.DARK,
    colors=DARK_COLORS,
    typography=build_typography(DARK_COLORS),
)


def get_current_theme(is_dark: bool) -> ResolvedTheme:
    """Select one of the two static themes."""
    return DARK_THEME if is_dark else LIGHT_THEME


class ThemeController:
    """Tracks the dark-mode flag from the stored preference and the system scheme.

    An explicit preference (``toggle_theme``/``set_theme``) wins over system
    scheme changes until ``reset_to_system_theme`` erases it. The controller
    holds no state beyond what it reads from the store and the last system
    scheme it was told about. Store failures are logged, never raised.
    """

    def __init__(self, store: PreferenceStore,
                 system_scheme: ColorScheme = ColorScheme.LIGHT):
        self._store = store
        self._system_scheme = system_scheme
        self._stored_preference: ColorScheme | None = None
        self._is_dark = system_scheme == ColorScheme.DARK
        self._listeners: list[ThemeListener] = []
        self._loaded = False

    @property
    def is_dark(self) -> bool:
        return self._is_dark

    @property
    def stored_preference(self) -> ColorScheme | None:
        """The explicit user choice, or None when following the system."""
        return self._stored_preference

    @property
    def system_scheme(self) -> ColorScheme:
        return self._system_scheme

    @property
    def follows_system(self) -> bool:
        return self._stored_preference is None

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def theme(self) -> ResolvedTheme:
        return get_current_theme(self._is_dark)

    def subscribe(self, listener: ThemeListener) -> Callable[[], None]:
        """Register a listener called after every recompute.

        Returns a callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def load(self) -> ResolvedTheme:
        """Apply the stored preference, falling back to the system scheme."""
        try:
            saved = await self._store.get(THEME_PREFERENCE_KEY)
        except PreferenceStoreError as e:
            logger.warning(f"Error loading theme preference: {e}")
            saved = None
        self._stored_preference = self._parse_preference(saved)
        self._loaded = True
        return self._recompute()

    async def toggle_theme(self) -> ResolvedTheme:
        """Flip the current theme and remember the choice."""
        target = ColorScheme.from_dark_flag(not self._is_dark)
        return await self.set_theme(target)

    async def set_theme(self, name: str | ColorScheme) -> ResolvedTheme:
        """Pin the theme to ``"light"`` or ``"dark"`` and remember the choice.

        Raises:
            ValueError: If ``name`` is not a known scheme
        """
        scheme = name if isinstance(name, ColorScheme) else ColorScheme(name)
        self._stored_preference = scheme
        theme = self._recompute()
        try:
            await self._store.set(THEME_PREFERENCE_KEY, scheme.value)
        except PreferenceStoreError as e:
            logger.warning(f"Error saving theme preference: {e}")
        return theme

    async def reset_to_system_theme(self) -> ResolvedTheme:
        """Forget the explicit choice and follow the system scheme again."""
        self._stored_preference = None
        theme = self._recompute()
        try:
            await self._store.remove(THEME_PREFERENCE_KEY)
        except PreferenceStoreError as e:
            logger.warning(f"Error clearing theme preference: {e}")
        return theme

    def on_system_scheme_change(self, scheme: ColorScheme | str) -> ResolvedTheme:
        """Record a new system scheme; only affects the theme when following the system."""
        self._system_scheme = scheme if isinstance(scheme, ColorScheme) else ColorScheme(scheme)
        if self._stored_preference is not None:
            logger.debug(
                f"System scheme is now {self._system_scheme.value}; "
                f"keeping explicit {self._stored_preference.value} theme"
            )
            return self.theme
        return self._recompute()

    def _recompute(self) -> ResolvedTheme:
        effective = self._stored_preference or self._system_scheme
        self._is_dark = effective == ColorScheme.DARK
        theme = self.theme
        for listener in list(self._listeners):
            listener(theme)
        return theme

    @staticmethod
    def _parse_preference(value: str | None) -> ColorScheme | None:
        if value is None:
            return None
        try:
            return ColorScheme(value)
        except ValueError:
            logger.warning(f"Ignoring unknown theme preference: {value!r}")
            return None

    def __repr__(self) -> str:
        preference = self._stored_preference.value if self._stored_preference else "system"
        return f"{self.__class__.__name__}(preference={preference}, is_dark={self._is_dark})"
