"""Tests for theme resolution and the theme controller."""

import pytest

from vehicle_service.domain.repositories.preference_store import THEME_PREFERENCE_KEY
from vehicle_service.domain.services.theme_resolver import (
    DARK_THEME,
    LIGHT_THEME,
    ThemeController,
    get_current_theme,
)
from vehicle_service.domain.value_objects.theme import ColorScheme
from vehicle_service.infrastructure.storage.memory_store import InMemoryPreferenceStore


class TestStaticThemes:
    def test_selects_by_flag(self):
        assert get_current_theme(True) is DARK_THEME
        assert get_current_theme(False) is LIGHT_THEME

    def test_palettes_share_tokens(self):
        assert LIGHT_THEME.colors.as_dict().keys() == DARK_THEME.colors.as_dict().keys()

    def test_spacing_and_sizing_are_shared(self):
        assert LIGHT_THEME.spacing == DARK_THEME.spacing
        assert LIGHT_THEME.sizing == DARK_THEME.sizing
        assert LIGHT_THEME.spacing.md == 16
        assert LIGHT_THEME.sizing.input_height == 48

    def test_typography_follows_palette(self):
        assert LIGHT_THEME.typography.h1.color == LIGHT_THEME.colors.text
        assert DARK_THEME.typography.error.color == DARK_THEME.colors.error

    def test_dark_flag(self):
        assert DARK_THEME.is_dark
        assert not LIGHT_THEME.is_dark
        assert ColorScheme.from_dark_flag(True) == ColorScheme.DARK
        assert ColorScheme.from_dark_flag(False) == ColorScheme.LIGHT

    def test_typography_override_leaves_original(self):
        button = LIGHT_THEME.typography.button
        small = button.with_overrides(font_size=14, color="#fff")

        assert (small.font_size, small.color) == (14, "#fff")
        assert small.font_weight == button.font_weight
        assert button.font_size == 16
        assert button.color is None


class TestLoad:
    async def test_no_preference_follows_dark_system(self, store):
        controller = ThemeController(store, ColorScheme.DARK)
        theme = await controller.load()

        assert controller.is_dark is True
        assert theme is DARK_THEME
        assert controller.follows_system
        assert controller.is_loaded

    async def test_stored_preference_wins(self):
        store = InMemoryPreferenceStore({THEME_PREFERENCE_KEY: "light"})
        controller = ThemeController(store, ColorScheme.DARK)
        await controller.load()

        assert controller.is_dark is False
        assert controller.stored_preference == ColorScheme.LIGHT

    async def test_unknown_stored_value_is_ignored(self):
        store = InMemoryPreferenceStore({THEME_PREFERENCE_KEY: "sepia"})
        controller = ThemeController(store, ColorScheme.DARK)
        await controller.load()

        assert controller.is_dark
        assert controller.follows_system

    async def test_store_failure_falls_back_to_system(self, broken_store):
        controller = ThemeController(broken_store, ColorScheme.DARK)
        await controller.load()
        assert controller.is_dark


class TestExplicitChoice:
    async def test_set_theme_persists(self, store):
        controller = ThemeController(store)
        await controller.load()
        await controller.set_theme("dark")

        assert controller.is_dark
        assert store.snapshot() == {THEME_PREFERENCE_KEY: "dark"}

    async def test_explicit_choice_survives_system_change(self, store):
        controller = ThemeController(store, ColorScheme.LIGHT)
        await controller.load()
        await controller.set_theme("light")

        controller.on_system_scheme_change(ColorScheme.DARK)

        assert controller.is_dark is False
        assert controller.system_scheme == ColorScheme.DARK

    async def test_toggle(self, store):
        controller = ThemeController(store)
        await controller.load()

        await controller.toggle_theme()
        assert controller.is_dark
        await controller.toggle_theme()
        assert not controller.is_dark
        assert store.snapshot()[THEME_PREFERENCE_KEY] == "light"

    async def test_invalid_name(self, store):
        controller = ThemeController(store)
        with pytest.raises(ValueError):
            await controller.set_theme("purple")
        assert store.snapshot() == {}

    async def test_save_failure_still_applies_in_memory(self, broken_store):
        controller = ThemeController(broken_store)
        await controller.set_theme(ColorScheme.DARK)
        assert controller.is_dark


class TestSystemScheme:
    async def test_follows_system_changes(self, store):
        controller = ThemeController(store)
        await controller.load()

        controller.on_system_scheme_change("dark")
        assert controller.is_dark
        controller.on_system_scheme_change(ColorScheme.LIGHT)
        assert not controller.is_dark

    async def test_reset_returns_to_system(self, store):
        controller = ThemeController(store, ColorScheme.DARK)
        await controller.load()
        await controller.set_theme("light")

        await controller.reset_to_system_theme()

        assert controller.is_dark
        assert controller.follows_system
        assert THEME_PREFERENCE_KEY not in store.snapshot()

    async def test_reset_then_system_change_applies(self, store):
        controller = ThemeController(store, ColorScheme.LIGHT)
        await controller.set_theme("light")
        await controller.reset_to_system_theme()

        controller.on_system_scheme_change(ColorScheme.DARK)
        assert controller.is_dark


class TestListeners:
    async def test_notified_on_recompute(self, store):
        controller = ThemeController(store)
        seen = []
        controller.subscribe(lambda theme: seen.append(theme.scheme))

        await controller.load()
        await controller.toggle_theme()

        assert seen == [ColorScheme.LIGHT, ColorScheme.DARK]

    async def test_unsubscribe(self, store):
        controller = ThemeController(store)
        seen = []
        unsubscribe = controller.subscribe(seen.append)
        unsubscribe()
        unsubscribe()

        await controller.toggle_theme()
        assert seen == []

    async def test_not_notified_when_preference_pins_theme(self, store):
        controller = ThemeController(store)
        await controller.set_theme("dark")
        seen = []
        controller.subscribe(seen.append)

        controller.on_system_scheme_change(ColorScheme.LIGHT)
        assert seen == []
