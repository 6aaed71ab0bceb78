"""Tests for component styling helpers."""

from vehicle_service.domain.entities.service_request import ServiceStatus
from vehicle_service.domain.services.form_schemas import LOGIN_FORM
from vehicle_service.domain.services.form_state import FormStateController
from vehicle_service.domain.services.theme_resolver import DARK_THEME, LIGHT_THEME
from vehicle_service.domain.services.validation import validate_login_form
from vehicle_service.presentation.components.button import (
    ButtonConfig,
    ButtonSize,
    ButtonVariant,
    button_style,
)
from vehicle_service.presentation.components.filter_chip import (
    FilterChipConfig,
    filter_chip_style,
    select_chip,
)
from vehicle_service.presentation.components.input import InputConfig, input_style
from vehicle_service.presentation.components.status_badge import status_badge


class TestButton:
    def test_primary_uses_theme_primary(self):
        style = button_style(ButtonConfig("Sign in"), DARK_THEME)
        assert style.container["background_color"] == DARK_THEME.colors.primary
        assert style.text["color"] == "#fff"
        assert "opacity" not in style.container

    def test_outline_is_transparent(self):
        style = button_style(ButtonConfig("Cancel", variant=ButtonVariant.OUTLINE), LIGHT_THEME)
        assert style.container["background_color"] == "transparent"
        assert style.container["border_color"] == LIGHT_THEME.colors.border
        assert style.text["color"] == LIGHT_THEME.colors.primary

    def test_loading_dims_and_disables(self):
        config = ButtonConfig("Save", loading=True)
        assert not config.is_interactive
        assert button_style(config, LIGHT_THEME).container["opacity"] == 0.5

    def test_small_size(self):
        style = button_style(ButtonConfig("Edit", size=ButtonSize.SMALL), LIGHT_THEME)
        assert style.text["font_size"] == 14
        assert style.container["padding_vertical"] == LIGHT_THEME.spacing.sm

    def test_danger(self):
        style = button_style(ButtonConfig("Delete", variant=ButtonVariant.DANGER), LIGHT_THEME)
        assert style.container["background_color"] == LIGHT_THEME.colors.error


class TestInput:
    def test_bind_reads_controller(self):
        form = FormStateController.from_schema(LOGIN_FORM)
        form.validate_and_submit(validate_login_form, lambda values: None)

        config = InputConfig.bind(form, "email", label="Email", required=True)

        assert config.error == "This field is required."
        assert config.display_label == "Email *"

        form.set_field("email", "x")
        assert InputConfig.bind(form, "email").error is None

    def test_error_border_beats_focus(self):
        style = input_style(InputConfig(error="Bad"), LIGHT_THEME, focused=True)
        assert style.container["border_color"] == LIGHT_THEME.colors.error
        assert style.error_text["color"] == LIGHT_THEME.colors.error

    def test_focus_border(self):
        style = input_style(InputConfig(), DARK_THEME, focused=True)
        assert style.container["border_color"] == DARK_THEME.colors.primary
        assert style.error_text is None

    def test_read_only(self):
        style = input_style(InputConfig(editable=False), LIGHT_THEME)
        assert style.container["background_color"] == LIGHT_THEME.colors.disabled
        assert style.container["opacity"] == 0.6

    def test_multiline_height(self):
        style = input_style(InputConfig(multiline=True), LIGHT_THEME)
        assert style.container["min_height"] == 96


class TestFilterChip:
    def test_label_with_count(self):
        assert FilterChipConfig("Active", "ACTIVE", count=3).display_label == "Active (3)"
        assert FilterChipConfig("All").display_label == "All"

    def test_select_marks_one(self):
        chips = [FilterChipConfig("All"), FilterChipConfig("Done", "COMPLETED")]
        selected = select_chip(chips, "COMPLETED")
        assert [chip.selected for chip in selected] == [False, True]

    def test_selected_style(self):
        style = filter_chip_style(FilterChipConfig("All", selected=True), LIGHT_THEME)
        assert style["background_color"] == LIGHT_THEME.colors.primary


class TestStatusBadge:
    def test_every_status_has_a_badge(self):
        for status in ServiceStatus:
            assert status_badge(status, LIGHT_THEME).label

    def test_tinted_background(self):
        badge = status_badge(ServiceStatus.PENDING_QUOTE, LIGHT_THEME)
        assert badge.label == "Pending Quote"
        assert badge.color == LIGHT_THEME.colors.warning
        assert badge.background_color == f"{LIGHT_THEME.colors.warning}20"
