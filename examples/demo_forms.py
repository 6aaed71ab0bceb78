"""Form and theme walkthrough - runs without a backend."""

import asyncio
import sys

sys.path.insert(0, "src")

from vehicle_service.domain.services.form_schemas import VEHICLE_FORM, vehicle_payload
from vehicle_service.domain.services.form_state import FormStateController
from vehicle_service.domain.services.theme_resolver import ThemeController
from vehicle_service.domain.value_objects.theme import ColorScheme
from vehicle_service.infrastructure.storage.memory_store import InMemoryPreferenceStore
from vehicle_service.presentation.components.input import InputConfig, input_style


async def main():
    print("=" * 50)
    print("Vehicle Service - form and theme demo")
    print("=" * 50)

    store = InMemoryPreferenceStore()
    theme = ThemeController(store, ColorScheme.DARK)

    print("\n[1] Load theme (no saved preference, system is dark)...")
    await theme.load()
    print(f"    is_dark={theme.is_dark} follows_system={theme.follows_system}")

    print("\n[2] Pin light theme, then the system switches to dark...")
    await theme.set_theme("light")
    theme.on_system_scheme_change(ColorScheme.DARK)
    print(f"    is_dark={theme.is_dark} stored={store.snapshot()}")

    print("\n[3] Submit an incomplete vehicle form...")
    form = FormStateController.from_schema(VEHICLE_FORM)
    form.set_field("make", "Toyota")
    form.set_field("year", "1800")
    result = form.validate_and_submit(VEHICLE_FORM.validator, lambda values: None)
    for key, message in result.errors.items():
        print(f"    {key}: {message}")

    print("\n[4] Edit the year; its error clears before re-validation...")
    form.set_field("year", "18")
    print(f"    year error: {form.error('year')}")
    style = input_style(InputConfig.bind(form, "model", label="Model"), theme.theme)
    print(f"    model border: {style.container['border_color']}")

    print("\n[5] Fix everything and submit...")
    form.set_field("model", "Camry")
    form.set_field("year", "2020")
    form.set_field("mileage", "45000")
    form.validate_and_submit(
        VEHICLE_FORM.validator,
        lambda values: print(f"    payload: {vehicle_payload(values)}"),
    )

    print("\n" + "=" * 50)
    print("Done")
    print("=" * 50)


if __name__ == "__main__":
    asyncio.run(main())
