"""Application context: wires settings, API services and theme state together.

The context is built once at the composition root and passed to whatever
needs it; nothing in the package keeps process-wide singletons.
"""

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from vehicle_service.domain.entities.user import Session
from vehicle_service.domain.repositories.preference_store import (
    USER_TOKEN_KEY,
    PreferenceStore,
    PreferenceStoreError,
)
from vehicle_service.domain.services.form_state import FormSchema, FormStateController
from vehicle_service.domain.services.theme_resolver import ThemeController
from vehicle_service.domain.value_objects.theme import ColorScheme, ResolvedTheme
from vehicle_service.infrastructure.api.auth import AuthService
from vehicle_service.infrastructure.api.gateway import ApiGateway
from vehicle_service.infrastructure.api.metrics import MetricsService
from vehicle_service.infrastructure.api.service_requests import ServiceRequestService
from vehicle_service.infrastructure.api.users import UserService
from vehicle_service.infrastructure.api.vehicles import VehicleService
from vehicle_service.infrastructure.storage.json_store import JsonFilePreferenceStore
from vehicle_service.shared.config.settings import Settings, get_settings

logger = logging.getLogger("vehicle_service.app")


@dataclass
class AppContext:
    """Everything a screen needs, injected by reference."""
    settings: Settings
    store: PreferenceStore
    gateway: ApiGateway
    theme: ThemeController
    auth: AuthService
    vehicles: VehicleService
    service_requests: ServiceRequestService
    metrics: MetricsService
    users: UserService

    @property
    def session(self) -> Session:
        return self.auth.session

    @property
    def current_theme(self) -> ResolvedTheme:
        return self.theme.theme

    def create_form(self, schema: FormSchema,
                    initial_data: dict[str, Any] | None = None) -> FormStateController:
        """Create a fresh form controller for a screen."""
        return FormStateController.from_schema(schema, initial_data)

    async def start(self) -> None:
        """Load the theme preference and any saved session token."""
        await self.theme.load()
        try:
            token = await self.store.get(USER_TOKEN_KEY)
        except PreferenceStoreError as e:
            logger.warning(f"Error loading saved session: {e}")
            return
        if token:
            self.auth.restore(token)

    async def remember_session(self) -> bool:
        """Persist the current token so the next start is authenticated.

        Returns:
            True if the token was saved
        """
        if not self.session.token:
            return False
        try:
            await self.store.set(USER_TOKEN_KEY, self.session.token)
        except PreferenceStoreError as e:
            logger.warning(f"Error saving session: {e}")
            return False
        return True

    async def logout(self) -> None:
        """End the session and forget the saved token."""
        self.auth.logout()
        try:
            await self.store.remove(USER_TOKEN_KEY)
        except PreferenceStoreError as e:
            logger.warning(f"Error clearing saved session: {e}")

    async def close(self) -> None:
        await self.gateway.close()


def create_app_context(
    settings: Settings | None = None,
    store: PreferenceStore | None = None,
    system_scheme: ColorScheme = ColorScheme.LIGHT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AppContext:
    """Build an AppContext from settings.

    Args:
        settings: Settings to use (defaults to the cached environment settings)
        store: Preference store (defaults to a JSON file from the theme settings)
        system_scheme: Current platform color scheme
        transport: Optional httpx transport, e.g. for tests

    Returns:
        A ready-to-start AppContext
    """
    settings = settings or get_settings()
    gateway = ApiGateway(
        base_url=settings.api.base_url,
        timeout=settings.api.timeout,
        transport=transport,
    )
    store = store or JsonFilePreferenceStore(settings.theme.preference_file)
    return AppContext(
        settings=settings,
        store=store,
        gateway=gateway,
        theme=ThemeController(store, system_scheme),
        auth=AuthService(gateway),
        vehicles=VehicleService(gateway),
        service_requests=ServiceRequestService(gateway),
        metrics=MetricsService(gateway),
        users=UserService(gateway),
    )
