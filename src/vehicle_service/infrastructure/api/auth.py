"""Login, registration and logout."""

import logging
from collections.abc import Mapping
from typing import Any

from vehicle_service.domain.entities.user import Session, User
from vehicle_service.domain.services.form_schemas import registration_payload
from vehicle_service.infrastructure.api._payload import blank_to_none
from vehicle_service.infrastructure.api.gateway import ApiGateway
from vehicle_service.infrastructure.api.schemas import AuthResponse, LoginRequest, RegisterRequest

logger = logging.getLogger("vehicle_service.auth")


class AuthService:
    """Owns the session and keeps the gateway token in step with it."""

    def __init__(self, gateway: ApiGateway, session: Session | None = None):
        self.gateway = gateway
        self.session = session or Session()

    async def login(self, email: str, password: str) -> Session:
        """Authenticate and start a session.

        Raises:
            AuthenticationFailed: If the credentials are rejected
        """
        logger.info(f"Attempting login for: {email}")
        body = LoginRequest(email=email, password=password).to_payload()
        response = await self.gateway.post("/users/login", body)
        return self._start_session(response)

    async def register(self, form_values: Mapping[str, Any]) -> Session:
        """Create an account from validated registration form values."""
        request = RegisterRequest(**blank_to_none(registration_payload(form_values)))
        logger.info(f"Attempting registration for: {request.email}")
        response = await self.gateway.post("/users/register", request.to_payload())
        return self._start_session(response)

    def logout(self) -> None:
        """End the session; later requests go out unauthenticated."""
        self.gateway.clear_token()
        self.session.clear()
        logger.info("Logged out")

    def restore(self, token: str, user: User | None = None) -> Session:
        """Resume a session from a previously issued token."""
        self.session.token = token
        self.session.user = user
        self.gateway.set_token(token)
        return self.session

    def _start_session(self, response: Any) -> Session:
        auth = AuthResponse.model_validate(response)
        self.session.token = auth.token
        self.session.user = User.from_api(auth.user) if auth.user else None
        self.gateway.set_token(auth.token)
        logger.info(f"Session started for: {self.session.user.display_name if self.session.user else 'unknown user'}")
        return self.session
