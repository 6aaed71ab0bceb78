"""User and session entities."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class UserRole(Enum):
    """Account roles."""
    CLIENT = "CLIENT"
    MECHANIC = "MECHANIC"
    ADMIN = "ADMIN"


@dataclass
class User:
    """A registered account."""

    id: str = ""
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    phone_number: str | None = None
    role: UserRole = UserRole.CLIENT
    metadata: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "User":
        """Create a User from a backend JSON record."""
        known = {"id", "email", "firstName", "lastName", "phoneNumber", "role"}
        try:
            role = UserRole(str(data.get("role", UserRole.CLIENT.value)).upper())
        except ValueError:
            role = UserRole.CLIENT
        return cls(
            id=str(data.get("id", "")),
            email=data.get("email", ""),
            first_name=data.get("firstName", ""),
            last_name=data.get("lastName", ""),
            phone_number=data.get("phoneNumber"),
            role=role,
            metadata={k: v for k, v in data.items() if k not in known},
        )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def display_name(self) -> str:
        """Get display name for the user."""
        return self.full_name or self.email or self.id

    def __str__(self) -> str:
        return f"User({self.display_name}, {self.role.value})"


@dataclass
class Session:
    """Authentication state owned by the auth service."""

    token: str | None = None
    user: User | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def clear(self) -> None:
        """Forget the token and user."""
        self.token = None
        self.user = None
