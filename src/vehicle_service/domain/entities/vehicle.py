"""Vehicle entity."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Vehicle:
    """A client's vehicle."""

    id: str = ""
    make: str = ""
    model: str = ""
    year: int | None = None
    color: str = ""
    license_plate: str = ""
    vin: str | None = None
    mileage: int | None = None
    image: str | None = None
    owner_id: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Vehicle":
        """Create a Vehicle from a backend JSON record."""
        known = {"id", "make", "model", "year", "color", "licensePlate",
                 "vin", "mileage", "image", "ownerId"}
        owner = data.get("ownerId")
        return cls(
            id=str(data.get("id", "")),
            make=data.get("make", ""),
            model=data.get("model", ""),
            year=data.get("year"),
            color=data.get("color") or "",
            license_plate=data.get("licensePlate") or "",
            vin=data.get("vin"),
            mileage=data.get("mileage"),
            image=data.get("image"),
            owner_id=str(owner) if owner is not None else None,
            metadata={k: v for k, v in data.items() if k not in known},
        )

    def to_form_data(self) -> dict[str, Any]:
        """Get values for pre-filling the vehicle form in edit mode."""
        return {
            "make": self.make,
            "model": self.model,
            "year": self.year,
            "color": self.color,
            "license_plate": self.license_plate,
            "vin": self.vin,
            "mileage": self.mileage,
            "image": self.image,
        }

    @property
    def display_name(self) -> str:
        """Get display name for the vehicle."""
        name = f"{self.make} {self.model}".strip()
        if self.year:
            name = f"{self.year} {name}"
        return name or self.license_plate or self.id

    def __str__(self) -> str:
        return f"Vehicle({self.display_name})"
