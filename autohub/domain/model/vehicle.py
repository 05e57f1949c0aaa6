"""Vehicle catalogue entry."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from autohub.domain.model.common import DomainModel, utcnow
from autohub.domain.value import DriveType, FuelType, Transmission, VehicleId
from autohub.domain.value.common import ValueObject


class VehiclePerformance(ValueObject):
    """Engine, drivetrain and safety figures.

    Most figures are free text because sources quote them with units
    ("150 hp @ 6000 rpm", "9.8 s").
    """

    engine: str = Field(default="", max_length=200)
    transmission: Optional[Transmission] = None
    displacement: str = Field(default="", max_length=50)
    cylinders: Optional[int] = Field(default=None, ge=0, le=16)
    horsepower: str = Field(default="", max_length=50)
    torque: str = Field(default="", max_length=50)
    brake_spec: str = Field(default="", max_length=200)
    tire_spec: str = Field(default="", max_length=200)
    airbags: Optional[int] = Field(default=None, ge=0)
    acceleration: str = Field(default="", max_length=50)
    top_speed: str = Field(default="", max_length=50)
    suspension: str = Field(default="", max_length=200)


class VehicleFeatures(ValueObject):
    exterior: list[str] = Field(default_factory=list)
    interior: list[str] = Field(default_factory=list)
    comfort_and_convenience: list[str] = Field(default_factory=list)
    safety: list[str] = Field(default_factory=list)
    infotainment: list[str] = Field(default_factory=list)


class VehicleDimensions(ValueObject):
    """Technical specification; lengths in mm, weights in kg, boot in litres."""

    length: Optional[float] = Field(default=None, ge=0)
    width: Optional[float] = Field(default=None, ge=0)
    height: Optional[float] = Field(default=None, ge=0)
    wheelbase: Optional[float] = Field(default=None, ge=0)
    ground_clearance: Optional[float] = Field(default=None, ge=0)
    vehicle_weight: Optional[float] = Field(default=None, ge=0)
    max_payload: Optional[float] = Field(default=None, ge=0)
    boot_space: Optional[float] = Field(default=None, ge=0)
    drag_coefficient: Optional[float] = Field(default=None, ge=0)


class VehicleDetails(ValueObject):
    """Fields staff enter when adding or editing a vehicle."""

    name: str = Field(min_length=1, max_length=200)
    make: str = Field(min_length=1, max_length=100)
    model: str = Field(min_length=1, max_length=100)
    year: int = Field(ge=1886, le=2100)
    price: float = Field(default=0, ge=0)
    body_type: str = Field(default="", max_length=50)
    drive_type: Optional[DriveType] = None
    fuel_type: Optional[FuelType] = None
    doors: Optional[int] = Field(default=None, ge=0, le=10)
    seats: Optional[int] = Field(default=None, ge=0, le=100)
    variants: list[str] = Field(default_factory=list)
    description: str = Field(default="", max_length=10000)
    performance: VehiclePerformance = VehiclePerformance()
    features: VehicleFeatures = VehicleFeatures()
    dimensions: VehicleDimensions = VehicleDimensions()
    image_urls: list[str] = Field(default_factory=list)


EDITABLE_VEHICLE_FIELDS = frozenset(VehicleDetails.model_fields)


class Vehicle(DomainModel):
    """A car model in the catalogue.

    Business rules:
    - Only staff add vehicles; only moderators edit or remove them
    - Reviews of a vehicle carry its name as their item title
    """

    id: VehicleId
    name: str = Field(min_length=1, max_length=200)
    make: str = Field(min_length=1, max_length=100)
    model: str = Field(min_length=1, max_length=100)
    year: int = Field(ge=1886, le=2100)
    price: float = Field(default=0, ge=0)
    body_type: str = Field(default="", max_length=50)
    drive_type: Optional[DriveType] = None
    fuel_type: Optional[FuelType] = None
    doors: Optional[int] = Field(default=None, ge=0, le=10)
    seats: Optional[int] = Field(default=None, ge=0, le=100)
    variants: list[str] = Field(default_factory=list)
    description: str = Field(default="", max_length=10000)
    performance: VehiclePerformance = VehiclePerformance()
    features: VehicleFeatures = VehicleFeatures()
    dimensions: VehicleDimensions = VehicleDimensions()
    image_urls: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
