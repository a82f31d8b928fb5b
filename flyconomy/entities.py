"""Plain data records describing the world and the airline's assets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

Timestamp = int
"""Simulation time in milliseconds."""


def _require(data: Mapping[str, Any], key: str, kind: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise KeyError(f"missing field {key!r} in {kind}") from None


@dataclass
class Aerodrome:
    """An airport at a geographic position."""

    id: int = 0
    lat: float = 0.0
    lon: float = 0.0
    name: str = ""
    code: str = ""
    interest_score: float = 0.0
    passengers: int | None = None

    @classmethod
    def frankfurt(cls) -> Aerodrome:
        return cls(340, 50.033333, 8.570556, "Frankfurt am Main Airport", "FRA/EDDF")

    @classmethod
    def paris(cls) -> Aerodrome:
        return cls(
            1382,
            49.012798,
            2.55,
            "Charles de Gaulle International Airport",
            "CDG/LFPG",
        )


@dataclass
class PlaneType:
    """A model of aircraft that can be bought."""

    id: int = 0
    name: str = "Small Plane"
    cost: float = 100000.0
    monthly_income: float = 0.0
    speed: float = 800.0
    range: float = 4000.0
    seats: int = 150
    fuel_consumption_per_km: float = 3.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PlaneType:
        """Build a plane type from a mapping holding every field."""
        kind = "plane type"
        return cls(
            id=int(_require(data, "id", kind)),
            name=str(_require(data, "name", kind)),
            cost=float(_require(data, "cost", kind)),
            monthly_income=float(_require(data, "monthly_income", kind)),
            speed=float(_require(data, "speed", kind)),
            range=float(_require(data, "range", kind)),
            seats=int(_require(data, "seats", kind)),
            fuel_consumption_per_km=float(_require(data, "fuel_consumption_per_km", kind)),
        )


@dataclass
class AirPlane:
    """An aircraft owned by the airline and stationed at a base."""

    id: int = 0
    base_id: int = 0
    plane_type: PlaneType = field(default_factory=PlaneType)


@dataclass
class Attraction:
    """A point of interest that draws travellers."""

    id: int = 0
    lat: float = 0.0
    lon: float = 0.0
    name: str = ""
    description: str = ""


@dataclass
class WorldHeritageSite:
    """A world heritage site that draws travellers."""

    id: int = 0
    lat: float = 0.0
    lon: float = 0.0
    name: str = ""
    description: str = ""


@dataclass
class Base:
    """A home base at an aerodrome where planes are stationed."""

    id: int
    aerodrome: Aerodrome
    airplane_ids: list[int] = field(default_factory=list)


@dataclass
class LandingRights:
    """The right to land at an aerodrome."""

    id: int
    aerodrome: Aerodrome


@dataclass
class EnvironmentConfig:
    """Economic parameters of a level."""

    start_capital: float = 1_000_000.0
    landing_rights_cost: float = 100_000.0
    base_cost: float = 400_000.0
    takeoff_cost: float = 500.0
    fuel_cost_per_km: float = 0.5
    income_per_km: float = 5.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> EnvironmentConfig:
        """Build a configuration from a mapping holding every field."""
        kind = "environment config"
        return cls(
            start_capital=float(_require(data, "start_capital", kind)),
            landing_rights_cost=float(_require(data, "landing_rights_cost", kind)),
            base_cost=float(_require(data, "base_cost", kind)),
            takeoff_cost=float(_require(data, "takeoff_cost", kind)),
            fuel_cost_per_km=float(_require(data, "fuel_cost_per_km", kind)),
            income_per_km=float(_require(data, "income_per_km", kind)),
        )