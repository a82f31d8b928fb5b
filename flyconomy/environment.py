"""The complete state of a running simulation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .entities import AirPlane, Base, EnvironmentConfig, LandingRights, Timestamp
from .finances import CompanyFinances
from .flight import Flight
from .identity import Identity


@dataclass
class Environment:
    """Everything the airline owns and has done, at the current timestamp."""

    config: EnvironmentConfig = field(default_factory=EnvironmentConfig)
    identity: Identity = field(default_factory=Identity)
    company_finances: CompanyFinances | None = None
    planes: list[AirPlane] = field(default_factory=list)
    bases: list[Base] = field(default_factory=list)
    landing_rights: list[LandingRights] = field(default_factory=list)
    flights: list[Flight] = field(default_factory=list)
    timestamp: Timestamp = 0
    last_errors: list[tuple[Timestamp, str]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.company_finances is None:
            self.company_finances = CompanyFinances(self.config.start_capital)

    def calculate_errors_indicator(self) -> int:
        """Weight of recent errors, decaying with the time since each one."""
        indicator = 0.0
        for when, _message in self.last_errors:
            elapsed = self.timestamp - when
            if elapsed < 0:
                raise ValueError(
                    f"error at {when} lies after the current timestamp {self.timestamp}"
                )
            indicator += 1.0 / (elapsed + 1.0)
        scaled = indicator * 1_000_000.0
        return int(scaled + 0.5)

    def iter_flights(self) -> Iterator[Flight]:
        return iter(self.flights)