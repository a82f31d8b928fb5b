"""Commands that buy planes and put them into service on scheduled flights."""

from __future__ import annotations

import copy
import itertools
from dataclasses import dataclass, field
from typing import ClassVar, Iterator

from .commands import Command, CommandError, InsufficientFundsError
from .entities import Aerodrome, AirPlane, PlaneType, Timestamp
from .environment import Environment
from .flight import Finished, Flight, Scheduled

MAX_PLANES_PER_BASE = 5


class BaseNotFoundError(CommandError):
    """The home base named for a plane does not exist."""

    def __init__(self, base_id: int) -> None:
        self.base_id = base_id
        super().__init__("Base not found")


class NoSpaceAtBaseError(CommandError):
    """The home base already holds as many planes as it can."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No space at base: {name}")


class AirplaneInUseError(CommandError):
    """The airplane is already assigned to an unfinished flight."""

    def __init__(self) -> None:
        super().__init__(
            "Cannot schedule the flight because the airplane is already in use"
        )


class DistanceBeyondRangeError(CommandError):
    """A leg of the flight is longer than the airplane can fly."""

    def __init__(self) -> None:
        super().__init__(
            "Cannot schedule the flight because the distance is beyond the airplane's range"
        )


class AirplaneNotLocatedAtOriginError(CommandError):
    """The airplane is not stationed at a base at the origin aerodrome."""

    def __init__(self) -> None:
        super().__init__("The airplane is not located at the origin aerodrome")


@dataclass
class BuyPlaneCommand(Command):
    """Buy a plane and station it at a home base."""

    plane_id: int
    plane_type: PlaneType
    home_base_id: int

    _ids: ClassVar[Iterator[int]] = itertools.count()

    @classmethod
    def generate_id(cls) -> int:
        return next(cls._ids)

    def execute(self, environment: Environment) -> str | None:
        finances = environment.company_finances
        cost = float(self.plane_type.cost)
        cash = finances.cash(environment.timestamp)
        if cash < cost:
            raise InsufficientFundsError(cost, cash)

        base = next(
            (base for base in environment.bases if base.id == self.home_base_id), None
        )
        if base is None:
            raise BaseNotFoundError(self.home_base_id)
        if len(base.airplane_ids) >= MAX_PLANES_PER_BASE:
            raise NoSpaceAtBaseError(base.aerodrome.name)

        airplane = AirPlane(
            id=self.plane_id,
            base_id=self.home_base_id,
            plane_type=copy.deepcopy(self.plane_type),
        )
        base.airplane_ids.append(airplane.id)
        environment.planes.append(airplane)
        finances.add_expense(environment.timestamp, cost)
        return None


@dataclass
class ScheduleFlightCommand(Command):
    """Schedule a round trip for a plane and book its expected profit."""

    flight_id: int
    airplane: AirPlane
    origin_aerodrome: Aerodrome
    stopovers: list[Aerodrome] = field(default_factory=list)
    departure_time: Timestamp = 0

    _ids: ClassVar[Iterator[int]] = itertools.count()

    @classmethod
    def generate_id(cls) -> int:
        return next(cls._ids)

    def execute(self, environment: Environment) -> str | None:
        airplane_id = self.airplane.id
        if any(
            flight.airplane.id == airplane_id and not isinstance(flight.state, Finished)
            for flight in environment.flights
        ):
            raise AirplaneInUseError()

        flight = Flight(
            flight_id=self.flight_id,
            airplane=copy.deepcopy(self.airplane),
            origin_aerodrome=copy.deepcopy(self.origin_aerodrome),
            stopovers=copy.deepcopy(self.stopovers),
            departure_time=self.departure_time,
            segment_departure_time=self.departure_time,
            arrival_time=None,
            state=Scheduled(),
        )

        if not flight.is_plane_range_sufficient():
            raise DistanceBeyondRangeError()

        if not any(
            self.origin_aerodrome.id == base.aerodrome.id
            and airplane_id in base.airplane_ids
            for base in environment.bases
        ):
            raise AirplaneNotLocatedAtOriginError()

        profit = flight.calculate_profit()
        environment.flights.append(flight)
        environment.company_finances.add_income(environment.timestamp, profit)
        return None