"""Flights, their itineraries and their progress through time."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace

from .entities import Aerodrome, AirPlane, Timestamp
from .geodesy import vincenty_distance

PROFIT_PER_KILOMETER = 1.0
LAYOVER_MS = 30 * 60 * 1000
_MS_PER_HOUR = 3_600_000.0


class FlightState:
    """Base of the states a flight passes through."""


@dataclass(frozen=True)
class Scheduled(FlightState):
    """The flight has not departed yet."""


@dataclass(frozen=True)
class EnRoute(FlightState):
    """The flight is in the air towards the given stopover."""

    next_stopover_index: int = 0


@dataclass(frozen=True)
class Landed(FlightState):
    """The flight is on the ground at the given stopover."""

    next_stopover_index: int = 0


@dataclass(frozen=True)
class Finished(FlightState):
    """The flight has returned to its origin."""


def _round_half_away(value: float) -> int:
    if math.isnan(value):
        return 0
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass
class Flight:
    """A round trip from an origin over a list of stopovers and back.

    The default is a flight from Frankfurt to Paris.
    """

    flight_id: int = 0
    airplane: AirPlane = field(default_factory=AirPlane)
    origin_aerodrome: Aerodrome = field(default_factory=Aerodrome.frankfurt)
    stopovers: list[Aerodrome] = field(default_factory=lambda: [Aerodrome.paris()])
    departure_time: Timestamp = 0
    segment_departure_time: Timestamp = 0
    arrival_time: Timestamp | None = None
    state: FlightState = field(default_factory=Scheduled)

    def calculate_booked_seats(self) -> int:
        seats = float(self.airplane.plane_type.seats)
        booked = seats * (1.0 + 4.0 * self.interest_score() / 5.0)
        return max(_round_half_away(booked), 0)

    def interest_score(self) -> float:
        """Mean interest score of the stopovers; NaN when there are none."""
        if not self.stopovers:
            return math.nan
        return sum(a.interest_score for a in self.stopovers) / len(self.stopovers)

    def calculate_profit(self) -> float:
        return (
            self.calculate_total_distance()
            * PROFIT_PER_KILOMETER
            * float(self.calculate_booked_seats())
        )

    def update_state(self, current_time: Timestamp) -> None:
        """Advance the state machine to the given time."""
        match self.state:
            case Scheduled() if current_time >= self.departure_time:
                self.state = EnRoute(0)
                self.segment_departure_time = self.departure_time
                self._update_arrival_time()
            case EnRoute(next_stopover_index=index) if (
                self.arrival_time is None or current_time >= self.arrival_time
            ):
                if index < len(self.stopovers):
                    self.state = Landed(index)
                    self.segment_departure_time = current_time + LAYOVER_MS
                else:
                    self.state = Finished()
            case Landed(next_stopover_index=index) if (
                current_time >= self.segment_departure_time
            ):
                self.state = EnRoute(index + 1)
                self._update_arrival_time()
            case _:
                pass

    def _update_arrival_time(self) -> None:
        destination = self.current_destination()
        if destination is None:
            return
        distance = self.calculate_distance_between(self.current_origin(), destination)
        speed = float(self.airplane.plane_type.speed)
        self.arrival_time = self.segment_departure_time + int(
            distance / speed * _MS_PER_HOUR
        )

    def estimate_current_position(
        self, timestamp: Timestamp
    ) -> tuple[float, float] | None:
        """Linearly interpolated (lat, lon) on the current leg, if known."""
        match self.state:
            case Scheduled():
                return None
            case Finished():
                return (self.origin_aerodrome.lat, self.origin_aerodrome.lon)
        origin = self.current_origin()
        destination = self.current_destination()
        arrival = self.arrival_time
        if destination is None or arrival is None:
            return None
        if not self.segment_departure_time <= timestamp <= arrival:
            return None
        total = arrival - self.segment_departure_time
        elapsed = timestamp - self.segment_departure_time
        fraction = elapsed / total if total else math.nan
        return (
            origin.lat + fraction * (destination.lat - origin.lat),
            origin.lon + fraction * (destination.lon - origin.lon),
        )

    def calculate_total_distance(self) -> float:
        """Length of the whole round trip in kilometres."""
        return sum(
            self.calculate_distance_between(a, b) for a, b in self._legs()
        )

    @staticmethod
    def calculate_distance_between(aerodrome1: Aerodrome, aerodrome2: Aerodrome) -> float:
        """Geodesic distance between two aerodromes in kilometres."""
        metres = vincenty_distance(
            aerodrome1.lat, aerodrome1.lon, aerodrome2.lat, aerodrome2.lon
        )
        return metres / 1000.0

    def is_plane_range_sufficient(self) -> bool:
        plane_range = float(self.airplane.plane_type.range)
        return all(
            self.calculate_distance_between(a, b) <= plane_range
            for a, b in self._legs()
        )

    def _itinerary(self) -> list[Aerodrome]:
        return [self.origin_aerodrome, *self.stopovers, self.origin_aerodrome]

    def _legs(self):
        itinerary = self._itinerary()
        return zip(itinerary, itinerary[1:])

    def current_origin(self) -> Aerodrome:
        match self.state:
            case EnRoute(next_stopover_index=index) | Landed(next_stopover_index=index):
                if index > 0:
                    return replace(self.stopovers[index - 1])
                return replace(self.origin_aerodrome)
            case Finished():
                last = self.stopovers[-1] if self.stopovers else self.origin_aerodrome
                return replace(last)
            case _:
                return replace(self.origin_aerodrome)

    def current_destination(self) -> Aerodrome | None:
        match self.state:
            case Scheduled():
                return replace(self.stopovers[0]) if self.stopovers else None
            case EnRoute(next_stopover_index=index) | Landed(next_stopover_index=index):
                if index < len(self.stopovers):
                    return replace(self.stopovers[index])
                return replace(self.origin_aerodrome)
            case _:
                return None