"""Sampled time series describing how the airline performed."""

from __future__ import annotations

from typing import Iterable, Iterator

from .entities import Timestamp
from .environment import Environment
from .flight import Finished, Flight

SAMPLES = 100
SEVEN_DAYS_MS = 7 * 24 * 60 * 60 * 1000


def _timestamp_samples(total_timestamps: int, samples: int) -> range:
    interval = max(total_timestamps // samples, 1)
    return range(interval, total_timestamps + interval, interval)


def _arrival(flight: Flight) -> Timestamp:
    if flight.arrival_time is None:
        raise ValueError(f"finished flight {flight.flight_id} has no arrival time")
    return flight.arrival_time


def _finished_by(flights: Iterable[Flight], timestamp: Timestamp) -> Iterator[Flight]:
    for flight in flights:
        if isinstance(flight.state, Finished) and _arrival(flight) <= timestamp:
            yield flight


def calculate_cash_history(environment: Environment) -> list[tuple[Timestamp, float]]:
    finances = environment.company_finances
    return [
        (timestamp, finances.cash(timestamp))
        for timestamp in _timestamp_samples(environment.timestamp, SAMPLES)
    ]


def calculate_total_flight_distance(
    environment: Environment,
) -> list[tuple[Timestamp, float]]:
    """Kilometres flown by flights finished at each sample time."""
    return [
        (
            timestamp,
            sum(
                (
                    flight.calculate_total_distance()
                    for flight in _finished_by(environment.iter_flights(), timestamp)
                ),
                0.0,
            ),
        )
        for timestamp in _timestamp_samples(environment.timestamp, SAMPLES)
    ]


def calculate_transported_passengers(
    environment: Environment,
) -> list[tuple[Timestamp, int]]:
    """Passengers carried by flights finished at each sample time."""
    return [
        (
            timestamp,
            sum(
                flight.calculate_booked_seats()
                for flight in _finished_by(environment.iter_flights(), timestamp)
            ),
        )
        for timestamp in _timestamp_samples(environment.timestamp, SAMPLES)
    ]


def calculate_average_profit_per_flight(
    environment: Environment,
) -> list[tuple[Timestamp, float]]:
    """Mean profit of flights that finished in the seven days before each sample."""
    history = []
    for timestamp in _timestamp_samples(environment.timestamp, SAMPLES):
        recent = [
            flight
            for flight in _finished_by(environment.iter_flights(), timestamp)
            if _arrival(flight) > timestamp - SEVEN_DAYS_MS
        ]
        total = sum((flight.calculate_profit() for flight in recent), 0.0)
        history.append((timestamp, total / len(recent) if recent else 0.0))
    return history