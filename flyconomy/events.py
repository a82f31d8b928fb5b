"""Simulation events and the handlers that book their financial effects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from .entities import Aerodrome, PlaneType
from .environment import Environment
from .flight import Flight


class Event(ABC):
    """Something that happened in the simulation."""

    @abstractmethod
    def message(self) -> str:
        """Human-readable description of the event."""


@dataclass
class AirplaneLandedEvent(Event):
    flight: Flight

    def message(self) -> str:
        return (
            f"Flight {self.flight.flight_id} landed in "
            f"{self.flight.current_origin().name}"
        )


@dataclass
class AirplaneTakeoffEvent(Event):
    flight: Flight

    def message(self) -> str:
        return (
            f"Flight {self.flight.flight_id} started from "
            f"{self.flight.origin_aerodrome.name}"
        )


@dataclass
class BuyPlaneEvent(Event):
    plane_type: PlaneType

    def message(self) -> str:
        return f"Bought airplane {self.plane_type.name}"


@dataclass
class CreateBaseEvent(Event):
    aerodrome: Aerodrome

    def message(self) -> str:
        return f"Created base at {self.aerodrome.name}"


@dataclass
class BuyLandingRightsEvent(Event):
    aerodrome: Aerodrome

    def message(self) -> str:
        return f"Bought landing rights at {self.aerodrome.name}"


class EventHandler(ABC):
    """Reacts to events by changing the environment."""

    @abstractmethod
    def handle(self, environment: Environment, event: Event) -> None:
        """Apply the effect of the event, if it concerns this handler."""


class AirplaneLandedEventHandler(EventHandler):
    """Books the profit of a flight when it lands."""

    def handle(self, environment: Environment, event: Event) -> None:
        if isinstance(event, AirplaneLandedEvent):
            environment.company_finances.add_income(
                environment.timestamp, event.flight.calculate_profit()
            )


class AirplaneTakeoffEventHandler(EventHandler):
    """Books takeoff and fuel costs when a flight departs."""

    def handle(self, environment: Environment, event: Event) -> None:
        if isinstance(event, AirplaneTakeoffEvent):
            distance = event.flight.calculate_total_distance()
            fuel_cost = environment.config.fuel_cost_per_km * distance
            takeoff_cost = environment.config.takeoff_cost
            environment.company_finances.add_expense(
                environment.timestamp, takeoff_cost + fuel_cost
            )


@dataclass
class EventManager:
    """Queue of pending events and the handlers applied to them."""

    events: list[Event] = field(default_factory=list)
    event_handlers: list[EventHandler] = field(default_factory=list)

    def add_event(self, event: Event) -> None:
        self.events.append(event)

    def clear_events(self) -> None:
        self.events.clear()

    def add_event_handler(self, event_handler: EventHandler) -> None:
        self.event_handlers.append(event_handler)

    def clear_event_handlers(self) -> None:
        self.event_handlers.clear()

    def handle_events(self, environment: Environment) -> list[Event]:
        """Run every handler on every pending event; return and drop the events."""
        events, self.events = self.events, []
        for event in events:
            for handler in self.event_handlers:
                handler.handle(environment, event)
        return events