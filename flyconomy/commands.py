"""Player commands that change the simulation environment, and their errors."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Iterator, NamedTuple

from .entities import Aerodrome, Base, LandingRights, Timestamp
from .environment import Environment


def _format_amount(value: float) -> str:
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


class CommandError(Exception):
    """A command could not be carried out."""


class InsufficientFundsError(CommandError):
    """The airline does not have enough cash for the command."""

    def __init__(self, needed: float, has: float, action: str | None = None) -> None:
        self.needed = needed
        self.has = has
        self.action = action
        prefix = f"Insufficient funds to {action}" if action else "Insufficient funds"
        super().__init__(
            f"{prefix}: needed {_format_amount(needed)}, but have {_format_amount(has)}"
        )


class BaseAlreadyExistsError(CommandError):
    """A base already exists at the aerodrome."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Base already exists for the given aerodrome: {name}")


class LandingRightsNotFoundError(CommandError):
    """No landing rights with the given id are owned."""

    def __init__(self, landing_rights_id: int) -> None:
        self.landing_rights_id = landing_rights_id
        super().__init__("Landing rights does not exist")


class PlaneNotFoundError(CommandError):
    """No plane with the given id is owned."""

    def __init__(self, plane_id: int) -> None:
        self.plane_id = plane_id
        super().__init__("Plane does not exist")


class Command(ABC):
    """An action applied to an environment."""

    @abstractmethod
    def execute(self, environment: Environment) -> str | None:
        """Apply the command; raise a CommandError when it cannot be done."""


@dataclass
class BuyLandingRightsCommand(Command):
    """Buy the right to land at an aerodrome."""

    landing_rights_id: int
    aerodrome: Aerodrome

    _ids: ClassVar[Iterator[int]] = itertools.count()

    @classmethod
    def generate_id(cls) -> int:
        return next(cls._ids)

    def execute(self, environment: Environment) -> str | None:
        finances = environment.company_finances
        cost = environment.config.landing_rights_cost
        cash = finances.cash(environment.timestamp)
        if cash < cost:
            raise InsufficientFundsError(cost, cash, "buy landing rights")
        finances.add_expense(environment.timestamp, cost)
        environment.landing_rights.append(
            LandingRights(id=self.landing_rights_id, aerodrome=self.aerodrome)
        )
        return None


@dataclass
class CreateBaseCommand(Command):
    """Open a home base at an aerodrome."""

    base_id: int
    aerodrome: Aerodrome

    _ids: ClassVar[Iterator[int]] = itertools.count()

    @classmethod
    def generate_id(cls) -> int:
        return next(cls._ids)

    def base_cost(self, environment: Environment) -> float:
        """Configured base cost plus a surcharge for busy aerodromes."""
        cost = environment.config.base_cost
        if self.aerodrome.passengers is not None:
            cost += self.aerodrome.passengers / 20.0
        return cost

    def execute(self, environment: Environment) -> str | None:
        if any(base.aerodrome.code == self.aerodrome.code for base in environment.bases):
            raise BaseAlreadyExistsError(self.aerodrome.name)
        finances = environment.company_finances
        cost = self.base_cost(environment)
        cash = finances.cash(environment.timestamp)
        if cash < cost:
            raise InsufficientFundsError(cost, cash, "create base")
        finances.add_expense(environment.timestamp, cost)
        environment.bases.append(
            Base(id=self.base_id, aerodrome=self.aerodrome, airplane_ids=[])
        )
        return None


@dataclass
class SellLandingRightsCommand(Command):
    """Sell owned landing rights for their configured price."""

    landing_rights_id: int

    def execute(self, environment: Environment) -> str | None:
        if not any(lr.id == self.landing_rights_id for lr in environment.landing_rights):
            raise LandingRightsNotFoundError(self.landing_rights_id)
        environment.landing_rights[:] = [
            lr for lr in environment.landing_rights if lr.id != self.landing_rights_id
        ]
        environment.company_finances.add_income(
            environment.timestamp, environment.config.landing_rights_cost
        )
        return None


@dataclass
class SellPlaneCommand(Command):
    """Sell an owned plane for its purchase price."""

    plane_id: int

    def execute(self, environment: Environment) -> str | None:
        airplane = next(
            (plane for plane in environment.planes if plane.id == self.plane_id), None
        )
        if airplane is None:
            raise PlaneNotFoundError(self.plane_id)
        base = next(
            (base for base in environment.bases if base.id == airplane.base_id), None
        )
        if base is None:
            raise LookupError(
                f"base {airplane.base_id} of plane {self.plane_id} does not exist"
            )
        environment.company_finances.add_income(
            environment.timestamp, float(airplane.plane_type.cost)
        )
        base.airplane_ids[:] = [i for i in base.airplane_ids if i != self.plane_id]
        environment.planes[:] = [p for p in environment.planes if p.id != self.plane_id]
        return None


class TimestampedCommand(NamedTuple):
    """A command together with the time at which it is to be executed."""

    timestamp: Timestamp
    command: Command