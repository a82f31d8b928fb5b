"""Loading of world data and level settings from CSV and YAML text."""

from __future__ import annotations

import csv
import io
import re
from dataclasses import dataclass, field
from typing import Any, Iterator

import yaml

from .entities import Aerodrome, Attraction, EnvironmentConfig, PlaneType, WorldHeritageSite

_UNSIGNED = re.compile(r"\+?[0-9]+")
_U64_LIMIT = 2**64


def _records(text: str, *, has_headers: bool) -> Iterator[list[str]]:
    """Yield the non-empty records of a comma-separated text."""
    reader = csv.reader(io.StringIO(text), delimiter=",", quotechar='"')
    if has_headers:
        next(reader, None)
    for record in reader:
        if record:
            yield record


def _field(record: list[str], index: int) -> str:
    try:
        return record[index]
    except IndexError:
        raise ValueError(
            f"record has {len(record)} fields, field {index} is missing"
        ) from None


def _parse_u64(text: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ValueError(f"invalid unsigned integer: {text!r}")
    value = int(text)
    if value >= _U64_LIMIT:
        raise ValueError(f"unsigned integer out of range: {text!r}")
    return value


def _parse_float(text: str) -> float:
    if text != text.strip() or "_" in text:
        raise ValueError(f"invalid float: {text!r}")
    return float(text)


def parse_airport_csv(input: str) -> list[Aerodrome]:
    """Parse airport records (no header line) into aerodromes."""
    aerodromes = []
    for record in _records(input, has_headers=False):
        iata = _field(record, 4)
        icao = _field(record, 5)
        aerodromes.append(
            Aerodrome(
                id=_parse_u64(_field(record, 0)),
                lat=_parse_float(_field(record, 6)),
                lon=_parse_float(_field(record, 7)),
                name=_field(record, 1),
                code=f"{iata}/{icao}",
                interest_score=1.0,
                passengers=None,
            )
        )
    return aerodromes


def parse_passengers_csv(input: str) -> dict[str, int]:
    """Map aerodrome codes to yearly passenger counts; unreadable counts become 0."""
    passengers: dict[str, int] = {}
    for record in _records(input, has_headers=True):
        code = _field(record, 4)
        try:
            count = _parse_u64(_field(record, 5))
        except ValueError:
            count = 0
        passengers[code] = count
    return passengers


def load_airports(airports_csv: str, passengers_csv: str) -> list[Aerodrome]:
    """Parse airports and attach the passenger count known for each code."""
    aerodromes = parse_airport_csv(airports_csv)
    passengers = parse_passengers_csv(passengers_csv)
    for aerodrome in aerodromes:
        aerodrome.passengers = passengers.get(aerodrome.code)
    return aerodromes


def parse_attractions_csv(input: str) -> list[Attraction]:
    """Parse attraction records (with a header line)."""
    return [
        Attraction(
            id=_parse_u64(_field(record, 0)),
            lat=_parse_float(_field(record, 2)),
            lon=_parse_float(_field(record, 3)),
            name=_field(record, 1),
            description=_field(record, 4),
        )
        for record in _records(input, has_headers=True)
    ]


def parse_world_heritage_site_csv(input: str) -> list[WorldHeritageSite]:
    """Parse world heritage site records (with a header line)."""
    return [
        WorldHeritageSite(
            id=_parse_u64(_field(record, 4)),
            lat=_parse_float(_field(record, 15)),
            lon=_parse_float(_field(record, 14)),
            name=_field(record, 6),
            description=_field(record, 7),
        )
        for record in _records(input, has_headers=True)
    ]


def _load_mapping(text: str, kind: str) -> dict[str, Any]:
    data = yaml.safe_load(text)
    if not isinstance(data, dict):
        raise ValueError(f"{kind} must be a mapping")
    return data


def _require(data: dict[str, Any], key: str, kind: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise KeyError(f"missing field {key!r} in {kind}") from None


@dataclass
class PlanesConfig:
    """The plane types available for purchase."""

    planes: list[PlaneType] = field(default_factory=list)

    @classmethod
    def from_yaml(cls, text: str) -> PlanesConfig:
        data = _load_mapping(text, "planes config")
        planes = _require(data, "planes", "planes config")
        if not isinstance(planes, list):
            raise ValueError("planes must be a list")
        return cls(planes=[PlaneType.from_dict(plane) for plane in planes])


@dataclass
class LevelConfig:
    """A level's name, description and economic environment."""

    name: str = "Default"
    description: str = "Default level"
    environment: EnvironmentConfig = field(default_factory=EnvironmentConfig)

    @classmethod
    def from_yaml(cls, text: str) -> LevelConfig:
        kind = "level config"
        data = _load_mapping(text, kind)
        environment = _require(data, "environment", kind)
        if not isinstance(environment, dict):
            raise ValueError("environment must be a mapping")
        return cls(
            name=str(_require(data, "name", kind)),
            description=str(_require(data, "description", kind)),
            environment=EnvironmentConfig.from_dict(environment),
        )