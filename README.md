# flyconomy

The economic model of an airline management game. The airline opens bases
at aerodromes, buys planes, acquires landing rights and schedules round-trip
flights. All of it is booked in the company's finances, and sampled histories
show how the airline performed.

## Installation

```
pip install flyconomy
```

## Modules

- `flyconomy.entities` holds the plain dataclass records: `Aerodrome`, with the
  `frankfurt()` and `paris()` presets, `AirPlane`, `Attraction`, `Base`,
  `LandingRights`, `PlaneType`, `WorldHeritageSite` and `EnvironmentConfig`.
  `PlaneType.from_dict` and `EnvironmentConfig.from_dict` build a record from a
  mapping. A `KeyError` names any missing field. Timestamps are integers in
  milliseconds.
- `flyconomy.finances` provides `CompanyFinances`, a ledger of timestamped
  income and expenses. `cash(t)`, `total_income(t)` and `total_expenses(t)`
  count only the entries at or before `t`. The starting capital is booked as
  income at time 0.
- `flyconomy.identity` provides `Identity`, a 32-byte `id` (zeros by default)
  and an `alias` (`"Pilot"` by default). Any other length of `id` raises
  `ValueError`.
- `flyconomy.geodesy` has two functions:
  - `vincenty_distance(lat1, lon1, lat2, lon2)` gives the WGS84 geodesic
    distance in metres. It raises `ValueError` when the iteration does not
    converge.
  - `wgs84_to_xyz(lat, lon, alt)` gives a right-handed, Y-up point in metres.

  The module also defines `EARTH_RADIUS` and `SCALE_FACTOR`.
- `flyconomy.flight` provides `Flight` and its states `Scheduled`, `EnRoute`,
  `Landed` and `Finished`.
  - A flight is a round trip from `origin_aerodrome` over its `stopovers` and
    back.
  - `update_state(t)` advances the state machine. Each landing is followed by a
    30-minute layover.
  - The flight also gives total distance in kilometres, booked seats (raised by
    the stopovers' interest scores), profit, a range check, the current origin
    and destination, and an interpolated position.
- `flyconomy.environment` provides `Environment`, the whole state of a game:
  config, identity, finances, planes, bases, landing rights, flights, the
  current timestamp and recent errors. `calculate_errors_indicator()` weighs
  errors by how recent they are.
- `flyconomy.events` holds the events `AirplaneLandedEvent`,
  `AirplaneTakeoffEvent`, `BuyPlaneEvent`, `CreateBaseEvent` and
  `BuyLandingRightsEvent`.
  - Each event gives a `message()`.
  - `AirplaneLandedEventHandler` books a flight's profit.
  - `AirplaneTakeoffEventHandler` books the takeoff and fuel costs.
  - `EventManager.handle_events(environment)` runs every handler on every
    pending event, then returns the events and drops them.
- `flyconomy.config` parses world data from CSV text:
  - `parse_airport_csv` (no header line).
  - `parse_passengers_csv`.
  - `load_airports`, which combines the two above.
  - `parse_attractions_csv`.
  - `parse_world_heritage_site_csv`.

  `PlanesConfig.from_yaml` and `LevelConfig.from_yaml` read YAML text. Malformed
  fields raise `ValueError`.
- `flyconomy.analytics` gives histories sampled at 100 points up to the
  environment's timestamp:
  - `calculate_cash_history`.
  - `calculate_total_flight_distance`.
  - `calculate_transported_passengers`.
  - `calculate_average_profit_per_flight`, which covers the last seven days.
- `flyconomy.commands` holds the base class `Command` with `execute(environment)`.
  It provides `CreateBaseCommand`, `BuyLandingRightsCommand`,
  `SellLandingRightsCommand`, `SellPlaneCommand` and `TimestampedCommand`. It
  also defines the errors `CommandError`, `InsufficientFundsError`,
  `BaseAlreadyExistsError`, `LandingRightsNotFoundError` and
  `PlaneNotFoundError`.
- `flyconomy.fleet` provides `BuyPlaneCommand`, with at most five planes per
  base, and `ScheduleFlightCommand`. Scheduling a flight books its expected
  profit as income. The module defines the errors `BaseNotFoundError`,
  `NoSpaceAtBaseError`, `AirplaneInUseError`, `DistanceBeyondRangeError` and
  `AirplaneNotLocatedAtOriginError`.

Commands that can generate ids have a `generate_id()` class method, which
counts up from 0.

## Example

```python
from flyconomy.entities import Aerodrome, PlaneType
from flyconomy.environment import Environment
from flyconomy.commands import CreateBaseCommand, InsufficientFundsError
from flyconomy.fleet import BuyPlaneCommand

env = Environment()
frankfurt = Aerodrome.frankfurt()

base_id = CreateBaseCommand.generate_id()
CreateBaseCommand(base_id=base_id, aerodrome=frankfurt).execute(env)

try:
    BuyPlaneCommand(
        plane_id=BuyPlaneCommand.generate_id(),
        plane_type=PlaneType(),
        home_base_id=base_id,
    ).execute(env)
except InsufficientFundsError as err:
    print(err)

print(env.company_finances.cash(env.timestamp))  # 500000.0
```

## What this package does not do

This is the model only. It has no 3D globe or other screen, no clock that
drives the simulation forward, no replay loading, no computer-controlled
managers and no command-line program. It ships no airport, passenger,
attraction, heritage site, plane or level data files. The parsers in
`flyconomy.config` take the text you pass them.

## Running the tests

```
pip install -e ".[test]"
pytest
```