from dataclasses import asdict

import pytest

from flyconomy.entities import (
    Aerodrome,
    AirPlane,
    Attraction,
    Base,
    EnvironmentConfig,
    LandingRights,
    PlaneType,
    WorldHeritageSite,
)


def test_frankfurt():
    fra = Aerodrome.frankfurt()
    assert fra.id == 340
    assert fra.lat == 50.033333
    assert fra.lon == 8.570556
    assert fra.name == "Frankfurt am Main Airport"
    assert fra.code == "FRA/EDDF"
    assert fra.interest_score == 0.0
    assert fra.passengers is None


def test_paris():
    cdg = Aerodrome.paris()
    assert cdg.id == 1382
    assert cdg.code == "CDG/LFPG"
    assert cdg.name == "Charles de Gaulle International Airport"


def test_aerodrome_equality():
    assert Aerodrome.frankfurt() == Aerodrome.frankfurt()
    assert Aerodrome.frankfurt() != Aerodrome.paris()


def test_plane_type_defaults():
    plane = PlaneType()
    assert plane.name == "Small Plane"
    assert plane.cost == 100000.0
    assert plane.speed == 800.0
    assert plane.range == 4000.0
    assert plane.seats == 150


def test_airplane_default_uses_default_plane_type():
    assert AirPlane().plane_type == PlaneType()


def test_plane_type_from_dict_round_trip():
    original = PlaneType(
        id=2,
        name="Big Plane",
        cost=300000.0,
        monthly_income=0.0,
        speed=900.0,
        range=9000.0,
        seats=400,
        fuel_consumption_per_km=6.0,
    )
    assert PlaneType.from_dict(asdict(original)) == original


def test_plane_type_from_dict_missing_field():
    data = asdict(PlaneType())
    del data["seats"]
    with pytest.raises(KeyError):
        PlaneType.from_dict(data)


def test_environment_config_defaults():
    config = EnvironmentConfig()
    assert config.start_capital == 1_000_000.0
    assert config.landing_rights_cost == 100_000.0
    assert config.base_cost == 400_000.0
    assert config.takeoff_cost == 500.0


def test_environment_config_round_trip():
    config = EnvironmentConfig(start_capital=5.0, base_cost=7.0)
    assert EnvironmentConfig.from_dict(asdict(config)) == config


def test_environment_config_missing_field():
    data = asdict(EnvironmentConfig())
    del data["income_per_km"]
    with pytest.raises(KeyError):
        EnvironmentConfig.from_dict(data)


def test_base_lists_are_independent():
    first = Base(id=1, aerodrome=Aerodrome.frankfurt())
    second = Base(id=2, aerodrome=Aerodrome.paris())
    first.airplane_ids.append(7)
    assert second.airplane_ids == []


def test_landing_rights_and_sites_hold_values():
    rights = LandingRights(id=3, aerodrome=Aerodrome.paris())
    assert rights.aerodrome.code == "CDG/LFPG"
    site = WorldHeritageSite(id=208, lat=34.84694, lon=67.82525, name="Bamiyan")
    assert (site.id, site.lat, site.lon) == (208, 34.84694, 67.82525)
    attraction = Attraction(id=1, name="Tower", description="Tall")
    assert attraction == Attraction(id=1, name="Tower", description="Tall")