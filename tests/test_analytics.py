import pytest

from flyconomy.analytics import (
    SAMPLES,
    calculate_average_profit_per_flight,
    calculate_cash_history,
    calculate_total_flight_distance,
    calculate_transported_passengers,
)
from flyconomy.environment import Environment
from flyconomy.finances import CompanyFinances
from flyconomy.flight import Finished, Flight, Scheduled


def _environment_with_finished_flights():
    environment = Environment()
    environment.timestamp = 2000
    environment.flights = [
        Flight(state=Finished(), arrival_time=i * 100) for i in range(1, 21)
    ]
    return environment


def test_calculate_cash_history():
    environment = Environment(company_finances=CompanyFinances(0.0))
    for _ in range(1000):
        environment.timestamp += 1
        environment.company_finances.add_income(environment.timestamp, 1.0)

    history = calculate_cash_history(environment)

    assert len(history) == SAMPLES
    assert all(timestamp <= environment.timestamp for timestamp, _ in history)
    assert history[0][0] == 10
    assert history[-1][0] == environment.timestamp
    assert history[0][1] == 10.0
    assert history[-1][1] == 1000.0


def test_total_flight_distance():
    environment = _environment_with_finished_flights()
    history = calculate_total_flight_distance(environment)

    assert len(history) == SAMPLES
    assert all(timestamp <= environment.timestamp for timestamp, _ in history)
    assert history[0][0] == 20
    assert history[-1][0] == environment.timestamp
    assert history[0][1] == 0.0
    assert abs(history[-1][1] - 18_000.0) < 20.0


def test_calculate_transported_passengers():
    environment = _environment_with_finished_flights()
    history = calculate_transported_passengers(environment)

    assert len(history) == SAMPLES
    assert all(timestamp <= environment.timestamp for timestamp, _ in history)
    assert history[0][0] == 20
    assert history[-1][0] == environment.timestamp
    assert history[0][1] == 0
    assert history[-1][1] == 3000


def test_average_profit_per_flight():
    environment = _environment_with_finished_flights()
    history = calculate_average_profit_per_flight(environment)

    assert len(history) == SAMPLES
    assert history[0][1] == 0.0
    single_profit = Flight().calculate_profit()
    assert history[-1][1] == pytest.approx(single_profit)


def test_unfinished_flights_are_ignored():
    environment = Environment()
    environment.timestamp = 2000
    environment.flights = [Flight(state=Scheduled(), arrival_time=100)]
    history = calculate_transported_passengers(environment)
    assert [count for _, count in history] == [0] * SAMPLES


def test_no_samples_at_time_zero():
    assert calculate_cash_history(Environment()) == []


def test_short_history_samples_every_millisecond():
    environment = Environment()
    environment.timestamp = 5
    history = calculate_cash_history(environment)
    assert [timestamp for timestamp, _ in history] == [1, 2, 3, 4, 5]
    assert all(cash == 1_000_000.0 for _, cash in history)


def test_finished_flight_without_arrival_time_is_rejected():
    environment = Environment()
    environment.timestamp = 200
    environment.flights = [Flight(state=Finished(), arrival_time=None)]
    with pytest.raises(ValueError):
        calculate_total_flight_distance(environment)