# tests/test_city_directory.py
from conftest import FakeOptimizerClient

from skyroute.services.city_directory import FALLBACK_CITIES, CityDirectory


def test_loads_cities_from_service_in_order():
    client = FakeOptimizerClient(cities=["Tokyo", "London", "Tokyo"])
    directory = CityDirectory()

    directory.load(client)

    assert directory.cities == ("Tokyo", "London", "Tokyo")
    assert directory.source == CityDirectory.SOURCE_SERVICE
    assert "London" in directory
    assert len(directory) == 3


def test_falls_back_to_fixed_list_on_failure():
    directory = CityDirectory()

    directory.load(FakeOptimizerClient(cities=None))

    assert directory.loaded
    assert directory.source == CityDirectory.SOURCE_FALLBACK
    assert list(directory) == [
        "New York",
        "London",
        "Paris",
        "Tokyo",
        "Dubai",
        "Singapore",
        "Sydney",
        "Los Angeles",
    ]
    assert directory.cities == FALLBACK_CITIES


def test_second_load_is_ignored():
    directory = CityDirectory()
    directory.load(FakeOptimizerClient(cities=["Paris"]))
    directory.load(FakeOptimizerClient(cities=["Tokyo", "Dubai"]))

    assert directory.cities == ("Paris",)
