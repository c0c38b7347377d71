from dataclasses import asdict

from weatherkit.weather import Weather

FULL = {
    "weaid": "101",
    "days": "2024-03-28",
    "week": "Thursday",
    "citynm": "Springfield",
    "temperature": "10/20",
    "humidity": "40%",
    "weather": "Sunny",
    "wind": "North",
    "winp": "Level 2",
    "temp_high": "20",
    "temp_low": "10",
    "humi_high": "50",
    "humi_low": "30",
    "weather_icon": "http://example.com/icons/d/0.gif",
    "weather_icon1": "http://example.com/icons/n/1.gif",
}


def test_default_is_all_empty():
    assert all(value == "" for value in asdict(Weather()).values())


def test_from_mapping_copies_all_fields():
    weather = Weather.from_mapping(FULL)
    assert asdict(weather) == FULL


def test_from_mapping_icon_fields():
    weather = Weather.from_mapping(FULL)
    assert weather.weather_icon == FULL["weather_icon"]
    assert weather.weather_icon1 == FULL["weather_icon1"]


def test_missing_keys_give_empty_text():
    weather = Weather.from_mapping({"citynm": "Springfield"})
    assert weather.citynm == "Springfield"
    assert weather.temperature == ""


def test_numbers_and_null_become_text():
    weather = Weather.from_mapping({"weaid": 101, "temp_high": 25.0, "temp_low": None})
    assert weather.weaid == "101"
    assert weather.temp_high == "25"
    assert weather.temp_low == ""


def test_nested_values_give_empty_text():
    weather = Weather.from_mapping({"wind": {"dir": "N"}, "winp": [1, 2]})
    assert weather.wind == ""
    assert weather.winp == ""