import json

import pytest

from weatherkit.future import COUNT, FutureItemView
from weatherkit.query import WeatherQueryFuture
from weatherkit.weather import Weather


class _Factory:
    def __init__(self):
        self.urls = []

    def __call__(self):
        return WeatherQueryFuture("http://example.com/?id=%1", self._fetch)

    def _fetch(self, url):
        self.urls.append(url)
        days = [{"citynm": f"City{n}"} for n in range(COUNT)]
        return json.dumps({"success": "1", "result": days}).encode()


def test_initial_tables_are_blank():
    view = FutureItemView(_Factory())
    assert len(view.tables) == COUNT
    assert len(view.buttons) == COUNT
    assert view.buttons[0] == "Button1"
    for table in view.tables:
        assert table.rows[0] == ("citynm", "-")


def test_click_without_city_does_not_query():
    factory = _Factory()
    view = FutureItemView(factory)
    view.button_clicked(3)
    assert view.current_index == 3
    assert factory.urls == []


def test_set_item_name_queries_first_day():
    factory = _Factory()
    view = FutureItemView(factory)
    view.button_clicked(2)
    view.set_item_name("7")
    assert view.current_index == 0
    assert factory.urls == ["http://example.com/?id=7"]
    assert view.current_table.rows[0] == ("citynm", "City0")


def test_click_with_city_shows_that_day():
    factory = _Factory()
    icons = []
    view = FutureItemView(factory, icons.append)
    view.set_item_name("7")
    view.button_clicked(3)
    assert view.current_table.rows[0] == ("citynm", "City3")
    assert len(factory.urls) == 2
    assert len(icons) == 2


def test_click_out_of_range_raises():
    view = FutureItemView(_Factory())
    with pytest.raises(IndexError):
        view.button_clicked(COUNT)


def test_create_item_updates_every_table():
    view = FutureItemView(_Factory())
    view.create_item(Weather(citynm="Gamma"))
    assert {table.rows[0][1] for table in view.tables} == {"Gamma"}