"""The weather application: city loading, city list and forecast view."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Any, Callable, Optional, Sequence

from .constants import APP_NAME, VERSION_STR
from .future import COUNT, FutureItemView
from .messagebox import BACKGROUND_COLOR, MessageBox
from .query import WeatherQueryCity, WeatherQueryFuture
from .tables import AddItemTable
from .weather import Weather

CITY_URL_ENV = "WEATHERKIT_CITY_URL"
FUTURE_URL_ENV = "WEATHERKIT_FUTURE_URL"


class LoadingStep:
    """Loads the city table, then hands control back to the application."""

    size = (200, 110)

    def __init__(self, city_query: Any, on_finished: Optional[Callable[[], Any]] = None) -> None:
        self.city_query = city_query
        self._on_finished = on_finished
        self.finished = False

    def start(self) -> None:
        """Request the city list and report completion."""
        self.city_query.start_to_request("")
        self.finished = True
        if self._on_finished is not None:
            self._on_finished()


class WeatherApplication:
    """Main application model tying the city list to the forecast view.

    The city list is requested as soon as the application is created; the
    application becomes visible once that request has completed.
    """

    background_color = BACKGROUND_COLOR

    def __init__(self, city_query: Any, future_query_factory: Callable[[], Any]) -> None:
        self._future_query_factory = future_query_factory
        self.query_city: Any = None
        self.current_item_id = ""
        self.stack_index = 0
        self.visible = False
        self.future_view: Optional[FutureItemView] = None
        self.add_table = AddItemTable(on_clicked=self.item_cell_clicked_by_text)
        self.loading = LoadingStep(city_query, self.loading_finished)
        self.loading.start()

    def _initialize(self) -> None:
        self.future_view = FutureItemView(
            self._future_query_factory, on_icons=self.loading_icon_finished
        )

    def loading_finished(self) -> None:
        """Take the loaded city table, build the views and show the window."""
        self.query_city = self.loading.city_query
        self._initialize()
        self.visible = True

    def change_stack_to_today(self) -> None:
        """Show the forecast page for the current city, or a blank one."""
        if self.future_view is None:
            raise RuntimeError("application has not finished loading")
        self.stack_index = 0
        if self.current_item_id:
            self.future_view.set_item_name(self.current_item_id)
        else:
            self.future_view.create_item(Weather())

    def item_cell_clicked_by_text(self, name: str) -> None:
        """Look up the city's id by name and show its forecast."""
        if self.query_city is None:
            raise RuntimeError("application has not finished loading")
        self.current_item_id = self.query_city.city_code(name)
        self.change_stack_to_today()

    def loading_icon_finished(self, icons: Sequence[str]) -> None:
        """Pass the current day's weather icons on to the city list."""
        self.add_table.loading_icon_finished(icons)

    def about_text(self) -> str:
        """Text of the about dialog."""
        return f"{APP_NAME}\n\nVersion {VERSION_STR}"

    def about_application(self) -> MessageBox:
        """Build the about dialog."""
        box = MessageBox()
        box.set_text(self.about_text())
        return box


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Show the forecast of each named city on standard output."""
    parser = argparse.ArgumentParser(
        prog="weatherkit", description="Show the weather forecast for cities."
    )
    parser.add_argument("cities", nargs="*", help="city names to look up")
    parser.add_argument(
        "--city-url",
        default=os.environ.get(CITY_URL_ENV),
        help=f"URL of the city list (default: ${CITY_URL_ENV})",
    )
    parser.add_argument(
        "--future-url",
        default=os.environ.get(FUTURE_URL_ENV),
        help=f"URL of the forecast, %%1 is the city id (default: ${FUTURE_URL_ENV})",
    )
    parser.add_argument("--day", type=int, default=0, help=f"day 0 to {COUNT - 1}")
    args = parser.parse_args(argv)

    if not args.city_url or not args.future_url:
        print("error: both the city URL and the forecast URL are needed", file=sys.stderr)
        return 2
    if not 0 <= args.day < COUNT:
        print(f"error: day must be between 0 and {COUNT - 1}", file=sys.stderr)
        return 2

    future_url = args.future_url
    app = WeatherApplication(
        WeatherQueryCity(args.city_url), lambda: WeatherQueryFuture(future_url)
    )

    status = 0
    for name in args.cities:
        row = app.add_table.add_city(name)
        if row is None:
            continue
        app.add_table.item_cell_clicked(row, 0)
        if not app.current_item_id:
            print(f"{name}: unknown city", file=sys.stderr)
            status = 1
            continue
        if args.day:
            app.future_view.button_clicked(args.day)
        print(name)
        for label, value in app.future_view.current_table.rows:
            print(f"  {label}: {value}")
    return status