"""Five-day forecast view: one details table per day, chosen by button."""

from __future__ import annotations

from typing import Any, Callable, Optional

from .tables import PUSH_BUTTON_STYLE, ItemTable
from .weather import Weather

COUNT = 5
BUTTON_SIZE = (65, 30)


class FutureItemView:
    """A stack of day tables with one selector button per day."""

    button_style = PUSH_BUTTON_STYLE

    def __init__(
        self,
        query_factory: Callable[[], Any],
        on_icons: Optional[Callable[[list], Any]] = None,
    ) -> None:
        self.item_id = ""
        self.current_index = 0
        self.buttons = [f"Button{number}" for number in range(1, COUNT + 1)]
        self.tables: list[ItemTable] = []
        for _ in range(COUNT):
            table = ItemTable(query_factory, on_icons)
            table.create_item(Weather())
            self.tables.append(table)

    @property
    def current_table(self) -> ItemTable:
        """The table of the selected day."""
        return self.tables[self.current_index]

    def button_clicked(self, index: int) -> None:
        """Select day index, querying it if a city is set."""
        if index < 0 or index >= COUNT:
            raise IndexError(f"day {index} out of range")
        if self.item_id:
            self.tables[index].set_item_name(self.item_id, index)
        self.current_index = index

    def set_item_name(self, name: str) -> None:
        """Set the city id and show its first day."""
        self.item_id = name
        self.button_clicked(0)

    def create_item(self, weather: Weather) -> None:
        """Show the same weather record in every day's table."""
        for table in self.tables:
            table.create_item(weather)