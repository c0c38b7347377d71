"""Table models: one day's weather details, and the user's city list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

from .constants import DEFAULT_STR
from .weather import Weather

TOOL_BUTTON_STYLE = (
    "QToolButton{ border:none; background-color:transparent; } "
    "QToolButton::hover{ background-color:rgba(255,255,255,20); }"
)
PUSH_BUTTON_STYLE = (
    "QPushButton{ background-color:rgb(173,216,230); border:none; } "
    "QPushButton::hover{ "
    "background:qlineargradient(x1:0,y1:0,x2:0,y2:1, "
    "stop:0 #3BA1E6, stop:0.5 #3BA1E6, stop:1.0 #3BA1E6); "
    "border:none; }"
)
TABLE_WIDGET_STYLE = "QTableWidget{ selection-background-color:rgba(20, 20, 20, 40); }"
SCROLL_BAR_STYLE = (
    "QScrollBar{ background:#F0F0F0; width:8px; } "
    "QScrollBar::handle{ background:#CFCFCF; min-width:20px; min-height:20px; } "
    "QScrollBar::handle:vertical::disabled{ background:#DBDBDB; } "
    "QScrollBar::handle:vertical:hover{ background:#DBDBDB; border:1px solid rgb(230, 115, 0); } "
    "QScrollBar::add-line, QScrollBar::sub-line{ background:none; border:none; } "
    "QScrollBar::add-page, QScrollBar::sub-page{ background:none; } "
    "QScrollBar::up-arrow:vertical{ border-image:url(':/usermanager/uparrow'); } "
    "QScrollBar::down-arrow:vertical{ border-image:url(':/usermanager/downarrow'); }"
)
MENU_STYLE = (
    "QMenu{ border:1px solid gray; padding:5px; background-color:white; } "
    "QMenu::item{ padding:5px 25px 5px 30px; border:1px solid transparent; } "
    "QMenu::item:disabled{ color:#666666; } "
    "QMenu::item:selected{ color:white; background:#BBBBBB; } "
    "QMenu::separator{height:1px; background:#BBBBBB; margin-top:5px; margin-bottom:5px; }"
)
TABLE_STYLE = TABLE_WIDGET_STYLE + SCROLL_BAR_STYLE
TABLE_BASE_COLOR = (255, 255, 255, 150)

ITEM_COLUMN_WIDTHS = (120, 200)
ADD_ITEM_COLUMN_WIDTHS = (151, 55, 55)
ADD_ITEM_ROW_HEIGHT = 35
ADD_ITEM_ICON_SIZE = (28, 20)

LABELS = (
    "citynm",
    "days",
    "temperature",
    "humidity",
    "weather",
    "wind",
    "winp",
    "temp_high",
    "temp_low",
    "humi_high",
    "humi_low",
)

IconCallback = Callable[[list], Any]


def _tail_sections(path: str, count: int = 2) -> str:
    """The last count '/'-separated sections of path, rejoined."""
    return "/".join(path.split("/")[-count:])


class ItemTable:
    """Two-column table of labelled weather values for one forecast day."""

    def __init__(
        self,
        query_factory: Callable[[], Any],
        on_icons: Optional[IconCallback] = None,
    ) -> None:
        self._query_factory = query_factory
        self._on_icons = on_icons
        self._query: Any = None
        self.index = -1
        self.rows: list[tuple[str, str]] = []

    def create_item(self, weather: Weather) -> None:
        """Fill the table from a weather record; empty values show '-'."""
        values = (
            weather.citynm,
            f"{weather.days}  {weather.week}",
            weather.temperature,
            weather.humidity,
            weather.weather,
            weather.wind,
            weather.winp,
            weather.temp_high,
            weather.temp_low,
            weather.humi_high,
            weather.humi_low,
        )
        self.rows = [
            (label, value or DEFAULT_STR) for label, value in zip(LABELS, values)
        ]

    def set_item_name(self, name: str, index: int) -> None:
        """Query the forecast for city id name and show day index."""
        self.index = index
        if self._query is None:
            self._query = self._query_factory()
        self._query.start_to_request(name)
        self.search_item_information_done()

    def search_item_information_done(self) -> None:
        """Show the queried day and report its two weather icons."""
        weather = self._query.future(self.index)
        if self._on_icons is not None:
            self._on_icons([weather.weather_icon, weather.weather_icon1])
        self.create_item(weather)


@dataclass
class Cell:
    """One table cell: its text and an optional icon resource."""

    text: str = ""
    icon: str = ""


class AddItemTable:
    """Three-column list of cities the user added, with icon columns."""

    def __init__(self, on_clicked: Optional[Callable[[str], Any]] = None) -> None:
        self._on_clicked = on_clicked
        self.rows: list[list[Cell]] = []
        self.current_row = -1

    def _emit(self, name: str) -> None:
        if self._on_clicked is not None:
            self._on_clicked(name)

    def add_city(self, text: str) -> Optional[int]:
        """Append a row for a city name; return its row, or None if blank."""
        if not text:
            return None
        self.rows.append([Cell(text), Cell(DEFAULT_STR), Cell(DEFAULT_STR)])
        return len(self.rows) - 1

    def delete_city(self) -> bool:
        """Remove the current row and report an empty selection."""
        if self.current_row <= -1 or self.current_row >= len(self.rows):
            return False
        del self.rows[self.current_row]
        self.current_row = min(self.current_row, len(self.rows) - 1)
        self._emit("")
        return True

    def item_cell_clicked(self, row: int, column: int) -> None:
        """Select row and report the city name it holds."""
        if row < 0 or row >= len(self.rows):
            raise IndexError(f"row {row} out of range")
        self.current_row = row
        self._emit(self.rows[row][0].text)

    def loading_icon_finished(self, icons: Sequence[str]) -> None:
        """Put the first and last icon into the current row's icon cells."""
        index = self.current_row
        if index < 0 or index >= len(self.rows) or len(icons) < 2:
            return
        row = self.rows[index]
        row[1].text = ""
        row[1].icon = ":/" + _tail_sections(icons[0])
        row[2].text = ""
        row[2].icon = ":/" + _tail_sections(icons[-1])