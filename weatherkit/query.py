"""Queries against the weather service: city list and multi-day forecast."""

from __future__ import annotations

import json
import logging
import urllib.request
from typing import Any, Callable, Optional

from .weather import Weather, _text

log = logging.getLogger(__name__)

Fetcher = Callable[[str], bytes]

USER_AGENT = "Mozilla/5.0 (X11; Linux x86_64) weatherkit"


def _http_fetch(url: str) -> bytes:
    request = urllib.request.Request(url, headers={"User-Agent": USER_AGENT})
    with urllib.request.urlopen(request, timeout=30) as reply:
        return reply.read()


def _as_map(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


class WeatherQuery:
    """Base query: fetch a URL and decode the service's JSON envelope.

    The URL may contain ``%1``, which is replaced by the requested id.
    """

    uses_id = True

    def __init__(self, url: str, fetcher: Optional[Fetcher] = None) -> None:
        self.url = url
        self._fetch = fetcher or _http_fetch

    def start_to_request(self, city_id: str = "") -> None:
        """Fetch and parse the data; on a network error keep the old data."""
        url = self.url.replace("%1", city_id) if self.uses_id else self.url
        try:
            payload = self._fetch(url)
        except OSError as error:
            log.error("Request failed: %s", error)
            return
        self.parse(payload)

    def parse(self, payload: bytes | str) -> Any:
        """Decode the envelope; return its result, or None if unusable."""
        try:
            data = json.loads(payload)
        except ValueError:
            log.error("Reply Error")
            return None
        data = _as_map(data)
        if _text(data.get("success")) != "1":
            return None
        return data.get("result")


class WeatherQueryCity(WeatherQuery):
    """Query the list of cities and their service ids."""

    uses_id = False

    def __init__(self, url: str, fetcher: Optional[Fetcher] = None) -> None:
        super().__init__(url, fetcher)
        self._cities: dict[str, str] = {}

    def parse(self, payload: bytes | str) -> bool:
        """Replace the city table from payload; return True if it was usable."""
        self._cities.clear()
        result = super().parse(payload)
        if result is None:
            return False
        datas = _as_map(_as_map(result).get("datas"))
        for key in sorted(datas):
            city = _as_map(datas[key])
            self._cities[_text(city.get("citynm"))] = _text(city.get("weaid"))
        return True

    def city_code(self, name: str) -> str:
        """Service id for a city name, or '' if unknown."""
        return self._cities.get(name, "")


class WeatherQueryFuture(WeatherQuery):
    """Query the forecast for the coming days of one city."""

    def __init__(self, url: str, fetcher: Optional[Fetcher] = None) -> None:
        super().__init__(url, fetcher)
        self._futures: list[Weather] = []

    def parse(self, payload: bytes | str) -> bool:
        """Replace the forecast from payload; return True if it was usable."""
        self._futures.clear()
        result = super().parse(payload)
        if result is None:
            return False
        self._futures.extend(
            Weather.from_mapping(_as_map(entry))
            for entry in _as_list(result)
            if entry is not None
        )
        return True

    def today(self) -> Weather:
        """First day's weather; an empty record is added if there is none."""
        if not self._futures:
            self._futures.append(Weather())
        return self._futures[0]

    def future(self, index: int) -> Weather:
        """Weather for day index, or today's when index is out of range."""
        if index < 0 or index >= len(self._futures):
            return self.today()
        return self._futures[index]

    def futures(self) -> list[Weather]:
        """All loaded days, in order."""
        return list(self._futures)