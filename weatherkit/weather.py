"""Weather record returned by the forecast service."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping


def _text(value: Any) -> str:
    """Render a decoded JSON scalar as text; containers and null give ''."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, str)):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    return ""


@dataclass
class Weather:
    """One day's weather for one city; every field is text."""

    weaid: str = ""
    days: str = ""
    week: str = ""
    citynm: str = ""
    temperature: str = ""
    humidity: str = ""
    weather: str = ""
    wind: str = ""
    winp: str = ""
    temp_high: str = ""
    temp_low: str = ""
    humi_high: str = ""
    humi_low: str = ""
    weather_icon: str = ""
    weather_icon1: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Weather":
        """Build a record from a decoded JSON object; missing keys give ''."""
        return cls(**{field.name: _text(data.get(field.name)) for field in fields(cls)})