# weatherkit

weatherkit looks up a weather service's city list and the multi-day forecast
for a city. Around those queries it keeps the state of a small weather viewer:
the list of cities you follow, a five-day forecast view and an about box. It
also carries a few small utilities (an insertion-ordered map, a thread-safe
queue, a scope guard and a tagged union).

It has no dependencies beyond the standard library.

## Installation

```
pip install weatherkit
```

To run the test suite:

```
pip install "weatherkit[test]"
pytest
```

## Command line

```
weatherkit [--city-url URL] [--future-url URL] [--day N] CITY [CITY ...]
```

For each city name, the command loads the city list, finds the city's service
id and prints the forecast for one day as labelled lines:

```
Beijing
  citynm: ...
  days: ...
  temperature: ...
  ...
```

Empty values are printed as `-`.

Options:

- `--city-url URL`: address of the city list. Defaults to the
  `WEATHERKIT_CITY_URL` environment variable.
- `--future-url URL`: address of the forecast; `%1` in it is replaced by the
  city id. Defaults to the `WEATHERKIT_FUTURE_URL` environment variable.
- `--day N`: which day to show, from 0 (today) to 4. Default 0.

Exit status is 2 when either URL is missing or the day is out of range, 1 when
any city name is not in the city list, and 0 otherwise.

## Service format

Both queries expect a JSON object whose `success` member is `"1"` (or `1`).

- City list: `result.datas` is an object whose values each carry `citynm`
  (the name) and `weaid` (the id).
- Forecast: `result` is a list of day objects with the members `weaid`,
  `days`, `week`, `citynm`, `temperature`, `humidity`, `weather`, `wind`,
  `winp`, `temp_high`, `temp_low`, `humi_high`, `humi_low`, `weather_icon`
  and `weather_icon1`. Missing members become empty strings; `null` entries
  are skipped.

## Library use

The query classes take the URL and, optionally, a fetcher: a callable that gets
a URL and returns the response body as bytes. Without one, `urllib` is used.
This lets you plug in any HTTP client or use canned data.

```python
from weatherkit.query import WeatherQueryCity, WeatherQueryFuture

cities = WeatherQueryCity("https://weather.example.com/cities")
cities.start_to_request()
city_id = cities.city_code("Beijing")       # "" if the name is unknown

forecast = WeatherQueryFuture("https://weather.example.com/future?id=%1")
forecast.start_to_request(city_id)
print(forecast.today().citynm)
for day in forecast.futures():
    print(day.days, day.weather, day.temp_high, day.temp_low)
```

- `start_to_request(id)` fetches and parses. On a network error (`OSError`)
  it logs the error and keeps the data it already had.
- `parse(payload)` can also be called directly; it clears the old data and
  returns `True` if the payload was usable.
- `WeatherQueryFuture.future(index)` returns the day at `index`, or today's
  record when `index` is out of range; `today()` adds an empty `Weather` if
  nothing was loaded.

`weatherkit.weather.Weather` is the day record, a dataclass of text fields,
built from a decoded JSON object with `Weather.from_mapping`.

### Viewer models

- `weatherkit.tables.ItemTable`: the labelled rows of one forecast day
  (`create_item`, `set_item_name`), reporting the day's two icons to a callback.
- `weatherkit.tables.AddItemTable`: the cities the user added (`add_city`,
  `delete_city`, `item_cell_clicked`, `loading_icon_finished`).
- `weatherkit.future.FutureItemView`: five `ItemTable`s selected with
  `button_clicked(index)`.
- `weatherkit.messagebox.MessageBox`: close/confirm/cancel dialog whose
  `button_clicked` gives a `DialogResult`.
- `weatherkit.app.WeatherApplication`: ties the city list to the forecast
  view; `about_text()` gives the about box text.

### Utilities

- `weatherkit.unsortedmap.UnsortedMap`: a mutable mapping that keeps keys in
  insertion order and compares them with `==` only, with `insert`, `at`,
  `find`, `upper_bound`, `count`, `erase` and `swap`.
- `weatherkit.concurrentqueue.ConcurrentQueue`: a thread-safe FIFO queue;
  `pop(blocking=False)` raises `queue.Empty` when there is nothing to take.
- `weatherkit.defer.ScopeGuard`: runs a callable once when a `with` block
  exits or `close()` is called.
- `weatherkit.variant.Variant`: holds one value whose type must be exactly one
  of a fixed set of types.
- `weatherkit.constants`: `version_check`, `version_string`, `clamp`,
  `app_file_name`, the `Direction` flags and shared constants.

## What it does not do

weatherkit has no graphical window: the viewer classes hold state only, and the
command line prints text. It ships no service addresses; you supply the city
list and forecast URLs yourself.