import pytest

from weatherkit import constants
from weatherkit.constants import (
    Direction,
    app_file_name,
    clamp,
    version_check,
    version_string,
)


def test_version_string_matches_project_version():
    assert version_string(2, 8, 0, 0) == "2.8.0.0"
    assert constants.VERSION_STR == "2.8.0.0"


def test_version_check_fields_roundtrip():
    packed = version_check(1, 2, 11, 3)
    assert (packed >> 12, (packed >> 8) & 0xF, (packed >> 4) & 0xF, packed & 0xF) == (
        1,
        2,
        11,
        3,
    )


def test_version_check_orders_versions():
    assert version_check(2, 8, 0, 0) > version_check(1, 2, 11, 0)
    assert version_check(2, 8, 1, 0) > version_check(2, 8, 0, 0)
    assert constants.VERSION > constants.LIBRARY_VERSION


def test_version_constants_agree():
    assert constants.VERSION == version_check(
        constants.MAJOR_VERSION, constants.MINOR_VERSION, constants.PATCH_VERSION, 0
    )
    assert constants.LIBRARY_VERSION_STR == version_string(
        constants.LIBRARY_MAJOR_VERSION,
        constants.LIBRARY_MINOR_VERSION,
        constants.LIBRARY_PATCH_VERSION,
        0,
    )


@pytest.mark.parametrize(
    "value, low, high, expected",
    [(5, 0, 10, 5), (-3, 0, 10, 0), (42, 0, 10, 10), (0, 0, 10, 0), (10, 0, 10, 10)],
)
def test_clamp(value, low, high, expected):
    assert clamp(value, low, high) == expected


def test_clamp_low_wins_when_bounds_reversed():
    assert clamp(5, 10, 0) == 10


def test_clamp_floats():
    assert clamp(1.5, 0.0, 1.0) == 1.0


@pytest.mark.parametrize(
    "raw, expected",
    [(0, "NO"), (3, "LEFT_TOP"), (9, "LEFT_BOTTOM"), (6, "RIGHT_TOP"), (12, "RIGHT_BOTTOM")],
)
def test_direction_from_value(raw, expected):
    assert Direction(raw) == Direction[expected]


def test_direction_corners_combine_edges():
    assert Direction(Direction.LEFT | Direction.TOP) == Direction.LEFT_TOP
    assert Direction(Direction.RIGHT | Direction.BOTTOM) == Direction.RIGHT_BOTTOM
    assert Direction.LEFT in Direction(9)
    assert Direction.RIGHT not in Direction(3)


def test_app_file_name():
    assert app_file_name(True) == "TTKWeather.exe"
    assert app_file_name(False) == constants.APP_NAME


def test_run_names_use_platform_suffix():
    assert constants.app_run_name(False).endswith(constants.SHL_FILE)
    assert constants.service_run_name(True).endswith(constants.EXE_FILE)


def test_windows_run_name_is_file_name():
    assert constants.app_run_name(True) == app_file_name(True)
    assert app_file_name(True).startswith(constants.APP_NAME)
    assert app_file_name(True).endswith(constants.EXE_FILE)


def test_protocol_and_unit_constants():
    assert constants.HTTPS_PROTOCOL == "https://"
    assert clamp(constants.DN_D2MS, 0, constants.DN_D2MS) == 86400000
    assert constants.SN_GB2B == constants.SN_KB2B * constants.SN_MB2KB * constants.SN_GB2MB