"""Shared constants, version helpers and small utilities."""

from __future__ import annotations

import enum
from typing import TypeVar

T = TypeVar("T")

APP_NAME = "TTKWeather"
SERVICE_NAME = "TTKService"

DOT = "."
DOTDOT = ".."
SPACE = " "
SEPARATOR = "/"
WSEPARATOR = "\\"
LINEFEED = "\n"
WLINEFEED = "\r\n"
PARENT_DIR = DOTDOT + SEPARATOR

SPLITER = "*|||*"
DEFAULT_STR = "-"
NAN_STR = "NaN"
NULL_STR = "null"

URL_PREFIX = "://"
HTTP_PROTOCOL_PREFIX = "http"
HTTPS_PROTOCOL_PREFIX = "https"
HTTP_PROTOCOL = HTTP_PROTOCOL_PREFIX + URL_PREFIX
HTTPS_PROTOCOL = HTTPS_PROTOCOL_PREFIX + URL_PREFIX

SHL_FILE_SUFFIX = "sh"
EXE_FILE_SUFFIX = "exe"
COM_FILE_SUFFIX = "com"
SHL_FILE = DOT + SHL_FILE_SUFFIX
EXE_FILE = DOT + EXE_FILE_SUFFIX
COM_FILE = DOT + COM_FILE_SUFFIX

APP_COME_NAME = APP_NAME + COM_FILE

# Date and time format patterns (Qt-style).
TIME_INIT = "00:00"
HOUR_FORMAT = "hh"
SECOND_FORMAT = "mm"
TIMEM_FORMAT = "hh:mm"
TIMES_FORMAT = "hh:mm:ss"
TIMEZ_FORMAT = "hh:mm:ss:zzz"
YEAR_FORMAT = "yyyy"
MONTH_FORMAT = "MM"
DAY_FORMAT = "dd"
WEEK_FORMAT = "dddd"
DATE_FORMAT = "yyyy-MM-dd"
DATE2_FORMAT = "yyyy.MM.dd"
DATE_TIMEM_FORMAT = "yyyy-MM-dd hh:mm"
DATE_TIMES_FORMAT = "yyyy-MM-dd hh:mm:ss"
DATE_TIMEZ_FORMAT = "yyyy-MM-dd hh:mm:ss:zzz"

# Item sizes.
ITEM_SIZE_3XS = 5
ITEM_SIZE_2XS = 10
ITEM_SIZE_XS = 18
ITEM_SIZE_S = 25
ITEM_SIZE_M = 30
ITEM_SIZE_L = 40
ITEM_SIZE_XL = 50
ITEM_SIZE_2XL = 60
ITEM_SIZE_3XL = 75
ITEM_SIZE_4XL = 90
ITEM_SIZE_5XL = 105

# Levels.
NONE_LEVEL = -3
LOW_LEVEL = -2
NORMAL_LEVEL = -1
HIGH_LEVEL = 999

# Buffer sizes.
LOW_BUFFER = 256
NORMAL_BUFFER = 512
HIGH_BUFFER = 1024

# Date/time unit conversions.
DN_US2NS = 1000
DN_MS2US = 1000
DN_MS2NS = DN_MS2US * DN_US2NS
DN_ONCE = 50
DN_S2MS = 1000
DN_S2US = DN_S2MS * DN_MS2US
DN_S2NS = DN_S2US * DN_US2NS
DN_M2S = 60
DN_M2MS = DN_M2S * DN_S2MS
DN_M2US = DN_M2MS * DN_MS2US
DN_M2NS = DN_M2US * DN_US2NS
DN_H2M = 60
DN_H2S = DN_H2M * DN_M2S
DN_H2MS = DN_H2S * DN_S2MS
DN_H2US = DN_H2MS * DN_MS2US
DN_H2NS = DN_H2US * DN_US2NS
DN_D2H = 24
DN_D2M = DN_D2H * DN_H2M
DN_D2S = DN_D2M * DN_M2S
DN_D2MS = DN_D2S * DN_S2MS
DN_D2US = DN_D2MS * DN_MS2US
DN_D2NS = DN_D2US * DN_US2NS

# Size unit conversions.
SN_B2BT = 8
SN_KB2B = 1024
SN_KB2BS = SN_KB2B * SN_B2BT
SN_MB2KB = 1024
SN_MB2B = SN_MB2KB * SN_KB2B
SN_MB2BT = SN_MB2B * SN_B2BT
SN_GB2MB = 1024
SN_GB2KB = SN_GB2MB * SN_MB2KB
SN_GB2B = SN_GB2KB * SN_KB2B
SN_GB2BT = SN_GB2B * SN_B2BT
SN_TB2GB = 1024
SN_TB2MB = SN_TB2GB * SN_GB2MB
SN_TB2KB = SN_TB2MB * SN_MB2KB
SN_TB2B = SN_TB2KB * SN_KB2B
SN_TB2BT = SN_TB2B * SN_B2BT

# Angles.
AN_0, AN_30, AN_45, AN_60, AN_90 = 0, 30, 45, 60, 90
AN_120, AN_180, AN_270, AN_360 = 120, 180, 270, 360

# Bitrates.
BN_0, BN_32, BN_64, BN_96, BN_128 = 0, 32, 64, 96, 128
BN_192, BN_250, BN_320, BN_500, BN_750, BN_1000 = 192, 250, 320, 500, 750, 1000

# Range.
RN_MIN = 0
RN_MAX = 100


class Direction(enum.IntFlag):
    """Window edge directions; corners combine two edges."""

    NO = 0
    LEFT = 1
    TOP = 2
    RIGHT = 4
    BOTTOM = 8
    LEFT_TOP = LEFT | TOP
    LEFT_BOTTOM = LEFT | BOTTOM
    RIGHT_TOP = RIGHT | TOP
    RIGHT_BOTTOM = RIGHT | BOTTOM


def version_check(major: int, middle: int, minor: int, patch: int) -> int:
    """Pack a four-part version into a single comparable integer."""
    return (major << 12) | (middle << 8) | (minor << 4) | patch


def version_string(major: int, middle: int, minor: int, patch: int) -> str:
    """Render a four-part version as dotted text."""
    return f"{major}.{middle}.{minor}.{patch}"


def clamp(value: T, low: T, high: T) -> T:
    """Limit value to [low, high]; if low > high, low wins."""
    upper = value if not (high < value) else high
    return upper if not (upper < low) else low


def app_file_name(windows: bool) -> str:
    """Executable file name of the application on the given platform."""
    return APP_NAME + EXE_FILE if windows else APP_NAME


def app_run_name(windows: bool) -> str:
    """Name of the launcher used to run the application."""
    return APP_NAME + (EXE_FILE if windows else SHL_FILE)


def service_run_name(windows: bool) -> str:
    """Name of the launcher used to run the service."""
    return SERVICE_NAME + (EXE_FILE if windows else SHL_FILE)


MAJOR_VERSION = 2
MINOR_VERSION = 8
PATCH_VERSION = 0
VERSION = version_check(MAJOR_VERSION, MINOR_VERSION, PATCH_VERSION, 0)
VERSION_STR = version_string(MAJOR_VERSION, MINOR_VERSION, PATCH_VERSION, 0)
VERSION_TIME_STR = "(2024/03/28)"

LIBRARY_MAJOR_VERSION = 1
LIBRARY_MINOR_VERSION = 2
LIBRARY_PATCH_VERSION = 11
LIBRARY_VERSION = version_check(
    LIBRARY_MAJOR_VERSION, LIBRARY_MINOR_VERSION, LIBRARY_PATCH_VERSION, 0
)
LIBRARY_VERSION_STR = version_string(
    LIBRARY_MAJOR_VERSION, LIBRARY_MINOR_VERSION, LIBRARY_PATCH_VERSION, 0
)