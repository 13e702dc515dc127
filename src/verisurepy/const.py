"""Constants for the verisurepy library."""

from enum import StrEnum

# Verisure API base URLs, tried in this order on login
API_URLS: tuple[str, ...] = (
    "https://e-api01.verisure.com/xbn/2",
    "https://e-api02.verisure.com/xbn/2",
)

MEDIA_TYPE = "application/json"

# Basic auth identity is "CPE/<username>"
AUTH_PREFIX = "CPE/"

# Routes, relative to the active base URL
PATH_COOKIE = "/cookie"
PATH_INSTALLATION_SEARCH = "/installation/search"
PATH_OVERVIEW = "/installation/{giid}/overview"
PATH_SMARTPLUG_STATE = "/installation/{giid}/smartplug/state"

# Request timeout in seconds
DEFAULT_TIMEOUT = 10

# User agent
USER_AGENT = "verisurepy/0.1.0"


class ArmStatus(StrEnum):
    """Alarm arm states as returned by the Verisure API."""

    DISARMED = "DISARMED"
    ARMED_HOME = "ARMED_HOME"
    ARMED_AWAY = "ARMED_AWAY"
    UNKNOWN = "UNKNOWN"


class PlugState(StrEnum):
    """Smart plug states."""

    ON = "ON"
    OFF = "OFF"
