"""verisurepy — Python client library for the Verisure app API.

Usage:
    from verisurepy import VerisureClient

    async with VerisureClient() as client:
        await client.async_login("user@example.com", "password")
        overview = await client.async_get_overview()
        print(overview.arm_state.status)
        await client.async_set_smartplug("Lamp", True)
        await client.async_logout()
"""

from .client import VerisureClient
from .const import API_URLS, ArmStatus, PlugState
from .exceptions import (
    VerisureApiError,
    VerisureAuthError,
    VerisureConnectionError,
    VerisureDecodeError,
    VerisureError,
    VerisureNoGiidError,
    VerisureNoInstallationsError,
    VerisureProtocolError,
    VerisureSerializationError,
    VerisureTimeoutError,
)
from .models import (
    ArmState,
    ClimateValue,
    ControlPlug,
    DoorWindow,
    DoorWindowDevice,
    LatestEthernetStatus,
    Overview,
    SmartPlug,
    SmartPlugState,
    extract_giid,
)

__all__ = [
    "VerisureClient",
    "API_URLS",
    "ArmStatus",
    "PlugState",
    "VerisureError",
    "VerisureApiError",
    "VerisureAuthError",
    "VerisureConnectionError",
    "VerisureDecodeError",
    "VerisureNoGiidError",
    "VerisureNoInstallationsError",
    "VerisureProtocolError",
    "VerisureSerializationError",
    "VerisureTimeoutError",
    "ArmState",
    "ClimateValue",
    "ControlPlug",
    "DoorWindow",
    "DoorWindowDevice",
    "LatestEthernetStatus",
    "Overview",
    "SmartPlug",
    "SmartPlugState",
    "extract_giid",
]

__version__ = "0.1.0"
