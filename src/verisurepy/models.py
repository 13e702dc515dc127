"""Data models for the verisurepy library."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .const import ArmStatus, PlugState
from .exceptions import (
    VerisureDecodeError,
    VerisureNoGiidError,
    VerisureNoInstallationsError,
    VerisureSerializationError,
)


def extract_giid(records: Any) -> str:
    """Return the giid of the first installation record.

    Only the ``giid`` key is read; any other keys in the records are
    ignored.

    Args:
        records: Decoded body of the installation search call.

    Raises:
        VerisureDecodeError: If the body is not a list of objects.
        VerisureNoInstallationsError: If the list is empty.
        VerisureNoGiidError: If the first record has no string giid.
    """
    if not isinstance(records, list):
        raise VerisureDecodeError(
            f"installations: expected a list, got {type(records).__name__}"
        )
    if not records:
        raise VerisureNoInstallationsError("no installations found")
    first = records[0]
    if not isinstance(first, dict):
        raise VerisureDecodeError(
            f"installations: expected an object, got {type(first).__name__}"
        )
    giid = first.get("giid")
    if not isinstance(giid, str):
        raise VerisureNoGiidError("no giid found")
    return giid


def _typed(data: dict[str, Any], key: str, kinds: tuple[type, ...], default: Any) -> Any:
    """Return ``data[key]`` checked against ``kinds``; null or absent gives ``default``."""
    value = data.get(key)
    if value is None:
        return default
    # bool is an int subclass
    if not isinstance(value, kinds) or (isinstance(value, bool) and bool not in kinds):
        names = "/".join(kind.__name__ for kind in kinds)
        raise VerisureDecodeError(
            f"overview: {key} must be {names}, got {type(value).__name__}"
        )
    return value


def _str(data: dict[str, Any], key: str) -> str:
    value: str = _typed(data, key, (str,), "")
    return value


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    value: str | None = _typed(data, key, (str,), None)
    return value


def _bool(data: dict[str, Any], key: str) -> bool:
    value: bool = _typed(data, key, (bool,), False)
    return value


def _int(data: dict[str, Any], key: str) -> int:
    value: int = _typed(data, key, (int,), 0)
    return value


def _optional_float(data: dict[str, Any], key: str) -> float | None:
    value = _typed(data, key, (int, float), None)
    return None if value is None else float(value)


def _object(data: dict[str, Any], key: str) -> dict[str, Any]:
    value: dict[str, Any] = _typed(data, key, (dict,), {})
    return value


def _list(data: dict[str, Any], key: str) -> list[Any]:
    value: list[Any] = _typed(data, key, (list,), [])
    return value


def _objects(data: dict[str, Any], key: str) -> list[dict[str, Any]]:
    items = _list(data, key)
    for item in items:
        if not isinstance(item, dict):
            raise VerisureDecodeError(
                f"overview: {key} entries must be objects, got {type(item).__name__}"
            )
    return items


@dataclass
class ArmState:
    """Current arm state of the alarm."""

    status: ArmStatus
    status_type: str
    date: str | None
    changed_via: str | None
    raw: dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> ArmState:
        """Create from API response data."""
        status_type = _str(data, "statusType")
        try:
            status = ArmStatus(status_type) if status_type else ArmStatus.UNKNOWN
        except ValueError:
            status = ArmStatus.UNKNOWN
        return cls(
            status=status,
            status_type=status_type,
            date=_optional_str(data, "date"),
            changed_via=_optional_str(data, "changedVia"),
            raw=data,
        )


@dataclass
class ControlPlug:
    """A control plug."""

    device_id: str
    device_label: str
    area: str
    profile: str
    current_state: str
    pending_state: str
    raw: dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> ControlPlug:
        return cls(
            device_id=_str(data, "deviceId"),
            device_label=_str(data, "deviceLabel"),
            area=_str(data, "area"),
            profile=_str(data, "profile"),
            current_state=_str(data, "currentState"),
            pending_state=_str(data, "pendingState"),
            raw=data,
        )


@dataclass
class SmartPlug:
    """A smart plug."""

    device_label: str
    area: str
    icon: str
    is_hazardous: bool
    current_state: str
    pending_state: str
    raw: dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def is_on(self) -> bool:
        """Return True if the plug is switched on."""
        return self.current_state == PlugState.ON

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> SmartPlug:
        return cls(
            device_label=_str(data, "deviceLabel"),
            area=_str(data, "area"),
            icon=_str(data, "icon"),
            is_hazardous=_bool(data, "isHazardous"),
            current_state=_str(data, "currentState"),
            pending_state=_str(data, "pendingState"),
            raw=data,
        )


@dataclass
class ClimateValue:
    """A temperature (and possibly humidity) reading."""

    device_label: str
    device_area: str
    device_type: str
    temperature: float | None
    humidity: float | None
    time: str | None
    raw: dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> ClimateValue:
        return cls(
            device_label=_str(data, "deviceLabel"),
            device_area=_str(data, "deviceArea"),
            device_type=_str(data, "deviceType"),
            temperature=_optional_float(data, "temperature"),
            # Only present on sensors that measure it
            humidity=_optional_float(data, "humidity"),
            time=_optional_str(data, "time"),
            raw=data,
        )


@dataclass
class LatestEthernetStatus:
    """Result of the most recent ethernet connectivity test."""

    latest_ethernet_test_result: bool
    test_date: str | None
    protected_area: str
    device_label: str
    raw: dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> LatestEthernetStatus:
        return cls(
            latest_ethernet_test_result=_bool(data, "latestEthernetTestResult"),
            test_date=_optional_str(data, "testDate"),
            protected_area=_str(data, "protectedArea"),
            device_label=_str(data, "deviceLabel"),
            raw=data,
        )


@dataclass
class DoorWindowDevice:
    """A door or window sensor."""

    device_label: str
    area: str
    state: str
    wired: bool
    report_time: str | None
    raw: dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def is_open(self) -> bool:
        """Return True if the door or window is open."""
        return self.state == "OPEN"

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> DoorWindowDevice:
        return cls(
            device_label=_str(data, "deviceLabel"),
            area=_str(data, "area"),
            state=_str(data, "state"),
            wired=_bool(data, "wired"),
            report_time=_optional_str(data, "reportTime"),
            raw=data,
        )


@dataclass
class DoorWindow:
    """Door and window sensor summary."""

    report_state: bool
    devices: list[DoorWindowDevice] = field(default_factory=list)
    raw: dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> DoorWindow:
        return cls(
            report_state=_bool(data, "reportState"),
            devices=[
                DoorWindowDevice.from_api(d)
                for d in _objects(data, "doorWindowDevice")
            ],
            raw=data,
        )


@dataclass
class Overview:
    """Snapshot of an installation's state.

    Lists the API returns without a modelled shape (heat pumps, cameras,
    event counts, ...) are passed through as plain JSON values.
    """

    account_permissions_hash: str
    arm_state: ArmState
    armstate_compatible: bool
    control_plugs: list[ControlPlug]
    smart_plugs: list[SmartPlug]
    door_lock_status_list: list[Any]
    total_sms_count: int
    climate_values: list[ClimateValue]
    installation_error_list: list[Any]
    pending_changes: int
    ethernet_mode_active: bool
    ethernet_connected_now: bool
    heat_pumps: list[Any]
    smart_cameras: list[Any]
    latest_ethernet_status: LatestEthernetStatus
    customer_image_cameras: list[Any]
    battery_process_active: bool
    installation_status: str
    event_counts: list[Any]
    door_window: DoorWindow

    # Full raw response for anything we haven't modeled
    raw: dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def is_armed(self) -> bool:
        """Return True if the alarm is armed in any mode."""
        return self.arm_state.status in (
            ArmStatus.ARMED_HOME,
            ArmStatus.ARMED_AWAY,
        )

    def get_smart_plug(self, device_label: str) -> SmartPlug | None:
        """Return the smart plug with the given device label, if any."""
        for plug in self.smart_plugs:
            if plug.device_label == device_label:
                return plug
        return None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> Overview:
        """Create from API response data.

        Absent or null fields get empty defaults; unknown fields are
        ignored.

        Raises:
            VerisureDecodeError: If ``data`` or a modelled field has the
                wrong JSON type.
        """
        if not isinstance(data, dict):
            raise VerisureDecodeError(
                f"overview: expected an object, got {type(data).__name__}"
            )
        return cls(
            account_permissions_hash=_str(
                _object(data, "accountPermissions"), "accountPermissionsHash"
            ),
            arm_state=ArmState.from_api(_object(data, "armState")),
            armstate_compatible=_bool(data, "armstateCompatible"),
            control_plugs=[
                ControlPlug.from_api(p) for p in _objects(data, "controlPlugs")
            ],
            smart_plugs=[SmartPlug.from_api(p) for p in _objects(data, "smartPlugs")],
            door_lock_status_list=_list(data, "doorLockStatusList"),
            total_sms_count=_int(data, "totalSmsCount"),
            climate_values=[
                ClimateValue.from_api(c) for c in _objects(data, "climateValues")
            ],
            installation_error_list=_list(data, "installationErrorList"),
            pending_changes=_int(data, "pendingChanges"),
            ethernet_mode_active=_bool(data, "ethernetModeActive"),
            ethernet_connected_now=_bool(data, "ethernetConnectedNow"),
            heat_pumps=_list(data, "heatPumps"),
            smart_cameras=_list(data, "smartCameras"),
            latest_ethernet_status=LatestEthernetStatus.from_api(
                _object(data, "latestEthernetStatus")
            ),
            customer_image_cameras=_list(data, "customerImageCameras"),
            battery_process_active=_bool(_object(data, "batteryProcess"), "active"),
            installation_status=_str(
                _object(data, "userTracking"), "installationStatus"
            ),
            event_counts=_list(data, "eventCounts"),
            door_window=DoorWindow.from_api(_object(data, "doorWindow")),
            raw=data,
        )


@dataclass
class SmartPlugState:
    """Desired state for one smart plug, sent to the smartplug/state route."""

    device_label: str
    state: bool

    def to_api(self) -> dict[str, Any]:
        """Return the JSON object sent to the API.

        Raises:
            VerisureSerializationError: If a field has the wrong type.
        """
        if not isinstance(self.device_label, str):
            raise VerisureSerializationError(
                f"smartplug: deviceLabel must be a string, "
                f"got {type(self.device_label).__name__}"
            )
        if not isinstance(self.state, bool):
            raise VerisureSerializationError(
                f"smartplug: state must be a bool, got {type(self.state).__name__}"
            )
        return {"deviceLabel": self.device_label, "state": self.state}
