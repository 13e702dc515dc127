"""Shared fixtures for verisurepy tests."""

from __future__ import annotations

import asyncio
from http import HTTPStatus
from typing import Any
from unittest.mock import AsyncMock

import pytest


class MockResponse:
    """Stand-in for an aiohttp response used as ``async with``."""

    def __init__(
        self,
        status: int = 200,
        json_data: Any = None,
        *,
        exc: BaseException | None = None,
        json_exc: Exception | None = None,
    ) -> None:
        self.status = status
        self.reason = HTTPStatus(status).phrase
        self._json = json_data
        self._exc = exc
        self._json_exc = json_exc

    async def __aenter__(self) -> MockResponse:
        # Yield to the loop like a real request would
        await asyncio.sleep(0)
        if self._exc is not None:
            raise self._exc
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None

    async def json(self, content_type: str | None = None) -> Any:
        if self._json_exc is not None:
            raise self._json_exc
        return self._json


class FakeSession:
    """Routes ``(method, url)`` to queued responses and records every call."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], list[MockResponse]] = {}
        self.calls: list[tuple[str, str, dict[str, Any]]] = []
        self.close = AsyncMock()

    def add(self, method: str, url: str, status: int = 200, **kwargs: Any) -> None:
        self.routes.setdefault((method, url), []).append(
            MockResponse(status, **kwargs)
        )

    def request(self, method: str, url: str, **kwargs: Any) -> MockResponse:
        self.calls.append((method, url, kwargs))
        queue = self.routes.get((method, url))
        if not queue:
            return MockResponse(404)
        # The last queued response is repeated
        return queue.pop(0) if len(queue) > 1 else queue[0]

    def urls(self) -> list[str]:
        return [url for _, url, _ in self.calls]


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def sample_overview() -> dict[str, Any]:
    """A trimmed overview response."""
    return {
        "accountPermissions": {"accountPermissionsHash": "hash-1"},
        "armState": {
            "statusType": "ARMED_AWAY",
            "date": "2019-02-10T08:21:04.000Z",
            "changedVia": "CODE",
        },
        "armstateCompatible": True,
        "controlPlugs": [],
        "smartPlugs": [
            {
                "icon": "LAMP",
                "isHazardous": False,
                "deviceLabel": "6RNZ ABCD",
                "area": "Living room",
                "currentState": "ON",
                "pendingState": "NONE",
            }
        ],
        "doorLockStatusList": [],
        "totalSmsCount": 3,
        "climateValues": [
            {
                "deviceLabel": "2BD8 EFGH",
                "deviceArea": "Hall",
                "deviceType": "SMOKE2",
                "temperature": 21.5,
                "humidity": 40.0,
                "time": "2019-02-10T08:00:00.000Z",
            }
        ],
        "installationErrorList": [],
        "pendingChanges": 0,
        "ethernetModeActive": False,
        "ethernetConnectedNow": True,
        "heatPumps": [],
        "smartCameras": [],
        "latestEthernetStatus": {
            "latestEthernetTestResult": True,
            "testDate": "2019-02-09T10:00:00.000Z",
            "protectedArea": "Hall",
            "deviceLabel": "3CEF IJKL",
        },
        "customerImageCameras": [],
        "batteryProcess": {"active": False},
        "userTracking": {"installationStatus": "ACTIVE"},
        "eventCounts": [],
        "doorWindow": {
            "reportState": True,
            "doorWindowDevice": [
                {
                    "deviceLabel": "1AB2 MNOP",
                    "area": "Front door",
                    "state": "OPEN",
                    "wired": False,
                    "reportTime": "2019-02-10T07:59:00.000Z",
                }
            ],
        },
        "someFutureField": {"nested": [1, 2, 3]},
    }
