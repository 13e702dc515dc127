"""Verisure API client."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Sequence
from http import HTTPStatus
from typing import Any

import aiohttp

from .const import (
    API_URLS,
    AUTH_PREFIX,
    DEFAULT_TIMEOUT,
    MEDIA_TYPE,
    PATH_COOKIE,
    PATH_INSTALLATION_SEARCH,
    PATH_OVERVIEW,
    PATH_SMARTPLUG_STATE,
    USER_AGENT,
)
from .exceptions import (
    VerisureApiError,
    VerisureAuthError,
    VerisureConnectionError,
    VerisureDecodeError,
    VerisureError,
    VerisureSerializationError,
    VerisureTimeoutError,
)
from .models import Overview, SmartPlugState, extract_giid

_LOGGER = logging.getLogger(__name__)


class VerisureClient:
    """Async client for the Verisure app API.

    Usage:
        async with VerisureClient() as client:
            await client.async_login("user@example.com", "password")
            overview = await client.async_get_overview()

    The client holds one session: the active base URL, the cookie jar of
    its aiohttp session and the installation giid. It is not safe for
    concurrent use without external locking.

    Resource calls are not checked against the login state. Called before
    ``async_login`` (or after ``async_logout``) they still go out and are
    rejected by the server.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession | None = None,
        *,
        endpoints: Sequence[str] = API_URLS,
        giid: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the client.

        Args:
            session: aiohttp client session. Its cookie jar carries the
                login cookie, so it should not be shared between accounts.
                If None, the client creates one and closes it in
                ``async_close``.
            endpoints: Candidate base URLs, tried in order on login.
            giid: Installation id cached from an earlier login. Login is
                still required before calls succeed.
            timeout: Per-request timeout in seconds.
        """
        if not endpoints:
            raise ValueError("At least one endpoint is required")
        self._session = session
        self._owns_session = session is None
        self._endpoints: tuple[str, ...] = tuple(endpoints)
        self._timeout = aiohttp.ClientTimeout(total=timeout)

        self._base_url: str | None = None
        self._giid = giid

    async def __aenter__(self) -> VerisureClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.async_close()

    # ── Public properties ────────────────────────────────────────────

    @property
    def endpoints(self) -> tuple[str, ...]:
        """Candidate base URLs, in the order login tries them."""
        return self._endpoints

    @property
    def base_url(self) -> str | None:
        """Base URL that accepted the last successful login."""
        return self._base_url

    @property
    def giid(self) -> str | None:
        """Installation id used by resource calls."""
        return self._giid

    async def async_close(self) -> None:
        """Close the aiohttp session if the client created it."""
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    # ── Authentication ───────────────────────────────────────────────

    async def async_login(self, username: str, password: str) -> str:
        """Log in and resolve the installation id.

        Each endpoint is tried in order until one accepts the credentials;
        the giid is then looked up on that endpoint. The client's base URL
        and giid only change when both steps succeed.

        Args:
            username: Verisure account e-mail.
            password: Account password.

        Returns:
            The giid of the account's first installation.

        Raises:
            VerisureAuthError: If every endpoint rejected the credentials
                (when the last endpoint did).
            VerisureConnectionError: If the last endpoint could not be reached.
            VerisureProtocolError: If the account has no usable installation.
        """
        base_url = await self._async_try_endpoints(username, password)
        giid = await self._async_get_giid(base_url, username)

        self._base_url = base_url
        self._giid = giid
        _LOGGER.debug("Logged in on %s, giid %s", base_url, giid)
        return giid

    async def _async_try_endpoints(self, username: str, password: str) -> str:
        """Return the first endpoint that accepts the credentials."""
        *fallbacks, last = self._endpoints
        for base_url in fallbacks:
            try:
                await self._async_authenticate(base_url, username, password)
            except VerisureError as err:
                _LOGGER.debug("Login on %s failed: %s", base_url, err)
                continue
            return base_url
        # The last endpoint's error goes to the caller
        await self._async_authenticate(last, username, password)
        return last

    async def _async_authenticate(
        self, base_url: str, username: str, password: str
    ) -> None:
        """Request a session cookie from one endpoint."""
        try:
            authorization = aiohttp.encode_basic_auth(
                f"{AUTH_PREFIX}{username}", password
            )
        except ValueError as err:
            raise VerisureAuthError(f"login: {err}") from err
        await self._request(
            "POST",
            f"{base_url}{PATH_COOKIE}",
            "login",
            authorization=authorization,
            error_cls=VerisureAuthError,
        )

    async def _async_get_giid(self, base_url: str, username: str) -> str:
        """Look up the giid of the account's first installation."""
        records = await self._request(
            "GET",
            f"{base_url}{PATH_INSTALLATION_SEARCH}",
            "installations",
            params={"email": username},
            decode=True,
        )
        return extract_giid(records)

    async def async_logout(self) -> None:
        """End the server-side session.

        The base URL and giid are kept; further calls fail server-side.
        """
        await self._request("DELETE", self._url(PATH_COOKIE), "logout")
        _LOGGER.debug("Logged out from %s", self._url(""))

    # ── Installation ─────────────────────────────────────────────────

    async def async_get_overview(self) -> Overview:
        """Get the current state of the installation.

        Raises:
            VerisureApiError: If the server answers with a non-200 status.
            VerisureDecodeError: If the body is not an overview object.
        """
        result = await self._request(
            "GET",
            self._url(PATH_OVERVIEW.format(giid=self._giid or "")),
            "overview",
            decode=True,
        )
        return Overview.from_api(result)

    async def async_update_smartplugs(
        self, updates: Iterable[SmartPlugState]
    ) -> None:
        """Switch one or more smart plugs.

        Args:
            updates: Desired plug states, sent in the given order.

        Raises:
            VerisureSerializationError: If an update cannot be encoded. No
                request is made in that case.
            VerisureApiError: If the server answers with a non-200 status.
        """
        try:
            payload = json.dumps([update.to_api() for update in updates])
        except (TypeError, ValueError, AttributeError) as err:
            raise VerisureSerializationError(f"smartplug: {err}") from err

        await self._request(
            "POST",
            self._url(PATH_SMARTPLUG_STATE.format(giid=self._giid or "")),
            "smartplug",
            data=payload,
        )

    async def async_set_smartplug(self, device_label: str, state: bool) -> None:
        """Switch a single smart plug on or off."""
        await self.async_update_smartplugs([SmartPlugState(device_label, state)])

    # ── HTTP helpers ─────────────────────────────────────────────────

    def _url(self, path: str) -> str:
        # Before login there is no active endpoint; use the first candidate
        # and let the server reject the call.
        return f"{self._base_url or self._endpoints[0]}{path}"

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            # unsafe: also keep cookies from endpoints given as IP addresses
            self._session = aiohttp.ClientSession(
                cookie_jar=aiohttp.CookieJar(unsafe=True)
            )
        return self._session

    async def _request(
        self,
        method: str,
        url: str,
        call: str,
        *,
        data: str | None = None,
        params: dict[str, str] | None = None,
        authorization: str | None = None,
        error_cls: type[VerisureApiError] = VerisureApiError,
        decode: bool = False,
    ) -> Any:
        """Make an API request and check for a 200 response.

        Args:
            method: HTTP method.
            url: Full request URL.
            call: Name of the call, used to prefix error messages.
            data: Encoded JSON request body.
            params: Query parameters.
            authorization: Authorization header value (login only).
            error_cls: Error raised for a non-200 response.
            decode: Return the decoded JSON body instead of None.
        """
        headers = {
            "Accept": MEDIA_TYPE,
            "Content-Type": MEDIA_TYPE,
            "User-Agent": USER_AGENT,
        }
        if authorization is not None:
            headers["Authorization"] = authorization
        session = self._get_session()

        try:
            async with session.request(
                method,
                url,
                headers=headers,
                data=data,
                params=params,
                timeout=self._timeout,
            ) as resp:
                if resp.status != HTTPStatus.OK:
                    raise error_cls(
                        f"{call}: {resp.status} {resp.reason}",
                        status_code=resp.status,
                        reason=resp.reason,
                    )
                if not decode:
                    return None
                try:
                    return await resp.json(content_type=None)
                except ValueError as err:
                    raise VerisureDecodeError(
                        f"{call}: invalid JSON response: {err}"
                    ) from err
        except TimeoutError as err:
            raise VerisureTimeoutError(
                f"{call}: {method} {url} timed out"
            ) from err
        except aiohttp.ClientError as err:
            raise VerisureConnectionError(
                f"{call}: {method} {url}: {err}"
            ) from err
