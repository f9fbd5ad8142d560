"""One connection to the VTube Studio API, built on pyvts.

pyvts owns the websocket and the request envelope. This module adds the
plugin token flow and turns ``APIError`` responses into exceptions:

    async with Session(config) as session:
        await session.authenticate()
        data = await session.request("StatisticsRequest")
"""
from __future__ import annotations

import asyncio
import logging
import uuid
from typing import Any, Callable

import pyvts
from websockets.exceptions import WebSocketException

from vts_cli.config import Config
from vts_cli.errors import ApiError, AuthenticationError, VtsConnectionError
from vts_cli.output import waiting

logger = logging.getLogger(__name__)

API_NAME = "VTubeStudioPublicAPI"
API_VERSION = "1.0"

API_ERROR = "APIError"


def pyvts_client(config: Config) -> Any:
    """Build the pyvts client for this config.

    The token never goes through pyvts' token file: it lives in our own
    config file, so the file path handed to pyvts is never written.
    """
    return pyvts.vts(
        plugin_info={
            "plugin_name": config.plugin_name,
            "developer": config.plugin_developer,
            "authentication_token_path": "",
        },
        vts_api_info={
            "version": API_VERSION,
            "name": API_NAME,
            "host": config.host,
            "port": config.port,
        },
    )


class Session:
    """A connected, optionally authenticated VTube Studio API session."""

    def __init__(self, config: Config,
                 client_factory: Callable[[Config], Any] | None = None) -> None:
        self.config = config
        self.token = config.token
        self.new_token: str | None = None
        self.authenticated = False
        self._client_factory = client_factory or pyvts_client
        self._client = None

    async def __aenter__(self) -> "Session":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def connect(self) -> None:
        url = self.config.websocket_url
        logger.debug("Connecting to %s", url)
        client = self._client_factory(self.config)
        try:
            await client.connect()
        except (OSError, asyncio.TimeoutError, WebSocketException) as e:
            raise VtsConnectionError(
                f"failed to connect to VTube Studio at {url}: {e}"
            )

        # pyvts reports some connection failures by leaving the socket unset.
        if getattr(client, "websocket", None) is None:
            raise VtsConnectionError(
                f"failed to connect to VTube Studio at {url} "
                f"(is the plugin API enabled?)"
            )
        self._client = client

    async def close(self) -> None:
        if self._client is None:
            return
        client, self._client = self._client, None
        try:
            await client.close()
        except (OSError, WebSocketException) as e:
            logger.debug("Error while closing connection: %s", e)

    async def send(self, message_type: str, data: dict | None = None) -> dict:
        """Send one request and return the full response message."""
        if self._client is None:
            raise VtsConnectionError("not connected to VTube Studio")

        request_id = uuid.uuid4().hex
        message = self._client.vts_request.BaseRequest(message_type, data, request_id)
        logger.debug("-> %s %s", message_type, data)
        try:
            response = await self._client.request(message)
        except (OSError, WebSocketException) as e:
            raise VtsConnectionError(f"connection lost during {message_type}: {e}")

        if not isinstance(response, dict):
            raise VtsConnectionError(f"unexpected reply to {message_type}: {response!r}")
        logger.debug("<- %s %s", response.get("messageType"), response.get("data"))
        return response

    async def request(self, message_type: str, data: dict | None = None) -> dict:
        """Send one request and return the response data, raising ApiError on failure."""
        response = await self.send(message_type, data)
        payload = response.get("data") or {}

        if response.get("messageType") == API_ERROR:
            raise ApiError(
                payload.get("errorID", -1),
                payload.get("message", "unknown error"),
                request_type=message_type,
            )
        return payload

    async def authenticate(self) -> None:
        """Authenticate with the stored token, requesting a new one if needed."""
        if self.token and await self._authenticate_with(self.token):
            return

        if self.token:
            logger.info("Stored token was rejected; requesting a new one.")

        token = await self._request_token()
        if not await self._authenticate_with(token):
            raise AuthenticationError("VTube Studio rejected the newly issued token")

    async def _request_token(self) -> str:
        logger.info(
            "Requesting plugin permissions. Please accept the permissions "
            "pop-up in the VTube Studio app."
        )
        with waiting("Waiting for permission in VTube Studio..."):
            try:
                data = await self.request("AuthenticationTokenRequest", {
                    "pluginName": self.config.plugin_name,
                    "pluginDeveloper": self.config.plugin_developer,
                })
            except ApiError as e:
                raise AuthenticationError(f"plugin permission was not granted ({e.api_message})")

        token = data.get("authenticationToken")
        if not token:
            raise AuthenticationError("VTube Studio did not issue a token")

        self.token = token
        self.new_token = token
        return token

    async def _authenticate_with(self, token: str) -> bool:
        data = await self.request("AuthenticationRequest", {
            "pluginName": self.config.plugin_name,
            "pluginDeveloper": self.config.plugin_developer,
            "authenticationToken": token,
        })
        self.authenticated = bool(data.get("authenticated"))
        if not self.authenticated:
            logger.debug("Authentication refused: %s", data.get("reason"))
        return self.authenticated
