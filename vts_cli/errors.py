"""Exceptions raised by vts-cli.

All of them derive from click.ClickException, so the CLI prints
``Error: <message>`` to stderr and exits with status 1.
"""
from __future__ import annotations

import click


class VtsCliError(click.ClickException):
    """Base class for errors reported to the user."""


class ConfigError(VtsCliError):
    """The config file is missing, unreadable or malformed."""


class VtsConnectionError(VtsCliError):
    """The websocket connection could not be opened or was lost."""


class AuthenticationError(VtsCliError):
    """VTube Studio refused the plugin token."""


class NotFoundError(VtsCliError):
    """A lookup by name matched nothing."""


class ApiError(VtsCliError):
    """VTube Studio answered a request with an APIError message."""

    def __init__(self, error_id: int, message: str, request_type: str = "") -> None:
        self.error_id = error_id
        self.api_message = message
        self.request_type = request_type
        text = f"VTube Studio API error {error_id}: {message}"
        if request_type:
            text = f"{request_type} failed with {text}"
        super().__init__(text)
