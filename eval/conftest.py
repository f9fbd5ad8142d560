"""Shared fixtures: a scripted stand-in for the pyvts client."""
import json

import pytest
from click.testing import CliRunner

from vts_cli.cli import AppState, cli


def response(message_type, data=None):
    return {
        "apiName": "VTubeStudioPublicAPI",
        "apiVersion": "1.0",
        "requestID": "test",
        "messageType": message_type,
        "data": data or {},
    }


def api_error(error_id, message):
    return response("APIError", {"errorID": error_id, "message": message})


class FakeRequestBuilder:
    def BaseRequest(self, message_type, data=None, request_id="SomeID"):
        msg = {
            "apiName": "VTubeStudioPublicAPI",
            "apiVersion": "1.0",
            "requestID": request_id,
            "messageType": message_type,
        }
        if data is not None:
            msg["data"] = data
        return msg


class FakeVts:
    """Records every request and answers from `replies` (messageType -> data).

    A reply that is already a full message (e.g. from api_error()) is
    returned as-is.
    """

    def __init__(self, valid_tokens=("good-token",), issue_token="new-token"):
        self.valid_tokens = set(valid_tokens)
        self.issue_token = issue_token
        self.replies = {}
        self.requests = []
        self.connect_error = None
        self.websocket = None
        self.closed = False
        self.config = None
        self.vts_request = FakeRequestBuilder()

    async def connect(self):
        if self.connect_error is not None:
            raise self.connect_error
        self.websocket = object()

    async def close(self):
        self.closed = True

    async def request(self, msg):
        self.requests.append(msg)
        message_type = msg["messageType"]
        data = msg.get("data") or {}

        if message_type == "AuthenticationTokenRequest":
            if self.issue_token is None:
                return api_error(50, "User has denied API access for your plugin.")
            self.valid_tokens.add(self.issue_token)
            return response("AuthenticationTokenResponse",
                            {"authenticationToken": self.issue_token})

        if message_type == "AuthenticationRequest":
            ok = data.get("authenticationToken") in self.valid_tokens
            return response("AuthenticationResponse", {
                "authenticated": ok,
                "reason": "Token valid." if ok else "Token invalid.",
            })

        reply = self.replies.get(message_type, {})
        if "messageType" in reply:
            return reply
        return response(message_type.replace("Request", "Response"), reply)

    def sent(self, message_type):
        """Data of every request of this type, in order."""
        return [m.get("data") for m in self.requests if m["messageType"] == message_type]

    def message_types(self):
        return [m["messageType"] for m in self.requests]


@pytest.fixture
def fake_vts():
    return FakeVts()


@pytest.fixture
def client_factory(fake_vts):
    def factory(config):
        fake_vts.config = config
        return fake_vts
    return factory


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "host": "localhost",
        "port": 8001,
        "token": "good-token",
        "plugin_name": "VTube Studio CLI",
        "plugin_developer": "Walfie",
    }))
    return str(path)


@pytest.fixture
def run_cli(client_factory, config_file):
    """Invoke the CLI against the fake client with the test config file."""
    def run(*args):
        runner = CliRunner()
        state = AppState(client_factory=client_factory)
        return runner.invoke(cli, ["--config-file", config_file, *args], obj=state)
    return run
