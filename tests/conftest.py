"""
Pytest fixtures for ngrok-docker tests
"""
import json
import pytest

from ngrok_docker.exceptions import CommandError
from ngrok_docker.models.schemas import InterfaceAddress
from ngrok_docker.services.commands import CommandRunner


class FakeRunner(CommandRunner):
    """
    Records every command and answers by docker subcommand.

    A response may be a string (returned as stdout), an exception (raised),
    or a callable taking the args.
    """

    def __init__(self, **responses):
        self.responses = responses
        self.calls = []

    def run(self, args):
        args = list(args)
        self.calls.append(args)
        response = self.responses.get(args[1], "")
        if callable(response):
            return response(args)
        if isinstance(response, Exception):
            raise response
        return response

    def subcommands(self):
        return [call[1] for call in self.calls]


class FakeClock:
    """Stands in for time.sleep: advances instantly and records delays"""

    def __init__(self):
        self.now = 0.0
        self.delays = []

    def sleep(self, seconds):
        if seconds > 0:
            self.delays.append(seconds)
            self.now += seconds


def tunnels_json(*urls):
    return json.dumps({"tunnels": [{"name": "command_line", "proto": "https", "public_url": u} for u in urls]})


def failing_then(failures, stdout):
    """Responder that fails `failures` times and then returns stdout"""
    state = {"calls": 0}

    def respond(args):
        state["calls"] += 1
        if state["calls"] <= failures:
            raise CommandError(args, 1, "connection refused")
        return stdout
    return respond


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def interfaces():
    """Typical host: loopback first, then a wired and a wireless interface"""
    return {
        "lo": [
            InterfaceAddress(address="127.0.0.1", family="IPv4", internal=True),
            InterfaceAddress(address="::1", family="IPv6", internal=True),
        ],
        "eth0": [
            InterfaceAddress(address="fe80::1", family="IPv6"),
            InterfaceAddress(address="192.168.1.20", family="IPv4"),
        ],
        "wlan0": [
            InterfaceAddress(address="10.0.0.7", family="IPv4"),
        ],
    }
