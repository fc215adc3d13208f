"""
CLI tests (Typer CliRunner, no network).
Run: pytest tests/test_cli.py -v
"""

import json

import pytest
from typer.testing import CliRunner

from restclient.cli import doctor
from restclient.cli import main as cli_main
from restclient.core.errors import TransportError
from restclient.core.services.client import Client

runner = CliRunner()


@pytest.fixture
def fake_client(monkeypatch, make_transport):
    def install(**reply):
        transport = make_transport(**reply)
        monkeypatch.setattr(cli_main, "_make_client", lambda settings: Client(transport))
        return transport

    return install


class TestCall:
    def test_get_with_params(self, fake_client):
        transport = fake_client(status=200, content=b'{"name": "shoes"}')
        result = runner.invoke(cli_main.app, ["call", "http://api.test/items", "-p", "q=shoes"])
        assert result.exit_code == 0, result.output
        assert transport.messages[0].url == "http://api.test/items?q=shoes"
        assert "200" in result.output
        assert "shoes" in result.output

    def test_post_with_data_headers_and_user(self, fake_client):
        transport = fake_client(status=201, content=b"")
        result = runner.invoke(
            cli_main.app,
            [
                "call",
                "http://api.test/items",
                "-X",
                "post",
                "-d",
                '{"name": "widget"}',
                "-H",
                "X-Trace=abc",
                "-u",
                "user:pass",
            ],
        )
        assert result.exit_code == 0, result.output
        msg = transport.messages[0]
        assert json.loads(msg.body) == {"name": "widget"}
        assert msg.headers["X-Trace"] == "abc"
        assert msg.headers["Authorization"] == "Basic dXNlcjpwYXNz"
        assert "(empty body)" in result.output

    def test_error_status_exits_non_zero(self, fake_client):
        fake_client(status=404, content=b'{"msg": "not found"}')
        result = runner.invoke(cli_main.app, ["call", "http://api.test/items/9"])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_transport_failure(self, fake_client):
        fake_client(error=TransportError("connection refused"))
        result = runner.invoke(cli_main.app, ["call", "http://api.test/items"])
        assert result.exit_code == 1
        assert "connection refused" in result.output

    def test_invalid_pair(self, fake_client):
        transport = fake_client()
        result = runner.invoke(cli_main.app, ["call", "http://api.test/items", "-p", "novalue"])
        assert result.exit_code != 0
        assert transport.messages == []

    def test_invalid_json_data(self, fake_client):
        transport = fake_client()
        result = runner.invoke(cli_main.app, ["call", "http://api.test/items", "-X", "POST", "-d", "{nope"])
        assert result.exit_code != 0
        assert transport.messages == []

    def test_invalid_log_level_is_reported(self, fake_client, monkeypatch):
        transport = fake_client()
        monkeypatch.setenv("RESTCLIENT_LOG_LEVEL", "loud")
        result = runner.invoke(cli_main.app, ["call", "http://api.test/items"])
        assert result.exit_code == 2
        assert "Invalid configuration" in result.output
        assert transport.messages == []


class TestDoctor:
    def test_check_http_ok(self, make_transport):
        client = Client(make_transport(status=204))
        assert doctor._check_http(client, "http://api.test/health") == (True, "HTTP 204")

    def test_check_http_non_json_is_reachable(self, make_transport):
        client = Client(make_transport(status=200, content=b"<html></html>"))
        ok, detail = doctor._check_http(client, "http://api.test/")
        assert ok is True
        assert "non-JSON" in detail

    def test_check_http_failure(self, make_transport):
        client = Client(make_transport(error=TransportError("dns failure")))
        assert doctor._check_http(client, "http://api.test/") == (False, "dns failure")
