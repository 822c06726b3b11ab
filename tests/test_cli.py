"""Tests for the ngrok-api command line interface."""

from __future__ import annotations

import json
import sys

import pytest
import respx
from click.testing import CliRunner
from httpx import Response

from ngrok_api.cli import cli, main

from .conftest import (
    make_api_key_dict,
    make_credential_dict,
    make_error_dict,
    make_event_source_dict,
    make_list_dict,
    make_tls_certificate_dict,
    make_weighted_backend_dict,
    request_json,
)

ENV = {"NGROK_API_KEY": "cli_test_key"}


@pytest.fixture
def runner():
    return CliRunner()


class TestCredentialsCommands:
    """Tests for `ngrok-api credentials`."""

    def test_list_table(self, runner, api_base_url):
        items = [make_credential_dict("cr_1", description="laptop")]

        with respx.mock:
            route = respx.get(f"{api_base_url}/credentials").mock(
                return_value=Response(
                    200, json=make_list_dict("credentials", items, "/credentials")
                )
            )
            result = runner.invoke(cli, ["credentials", "list"], env=ENV)

        assert result.exit_code == 0, result.output
        assert "ID" in result.output
        assert "cr_1" in result.output
        assert "laptop" in result.output
        assert "2024-05-01 12:00" in result.output
        assert route.calls.last.request.headers["Authorization"] == "Bearer cli_test_key"

    def test_list_empty(self, runner, api_base_url):
        with respx.mock:
            respx.get(f"{api_base_url}/credentials").mock(
                return_value=Response(
                    200, json=make_list_dict("credentials", [], "/credentials")
                )
            )
            result = runner.invoke(cli, ["credentials", "list"], env=ENV)

        assert result.exit_code == 0
        assert "No credentials found." in result.output

    def test_list_all_pages_json(self, runner, api_base_url):
        """--all follows next_page_uri and --json prints every item."""
        next_uri = f"{api_base_url}/credentials?before_id=cr_1&limit=1"

        with respx.mock:
            route = respx.get(f"{api_base_url}/credentials").mock(
                side_effect=[
                    Response(
                        200,
                        json=make_list_dict(
                            "credentials", [make_credential_dict("cr_1")], "/credentials", next_uri
                        ),
                    ),
                    Response(
                        200,
                        json=make_list_dict(
                            "credentials", [make_credential_dict("cr_0")], "/credentials"
                        ),
                    ),
                ]
            )
            result = runner.invoke(
                cli, ["credentials", "list", "--limit", "1", "--all", "--json"], env=ENV
            )

        assert result.exit_code == 0, result.output
        assert [c["id"] for c in json.loads(result.output)] == ["cr_1", "cr_0"]
        assert route.call_count == 2
        assert route.calls[0].request.url.params["limit"] == "1"

    def test_create(self, runner, api_base_url):
        with respx.mock:
            route = respx.post(f"{api_base_url}/credentials").mock(
                return_value=Response(
                    201, json=make_credential_dict("cr_new", token="2abc_secret")
                )
            )
            result = runner.invoke(
                cli,
                [
                    "credentials",
                    "create",
                    "--description",
                    "ci",
                    "--acl",
                    "bind:a.example.com",
                    "--acl",
                    "bind:b.example.com",
                ],
                env=ENV,
            )

        assert result.exit_code == 0, result.output
        assert request_json(route.calls.last.request) == {
            "description": "ci",
            "acl": ["bind:a.example.com", "bind:b.example.com"],
        }
        assert "Created credential cr_new" in result.output
        assert "Token: 2abc_secret" in result.output

    def test_get(self, runner, api_base_url):
        with respx.mock:
            respx.get(f"{api_base_url}/credentials/cr_2abc").mock(
                return_value=Response(200, json=make_credential_dict())
            )
            result = runner.invoke(cli, ["credentials", "get", "cr_2abc"], env=ENV)

        assert result.exit_code == 0
        assert json.loads(result.output)["id"] == "cr_2abc"

    def test_delete(self, runner, api_base_url):
        with respx.mock:
            route = respx.delete(f"{api_base_url}/credentials/cr_2abc").mock(
                return_value=Response(204)
            )
            result = runner.invoke(cli, ["credentials", "delete", "cr_2abc"], env=ENV)

        assert result.exit_code == 0
        assert route.called
        assert "Deleted credential cr_2abc" in result.output


class TestOtherCommands:
    """Tests for the remaining resource commands."""

    def test_api_keys_list(self, runner, api_base_url):
        with respx.mock:
            respx.get(f"{api_base_url}/api_keys").mock(
                return_value=Response(
                    200, json=make_list_dict("keys", [make_api_key_dict()], "/api_keys")
                )
            )
            result = runner.invoke(cli, ["api-keys", "list"], env=ENV)

        assert result.exit_code == 0
        assert "ak_2abc" in result.output

    def test_tls_certificates_list(self, runner, api_base_url):
        with respx.mock:
            respx.get(f"{api_base_url}/tls_certificates").mock(
                return_value=Response(
                    200,
                    json=make_list_dict(
                        "tls_certificates", [make_tls_certificate_dict()], "/tls_certificates"
                    ),
                )
            )
            result = runner.invoke(cli, ["tls-certificates", "list"], env=ENV)

        assert result.exit_code == 0
        assert "*.example.com" in result.output

    def test_weighted_backends_delete(self, runner, api_base_url):
        with respx.mock:
            respx.delete(f"{api_base_url}/backends/weighted/bkdwd_2abc").mock(
                return_value=Response(204)
            )
            result = runner.invoke(cli, ["weighted-backends", "delete", "bkdwd_2abc"], env=ENV)

        assert result.exit_code == 0
        assert "Deleted weighted backend bkdwd_2abc" in result.output

    def test_weighted_backends_get(self, runner, api_base_url):
        with respx.mock:
            respx.get(f"{api_base_url}/backends/weighted/bkdwd_2abc").mock(
                return_value=Response(200, json=make_weighted_backend_dict())
            )
            result = runner.invoke(cli, ["weighted-backends", "get", "bkdwd_2abc"], env=ENV)

        assert result.exit_code == 0
        assert json.loads(result.output)["backends"] == {"bkdhr_1": 90, "bkdhr_2": 10}

    def test_event_sources_list(self, runner, api_base_url):
        with respx.mock:
            respx.get(f"{api_base_url}/event_subscriptions/esb_2abc/sources").mock(
                return_value=Response(
                    200,
                    json={
                        "sources": [make_event_source_dict()],
                        "uri": f"{api_base_url}/event_subscriptions/esb_2abc/sources",
                    },
                )
            )
            result = runner.invoke(cli, ["event-sources", "list", "esb_2abc"], env=ENV)

        assert result.exit_code == 0
        assert "ip_policy_created.v0" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestMain:
    """Tests for the main() error handling."""

    def test_api_error_hint(self, api_base_url, monkeypatch, capsys):
        """API errors print the message and a hint, then exit 1."""
        monkeypatch.setenv("NGROK_API_KEY", "cli_test_key")
        monkeypatch.setattr(sys, "argv", ["ngrok-api", "credentials", "get", "cr_nope"])

        with respx.mock:
            respx.get(f"{api_base_url}/credentials/cr_nope").mock(
                return_value=Response(404, json=make_error_dict(404, "not found"))
            )

            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert "Error:" in err
        assert "not found" in err
        assert "Hint: Check the resource ID" in err

    def test_missing_api_key(self, monkeypatch, capsys):
        """A missing API key fails with a hint and no request."""
        monkeypatch.delenv("NGROK_API_KEY", raising=False)
        monkeypatch.setattr(sys, "argv", ["ngrok-api", "credentials", "list"])

        with respx.mock(assert_all_mocked=True):
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert "NGROK_API_KEY" in err
