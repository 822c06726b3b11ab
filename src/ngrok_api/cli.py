#!/usr/bin/env python3
"""ngrok-api CLI - inspect and manage ngrok API resources

Usage:
    ngrok-api api-keys list
    ngrok-api credentials list|get|create|delete
    ngrok-api tls-certificates list|get|delete
    ngrok-api weighted-backends list|get|delete
    ngrok-api event-sources list <subscription-id>
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Iterable

import click
from pydantic import BaseModel

from .client import Ngrok
from .config import CLIENT_VERSION, DEFAULT_BASE_URL
from .exceptions import APIError, NgrokError
from .pagination import Page
from .services.base import ListCallBuilder


def _ngrok(ctx: click.Context) -> Ngrok:
    return ctx.obj["ngrok"]


def _list_items(builder: ListCallBuilder, limit: int | None, fetch_all: bool) -> list:
    """Fetch the first page, or every page when fetch_all is set."""
    if limit is not None:
        builder.limit(limit)
    page: Page = builder.blocking_call()
    if fetch_all:
        return list(page.blocking_iter())
    return page.current()


def _echo_json(items: Iterable[BaseModel] | BaseModel) -> None:
    if isinstance(items, BaseModel):
        click.echo(json.dumps(items.model_dump(mode="json"), indent=2))
    else:
        click.echo(json.dumps([i.model_dump(mode="json") for i in items], indent=2))


def _echo_table(items: list[BaseModel], columns: list[str], empty: str) -> None:
    if not items:
        click.echo(empty)
        return

    click.echo(" ".join(f"{c.upper():<25}" for c in columns).rstrip())
    click.echo("-" * (26 * len(columns)))
    for item in items:
        values = []
        for column in columns:
            value = getattr(item, column)
            if column == "created_at":
                value = value.strftime("%Y-%m-%d %H:%M")
            values.append(f"{str(value):<25}")
        click.echo(" ".join(values).rstrip())


list_options = [
    click.option("--limit", default=None, type=int, help="Page size"),
    click.option("--all", "fetch_all", is_flag=True, help="Follow every page"),
    click.option("--json", "as_json", is_flag=True, help="Output as JSON"),
]


def with_list_options(func):
    for option in reversed(list_options):
        func = option(func)
    return func


@click.group()
@click.version_option(version=CLIENT_VERSION)
@click.option("--api-key", envvar="NGROK_API_KEY", default=None, help="ngrok API key")
@click.option("--base-url", default=DEFAULT_BASE_URL, show_default=True, help="API base URL")
@click.option("--verbose", "-v", is_flag=True, help="Log HTTP requests")
@click.pass_context
def cli(ctx: click.Context, api_key: str | None, base_url: str, verbose: bool):
    """ngrok-api CLI - inspect and manage ngrok API resources"""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    ctx.ensure_object(dict)
    ctx.obj["ngrok"] = Ngrok(api_key=api_key, base_url=base_url)


# ==================== API KEYS ====================


@cli.group("api-keys")
def api_keys():
    """Manage API keys."""
    pass


@api_keys.command("list")
@with_list_options
@click.pass_context
def list_api_keys(ctx: click.Context, limit: int | None, fetch_all: bool, as_json: bool):
    """List API keys."""
    items = _list_items(_ngrok(ctx).api_keys.list(), limit, fetch_all)
    if as_json:
        _echo_json(items)
        return
    _echo_table(items, ["id", "description", "created_at"], "No API keys found.")


# ==================== CREDENTIALS ====================


@cli.group()
def credentials():
    """Manage tunnel credentials (agent authtokens)."""
    pass


@credentials.command("list")
@with_list_options
@click.pass_context
def list_credentials(ctx: click.Context, limit: int | None, fetch_all: bool, as_json: bool):
    """List tunnel credentials."""
    items = _list_items(_ngrok(ctx).credentials.list(), limit, fetch_all)
    if as_json:
        _echo_json(items)
        return
    _echo_table(items, ["id", "description", "created_at"], "No credentials found.")


@credentials.command("get")
@click.argument("credential_id")
@click.pass_context
def get_credential(ctx: click.Context, credential_id: str):
    """Show a tunnel credential."""
    _echo_json(_ngrok(ctx).credentials.get(credential_id).blocking_call())


@credentials.command("create")
@click.option("--description", default=None, help="Who or what will use the credential")
@click.option("--metadata", default=None, help="Arbitrary machine-readable data")
@click.option("--acl", multiple=True, help="ACL rule, e.g. bind:*.example.com (repeatable)")
@click.pass_context
def create_credential(
    ctx: click.Context, description: str | None, metadata: str | None, acl: tuple[str, ...]
):
    """Create a tunnel credential and print its authtoken."""
    builder = _ngrok(ctx).credentials.create()
    if description is not None:
        builder.description(description)
    if metadata is not None:
        builder.metadata(metadata)
    if acl:
        builder.acl(list(acl))
    credential = builder.blocking_call()
    click.echo(f"Created credential {credential.id}")
    if credential.token:
        click.echo(f"Token: {credential.token}")
        click.echo("Save this token now; it will not be shown again.")


@credentials.command("delete")
@click.argument("credential_id")
@click.pass_context
def delete_credential(ctx: click.Context, credential_id: str):
    """Delete a tunnel credential."""
    _ngrok(ctx).credentials.delete(credential_id).blocking_call()
    click.echo(f"Deleted credential {credential_id}")


# ==================== TLS CERTIFICATES ====================


@cli.group("tls-certificates")
def tls_certificates():
    """Manage TLS certificates."""
    pass


@tls_certificates.command("list")
@with_list_options
@click.pass_context
def list_tls_certificates(
    ctx: click.Context, limit: int | None, fetch_all: bool, as_json: bool
):
    """List TLS certificates."""
    items = _list_items(_ngrok(ctx).tls_certificates.list(), limit, fetch_all)
    if as_json:
        _echo_json(items)
        return
    _echo_table(
        items, ["id", "subject_common_name", "not_after"], "No TLS certificates found."
    )


@tls_certificates.command("get")
@click.argument("certificate_id")
@click.pass_context
def get_tls_certificate(ctx: click.Context, certificate_id: str):
    """Show a TLS certificate."""
    _echo_json(_ngrok(ctx).tls_certificates.get(certificate_id).blocking_call())


@tls_certificates.command("delete")
@click.argument("certificate_id")
@click.pass_context
def delete_tls_certificate(ctx: click.Context, certificate_id: str):
    """Delete a TLS certificate."""
    _ngrok(ctx).tls_certificates.delete(certificate_id).blocking_call()
    click.echo(f"Deleted TLS certificate {certificate_id}")


# ==================== WEIGHTED BACKENDS ====================


@cli.group("weighted-backends")
def weighted_backends():
    """Manage weighted backends."""
    pass


@weighted_backends.command("list")
@with_list_options
@click.pass_context
def list_weighted_backends(
    ctx: click.Context, limit: int | None, fetch_all: bool, as_json: bool
):
    """List weighted backends."""
    items = _list_items(_ngrok(ctx).weighted_backends.list(), limit, fetch_all)
    if as_json:
        _echo_json(items)
        return
    _echo_table(items, ["id", "description", "created_at"], "No weighted backends found.")


@weighted_backends.command("get")
@click.argument("backend_id")
@click.pass_context
def get_weighted_backend(ctx: click.Context, backend_id: str):
    """Show a weighted backend."""
    _echo_json(_ngrok(ctx).weighted_backends.get(backend_id).blocking_call())


@weighted_backends.command("delete")
@click.argument("backend_id")
@click.pass_context
def delete_weighted_backend(ctx: click.Context, backend_id: str):
    """Delete a weighted backend."""
    _ngrok(ctx).weighted_backends.delete(backend_id).blocking_call()
    click.echo(f"Deleted weighted backend {backend_id}")


# ==================== EVENT SOURCES ====================


@cli.group("event-sources")
def event_sources():
    """Inspect event subscription sources."""
    pass


@event_sources.command("list")
@click.argument("subscription_id")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def list_event_sources(ctx: click.Context, subscription_id: str, as_json: bool):
    """List the event types a subscription triggers on."""
    source_list = _ngrok(ctx).event_sources.list(subscription_id).blocking_call()
    if as_json:
        _echo_json(source_list.sources)
        return
    _echo_table(source_list.sources, ["type", "uri"], "No event sources found.")


def main():
    """Main entry point for the CLI."""
    try:
        cli()
    except APIError as e:
        click.echo(f"Error: {e.message}", err=True)
        hint = {
            401: "Hint: Set NGROK_API_KEY or pass --api-key.",
            403: "Hint: This API key is not allowed to perform this action.",
            404: "Hint: Check the resource ID and try again.",
            409: "Hint: The resource is in use or already exists.",
            429: "Hint: Too many requests. Please wait and try again.",
            500: "Hint: This is a server issue. Please try again later.",
            502: "Hint: The server is temporarily unavailable. Please try again later.",
        }.get(e.status_code)
        if e.operation_id:
            click.echo(f"Operation ID: {e.operation_id}", err=True)
        if hint:
            click.echo(hint, err=True)
        sys.exit(1)
    except NgrokError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
