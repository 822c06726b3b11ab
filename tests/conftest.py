"""Shared fixtures and configuration for tests."""

from __future__ import annotations

import json
from typing import Any

import pytest
from httpx import Request

from ngrok_api import Ngrok

API_BASE_URL = "https://api.ngrok.com"

# ==================== MOCK DATA ====================


def make_credential_dict(
    credential_id: str = "cr_2abc",
    description: str = "ci runner",
    metadata: str = '{"team": "infra"}',
    token: str | None = None,
    acl: list[str] | None = None,
) -> dict[str, Any]:
    """Create a mock credential dictionary."""
    return {
        "id": credential_id,
        "uri": f"{API_BASE_URL}/credentials/{credential_id}",
        "created_at": "2024-05-01T12:00:00Z",
        "description": description,
        "metadata": metadata,
        "token": token,
        "acl": acl if acl is not None else [],
    }


def make_api_key_dict(
    key_id: str = "ak_2abc",
    description: str = "deploy key",
    metadata: str = "",
    token: str | None = None,
) -> dict[str, Any]:
    """Create a mock API key dictionary."""
    return {
        "id": key_id,
        "uri": f"{API_BASE_URL}/api_keys/{key_id}",
        "description": description,
        "metadata": metadata,
        "created_at": "2024-05-01T12:00:00Z",
        "token": token,
    }


def make_tls_certificate_dict(
    certificate_id: str = "cert_2abc",
    description: str = "wildcard",
    metadata: str = "",
) -> dict[str, Any]:
    """Create a mock TLS certificate dictionary."""
    return {
        "id": certificate_id,
        "uri": f"{API_BASE_URL}/tls_certificates/{certificate_id}",
        "created_at": "2024-05-01T12:00:00Z",
        "description": description,
        "metadata": metadata,
        "certificate_pem": "-----BEGIN CERTIFICATE-----\nMIIB\n-----END CERTIFICATE-----\n",
        "subject_common_name": "*.example.com",
        "subject_alternative_names": {"dns_names": ["*.example.com"], "ips": []},
        "issued_at": None,
        "not_before": "2024-05-01T00:00:00Z",
        "not_after": "2025-05-01T00:00:00Z",
        "key_usages": ["digital signature"],
        "extended_key_usages": ["server auth"],
        "private_key_type": "ecdsa",
        "issuer_common_name": "Example CA",
        "serial_number": "0a1b2c",
        "subject_organization": "Example Inc",
        "subject_organizational_unit": "",
        "subject_locality": "",
        "subject_province": "",
        "subject_country": "US",
    }


def make_weighted_backend_dict(
    backend_id: str = "bkdwd_2abc",
    description: str = "canary",
    metadata: str = "",
    backends: dict[str, int] | None = None,
) -> dict[str, Any]:
    """Create a mock weighted backend dictionary."""
    return {
        "id": backend_id,
        "uri": f"{API_BASE_URL}/backends/weighted/{backend_id}",
        "created_at": "2024-05-01T12:00:00Z",
        "description": description,
        "metadata": metadata,
        "backends": backends if backends is not None else {"bkdhr_1": 90, "bkdhr_2": 10},
    }


def make_event_source_dict(
    subscription_id: str = "esb_2abc",
    event_type: str = "ip_policy_created.v0",
) -> dict[str, Any]:
    """Create a mock event source dictionary."""
    return {
        "type": event_type,
        "uri": f"{API_BASE_URL}/event_subscriptions/{subscription_id}/sources/{event_type}",
    }


def make_list_dict(
    items_field: str,
    items: list[dict[str, Any]],
    path: str,
    next_page_uri: str | None = None,
) -> dict[str, Any]:
    """Create a mock list envelope."""
    return {
        items_field: items,
        "uri": f"{API_BASE_URL}{path}",
        "next_page_uri": next_page_uri,
    }


def make_error_dict(
    status_code: int,
    msg: str,
    error_code: str = "ERR_NGROK_218",
    operation_id: str = "op_2abc",
) -> dict[str, Any]:
    """Create a mock ngrok error body."""
    return {
        "error_code": error_code,
        "status_code": status_code,
        "msg": msg,
        "details": {"operation_id": operation_id},
    }


def request_json(request: Request) -> Any:
    """Decode the JSON body of a captured request."""
    return json.loads(request.content)


# ==================== FIXTURES ====================


@pytest.fixture
def api_base_url() -> str:
    """Base URL for API mocks."""
    return API_BASE_URL


@pytest.fixture
def mock_api_key() -> str:
    """Mock API key for testing."""
    return "2abcFAKEkey_0123456789"


@pytest.fixture
def ngrok(mock_api_key) -> Ngrok:
    """Client pointed at the mocked API."""
    return Ngrok(api_key=mock_api_key, base_url=API_BASE_URL)
