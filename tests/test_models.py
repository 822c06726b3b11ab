"""Tests for resource models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from ngrok_api.models import (
    ApiKeyList,
    Credential,
    CredentialList,
    EndpointLoggingMutate,
    EndpointTlsTerminationAtEdge,
    EventSourceList,
    TlsCertificate,
    WeightedBackendList,
)

from .conftest import (
    make_api_key_dict,
    make_credential_dict,
    make_list_dict,
    make_tls_certificate_dict,
    make_weighted_backend_dict,
)


class TestResourceModels:
    """Tests for parsing resources."""

    def test_credential_without_token(self):
        """token is only present in create responses."""
        data = make_credential_dict()
        del data["token"]

        credential = Credential.model_validate(data)

        assert credential.token is None
        assert credential.metadata == '{"team": "infra"}'

    def test_credential_requires_id(self):
        data = make_credential_dict()
        del data["id"]

        with pytest.raises(PydanticValidationError):
            Credential.model_validate(data)

    def test_unknown_fields_ignored(self):
        """Fields added by the API later do not break parsing."""
        data = make_credential_dict()
        data["owner_id"] = "usr_1"

        assert Credential.model_validate(data).id == "cr_2abc"

    def test_tls_certificate(self):
        cert = TlsCertificate.model_validate(make_tls_certificate_dict())

        assert cert.private_key_type == "ecdsa"
        assert cert.subject_alternative_names.ips == []
        assert cert.not_before < cert.not_after

    def test_dump_round_trip(self):
        """model_dump(mode="json") is accepted back by model_validate."""
        credential = Credential.model_validate(make_credential_dict(acl=["bind:x"]))

        again = Credential.model_validate(credential.model_dump(mode="json"))

        assert again == credential


class TestListEnvelopes:
    """Tests for list envelopes."""

    @pytest.mark.parametrize(
        "envelope,field,item",
        [
            (ApiKeyList, "keys", make_api_key_dict()),
            (CredentialList, "credentials", make_credential_dict()),
            (WeightedBackendList, "backends", make_weighted_backend_dict()),
        ],
    )
    def test_items_property(self, envelope, field, item):
        """items reads the envelope's named field."""
        page = envelope.model_validate(make_list_dict(field, [item], "/x"))

        assert page.items == getattr(page, field)
        assert len(page.items) == 1

    def test_next_page_uri_defaults_to_none(self):
        page = CredentialList.model_validate({"credentials": [], "uri": "u"})

        assert page.next_page_uri is None

    def test_event_source_list(self):
        sources = EventSourceList.model_validate(
            {"sources": [{"type": "t", "uri": "u/t"}], "uri": "u"}
        )

        assert sources.sources[0].type == "t"


class TestModuleSettings:
    """Tests for module settings models."""

    def test_only_passed_fields_dumped(self):
        settings = EndpointTlsTerminationAtEdge(enabled=False)

        assert settings.model_dump(mode="json", exclude_unset=True) == {"enabled": False}

    def test_explicit_none_dumped(self):
        settings = EndpointLoggingMutate(enabled=None)

        assert settings.model_dump(mode="json", exclude_unset=True) == {"enabled": None}
