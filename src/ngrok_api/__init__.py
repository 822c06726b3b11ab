"""Python client for the ngrok REST API.

Basic Usage:
    ```python
    from ngrok_api import Ngrok

    # Async usage
    async with Ngrok() as ngrok:
        credential = await ngrok.credentials.create().description("ci").call()
        page = await ngrok.credentials.list().call()
        async for credential in page:
            print(credential.id)

    # Blocking usage
    ngrok = Ngrok()
    key = ngrok.api_keys.get("ak_123").blocking_call()
    ```

Updates only send the fields that were set:
    ```python
    from ngrok_api import UNSET

    # sends {"description": "new"}; metadata is left alone
    await ngrok.credentials.update("cr_123").description("new").call()

    # sends {"acl": null}
    await ngrok.credentials.update("cr_123").acl(None).call()

    # UNSET takes a field back out of the request
    builder = ngrok.credentials.update("cr_123").metadata("x")
    builder.metadata(UNSET)
    ```
"""

from .auth import AuthProvider, get_api_key
from .client import Ngrok, NgrokApiClient
from .config import API_VERSION, CLIENT_VERSION
from .exceptions import (
    APIError,
    AuthenticationError,
    ConflictError,
    ConnectionError,
    DeserializationError,
    InvalidArgumentError,
    NgrokError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
    TimeoutError,
    ValidationError,
)
from .models import (
    ApiKey,
    ApiKeyList,
    Credential,
    CredentialList,
    EndpointLogging,
    EndpointLoggingMutate,
    EndpointTlsTermination,
    EndpointTlsTerminationAtEdge,
    EventSource,
    EventSourceList,
    ListEnvelope,
    Ref,
    TlsCertificate,
    TlsCertificateList,
    TlsCertificateSANs,
    WeightedBackend,
    WeightedBackendList,
)
from .options import UNSET, Unset
from .pagination import Page
from .services import (
    ApiKeys,
    CallBuilder,
    Credentials,
    EndpointLoggingModule,
    EventSources,
    HttpsEdgeTlsTerminationModule,
    ListCallBuilder,
    TlsCertificates,
    WeightedBackends,
)

__version__ = CLIENT_VERSION

__all__ = [
    # Version
    "__version__",
    "API_VERSION",
    # Main clients
    "Ngrok",
    "NgrokApiClient",
    # Pagination and builders
    "Page",
    "CallBuilder",
    "ListCallBuilder",
    "UNSET",
    "Unset",
    # Services
    "ApiKeys",
    "Credentials",
    "EndpointLoggingModule",
    "EventSources",
    "HttpsEdgeTlsTerminationModule",
    "TlsCertificates",
    "WeightedBackends",
    # Models
    "ApiKey",
    "ApiKeyList",
    "Credential",
    "CredentialList",
    "EndpointLogging",
    "EndpointLoggingMutate",
    "EndpointTlsTermination",
    "EndpointTlsTerminationAtEdge",
    "EventSource",
    "EventSourceList",
    "ListEnvelope",
    "Ref",
    "TlsCertificate",
    "TlsCertificateList",
    "TlsCertificateSANs",
    "WeightedBackend",
    "WeightedBackendList",
    # Auth
    "AuthProvider",
    "get_api_key",
    # Exceptions
    "NgrokError",
    "InvalidArgumentError",
    "APIError",
    "ValidationError",
    "AuthenticationError",
    "PermissionDeniedError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "DeserializationError",
    "ConnectionError",
    "TimeoutError",
]
