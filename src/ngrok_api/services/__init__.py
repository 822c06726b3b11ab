"""Resource services of the ngrok API."""

from .api_keys import ApiKeys
from .base import CallBuilder, ListCallBuilder, Service
from .credentials import Credentials
from .endpoint_logging_module import EndpointLoggingModule
from .event_sources import EventSources
from .https_edge_tls_termination_module import HttpsEdgeTlsTerminationModule
from .tls_certificates import TlsCertificates
from .weighted_backends import WeightedBackends

__all__ = [
    "Service",
    "CallBuilder",
    "ListCallBuilder",
    "ApiKeys",
    "Credentials",
    "EndpointLoggingModule",
    "EventSources",
    "HttpsEdgeTlsTerminationModule",
    "TlsCertificates",
    "WeightedBackends",
]
