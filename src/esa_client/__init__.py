"""
esa API Client - asynchronous Python binding for the esa.io API v1.

Maps every endpoint of the team wiki API onto an async method, with bearer
authentication, query and body encoding, and automatic waiting on HTTP 429.
"""

from .api_clients.network_error_handler import (
    DNSResolutionError,
    NetworkConnectionError,
    NetworkTimeoutError,
    RateLimitPolicy,
    SSLCertificateError,
    TransportError,
)
from .client import EsaClient
from .config import EsaClientConfig
from .exceptions import (
    ConfigurationError,
    EsaApiError,
    EsaClientError,
    RateLimitExceededError,
    ResponseDecodeError,
)
from .models import (
    BatchMoveCategoryParams,
    CreateCommentParams,
    CreateEmojiParams,
    CreatePostParams,
    CreateStarParams,
    InviteMembersParams,
    OriginalRevision,
    UpdateCommentParams,
    UpdatePostParams,
)
from .pagination import paginate

__version__ = "0.1.0"

__all__ = [
    "EsaClient",
    "EsaClientConfig",
    "RateLimitPolicy",
    "paginate",
    # Errors
    "ConfigurationError",
    "DNSResolutionError",
    "EsaApiError",
    "EsaClientError",
    "NetworkConnectionError",
    "NetworkTimeoutError",
    "RateLimitExceededError",
    "ResponseDecodeError",
    "SSLCertificateError",
    "TransportError",
    # Request parameters
    "BatchMoveCategoryParams",
    "CreateCommentParams",
    "CreateEmojiParams",
    "CreatePostParams",
    "CreateStarParams",
    "InviteMembersParams",
    "OriginalRevision",
    "UpdateCommentParams",
    "UpdatePostParams",
]
