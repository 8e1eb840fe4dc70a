"""API Client Abstractions for the esa API.

The base client holds the request core; every resource client maps endpoints
onto it.
"""

from .base_client import BASE_URL, TEAM_PLACEHOLDER, EsaRemoteAPIClient
from .categories_client import CategoriesAPIClient
from .comments_client import CommentsAPIClient
from .emojis_client import EmojisAPIClient
from .invitations_client import InvitationsAPIClient
from .network_error_handler import (
    DNSResolutionError,
    NetworkConnectionError,
    NetworkErrorHandler,
    NetworkTimeoutError,
    RateLimitPolicy,
    SSLCertificateError,
    TransportError,
)
from .posts_client import PostsAPIClient
from .request_body import (
    EmptyBody,
    JsonBody,
    MultipartBody,
    QueryParams,
    RequestBody,
)
from .stars_client import StarsAPIClient
from .teams_client import TeamsAPIClient
from .user_client import UserAPIClient

__all__ = [
    # Base client
    "BASE_URL",
    "TEAM_PLACEHOLDER",
    "EsaRemoteAPIClient",
    # Request bodies
    "EmptyBody",
    "JsonBody",
    "MultipartBody",
    "QueryParams",
    "RequestBody",
    # Network errors and rate limiting
    "DNSResolutionError",
    "NetworkConnectionError",
    "NetworkErrorHandler",
    "NetworkTimeoutError",
    "RateLimitPolicy",
    "SSLCertificateError",
    "TransportError",
    # Resource clients
    "CategoriesAPIClient",
    "CommentsAPIClient",
    "EmojisAPIClient",
    "InvitationsAPIClient",
    "PostsAPIClient",
    "StarsAPIClient",
    "TeamsAPIClient",
    "UserAPIClient",
]
