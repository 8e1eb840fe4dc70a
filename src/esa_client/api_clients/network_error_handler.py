"""Network Error Handler for the esa API client.

Classifies transport-level httpx failures into client exceptions and holds the
rate limit policy applied to HTTP 429 responses.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional

import httpx

from ..exceptions import EsaClientError

logger = logging.getLogger(__name__)

DEFAULT_RETRY_AFTER = 60

_LEADING_INTEGER = re.compile(r"^\s*([+-]?\d+)")


@dataclass
class RateLimitPolicy:
    """Configuration for waiting out HTTP 429 responses.

    ``max_retries=None`` retries for as long as the API keeps answering 429.
    """

    max_retries: Optional[int] = None
    default_retry_after: int = DEFAULT_RETRY_AFTER

    def parse_retry_after(self, header_value: Optional[str]) -> int:
        """Return the number of seconds to wait for a ``retry-after`` value.

        Only the leading integer is read, so ``"1.5"`` waits one second.
        Missing or unparsable values fall back to ``default_retry_after``.
        """
        if header_value is None:
            return self.default_retry_after
        match = _LEADING_INTEGER.match(header_value)
        if not match:
            return self.default_retry_after
        return max(0, int(match.group(1)))

    def allows_retry(self, retries_done: int) -> bool:
        """Check whether another retry may follow ``retries_done`` retries."""
        if self.max_retries is None:
            return True
        return retries_done < self.max_retries


class TransportError(EsaClientError):
    """Base exception for failures below the HTTP layer."""

    pass


class NetworkConnectionError(TransportError):
    """Exception raised for connection-related network failures."""

    pass


class NetworkTimeoutError(TransportError):
    """Exception raised for timeout-related network failures."""

    pass


class DNSResolutionError(TransportError):
    """Exception raised for DNS resolution failures."""

    pass


class SSLCertificateError(TransportError):
    """Exception raised for SSL certificate verification failures."""

    pass


class NetworkErrorHandler:
    """Maps httpx transport exceptions onto ``TransportError`` subclasses."""

    def __init__(self):
        self._dns_error_patterns = [
            r"name.*resolution.*failed",
            r"name.*or.*service.*not.*known",
            r"nodename.*nor.*servname.*provided",
            r"temporary.*failure.*in.*name.*resolution",
        ]
        self._ssl_error_patterns = [
            r"ssl.*certificate.*verification.*failed",
            r"certificate.*verify.*failed",
            r"ssl.*handshake.*failed",
            r"bad.*certificate",
        ]

    def classify_network_error(self, error: Exception) -> TransportError:
        """Classify a transport exception.

        Args:
            error: The original httpx exception

        Returns:
            The matching ``TransportError`` subclass instance
        """
        error_message = str(error).lower()

        if isinstance(error, httpx.TimeoutException):
            if isinstance(error, httpx.ConnectTimeout):
                return NetworkTimeoutError(f"Connection timed out: {error}")
            return NetworkTimeoutError(f"Request timed out: {error}")

        if isinstance(error, httpx.ConnectError):
            if any(re.search(p, error_message) for p in self._dns_error_patterns):
                return DNSResolutionError(
                    f"Cannot resolve esa API host. Check your internet connection: {error}"
                )
            if any(re.search(p, error_message) for p in self._ssl_error_patterns):
                return SSLCertificateError(
                    f"SSL certificate verification failed: {error}"
                )
            return NetworkConnectionError(f"Connection failed: {error}")

        if isinstance(error, httpx.NetworkError):
            return NetworkConnectionError(f"Network error: {error}")

        return TransportError(f"Transport error: {error}")
