"""Exception classes for the esa API client."""

import json
from typing import Any, Optional


class EsaClientError(Exception):
    """Base exception for esa client errors."""

    pass


class EsaApiError(EsaClientError):
    """Exception raised when the esa API answers with a non-2xx status.

    Attributes:
        status_code: HTTP status code of the response
        data: Decoded response body, or a ``{"message": ...}`` wrapper when the
            body was not JSON
    """

    def __init__(self, status_code: int, data: Any):
        super().__init__(f"ESA API Error ({status_code}): {_render(data)}")
        self.status_code = status_code
        self.data = data

    @property
    def status(self) -> int:
        return self.status_code


class RateLimitExceededError(EsaApiError):
    """Exception raised when a bounded rate limit policy runs out of retries."""

    def __init__(self, data: Any, retry_after: Optional[int] = None):
        super().__init__(429, data)
        self.retry_after = retry_after


class ConfigurationError(EsaClientError):
    """Exception raised when the client is missing required configuration."""

    pass


class ResponseDecodeError(EsaClientError):
    """Exception raised in strict mode when a 2xx body is not valid JSON."""

    def __init__(self, status_code: int, text: str):
        super().__init__(f"Invalid JSON in {status_code} response: {text[:200]!r}")
        self.status_code = status_code
        self.text = text


def _render(data: Any) -> str:
    try:
        return json.dumps(data, ensure_ascii=False)
    except (TypeError, ValueError):
        return repr(data)
