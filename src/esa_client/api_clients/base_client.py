"""Base esa API Client.

Provides the request core shared by every esa resource client: team path
templating, body encoding, bearer authentication, response classification and
waiting out HTTP 429 responses.
"""

import asyncio
import json
import logging
from typing import Any, Dict, Mapping, Optional, Union

import httpx
from pydantic import BaseModel

from ..config import EsaClientConfig
from ..exceptions import (
    ConfigurationError,
    EsaApiError,
    RateLimitExceededError,
    ResponseDecodeError,
)
from .network_error_handler import NetworkErrorHandler, RateLimitPolicy
from .request_body import (
    EmptyBody,
    JsonBody,
    MultipartBody,
    QueryParams,
    RequestBody,
)

logger = logging.getLogger(__name__)

BASE_URL = "https://api.esa.io/v1"
TEAM_PLACEHOLDER = ":team_name"
ERROR_BODY_FALLBACK = "Failed to parse error response"

Params = Union[BaseModel, Mapping[str, Any], None]


class EsaRemoteAPIClient:
    """Base API client with authentication and the common request core."""

    def __init__(
        self,
        access_token: str,
        team_name: Optional[str] = None,
        timeout: float = 30.0,
        rate_limit_policy: Optional[RateLimitPolicy] = None,
        strict_response_decoding: bool = False,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize base API client.

        Args:
            access_token: esa access token sent as a bearer token
            team_name: Default team (subdomain) for team-scoped paths
            timeout: Request timeout in seconds
            rate_limit_policy: How to wait out HTTP 429 responses
            strict_response_decoding: Raise ResponseDecodeError when a 2xx
                body is not JSON instead of returning an empty dict
            transport: Optional httpx transport, e.g. ``httpx.MockTransport``
        """
        if not access_token:
            raise ConfigurationError("esa access token is required")

        self._access_token = access_token
        self.team_name = team_name or None
        self.timeout = timeout
        self.rate_limit_policy = rate_limit_policy or RateLimitPolicy()
        self.strict_response_decoding = strict_response_decoding
        self._transport = transport
        self._session: Optional[httpx.AsyncClient] = None
        self._network_error_handler = NetworkErrorHandler()

    @classmethod
    def from_config(cls, config: EsaClientConfig, **kwargs):
        """Create a client from an ``EsaClientConfig``.

        Extra keyword arguments (such as ``transport``) are passed through.
        """
        return cls(
            access_token=config.access_token,
            team_name=config.team_name,
            timeout=config.timeout,
            rate_limit_policy=RateLimitPolicy(
                max_retries=config.max_rate_limit_retries,
                default_retry_after=config.default_retry_after,
            ),
            strict_response_decoding=config.strict_response_decoding,
            **kwargs,
        )

    @classmethod
    def from_env(cls, **kwargs):
        """Create a client from ``ESA_*`` environment variables."""
        return cls.from_config(EsaClientConfig.from_env(), **kwargs)

    def set_team_name(self, team_name: Optional[str]) -> None:
        """Set the default team for subsequent requests."""
        self.team_name = team_name or None

    def get_team_name(self) -> Optional[str]:
        """Get the current default team."""
        return self.team_name

    def _resolve_team(self, team_name: Optional[str] = None) -> Optional[str]:
        return team_name or self.team_name

    def _require_team(self, team_name: Optional[str], operation: str) -> str:
        team = self._resolve_team(team_name)
        if not team:
            raise ConfigurationError(f"Team name is required for {operation}")
        return team

    @property
    def session(self) -> httpx.AsyncClient:
        """Get or create the HTTP session."""
        if self._session is None or self._session.is_closed:
            self._session = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout, connect=10.0),
                follow_redirects=True,
                transport=self._transport,
            )
        return self._session

    def _build_url(self, path: str, team: Optional[str]) -> str:
        if team:
            path = path.replace(TEAM_PLACEHOLDER, team)
        return f"{BASE_URL}{path}"

    @staticmethod
    def _to_payload(params: Params) -> Dict[str, Any]:
        """Turn request parameters into a plain dict.

        Pydantic models drop unset optional fields and use wire aliases;
        mappings are sent as given.
        """
        if params is None:
            return {}
        if isinstance(params, BaseModel):
            return params.model_dump(exclude_none=True, by_alias=True)
        return dict(params)

    async def request(
        self,
        method: str,
        path: str,
        body: Optional[RequestBody] = None,
        team_name: Optional[str] = None,
    ) -> Any:
        """Make an authenticated request to the esa API.

        Args:
            method: HTTP method (GET, POST, PATCH, PUT, DELETE)
            path: Path template relative to the API origin, may contain
                ``:team_name``
            body: How parameters are sent; defaults to no parameters
            team_name: Team override for this call

        Returns:
            Decoded JSON body, ``None`` for 204 responses

        Raises:
            EsaApiError: If the API answers with a non-2xx status
            RateLimitExceededError: If a bounded rate limit policy is exhausted
            ResponseDecodeError: If strict decoding is on and a 2xx body is not JSON
            TransportError: If the exchange fails below the HTTP layer
        """
        if body is None:
            body = EmptyBody()
        team = self._resolve_team(team_name)
        url = self._build_url(path, team)
        method = method.upper()

        retries = 0
        while True:
            response = await self._send(method, url, body)

            if response.status_code != 429:
                return self._handle_response(response)

            retry_after = self.rate_limit_policy.parse_retry_after(
                response.headers.get("retry-after")
            )
            if not self.rate_limit_policy.allows_retry(retries):
                raise RateLimitExceededError(
                    self._decode_error_body(response), retry_after=retry_after
                )

            logger.warning(
                f"Rate limit exceeded. Retrying after {retry_after} seconds."
            )
            await asyncio.sleep(retry_after)
            retries += 1

    async def _send(self, method: str, url: str, body: RequestBody) -> httpx.Response:
        """Perform a single exchange."""
        headers = {
            "Authorization": f"Bearer {self._access_token}",
            "Content-Type": "application/json",
        }
        kwargs: Dict[str, Any] = {}

        if isinstance(body, QueryParams):
            query = body.encode()
            if query:
                kwargs["params"] = query
        elif isinstance(body, MultipartBody):
            # httpx writes the multipart boundary header itself
            del headers["Content-Type"]
            kwargs["files"] = body.parts
        elif isinstance(body, JsonBody):
            if body.data:
                kwargs["content"] = json.dumps(
                    body.data, ensure_ascii=False, separators=(",", ":")
                ).encode("utf-8")

        logger.debug(f"{method} {url}")
        try:
            return await self.session.request(method, url, headers=headers, **kwargs)
        except httpx.TransportError as e:
            logger.error(f"Request to {url} failed: {e}")
            raise self._network_error_handler.classify_network_error(e) from e

    def _handle_response(self, response: httpx.Response) -> Any:
        if not response.is_success:
            raise EsaApiError(response.status_code, self._decode_error_body(response))

        if response.status_code == 204:
            return None

        try:
            return response.json()
        except ValueError:
            if self.strict_response_decoding:
                raise ResponseDecodeError(response.status_code, response.text)
            logger.debug(
                f"Non-JSON body in {response.status_code} response, returning empty object"
            )
            return {}

    @staticmethod
    def _decode_error_body(response: httpx.Response) -> Any:
        """Best-effort decoding of an error response body."""
        try:
            return response.json()
        except ValueError:
            pass
        try:
            text = response.text
        except ValueError:
            return {"message": ERROR_BODY_FALLBACK}
        return {"message": text or ERROR_BODY_FALLBACK}

    async def get(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        team_name: Optional[str] = None,
    ) -> Any:
        """Make a GET request with ``params`` as the query string."""
        return await self.request("GET", path, QueryParams(params or {}), team_name)

    async def post(
        self, path: str, data: Params = None, team_name: Optional[str] = None
    ) -> Any:
        """Make a POST request with ``data`` as the JSON body."""
        return await self.request("POST", path, JsonBody(self._to_payload(data)), team_name)

    async def patch(
        self, path: str, data: Params = None, team_name: Optional[str] = None
    ) -> Any:
        """Make a PATCH request with ``data`` as the JSON body."""
        return await self.request("PATCH", path, JsonBody(self._to_payload(data)), team_name)

    async def put(
        self, path: str, data: Params = None, team_name: Optional[str] = None
    ) -> Any:
        """Make a PUT request with ``data`` as the JSON body."""
        return await self.request("PUT", path, JsonBody(self._to_payload(data)), team_name)

    async def delete(
        self, path: str, data: Params = None, team_name: Optional[str] = None
    ) -> Any:
        """Make a DELETE request."""
        return await self.request("DELETE", path, JsonBody(self._to_payload(data)), team_name)

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session and not self._session.is_closed:
            await self._session.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    def __del__(self):
        """Cleanup when object is destroyed."""
        session = getattr(self, "_session", None)
        if session is not None and not session.is_closed:
            # Cannot await in __del__
            logger.warning(f"{type(self).__name__} was not properly closed")
