"""
Content API HTTP client.

Thin async transport over the headless content API. Every call sends
exactly one request; errors are raised by httpx and propagate unchanged.
"""

import logging
from typing import Optional, Dict, Any

import httpx

from common.http.query import encode_query

logger = logging.getLogger(__name__)


class ContentAPIClient:
    """
    Content API client.
    Adds the bearer token and JSON headers, encodes structured queries
    and returns decoded response bodies.
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize ContentAPIClient.

        Args:
            base_url: API root, e.g. "https://cms.example.com/api"
            token: Bearer token of the authenticated user
            timeout: Request timeout in seconds
            transport: Optional httpx transport (mock or ASGI app)
        """
        self._base_url = base_url.rstrip("/")
        self._token = token
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "ContentAPIClient":
        """Build a client from application settings."""
        return cls(
            base_url=settings.CONTENT_API_URL,
            token=settings.CONTENT_API_TOKEN,
            timeout=settings.CONTENT_API_TIMEOUT,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def _url(self, path: str, query: Optional[Dict[str, Any]] = None) -> str:
        url = f"{self._base_url}/{path.lstrip('/')}"
        if query:
            encoded = encode_query(query)
            if encoded:
                url = f"{url}?{encoded}"
        return url

    async def _request(
        self,
        method: str,
        path: str,
        query: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None
    ) -> Any:
        url = self._url(path, query)
        logger.debug(f"{method} {url}")

        async with httpx.AsyncClient(
            timeout=self._timeout,
            transport=self._transport
        ) as client:
            response = await client.request(
                method,
                url,
                headers=self._headers(),
                json=json
            )
            response.raise_for_status()
            return response.json()

    async def get(self, path: str, query: Optional[Dict[str, Any]] = None) -> Any:
        """
        Send a GET request.

        Args:
            path: Endpoint path relative to the API root
            query: Structured query (fields, populate, filters)

        Returns:
            Decoded JSON body

        Raises:
            httpx.HTTPStatusError: On 4xx/5xx responses
            httpx.RequestError: On network failures
        """
        return await self._request("GET", path, query=query)

    async def post(self, path: str, json: Dict[str, Any]) -> Any:
        """Send a POST request with a JSON body and return the decoded body."""
        return await self._request("POST", path, json=json)

    async def put(self, path: str, json: Dict[str, Any]) -> Any:
        """Send a PUT request with a JSON body and return the decoded body."""
        return await self._request("PUT", path, json=json)
