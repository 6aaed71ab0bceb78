"""HTTP gateway to the vehicle service backend."""

import logging
from typing import Any

import httpx

from vehicle_service.infrastructure.api.errors import (
    ApiError,
    AuthenticationFailed,
    HttpError,
    NetworkUnavailableError,
    RequestTimeoutError,
)

logger = logging.getLogger("vehicle_service.api")

STATUS_FALLBACK_MESSAGES = {
    401: "Invalid credentials or session expired",
    403: "Access denied",
    404: "Resource not found",
    500: "Internal server error",
}


class ApiGateway:
    """Single entry point for backend calls.

    Attaches ``Authorization: Bearer <token>`` while a token is set, turns
    non-2xx answers into ``HttpError`` (``AuthenticationFailed`` for 401) and
    transport failures into ``NetworkUnavailableError``. Nothing is retried
    here; retry policy belongs to the caller.

    The token is read at call time, so setting or clearing it affects every
    subsequent request.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._token: str | None = None

    @property
    def token(self) -> str | None:
        return self._token

    def set_token(self, token: str | None) -> None:
        """Use ``token`` for all following requests."""
        self._token = token

    def clear_token(self) -> None:
        self._token = None

    def build_url(self, endpoint: str) -> str:
        """Join the base URL and an endpoint path."""
        if not endpoint.startswith("/"):
            endpoint = f"/{endpoint}"
        return f"{self.base_url}{endpoint}"

    def build_headers(self, extra: dict[str, str] | None = None) -> dict[str, str]:
        """Default JSON headers, the bearer token if set, then caller headers."""
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        if extra:
            headers.update(extra)
        return headers

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Send a request and return the decoded response body.

        Args:
            endpoint: Path below the base URL, e.g. ``/vehicles``
            method: HTTP method
            params: Query parameters; ``None`` values are dropped
            json: JSON-serializable request body
            headers: Extra headers, merged over the defaults

        Returns:
            Parsed JSON, response text, or None for empty responses

        Raises:
            AuthenticationFailed: On HTTP 401
            HttpError: On any other non-2xx status
            NetworkUnavailableError: If the server could not be reached
        """
        url = self.build_url(endpoint)
        query = {k: v for k, v in (params or {}).items() if v is not None}
        client = self._get_client()
        logger.info(f"[API] {method} {url}")

        try:
            response = await client.request(
                method,
                url,
                params=query or None,
                json=json,
                headers=self.build_headers(headers),
            )
        except httpx.TimeoutException as e:
            logger.error(f"[API] Timeout: {method} {url}")
            raise RequestTimeoutError("Request timeout - server took too long to respond") from e
        except httpx.TransportError as e:
            logger.error(f"[API] Network error: {method} {url}: {e}")
            raise NetworkUnavailableError(
                "Network error. Check your connection and ensure backend is running."
            ) from e

        return self._handle_response(response)

    async def get(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        return await self.request(endpoint, "GET", params=params)

    async def post(self, endpoint: str, data: Any = None) -> Any:
        return await self.request(endpoint, "POST", json=data if data is not None else {})

    async def put(self, endpoint: str, data: Any = None) -> Any:
        return await self.request(endpoint, "PUT", json=data if data is not None else {})

    async def patch(self, endpoint: str, data: Any = None) -> Any:
        return await self.request(endpoint, "PATCH", json=data if data is not None else {})

    async def delete(self, endpoint: str) -> Any:
        return await self.request(endpoint, "DELETE")

    async def health_check(self) -> bool:
        """Check whether the backend reports itself as up."""
        try:
            response = await self.get("/health")
        except ApiError as e:
            logger.error(f"[API] Health check failed: {e}")
            return False
        if isinstance(response, dict):
            return response.get("status") in ("UP", "ok")
        return response == "UP"

    def _handle_response(self, response: httpx.Response) -> Any:
        url = str(response.request.url)
        if not response.is_success:
            message, body = self._extract_error(response)
            logger.error(f"[API] {response.status_code} from {url}: {message}")
            if response.status_code == 401:
                raise AuthenticationFailed(message, 401, url, body)
            raise HttpError(message, response.status_code, url, body)

        if response.status_code == 204 or not response.content:
            return None
        if "application/json" in response.headers.get("content-type", ""):
            try:
                return response.json()
            except ValueError as e:
                logger.error(f"[API] Invalid JSON from {url}: {e}")
                raise HttpError("Invalid JSON response", response.status_code, url, response.text) from e
        return response.text

    @staticmethod
    def _extract_error(response: httpx.Response) -> tuple[str, Any]:
        body: Any = None
        message = ""
        if "application/json" in response.headers.get("content-type", ""):
            try:
                body = response.json()
            except ValueError:
                body = None
            if isinstance(body, dict):
                message = body.get("message") or body.get("error") or body.get("detail") or ""
        else:
            body = response.text
            message = body.strip()
        if not message:
            message = STATUS_FALLBACK_MESSAGES.get(
                response.status_code, f"Server error ({response.status_code})"
            )
        return str(message), body

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            timeout = httpx.Timeout(self.timeout)
            self._client = httpx.AsyncClient(timeout=timeout, transport=self._transport)
        return self._client

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "ApiGateway":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url={self.base_url}, authenticated={self._token is not None})"
