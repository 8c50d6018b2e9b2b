"""
API Client
Single HTTP client used by every resource API: base URL, fixed timeout,
bearer token injection and global handling of unauthorized responses
"""
import logging
from typing import Any, Optional

import httpx

from ..config import API_URL, REQUEST_TIMEOUT_SECONDS
from ..exceptions import ApiError, NetworkError, UnauthorizedError
from ..session import SessionContext

logger = logging.getLogger(__name__)


class ApiClient:
    """Async client for the marketplace REST API"""

    def __init__(
        self,
        session: SessionContext,
        base_url: Optional[str] = None,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.session = session
        self.base_url = (base_url or API_URL).rstrip("/")
        self.http_client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
            event_hooks={
                "request": [self._attach_token],
                "response": [self._handle_unauthorized],
            },
        )

    async def _attach_token(self, request: httpx.Request) -> None:
        # Read at request time so a login or logout between calls is picked up
        token = self.session.token
        if token:
            request.headers["Authorization"] = f"Bearer {token}"

    async def _handle_unauthorized(self, response: httpx.Response) -> None:
        if response.status_code == 401:
            logger.warning(
                f"⚠️ 401 from {response.request.method} {response.request.url.path}, ending session"
            )
            self.session.invalidate()

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[dict] = None,
        json: Any = None,
        data: Optional[dict] = None,
        files: Any = None,
    ) -> Any:
        """
        Issue a request and return the parsed JSON body.

        Raises:
            NetworkError: no response (connectivity loss or timeout)
            UnauthorizedError: 401, after the session was invalidated
            ApiError: any other non-2xx status
        """
        try:
            response = await self.http_client.request(
                method,
                path,
                params=_clean_params(params),
                json=json,
                data=data,
                files=files,
            )
        except httpx.TimeoutException as e:
            logger.error(f"❌ {method} {path} timed out: {e}")
            raise NetworkError("Request timed out") from e
        except httpx.TransportError as e:
            logger.error(f"❌ {method} {path} failed: {e}")
            raise NetworkError(str(e) or "Network error") from e

        body = _parse_body(response)

        if response.status_code == 401:
            raise UnauthorizedError(_server_message(body), status_code=401, payload=body)

        if not response.is_success:
            message = _server_message(body)
            logger.error(f"❌ {method} {path} -> {response.status_code}: {message}")
            raise ApiError(message, status_code=response.status_code, payload=body)

        return body

    async def get(self, path: str, params: Optional[dict] = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json: Any = None, **kwargs) -> Any:
        return await self.request("POST", path, json=json, **kwargs)

    async def put(self, path: str, json: Any = None) -> Any:
        return await self.request("PUT", path, json=json)

    async def delete(self, path: str, json: Any = None) -> Any:
        return await self.request("DELETE", path, json=json)

    async def aclose(self) -> None:
        await self.http_client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()


def _clean_params(params: Optional[dict]) -> Optional[dict]:
    if not params:
        return None
    return {k: v for k, v in params.items() if v is not None}


def _parse_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def _server_message(body: Any) -> Optional[str]:
    if isinstance(body, dict):
        message = body.get("message") or body.get("error")
        if isinstance(message, str) and message:
            return message
    return None


def unwrap_data(body: Any, default: Any = None) -> Any:
    """
    Unwrap the {"success", "data", "message"} envelope.

    A 2xx body that still reports success=false is treated as a rejection.
    """
    if not isinstance(body, dict):
        return body if body is not None else default
    if body.get("success") is False:
        raise ApiError(_server_message(body), payload=body)
    if "data" in body:
        data = body["data"]
        return data if data is not None else default
    return body
