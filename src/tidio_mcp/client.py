"""
HTTP client for the Tidio OpenAPI
Attaches the client credentials to every call and normalizes failures
"""

import json
import logging
from typing import Any, Dict, Optional
import httpx

from .config import REQUEST_TIMEOUT, TIDIO_API_VERSION
from .errors import TransportError, UpstreamError
from .models import ApiRequest

logger = logging.getLogger(__name__)


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class TidioClient:
    """HTTP client for communicating with the Tidio OpenAPI"""

    def __init__(
        self,
        base_url: str,
        client_id: str,
        client_secret: str,
        api_version: str = TIDIO_API_VERSION,
        timeout: float = REQUEST_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.headers = {
            "X-Tidio-Openapi-Client-Id": client_id,
            "X-Tidio-Openapi-Client-Secret": client_secret,
            "Accept": f"application/json; version={api_version}",
        }
        self.client = httpx.AsyncClient(timeout=timeout, transport=transport, follow_redirects=True)

    async def request(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        method: str = "GET",
        json: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """Send one request and return the decoded JSON body"""
        api_request = ApiRequest(path=path, method=method, params=params, body=json)
        logger.debug(f"{api_request.method} {api_request.path} params={api_request.params}")

        try:
            response = await self.client.request(
                api_request.method,
                f"{self.base_url}{api_request.path}",
                params=api_request.params or None,
                json=api_request.body,
                headers={**self.headers, **(headers or {})},
            )
        except httpx.RequestError as e:
            logger.warning(f"Tidio request {api_request.method} {api_request.path} failed: {e!r}")
            raise TransportError(str(e) or type(e).__name__) from e

        if not response.is_success:
            raise self._upstream_error(response)

        return _decode_body(response)

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Make GET request to Tidio"""
        return await self.request(path, params=params)

    async def aclose(self) -> None:
        await self.client.aclose()

    @staticmethod
    def _upstream_error(response: httpx.Response) -> UpstreamError:
        body = _decode_body(response)
        serialized = json.dumps(
            "" if body is None else body, separators=(",", ":"), ensure_ascii=False
        )
        status_text = response.reason_phrase or httpx.codes.get_reason_phrase(response.status_code)
        logger.warning(f"Tidio responded {response.status_code} for {response.request.url.path}")
        return UpstreamError(response.status_code, status_text, body, serialized)
