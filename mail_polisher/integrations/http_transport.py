"""
HTTP transport for the polishing backend.

This module handles:
1. Building the final URL (base + path + query)
2. Sending one JSON request with httpx
3. Validating the status code
4. Decoding the body into a Pydantic model

There are no retries: every call is exactly one round trip.
"""
from typing import Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from mail_polisher.integrations.endpoints import RequestDescriptor
from mail_polisher.utils.logger import get_logger
from mail_polisher.utils.errors import AddressError, BadStatusError, DecodeError, NetworkError

logger = get_logger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)

JSON_HEADERS = {"Content-Type": "application/json"}


class ApiTransport:
    """
    Executes request descriptors against the polishing backend.

    Usage:
        transport = ApiTransport("http://127.0.0.1:5000")
        response = await transport.send(build_suggestions(session_id), SuggestionsResponse)
    """

    def __init__(self, base_url: str, client: Optional[httpx.AsyncClient] = None):
        """
        Initialize transport.

        Args:
            base_url: Backend base address, e.g. "http://127.0.0.1:5000"
            client: Optional shared httpx client. When omitted, a client
                is opened per request. A shared client is closed by its owner.
        """
        self.base_url = base_url
        self._client = client

    def build_url(self, descriptor: RequestDescriptor) -> httpx.URL:
        """
        Join base and path with exactly one "/" and merge query params.

        Raises:
            AddressError: Base address is malformed
        """
        joined = f"{self.base_url.rstrip('/')}/{descriptor.path.lstrip('/')}"
        try:
            url = httpx.URL(joined)
        except httpx.InvalidURL as e:
            raise AddressError(f"Invalid address: {e}", descriptor.method, joined) from e

        if url.scheme not in ("http", "https") or not url.host:
            raise AddressError(f"Invalid base address: {self.base_url!r}", descriptor.method, joined)

        if descriptor.query:
            url = url.copy_merge_params(descriptor.query)
        return url

    async def send(self, descriptor: RequestDescriptor, response_model: Type[ResponseT]) -> ResponseT:
        """
        Send one request and decode the response.

        Args:
            descriptor: Request to send
            response_model: Pydantic model the body is decoded into

        Returns:
            Decoded response model

        Raises:
            AddressError: Address could not be built
            BadStatusError: Status outside 200-299
            DecodeError: Body is not JSON or has the wrong shape
            NetworkError: Connection, DNS or timeout failure
        """
        url = self.build_url(descriptor)
        method = descriptor.method

        if self._client is not None:
            response = await self._request(self._client, descriptor, url)
        else:
            async with httpx.AsyncClient() as client:
                response = await self._request(client, descriptor, url)

        if not 200 <= response.status_code < 300:
            logger.debug(f"{method} {url.path} returned {response.status_code}")
            raise BadStatusError(response.status_code, method, str(url), response.text)

        # 204 / empty body decodes as an empty object
        content = response.content or b"{}"
        try:
            return response_model.model_validate_json(content)
        except ValidationError as e:
            logger.debug(f"Failed to decode {response_model.__name__} from {method} {url.path}: {e}")
            raise DecodeError(
                f"Invalid {response_model.__name__} in response.", method, str(url)
            ) from e

    async def _request(
        self,
        client: httpx.AsyncClient,
        descriptor: RequestDescriptor,
        url: httpx.URL,
    ) -> httpx.Response:
        """Issue the request, mapping httpx failures to client errors."""
        logger.debug(f"{descriptor.method} {url.path}")
        try:
            return await client.request(
                method=descriptor.method,
                url=url,
                content=descriptor.body,
                headers=JSON_HEADERS,
            )
        except httpx.DecodingError as e:
            raise DecodeError(
                f"Undecodable response body: {e}", descriptor.method, str(url)
            ) from e
        except httpx.UnsupportedProtocol as e:
            raise AddressError(f"Unsupported address: {e}", descriptor.method, str(url)) from e
        except httpx.RequestError as e:
            logger.debug(f"{descriptor.method} {url.path} failed: {e!r}")
            raise NetworkError(
                f"Couldn't reach the polishing service: {e}", descriptor.method, str(url)
            ) from e
