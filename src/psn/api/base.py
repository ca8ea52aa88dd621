"""
Base API Client

Responsibilities:
- HTTP client lifecycle management (using httpx)
- Request composition from the endpoint table
- Bearer token injection, read from the credentials provider per request
- One network round trip per call, no retries
- Handing the response to the interpreter

Every public operation goes through ``APIClient.call``: read credentials,
build the request, send it, interpret the payload.
"""

import json
import logging
from typing import Any, Optional

import httpx

from ..auth import CredentialsProvider
from ..enums import BodyShape
from ..exceptions import AuthenticationError
from .endpoints import Operation
from .response import decode_payload, interpret, unwrap


logger = logging.getLogger(__name__)


class APIClient:
    """
    HTTP client for the PSN API.

    Args:
        credentials: Provider read for the token and account id on every call
        timeout: Request timeout in seconds
        np_language: Language passed to endpoints that localise titles
        transport: Optional httpx transport (tests pass an httpx.MockTransport)
    """

    def __init__(
        self,
        credentials: CredentialsProvider,
        timeout: float = 30,
        np_language: str = "en",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize API client."""
        self.credentials = credentials
        self.timeout = timeout
        self.np_language = np_language
        self.client = httpx.AsyncClient(timeout=timeout, transport=transport)

    def build_request(
        self,
        operation: Operation,
        *,
        token: str,
        online_id: Optional[str] = None,
        account_id: Optional[str] = None,
        body: Optional[Any] = None,
        **context: Any,
    ) -> httpx.Request:
        """
        Compose the request for one operation.

        Pure: the result depends only on the arguments.

        Args:
            operation: Entry from the endpoint table
            token: Bearer token to sign the request with
            online_id: Online id of the target user
            account_id: Online id of the authenticated account
            body: JSON body for operations with a JSON body shape
            **context: Extra template values (offset, limit, page, ...)

        Returns:
            httpx.Request ready to send
        """
        values = {"np_language": self.np_language, **context}
        values["online_id"] = online_id
        values["account_id"] = account_id

        headers = {"Authorization": f"Bearer {token}"}
        content = None

        if operation.body is BodyShape.JSON:
            content = json.dumps(body if body is not None else {})
        elif operation.body is BodyShape.NULL:
            content = "null"

        if content is not None:
            headers["Content-Type"] = "application/json"

        return self.client.build_request(
            operation.method,
            operation.format_url(values),
            params=operation.format_params(values),
            headers=headers,
            content=content,
        )

    async def send(self, request: httpx.Request) -> httpx.Response:
        """
        Execute one request.

        Exactly one round trip. Network errors (httpx.RequestError and
        subclasses) propagate unchanged.
        """
        logger.debug(f"{request.method} {request.url.scheme}://{request.url.host}{request.url.path}")
        response = await self.client.send(request)
        logger.debug(f"{request.method} {request.url.path} -> {response.status_code}")
        return response

    async def call(
        self,
        operation: Operation,
        *,
        online_id: Optional[str] = None,
        body: Optional[Any] = None,
        **context: Any,
    ) -> Any:
        """
        Run an operation end to end.

        Args:
            operation: Entry from the endpoint table
            online_id: Online id of the target user
            body: JSON body for operations with a JSON body shape
            **context: Extra template values

        Returns:
            The validated result model, or True for operations without one

        Raises:
            AuthenticationError: If no token (or needed account id) is available
            APIError: If the response carries an in-band error
            ResponseValidationError: If the payload does not match the result model
            httpx.HTTPError: On transport failures
        """
        token = await self.credentials.get_token()
        if not token:
            raise AuthenticationError(f"No authorization token available for {operation.name}")

        account_id = None
        if operation.needs_account:
            account_id = await self.credentials.get_online_id()
            if not account_id:
                raise AuthenticationError(
                    f"The authenticated account's online id is required for {operation.name}"
                )

        request = self.build_request(
            operation,
            token=token,
            online_id=online_id,
            account_id=account_id,
            body=body,
            **context,
        )
        response = await self.send(request)

        payload = decode_payload(response)
        result = interpret(payload, operation.result, root=operation.root)
        value = unwrap(result, status_code=response.status_code)

        logger.debug(f"{operation.name} succeeded for {online_id or 'current account'}")
        return value

    async def close(self):
        """Close HTTP client and cleanup resources."""
        await self.client.aclose()

    async def __aenter__(self):
        """Async context manager support."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Cleanup on exit."""
        await self.close()
