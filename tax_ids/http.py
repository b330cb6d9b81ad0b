"""Blocking HTTP transport for the registry adapters.

Adapters describe their calls as `scrapy.http.Request` objects and get scrapy
responses back, so the parsing side works the same way a spider callback does.
The request itself is performed with `urllib.request`.
"""

import http.client
import logging
from urllib.error import HTTPError
from urllib.request import Request as UrllibRequest
from urllib.request import urlopen

from scrapy.http import Headers, Request, TextResponse
from scrapy.responsetypes import responsetypes

from .errors import HttpError, JsonParsingError, UnexpectedResponse

logger = logging.getLogger(__name__)


def _to_urllib(request: Request, user_agent: str | None) -> UrllibRequest:
    headers = dict(request.headers.to_unicode_dict())
    if user_agent and "User-Agent" not in headers:
        headers["User-Agent"] = user_agent
    return UrllibRequest(
        request.url,
        data=request.body or None,
        headers=headers,
        method=request.method,
    )


def fetch(
    request: Request,
    *,
    timeout: float | None = None,
    user_agent: str | None = None,
) -> TextResponse:
    """Perform ``request`` and return the reply as a scrapy text response.

    Error statuses (4xx, 5xx) are not raised: registries use them to carry
    answers, so they are returned like any other reply.

    Args:
        request: The request built by an adapter.
        timeout: Socket timeout in seconds, ``None`` for the global default.
        user_agent: Sent when the request carries no ``User-Agent`` header.

    Returns:
        A `TextResponse` (or subclass picked from the reply's content type).

    Raises:
        HttpError: The request could not be completed. The transport error
            is chained as ``__cause__``.

    """
    logger.debug("%s %s", request.method, request.url)
    try:
        try:
            with urlopen(_to_urllib(request, user_agent), timeout=timeout) as reply:
                status, headers, body = reply.status, reply.headers, reply.read()
        except HTTPError as error:
            with error:
                status, headers, body = error.code, error.headers, error.read()
    except (OSError, http.client.HTTPException) as error:
        raise HttpError(f"{request.method} {request.url} failed: {error}") from error
    logger.debug("%s %s returned %d", request.method, request.url, status)

    response_headers = Headers(list(headers.items()) if headers else [])
    response_class = responsetypes.from_args(
        headers=response_headers, url=request.url, body=body
    )
    if not issubclass(response_class, TextResponse):
        response_class = TextResponse
    return response_class(
        url=request.url,
        status=status,
        headers=response_headers,
        body=body,
        request=request,
    )


def decode_object(response: TextResponse) -> dict:
    """Decode a body that must hold a JSON object, as the REST registries send."""
    try:
        decoded = response.json()
    except ValueError as error:
        raise JsonParsingError(f"Invalid JSON from {response.url}: {error}") from error
    if not isinstance(decoded, dict):
        raise UnexpectedResponse(
            f"Expected a JSON object from {response.url}, got {type(decoded).__name__}"
        )
    return decoded
