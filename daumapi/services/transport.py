"""Single authenticated GET against the search provider."""

from __future__ import annotations

import httpx

from daumapi.config import ClientSettings, get_settings
from daumapi.logging import logger
from daumapi.services.exceptions import TransportError
from daumapi.services.tracing import TraceBuffer, record


def fetch(
    credential: str,
    url: str,
    *,
    client: httpx.Client | None = None,
    settings: ClientSettings | None = None,
    trace: TraceBuffer | None = None,
) -> bytes:
    """Return the complete response body for ``url``.

    The credential is sent verbatim as the ``Authorization`` header. The HTTP
    status is not inspected: error bodies are returned like any other payload.
    """

    settings = settings or get_settings()
    headers = {"Authorization": credential}
    record(trace, f"Header: {headers}")

    owns_client = client is None
    if owns_client:
        client = httpx.Client(timeout=settings.request_timeout_seconds)

    try:
        try:
            request = client.build_request("GET", url, headers=headers)
        except (httpx.InvalidURL, httpx.UnsupportedProtocol, UnicodeEncodeError, TypeError) as exc:
            logger.warning("transport_failed", stage="build", url=url, error=str(exc))
            raise TransportError(f"Cannot build request for {url!r}: {exc}") from exc

        try:
            response = client.send(request, stream=True)
        except httpx.RequestError as exc:
            logger.warning("transport_failed", stage="send", url=url, error=str(exc))
            raise TransportError(f"Request to {url!r} failed: {exc}") from exc

        try:
            body = response.read()
        except (httpx.HTTPError, httpx.StreamError) as exc:
            logger.warning("transport_failed", stage="read", url=url, error=str(exc))
            raise TransportError(f"Reading response from {url!r} failed: {exc}") from exc
        finally:
            response.close()
    finally:
        if owns_client:
            client.close()

    logger.debug(
        "search_response",
        url=url,
        status_code=response.status_code,
        size=len(body),
    )
    record(trace, f"resp.Body: {body.decode('utf-8', errors='replace')}")
    return body


__all__ = ["fetch"]
