"""Search service façade: compose, fetch, decode and re-encode one query."""

from __future__ import annotations

from typing import Any, Callable

import httpx

from daumapi.config import ClientSettings, get_settings
from daumapi.domain.models import SearchResponse, Service
from daumapi.domain.results import SearchErrorPayload, SearchOutcome
from daumapi.logging import logger
from daumapi.services import codec, transport
from daumapi.services.exceptions import DecodeError, EncodeError, TransportError
from daumapi.services.tracing import TraceBuffer, record

PAGING_PARAMS = ("sort", "page", "size")


def compose_url(
    base_url: str,
    service: Service | str,
    keyword: str,
    *,
    trace: TraceBuffer | None = None,
    **params: Any,
) -> str:
    """Build ``<base>/<service>?query=<keyword>``.

    Neither ``service`` nor ``keyword`` is escaped. Paging parameters are
    appended in a fixed order only when they are not ``None``.
    """

    unknown = set(params) - set(PAGING_PARAMS)
    if unknown:
        raise TypeError(f"Unsupported query parameters: {', '.join(sorted(unknown))}")

    url = f"{base_url}/{service}?query={keyword}"
    for name in PAGING_PARAMS:
        value = params.get(name)
        if value is not None:
            url = f"{url}&{name}={value}"
    record(trace, f"Composed URL: {url}")
    return url


class SearchClient:
    """Runs search calls against a single provider endpoint.

    An injected ``httpx.Client`` is reused and left open; without one, every
    call opens and closes its own client.
    """

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        settings: ClientSettings | None = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or get_settings()

    def _credential(self, credential: str | None) -> str:
        if credential:
            return credential
        app_key = self._settings.app_key
        return app_key.get_secret_value() if app_key else ""

    def search_model(
        self,
        service: Service | str,
        credential: str | None,
        keyword: str,
        *,
        trace: TraceBuffer | None = None,
        sort: str | None = None,
        page: int | None = None,
        size: int | None = None,
    ) -> SearchResponse:
        service = codec.resolve_service(service)
        record(trace, f"Running {service} function.")
        logger.info("search_request", service=service.value)

        url = compose_url(
            self._settings.base_url,
            service,
            keyword,
            trace=trace,
            sort=sort,
            page=page,
            size=size,
        )
        raw = transport.fetch(
            self._credential(credential),
            url,
            client=self._client,
            settings=self._settings,
            trace=trace,
        )
        return codec.decode(service, raw)

    def search(
        self,
        service: Service | str,
        credential: str | None,
        keyword: str,
        *,
        trace: TraceBuffer | None = None,
        sort: str | None = None,
        page: int | None = None,
        size: int | None = None,
    ) -> str:
        """Return the provider response for ``keyword`` as canonical JSON text."""

        decoded = self.search_model(
            service,
            credential,
            keyword,
            trace=trace,
            sort=sort,
            page=page,
            size=size,
        )
        return codec.encode(decoded).decode("utf-8")

    def try_search(
        self,
        service: Service | str,
        credential: str | None,
        keyword: str,
        *,
        trace: TraceBuffer | None = None,
        sort: str | None = None,
        page: int | None = None,
        size: int | None = None,
    ) -> SearchOutcome:
        """Like :meth:`search` but reports failures as a :class:`SearchOutcome`."""

        service = codec.resolve_service(service)
        try:
            payload = self.search(
                service,
                credential,
                keyword,
                trace=trace,
                sort=sort,
                page=page,
                size=size,
            )
        except (TransportError, DecodeError, EncodeError) as exc:
            logger.warning(
                "search_failed",
                service=service.value,
                error_code=exc.error_code,
                error=str(exc),
            )
            return SearchOutcome(
                service=service.value,
                status=exc.error_code,
                error=SearchErrorPayload(error_code=exc.error_code, message=str(exc)),
            )
        return SearchOutcome(service=service.value, status="SUCCESS", payload=payload)


def search(
    service: Service | str,
    appkey: str,
    keyword: str,
    *,
    trace: TraceBuffer | None = None,
    **params: Any,
) -> str:
    return SearchClient().search(service, appkey, keyword, trace=trace, **params)


def web(appkey: str, keyword: str, *, trace: TraceBuffer | None = None) -> str:
    return search(Service.WEB, appkey, keyword, trace=trace)


def vclip(appkey: str, keyword: str, *, trace: TraceBuffer | None = None) -> str:
    return search(Service.VCLIP, appkey, keyword, trace=trace)


def image(appkey: str, keyword: str, *, trace: TraceBuffer | None = None) -> str:
    return search(Service.IMAGE, appkey, keyword, trace=trace)


def blog(appkey: str, keyword: str, *, trace: TraceBuffer | None = None) -> str:
    return search(Service.BLOG, appkey, keyword, trace=trace)


def tip(appkey: str, keyword: str, *, trace: TraceBuffer | None = None) -> str:
    return search(Service.TIP, appkey, keyword, trace=trace)


def book(appkey: str, keyword: str, *, trace: TraceBuffer | None = None) -> str:
    return search(Service.BOOK, appkey, keyword, trace=trace)


def cafe(appkey: str, keyword: str, *, trace: TraceBuffer | None = None) -> str:
    return search(Service.CAFE, appkey, keyword, trace=trace)


SERVICE_FUNCTIONS: dict[Service, Callable[..., str]] = {
    Service.WEB: web,
    Service.VCLIP: vclip,
    Service.IMAGE: image,
    Service.BLOG: blog,
    Service.TIP: tip,
    Service.BOOK: book,
    Service.CAFE: cafe,
}


__all__ = [
    "PAGING_PARAMS",
    "SERVICE_FUNCTIONS",
    "SearchClient",
    "blog",
    "book",
    "cafe",
    "compose_url",
    "image",
    "search",
    "tip",
    "vclip",
    "web",
]
