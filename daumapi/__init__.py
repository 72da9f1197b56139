"""Client for the Daum (Kakao) search REST API.

See https://developers.kakao.com/docs/restapi/search for the provider docs.
"""

from daumapi.domain.models import RESPONSE_MODELS, Service
from daumapi.domain.results import SearchOutcome
from daumapi.services.exceptions import (
    DaumApiError,
    DecodeError,
    EncodeError,
    TransportError,
    UnknownServiceError,
)
from daumapi.services.search import (
    SERVICE_FUNCTIONS,
    SearchClient,
    blog,
    book,
    cafe,
    compose_url,
    image,
    search,
    tip,
    vclip,
    web,
)
from daumapi.services.tracing import TraceBuffer, run_with_trace

__all__ = [
    "DaumApiError",
    "DecodeError",
    "EncodeError",
    "RESPONSE_MODELS",
    "SERVICE_FUNCTIONS",
    "SearchClient",
    "SearchOutcome",
    "Service",
    "TraceBuffer",
    "TransportError",
    "UnknownServiceError",
    "blog",
    "book",
    "cafe",
    "compose_url",
    "image",
    "run_with_trace",
    "search",
    "tip",
    "vclip",
    "web",
]
