"""Domain-specific exceptions."""


class DaumApiError(RuntimeError):
    """Base class for every failure raised by the search client."""

    error_code = "DAUM_API_ERROR"


class UnknownServiceError(DaumApiError, ValueError):
    error_code = "UNKNOWN_SERVICE"


class TransportError(DaumApiError):
    """The request could not be sent or its body could not be read."""

    error_code = "TRANSPORT_FAILURE"


class DecodeError(DaumApiError):
    """The provider body is not JSON or does not fit the service shape."""

    error_code = "DECODE_FAILURE"


class EncodeError(DaumApiError):
    error_code = "ENCODE_FAILURE"
