class SCPSLAPIError(Exception):
    """
    Base class for all errors raised by this library.
    """
    pass


class TransportError(SCPSLAPIError):
    """
    Thrown whenever the HTTP request itself failed (connection problems, timeouts, bad HTTP status codes).
    """
    pass


class HTTPStatusError(TransportError):
    def __init__(self, status_code: int, url: str = None):
        super().__init__("HTTP status %d" % status_code)

        self.status_code = status_code
        self.url = url


class BadRequestError(HTTPStatusError):
    pass


class UnauthorizedError(HTTPStatusError):
    pass


class IpNotVerifiedError(HTTPStatusError):
    pass


class RateLimitExceededError(HTTPStatusError):
    pass


class UrlBuildError(SCPSLAPIError):
    """
    Thrown when a request URL cannot be built from the given parameters. The caller needs to fix the input.
    """
    pass


class MalformedPayloadError(SCPSLAPIError):
    """
    Thrown when the response does not have the expected structure (missing required fields, wrong types, invalid
    JSON).
    """
    pass


class ConversionError(SCPSLAPIError):
    """
    Thrown when a wire value is present but cannot be decoded.
    """
    pass


class DateFormatError(ConversionError):
    pass


class CountFormatError(ConversionError):
    pass


class EncodingError(ConversionError):
    pass


class AddressParseError(SCPSLAPIError):
    pass


# the API uses these status codes for the errors it documents
_STATUS_ERRORS = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: IpNotVerifiedError,
    429: RateLimitExceededError,
}


def error_for_status(status_code: int, url: str = None) -> HTTPStatusError:
    error_class = _STATUS_ERRORS.get(status_code, HTTPStatusError)
    return error_class(status_code, url)
