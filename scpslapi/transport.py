import requests

from scpslapi.errors import MalformedPayloadError, TransportError, error_for_status
from scpslapi.jsonutil import loads
from scpslapi.util import make_logger, managed_session


def _logger():
    return make_logger("scpslapi.transport")


def _get(session: requests.Session, url: str, timeout) -> requests.Response:
    try:
        return session.get(url, allow_redirects=True, timeout=timeout)

    except requests.RequestException as e:
        _logger().warning("request failed: %s", e)
        raise TransportError(str(e)) from e


def _fetch(url: str, session: requests.Session = None, timeout=None) -> requests.Response:
    # without a session, each call gets a short-lived session of its own
    if session is not None:
        return _get(session, url, timeout)

    with managed_session() as session:
        return _get(session, url, timeout)


def _raise_for_status(response: requests.Response, url: str):
    if response.status_code >= 400:
        _logger().warning("HTTP status %d", response.status_code)
        raise error_for_status(response.status_code, url)


def fetch_text(url: str, session: requests.Session = None, timeout=None) -> str:
    response = _fetch(url, session, timeout)
    _raise_for_status(response, url)
    return response.text


def fetch_json(url: str, session: requests.Session = None, timeout=None) -> dict:
    """
    Fetch a JSON object. The API sends its error responses with 4xx status codes, so if the body of an unsuccessful
    response is a JSON object with an error message, it is returned like any other payload.
    """

    response = _fetch(url, session, timeout)

    try:
        data = loads(response.text)

    except ValueError as e:
        _raise_for_status(response, url)
        raise MalformedPayloadError("response is not valid JSON") from e

    if not isinstance(data, dict):
        _raise_for_status(response, url)
        raise MalformedPayloadError("response must be a JSON object")

    if "Error" not in data:
        _raise_for_status(response, url)

    return data
