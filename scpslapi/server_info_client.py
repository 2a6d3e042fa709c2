import requests

from scpslapi.converter import response_from_raw
from scpslapi.request_parameters import RequestParameters, build_url
from scpslapi.server_info import Response
from scpslapi.server_info_raw import RawResponse
from scpslapi.transport import fetch_json
from scpslapi.util import make_logger


DEFAULT_SERVER_INFO_URL = "https://api.scpslgame.com/serverinfo.php"


def redact_key(parameters: RequestParameters) -> str:
    """
    Build the request URL with the access key masked, for use in log messages.
    """

    if parameters.key is None:
        return build_url(parameters)

    return build_url(parameters._replace(key="REDACTED"))


def get_raw(parameters: RequestParameters, session: requests.Session = None, timeout=None) -> RawResponse:
    url = build_url(parameters)
    return RawResponse.from_json(fetch_json(url, session, timeout))


def get(parameters: RequestParameters, session: requests.Session = None, timeout=None) -> Response:
    return response_from_raw(get_raw(parameters, session, timeout))


class ServerInfoClient:
    def __init__(self, session: requests.Session = None, timeout=None):
        self.logger = make_logger(self.__class__.__name__)

        self.session = session
        self.timeout = timeout

    def get_raw(self, parameters: RequestParameters) -> RawResponse:
        self.logger.debug("requesting %s", redact_key(parameters))

        raw_response = get_raw(parameters, self.session, self.timeout)

        self.logger.debug("received response: %s", raw_response)

        return raw_response

    def get(self, parameters: RequestParameters) -> Response:
        response = response_from_raw(self.get_raw(parameters))

        self.logger.debug("converted response to %s", type(response).__name__)

        return response
