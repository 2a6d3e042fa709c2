import ipaddress
from typing import Union

import requests

from scpslapi.errors import AddressParseError
from scpslapi.transport import fetch_text
from scpslapi.util import make_logger


DEFAULT_IP_URL = "https://api.scpslgame.com/ip.php"

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


def parse_address(text: str) -> IPAddress:
    # surrounding whitespace (e.g., a trailing newline) is not part of the address
    text = text.strip()

    try:
        return ipaddress.ip_address(text)

    except ValueError as e:
        raise AddressParseError("could not parse IP address from response: %r" % text) from e


def get_ip(url: str = DEFAULT_IP_URL, session: requests.Session = None, timeout=None) -> IPAddress:
    """
    Ask the API which public IP address the request originates from.
    :return: IPv4Address or IPv6Address
    """

    return parse_address(fetch_text(url, session, timeout))


class IPClient:
    def __init__(self, url: str = DEFAULT_IP_URL, session: requests.Session = None, timeout=None):
        self.logger = make_logger(self.__class__.__name__)

        self.url = url
        self.session = session
        self.timeout = timeout

    def get(self) -> IPAddress:
        self.logger.debug("requesting %s", self.url)

        address = get_ip(self.url, self.session, self.timeout)

        self.logger.debug("public IP address: %s", address)

        return address
