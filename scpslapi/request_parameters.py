from typing import NamedTuple, Optional
from urllib.parse import urlencode, urlsplit

from scpslapi.errors import UrlBuildError
from scpslapi.server_info_raw import U64_MAX


# (attribute name, query parameter name), in the order the parameters are appended to the URL
FLAG_PARAMETERS = [
    ("last_online", "lo"),
    ("players", "players"),
    ("list", "list"),
    ("info", "info"),
    ("pastebin", "pastebin"),
    ("version", "version"),
    ("flags", "flags"),
    ("nicknames", "nicknames"),
    ("online", "online"),
]


class RequestParameters(NamedTuple):
    url: str
    id: Optional[int] = None
    key: Optional[str] = None
    last_online: bool = False
    players: bool = False
    list: bool = False
    info: bool = False
    pastebin: bool = False
    version: bool = False
    flags: bool = False
    nicknames: bool = False
    online: bool = False

    @staticmethod
    def builder() -> "RequestParametersBuilder":
        return RequestParametersBuilder()

    def query_parameters(self):
        params = []

        if self.id is not None:
            # bool is an int, too, but certainly not a server ID
            if not isinstance(self.id, int) or isinstance(self.id, bool) or not 0 <= self.id <= U64_MAX:
                raise UrlBuildError("invalid server ID: %r" % (self.id,))

            params.append(("id", str(self.id)))

        if self.key is not None:
            params.append(("key", self.key))

        # the API only checks whether a flag is present, false is never sent
        for attribute, name in FLAG_PARAMETERS:
            if getattr(self, attribute):
                params.append((name, "true"))

        return params


class RequestParametersBuilder:
    """
    Incremental alternative to constructing RequestParameters in one go:

        RequestParameters.builder().url(url).id(1234).players(True).build()
    """

    def __init__(self):
        self._values = {}

    def _set(self, name, value):
        self._values[name] = value
        return self

    def url(self, value: str):
        return self._set("url", value)

    def id(self, value: int):
        return self._set("id", value)

    def key(self, value: str):
        return self._set("key", value)

    def last_online(self, value: bool):
        return self._set("last_online", value)

    def players(self, value: bool):
        return self._set("players", value)

    def list(self, value: bool):
        return self._set("list", value)

    def info(self, value: bool):
        return self._set("info", value)

    def pastebin(self, value: bool):
        return self._set("pastebin", value)

    def version(self, value: bool):
        return self._set("version", value)

    def flags(self, value: bool):
        return self._set("flags", value)

    def nicknames(self, value: bool):
        return self._set("nicknames", value)

    def online(self, value: bool):
        return self._set("online", value)

    def build(self) -> RequestParameters:
        if "url" not in self._values:
            raise UrlBuildError("no URL configured")

        return RequestParameters(**self._values)


def _check_base_url(url: str):
    if not isinstance(url, str):
        raise UrlBuildError("invalid URL: %r" % (url,))

    try:
        parts = urlsplit(url)

        # accessing the port validates it
        parts.port

    except ValueError as e:
        raise UrlBuildError("invalid URL: %r" % (url,)) from e

    if not parts.scheme or not parts.hostname:
        raise UrlBuildError("URL must be absolute: %r" % (url,))

    return parts


def build_url(parameters: RequestParameters) -> str:
    parts = _check_base_url(parameters.url)

    querystring = urlencode(parameters.query_parameters())

    if not querystring:
        return parameters.url

    url, fragment_separator, fragment = parameters.url.partition("#")

    # the base URL might already come with a query string of its own
    if parts.query:
        separator = "&"
    elif url.endswith("?"):
        separator = ""
    else:
        separator = "?"

    return "{}{}{}{}{}".format(url, separator, querystring, fragment_separator, fragment)
