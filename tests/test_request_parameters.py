import pytest

from scpslapi.errors import UrlBuildError
from scpslapi.request_parameters import RequestParameters, RequestParametersBuilder, build_url


URL = "https://api.scpslgame.com/serverinfo.php"


def test_only_true_flags_are_sent():
    url = build_url(RequestParameters(URL, players=True, info=False))

    assert url == URL + "?players=true"
    assert "id=" not in url
    assert "key=" not in url
    assert "info" not in url
    assert "false" not in url


def test_all_parameters():
    parameters = RequestParameters(
        URL,
        id=1234,
        key="secret",
        last_online=True,
        players=True,
        list=True,
        info=True,
        pastebin=True,
        version=True,
        flags=True,
        nicknames=True,
        online=True,
    )

    assert build_url(parameters) == (
        URL + "?id=1234&key=secret&lo=true&players=true&list=true&info=true&pastebin=true&version=true&flags=true"
        "&nicknames=true&online=true"
    )


def test_no_parameters_leaves_url_alone():
    assert build_url(RequestParameters(URL)) == URL


def test_key_is_escaped():
    assert build_url(RequestParameters(URL, key="a b&c/d=")) == URL + "?key=a+b%26c%2Fd%3D"


def test_existing_query_string_is_kept():
    assert build_url(RequestParameters(URL + "?format=json", id=1)) == URL + "?format=json&id=1"


def test_trailing_question_mark():
    assert build_url(RequestParameters(URL + "?", id=1)) == URL + "?id=1"


def test_fragment_stays_at_the_end():
    assert build_url(RequestParameters(URL + "#top", id=1)) == URL + "?id=1#top"


def test_zero_id_is_sent():
    assert build_url(RequestParameters(URL, id=0)) == URL + "?id=0"


@pytest.mark.parametrize("url", [
    "not a url",
    "/serverinfo.php",
    "api.scpslgame.com/serverinfo.php",
    "https://",
    "https://api.scpslgame.com:99999/serverinfo.php",
    "",
    None,
])
def test_invalid_base_url(url):
    with pytest.raises(UrlBuildError):
        build_url(RequestParameters(url, players=True))


@pytest.mark.parametrize("server_id", [-1, 2 ** 64, True, "1234", 12.0])
def test_invalid_id(server_id):
    with pytest.raises(UrlBuildError):
        build_url(RequestParameters(URL, id=server_id))


class TestBuilder:
    def test_builder_matches_direct_construction(self):
        parameters = RequestParameters.builder().url(URL).id(1234).key("secret").players(True).online(True).build()

        assert parameters == RequestParameters(URL, id=1234, key="secret", players=True, online=True)

    def test_every_flag_can_be_set(self):
        builder = RequestParametersBuilder().url(URL)

        for name in ["last_online", "players", "list", "info", "pastebin", "version", "flags", "nicknames", "online"]:
            builder = getattr(builder, name)(True)

        parameters = builder.build()

        assert parameters.last_online and parameters.nicknames and parameters.pastebin
        assert build_url(parameters).count("=true") == 9

    def test_later_calls_override_earlier_ones(self):
        parameters = RequestParameters.builder().url(URL).players(True).players(False).build()

        assert parameters.players is False

    def test_url_is_required(self):
        with pytest.raises(UrlBuildError):
            RequestParameters.builder().id(1).build()

    def test_parameters_are_immutable(self):
        parameters = RequestParameters(URL)

        with pytest.raises(AttributeError):
            parameters.players = True
