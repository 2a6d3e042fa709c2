import pytest

from scpslapi.errors import MalformedPayloadError
from scpslapi.jsonutil import loads
from scpslapi.server_info_raw import (
    RawResponse,
    RawServerInfo,
    RawUserId,
    RawUserIdWithNickname,
    raw_player_from_json,
)


FULL_SERVER_JSON = {
    "ID": 12345,
    "Port": 7777,
    "LastOnline": "2023-02-28",
    "Players": "5/20",
    "PlayersList": ["1@steam", {"ID": "2@steam", "Nickname": "Two"}],
    "Info": "SGVsbG8=",
    "FF": True,
    "WL": False,
    "Modded": True,
    "Mods": 3,
    "Suppress": False,
    "AutoSuppress": True,
}


class TestRawServerInfo:
    def test_from_json_all_fields(self):
        raw = RawServerInfo.from_json(FULL_SERVER_JSON)

        assert raw == RawServerInfo(
            id=12345,
            port=7777,
            last_online="2023-02-28",
            players_count="5/20",
            players=(RawUserId("1@steam"), RawUserIdWithNickname("2@steam", "Two")),
            info="SGVsbG8=",
            friendly_fire=True,
            whitelist=False,
            modded=True,
            mods=3,
            suppress=False,
            auto_suppress=True,
        )

    def test_to_json_all_fields(self):
        assert RawServerInfo.from_json(FULL_SERVER_JSON).to_json() == FULL_SERVER_JSON

    def test_required_fields_only(self):
        raw = RawServerInfo.from_json({"ID": 1, "Port": 7777})

        assert raw == RawServerInfo(1, 7777)
        assert raw.to_json() == {"ID": 1, "Port": 7777}

    def test_sequences_are_immutable(self):
        raw = RawServerInfo.from_json(FULL_SERVER_JSON)

        assert isinstance(raw.players, tuple)

    def test_null_is_treated_as_absent(self):
        raw = RawServerInfo.from_json({"ID": 1, "Port": 7777, "Info": None, "FF": None, "PlayersList": None})

        assert raw == RawServerInfo(1, 7777)

    @pytest.mark.parametrize("data", [
        {"Port": 7777},
        {"ID": 1},
        {"ID": "1", "Port": 7777},
        {"ID": -1, "Port": 7777},
        {"ID": 2 ** 64, "Port": 7777},
        {"ID": 1, "Port": 65536},
        {"ID": 1, "Port": True},
        {"ID": 1, "Port": 7777.0},
        {"ID": 1, "Port": 7777, "FF": "yes"},
        {"ID": 1, "Port": 7777, "Players": 5},
        {"ID": 1, "Port": 7777, "Mods": False},
        {"ID": 1, "Port": 7777, "PlayersList": "1@steam"},
        {"ID": 1, "Port": 7777, "PlayersList": [5]},
        {"ID": 1, "Port": 7777, "PlayersList": [{"Nickname": "no ID"}]},
        {"ID": 1, "Port": 7777, "PlayersList": [{"ID": "1@steam", "Nickname": 5}]},
        [],
    ])
    def test_malformed(self, data):
        with pytest.raises(MalformedPayloadError):
            RawServerInfo.from_json(data)


class TestRawPlayer:
    def test_bare_id(self):
        assert raw_player_from_json("1@steam") == RawUserId("1@steam")

    def test_object_without_nickname(self):
        raw = raw_player_from_json({"ID": "1@steam"})

        assert raw == RawUserIdWithNickname("1@steam", None)
        assert raw.to_json() == {"ID": "1@steam"}

    def test_object_with_null_nickname(self):
        assert raw_player_from_json({"ID": "1@steam", "Nickname": None}) == RawUserIdWithNickname("1@steam", None)


class TestRawResponse:
    def test_error(self):
        raw = RawResponse.from_json({"Success": False, "Error": "rate limited"})

        assert raw == RawResponse(success=False, error="rate limited")
        assert str(raw) == "error: rate limited"

    def test_cooldown_key(self):
        raw = RawResponse.from_json({"Success": True, "Cooldown": 30, "Servers": [{"ID": 1, "Port": 7777}]})

        assert raw == RawResponse(success=True, servers=(RawServerInfo(1, 7777),), cooldown=30)
        assert str(raw) == "1 servers, cooldown 30s"

    def test_servers_are_immutable(self):
        raw = RawResponse.from_json({"Success": True, "Cooldown": 30, "Servers": [{"ID": 1, "Port": 7777}]})

        assert isinstance(raw.servers, tuple)

    def test_cooldown_under_repeated_success_key(self):
        raw = RawResponse.from_json(loads('{"Success": true, "Servers": [], "Success": 30}'))

        assert raw == RawResponse(success=True, servers=(), cooldown=30)

    def test_repeated_success_key_order_does_not_matter(self):
        raw = RawResponse.from_json(loads('{"Success": 30, "Servers": [], "Success": true}'))

        assert raw == RawResponse(success=True, servers=(), cooldown=30)

    def test_cooldown_key_wins(self):
        raw = RawResponse.from_json(loads('{"Success": true, "Success": 30, "Cooldown": 60, "Servers": []}'))

        assert raw.cooldown == 60

    def test_to_json_omits_absent_keys(self):
        assert RawResponse(success=False, error="nope").to_json() == {"Success": False, "Error": "nope"}

    def test_to_json_success(self):
        raw = RawResponse(success=True, servers=(RawServerInfo(1, 7777),), cooldown=30)

        assert raw.to_json() == {"Success": True, "Servers": [{"ID": 1, "Port": 7777}], "Cooldown": 30}

    @pytest.mark.parametrize("text", [
        '{"Servers": [], "Cooldown": 30}',
        '{"Success": "yes", "Servers": [], "Cooldown": 30}',
        '{"Success": 30, "Servers": []}',
        '{"Success": true, "Success": false, "Servers": []}',
        '{"Success": true, "Servers": {}, "Cooldown": 30}',
        '{"Success": true, "Servers": [], "Cooldown": "30"}',
        '{"Success": false, "Error": 5}',
        '[]',
    ])
    def test_malformed(self, text):
        with pytest.raises(MalformedPayloadError):
            RawResponse.from_json(loads(text))
