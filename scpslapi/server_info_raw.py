"""
Raw representation of the serverinfo API response. Field names and encodings are kept exactly as transmitted, which
makes these types useful for building local API proxies or mock servers.
"""

from collections import namedtuple
from typing import Union

from scpslapi.errors import MalformedPayloadError
from scpslapi.jsonutil import get_all


U16_MAX = 2 ** 16 - 1
U64_MAX = 2 ** 64 - 1


def _is_int(value) -> bool:
    # bool is a subclass of int, but true and false are not numbers in JSON
    return isinstance(value, int) and not isinstance(value, bool)


def _check_int(value, key: str, maximum: int) -> int:
    if not _is_int(value) or not 0 <= value <= maximum:
        raise MalformedPayloadError("%s must be an integer between 0 and %d, got %r" % (key, maximum, value))

    return value


def _check_type(value, key: str, expected_type: type, type_name: str):
    if not isinstance(value, expected_type):
        raise MalformedPayloadError("%s must be %s, got %r" % (key, type_name, value))

    return value


def _check_object(data, what: str) -> dict:
    if not isinstance(data, dict):
        raise MalformedPayloadError("%s must be a JSON object, got %r" % (what, data))

    return data


def _require(data: dict, key: str):
    try:
        return data[key]

    except KeyError:
        raise MalformedPayloadError("required key %s missing" % key)


class RawUserId(namedtuple("RawUserId", ["id"])):
    """
    Player list entry sent as a bare user ID string.
    """

    def to_json(self) -> str:
        return self.id


class RawUserIdWithNickname(namedtuple("RawUserIdWithNickname", ["id", "nickname"])):
    """
    Player list entry sent as an object. The nickname may be missing.
    """

    @classmethod
    def from_json(cls, data: dict):
        user_id = _check_type(_require(data, "ID"), "ID", str, "a string")

        nickname = data.get("Nickname", None)

        if nickname is not None:
            _check_type(nickname, "Nickname", str, "a string")

        return cls(user_id, nickname)

    def to_json(self) -> dict:
        data = {"ID": self.id}

        if self.nickname is not None:
            data["Nickname"] = self.nickname

        return data


RawPlayer = Union[RawUserId, RawUserIdWithNickname]


def raw_player_from_json(data) -> RawPlayer:
    # the entries are not tagged, the JSON type is the only thing telling the variants apart
    if isinstance(data, str):
        return RawUserId(data)

    if isinstance(data, dict):
        return RawUserIdWithNickname.from_json(data)

    raise MalformedPayloadError("player list entry must be a string or an object, got %r" % (data,))


# (attribute name, JSON key) pairs of the optional server fields, grouped by the type they must have
_OPTIONAL_STRING_FIELDS = [
    ("last_online", "LastOnline"),
    ("players_count", "Players"),
    ("info", "Info"),
]

_OPTIONAL_BOOL_FIELDS = [
    ("friendly_fire", "FF"),
    ("whitelist", "WL"),
    ("modded", "Modded"),
    ("suppress", "Suppress"),
    ("auto_suppress", "AutoSuppress"),
]


class RawServerInfo(namedtuple("RawServerInfo", [
    "id", "port", "last_online", "players_count", "players", "info", "friendly_fire", "whitelist", "modded", "mods",
    "suppress", "auto_suppress",
], defaults=[None] * 10)):
    @classmethod
    def from_json(cls, data: dict) -> "RawServerInfo":
        _check_object(data, "server entry")

        kwargs = {
            "id": _check_int(_require(data, "ID"), "ID", U64_MAX),
            "port": _check_int(_require(data, "Port"), "Port", U16_MAX),
        }

        # explicit nulls are treated like missing keys
        for attribute, key in _OPTIONAL_STRING_FIELDS:
            value = data.get(key, None)

            if value is not None:
                kwargs[attribute] = _check_type(value, key, str, "a string")

        for attribute, key in _OPTIONAL_BOOL_FIELDS:
            value = data.get(key, None)

            if value is not None:
                kwargs[attribute] = _check_type(value, key, bool, "a boolean")

        mods = data.get("Mods", None)

        if mods is not None:
            kwargs["mods"] = _check_int(mods, "Mods", U64_MAX)

        players = data.get("PlayersList", None)

        if players is not None:
            _check_type(players, "PlayersList", list, "an array")
            kwargs["players"] = tuple(raw_player_from_json(p) for p in players)

        return cls(**kwargs)

    def to_json(self) -> dict:
        data = {
            "ID": self.id,
            "Port": self.port,
        }

        # absent values are left out entirely instead of being sent as null
        optional_values = [
            ("LastOnline", self.last_online),
            ("Players", self.players_count),
            ("PlayersList", None if self.players is None else [p.to_json() for p in self.players]),
            ("Info", self.info),
            ("FF", self.friendly_fire),
            ("WL", self.whitelist),
            ("Modded", self.modded),
            ("Mods", self.mods),
            ("Suppress", self.suppress),
            ("AutoSuppress", self.auto_suppress),
        ]

        for key, value in optional_values:
            if value is not None:
                data[key] = value

        return data


class RawResponse(namedtuple("RawResponse", ["success", "error", "servers", "cooldown"], defaults=[None] * 3)):
    @classmethod
    def from_json(cls, data: dict) -> "RawResponse":
        _check_object(data, "response")

        # older bindings declared the cooldown under the "Success" key, too, so the key may appear twice: once with
        # the boolean success flag, once with the numeric cooldown
        success_values = get_all(data, "Success")

        flags = [v for v in success_values if isinstance(v, bool)]
        numbers = [v for v in success_values if _is_int(v)]

        if not success_values:
            raise MalformedPayloadError("required key Success missing")

        if len(flags) != 1 or len(flags) + len(numbers) != len(success_values):
            raise MalformedPayloadError("Success must be a boolean, got %r" % (success_values,))

        kwargs = {
            "success": flags[0],
        }

        error = data.get("Error", None)

        if error is not None:
            kwargs["error"] = _check_type(error, "Error", str, "a string")

        servers = data.get("Servers", None)

        if servers is not None:
            _check_type(servers, "Servers", list, "an array")
            kwargs["servers"] = tuple(RawServerInfo.from_json(s) for s in servers)

        cooldown = data.get("Cooldown", None)

        if cooldown is None and numbers:
            cooldown = numbers[-1]

        if cooldown is not None:
            kwargs["cooldown"] = _check_int(cooldown, "Cooldown", U64_MAX)

        return cls(**kwargs)

    def to_json(self) -> dict:
        data = {"Success": self.success}

        if self.error is not None:
            data["Error"] = self.error

        if self.servers is not None:
            data["Servers"] = [s.to_json() for s in self.servers]

        if self.cooldown is not None:
            data["Cooldown"] = self.cooldown

        return data

    def __str__(self):
        if self.error is not None:
            return "error: {}".format(self.error)

        return "{} servers, cooldown {}s".format(len(self.servers or ()), self.cooldown)
