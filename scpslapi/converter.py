"""
Conversion between the raw serverinfo representation (as sent over the wire) and the types applications work with.

All functions are pure. Decoding errors are never papered over: a single undecodable field fails the conversion of
the whole response.
"""

import base64
import binascii
import datetime
import re

from scpslapi.errors import CountFormatError, DateFormatError, EncodingError, MalformedPayloadError
from scpslapi.jsonutil import dumps, loads
from scpslapi.server_info import ErrorResponse, Player, PlayersCount, Response, ServerInfo, SuccessResponse
from scpslapi.server_info_raw import RawPlayer, RawResponse, RawServerInfo, RawUserId, RawUserIdWithNickname


# re's \d would also match non-ASCII digits
_DATE_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")
_COUNT_PATTERN = re.compile(r"[0-9]+")

U32_MAX = 2 ** 32 - 1


def parse_date(text: str) -> datetime.date:
    match = _DATE_PATTERN.fullmatch(text)

    if not match:
        raise DateFormatError("invalid date: %r" % text)

    year, month, day = (int(i) for i in match.groups())

    try:
        return datetime.date(year, month, day)

    except ValueError as e:
        raise DateFormatError("invalid date: %r" % text) from e


def format_date(date: datetime.date) -> str:
    return "{:04d}-{:02d}-{:02d}".format(date.year, date.month, date.day)


def _parse_count(text: str, original: str) -> int:
    if not _COUNT_PATTERN.fullmatch(text):
        raise CountFormatError("invalid players count: %r" % original)

    # int() refuses very long digit strings with a plain ValueError, so overlong input is rejected up front
    if len(text.lstrip("0")) > len(str(U32_MAX)) or int(text) > U32_MAX:
        raise CountFormatError("players count out of range: %r" % original)

    return int(text)


def parse_players_count(text: str) -> PlayersCount:
    # the server doesn't guarantee current <= max, we just pass on what we get
    parts = text.split("/", 1)

    if len(parts) < 2:
        raise CountFormatError("invalid players count: %r" % text)

    current, maximum = parts

    return PlayersCount(_parse_count(current, text), _parse_count(maximum, text))


def format_players_count(players_count: PlayersCount) -> str:
    return "{}/{}".format(players_count.current, players_count.max)


def decode_info(text: str) -> str:
    try:
        data = base64.b64decode(text, validate=True)

    except (binascii.Error, ValueError) as e:
        raise EncodingError("server info is not valid base64") from e

    try:
        return data.decode("utf-8")

    except UnicodeDecodeError as e:
        raise EncodingError("server info is not valid UTF-8") from e


def encode_info(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def player_from_raw(raw: RawPlayer) -> Player:
    if isinstance(raw, RawUserId):
        return Player(raw.id)

    return Player(raw.id, raw.nickname)


def player_to_raw(player: Player) -> RawPlayer:
    # bare IDs have to stay bare IDs, otherwise proxies would change what the API sent
    if player.nickname is None:
        return RawUserId(player.id)

    return RawUserIdWithNickname(player.id, player.nickname)


def _map_optional(function, value):
    if value is None:
        return None

    return function(value)


def server_info_from_raw(raw: RawServerInfo) -> ServerInfo:
    players = None

    if raw.players is not None:
        players = tuple(player_from_raw(p) for p in raw.players)

    return ServerInfo(
        id=raw.id,
        port=raw.port,
        last_online=_map_optional(parse_date, raw.last_online),
        players_count=_map_optional(parse_players_count, raw.players_count),
        players=players,
        info=_map_optional(decode_info, raw.info),
        friendly_fire=raw.friendly_fire,
        whitelist=raw.whitelist,
        modded=raw.modded,
        mods=raw.mods,
        suppress=raw.suppress,
        auto_suppress=raw.auto_suppress,
    )


def server_info_to_raw(server_info: ServerInfo) -> RawServerInfo:
    players = None

    if server_info.players is not None:
        players = tuple(player_to_raw(p) for p in server_info.players)

    return RawServerInfo(
        id=server_info.id,
        port=server_info.port,
        last_online=_map_optional(format_date, server_info.last_online),
        players_count=_map_optional(format_players_count, server_info.players_count),
        players=players,
        info=_map_optional(encode_info, server_info.info),
        friendly_fire=server_info.friendly_fire,
        whitelist=server_info.whitelist,
        modded=server_info.modded,
        mods=server_info.mods,
        suppress=server_info.suppress,
        auto_suppress=server_info.auto_suppress,
    )


def response_from_raw(raw: RawResponse) -> Response:
    # the presence of an error message is what tells the two kinds of responses apart, not the success flag
    if raw.error is not None:
        return ErrorResponse(raw.error)

    if raw.cooldown is None:
        raise MalformedPayloadError("response contains neither an error nor a cooldown")

    if raw.servers is None:
        raise MalformedPayloadError("response contains neither an error nor a server list")

    return SuccessResponse(raw.cooldown, tuple(server_info_from_raw(s) for s in raw.servers))


def response_to_raw(response: Response) -> RawResponse:
    if isinstance(response, ErrorResponse):
        return RawResponse(success=False, error=response.message)

    return RawResponse(
        success=True,
        servers=tuple(server_info_to_raw(s) for s in response.servers),
        cooldown=response.cooldown,
    )


def parse_response(text: str) -> Response:
    """
    Parse a serverinfo response body.
    :param text: JSON document as sent by the API
    :return: SuccessResponse or ErrorResponse
    """

    try:
        data = loads(text)

    except ValueError as e:
        raise MalformedPayloadError("response is not valid JSON") from e

    return response_from_raw(RawResponse.from_json(data))


def dump_response(response: Response) -> str:
    """
    Serialize a response the way the API would send it. Useful for proxies and mock servers.
    """

    return dumps(response_to_raw(response).to_json())
