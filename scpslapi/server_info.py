import datetime
from typing import NamedTuple, Optional, Tuple, Union


class PlayersCount(NamedTuple):
    current: int
    max: int

    def __str__(self):
        return "{}/{}".format(self.current, self.max)


class Player(NamedTuple):
    id: str
    nickname: Optional[str] = None

    def __str__(self):
        if self.nickname is None:
            return self.id

        return "{} ({})".format(self.nickname, self.id)


class ServerInfo(NamedTuple):
    """
    State of a single server. Every optional field is None unless the matching request flag was set.
    """

    id: int
    port: int
    last_online: Optional[datetime.date] = None
    players_count: Optional[PlayersCount] = None
    players: Optional[Tuple[Player, ...]] = None
    # decoded server description
    info: Optional[str] = None
    friendly_fire: Optional[bool] = None
    whitelist: Optional[bool] = None
    modded: Optional[bool] = None
    mods: Optional[int] = None
    suppress: Optional[bool] = None
    auto_suppress: Optional[bool] = None


class SuccessResponse(NamedTuple):
    # seconds to wait before the next serverinfo request
    cooldown: int
    servers: Tuple[ServerInfo, ...] = ()


class ErrorResponse(NamedTuple):
    message: str

    def __str__(self):
        return self.message


Response = Union[SuccessResponse, ErrorResponse]
