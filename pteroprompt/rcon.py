# pteroprompt/rcon.py
from __future__ import annotations

import logging
import re
import socket
from dataclasses import dataclass
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8888
RECV_SIZE = 65536
DRAIN_TIMEOUT = 0.2

LOGIN = 0x01
COMMAND = 0x02

ANNOUNCE = 0x10
DIRECT_MESSAGE = 0x11
SERVER_DETAILS = 0x12
WIPE_CORPSES = 0x13
UPDATE_PLAYABLES = 0x15
KICK = 0x30
PLAYER_LIST = 0x40
PLAYER_DATA = 0x77
TOGGLE_WHITELIST = 0x81
ADD_WHITELIST = 0x82
REMOVE_WHITELIST = 0x83
TOGGLE_GLOBAL_CHAT = 0x84
TOGGLE_HUMANS = 0x86
TOGGLE_AI = 0x90
DISABLE_AI_CLASSES = 0x91
AI_DENSITY = 0x92


class RconError(Exception):
    pass


class RconConnectionError(RconError):
    pass


class RconAuthError(RconError):
    pass


class RconTimeout(RconError):
    pass


class RconProtocolError(RconError):
    pass


@dataclass(frozen=True)
class ServerDetails:
    name: str
    current_players: int
    max_players: int
    day_length_minutes: int
    night_length_minutes: int
    has_password: bool
    enable_global_chat: bool
    queue_enabled: bool
    whitelist: bool


@dataclass(frozen=True)
class Player:
    id: str
    name: str


@dataclass(frozen=True)
class Location:
    x: float
    y: float
    z: float


@dataclass(frozen=True)
class PlayerData:
    id: str
    name: str
    dino_class: str
    growth: float
    health: float
    stamina: float
    hunger: float
    thirst: float
    location: Location


def _pack(kind: int, code: Optional[int], payload: str = "") -> bytes:
    head = bytes([kind]) if code is None else bytes([kind, code])
    return head + payload.encode("utf-8") + b"\x00"


def _recv(sock: socket.socket) -> str:
    data = sock.recv(RECV_SIZE)
    if not data:
        raise RconConnectionError("RCON closed")
    chunks = [data]
    if len(data) == RECV_SIZE:
        # a full buffer may continue in the next segment; wait only briefly
        timeout = sock.gettimeout()
        sock.settimeout(DRAIN_TIMEOUT)
        try:
            while len(chunks[-1]) == RECV_SIZE:
                try:
                    chunk = sock.recv(RECV_SIZE)
                except socket.timeout:
                    break
                if not chunk:
                    break
                chunks.append(chunk)
        finally:
            sock.settimeout(timeout)
    return b"".join(chunks).rstrip(b"\x00").decode("utf-8", "ignore")


def split_address(address: str) -> tuple[str, int]:
    """Split ``HOST[:PORT]``; bracketed IPv6 literals are accepted."""
    address = address.strip()
    if address.startswith("["):
        host, _, rest = address[1:].partition("]")
        port = rest[1:] if rest.startswith(":") else ""
    elif address.count(":") == 1:
        host, port = address.split(":")
    else:
        host, port = address, ""
    if not host:
        raise ValueError(f"missing host in address {address!r}")
    if not port:
        return host, DEFAULT_PORT
    if not port.isdigit() or not 0 < int(port) < 65536:
        raise ValueError(f"invalid port in address {address!r}")
    return host, int(port)


_PAIR = re.compile(r"(\w+):\s*([^,\n]*)")
_COORD = re.compile(r"([XYZ])=\s*(-?[\d.]+)")


def _fields(text: str) -> dict[str, str]:
    return {k.lower(): v.strip() for k, v in _PAIR.findall(text)}


def _pick(fields: dict[str, str], *keys: str, default: str = "") -> str:
    for k in keys:
        if k in fields:
            return fields[k]
    return default


def _int(value: str) -> int:
    try:
        return int(float(value))
    except ValueError:
        return 0


def _float(value: str) -> float:
    try:
        return float(value)
    except ValueError:
        return 0.0


_TRUE_WORDS = ("true", "1", "yes", "on", "enabled")
_FALSE_WORDS = ("false", "0", "no", "off", "disabled")
_STATE_WORD = re.compile(r"\b(" + "|".join(_TRUE_WORDS + _FALSE_WORDS) + r")\b")


def _flag(value: str) -> bool:
    return value.strip().lower() in _TRUE_WORDS


def _strip_header(text: str, header: str) -> str:
    text = text.strip()
    if text.lower().startswith(header.lower()):
        text = text[len(header):]
    return text.lstrip(" ,:\n")


def parse_server_details(text: str) -> ServerDetails:
    f = _fields(_strip_header(text, "ServerDetails"))
    if not f:
        raise RconProtocolError(f"unexpected server details reply: {text!r}")
    return ServerDetails(
        name=_pick(f, "servername", "name"),
        current_players=_int(_pick(f, "servercurrentplayers", "currentplayers", default="0")),
        max_players=_int(_pick(f, "servermaxplayers", "maxplayers", default="0")),
        day_length_minutes=_int(_pick(f, "serverdaylengthminutes", "daylengthminutes", default="0")),
        night_length_minutes=_int(_pick(f, "servernightlengthminutes", "nightlengthminutes", default="0")),
        has_password=_flag(_pick(f, "bserverpassword", "haspassword")),
        enable_global_chat=_flag(_pick(f, "benableglobalchat", "enableglobalchat")),
        queue_enabled=_flag(_pick(f, "bqueueenabled", "queueenabled")),
        whitelist=_flag(_pick(f, "bserverwhitelist", "whitelist")),
    )


def parse_player_list(text: str) -> list[Player]:
    body = _strip_header(text, "PlayerList")
    # flat "ID,Name,ID,Name" sequence, one or many values per line
    parts = [p.strip() for ln in body.splitlines() for p in ln.split(",") if p.strip()]
    if len(parts) % 2:
        raise RconProtocolError(f"unexpected player list reply: {text!r}")
    return [Player(parts[i], parts[i + 1]) for i in range(0, len(parts), 2)]


def parse_player_data(text: str) -> list[PlayerData]:
    body = _strip_header(text, "PlayerData")
    players = []
    for record in re.split(r"\n(?=\s*Name:)", body):
        if not record.strip():
            continue
        f = _fields(record)
        coords = dict(_COORD.findall(_pick(f, "location")))
        players.append(PlayerData(
            id=_pick(f, "playerid", "id"),
            name=_pick(f, "name"),
            dino_class=_pick(f, "class"),
            growth=_float(_pick(f, "growth", default="0")),
            health=_float(_pick(f, "health", default="0")),
            stamina=_float(_pick(f, "stamina", default="0")),
            hunger=_float(_pick(f, "hunger", default="0")),
            thirst=_float(_pick(f, "thirst", default="0")),
            location=Location(
                x=_float(coords.get("X", "0")),
                y=_float(coords.get("Y", "0")),
                z=_float(coords.get("Z", "0")),
            ),
        ))
    return players


def parse_toggle(text: str) -> bool:
    """Read the new state from a toggle reply.

    ``Key: value`` replies are judged by the value alone; free text falls
    back to the last state word it contains.
    """
    low = text.strip().lower()
    if ":" in low:
        value = low.rsplit(":", 1)[1].strip(" .,!\x00")
        if value in _TRUE_WORDS:
            return True
        if value in _FALSE_WORDS:
            return False
        if value:
            raise RconProtocolError(f"cannot read toggle state from reply: {text!r}")
    words = _STATE_WORD.findall(low)
    if words:
        return words[-1] in _TRUE_WORDS
    raise RconProtocolError(f"cannot read toggle state from reply: {text!r}")


class EvrimaClient:
    """Blocking client for the Evrima RCON protocol.

    One request is in flight at a time; every operation sends a single
    command frame and waits for the text reply. Socket timeouts surface as
    :class:`RconTimeout`, everything else that breaks the connection as
    :class:`RconConnectionError`.
    """

    def __init__(self, host: str, port: int = DEFAULT_PORT, timeout: float = 5.0):
        self.host = host
        self.port = port
        self.timeout = timeout
        self._sock: Optional[socket.socket] = None

    @classmethod
    def connect(cls, address: str, timeout: float = 5.0) -> "EvrimaClient":
        host, port = split_address(address)
        client = cls(host, port, timeout)
        client.open()
        return client

    def open(self) -> None:
        try:
            self._sock = socket.create_connection((self.host, self.port), timeout=self.timeout)
        except socket.timeout as e:
            raise RconTimeout(f"connection to {self.host}:{self.port} timed out") from e
        except OSError as e:
            raise RconConnectionError(str(e)) from e
        self._sock.settimeout(self.timeout)
        logger.debug("connected to %s:%d", self.host, self.port)

    def close(self) -> None:
        if self._sock is not None:
            try:
                self._sock.close()
            finally:
                self._sock = None
            logger.debug("closed connection to %s:%d", self.host, self.port)

    def __enter__(self) -> "EvrimaClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _roundtrip(self, frame: bytes) -> str:
        if self._sock is None:
            raise RconConnectionError("not connected")
        try:
            self._sock.sendall(frame)
            reply = _recv(self._sock)
        except socket.timeout as e:
            raise RconTimeout("request timed out") from e
        except OSError as e:
            raise RconConnectionError(str(e)) from e
        logger.debug("request 0x%02x -> %d chars", frame[1] if len(frame) > 1 else 0, len(reply))
        return reply

    def auth(self, password: str) -> None:
        reply = self._roundtrip(_pack(LOGIN, None, password))
        if "accepted" not in reply.lower():
            raise RconAuthError(reply.strip() or "password rejected")

    def request(self, code: int, payload: str = "") -> str:
        return self._roundtrip(_pack(COMMAND, code, payload))

    # --- typed operations ----------------------------------------------------

    def get_server_details(self) -> ServerDetails:
        return parse_server_details(self.request(SERVER_DETAILS))

    def announce(self, message: str) -> None:
        self.request(ANNOUNCE, message)

    def get_player_list(self) -> list[Player]:
        return parse_player_list(self.request(PLAYER_LIST))

    def get_player_data(self) -> list[PlayerData]:
        return parse_player_data(self.request(PLAYER_DATA))

    def send_direct_message(self, player_id: str, message: str) -> None:
        self.request(DIRECT_MESSAGE, f"{player_id},{message}")

    def update_playables(self, classes: Iterable[str]) -> None:
        self.request(UPDATE_PLAYABLES, ",".join(classes))

    def toggle_whitelist(self) -> bool:
        return parse_toggle(self.request(TOGGLE_WHITELIST))

    def add_whitelist_ids(self, *player_ids: str) -> None:
        self.request(ADD_WHITELIST, ",".join(player_ids))

    def remove_whitelist_ids(self, *player_ids: str) -> None:
        self.request(REMOVE_WHITELIST, ",".join(player_ids))

    def kick_player(self, player_id: str, reason: str) -> None:
        self.request(KICK, f"{player_id},{reason}")

    def wipe_corpses(self) -> None:
        self.request(WIPE_CORPSES)

    def toggle_global_chat(self) -> bool:
        return parse_toggle(self.request(TOGGLE_GLOBAL_CHAT))

    def toggle_humans(self) -> bool:
        return parse_toggle(self.request(TOGGLE_HUMANS))

    def toggle_ai(self) -> bool:
        return parse_toggle(self.request(TOGGLE_AI))

    def disable_ai_classes(self, classes: Iterable[str]) -> None:
        self.request(DISABLE_AI_CLASSES, ",".join(classes))

    def set_ai_density(self, density: float) -> None:
        self.request(AI_DENSITY, repr(density))

    def exec_command(self, code: int, *args: str) -> str:
        return self.request(code, ",".join(args))
