# pteroprompt/commands.py
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping

from .classes import display_name
from .errors import NoResponse, PlayerNotFound
from .help import help_text
from .rcon import RconTimeout
from .resolver import resolve_player
from .subcommands import do_ai, do_classes, do_whitelist
from .util import onoff, percent, yesno

logger = logging.getLogger(__name__)

DEFAULT_KICK_REASON = "You were kicked from the server."
_HEX = re.compile(r"[0-9a-fA-F]+")

Handler = Callable[[object, list], None]


@dataclass(frozen=True)
class Command:
    name: str
    handler: Handler


# --- handlers ----------------------------------------------------------------

def do_help(client, args: list[str]) -> None:
    print(help_text(args[0] if args else None))


def do_status(client, args: list[str]) -> None:
    d = client.get_server_details()
    print("Server information:")
    print(f"    Name:                {d.name}")
    print(f"    Players:             {d.current_players}/{d.max_players}")
    print(f"    Day/Night length:    {d.day_length_minutes}/{d.night_length_minutes} minutes")
    print(f"    Password protected?  {yesno(d.has_password)}")
    print(f"    Global chat enabled? {yesno(d.enable_global_chat)}")
    print(f"    Queue enabled?       {yesno(d.queue_enabled)}")
    print(f"    Whitelist enabled?   {yesno(d.whitelist)}")


def do_announce(client, args: list[str]) -> None:
    if not args:
        print("Missing MESSAGE")
        return
    client.announce(" ".join(args))


def do_players(client, args: list[str]) -> None:
    players = client.get_player_list()
    print("Connected players:")
    for p in players:
        print(f"    {p.name}")


def do_dm(client, args: list[str]) -> None:
    if len(args) < 1:
        print("Missing PLAYER_NAME")
        return
    if len(args) < 2:
        print("Missing MESSAGE")
        return
    try:
        player_id = resolve_player(client, args[0])
    except PlayerNotFound as e:
        print(e)
        return
    client.send_direct_message(player_id, " ".join(args[1:]))


def do_info(client, args: list[str]) -> None:
    if not args:
        print("Missing PLAYER_NAME")
        return
    wanted = args[0].lower()
    for p in client.get_player_data():
        if p.name.lower() != wanted:
            continue
        loc = p.location
        print(f"Player {p.name}")
        print(f"    ID:       {p.id}")
        print(f"    Class:    {display_name(p.dino_class)}")
        print(f"    Growth:   {percent(p.growth)}%, Health: {percent(p.health)}%, "
              f"Stamina: {percent(p.stamina)}%, Hunger: {percent(p.hunger)}%, "
              f"Thirst: {percent(p.thirst)}%")
        print(f"    Location: {loc.y:,.3f}, {loc.x:,.3f}, {loc.z:,.3f}")
        return
    print(PlayerNotFound(args[0]))


def do_kick(client, args: list[str]) -> None:
    if not args:
        print("Missing player name")
        return
    name = args[0]
    reason = " ".join(args[1:]) if len(args) > 1 else DEFAULT_KICK_REASON
    try:
        player_id = resolve_player(client, name)
    except PlayerNotFound:
        print(f'No such player "{name}"')
        return
    client.kick_player(player_id, reason)
    print(f"{name} was kicked from the server. Reason: {reason}")


def do_wipe_corpses(client, args: list[str]) -> None:
    client.wipe_corpses()
    print("Corpses wiped")


def do_toggle_gc(client, args: list[str]) -> None:
    print(f"Global chat is now {onoff(client.toggle_global_chat())}")


def do_toggle_humans(client, args: list[str]) -> None:
    print(f"Humans are now {onoff(client.toggle_humans())}")


def parse_command_byte(token: str) -> int:
    if not _HEX.fullmatch(token):
        raise ValueError(f"not a hexadecimal number: {token!r}")
    code = int(token, 16)
    if code > 0xFF:
        raise ValueError(f"command byte out of range: {token!r}")
    return code


def do_send(client, args: list[str]) -> None:
    if not args:
        print("Missing command byte")
        return
    try:
        code = parse_command_byte(args[0])
    except ValueError:
        print("Command byte must be a hexadecimal number, e.g. 3a")
        return
    try:
        reply = client.exec_command(code, *args[1:])
    except RconTimeout as e:
        # unknown codes often get no answer at all
        raise NoResponse() from e
    print(reply)


# --- dispatch ----------------------------------------------------------------

def build_commands() -> Mapping[str, Command]:
    table = [
        Command("help", do_help),
        Command("status", do_status),
        Command("announce", do_announce),
        Command("players", do_players),
        Command("dm", do_dm),
        Command("info", do_info),
        Command("classes", do_classes),
        Command("whitelist", do_whitelist),
        Command("kick", do_kick),
        Command("wipe_corpses", do_wipe_corpses),
        Command("toggle_gc", do_toggle_gc),
        Command("toggle_humans", do_toggle_humans),
        Command("ai", do_ai),
        Command("send", do_send),
    ]
    return MappingProxyType({c.name: c for c in table})


COMMANDS = build_commands()


def dispatch(commands: Mapping[str, Command], client, keyword: str, args: list[str]) -> bool:
    """Run the handler for ``keyword``; False when there is none."""
    cmd = commands.get(keyword.lower())
    if cmd is None:
        print(f'Unknown command {keyword.lower()}. Type "help" for a list of commands.')
        return False
    logger.debug("dispatch %s %r", cmd.name, args)
    cmd.handler(client, args)
    return True
