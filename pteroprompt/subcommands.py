# pteroprompt/subcommands.py
"""Two-level commands: ``classes``, ``whitelist`` and ``ai``.

Each takes ``SUBCOMMAND [ARG...]``. Usage mistakes (no subcommand, an
unknown one, a bad class name, a density that isn't a number) are printed
and the handler returns normally; only remote failures propagate.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from .classes import AI_CLASSES, DINO_CLASSES, InvalidClass, expand, parse_selector
from .resolver import resolve_or_literal
from .util import onoff

logger = logging.getLogger(__name__)


def _split(args: list[str], topic: str) -> Optional[tuple[str, list[str]]]:
    if not args:
        print("No subcommand provided.")
        print(f'Type "help {topic}" to learn more about this command.')
        return None
    return args[0].lower(), args[1:]


def _invalid(sub: str, topic: str) -> None:
    print(f'Invalid subcommand "{sub}".')
    print(f'Type "help {topic}" to learn more about this command.')


def _run(table: dict[str, Callable], topic: str, client, args: list[str]) -> None:
    parsed = _split(args, topic)
    if parsed is None:
        return
    sub, rest = parsed
    handler = table.get(sub)
    if handler is None:
        _invalid(sub, topic)
        return
    logger.debug("%s %s %r", topic, sub, rest)
    handler(client, rest)


def _print_list(title: str, names) -> None:
    print(title)
    for n in names:
        print(f"    {n}")


# --- classes -----------------------------------------------------------------

def classes_list(client, args: list[str]) -> None:
    _print_list("List of all classes:", DINO_CLASSES)


def classes_allow(client, args: list[str]) -> None:
    if not args:
        print("No classes provided.")
        print('Type "classes list" to get a list of all available classes or '
              '"classes allow all" to allow all classes at the same time.')
        return
    try:
        classes = expand(parse_selector(args), DINO_CLASSES)
    except InvalidClass as e:
        print(f'"{e.name}" is not a class. Type "classes list" to get a list of all classes.')
        return
    client.update_playables(classes)
    print(f"Allowed {len(classes)} classes.")


CLASSES = {
    "list": classes_list,
    "allow": classes_allow,
}


def do_classes(client, args: list[str]) -> None:
    _run(CLASSES, "classes", client, args)


# --- whitelist ---------------------------------------------------------------

def whitelist_toggle(client, args: list[str]) -> None:
    print(f"The whitelist is now {onoff(client.toggle_whitelist())}")


def whitelist_status(client, args: list[str]) -> None:
    details = client.get_server_details()
    print(f"The whitelist is currently {onoff(details.whitelist)}")


def _whitelist_batch(args: list[str]) -> Optional[list[str]]:
    if not args:
        print("No PlayerIDs provided.")
        return None
    return args


def whitelist_add(client, args: list[str]) -> None:
    names = _whitelist_batch(args)
    if names is None:
        return
    ids = resolve_or_literal(client, names)
    client.add_whitelist_ids(*ids)
    print(f"Added {len(ids)} IDs to the whitelist: {', '.join(ids)}")


def whitelist_remove(client, args: list[str]) -> None:
    names = _whitelist_batch(args)
    if names is None:
        return
    ids = resolve_or_literal(client, names)
    client.remove_whitelist_ids(*ids)
    print(f"Removed {len(ids)} IDs from the whitelist: {', '.join(ids)}")


WHITELIST = {
    "toggle": whitelist_toggle,
    "status": whitelist_status,
    "add": whitelist_add,
    "remove": whitelist_remove,
}


def do_whitelist(client, args: list[str]) -> None:
    _run(WHITELIST, "whitelist", client, args)


# --- ai ----------------------------------------------------------------------

def ai_list(client, args: list[str]) -> None:
    _print_list("List of all AI classes:", AI_CLASSES)


def ai_toggle(client, args: list[str]) -> None:
    print(f"AI spawns are now {onoff(client.toggle_ai())}")


def ai_disable(client, args: list[str]) -> None:
    if not args:
        print("No classes provided.")
        print('Type "ai list" to get a list of all available classes or '
              '"ai disable all|none" to disable all or no classes at all.')
        return
    try:
        classes = expand(parse_selector(args, allow_none=True), AI_CLASSES)
    except InvalidClass as e:
        print(f'"{e.name}" is not an AI class. Type "ai list" to get a list of all AI classes.')
        return
    client.disable_ai_classes(classes)
    print("Updated AI classes.")


def ai_density(client, args: list[str]) -> None:
    if not args:
        print("No density provided.")
        return
    try:
        density = float(args[0])
    except ValueError:
        print("The density must be a number.")
        return
    client.set_ai_density(density)
    print("Updated AI density.")


AI = {
    "list": ai_list,
    "toggle": ai_toggle,
    "disable": ai_disable,
    "density": ai_density,
}


def do_ai(client, args: list[str]) -> None:
    _run(AI, "ai", client, args)
