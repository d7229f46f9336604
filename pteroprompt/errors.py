# pteroprompt/errors.py
"""Error kinds and the fatal/non-fatal decision for the console loop.

Only conditions the console knows how to report are non-fatal: a player
name that does not resolve, and a custom command the server never answers.
Every other failure means the RCON connection can no longer be trusted, and
the session has to end.
"""
from __future__ import annotations

import enum


class ErrorKind(enum.Enum):
    PLAYER_NOT_FOUND = "player not found"
    TIMED_OUT = "request timed out"
    FATAL = "fatal"


class ConsoleError(Exception):
    kind: ErrorKind = ErrorKind.FATAL


class PlayerNotFound(ConsoleError):
    kind = ErrorKind.PLAYER_NOT_FOUND

    def __init__(self, name: str):
        super().__init__(f'Player "{name}" not found')
        self.name = name


class NoResponse(ConsoleError):
    kind = ErrorKind.TIMED_OUT

    def __init__(self, message: str = "The server did not respond with anything."):
        super().__init__(message)


def classify(exc: BaseException) -> ErrorKind:
    if isinstance(exc, ConsoleError):
        return exc.kind
    return ErrorKind.FATAL


def is_fatal(exc: BaseException) -> bool:
    return classify(exc) is ErrorKind.FATAL
