# pteroprompt/console.py
from __future__ import annotations

import logging
import sys
from typing import Mapping, Optional, TextIO

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

from .commands import COMMANDS, Command, dispatch
from .errors import ErrorKind, classify

logger = logging.getLogger(__name__)

PROMPT = "> "


class PromptReader:
    """Line input with editing and history, for interactive terminals."""

    def __init__(self, message: str = PROMPT):
        self._session: Optional[PromptSession] = PromptSession(message, history=InMemoryHistory())

    def readline(self) -> str:
        if self._session is None:
            raise EOFError
        # raises EOFError on Ctrl-D, KeyboardInterrupt on Ctrl-C
        return self._session.prompt()

    def close(self) -> None:
        self._session = None


class StreamReader:
    """Plain line input, used when commands are piped in."""

    def __init__(self, stream: TextIO):
        self._stream = stream

    def readline(self) -> str:
        line = self._stream.readline()
        if not line:
            raise EOFError
        return line

    def close(self) -> None:
        self._stream.close()


def open_reader(stream: TextIO = None):
    stream = stream or sys.stdin
    if stream.isatty():
        return PromptReader()
    return StreamReader(stream)


def tokenize(line: str) -> list[str]:
    line = line.strip()
    if not line:
        return []
    return line.split(" ")


def run_console(client, reader, commands: Mapping[str, Command] = COMMANDS) -> int:
    """Read, dispatch and print until quit, end of input or a fatal error.

    Returns the process exit status. The client and the reader are closed
    on every path out of the loop.
    """
    try:
        while True:
            try:
                line = reader.readline()
            except EOFError:
                return 0
            except KeyboardInterrupt:
                print("Interrupt", file=sys.stderr)
                return 1
            except OSError as e:
                print(e, file=sys.stderr)
                return 1

            parts = tokenize(line)
            if not parts:
                continue
            keyword, args = parts[0].lower(), parts[1:]
            if keyword == "quit":
                return 0

            try:
                dispatch(commands, client, keyword, args)
            except KeyboardInterrupt:
                print("Interrupt", file=sys.stderr)
                return 1
            except Exception as e:
                kind = classify(e)
                logger.debug("%s failed: %r (%s)", keyword, e, kind.name)
                if kind is ErrorKind.FATAL:
                    print(f"{keyword} command failed: {e}", file=sys.stderr)
                    return 1
                print(e)
    finally:
        try:
            reader.close()
        finally:
            client.close()
