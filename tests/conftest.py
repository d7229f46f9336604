"""Shared fixtures: a recording stand-in for the RCON session and a scripted
line reader."""

from __future__ import annotations

from typing import Any, Dict, List

import pytest

from pteroprompt.rcon import Location, Player, PlayerData, ServerDetails


class RecordingClient:
    """Records every remote call; serves a configurable roster.

    Set ``fail_on`` to a method name and ``error`` to an exception instance to
    make that call raise.
    """

    def __init__(self, roster: List[Player] | None = None) -> None:
        self.calls: List[Dict[str, Any]] = []
        self.roster: List[Player] = list(roster or [])
        self.player_data: List[PlayerData] = []
        self.details = ServerDetails(
            name="Test Island",
            current_players=2,
            max_players=100,
            day_length_minutes=45,
            night_length_minutes=20,
            has_password=True,
            enable_global_chat=False,
            queue_enabled=True,
            whitelist=False,
        )
        self.toggle_state = True
        self.reply = "OK"
        self.fail_on: str | None = None
        self.error: BaseException | None = None
        self.closed = False

    def _record(self, method: str, *args: Any) -> None:
        self.calls.append({"method": method, "args": args})
        if self.fail_on == method and self.error is not None:
            raise self.error

    @property
    def methods(self) -> List[str]:
        return [c["method"] for c in self.calls]

    @property
    def mutations(self) -> List[Dict[str, Any]]:
        reads = {"get_player_list", "get_player_data", "get_server_details"}
        return [c for c in self.calls if c["method"] not in reads]

    def get_server_details(self) -> ServerDetails:
        self._record("get_server_details")
        return self.details

    def announce(self, message: str) -> None:
        self._record("announce", message)

    def get_player_list(self) -> List[Player]:
        self._record("get_player_list")
        return list(self.roster)

    def get_player_data(self) -> List[PlayerData]:
        self._record("get_player_data")
        return list(self.player_data)

    def send_direct_message(self, player_id: str, message: str) -> None:
        self._record("send_direct_message", player_id, message)

    def update_playables(self, classes) -> None:
        self._record("update_playables", tuple(classes))

    def toggle_whitelist(self) -> bool:
        self._record("toggle_whitelist")
        return self.toggle_state

    def add_whitelist_ids(self, *ids: str) -> None:
        self._record("add_whitelist_ids", *ids)

    def remove_whitelist_ids(self, *ids: str) -> None:
        self._record("remove_whitelist_ids", *ids)

    def kick_player(self, player_id: str, reason: str) -> None:
        self._record("kick_player", player_id, reason)

    def wipe_corpses(self) -> None:
        self._record("wipe_corpses")

    def toggle_global_chat(self) -> bool:
        self._record("toggle_global_chat")
        return self.toggle_state

    def toggle_humans(self) -> bool:
        self._record("toggle_humans")
        return self.toggle_state

    def toggle_ai(self) -> bool:
        self._record("toggle_ai")
        return self.toggle_state

    def disable_ai_classes(self, classes) -> None:
        self._record("disable_ai_classes", tuple(classes))

    def set_ai_density(self, density: float) -> None:
        self._record("set_ai_density", density)

    def exec_command(self, code: int, *args: str) -> str:
        self._record("exec_command", code, *args)
        return self.reply

    def close(self) -> None:
        self.closed = True


class ScriptedReader:
    """Feeds lines one by one, then signals end of input (or ``end``)."""

    def __init__(self, lines: List[str], end: BaseException | None = None) -> None:
        self.lines = list(lines)
        self.end = end or EOFError()
        self.closed = False

    def readline(self) -> str:
        if not self.lines:
            raise self.end
        return self.lines.pop(0)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def roster() -> List[Player]:
    return [Player(id="1", name="Alice"), Player(id="2", name="Bob")]


@pytest.fixture
def client(roster) -> RecordingClient:
    return RecordingClient(roster)


@pytest.fixture
def alice_data() -> PlayerData:
    return PlayerData(
        id="1",
        name="Alice",
        dino_class="BP_Tenontosaurus_C",
        growth=0.5,
        health=1.0,
        stamina=0.75,
        hunger=0.2,
        thirst=0.333,
        location=Location(x=1234.5, y=-20.25, z=7.0),
    )


@pytest.fixture
def reader_factory():
    return ScriptedReader
