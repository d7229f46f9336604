"""Tests for the command table, dispatch and the single-level commands."""

import pytest

from pteroprompt.commands import COMMANDS, DEFAULT_KICK_REASON, dispatch, parse_command_byte
from pteroprompt.errors import NoResponse
from pteroprompt.help import OVERVIEW, TOPICS
from pteroprompt.rcon import RconTimeout


def run(client, line):
    keyword, *args = line.split(" ")
    return dispatch(COMMANDS, client, keyword, args)


class TestDispatch:
    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            COMMANDS["evil"] = None

    def test_table_has_every_command(self):
        assert set(COMMANDS) == {
            "help", "status", "announce", "players", "dm", "info", "classes",
            "whitelist", "kick", "wipe_corpses", "toggle_gc", "toggle_humans",
            "ai", "send",
        }

    @pytest.mark.parametrize("keyword", ["frobnicate", "exit", "q", "whitelists"])
    def test_unknown_command_is_reported(self, client, capsys, keyword):
        assert dispatch(COMMANDS, client, keyword, []) is False
        out = capsys.readouterr().out
        assert out == f'Unknown command {keyword}. Type "help" for a list of commands.\n'
        assert client.calls == []

    def test_keyword_is_case_insensitive(self, client, capsys):
        assert dispatch(COMMANDS, client, "PLAYERS", []) is True
        assert client.methods == ["get_player_list"]

    def test_arguments_pass_through_unchanged(self, client):
        run(client, "ANNOUNCE Hello WORLD")
        assert client.calls == [{"method": "announce", "args": ("Hello WORLD",)}]


@pytest.mark.parametrize(
    "line, message",
    [
        ("announce", "Missing MESSAGE"),
        ("dm", "Missing PLAYER_NAME"),
        ("dm Alice", "Missing MESSAGE"),
        ("info", "Missing PLAYER_NAME"),
        ("kick", "Missing player name"),
        ("send", "Missing command byte"),
    ],
)
def test_missing_arguments_never_reach_the_server(client, capsys, line, message):
    run(client, line)
    assert capsys.readouterr().out == message + "\n"
    assert client.calls == []


class TestHelp:
    def test_overview(self, client, capsys):
        run(client, "help")
        assert capsys.readouterr().out == OVERVIEW + "\n"

    def test_topic(self, client, capsys):
        run(client, "help kick")
        assert capsys.readouterr().out == TOPICS["kick"] + "\n"

    def test_unknown_topic_falls_back_to_overview(self, client, capsys):
        run(client, "help nope")
        assert capsys.readouterr().out == OVERVIEW + "\n"

    def test_every_command_has_a_topic(self):
        assert set(COMMANDS) | {"quit"} == set(TOPICS)


def test_status(client, capsys):
    run(client, "status")
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Server information:"
    assert "    Name:                Test Island" in out
    assert "    Players:             2/100" in out
    assert "    Day/Night length:    45/20 minutes" in out
    assert "    Password protected?  yes" in out
    assert "    Global chat enabled? no" in out
    assert "    Whitelist enabled?   no" in out


def test_players(client, capsys):
    run(client, "players")
    assert capsys.readouterr().out == "Connected players:\n    Alice\n    Bob\n"


class TestDirectMessage:
    def test_sends_to_resolved_id(self, client):
        run(client, "dm Bob see you at the lake")
        assert client.mutations == [
            {"method": "send_direct_message", "args": ("2", "see you at the lake")}
        ]

    def test_unknown_player(self, client, capsys):
        run(client, "dm Carol hi")
        assert capsys.readouterr().out == 'Player "Carol" not found\n'
        assert client.mutations == []


class TestInfo:
    def test_prints_player_details(self, client, capsys, alice_data):
        client.player_data = [alice_data]
        run(client, "info aLiCe")
        assert capsys.readouterr().out == (
            "Player Alice\n"
            "    ID:       1\n"
            "    Class:    Tenontosaurus\n"
            "    Growth:   50%, Health: 100%, Stamina: 75%, Hunger: 20%, Thirst: 33%\n"
            "    Location: -20.250, 1,234.500, 7.000\n"
        )

    def test_unknown_player(self, client, capsys, alice_data):
        client.player_data = [alice_data]
        run(client, "info Carol")
        assert capsys.readouterr().out == 'Player "Carol" not found\n'


class TestKick:
    def test_default_reason(self, client, capsys):
        run(client, "kick Alice")
        assert client.mutations == [{"method": "kick_player", "args": ("1", DEFAULT_KICK_REASON)}]
        assert capsys.readouterr().out == f"Alice was kicked from the server. Reason: {DEFAULT_KICK_REASON}\n"

    def test_custom_reason(self, client):
        run(client, "kick Bob no griefing please")
        assert client.mutations == [{"method": "kick_player", "args": ("2", "no griefing please")}]

    def test_unknown_player(self, client, capsys):
        run(client, "kick Carol")
        assert capsys.readouterr().out == 'No such player "Carol"\n'
        assert client.mutations == []

    def test_timeout_propagates(self, client):
        client.fail_on = "kick_player"
        client.error = RconTimeout("request timed out")
        with pytest.raises(RconTimeout):
            run(client, "kick Alice")


@pytest.mark.parametrize(
    "line, method, state, message",
    [
        ("toggle_gc", "toggle_global_chat", True, "Global chat is now on"),
        ("toggle_gc", "toggle_global_chat", False, "Global chat is now off"),
        ("toggle_humans", "toggle_humans", True, "Humans are now on"),
        ("toggle_humans", "toggle_humans", False, "Humans are now off"),
    ],
)
def test_toggles(client, capsys, line, method, state, message):
    client.toggle_state = state
    run(client, line)
    assert client.methods == [method]
    assert capsys.readouterr().out == message + "\n"


def test_wipe_corpses(client, capsys):
    run(client, "wipe_corpses")
    assert client.methods == ["wipe_corpses"]
    assert capsys.readouterr().out == "Corpses wiped\n"


class TestSend:
    def test_sends_byte_and_arguments(self, client, capsys):
        client.reply = "Announced"
        run(client, "send 3a hello")
        assert client.calls == [{"method": "exec_command", "args": (0x3A, "hello")}]
        assert capsys.readouterr().out == "Announced\n"

    def test_without_arguments(self, client):
        run(client, "send 12")
        assert client.calls == [{"method": "exec_command", "args": (0x12,)}]

    @pytest.mark.parametrize("token", ["zz", "-1", "100", "0x10", "", "1.5"])
    def test_bad_byte_is_rejected_before_sending(self, client, capsys, token):
        run(client, f"send {token}")
        assert capsys.readouterr().out == "Command byte must be a hexadecimal number, e.g. 3a\n"
        assert client.calls == []

    def test_timeout_becomes_no_response(self, client):
        client.fail_on = "exec_command"
        client.error = RconTimeout("request timed out")
        with pytest.raises(NoResponse):
            run(client, "send 3a hello")


@pytest.mark.parametrize("token, value", [("3a", 0x3A), ("3A", 0x3A), ("ff", 0xFF), ("0", 0), ("007", 7)])
def test_parse_command_byte(token, value):
    assert parse_command_byte(token) == value
