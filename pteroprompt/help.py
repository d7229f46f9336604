# pteroprompt/help.py
from __future__ import annotations

OVERVIEW = """\
Available commands:
    help           Show a list of all commands or details for a specific command
    status         Show some information about the server
    announce       Send a message to all connected players
    players        Show a list of all connected players
    dm             Send a direct message to a specific player
    info           Show detailed information about a specific player
    classes        Manages the list of allowed classes
    whitelist      Manages the whitelist
    kick           Kicks a player from the server
    wipe_corpses   Removes all corpses from the map
    toggle_gc      Toggles the global chat
    toggle_humans  Toggles the humans feature
    ai             Manages AI spawning
    send           Send custom commands
    quit           Exit the program

You can type "help COMMAND" to get more information about a specific command.
For example, if you want to know more about the announce command, type "help announce"."""

TOPICS = {
    "help": """\
The help command shows a list of all commands or, if passed as an argument, a more detailed explanation of a command.

Usage: help [COMMAND]

Arguments:
    COMMAND  The name of a command

Example: Show detailed help for the dm command
    help dm""",
    "status": """\
The status command shows some information about the server, like the number of currently connected players.

Usage: status""",
    "announce": """\
The announce command sends an announcement message to all players on the server. The message will pop up as a big text box at the top of the screen.

Usage: announce MESSAGE

Arguments:
    MESSAGE  The text you want to send to all players

Example: Announce a server restart
    announce The server will restart in 10 minutes!""",
    "players": """\
The players command shows a list of all currently connected users.

Usage: players""",
    "dm": """\
The dm command sends a direct message to a single player.

Usage: dm PLAYER_NAME MESSAGE

Arguments:
    PLAYER_NAME  The name of the recipient
    MESSAGE      The message you want to send

Example: Greet a player
    dm PlayerNameHere Hello!""",
    "info": """\
The info command shows all available information about a specific player, like class, health and position.

Usage: info PLAYER_NAME

Arguments:
    PLAYER_NAME  The name of a player

Example: Get information on the player "PlayerNameHere"
    info PlayerNameHere""",
    "classes": """\
The classes command can do several things regarding the list of allowed classes on the server.

Usage: classes SUBCOMMAND [ARGUMENT...]

Subcommands:
    list   Shows a list of all available classes
    allow  Defines which classes are allowed. You have to provide a space-separated list,
           or "all" to allow every class.

Example: Allow only hypsilophodons
    classes allow Hypsilophodon""",
    "whitelist": """\
The whitelist command lets you manage the whitelist on the server.

Usage: whitelist SUBCOMMAND [ARGUMENT...]

Subcommands:
    status  Shows whether the whitelist is currently turned on or off
    toggle  Turns the whitelist on or off
    add     Adds one or more players to the whitelist
    remove  Removes one or more players from the whitelist

The add and remove commands will try to resolve player names to IDs for you. If the player that you want to add/remove is not currently playing on the server, you have to use the ID directly.
Any name that does not match a connected player is sent to the server exactly as typed, so check the list of IDs that is printed afterwards for typos.

Example: Add two players to the whitelist
    whitelist add FirstPlayer SecondPlayer""",
    "kick": """\
The kick command kicks a currently connected player from the server. You can provide a message that will be shown to the player in the menu.

Usage: kick PLAYER_NAME [REASON]

Arguments:
    PLAYER_NAME  Name of the player you want to kick
    REASON       A message that will be shown to the player in the menu

Example: Kick a player
    kick PlayerNameHere You have broken the law""",
    "send": """\
The send command enables you to send commands to the server that this tool doesn't support yet.

Usage: send CODE [ARGUMENT...]

Arguments:
    CODE      The 2-digit hexadecimal code of the message type you want to send
    ARGUMENT  (optional) The arguments that you want to send with your command

Examples: Send an announcement
    send 10 Testing""",
    "wipe_corpses": """\
The wipe_corpses command removes all corpses from the map to improve performance.

Usage: wipe_corpses""",
    "toggle_gc": """\
The toggle_gc command turns the global chat on or off.

Usage: toggle_gc""",
    "toggle_humans": """\
The toggle_humans command turns the humans feature of the game on or off.

Usage: toggle_humans""",
    "ai": """\
The ai command lets you manage AI spawns.

Usage: ai SUBCOMMAND [ARGUMENT...]

Subcommands:
    list     Shows a list of all AI classes
    toggle   Turns AI spawning on or off
    disable  Disables one or more AI classes. You have to provide a space separated list.
             You can also pass "all" or "none" to disable all or no AI classes respectively.
    density  Lets you control how much AI spawns. You have to pass a number.

Example: Disable boars
    ai disable Boar""",
    "quit": """\
The quit command exits this program.

Usage: quit""",
}


def help_text(topic: str | None = None) -> str:
    if topic is None:
        return OVERVIEW
    return TOPICS.get(topic.lower(), OVERVIEW)
