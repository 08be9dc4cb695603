"""Command serialisation for the game's output protocol."""

from __future__ import annotations

from podracer.control.commands import Command


def format_command(command: Command, message: str | None = None) -> str:
    """Return ``"<x> <y> <thrust|BOOST>"``, with an optional trailing message.

    No newline is appended.
    """
    line = f"{command.target.x} {command.target.y} {command.thrust_token}"
    if message:
        line = f"{line} {message}"
    return line
