"""Tests for Command and format_command."""

from __future__ import annotations

from podracer.control.commands import Boost, Command, Thrust
from podracer.geometry.vector import Position
from podracer.protocol.formatter import format_command


def test_thrust_command_line():
    cmd = Command(Position(1000, 0), Thrust(100))
    assert cmd.is_boost is False
    assert format_command(cmd) == "1000 0 100"


def test_boost_command_line():
    cmd = Command(Position(-5, 6), Boost())
    assert cmd.is_boost is True
    assert format_command(cmd) == "-5 6 BOOST"


def test_message_is_appended():
    cmd = Command(Position(1, 2), Thrust(15))
    assert format_command(cmd, "pod 0") == "1 2 15 pod 0"


def test_empty_message_is_ignored():
    cmd = Command(Position(1, 2), Thrust(15))
    assert format_command(cmd, "") == "1 2 15"
