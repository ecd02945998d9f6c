import curses

import pytest

from pong.cli import main, trace, translate_key
from pong.controls import Command, KeyEvent, KeyKind, command_for
from pong.engine import GameConfig


def test_translate_printable_keys():
    assert translate_key(ord("q")) == KeyEvent("q", KeyKind.PRESS)
    assert translate_key(ord("W")) == KeyEvent("w", KeyKind.PRESS)


def test_translate_named_keys():
    assert translate_key(curses.KEY_UP) == KeyEvent("up")
    assert translate_key(curses.KEY_DOWN) == KeyEvent("down")
    assert translate_key(curses.KEY_LEFT) == KeyEvent("left")
    assert translate_key(curses.KEY_RIGHT) == KeyEvent("right")


def test_translate_timeout_and_unknown():
    assert translate_key(-1) is None
    assert translate_key(curses.KEY_F1) is None


def test_trace_lines():
    lines = trace(GameConfig(), 2)
    assert lines == [
        "tick 1: ball=(0.0550, 0.0275) v=(+0.0550, +0.0275)",
        "tick 2: ball=(0.1100, 0.0550) v=(+0.0550, +0.0275)",
    ]


def test_trace_shows_reflection():
    lines = trace(GameConfig(ball_start=(0.95, 0.5)), 1)
    assert lines == ["tick 1: ball=(0.8950, 0.5275) v=(-0.0550, +0.0275)"]


def test_main_trace(capsys):
    assert main(["--trace", "3"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 3
    assert out[-1].startswith("tick 3: ball=(0.1650, 0.0825)")


def test_main_rejects_zero_velocity(capsys):
    assert main(["--vx", "0", "--vy", "0", "--trace", "1"]) == 2
    assert "Invalid input" in capsys.readouterr().err


def test_main_rejects_negative_trace(capsys):
    assert main(["--trace", "-1"]) == 2


def test_main_bad_flag_exits_with_usage():
    with pytest.raises(SystemExit) as exc:
        main(["--timeout-ms", "fast"])
    assert exc.value.code == 2


def test_escape_quits():
    assert translate_key(27) == KeyEvent("q", KeyKind.PRESS)
    assert command_for(translate_key(27)) is Command.QUIT
