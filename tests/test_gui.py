import pytest

pygame = pytest.importorskip("pygame")

from gui.app import parse_args, translate_event
from pong.controls import KeyEvent, KeyKind


def test_keydown_is_a_press():
    event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_w)
    assert translate_event(event) == KeyEvent("w", KeyKind.PRESS)


def test_keyup_is_a_release():
    event = pygame.event.Event(pygame.KEYUP, key=pygame.K_s)
    assert translate_event(event) == KeyEvent("s", KeyKind.RELEASE)


def test_arrows_and_escape():
    assert translate_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP)) == KeyEvent("up")
    assert translate_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_DOWN)) == KeyEvent("down")
    assert translate_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)) == KeyEvent("q")


def test_window_close_quits():
    assert translate_event(pygame.event.Event(pygame.QUIT)) == KeyEvent("q")


def test_other_events_are_ignored():
    assert translate_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0))) is None
    assert translate_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_F1)) is None


def test_parse_args_defaults():
    args = parse_args([])
    assert (args.cols, args.rows) == (120, 32)
    assert args.timeout_ms == 82
    assert not args.single_player
