import pytest

from pong import constants as C
from pong.mapper import (
    Placement,
    Zone,
    denormalize,
    fractional,
    place_ball,
    place_paddle,
    zone_bucket,
)


@pytest.mark.parametrize(
    "frac,zone",
    [
        (0.0, Zone.LOW),
        (0.2, Zone.LOW),
        (0.33, Zone.LOW),
        (0.34, Zone.MID),
        (0.5, Zone.MID),
        (0.65, Zone.MID),
        (0.66, Zone.HIGH),
        (0.9, Zone.HIGH),
        (0.999, Zone.HIGH),
    ],
)
def test_zone_bucket(frac, zone):
    assert zone_bucket(frac) is zone


def test_fractional_and_denormalize():
    assert denormalize(0.5, 64) == 32.0
    assert fractional(2.75) == 0.75
    assert fractional(3.0) == 0.0


def test_ball_on_cell_boundary():
    # 0.5 of 64 by 16 lands exactly on a cell corner
    top, bottom = place_ball((0.5, 0.5), 64, 16)
    assert top == Placement(32 - 2 - 2, 7, C.BALL_GLYPHS[0][0][0])
    assert bottom == Placement(32 - 2 - 2, 8, C.BALL_GLYPHS[0][0][1])


def test_ball_in_middle_zones():
    # 32.5 and 8.5 cells
    top, bottom = place_ball((32.5 / 64, 8.5 / 16), 64, 16)
    assert top == Placement(32 - 1 - 2, 8, "██")
    assert bottom == Placement(32 - 1 - 2, 9, "")


def test_ball_in_high_zones():
    # 32.75 and 8.75 cells
    top, bottom = place_ball((32.75 / 64, 8.75 / 16), 64, 16)
    assert top == Placement(32 + 0 - 2, 8, "▄▖")
    assert bottom == Placement(32 + 0 - 2, 9, "▀▘")


def test_ball_rows_stay_off_the_border():
    top, bottom = place_ball((0.0, 0.0), 64, 16)
    assert (top.row, bottom.row) == (1, 1)
    assert top.col == 1
    top, bottom = place_ball((0.0, 1.0), 64, 16)
    assert (top.row, bottom.row) == (14, 14)


def test_ball_sweep_stays_inside_region():
    width, height = 40, 12
    steps = 57
    for i in range(steps + 1):
        for j in range(steps + 1):
            for p in place_ball((i / steps, j / steps), width, height):
                assert 1 <= p.row <= height - 2
                assert p.col >= 1
                assert p.col + len(p.text) <= width - 1


def test_paddles_centered_on_y():
    left = place_paddle(0.5, "left", 64, 16)
    assert left == [
        Placement(1, 7, "┓"),
        Placement(1, 8, "┃"),
        Placement(1, 9, "┛"),
    ]
    right = place_paddle(0.5, "right", 64, 16)
    assert [p.col for p in right] == [62, 62, 62]
    assert [p.text for p in right] == list(C.RIGHT_PADDLE_GLYPHS)


def test_paddle_rows_are_clamped():
    assert [p.row for p in place_paddle(0.0, "left", 64, 16)] == [1, 1, 1]
    assert [p.row for p in place_paddle(1.0, "left", 64, 16)] == [14, 14, 14]
