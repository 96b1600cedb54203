import numpy as np

from stacker.oscillator import BarOscillator, Direction, advance


def test_bar_bounces_exactly_at_each_edge():
    row = np.array([1, 1, 1, 0, 0, 0], dtype=np.uint8)
    osc = BarOscillator(row)
    frames = []
    for _ in range(6):
        direction = osc.advance()
        frames.append((row.tolist(), direction))

    assert frames == [
        ([0, 1, 1, 1, 0, 0], Direction.RIGHT),
        ([0, 0, 1, 1, 1, 0], Direction.RIGHT),
        ([0, 0, 0, 1, 1, 1], Direction.LEFT),
        ([0, 0, 1, 1, 1, 0], Direction.LEFT),
        ([0, 1, 1, 1, 0, 0], Direction.LEFT),
        ([1, 1, 1, 0, 0, 0], Direction.RIGHT),
    ]


def test_bar_never_loses_cells_while_sweeping():
    row = np.array([1, 1, 0, 0, 0, 0, 0], dtype=np.uint8)
    direction = Direction.RIGHT
    for _ in range(50):
        direction = advance(row, direction)
        assert len(row) == 7
        assert int(np.count_nonzero(row)) == 2


def test_full_width_bar_turns_in_place():
    row = np.array([1, 1, 1], dtype=np.uint8)
    assert advance(row, Direction.RIGHT) is Direction.LEFT
    assert row.tolist() == [1, 1, 1]
    assert advance(row, Direction.LEFT) is Direction.RIGHT
    assert row.tolist() == [1, 1, 1]


def test_advance_is_deterministic():
    a = np.array([0, 1, 1, 0, 0], dtype=np.uint8)
    b = a.copy()
    da = db = Direction.LEFT
    for _ in range(9):
        da = advance(a, da)
        db = advance(b, db)
        assert da is db
        assert a.tolist() == b.tolist()


def test_reversed_direction():
    assert Direction.RIGHT.reversed is Direction.LEFT
    assert Direction.LEFT.reversed is Direction.RIGHT
