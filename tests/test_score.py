import pytest

from stacker.score import ScoreTracker
from stacker.utils import format_score


def test_add_accumulates():
    score = ScoreTracker()
    assert score.add(3) == 3
    assert score.add(2) == 5
    assert score.add(0) == 5
    assert score.value == 5


def test_negative_amount_rejected():
    score = ScoreTracker(value=4)
    with pytest.raises(ValueError):
        score.add(-1)
    assert score.value == 4


def test_format_zero_pads():
    assert ScoreTracker(value=12).format() == "00012"
    assert ScoreTracker(value=1234).format(digits=3) == "1234"
    assert format_score(7) == "00007"

