import pytest

from game.dodge.score import ScoreTracker


def test_one_point_per_interval():
    s = ScoreTracker()
    assert s.accumulate(0.5) == 0
    assert s.accumulate(0.5) == 1
    assert s.score == 1
    assert s.timer == pytest.approx(0.0)


def test_remainder_is_kept():
    s = ScoreTracker()
    s.accumulate(0.75)
    s.accumulate(0.75)
    assert s.score == 1
    assert s.timer == pytest.approx(0.5)


def test_long_frame_earns_several_points():
    s = ScoreTracker()
    assert s.accumulate(2.5) == 2
    assert s.timer == pytest.approx(0.5)


def test_quarter_second_frames():
    s = ScoreTracker()
    for _ in range(40):
        s.accumulate(0.25)
    assert s.score == 10


def test_negative_dt_rejected():
    with pytest.raises(ValueError):
        ScoreTracker().accumulate(-0.1)


def test_high_score_only_goes_up():
    s = ScoreTracker()
    s.accumulate(5.0)
    assert s.reconcile_high_score()
    assert s.high_score == 5

    s.reset()
    assert (s.score, s.timer, s.high_score) == (0, 0.0, 5)

    s.accumulate(3.0)
    assert not s.reconcile_high_score()
    assert s.high_score == 5

    # reconciling twice is harmless
    assert not s.reconcile_high_score()
    assert s.high_score == 5
