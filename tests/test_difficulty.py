import pytest

from game.dodge.difficulty import DifficultyScaler
from game.dodge.entities import Obstacle


def test_milestone_scales_once():
    scaler = DifficultyScaler()
    o = Obstacle(x=0, y=0, vx=0, vy=200)

    assert scaler.apply(10, o)
    assert o.vy == pytest.approx(220)
    assert scaler.checkpoint == 10

    # same score on a later frame
    assert not scaler.apply(10, o)
    assert o.vy == pytest.approx(220)


def test_non_milestone_scores_do_nothing():
    scaler = DifficultyScaler()
    o = Obstacle(x=0, y=0, vx=100, vy=200)
    for score in (0, 1, 5, 9, 11, 19):
        assert not scaler.apply(score, o)
    assert (o.vx, o.vy) == (100, 200)


def test_sign_preserved_and_zero_axis_untouched():
    scaler = DifficultyScaler()
    o = Obstacle(x=0, y=0, vx=0, vy=-200)
    scaler.apply(10, o)
    assert o.vx == 0
    assert o.vy == pytest.approx(-220)


def test_caps_are_never_exceeded():
    scaler = DifficultyScaler(max_vx=300, max_vy=400)
    o = Obstacle(x=0, y=0, vx=-250, vy=390)

    scaler.apply(10, o)
    assert o.vx == pytest.approx(-275)
    assert o.vy == 400

    for score in range(20, 200, 10):
        scaler.apply(score, o)
        assert abs(o.vx) <= 300
        assert abs(o.vy) <= 400
    assert o.vx == -300


def test_reset_rearms_checkpoint():
    scaler = DifficultyScaler()
    o = Obstacle(x=0, y=0, vx=0, vy=200)
    scaler.apply(10, o)
    scaler.reset()
    assert scaler.checkpoint == 0
    assert scaler.apply(10, o)
