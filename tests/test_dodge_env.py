import numpy as np
import pytest
from gymnasium.utils.env_checker import check_env

from game.dodge import DodgeEnv, Mode

STAY = np.array([0, 0])


def test_passes_gymnasium_env_checker():
    check_env(DodgeEnv(), skip_render_check=True)


def test_reset_starts_a_round():
    env = DodgeEnv()
    obs, info = env.reset(seed=0)
    assert env.observation_space.contains(obs)
    assert env.game.mode is Mode.PLAYING
    assert info["score"] == 0
    assert info["rounds"] == 1


def test_crash_terminates_with_penalty():
    env = DodgeEnv(obstacle_x=375.0, obstacle_y=150.0)
    env.reset(seed=0)
    obs, reward, terminated, truncated, info = env.step(STAY)
    assert terminated and not truncated
    assert reward == -5.0
    assert info["crashed"]


def test_score_points_are_rewarded():
    env = DodgeEnv(dt=0.5, obstacle_x=0.0)
    env.reset(seed=0)
    _, r1, *_ = env.step(STAY)
    _, r2, *_, info = env.step(STAY)
    assert info["score"] == 1
    assert r2 > r1


def test_truncation_then_reset_carries_rounds_and_high_score():
    env = DodgeEnv(dt=1.0, max_steps=3, obstacle_x=0.0, player_speed=375.0)
    env.reset(seed=0)

    # Step left into the obstacle's column: crash with one point on the board
    _, _, terminated, _, info = env.step(np.array([0, 1]))
    assert terminated
    assert (info["score"], info["high_score"], info["rounds"]) == (1, 1, 1)

    _, info = env.reset()
    assert info["rounds"] == 2

    for _ in range(3):
        _, _, terminated, truncated, info = env.step(STAY)
        assert not terminated
    assert truncated
    assert info["score"] == 3

    # The cut-short round never reached game over, so it is not a high score
    _, info = env.reset()
    assert env.game.mode is Mode.PLAYING
    assert (info["score"], info["high_score"], info["rounds"]) == (0, 1, 3)


def test_reset_after_crash_restarts_same_game():
    env = DodgeEnv(obstacle_x=375.0, obstacle_y=150.0)
    env.reset(seed=0)
    game = env.game
    env.step(STAY)
    env.reset()
    assert env.game is game
    assert game.rounds_played == 2


def test_invalid_action_rejected():
    env = DodgeEnv()
    env.reset(seed=0)
    with pytest.raises(ValueError):
        env.step(np.array([3, 0]))


def test_seeded_reset_begins_a_new_run():
    env = DodgeEnv(obstacle_x=375.0, obstacle_y=150.0)
    env.reset(seed=0)
    env.step(STAY)
    env.reset()
    assert env.game.rounds_played == 2

    _, info = env.reset(seed=1)
    assert (info["rounds"], info["high_score"], info["score"]) == (1, 0, 0)
