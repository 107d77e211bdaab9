import random

import pytest

from game.dodge import (
    ConfigError, DodgeConfig, DodgeGame, FrameInput, InvalidTransitionError, Mode,
)

# Obstacle bounces up and down the left edge, far away from the centered player
SAFE = DodgeConfig(obstacle_x=0.0, obstacle_y=0.0, obstacle_vx=0.0, obstacle_vy=200.0)
# Obstacle starts touching the top of the centered player
DOOMED = DodgeConfig(obstacle_x=375.0, obstacle_y=150.0)


def crash(game):
    """Drop the player onto the obstacle and run one frame"""
    game.player.x = game.obstacle.x + game.obstacle.size / 2
    game.player.y = game.obstacle.y + game.obstacle.size / 2
    return game.tick(FrameInput(dt=0.0))


def test_starts_in_menu_with_centered_player():
    game = DodgeGame()
    snap = game.snapshot()
    assert snap.mode is Mode.MENU
    assert (snap.player_x, snap.player_y) == (400, 225)
    assert (snap.score, snap.high_score, snap.rounds_played) == (0, 0, 0)


def test_menu_runs_no_motion_or_collision():
    game = DodgeGame(DOOMED)
    before = game.snapshot()
    for _ in range(30):
        snap = game.tick(FrameInput(dt=1 / 60, right=True, down=True))
    assert snap == before
    assert game.mode is Mode.MENU


def test_restart_does_nothing_in_menu():
    game = DodgeGame()
    game.tick(FrameInput(dt=1 / 60, restart=True))
    assert game.mode is Mode.MENU


def test_start_enters_playing():
    game = DodgeGame()
    snap = game.start()
    assert snap.mode is Mode.PLAYING
    assert snap.score == 0
    assert snap.rounds_played == 1


def test_scenario_obstacle_bounces_off_floor():
    game = DodgeGame(DodgeConfig(
        width=800, height=450, player_radius=25,
        obstacle_x=300, obstacle_y=0, obstacle_size=50, obstacle_vx=0, obstacle_vy=200,
    ))
    game.start()

    frame = FrameInput(dt=1 / 60)
    for n in range(1, 200):
        snap = game.tick(frame)
        assert snap.mode is Mode.PLAYING
        if snap.obstacle_vy < 0:
            break
        assert snap.obstacle_y < 400
    assert n in (120, 121)
    assert snap.obstacle_y >= 400
    assert snap.obstacle_vy == -200


def test_scenario_collision_freezes_next_frame():
    game = DodgeGame(DOOMED)
    game.start()

    snap = game.tick(FrameInput(dt=1 / 60))
    assert snap.mode is Mode.GAME_OVER

    after = game.tick(FrameInput(dt=1 / 60, left=True, up=True))
    assert after.mode is Mode.GAME_OVER
    assert (after.player_x, after.player_y) == (snap.player_x, snap.player_y)
    assert (after.obstacle_x, after.obstacle_y) == (snap.obstacle_x, snap.obstacle_y)
    assert after.score == snap.score


def test_scenario_difficulty_fires_once_at_ten():
    game = DodgeGame(SAFE)
    game.start()
    for _ in range(10):
        game.tick(FrameInput(dt=1.0))
    assert game.score == 10
    assert game.difficulty.checkpoint == 10
    assert abs(game.obstacle.vy) == pytest.approx(220)

    game.tick(FrameInput(dt=0.0))
    game.tick(FrameInput(dt=0.5))
    assert game.score == 10
    assert abs(game.obstacle.vy) == pytest.approx(220)


def test_high_score_tracks_best_completed_round():
    game = DodgeGame(SAFE)
    game.start()
    for _ in range(3):
        game.tick(FrameInput(dt=1.0))
    assert game.high_score == 0  # only written on game over

    snap = crash(game)
    assert snap.mode is Mode.GAME_OVER
    assert snap.high_score == 3

    snap = game.restart()
    assert snap.mode is Mode.PLAYING
    assert (snap.score, snap.high_score, snap.rounds_played) == (0, 3, 2)

    game.tick(FrameInput(dt=1.0))
    snap = crash(game)
    assert (snap.score, snap.high_score) == (1, 3)


def test_game_over_ignores_start_and_restart_skips_menu():
    game = DodgeGame(DOOMED)
    game.start()
    game.tick(FrameInput(dt=1 / 60))
    assert game.mode is Mode.GAME_OVER

    game.tick(FrameInput(dt=1 / 60, start=True))
    assert game.mode is Mode.GAME_OVER

    game.tick(FrameInput(dt=1 / 60, restart=True))
    assert game.mode is Mode.PLAYING


def test_restart_resets_entities_and_speed():
    game = DodgeGame(SAFE)
    game.start()
    for _ in range(10):
        game.tick(FrameInput(dt=1.0, right=True))
    crash(game)
    game.restart()

    cfg = game.config
    assert (game.player.x, game.player.y) == cfg.center
    assert (game.obstacle.x, game.obstacle.y) == (cfg.obstacle_x, cfg.obstacle_y)
    assert (game.obstacle.vx, game.obstacle.vy) == (cfg.obstacle_vx, cfg.obstacle_vy)
    assert game.scorer.timer == 0.0
    assert game.difficulty.checkpoint == 0


def test_player_bounded_and_score_monotonic_while_playing():
    rng = random.Random(3)
    game = DodgeGame(SAFE)
    game.start()
    r = game.player.radius
    last_score = 0
    for _ in range(3000):
        snap = game.tick(FrameInput(
            dt=rng.uniform(0, 1 / 30),
            up=rng.random() < 0.5, down=rng.random() < 0.5,
            left=rng.random() < 0.5, right=rng.random() < 0.5,
        ))
        if snap.mode is not Mode.PLAYING:
            break
        assert r <= snap.player_x <= 800 - r
        assert r <= snap.player_y <= 450 - r
        assert snap.score >= last_score
        last_score = snap.score


def test_negative_dt_rejected():
    game = DodgeGame()
    with pytest.raises(ValueError):
        game.tick(FrameInput(dt=-0.01))


def test_illegal_transition_raises():
    game = DodgeGame()
    with pytest.raises(InvalidTransitionError):
        game._transition(Mode.GAME_OVER)


def test_bad_config_is_fatal():
    with pytest.raises(ConfigError):
        DodgeGame(DodgeConfig(player_radius=-1))


def test_abandon_round_starts_over_without_touching_high_score():
    game = DodgeGame(SAFE)
    game.start()
    game.tick(FrameInput(dt=1.0))
    crash(game)
    game.restart()
    for _ in range(4):
        game.tick(FrameInput(dt=1.0))

    snap = game.abandon_round()
    assert snap.mode is Mode.PLAYING
    assert (snap.score, snap.high_score, snap.rounds_played) == (0, 1, 3)
    assert (snap.obstacle_x, snap.obstacle_y) == (0.0, 0.0)


def test_abandon_round_only_while_playing():
    game = DodgeGame(DOOMED)
    with pytest.raises(InvalidTransitionError):
        game.abandon_round()
    game.start()
    game.tick(FrameInput(dt=1 / 60))
    with pytest.raises(InvalidTransitionError):
        game.abandon_round()
