import pytest

from game.dodge.config import ConfigError, DodgeConfig


def test_defaults_are_valid():
    cfg = DodgeConfig().validate()
    assert (cfg.width, cfg.height) == (800, 450)
    assert cfg.center == (400, 225)
    assert cfg.growth_factor == 1.1
    assert cfg.milestone_interval == 10
    assert cfg.score_interval == 1.0


@pytest.mark.parametrize("overrides", [
    {"width": 0},
    {"height": -5},
    {"player_radius": 0},
    {"player_radius": 300},
    {"player_speed": -1},
    {"obstacle_size": 0},
    {"obstacle_x": 790},
    {"obstacle_y": -1},
    {"obstacle_vy": 500},
    {"obstacle_max_vx": -1, "obstacle_vx": 0},
    {"growth_factor": 0.9},
    {"milestone_interval": 0},
    {"score_interval": 0},
])
def test_invalid_values_rejected(overrides):
    with pytest.raises(ConfigError):
        DodgeConfig(**overrides).validate()


def test_config_error_is_value_error():
    assert issubclass(ConfigError, ValueError)

