"""
Training configuration for the dodge environment
"""

# Environment parameters (DodgeEnv keyword arguments)
ENV_CONFIG = {
    # "render_mode": None,  # Don't render during training - it's too slow with parallel envs
    "dt": 1/30,
    "max_steps": 1800,  # 60 seconds at 30 FPS
    "width": 800,
    "height": 450,
    "player_speed": 300.0,
    "obstacle_vx": 150.0,
    "obstacle_vy": 200.0,
}

# ==============================================================================
# ALGORITHM HYPERPARAMETERS
# ==============================================================================

# PPO hyperparameters
PPO_CONFIG = {
    "policy": "MlpPolicy",
    "learning_rate": 3e-4,
    "n_steps": 1024,
    "batch_size": 256,
    "n_epochs": 10,
    "gamma": 0.99,
    "gae_lambda": 0.95,
    "clip_range": 0.2,
    "ent_coef": 0.01,
    "vf_coef": 0.5,
    "max_grad_norm": 0.5,
    "verbose": 1,
}

# DQN hyperparameters
DQN_CONFIG = {
    "policy": "MlpPolicy",
    "learning_rate": 1e-4,
    "buffer_size": 100_000,
    "learning_starts": 1000,
    "batch_size": 128,
    "tau": 1.0,
    "gamma": 0.99,
    "train_freq": 4,
    "gradient_steps": 1,
    "target_update_interval": 1000,
    "exploration_fraction": 0.1,
    "exploration_initial_eps": 1.0,
    "exploration_final_eps": 0.05,
    "verbose": 1,
}

# SAC hyperparameters (for continuous action approximation)
SAC_CONFIG = {
    "policy": "MlpPolicy",
    "learning_rate": 3e-4,
    "buffer_size": 100_000,
    "learning_starts": 1000,
    "batch_size": 256,
    "tau": 0.005,
    "gamma": 0.99,
    "train_freq": 1,
    "gradient_steps": 1,
    "ent_coef": "auto",
    "verbose": 1,
}

# ==============================================================================
# TRAINING SETTINGS
# ==============================================================================

TRAINING_CONFIG = {
    "total_timesteps": 300_000,
    "save_freq": 10_000,
    "eval_freq": 5_000,
    "log_dir": "./logs",
    "model_dir": "./models",
    "tensorboard_log": "./tensorboard_logs",
}
