"""
Training script for the dodge environment using Stable-Baselines3
Supports PPO, DQN, and SAC algorithms with score metrics tracking.
"""

import os
import argparse
from typing import Optional

from stable_baselines3 import PPO, DQN, SAC
from stable_baselines3.common.vec_env import DummyVecEnv, VecNormalize
from stable_baselines3.common.callbacks import CheckpointCallback, EvalCallback
from stable_baselines3.common.monitor import Monitor

from game.dodge import DodgeEnv
from rl.configs.dodge_config import ENV_CONFIG, PPO_CONFIG, DQN_CONFIG, SAC_CONFIG, TRAINING_CONFIG
from rl.metrics_callback import MetricsCallback, TensorboardMetricsCallback
from rl.wrappers import MultiDiscreteToBoxWrapper, MultiDiscreteToDiscreteWrapper


def make_env(render_mode: Optional[str] = None, seed: Optional[int] = None,
             wrap_for_sac: bool = False, wrap_for_dqn: bool = False):
    """Factory function to create the environment"""
    def _init():
        env = DodgeEnv(render_mode=render_mode, **ENV_CONFIG)
        if wrap_for_sac:
            env = MultiDiscreteToBoxWrapper(env)
        elif wrap_for_dqn:
            env = MultiDiscreteToDiscreteWrapper(env)
        env = Monitor(env)
        if seed is not None:
            env.reset(seed=seed)
        return env
    return _init


def _banner(lines):
    print(f"\n{'='*60}")
    for line in lines:
        print(line)
    print(f"{'='*60}\n")


def _learn(model, env, eval_env, algo: str, total_timesteps: int,
           save_dir: str, log_dir: str, save_freq: int, eval_freq: int):
    """Attach the standard callbacks, train, and save the final model"""
    checkpoint_callback = CheckpointCallback(
        save_freq=save_freq,
        save_path=save_dir,
        name_prefix=f"{algo}_dodge",
    )

    eval_callback = EvalCallback(
        eval_env,
        best_model_save_path=save_dir,
        log_path=log_dir,
        eval_freq=eval_freq,
        deterministic=True,
        render=False,
    )

    metrics_callback = MetricsCallback(
        log_dir=log_dir,
        algo_name=algo,
        verbose=1,
    )

    tb_callback = TensorboardMetricsCallback(verbose=0)

    model.learn(
        total_timesteps=total_timesteps,
        callback=[checkpoint_callback, eval_callback, metrics_callback, tb_callback],
    )

    final_path = os.path.join(save_dir, f"{algo}_dodge_final")
    model.save(final_path)
    if isinstance(env, VecNormalize):
        env.save(os.path.join(save_dir, "vec_normalize.pkl"))

    lines = [f"{algo.upper()} Training complete! Model saved to {final_path}"]
    summary = metrics_callback.get_summary()
    if summary:
        lines.append(f"Mean Reward: {summary['mean_reward']:.2f} ± {summary['std_reward']:.2f}")
        lines.append(f"Mean Score: {summary['mean_score']:.1f} (best {summary['best_score']})")
        lines.append(f"Total Episodes: {summary['total_episodes']}")
    _banner(lines)

    return model, metrics_callback


def train_ppo(
    total_timesteps: int = None,
    save_dir: str = "./models/ppo",
    log_dir: str = "./logs/ppo",
    tensorboard_log: str = "./tensorboard_logs/ppo",
    n_envs: int = 4,
):
    """Train PPO agent on the dodge environment"""

    if total_timesteps is None:
        total_timesteps = TRAINING_CONFIG["total_timesteps"]

    os.makedirs(save_dir, exist_ok=True)
    os.makedirs(log_dir, exist_ok=True)

    _banner([
        f"Training PPO for {total_timesteps:,} timesteps...",
        f"Using {n_envs} parallel environments",
    ])

    # Normalize observations and rewards
    env = DummyVecEnv([make_env(seed=i) for i in range(n_envs)])
    env = VecNormalize(env, norm_obs=True, norm_reward=True)

    eval_env = DummyVecEnv([make_env(seed=100)])
    eval_env = VecNormalize(eval_env, norm_obs=True, norm_reward=False, training=False)

    model = PPO(env=env, tensorboard_log=tensorboard_log, **PPO_CONFIG)

    return _learn(
        model, env, eval_env, "ppo", total_timesteps, save_dir, log_dir,
        save_freq=TRAINING_CONFIG["save_freq"] // n_envs,
        eval_freq=TRAINING_CONFIG.get("eval_freq", 5000) // n_envs,
    )


def train_dqn(
    total_timesteps: int = None,
    save_dir: str = "./models/dqn",
    log_dir: str = "./logs/dqn",
    tensorboard_log: str = "./tensorboard_logs/dqn",
):
    """Train DQN agent on the dodge environment"""

    if total_timesteps is None:
        total_timesteps = TRAINING_CONFIG["total_timesteps"]

    os.makedirs(save_dir, exist_ok=True)
    os.makedirs(log_dir, exist_ok=True)

    _banner([
        f"Training DQN for {total_timesteps:,} timesteps...",
        "Using MultiDiscrete->Discrete action wrapper (9 actions)",
    ])

    env = DummyVecEnv([make_env(seed=0, wrap_for_dqn=True)])
    eval_env = DummyVecEnv([make_env(seed=100, wrap_for_dqn=True)])

    model = DQN(env=env, tensorboard_log=tensorboard_log, **DQN_CONFIG)

    return _learn(
        model, env, eval_env, "dqn", total_timesteps, save_dir, log_dir,
        save_freq=TRAINING_CONFIG["save_freq"],
        eval_freq=TRAINING_CONFIG.get("eval_freq", 10000),
    )


def train_sac(
    total_timesteps: int = None,
    save_dir: str = "./models/sac",
    log_dir: str = "./logs/sac",
    tensorboard_log: str = "./tensorboard_logs/sac",
):
    """Train SAC agent on the dodge environment (with continuous action wrapper)"""

    if total_timesteps is None:
        total_timesteps = TRAINING_CONFIG["total_timesteps"]

    os.makedirs(save_dir, exist_ok=True)
    os.makedirs(log_dir, exist_ok=True)

    _banner([
        f"Training SAC for {total_timesteps:,} timesteps...",
        "Using MultiDiscrete->Box action wrapper for SAC compatibility",
    ])

    env = DummyVecEnv([make_env(seed=0, wrap_for_sac=True)])
    eval_env = DummyVecEnv([make_env(seed=100, wrap_for_sac=True)])

    model = SAC(env=env, tensorboard_log=tensorboard_log, **SAC_CONFIG)

    return _learn(
        model, env, eval_env, "sac", total_timesteps, save_dir, log_dir,
        save_freq=TRAINING_CONFIG["save_freq"],
        eval_freq=TRAINING_CONFIG.get("eval_freq", 5000),
    )


def main():
    parser = argparse.ArgumentParser(description="Train RL agent on the dodge environment")
    parser.add_argument(
        "--algo",
        type=str,
        default="ppo",
        choices=["ppo", "dqn", "sac", "all"],
        help="RL algorithm to use (default: ppo)",
    )
    parser.add_argument(
        "--timesteps",
        type=int,
        default=None,
        help=f"Total timesteps to train (default: {TRAINING_CONFIG['total_timesteps']})",
    )
    parser.add_argument(
        "--n-envs",
        type=int,
        default=4,
        help="Number of parallel environments for PPO (default: 4)",
    )

    args = parser.parse_args()

    if args.algo == "ppo":
        train_ppo(total_timesteps=args.timesteps, n_envs=args.n_envs)
    elif args.algo == "dqn":
        train_dqn(total_timesteps=args.timesteps)
    elif args.algo == "sac":
        train_sac(total_timesteps=args.timesteps)
    elif args.algo == "all":
        print("Training all algorithms sequentially...")
        train_dqn(total_timesteps=args.timesteps)
        train_ppo(total_timesteps=args.timesteps, n_envs=args.n_envs)
        train_sac(total_timesteps=args.timesteps)


if __name__ == "__main__":
    main()
