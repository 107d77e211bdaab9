"""
Evaluation script for trained RL agents
"""

import argparse
import time
from typing import Optional

import numpy as np

from stable_baselines3 import PPO, DQN, SAC
from stable_baselines3.common.vec_env import DummyVecEnv, VecNormalize

from game.dodge import DodgeEnv
from rl.configs.dodge_config import ENV_CONFIG
from rl.wrappers import MultiDiscreteToBoxWrapper, MultiDiscreteToDiscreteWrapper

ALGOS = {"ppo": PPO, "dqn": DQN, "sac": SAC}


def evaluate_model(
    model_path: str,
    algo: str = "ppo",
    n_episodes: int = 10,
    render: bool = True,
    seed: Optional[int] = None,
    vec_normalize_path: Optional[str] = None,
):
    """
    Evaluate a trained model

    Args:
        model_path: Path to the saved model
        algo: Algorithm used ('ppo', 'dqn', or 'sac')
        n_episodes: Number of episodes to evaluate
        render: Whether to render the environment
        seed: Random seed for evaluation
        vec_normalize_path: Path to VecNormalize stats (for PPO)
    """
    if algo not in ALGOS:
        raise ValueError(f"Unknown algorithm: {algo}")
    model = ALGOS[algo].load(model_path)

    render_mode = "human" if render else None
    base_env = DodgeEnv(render_mode=render_mode, **ENV_CONFIG)

    env = base_env
    if algo == "sac":
        env = MultiDiscreteToBoxWrapper(env)
    elif algo == "dqn":
        env = MultiDiscreteToDiscreteWrapper(env)

    env = DummyVecEnv([lambda: env])
    if seed is not None:
        env.seed(seed)

    if vec_normalize_path:
        env = VecNormalize.load(vec_normalize_path, env)
        env.training = False
        env.norm_reward = False

    episode_rewards = []
    episode_lengths = []
    episode_scores = []

    for episode in range(n_episodes):
        obs = env.reset()

        total_reward = 0.0
        steps = 0

        while True:
            action, _ = model.predict(obs, deterministic=True)
            obs, reward, done, info = env.step(action)
            total_reward += reward[0]
            steps += 1

            if render:
                time.sleep(base_env.dt)

            if done[0]:
                break

        episode_rewards.append(total_reward)
        episode_lengths.append(steps)
        episode_scores.append(info[0].get("score", 0))

        print(f"Episode {episode + 1}/{n_episodes}: "
              f"Reward = {total_reward:.2f}, Length = {steps}, Score = {episode_scores[-1]}")

    env.close()

    mean_reward = np.mean(episode_rewards)
    std_reward = np.std(episode_rewards)
    mean_length = np.mean(episode_lengths)
    mean_score = np.mean(episode_scores)

    print("\n" + "="*50)
    print(f"Evaluation Results ({n_episodes} episodes):")
    print(f"Mean Reward: {mean_reward:.2f} ± {std_reward:.2f}")
    print(f"Mean Episode Length: {mean_length:.1f}")
    print(f"Mean Score: {mean_score:.1f}")
    print(f"Best Score: {max(episode_scores)}")
    print("="*50)

    return {
        "mean_reward": mean_reward,
        "std_reward": std_reward,
        "mean_length": mean_length,
        "mean_score": mean_score,
        "episode_rewards": episode_rewards,
        "episode_lengths": episode_lengths,
        "episode_scores": episode_scores,
    }


def compare_with_random(n_episodes: int = 10, seed: Optional[int] = None):
    """
    Evaluate a random policy baseline
    """
    print("Evaluating random policy baseline...")

    env = DodgeEnv(render_mode=None, **ENV_CONFIG)
    env.action_space.seed(seed)

    episode_rewards = []
    episode_lengths = []
    episode_scores = []

    for episode in range(n_episodes):
        obs, info = env.reset(seed=seed + episode if seed is not None else None)

        terminated = False
        truncated = False
        total_reward = 0.0
        steps = 0

        while not (terminated or truncated):
            action = env.action_space.sample()
            obs, reward, terminated, truncated, info = env.step(action)
            total_reward += reward
            steps += 1

        episode_rewards.append(total_reward)
        episode_lengths.append(steps)
        episode_scores.append(info["score"])

    env.close()

    mean_reward = np.mean(episode_rewards)
    std_reward = np.std(episode_rewards)
    mean_length = np.mean(episode_lengths)
    mean_score = np.mean(episode_scores)

    print(f"\nRandom Policy Results ({n_episodes} episodes):")
    print(f"Mean Reward: {mean_reward:.2f} ± {std_reward:.2f}")
    print(f"Mean Episode Length: {mean_length:.1f}")
    print(f"Mean Score: {mean_score:.1f}")

    return {
        "mean_reward": mean_reward,
        "std_reward": std_reward,
        "mean_length": mean_length,
        "mean_score": mean_score,
    }


def main():
    parser = argparse.ArgumentParser(description="Evaluate trained RL agent")
    parser.add_argument(
        "model_path",
        type=str,
        help="Path to the trained model",
    )
    parser.add_argument(
        "--algo",
        type=str,
        default="ppo",
        choices=sorted(ALGOS),
        help="Algorithm used to train the model (default: ppo)",
    )
    parser.add_argument(
        "--n-episodes",
        type=int,
        default=10,
        help="Number of evaluation episodes (default: 10)",
    )
    parser.add_argument(
        "--no-render",
        action="store_true",
        help="Disable rendering",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed (default: 42)",
    )
    parser.add_argument(
        "--vec-normalize",
        type=str,
        default=None,
        help="Path to VecNormalize stats file (for PPO)",
    )
    parser.add_argument(
        "--compare-random",
        action="store_true",
        help="Also evaluate random policy for comparison",
    )

    args = parser.parse_args()

    results = evaluate_model(
        model_path=args.model_path,
        algo=args.algo,
        n_episodes=args.n_episodes,
        render=not args.no_render,
        seed=args.seed,
        vec_normalize_path=args.vec_normalize,
    )

    if args.compare_random:
        print("\n")
        random_results = compare_with_random(
            n_episodes=args.n_episodes,
            seed=args.seed,
        )

        improvement = results["mean_score"] - random_results["mean_score"]
        print(f"\nScore improvement over random: {improvement:.1f}")


if __name__ == "__main__":
    main()
