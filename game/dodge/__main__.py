"""
Play the dodge game, or watch a random agent.

Use: python -m game.dodge [--random] [--fps 60]
"""

import argparse
import logging

from .config import DodgeConfig


def main():
    parser = argparse.ArgumentParser(description="Dodge the axe")
    parser.add_argument(
        "--random",
        action="store_true",
        help="Watch a random policy play one episode instead of playing",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=60,
        help="Frame rate for interactive play (default: 60)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log mode changes and difficulty increases",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.random:
        from .dodge_env import run_random_episode
        run_random_episode(render=True)
    else:
        from .window import play
        game = play(DodgeConfig(), fps=args.fps)
        print(f"High score this session: {game.high_score}")


if __name__ == "__main__":
    main()
