"""
Evaluation script for trained grid shooter agents
"""

import argparse
import time
from typing import Callable, Dict, Optional

import numpy as np

from stable_baselines3 import PPO, DQN

from game.gridshooter import GridShooterEnv
from rl.configs.shooter_config import ENV_CONFIG

ALGORITHMS = {
    "ppo": PPO,
    "dqn": DQN,
}


def run_episodes(
    policy: Callable[[np.ndarray, GridShooterEnv], int],
    n_episodes: int = 10,
    seed: Optional[int] = None,
    render: bool = False,
) -> Dict[str, object]:
    """Roll out ``policy(obs, env) -> action`` and collect episode statistics"""
    env = GridShooterEnv(render_mode="human" if render else None, **ENV_CONFIG)

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
            action = policy(obs, env)
            obs, reward, terminated, truncated, info = env.step(action)
            total_reward += reward
            steps += 1
            if render:
                time.sleep(0.05)  # Control frame rate for watchability

        episode_rewards.append(total_reward)
        episode_lengths.append(steps)
        episode_scores.append(info["score"])

    env.close()

    return {
        "mean_reward": float(np.mean(episode_rewards)),
        "std_reward": float(np.std(episode_rewards)),
        "mean_length": float(np.mean(episode_lengths)),
        "mean_score": float(np.mean(episode_scores)),
        "episode_rewards": episode_rewards,
        "episode_lengths": episode_lengths,
        "episode_scores": episode_scores,
    }


def evaluate_model(
    model_path: str,
    algo: str = "ppo",
    n_episodes: int = 10,
    render: bool = True,
    seed: Optional[int] = None,
):
    """
    Evaluate a trained model

    Args:
        model_path: Path to the saved model
        algo: Algorithm used ('ppo' or 'dqn')
        n_episodes: Number of episodes to evaluate
        render: Whether to render the environment
        seed: Random seed for evaluation
    """
    if algo not in ALGORITHMS:
        raise ValueError(f"Unknown algorithm: {algo}")
    model = ALGORITHMS[algo].load(model_path)

    def policy(obs, env):
        action, _ = model.predict(obs, deterministic=True)
        return int(action)

    results = run_episodes(policy, n_episodes=n_episodes, seed=seed, render=render)

    print("\n" + "="*50)
    print(f"Evaluation Results ({n_episodes} episodes):")
    print(f"Mean Reward: {results['mean_reward']:.2f} ± {results['std_reward']:.2f}")
    print(f"Mean Episode Length: {results['mean_length']:.1f}")
    print(f"Mean Score: {results['mean_score']:.1f}")
    print(f"Min Reward: {np.min(results['episode_rewards']):.2f}")
    print(f"Max Reward: {np.max(results['episode_rewards']):.2f}")
    print("="*50)

    return results


def compare_with_random(n_episodes: int = 10, seed: Optional[int] = None):
    """Evaluate a random policy baseline"""
    print("Evaluating random policy baseline...")

    results = run_episodes(
        lambda obs, env: env.action_space.sample(),
        n_episodes=n_episodes,
        seed=seed,
    )

    print(f"\nRandom Policy Results ({n_episodes} episodes):")
    print(f"Mean Reward: {results['mean_reward']:.2f} ± {results['std_reward']:.2f}")
    print(f"Mean Episode Length: {results['mean_length']:.1f}")

    return results


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
        choices=sorted(ALGORITHMS),
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
    )

    if args.compare_random:
        print("\n")
        random_results = compare_with_random(
            n_episodes=args.n_episodes,
            seed=args.seed,
        )

        improvement = results["mean_reward"] - random_results["mean_reward"]
        print(f"\nImprovement over random: {improvement:.2f}")


if __name__ == "__main__":
    main()
