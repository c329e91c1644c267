"""
Training script for the grid shooter environment using Stable-Baselines3
Supports PPO and DQN with per-episode metrics tracking.
"""

import os
import argparse
from typing import Dict, Optional

from stable_baselines3 import PPO, DQN
from stable_baselines3.common.vec_env import DummyVecEnv, VecNormalize
from stable_baselines3.common.callbacks import CheckpointCallback, EvalCallback
from stable_baselines3.common.monitor import Monitor

from game.gridshooter import GridShooterEnv
from rl.configs.shooter_config import (
    ALGO_CONFIGS,
    ENV_CONFIG,
    REWARD_CONFIGS,
    TRAINING_CONFIG,
)
from rl.metrics_callback import MetricsCallback, TensorboardMetricsCallback

ALGORITHMS = {
    "ppo": PPO,
    "dqn": DQN,
}


def make_env(seed: Optional[int] = None, reward_config: Optional[Dict[str, float]] = None):
    """Factory function to create the environment"""
    def _init():
        env = GridShooterEnv(reward_config=reward_config, **ENV_CONFIG)
        env = Monitor(env)
        if seed is not None:
            env.reset(seed=seed)
        return env
    return _init


def train(
    algo: str = "ppo",
    total_timesteps: Optional[int] = None,
    reward_name: str = "baseline",
    n_envs: int = 4,
    save_dir: Optional[str] = None,
    log_dir: Optional[str] = None,
    tensorboard_log: Optional[str] = None,
    seed: int = 0,
):
    """Train one algorithm on the grid shooter"""

    if total_timesteps is None:
        total_timesteps = TRAINING_CONFIG["total_timesteps"]
    save_dir = save_dir or os.path.join(TRAINING_CONFIG["model_dir"], algo)
    log_dir = log_dir or os.path.join(TRAINING_CONFIG["log_dir"], algo)
    tensorboard_log = tensorboard_log or os.path.join(TRAINING_CONFIG["tensorboard_log"], algo)
    reward_config = REWARD_CONFIGS[reward_name]

    # DQN's replay buffer wants a single environment
    if algo == "dqn":
        n_envs = 1

    os.makedirs(save_dir, exist_ok=True)
    os.makedirs(log_dir, exist_ok=True)

    print(f"\n{'='*60}")
    print(f"Training {algo.upper()} for {total_timesteps:,} timesteps...")
    print(f"Reward shaping: {reward_name} | {n_envs} environment(s)")
    print(f"{'='*60}\n")

    env = DummyVecEnv([make_env(seed=seed + i, reward_config=reward_config) for i in range(n_envs)])
    eval_env = DummyVecEnv([make_env(seed=seed + 100, reward_config=reward_config)])
    if algo == "ppo":
        env = VecNormalize(env, norm_obs=False, norm_reward=True)
        eval_env = VecNormalize(eval_env, norm_obs=False, norm_reward=False, training=False)

    checkpoint_callback = CheckpointCallback(
        save_freq=max(1, TRAINING_CONFIG["save_freq"] // n_envs),
        save_path=save_dir,
        name_prefix=f"{algo}_gridshooter",
    )

    eval_callback = EvalCallback(
        eval_env,
        best_model_save_path=save_dir,
        log_path=log_dir,
        eval_freq=max(1, TRAINING_CONFIG["eval_freq"] // n_envs),
        deterministic=True,
        render=False,
    )

    metrics_callback = MetricsCallback(
        log_dir=log_dir,
        algo_name=algo,
        verbose=1,
    )

    tb_callback = TensorboardMetricsCallback(verbose=0)

    model = ALGORITHMS[algo](
        env=env,
        tensorboard_log=tensorboard_log,
        seed=seed,
        **ALGO_CONFIGS[algo]
    )

    model.learn(
        total_timesteps=total_timesteps,
        callback=[checkpoint_callback, eval_callback, metrics_callback, tb_callback],
    )

    final_path = os.path.join(save_dir, f"{algo}_gridshooter_final")
    model.save(final_path)
    if isinstance(env, VecNormalize):
        env.save(os.path.join(save_dir, "vec_normalize.pkl"))

    print(f"\n{'='*60}")
    print(f"{algo.upper()} Training complete! Model saved to {final_path}")
    summary = metrics_callback.get_summary()
    if summary:
        print(f"Mean Reward: {summary['mean_reward']:.2f} ± {summary['std_reward']:.2f}")
        print(f"Mean Score: {summary['mean_score']:.1f} | Max Level: {summary['max_level']}")
        print(f"Total Episodes: {summary['total_episodes']}")
    print(f"{'='*60}\n")

    return model, metrics_callback


def main():
    parser = argparse.ArgumentParser(description="Train RL agent on the grid shooter")
    parser.add_argument(
        "--algo",
        type=str,
        default="ppo",
        choices=["ppo", "dqn", "all"],
        help="RL algorithm to use (default: ppo)",
    )
    parser.add_argument(
        "--timesteps",
        type=int,
        default=None,
        help=f"Total timesteps to train (default: {TRAINING_CONFIG['total_timesteps']})",
    )
    parser.add_argument(
        "--reward",
        type=str,
        default="baseline",
        choices=sorted(REWARD_CONFIGS),
        help="Reward shaping configuration (default: baseline)",
    )
    parser.add_argument(
        "--n-envs",
        type=int,
        default=4,
        help="Number of parallel environments for PPO (default: 4)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Base random seed for environments and the model (default: 0)",
    )

    args = parser.parse_args()

    algos = ["dqn", "ppo"] if args.algo == "all" else [args.algo]
    for algo in algos:
        train(
            algo=algo,
            total_timesteps=args.timesteps,
            reward_name=args.reward,
            n_envs=args.n_envs,
            seed=args.seed,
        )


if __name__ == "__main__":
    main()
