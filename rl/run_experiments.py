#!/usr/bin/env python
"""
Experiment runner for the grid shooter
Runs every combination of: algorithms × reward configs × timesteps × seeds
"""

import os
import json
import argparse
from datetime import datetime
from typing import Any, Dict, List, Optional

from rl.configs.shooter_config import EXPERIMENT_CONFIG, get_experiment_matrix
from rl.evaluate import run_episodes
from rl.train import train


def select_experiments(
    algo: Optional[str] = None,
    reward: Optional[str] = None,
    timestep: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """The experiment matrix, optionally filtered"""
    experiments = get_experiment_matrix()
    if algo:
        experiments = [e for e in experiments if e["algorithm"] == algo]
    if reward:
        experiments = [e for e in experiments if e["reward_config"] == reward]
    if timestep:
        experiments = [e for e in experiments if e["timestep_config"] == timestep]
    return experiments


def run_single_experiment(
    experiment: Dict[str, Any],
    seed: int,
    base_dir: str = "./experiments",
    n_envs: int = 4,
) -> Dict[str, Any]:
    """Train one configuration with one seed, then evaluate it"""
    run_name = f"{experiment['name']}_seed{seed}"
    run_dir = os.path.join(base_dir, run_name)
    os.makedirs(run_dir, exist_ok=True)

    with open(os.path.join(run_dir, "config.json"), "w") as f:
        json.dump({
            "name": run_name,
            "seed": seed,
            "timestamp": datetime.now().isoformat(),
            **experiment,
        }, f, indent=2)

    model, metrics_callback = train(
        algo=experiment["algorithm"],
        total_timesteps=experiment["timesteps"],
        reward_name=experiment["reward_config"],
        n_envs=n_envs,
        save_dir=os.path.join(run_dir, "models"),
        log_dir=os.path.join(run_dir, "logs"),
        tensorboard_log=os.path.join("./tensorboard_logs", run_name),
        seed=seed,
    )

    def policy(obs, env):
        action, _ = model.predict(obs, deterministic=True)
        return int(action)

    evaluation = run_episodes(
        policy,
        n_episodes=EXPERIMENT_CONFIG["n_eval_episodes"],
        seed=seed + 1000,
    )

    return {
        "name": run_name,
        "experiment": experiment["name"],
        "seed": seed,
        "completed": True,
        "training": metrics_callback.get_summary(),
        "eval_mean_reward": evaluation["mean_reward"],
        "eval_std_reward": evaluation["std_reward"],
        "eval_mean_score": evaluation["mean_score"],
    }


def run_all_experiments(
    base_dir: str = "./experiments",
    filter_algo: Optional[str] = None,
    filter_reward: Optional[str] = None,
    filter_timestep: Optional[str] = None,
    n_envs: int = 4,
):
    """Run all (or filtered) experiments for every configured seed"""
    experiments = select_experiments(filter_algo, filter_reward, filter_timestep)
    seeds = EXPERIMENT_CONFIG["seeds"]

    print(f"\n{'='*70}")
    print("EXPERIMENT BATCH")
    print(f"  Configurations: {len(experiments)} × {len(seeds)} seeds")
    print(f"  Output directory: {base_dir}")
    print(f"{'='*70}")
    for i, exp in enumerate(experiments):
        print(f"  {i+1}. {exp['name']:40} | {exp['timesteps']:>12,} steps")
    total_steps = sum(e["timesteps"] for e in experiments) * len(seeds)
    print(f"\n  Total timesteps: {total_steps:,}")
    print(f"{'='*70}\n")

    os.makedirs(base_dir, exist_ok=True)
    results = []
    total_runs = len(experiments) * len(seeds)
    for exp in experiments:
        for seed in seeds:
            print(f"\n[{len(results)+1}/{total_runs}] Starting {exp['name']} (seed {seed})...")
            results.append(run_single_experiment(exp, seed, base_dir, n_envs))

    results_path = os.path.join(base_dir, "experiment_results.json")
    with open(results_path, "w") as f:
        json.dump({
            "total_runs": len(results),
            "completed": datetime.now().isoformat(),
            "results": results,
        }, f, indent=2, default=str)

    print(f"\n{'='*70}")
    print("ALL EXPERIMENTS COMPLETE!")
    print(f"Results saved to: {results_path}")
    print(f"{'='*70}\n")

    return results


def main():
    parser = argparse.ArgumentParser(description="Run grid shooter RL experiments")
    parser.add_argument(
        "--output-dir", type=str, default="./experiments",
        help="Base directory for experiment outputs"
    )
    parser.add_argument(
        "--algo", type=str, choices=EXPERIMENT_CONFIG["algorithms"],
        help="Filter to specific algorithm"
    )
    parser.add_argument(
        "--reward", type=str, choices=EXPERIMENT_CONFIG["reward_configs"],
        help="Filter to specific reward config"
    )
    parser.add_argument(
        "--timestep", type=str, choices=EXPERIMENT_CONFIG["timestep_configs"],
        help="Filter to specific timestep config"
    )
    parser.add_argument(
        "--n-envs", type=int, default=4,
        help="Number of parallel environments for PPO"
    )
    parser.add_argument(
        "--list", action="store_true",
        help="List experiments without running"
    )

    args = parser.parse_args()

    if args.list:
        experiments = select_experiments(args.algo, args.reward, args.timestep)
        print(f"\nExperiments ({len(experiments)}), seeds {EXPERIMENT_CONFIG['seeds']}:")
        for exp in experiments:
            print(f"  {exp['name']:40} | {exp['timesteps']:>12,} steps")
        return

    run_all_experiments(
        base_dir=args.output_dir,
        filter_algo=args.algo,
        filter_reward=args.reward,
        filter_timestep=args.timestep,
        n_envs=args.n_envs,
    )


if __name__ == "__main__":
    main()
