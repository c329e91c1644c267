"""
Plotting script for grid shooter training runs.
Turns the MetricsCallback CSVs into learning curves and a comparison figure.
"""

import os
import argparse
from typing import Dict, List, Optional

import numpy as np
import pandas as pd
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

COLORS = {"dqn": "#2ecc71", "ppo": "#3498db"}

# (column, y-label) for each learning-curve panel
PANELS = [
    ("reward", "Episode Reward"),
    ("score", "Game Score"),
    ("level", "Level Reached"),
    ("survived", "Survival Rate"),
]


def load_metrics(log_dir: str, algo: str) -> Optional[pd.DataFrame]:
    """Load metrics CSV for an algorithm from <log_dir>/<algo>/ or <log_dir>/."""
    for path in (
        os.path.join(log_dir, algo, f"{algo}_metrics.csv"),
        os.path.join(log_dir, f"{algo}_metrics.csv"),
    ):
        if os.path.exists(path):
            return pd.read_csv(path)
    return None


def smooth(data: np.ndarray, window: int = 10) -> np.ndarray:
    """Apply rolling average smoothing."""
    if len(data) < window:
        return data
    kernel = np.ones(window) / window
    return np.convolve(data, kernel, mode="valid")


def _plot_series(ax, df: pd.DataFrame, column: str, window: int, **kwargs):
    values = smooth(df[column].values.astype(float), window)
    ax.plot(df["timestep"].values[:len(values)], values, linewidth=2, **kwargs)


def plot_learning_curve(df: pd.DataFrame, algo: str, output_dir: str, window: int = 50) -> str:
    """Four-panel learning curve for a single algorithm."""
    fig, axes = plt.subplots(2, 2, figsize=(14, 10))
    fig.suptitle(f"{algo.upper()} Learning Curves", fontsize=16, fontweight="bold")

    for ax, (column, label) in zip(axes.flat, PANELS):
        if column in df.columns:
            _plot_series(ax, df, column, window, color=COLORS.get(algo))
        ax.set_xlabel("Timesteps")
        ax.set_ylabel(label)
        ax.set_title(f"{label} vs Timesteps")
        ax.grid(True, alpha=0.3)
    axes[1, 1].set_ylim(0, 1.1)

    plt.tight_layout()
    os.makedirs(output_dir, exist_ok=True)
    save_path = os.path.join(output_dir, f"{algo}_learning_curve.png")
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()

    print(f"Saved {algo} learning curve to {save_path}")
    return save_path


def plot_comparison(data: Dict[str, pd.DataFrame], output_dir: str, window: int = 50) -> str:
    """Reward and score curves of every algorithm on shared axes."""
    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    fig.suptitle("Algorithm Comparison", fontsize=16, fontweight="bold")

    for ax, (column, label) in zip(axes, PANELS[:2]):
        for algo, df in data.items():
            _plot_series(ax, df, column, window, label=algo.upper(), color=COLORS.get(algo))
        ax.set_xlabel("Timesteps")
        ax.set_ylabel(label)
        ax.legend()
        ax.grid(True, alpha=0.3)

    plt.tight_layout()
    os.makedirs(output_dir, exist_ok=True)
    save_path = os.path.join(output_dir, "algorithm_comparison.png")
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close()

    print(f"Saved comparison plot to {save_path}")
    return save_path


def summary_lines(data: Dict[str, pd.DataFrame], tail: int = 100) -> List[str]:
    """Text summary: overall and final-``tail``-episode statistics per algorithm."""
    lines = ["=" * 60, "GRID SHOOTER TRAINING SUMMARY", "=" * 60]
    for algo, df in data.items():
        final = df.tail(tail)
        lines += [
            "",
            f"{algo.upper()} Results:",
            "-" * 40,
            f"  Total Episodes: {len(df)}",
            f"  Total Timesteps: {df['timestep'].max():,}",
            f"  Mean Reward: {df['reward'].mean():.2f} ± {df['reward'].std():.2f}",
            f"  Final Mean Reward (last {tail}): {final['reward'].mean():.2f}",
            f"  Final Mean Score (last {tail}): {final['score'].mean():.1f}",
            f"  Best Level: {int(df['level'].max())}",
            f"  Final Survival Rate: {final['survived'].mean():.2%}",
        ]
    lines.append("=" * 60)
    return lines


def main():
    parser = argparse.ArgumentParser(description="Plot grid shooter training results")
    parser.add_argument("--log-dir", type=str, default="./logs", help="Directory containing log files")
    parser.add_argument("--output-dir", type=str, default="./plots", help="Directory to save plots")
    parser.add_argument("--window", type=int, default=50, help="Smoothing window size (default: 50)")
    parser.add_argument("--algos", nargs="+", default=["dqn", "ppo"], help="Algorithms to plot")

    args = parser.parse_args()

    print(f"Loading metrics from {args.log_dir}...")
    data = {}
    for algo in args.algos:
        df = load_metrics(args.log_dir, algo)
        if df is None or df.empty:
            print(f"  No data found for {algo}")
            continue
        print(f"  Loaded {algo}: {len(df)} episodes")
        data[algo] = df

    if not data:
        print("\nNo data found! Make sure training has generated metrics files.")
        return

    for algo, df in data.items():
        plot_learning_curve(df, algo, args.output_dir, args.window)
    if len(data) > 1:
        plot_comparison(data, args.output_dir, args.window)

    report = "\n".join(summary_lines(data))
    print(report)
    report_path = os.path.join(args.output_dir, "experiment_summary.txt")
    with open(report_path, "w") as f:
        f.write(report)
    print(f"\nAll plots saved to {args.output_dir}/")


if __name__ == "__main__":
    main()
