"""
Training configuration for the grid shooter environment
Reward shaping variants, algorithm hyperparameters and the experiment matrix
"""

# Environment parameters
ENV_CONFIG = {
    # "render_mode": None,  # Don't render during training
    "width": 10,
    "height": 20,
    "max_steps": 2000,
}

# ==============================================================================
# REWARD SHAPING CONFIGURATIONS
# ==============================================================================

# Reward Config 1: BASELINE (balanced)
REWARD_CONFIG_BASELINE = {
    "name": "baseline",
    "description": "Balanced reward shaping",
    "R_KILL": 1.0,       # Reward for shooting down an enemy
    "R_POWER_UP": 0.5,   # Reward for collecting a power-up
    "R_DAMAGE": 2.0,     # Penalty multiplier for damage (fraction of max health)
    "R_SHOT": 0.01,      # Penalty per bullet fired
    "R_SURVIVE": 0.001,  # Reward per tick alive
    "R_DEATH": 5.0,      # Death penalty
}

# Reward Config 2: SURVIVAL (dodge first)
REWARD_CONFIG_SURVIVAL = {
    "name": "survival",
    "description": "Prioritize survival - higher damage/death penalties, lower combat rewards",
    "R_KILL": 0.5,
    "R_POWER_UP": 1.0,   # Health power-ups matter more when surviving
    "R_DAMAGE": 5.0,
    "R_SHOT": 0.02,
    "R_SURVIVE": 0.005,
    "R_DEATH": 10.0,
}

# Reward Config 3: AGGRESSIVE (shoot everything)
REWARD_CONFIG_AGGRESSIVE = {
    "name": "aggressive",
    "description": "Prioritize kills - higher combat rewards, lower penalties",
    "R_KILL": 2.0,
    "R_POWER_UP": 0.5,
    "R_DAMAGE": 1.0,
    "R_SHOT": 0.002,
    "R_SURVIVE": 0.0,
    "R_DEATH": 3.0,
}

REWARD_CONFIGS = {
    "baseline": REWARD_CONFIG_BASELINE,
    "survival": REWARD_CONFIG_SURVIVAL,
    "aggressive": REWARD_CONFIG_AGGRESSIVE,
}

# ==============================================================================
# TIMESTEP CONFIGURATIONS
# ==============================================================================

TIMESTEP_CONFIGS = {
    "short": 50_000,
    "medium": 500_000,
    "long": 1_600_000,
}

# ==============================================================================
# ALGORITHM HYPERPARAMETERS
# ==============================================================================

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

ALGO_CONFIGS = {
    "ppo": PPO_CONFIG,
    "dqn": DQN_CONFIG,
}

# ==============================================================================
# TRAINING SETTINGS
# ==============================================================================

TRAINING_CONFIG = {
    "total_timesteps": 500_000,
    "save_freq": 10_000,
    "eval_freq": 5_000,
    "log_dir": "./logs",
    "model_dir": "./models",
    "tensorboard_log": "./tensorboard_logs",
}

EXPERIMENT_CONFIG = {
    "seeds": [42, 123, 456],
    "n_eval_episodes": 10,
    "algorithms": ["dqn", "ppo"],
    "reward_configs": ["baseline", "survival", "aggressive"],
    "timestep_configs": ["short", "medium", "long"],
}


def get_experiment_matrix():
    """
    Generate all experiment configurations.
    Returns list of dicts with: name, algorithm, reward_config, reward_params, timestep_config, timesteps
    """
    experiments = []

    for reward_name in EXPERIMENT_CONFIG["reward_configs"]:
        for timestep_name in EXPERIMENT_CONFIG["timestep_configs"]:
            for algo in EXPERIMENT_CONFIG["algorithms"]:
                experiments.append({
                    "name": f"{algo}_{reward_name}_{timestep_name}",
                    "algorithm": algo,
                    "reward_config": reward_name,
                    "reward_params": REWARD_CONFIGS[reward_name],
                    "timestep_config": timestep_name,
                    "timesteps": TIMESTEP_CONFIGS[timestep_name],
                })

    return experiments


if __name__ == "__main__":
    experiments = get_experiment_matrix()
    print(f"Total experiments: {len(experiments)}")
    print("-" * 70)
    for exp in experiments:
        print(f"  {exp['name']:35} | {exp['timesteps']:>10,} steps")
    print("-" * 70)
