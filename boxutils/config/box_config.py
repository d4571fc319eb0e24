# config / box_config.py

# -----

# Default Settings & YAML Loading for Box Utilities.

# -----

# Imports.
import yaml
from pathlib import Path


def get_default_config():
    return {
        # Box Deltas
        'bbox_std_dev': [0.1, 0.1, 0.2, 0.2],
        'bbox_means': [0.0, 0.0, 0.0, 0.0],

        # Logging
        'log_dir': None,
        'log_level': 'INFO',

        # Diagnostics
        'debug_dir': Path('debug_output'),
    }


def load_config(config_path):
    """
    Load YAML Configuration and Overlay It on the Defaults.

    Args:
        config_path: Path to the YAML Configuration File.

    Returns:
        dict: Configuration Dictionary With All Parameters.
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"[ERROR] Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        overrides = yaml.safe_load(f) or {}

    if not isinstance(overrides, dict):
        raise ValueError(f"[ERROR] Config file must contain a mapping: {config_path}")

    config = get_default_config()
    config.update(overrides)

    # Convert Paths & Numbers.
    if config['log_dir'] is not None:
        config['log_dir'] = Path(config['log_dir'])
    config['debug_dir'] = Path(config['debug_dir'])
    config['bbox_std_dev'] = [float(v) for v in config['bbox_std_dev']]
    config['bbox_means'] = [float(v) for v in config['bbox_means']]

    # Validate Delta Statistics.
    if len(config['bbox_std_dev']) != 4 or len(config['bbox_means']) != 4:
        raise ValueError("[ERROR] bbox_std_dev and bbox_means must have 4 values each")
    if any(v <= 0 for v in config['bbox_std_dev']):
        raise ValueError(f"[ERROR] bbox_std_dev must be positive, got {config['bbox_std_dev']}")

    return config
