import json
import os
from datetime import datetime

from simulator.models import MachineConfig

DEFAULT_CONFIG = {
    "blank_symbol": "~",
    "field_delimiter": "\t",
    "initial_state": "1",
    "time_control_sec": 0,
    "max_steps": 0,
    "show_steps": True,
    "enable_run_log": False,
    "output_directory": "logs/",
    "log_file_prefix": "touring_"
}

# Expected types for validation
CONFIG_SCHEMA = {
    "blank_symbol": str,
    "field_delimiter": str,
    "initial_state": str,
    "time_control_sec": int,
    "max_steps": int,
    "show_steps": bool,
    "enable_run_log": bool,
    "output_directory": str,
    "log_file_prefix": str
}

def validate_config(config):
    for key, expected_type in CONFIG_SCHEMA.items():
        if key not in config:
            raise ValueError(f"Missing required configuration key: {key}")
        value = config[key]
        # bool is an int subclass; keep the two apart.
        if expected_type is int and isinstance(value, bool):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(value)}.")
        if not isinstance(value, expected_type):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(value)}.")

    if len(config["blank_symbol"]) != 1:
        raise ValueError("Config key 'blank_symbol' must be a single character.")
    if not config["field_delimiter"]:
        raise ValueError("Config key 'field_delimiter' must not be empty.")
    for key in ("time_control_sec", "max_steps"):
        if config[key] < 0:
            raise ValueError(f"Config key '{key}' must be non-negative (0 turns it off).")

def default_config():
    return dict(DEFAULT_CONFIG)

def load_config(path="config/runtime_config.json", verbose=False):
    if not os.path.exists(path):
        raise FileNotFoundError(f"Configuration file not found at: {path}")

    with open(path, "r", encoding="utf-8") as f:
        user_config = json.load(f)
    if not isinstance(user_config, dict):
        raise TypeError(f"Configuration file {path} must contain a JSON object.")

    # Merge defaults with overrides
    config = default_config()
    config.update(user_config)

    validate_config(config)

    if verbose:
        print(f"[{datetime.now()}] Loaded config:")
        for key, value in config.items():
            print(f"  {key}: {value!r}")

    return config

def machine_config(config):
    """Build the MachineConfig handed to the loader and the tape."""
    return MachineConfig(
        blank_symbol=config["blank_symbol"],
        field_delimiter=config["field_delimiter"],
    )
