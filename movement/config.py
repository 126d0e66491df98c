import os
import sys
import json
import copy
from functools import lru_cache
from typing import Dict, Optional

DEFAULT_CONFIG = {
    'testing_mode': False,
    'meridiem': False,
    'strict': False,
}

def get_config_path() -> str:
    """Get config file location, MOVEMENT_CONFIG wins over the packaged file"""
    config_file = os.getenv('MOVEMENT_CONFIG')
    if not config_file:
        config_file = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.json')
    return config_file

def load_config(path: Optional[str] = None) -> Dict:
    """Load configuration, falling back to defaults for anything missing"""
    config = copy.deepcopy(DEFAULT_CONFIG)
    config_file = path or get_config_path()
    if not os.path.exists(config_file):
        return config

    try:
        with open(config_file, 'r') as f:
            loaded = json.load(f)
    except json.JSONDecodeError as e:
        print(f"Error: Corrupted config file {config_file}: {e}", file=sys.stderr)
        return config
    except OSError as e:
        print(f"Error loading config: {str(e)}", file=sys.stderr)
        return config

    if not isinstance(loaded, dict):
        print(f"Error: Config file {config_file} must hold a JSON object", file=sys.stderr)
        return config

    for key, default in DEFAULT_CONFIG.items():
        if key in loaded:
            config[key] = bool(loaded[key]) if isinstance(default, bool) else loaded[key]
    return config

@lru_cache(maxsize=None)
def load_config_once(config_file: str) -> Dict:
    return load_config(config_file)

def get_config() -> Dict:
    """Config from the default location, read once per run"""
    return copy.deepcopy(load_config_once(get_config_path()))

def get_testing_mode(path: Optional[str] = None) -> bool:
    """Check if testing mode is enabled"""
    config = load_config(path) if path else get_config()
    return config['testing_mode']
