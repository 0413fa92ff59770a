import json
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .console import console

# Load environment variables from .env file
load_dotenv()

# Configuration Defaults
DEFAULT_CONFIG = {
    "DISPLAY_WIDTH": "0",
    "FALLBACK_PADDING": "1",
    "SHOW_HEADER": "true",
}

# File Paths
FLYWEIGHT_DIR = Path(os.getenv("FLYWEIGHT_DIR", str(Path.home() / ".flyweight_editor")))
CONFIG_FILE = Path(os.getenv("FLYWEIGHT_CONFIG_FILE", str(FLYWEIGHT_DIR / "config.json")))


def load_config(config_file: Path | None = None) -> dict[str, Any]:
    """Load configuration from file"""
    path = config_file or CONFIG_FILE
    if path.exists():
        try:
            with open(path) as f:
                config: dict[str, Any] = json.load(f)
                return config
        except Exception as e:
            console.print(f"[yellow]Warning: Could not load config file: {e}[/yellow]")
    return {}


def get_setting(key: str, default: str, config_file: Path | None = None) -> str:
    """Get setting with priority: Env Var > Config File > Default"""
    # 1. Environment Variable
    env_val = os.getenv(key)
    if env_val:
        return env_val

    # 2. Config File
    config = load_config(config_file)
    if key in config:
        return str(config[key])

    # 3. Default
    return default


def get_int_setting(key: str, default: int, config_file: Path | None = None) -> int:
    """Get integer setting with priority: Env Var > Config File > Default"""
    value = get_setting(key, str(default), config_file)
    try:
        return int(value)
    except ValueError:
        console.print(
            f"[yellow]Warning: Invalid integer value for {key}: {value}, "
            f"using default {default}[/yellow]"
        )
        return default


def get_bool_setting(key: str, default: bool, config_file: Path | None = None) -> bool:
    """Get boolean setting with priority: Env Var > Config File > Default"""
    value = get_setting(key, str(default).lower(), config_file)
    return value.lower() in ("true", "1", "yes", "on")


# Initialize Configuration
# 0 means "ask the terminal"
DISPLAY_WIDTH = get_int_setting("DISPLAY_WIDTH", int(DEFAULT_CONFIG["DISPLAY_WIDTH"]))
FALLBACK_PADDING = get_int_setting("FALLBACK_PADDING", int(DEFAULT_CONFIG["FALLBACK_PADDING"]))
SHOW_HEADER = get_bool_setting("SHOW_HEADER", True)
