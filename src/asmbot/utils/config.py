import json
from pathlib import Path
from typing import Any

DEFAULT_CONFIG = {
    "prefix": "!",
    "log_file": "/tmp/asmbot.log",
    "log_level": "INFO",
}


class ConfigManager:
    """
    Loads ~/.asmbot/config.json, layered over DEFAULT_CONFIG.
    """
    def __init__(self, config_dir: Path = None):
        self.config_dir = Path(config_dir) if config_dir else Path.home() / ".asmbot"
        self.config_file = self.config_dir / "config.json"
        self.config = self.load_config()

    def load_config(self) -> dict:
        self.config_dir.mkdir(parents=True, exist_ok=True)
        config = DEFAULT_CONFIG.copy()

        if self.config_file.exists():
            try:
                with open(self.config_file, "r") as f:
                    config.update(json.load(f))
            except (json.JSONDecodeError, OSError) as e:
                print(f"Warning: Ignoring unreadable config {self.config_file}: {e}")

        return config

    def save_config(self):
        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "w") as f:
            json.dump(self.config, f, indent=2)

    def get(self, key: str, default: Any = None) -> Any:
        return self.config.get(key, default)

    def set(self, key: str, value: Any):
        self.config[key] = value
        self.save_config()
