import os
import yaml
from pathlib import Path

# Only present in a source checkout; installed copies fall back to defaults.
CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "family_tree.yml"
CONFIG_ENV_VAR = "FAMILY_TREE_CONFIG"

class FTConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {})
        self.logging = data.get("logging", {})
        self.debug = data.get("debug", False)

    @property
    def data_dir(self) -> str:
        return self.paths.get("data_dir") or "data"

    @property
    def log_file(self):
        """Log file path relative to the working directory, or None for console only."""
        name = self.logging.get("file")
        if not name:
            return None
        log_dir = self.logging.get("dir") or self.paths.get("logs_dir") or "logs"
        return Path(log_dir) / name

def load_config() -> 'FTConfig':
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
    elif CONFIG_PATH.exists():
        path = CONFIG_PATH
    else:
        return FTConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return FTConfig(data)

_config_cache = None

def get_config() -> 'FTConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache
