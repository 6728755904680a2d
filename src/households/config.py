import os
from importlib import resources
from pathlib import Path

import yaml

CONFIG_ENV_VAR = "HOUSEHOLDS_CONFIG"
DEFAULT_CONFIG = resources.files("households") / "defaults" / "households.yml"

class HouseholdsConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {})
        self.logging = data.get("logging", {})
        self.importing = data.get("import", {})
        self.debug = data.get("debug", False)

    @property
    def skip_header(self) -> bool:
        return bool(self.importing.get("skip_header", False))

    @property
    def encoding(self) -> str:
        return str(self.importing.get("encoding") or "utf-8")

def load_config() -> 'HouseholdsConfig':
    """
    Load the YAML named by ``$HOUSEHOLDS_CONFIG``, or the default shipped
    inside the package.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        text = path.read_text(encoding="utf-8")
    else:
        text = DEFAULT_CONFIG.read_text(encoding="utf-8")

    data = yaml.safe_load(text) or {}
    return HouseholdsConfig(data)

_config_cache = None

def get_config() -> 'HouseholdsConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache
