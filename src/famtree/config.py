import yaml
from dataclasses import dataclass
from pathlib import Path

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "famtree.yml"

DEFAULT_DISPLAY = {
    "name_display_cap": 15,
    "group_gap": 6,
    "min_block_width": 6,
    "max_name_length": 63,
}


@dataclass(frozen=True)
class DisplaySettings:
    """
    Layout constants for the centered tree.

    name_display_cap: characters of a name shown in a block
    group_gap:        spaces between neighbouring family blocks
    min_block_width:  floor for a block's width
    max_name_length:  characters kept from a name on entry
    """
    name_display_cap: int = 15
    group_gap: int = 6
    min_block_width: int = 6
    max_name_length: int = 63


class FTConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {})
        self.display = {**DEFAULT_DISPLAY, **(data.get("display") or {})}
        self.logging = data.get("logging", {})
        self.debug = data.get("debug", False)

    def display_settings(self) -> DisplaySettings:
        return DisplaySettings(**{k: int(self.display[k]) for k in DEFAULT_DISPLAY})


def load_config(path: Path = CONFIG_PATH) -> 'FTConfig':
    # Installed copies may ship without the config directory.
    if not path.exists():
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
