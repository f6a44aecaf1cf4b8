import copy
import json
from pathlib import Path
from typing import Any

DEFAULT_CONFIG_PATH = Path(__file__).parent / "generation_config.json"


def _read_json_object(path: Path) -> dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
        if not isinstance(data, dict):
            raise TypeError(f"Expected dict from {path}, got {type(data)}")
        return data


# generation_config.json is the single source of generation defaults
DEFAULT_GENERATION_CONFIG: dict[str, Any] = _read_json_object(DEFAULT_CONFIG_PATH)


def merge_config(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def load_generation_config(config_path: str | None = None) -> dict[str, Any]:
    """
    Loads the generation configuration (counts, value ranges, name pools).
    If no path is provided, returns the defaults from generation_config.json in
    the config directory. Keys missing from a custom file fall back to those defaults.
    """
    if config_path is None:
        return merge_config(DEFAULT_GENERATION_CONFIG, {})
    return merge_config(DEFAULT_GENERATION_CONFIG, _read_json_object(Path(config_path)))
