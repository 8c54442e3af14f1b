# Loads the optional YAML configuration file of the command line tool.
#
# A configuration file is a mapping with any of the following keys:
#
#   files:            # files that contain type_union cog blocks
#     - src/app/values.py
#   include:          # extra directories for imports inside cog blocks
#     - tools
#   check: false      # only check that the generated code is up to date

from pathlib import Path

import yaml

DEFAULT_CONFIG = {
    "files": [],
    "include": [],
    "check": False,
}

_LIST_KEYS = ("files", "include")


def load_config(path):
    """Returns the configuration stored at `path` merged over DEFAULT_CONFIG.
    Relative entries in `files` and `include` are resolved against the directory
    of the configuration file."""

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"configuration file not found: {config_path}")
    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValueError(f"failed to parse configuration: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("configuration root must be a mapping")

    unknown = sorted(set(data) - set(DEFAULT_CONFIG))
    if unknown:
        raise ValueError(f"unknown configuration keys: {', '.join(unknown)}")

    config = dict(DEFAULT_CONFIG)
    base = config_path.parent
    for key in _LIST_KEYS:
        entries = data.get(key) or []
        if not isinstance(entries, list):
            raise ValueError(f"configuration key {key!r} must be a list")
        config[key] = [base / str(entry) for entry in entries]
    check = data.get("check", False)
    if not isinstance(check, bool):
        raise ValueError("configuration key 'check' must be a boolean")
    config["check"] = check
    return config
