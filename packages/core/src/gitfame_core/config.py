from pathlib import Path
from typing import Optional

import yaml

from gitfame_core.errors import ConfigError

ORDER_BY_CHOICES = ("lines", "commits", "files")
FORMAT_CHOICES = ("tabular", "csv", "json", "json-lines")

_LIST_KEYS = ("extensions", "languages", "exclude", "restrict_to")

DEFAULT_CONFIG: dict = {
    "repository": ".",
    "revision": "HEAD",
    "order_by": "lines",
    "use_committer": False,
    "format": "tabular",
    "extensions": [],  # e.g. [".go", ".md"]
    "languages": [],  # names from the packaged language table, e.g. ["go", "markdown"]
    "exclude": [],  # fnmatch globs, e.g. "vendor/*"
    "restrict_to": [],  # fnmatch globs; when set, only matching files are counted
    "jobs": 1,
}


def load_config(config_path: str = ".gitfame.yml", cli_overrides: Optional[dict] = None) -> dict:
    """
    Load configuration by merging (in order of precedence):
      1. Built-in defaults
      2. .gitfame.yml in the current directory
      3. CLI argument overrides
    """
    config = {**DEFAULT_CONFIG, **{key: list(DEFAULT_CONFIG[key]) for key in _LIST_KEYS}}

    path = Path(config_path)
    if path.exists():
        with open(path) as f:
            try:
                file_config = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Could not parse {config_path}: {e}") from e
        if not isinstance(file_config, dict):
            raise ConfigError(f"{config_path} must contain a mapping of settings.")
        # YAML keys may use the CLI spelling (order-by) or the Python one (order_by).
        config.update({key.replace("-", "_"): value for key, value in file_config.items()})

    if cli_overrides:
        for key, value in cli_overrides.items():
            if value is not None:
                config[key] = value

    return config


def validate_config(config: dict) -> dict:
    """
    Check enumerated values and normalise list settings in place.

    Comma-separated strings are accepted wherever a list is expected.
    Raises ConfigError on the first invalid value.
    """
    if config.get("order_by") not in ORDER_BY_CHOICES:
        raise ConfigError(
            f"{config.get('order_by')!r} is not a sorting option. Choose one of: {', '.join(ORDER_BY_CHOICES)}."
        )
    if config.get("format") not in FORMAT_CHOICES:
        raise ConfigError(
            f"{config.get('format')!r} is not a formatting option. Choose one of: {', '.join(FORMAT_CHOICES)}."
        )

    jobs = config.get("jobs")
    if isinstance(jobs, bool) or not isinstance(jobs, int) or jobs < 1:
        raise ConfigError(f"jobs must be a positive integer, got {jobs!r}.")

    for key in _LIST_KEYS:
        value = config.get(key) or []
        if isinstance(value, str):
            value = split_list(value)
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            raise ConfigError(f"{key} must be a list of strings.")
        config[key] = value

    config["use_committer"] = bool(config.get("use_committer"))
    return config


def split_list(value: str) -> list[str]:
    """Split a comma-separated option value, dropping empty items."""
    return [item.strip() for item in value.split(",") if item.strip()]
