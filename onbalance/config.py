import os
from pathlib import Path
from typing import Any, Mapping, Optional

from mergedeep import merge

from onbalance.files import load_file

DEFAULTS: dict[str, Any] = {
    "log_level": "info",
    "log_format": "default",
    "log_outputs": ["stdout"],
    "log_directory": "logs",
    "log_backup_count": 0,
}


def load(
    path: Optional[str | Path] = None, env: Mapping[str, str] = os.environ
) -> dict[str, Any]:
    # Later sources take precedence: defaults, then file, then environment.
    return merge(
        {},
        DEFAULTS,
        from_file(path) if path else {},
        from_env(env),
    )


def from_file(path: str | Path) -> dict[str, Any]:
    cfg = load_file(path)
    if not isinstance(cfg, dict):
        raise ValueError(f"Config file {path} must hold a mapping")
    return cfg


def from_env(
    env: Mapping[str, str] = os.environ, prefix: str = "ONBALANCE", separator: str = "__"
) -> dict[str, Any]:
    """Builds a config from variables such as `ONBALANCE__LOG_LEVEL=debug`. Each separator opens
    a nested level; numeric keys index into a list (`ONBALANCE__LOG_OUTPUTS__0=file`)."""
    result: dict[str, Any] = {}
    for name, value in sorted(env.items()):
        head, *keys = name.split(separator)
        if head != prefix or not keys:
            continue
        _assign(result, [int(k) if k.isdigit() else k.lower() for k in keys], value)
    return result


def _assign(target: Any, keys: list[Any], value: str) -> None:
    key, rest = keys[0], keys[1:]
    if isinstance(target, list):
        target.extend([None] * (key + 1 - len(target)))
    if not rest:
        target[key] = value
        return

    child = target[key] if isinstance(target, list) else target.get(key)
    if child is None:
        child = [] if isinstance(rest[0], int) else {}
        target[key] = child
    _assign(child, rest, value)
