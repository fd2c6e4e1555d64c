from decimal import Decimal
from pathlib import Path
from typing import Any

import simplejson
import yaml


class _Loader(yaml.SafeLoader):
    pass


# Closes and volumes written as `!decimal 1.10` keep their exact digits.
_Loader.add_constructor("!decimal", lambda loader, node: Decimal(loader.construct_scalar(node)))


def home_path(*args: str) -> Path:
    path = Path(Path.home(), ".onbalance").joinpath(*args)
    path.mkdir(parents=True, exist_ok=True)
    return path


def load_file(path: str | Path) -> Any:
    """Loads a JSON or YAML document, picking the format from the file extension. JSON numbers
    with a fraction are read as Decimals."""
    suffix = Path(path).suffix.lower()
    if suffix not in (".json", ".yaml", ".yml"):
        raise ValueError(f"Unsupported file format ({path}). Expected JSON or YAML")

    with open(path, mode="r", encoding="utf-8") as f:
        if suffix == ".json":
            return simplejson.load(f, use_decimal=True)
        return yaml.load(f, Loader=_Loader)
