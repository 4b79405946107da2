from __future__ import annotations

import json
from importlib import resources
from typing import Any


def load_schema() -> dict[str, Any]:
    """Read the bundled record schema; every call returns a fresh dict."""
    with resources.files("gatherr").joinpath("schema.json").open("r", encoding="utf-8") as handle:
        data: dict[str, Any] = json.load(handle)
    return data
