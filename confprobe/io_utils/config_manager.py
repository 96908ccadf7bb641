from __future__ import annotations
import os
from typing import Any, Optional

import anyio

from .json_loader import load_json

# chemin par défaut, surchargé par CONFPROBE_CONFIG
DEFAULT_CONFIG_PATH = "/root/test/new_config.conf"
ENV_CONFIG_PATH = "CONFPROBE_CONFIG"

def resolve_config_path(path: Optional[str] = None) -> str:
    """
    Ordre: chemin explicite, puis $CONFPROBE_CONFIG, puis DEFAULT_CONFIG_PATH.
    Aucune vérification du chemin ici, la lecture s'en charge.
    """
    if path:
        return str(path)
    return os.environ.get(ENV_CONFIG_PATH) or DEFAULT_CONFIG_PATH

async def load_config(path: Optional[str] = None, timeout: Optional[float] = None) -> Any:
    return await load_json(resolve_config_path(path), timeout=timeout)

def get_config(path: Optional[str] = None, timeout: Optional[float] = None) -> Any:
    """Version synchrone de load_config."""
    return anyio.run(load_config, path, timeout)
