# genpass/config.py
"""
User defaults for genpass.
Saved as JSON in %APPDATA%/genpass/config.json (Windows) or ~/.genpass/config.json (fallback)
"""

import json
import logging
import os
from typing import Any, Dict

logger = logging.getLogger(__name__)

MAX_LENGTH = 2**32 - 1

CATEGORY_FLAGS = ("no_latin_lower", "no_latin_upper", "no_latin", "no_digits", "no_special")

DEFAULTS: Dict[str, Any] = {
    "length": 24,
    "copy": False,
    "allowed": [],
    "disallowed": [],
    **{flag: False for flag in CATEGORY_FLAGS},
}


def _config_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "genpass")
    return os.path.join(os.path.expanduser("~"), ".genpass")


def config_path() -> str:
    return os.path.join(_config_dir(), "config.json")


def _is_valid(key: str, value: Any) -> bool:
    if key == "length":
        return isinstance(value, int) and not isinstance(value, bool) and 0 < value <= MAX_LENGTH
    if key == "copy" or key in CATEGORY_FLAGS:
        return isinstance(value, bool)
    if key in ("allowed", "disallowed"):
        return isinstance(value, list) and all(isinstance(s, str) and s for s in value)
    return False


def _defaults() -> Dict[str, Any]:
    return {k: list(v) if isinstance(v, list) else v for k, v in DEFAULTS.items()}


def load_config() -> Dict[str, Any]:
    """
    Return the saved defaults merged over DEFAULTS.
    Unknown keys and values of the wrong type are dropped with a warning.
    """
    p = config_path()
    out = _defaults()
    if not os.path.exists(p):
        return out
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable config %s: %s", p, e)
        return out
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: expected a JSON object", p)
        return out

    for key, value in data.items():
        if _is_valid(key, value):
            out[key] = value
        else:
            logger.warning("Ignoring invalid config value %r for %r", value, key)
    return out


def save_config(cfg: Dict[str, Any]) -> str:
    """Atomically write the known keys of `cfg`. Returns the path written."""
    p = config_path()
    os.makedirs(os.path.dirname(p), exist_ok=True)
    data = {k: cfg[k] for k in DEFAULTS if k in cfg}
    tmp = p + ".tmp"
    with open(tmp, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
        f.flush()
        os.fsync(f.fileno())
    os.replace(tmp, p)
    logger.debug("Saved defaults to %s", p)
    return p
