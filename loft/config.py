# -*- coding: utf-8 -*-
# Stackloft/loft/config.py

"""
Project: Stackloft
Author: Erfan Vaezi
Date: 9/16/2026 (Updated: 10/2/2026)

Purpose
-------
Assemble the loft configuration from sectioned defaults and user overrides. Friendly
keys are canonicalized, categorical and numeric values are checked, and the result is
a flat dict consumed by the orchestrator, the exporters and the logging setup.

Main Tasks
----------
    1. Flatten curated defaults (LOFT / LOGGING / EXPORT sections).
    2. Canonicalize params via `normalize_keys` using curated `ALIASES`.
    3. Enforce `ENUMS` and `RANGES`, raising ConfigError with context.
    4. Load overrides from a JSON file (`load_config`).
    5. Configure stdlib logging from the merged config (`configure_logging`).

Notes
-----
- DEFAULT_ALGORITHM is only a *name*; whether it is registered is decided at build
  time by the registry (unknown names fall back with a warning there).
- DEFAULT_ALGORITHM may be set to None to defer to the hardcoded fallback.
- The walk's tie tolerance is a fixed constant of the algorithm and is not a key here.
- Unknown keys pass through untouched; only listed keys are validated.
"""

from __future__ import absolute_import
import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional
from .errors import ConfigError

__all__ = [
    "ALIASES", "ENUMS", "RANGES",
    "normalize_keys", "validate", "build_config", "load_config", "configure_logging",
]


# -----------------------------
_DEFAULTS_SECTIONS = [
    ("LOFT", {
        "DEFAULT_ALGORITHM": "perimeter-walk",
    }),
    ("LOGGING", {
        "LOG_LEVEL": "INFO",
        "LOG_FORMAT": "%(levelname)s:%(name)s:%(message)s",
    }),
    ("EXPORT", {
        "OBJ_PRECISION": 6,
    }),
]


def _flatten_defaults(sections):
    """
    Turn sectioned defaults into a single flat dict (stable order preserved).
    """
    flat = {}  # type: Dict[str, Any]
    for _name, block in sections:
        flat.update(block)
    return flat


_DEFAULTS = _flatten_defaults(_DEFAULTS_SECTIONS)

# --------------------------
# Canonicalization (aliases)
# --------------------------
ALIASES = {
    "algorithm": "DEFAULT_ALGORITHM",
    "default_algorithm": "DEFAULT_ALGORITHM",
    "log_level": "LOG_LEVEL",
    "level": "LOG_LEVEL",
    "log_format": "LOG_FORMAT",
    "precision": "OBJ_PRECISION",
    "obj_precision": "OBJ_PRECISION",
}

# --------------------------
# Enumerations (exact sets)
# --------------------------
# Matched case-insensitively; stored upper-case.
ENUMS = {
    "LOG_LEVEL": {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"},
}

# --------------------------
# Numeric ranges (inclusive)
# --------------------------
# key -> (min, max)
RANGES = {
    "OBJ_PRECISION": (0, 17),
}


def normalize_keys(params: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Map user-friendly keys to canonical keys (no value coercion).

    Only keys present in `ALIASES` are rewritten; all others are passed through.
    """
    out = {}  # type: Dict[str, Any]
    for k, v in params.items():
        out[ALIASES.get(k, k)] = v
    return out


def validate(params: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Check canonicalized params and return a copy with normalized values.

    Raises
    ------
    ConfigError
        On enum/range/type violations.
    """
    out = dict(params)

    if "DEFAULT_ALGORITHM" in out:
        name = out["DEFAULT_ALGORITHM"]
        if name is not None and (not isinstance(name, str) or not name.strip()):
            raise ConfigError("DEFAULT_ALGORITHM must be a non-empty string or None.",
                              {"key": "DEFAULT_ALGORITHM", "value": name})
        if name is not None:
            out["DEFAULT_ALGORITHM"] = name.strip()

    for key, allowed in ENUMS.items():
        if key not in out:
            continue
        val = out[key]
        if not isinstance(val, str) or val.upper() not in allowed:
            raise ConfigError("Invalid value for {}".format(key),
                              {"key": key, "value": val, "allowed": sorted(allowed)})
        out[key] = val.upper()

    for key, (lo, hi) in RANGES.items():
        if key not in out:
            continue
        val = out[key]
        if isinstance(val, bool) or not isinstance(val, (int, float)):
            raise ConfigError("{} must be numeric".format(key), {"key": key, "value": val})
        if int(val) != val:
            raise ConfigError("{} must be an integer".format(key), {"key": key, "value": val})
        if not (lo <= val <= hi):
            raise ConfigError("{} out of range".format(key),
                              {"key": key, "value": val, "min": lo, "max": hi})
        out[key] = int(val)

    return out


# ---------- Public API ----------
def build_config(params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """
    Merge user params over sectioned defaults and return a flat dict.
    """
    cfg = dict(_DEFAULTS)  # start from defaults
    if params:
        # Canonicalize and validate *before* merging
        cfg.update(validate(normalize_keys(params)))
    return cfg


def load_config(path) -> Dict[str, Any]:
    """
    Read a JSON object of overrides from `path` and merge it over the defaults.

    Raises
    ------
    ConfigError
        If the file is missing, is not valid JSON, or is not a JSON object.
    """
    p = Path(path)
    try:
        with p.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ConfigError("Config file not found", {"path": str(p)})
    except ValueError as e:
        raise ConfigError("Config file is not valid JSON: {}".format(e), {"path": str(p)})
    if not isinstance(data, dict):
        raise ConfigError("Config file must contain a JSON object",
                          {"path": str(p), "type": type(data).__name__})
    return build_config(data)


def configure_logging(cfg: Optional[Mapping[str, Any]] = None) -> None:
    """
    Configure root logging from LOG_LEVEL / LOG_FORMAT (defaults when cfg is None).
    """
    cfg = cfg if cfg is not None else _DEFAULTS
    level = cfg.get("LOG_LEVEL", _DEFAULTS["LOG_LEVEL"])
    fmt = cfg.get("LOG_FORMAT", _DEFAULTS["LOG_FORMAT"])
    logging.basicConfig(level=getattr(logging, level), format=fmt)
