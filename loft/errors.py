# -*- coding: utf-8 -*-
# Stackloft/loft/errors.py


"""
Project: Stackloft
Author: Erfan Vaezi
Date: 9/16/2026

Purpose
-------
Provide typed exceptions for the loft layer with compact, context-aware messages
to standardize error reporting across configuration, algorithm registration and
model building.

Main Tasks
----------
    1. Define LoftError(message, context) with a compact context suffix in __str__.
    2. Provide typed subclasses: ConfigError, RegistryError, NoAlgorithmError.
    3. Supply _format_context helper and expose public names via __all__.

Notes
-----
- Context is optional; long values are truncated for readability.
- Degenerate loops are NOT errors anywhere in the loft layer (they yield no faces).
"""

from __future__ import absolute_import

__all__ = [
    "LoftError",
    "ConfigError",
    "RegistryError",
    "NoAlgorithmError",
]


def _format_context(ctx):
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    parts = []
    for k in sorted(ctx.keys()):
        # Keep it short; avoid huge dumps
        sv = repr(ctx[k])
        if len(sv) > 120:
            sv = sv[:117] + "..."
        parts.append("{}={}".format(k, sv))
    return " | " + ", ".join(parts)


class LoftError(Exception):
    """
    Base class for all loft-layer errors.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Extra fields to append in the string form (e.g., {"name": "ruled"}).

    Notes
    -----
    - Subclasses inherit the same constructor.
    - __str__ appends a compact context suffix for faster debugging.
    """
    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super(LoftError, self).__init__(message)

    def __str__(self):
        base = super(LoftError, self).__str__()
        return base + _format_context(self.context)


class ConfigError(LoftError):
    """
    Per-key configuration issues detected by the schema:
      - unknown/invalid enum values
      - non-numeric where numeric is required
      - out-of-range scalar values
      - unreadable or non-object config files
    """


class RegistryError(LoftError):
    """
    Problems with the algorithm table:
      - duplicate registration of a name
      - empty names or non-callable algorithms
    """


class NoAlgorithmError(RegistryError):
    """
    No valid algorithm exists: the requested name is unknown AND the fallback
    algorithm is not registered. The build cannot proceed.
    """
