# -*- coding: utf-8 -*-
# Stackloft/loft/registry.py

"""
Project: Stackloft
Author: Erfan Vaezi
Date: 9/19/2026 (Updated: 10/6/2026)

Purpose:
--------
Name -> algorithm table for loft strategies. Each algorithm is bound once into an
`AlgorithmSpec` and stored in a `LoftRegistry` built explicitly at the composition
root (see `default_registry`) and handed to the orchestrator. Nothing is registered
as an import side effect.

Main Tasks:
-----------
   - `LoftAlgorithm`: closed set of built-in algorithm names.
   - `LoftRegistry.register / lookup`: write-once-per-name, read-many table.
   - `default_registry()`: fresh table with every built-in algorithm.
   - `resolve_algorithm(...)`: explicit name, else configured default, else
     FALLBACK_ALGORITHM; returns an `AlgorithmResolution` value recording whether
     the fallback was used.

Inputs/Contracts:
-----------------
   - Algorithm signature: fn(loop_a, height_a, loop_b, height_b) -> LoftResult.
   - Unknown requested name: WARNING + fallback (recoverable).
   - Fallback itself missing: NoAlgorithmError (fatal).

Notes:
------
   - Populate the registry before any build; afterwards it is only read, so sharing
     one instance between threads needs no locking.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional
from .errors import RegistryError, NoAlgorithmError
from .algorithms.perimeter_walk import perimeter_walk

logger = logging.getLogger(__name__)


class LoftAlgorithm(str, Enum):
    """Built-in loft algorithms."""
    PERIMETER_WALK = "perimeter-walk"


# Hardcoded last-resort default
FALLBACK_ALGORITHM = LoftAlgorithm.PERIMETER_WALK.value

_BUILTINS = {
    LoftAlgorithm.PERIMETER_WALK: perimeter_walk,
}


# ---- Specs ----

@dataclass(frozen=True)
class AlgorithmSpec:
    id: str
    fn: Callable  # signature: fn(loop_a, height_a, loop_b, height_b) -> LoftResult


@dataclass(frozen=True)
class AlgorithmResolution:
    """
    Outcome of resolving an algorithm name.

    requested : name asked for (explicit or configured), None if neither was given
    name      : name actually used
    fn        : algorithm callable
    fell_back : True when `requested` was unknown and FALLBACK_ALGORITHM was used
    """
    requested: Optional[str]
    name: str
    fn: Callable
    fell_back: bool = False


# ---- Registry ----

class LoftRegistry:
    """
    Explicit name -> AlgorithmSpec table.

    Names are plain strings; `LoftAlgorithm` members are accepted wherever a name is.
    """

    def __init__(self):
        self._specs = {}  # type: Dict[str, AlgorithmSpec]

    @staticmethod
    def _key(name) -> str:
        return name.value if isinstance(name, LoftAlgorithm) else name

    def register(self, name, fn: Callable) -> None:
        """
        Bind `fn` under `name`.

        Raises
        ------
        RegistryError
            Empty/non-string name, non-callable fn, or duplicate name.
        """
        key = self._key(name)
        if not isinstance(key, str) or not key:
            raise RegistryError("Algorithm name must be a non-empty string.", {"name": name})
        if not callable(fn):
            raise RegistryError("Algorithm must be callable.", {"name": key, "fn": fn})
        if key in self._specs:
            raise RegistryError("Duplicate algorithm name in registry: {}".format(key), {"name": key})
        self._specs[key] = AlgorithmSpec(key, fn)
        logger.debug("[LoftRegistry] registered %s", key)

    def lookup(self, name) -> Optional[Callable]:
        """Return the algorithm bound to `name`, or None."""
        spec = self._specs.get(self._key(name))
        return spec.fn if spec is not None else None

    def names(self) -> List[str]:
        """Registered names in registration order."""
        return list(self._specs)

    def __contains__(self, name) -> bool:
        return self._key(name) in self._specs

    def __len__(self) -> int:
        return len(self._specs)


def default_registry() -> LoftRegistry:
    """
    Build a fresh registry holding every built-in algorithm.
    """
    reg = LoftRegistry()
    for algo, fn in _BUILTINS.items():
        reg.register(algo, fn)
    return reg


def resolve_algorithm(registry: LoftRegistry,
                      requested=None,
                      configured: Optional[str] = None) -> AlgorithmResolution:
    """
    Pick the algorithm for a build.

    Order: `requested`, else `configured`, else FALLBACK_ALGORITHM. An unknown name
    logs a warning and falls back to FALLBACK_ALGORITHM.

    Raises
    ------
    NoAlgorithmError
        If the chosen name is unknown and FALLBACK_ALGORITHM is not registered either.
    """
    asked = requested if requested is not None else configured
    if asked is not None:
        asked = LoftRegistry._key(asked)
    name = asked if asked is not None else FALLBACK_ALGORITHM

    fn = registry.lookup(name)
    if fn is not None:
        return AlgorithmResolution(requested=asked, name=name, fn=fn)

    logger.warning("Unknown loft algorithm: %s, using %s", name, FALLBACK_ALGORITHM)
    fallback = registry.lookup(FALLBACK_ALGORITHM)
    if fallback is None:
        raise NoAlgorithmError("No loft algorithms registered",
                               {"requested": name, "fallback": FALLBACK_ALGORITHM,
                                "registered": registry.names()})
    return AlgorithmResolution(requested=asked, name=FALLBACK_ALGORITHM, fn=fallback, fell_back=True)
