# -*- coding: utf-8 -*-
# Stackloft/loft/__init__.py

"""
Project: Stackloft
Author: Erfan Vaezi
Date: 9/16/2026 (Updated: 10/6/2026)

Modules:
--------
- core:       ParameterizedLoop, FaceBuilder and the LoftFace/LoftResult value types.

- algorithms: Loft algorithm implementations (perimeter_walk).

- registry:   Explicit name -> algorithm table, built-in algorithm enum, default
              registry factory and name resolution with fallback.

- segments:   Orchestrator: build_from_planes → LoftableModel of LoftSegments.

- config:     Sectioned defaults, key aliases, schema checks, JSON loading, logging setup.

- errors:     LoftError hierarchy (ConfigError, RegistryError, NoAlgorithmError).

- api:        Façade over bare arrays (loft_loops, loft_pair).

Usage:
    from loft.segments import build_from_planes
    model = build_from_planes(planes)
"""

__all__ = ["algorithms", "api", "config", "core", "errors", "registry", "segments"]
