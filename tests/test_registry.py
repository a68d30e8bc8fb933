"""Tests for loft/registry.py."""
import dataclasses
import logging
import pytest

from loft.errors import RegistryError, NoAlgorithmError
from loft.registry import (
    LoftAlgorithm, LoftRegistry, AlgorithmSpec, FALLBACK_ALGORITHM,
    default_registry, resolve_algorithm,
)
from loft.algorithms.perimeter_walk import perimeter_walk
from loft.core.faces import LoftResult


def _flat(loop_a, height_a, loop_b, height_b):
    return LoftResult([])


# --- LoftRegistry ---

def test_default_registry_holds_builtins():
    reg = default_registry()
    assert reg.names() == ["perimeter-walk"]
    assert LoftAlgorithm.PERIMETER_WALK in reg
    assert "perimeter-walk" in reg
    assert reg.lookup("perimeter-walk") is perimeter_walk
    assert reg.lookup(LoftAlgorithm.PERIMETER_WALK) is perimeter_walk


def test_default_registry_is_fresh_each_call():
    a = default_registry()
    a.register("flat", _flat)
    assert "flat" not in default_registry()


def test_fallback_is_builtin():
    assert FALLBACK_ALGORITHM == LoftAlgorithm.PERIMETER_WALK.value == "perimeter-walk"


def test_register_and_lookup():
    reg = LoftRegistry()
    assert len(reg) == 0
    reg.register("flat", _flat)
    assert reg.lookup("flat") is _flat
    assert reg.lookup("missing") is None
    assert len(reg) == 1


def test_register_duplicate_raises():
    reg = default_registry()
    with pytest.raises(RegistryError, match="Duplicate"):
        reg.register("perimeter-walk", _flat)


def test_register_non_callable_raises():
    with pytest.raises(RegistryError, match="callable"):
        LoftRegistry().register("x", 42)


def test_register_empty_name_raises():
    with pytest.raises(RegistryError, match="non-empty"):
        LoftRegistry().register("", _flat)


def test_algorithm_spec_is_frozen():
    spec = AlgorithmSpec("flat", _flat)
    with pytest.raises(dataclasses.FrozenInstanceError):
        spec.id = "other"


# --- resolve_algorithm ---

def test_resolve_explicit_name():
    reg = default_registry()
    reg.register("flat", _flat)
    res = resolve_algorithm(reg, "flat", configured="perimeter-walk")
    assert res.name == "flat"
    assert res.requested == "flat"
    assert res.fn is _flat
    assert not res.fell_back


def test_resolve_configured_default():
    reg = default_registry()
    reg.register("flat", _flat)
    res = resolve_algorithm(reg, None, configured="flat")
    assert res.fn is _flat


def test_resolve_nothing_uses_fallback_without_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="loft.registry"):
        res = resolve_algorithm(default_registry())
    assert res.requested is None
    assert res.name == FALLBACK_ALGORITHM
    assert not res.fell_back
    assert caplog.records == []


def test_resolve_unknown_warns_and_falls_back(caplog):
    with caplog.at_level(logging.WARNING, logger="loft.registry"):
        res = resolve_algorithm(default_registry(), "spline")
    assert res.fell_back
    assert res.requested == "spline"
    assert res.name == FALLBACK_ALGORITHM
    assert res.fn is perimeter_walk
    assert "Unknown loft algorithm: spline" in caplog.text


def test_resolve_with_empty_registry_is_fatal():
    with pytest.raises(NoAlgorithmError, match="No loft algorithms registered"):
        resolve_algorithm(LoftRegistry(), "spline")


def test_resolve_known_name_without_fallback_registered():
    reg = LoftRegistry()
    reg.register("flat", _flat)
    assert resolve_algorithm(reg, "flat").fn is _flat
    with pytest.raises(NoAlgorithmError):
        resolve_algorithm(reg, None)
