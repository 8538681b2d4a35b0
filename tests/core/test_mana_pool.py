import random

import pytest

from arcane_core.config import ManaConfig
from arcane_core.core.components.mana import ResourcePool, effective_cost


def _pool(current: int = 0, maximum: int = 0) -> ResourcePool:
    return ResourcePool(current=current, max=maximum, settings=ManaConfig())


def test_initialize_sizes_from_stat_and_level():
    pool = _pool()
    pool.initialize(base_stat=25, level=3)
    assert pool.max == 50
    assert pool.current == 50
    assert pool.regen_per_tick == 5 + 3 * 2


def test_constructor_enforces_bounds():
    with pytest.raises(ValueError):
        ResourcePool(current=11, max=10)
    with pytest.raises(ValueError):
        ResourcePool(current=-1, max=10)


def test_try_consume():
    pool = _pool(30, 50)
    assert pool.try_consume(25)
    assert pool.current == 5
    assert not pool.try_consume(6)
    assert pool.current == 5
    assert pool.try_consume(5)
    assert pool.current == 0


def test_negative_amounts_rejected_without_mutation():
    pool = _pool(30, 50)
    assert not pool.try_consume(-5)
    assert pool.restore(-5) == 0
    assert pool.current == 30


def test_restore_clamps_to_max():
    pool = _pool(45, 50)
    assert pool.restore(20) == 5
    assert pool.current == 50


def test_regenerate_caps_at_max():
    pool = _pool(45, 50)
    pool.regen_per_tick = 7
    assert pool.regenerate() == 5
    assert pool.current == 50
    assert pool.regenerate() == 0


def test_recompute_max_preserves_fraction():
    pool = _pool()
    pool.initialize(base_stat=25, level=1)
    pool.try_consume(25)
    pool.recompute_max(50)
    assert (pool.current, pool.max) == (50, 100)
    pool.recompute_max(50)
    assert (pool.current, pool.max) == (50, 100)
    assert pool.fraction == pytest.approx(0.5)


def test_recompute_max_rounds():
    pool = _pool(1, 3)
    pool.recompute_max(5)  # max 10, 10 * 1/3 = 3.33
    assert (pool.current, pool.max) == (3, 10)


def test_recompute_from_zero_capacity_fills():
    pool = _pool()
    pool.recompute_max(10)
    assert (pool.current, pool.max) == (20, 20)


def test_recompute_to_zero_capacity():
    pool = _pool(20, 40)
    pool.recompute_max(0)
    assert (pool.current, pool.max) == (0, 0)
    assert pool.fraction == 0.0


def test_str_and_restore_to_max():
    pool = _pool(3, 10)
    assert str(pool) == "3/10"
    pool.restore_to_max()
    assert pool.current == 10


def test_bounds_hold_under_random_operations():
    rng = random.Random(1234)
    pool = _pool()
    pool.initialize(base_stat=40, level=2)
    for _ in range(2000):
        op = rng.choice(("consume", "restore", "regen", "rescale"))
        amount = rng.randint(-20, 60)
        if op == "consume":
            pool.try_consume(amount)
        elif op == "restore":
            pool.restore(amount)
        elif op == "regen":
            pool.regenerate()
        else:
            pool.recompute_max(rng.randint(0, 80))
        assert 0 <= pool.current <= pool.max


def test_effective_cost_examples():
    assert effective_cost(20, 5, 0.5) == 5
    assert effective_cost(20, 0, 0.25) == 15
    assert effective_cost(20, 3) == 17


def test_effective_cost_never_free_once_reduced():
    assert effective_cost(20, 50, 0.0) == 1
    assert effective_cost(20, 0, 1.0) == 1


def test_effective_cost_without_reductions_is_base():
    assert effective_cost(25) == 25
    assert effective_cost(0) == 0
