"""Round-robin planning — positional placement, balance bounds, idempotence."""

from collections import Counter
from types import SimpleNamespace

import pytest

from farm.core.distribution import barn_index_for, plan_distribution
from farm.core.errors import InvariantViolationError


def _barns(n, color="RED"):
    return [SimpleNamespace(id=i + 1, name=f"{color}-{i}", color=color) for i in range(n)]


def _animals(n, color="RED"):
    return [SimpleNamespace(id=i + 1, favorite_color=color, barn_id=None) for i in range(n)]


def test_barn_index_wraps_around():
    assert [barn_index_for(i, 3) for i in range(7)] == [0, 1, 2, 0, 1, 2, 0]


def test_barn_index_without_barns_is_invariant_violation():
    with pytest.raises(InvariantViolationError):
        barn_index_for(0, 0)


def test_plan_assigns_animal_i_to_barn_i_mod_k():
    animals, barns = _animals(5), _barns(2)
    plan = plan_distribution(animals, barns)
    assert [(a.id, b.id) for a, b in plan] == [(1, 1), (2, 2), (3, 1), (4, 2), (5, 1)]


def test_plan_twenty_animals_over_two_barns_is_ten_ten():
    plan = plan_distribution(_animals(20), _barns(2))
    counts = Counter(b.id for _, b in plan)
    assert counts == {1: 10, 2: 10}


@pytest.mark.parametrize("n, k", [(1, 1), (7, 3), (41, 3), (59, 3), (100, 7)])
def test_plan_loads_within_one(n, k):
    counts = Counter(b.id for _, b in plan_distribution(_animals(n), _barns(k)))
    assert max(counts.values()) - min(counts.values()) <= 1


def test_plan_is_deterministic_for_same_inputs():
    animals, barns = _animals(13), _barns(4)
    first = [(a.id, b.id) for a, b in plan_distribution(animals, barns)]
    second = [(a.id, b.id) for a, b in plan_distribution(animals, barns)]
    assert first == second


def test_plan_with_no_animals_is_empty():
    assert plan_distribution([], _barns(2)) == []


def test_plan_without_barns_is_invariant_violation():
    with pytest.raises(InvariantViolationError) as exc_info:
        plan_distribution(_animals(3), [])
    assert exc_info.value.code == "INVARIANT_VIOLATION"


def test_plan_rejects_mixed_colors():
    with pytest.raises(InvariantViolationError):
        plan_distribution(_animals(2, "RED"), _barns(1, "BLUE"))
