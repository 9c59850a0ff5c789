"""Distributor — persists every animal, idempotent across repeated calls."""

import pytest

from farm.core.domain_types import Color
from farm.core.errors import InvariantViolationError
from farm.models.barn import Barn
from farm.services.distributor import Distributor

from tests.services.partition_helpers import make_animals


@pytest.fixture
async def red_barns(store):
    return [
        await store.save_barn(Barn(name=f"RED-{i}", color=Color.RED))
        for i in range(3)
    ]


@pytest.fixture
async def red_animals(store):
    return [await store.save_animal(a) for a in make_animals(Color.RED, 8)]


async def test_distribute_round_robin_and_persists(store, red_barns, red_animals):
    await Distributor(store).distribute(red_animals, red_barns)

    stored = await store.find_animals_by_color(Color.RED)
    assert [a.barn_id for a in stored] == [red_barns[i % 3].id for i in range(8)]


async def test_distribute_twice_gives_same_assignment(store, red_barns, red_animals):
    distributor = Distributor(store)
    await distributor.distribute(red_animals, red_barns)
    first = [(a.id, a.barn_id) for a in await store.find_animals_by_color(Color.RED)]

    await distributor.distribute(red_animals, red_barns)
    second = [(a.id, a.barn_id) for a in await store.find_animals_by_color(Color.RED)]

    assert first == second


async def test_distribute_overwrites_previous_assignment(store, red_barns, red_animals):
    for animal in red_animals:
        animal.barn_id = red_barns[2].id
    await Distributor(store).distribute(red_animals, red_barns[:2])

    stored = await store.find_animals_by_color(Color.RED)
    assert {a.barn_id for a in stored} == {red_barns[0].id, red_barns[1].id}


async def test_distribute_without_barns_raises(store, red_animals):
    with pytest.raises(InvariantViolationError):
        await Distributor(store).distribute(red_animals, [])
