import numpy as np
import pytest

from slotgraph.errors import PlacementExhausted
from slotgraph.grid import Grid
from slotgraph.placement import name_sequence, place_random


def test_name_sequence_digits_then_letters_without_v():
    names = name_sequence()

    assert names[:12] == list('0123456789ab')
    assert 'v' not in names
    assert 'V' in names
    assert len(names) == 61
    assert names[-1] == 'Z'


def test_name_sequence_skips_reserved_characters():
    names = name_sequence('0a')

    assert names[0] == '1'
    assert 'a' not in names
    assert 'v' in names
    assert len(name_sequence('')) == 62


def test_placing_every_slot_gives_unique_positions():
    grid = Grid(3, 2)
    rng = np.random.default_rng(5)

    vertices = [place_random(grid, name, rng) for name in 'abcdef']

    positions = {v.position for v in vertices}
    assert len(positions) == 6
    assert all(grid.contains(p) for p in positions)
    assert grid.empty_slots() == []
    for vertex in vertices:
        assert grid.char_at(*vertex.position, 'center') == vertex.name


def test_full_grid_raises_placement_exhausted():
    grid = Grid(1, 2)
    rng = np.random.default_rng(0)
    place_random(grid, 'a', rng)
    place_random(grid, 'b', rng)

    with pytest.raises(PlacementExhausted):
        place_random(grid, 'c', rng)


class _CornerRng:
    """Always draws slot (1, 1)."""

    def integers(self, n):
        return 0


def test_attempt_cap_is_enforced():
    grid = Grid(3, 3)
    grid.set_slot((1, 1), '#')

    with pytest.raises(PlacementExhausted) as exc:
        place_random(grid, 'a', _CornerRng(), max_attempts=5)

    assert 'within 5 attempts' in str(exc.value)
    assert len(grid.empty_slots()) == 8


def test_placement_is_reproducible_with_seed():
    first = [place_random(Grid(5, 5), 'a', np.random.default_rng(42)).position for _ in range(3)]

    assert len(set(first)) == 1
