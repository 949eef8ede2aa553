import pytest

from slotgraph.errors import InvalidSection, OutOfBounds
from slotgraph.grid import SECTIONS, Grid, section_index


def test_surface_dimensions_and_border():
    grid = Grid(3, 2)

    assert grid.height == 8
    assert grid.width == 11
    lines = grid.lines()
    assert len(lines) == 8
    assert lines[0] == 'x' * 11
    assert lines[-1] == 'x' * 11
    assert all(line[0] == 'x' and line[-1] == 'x' for line in lines)


def test_slot_centres_start_empty():
    grid = Grid(3, 2)

    assert grid.lines()[2] == 'x .  .  . x'
    assert grid.lines()[1] == 'x         x'
    assert all(grid.slot_empty(x, y) for x in range(1, 4) for y in range(1, 3))
    assert len(grid.empty_slots()) == 6


def test_custom_characters():
    grid = Grid(1, 1, empty_char='o', border_char='#')

    assert grid.lines() == ['#####', '#   #', '# o #', '#   #', '#####']


@pytest.mark.parametrize(
    'section, expected',
    [
        ('center', (5, 8)),
        ('top', (5, 7)),
        ('bottom', (5, 9)),
        ('left', (4, 8)),
        ('right', (6, 8)),
        ('topleft', (4, 7)),
        ('topright', (6, 7)),
        ('bottomleft', (4, 9)),
        ('bottomright', (6, 9)),
    ],
)
def test_section_index_formulas(section, expected):
    assert section_index(2, 3, section) == expected


def test_all_nine_sections_are_known():
    assert set(SECTIONS) == {
        'center', 'top', 'bottom', 'left', 'right',
        'topleft', 'topright', 'bottomleft', 'bottomright',
    }


def test_unknown_section_is_rejected():
    with pytest.raises(InvalidSection) as exc:
        section_index(1, 1, 'middle')

    assert 'middle' in str(exc.value)


def test_set_slot_marks_slot_occupied():
    grid = Grid(3, 3)
    grid.set_slot((2, 3), 'a')

    assert not grid.slot_empty(2, 3)
    assert grid.char_at(2, 3, 'center') == 'a'
    assert (2, 3) not in grid.empty_slots()


def test_direction_empty_tracks_section_contents():
    grid = Grid(3, 3)

    assert grid.direction_empty((2, 2), 'right')
    grid.update_position((2, 2), '-', 'right')
    assert not grid.direction_empty((2, 2), 'right')
    assert grid.direction_empty((2, 2), 'left')
    # the slot centre is never blank
    assert not grid.direction_empty((2, 2), 'center')


@pytest.mark.parametrize(
    'position, section',
    [((4, 1), 'left'), ((0, 1), 'center'), ((1, 3), 'top'), ((-5, 1), 'right')],
)
def test_writes_outside_interior_raise(position, section):
    grid = Grid(3, 2)

    with pytest.raises(OutOfBounds):
        grid.update_position(position, '*', section)
    assert grid.lines()[0] == 'x' * 11


def test_contains_checks_slot_bounds():
    grid = Grid(3, 2)

    assert grid.contains((3, 2))
    assert not grid.contains((4, 2))
    assert not grid.contains((1, 0))


def test_copy_is_independent():
    grid = Grid(2, 2)
    clone = grid.copy()
    clone.set_slot((1, 1), 'z')

    assert grid.slot_empty(1, 1)
    assert not clone.slot_empty(1, 1)
    assert len(grid.rows()) == grid.height
