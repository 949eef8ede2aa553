import pytest

from slotgraph.errors import InvalidName, InvalidPosition, InvalidWeight
from slotgraph.model import Edge, Position, Vertex


def test_position_coerces_pairs():
    assert Position.coerce([2, 3]) == Position(2, 3)
    assert Position.coerce((4, 1)).row == 1
    assert Position.coerce([2, 3]) == (2, 3)


@pytest.mark.parametrize(
    'value, message_part',
    [
        ((0, 1), 'strictly positive'),
        ((1, -2), 'strictly positive'),
        ((1.5, 2), 'integers'),
        (('1', 2), 'integers'),
        ((True, 1), 'integers'),
        ((1,), '(col, row) pair'),
        ('ab', '(col, row) pair'),
        (None, '(col, row) pair'),
    ],
)
def test_position_rejects_invalid_values(value, message_part):
    with pytest.raises(InvalidPosition) as exc:
        Position.coerce(value)

    assert message_part in str(exc.value)


def test_vertex_equality_is_by_position():
    a = Vertex((1, 1), 'a')
    same_spot = Vertex([1, 1], 'b')
    other = Vertex((2, 1), 'a')

    assert a == same_spot
    assert hash(a) == hash(same_spot)
    assert a != other
    assert len({a, same_spot, other}) == 2


def test_vertex_name_is_stringified_and_required():
    assert Vertex((1, 1), 3).name == '3'
    assert str(Vertex((1, 1), 'q')) == 'q'

    with pytest.raises(InvalidName):
        Vertex((1, 1), '')
    with pytest.raises(InvalidName):
        Vertex((1, 1), None)


def test_vertex_rejects_bad_position():
    with pytest.raises(InvalidPosition):
        Vertex((0, 3), 'a')


def test_vertices_order_by_row_then_column():
    vertices = [Vertex((3, 2), 'c'), Vertex((1, 2), 'b'), Vertex((5, 1), 'a')]

    assert [v.name for v in sorted(vertices)] == ['a', 'b', 'c']


def test_undirected_edges_match_in_either_order():
    a = Vertex((1, 1), 'a')
    b = Vertex((1, 3), 'b')

    assert Edge(a, b) == Edge(b, a)
    assert hash(Edge(a, b)) == hash(Edge(b, a))
    assert Edge(a, b).weight == 1
    assert not Edge(a, b).directed


def test_directed_edges_keep_their_orientation():
    a = Vertex((1, 1), 'a')
    b = Vertex((1, 3), 'b')

    assert Edge(a, b, directed=True) != Edge(b, a, directed=True)
    assert Edge(a, b, directed=True) != Edge(b, a)
    assert Edge(a, b, directed=True) == Edge(a, b)


@pytest.mark.parametrize('weight', [0, 8, 2.5, True, '3'])
def test_edge_rejects_invalid_weight(weight):
    a = Vertex((1, 1), 'a')
    b = Vertex((2, 2), 'b')

    with pytest.raises(InvalidWeight):
        Edge(a, b, weight=weight)


def test_edge_requires_vertex_endpoints():
    with pytest.raises(InvalidPosition):
        Edge('a', Vertex((1, 1), 'b'))


def test_errors_are_catchable_as_builtins():
    with pytest.raises(ValueError):
        Vertex((1, 1), '')
