import pytest

from slotgraph.config import GraphOptions
from slotgraph.errors import ConfigurationError


def test_default_options_are_valid():
    options = GraphOptions()
    options.validate()

    assert options.slot_count == 100
    assert options.resolved_vertex_count() == 10
    assert not options.weighting_enabled


def test_explicit_vertex_count_wins_over_density():
    options = GraphOptions(vertex_density=0.5, num_vertices=4)

    assert options.resolved_vertex_count() == 4


@pytest.mark.parametrize('num_weights, enabled', [(None, False), (0, False), (1, True), (7, True)])
def test_weighting_toggle(num_weights, enabled):
    options = GraphOptions(num_weights=num_weights)
    options.validate()

    assert options.weighting_enabled is enabled


@pytest.mark.parametrize(
    'overrides, message_part',
    [
        ({'num_weights': 8}, 'num_weights'),
        ({'num_weights': -1}, 'num_weights'),
        ({'num_weights': '3'}, 'num_weights'),
        ({'x_slots': 0}, 'x_slots'),
        ({'y_slots': -3}, 'y_slots'),
        ({'vertex_density': 1.5}, 'vertex_density'),
        ({'directed_freq': -0.1}, 'directed_freq'),
        ({'edge_frequency': -1}, 'edge_frequency'),
        ({'empty_char': '..'}, 'empty_char'),
        ({'border_char': ' '}, 'border_char'),
        ({'empty_char': 'x'}, 'must differ'),
        ({'max_placement_attempts': 0}, 'max_placement_attempts'),
    ],
)
def test_invalid_options_raise_configuration_error(overrides, message_part):
    options = GraphOptions(**overrides)

    with pytest.raises(ConfigurationError) as exc:
        options.validate()

    assert message_part in str(exc.value)
