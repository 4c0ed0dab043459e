from __future__ import annotations

import pytest

from audio_graph import (
    FrequencyParam,
    Graph,
    Node,
    ValueParam,
    add_node,
    connect,
    create_gain_node,
    create_oscillator_node,
    empty_graph,
    set_param,
)


@pytest.fixture
def osc_node() -> Node:
    """Oscillator 'oscA' tuned to 220 Hz."""
    return set_param(create_oscillator_node("oscA"), "frequency", FrequencyParam(value=220.0))


@pytest.fixture
def gain_node() -> Node:
    """Gain 'gain' at half level."""
    return set_param(create_gain_node("gain"), "gain", ValueParam(value=0.5))


@pytest.fixture
def synth_graph(osc_node: Node, gain_node: Node) -> Graph:
    """oscA -> gain -> destination (gain feeds both left and right)."""
    g = empty_graph()
    g = add_node(g, osc_node)
    g = add_node(g, gain_node)
    g = connect(g, "oscA", "audio", "gain", "audio")
    g = connect(g, "gain", "audio", "_destination", "left")
    g = connect(g, "gain", "audio", "_destination", "right")
    return g
