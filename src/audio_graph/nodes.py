"""Node constructors, accessors and copy-on-write updates."""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from audio_graph.models import (
    CustomKind,
    DestinationKind,
    FrequencyParam,
    GainKind,
    Identifier,
    IdLike,
    Node,
    NodeKind,
    OscillatorKind,
    Param,
    ValueParam,
    WaveformParam,
    as_identifier,
)

_LOGGER = logging.getLogger("audio_graph.nodes")

DESTINATION_ID = "_destination"

# Returned by the channel lookups when a label is not declared.
NO_CHANNEL = -1


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------


def destination_node() -> Node:
    """The graph sink: stereo audio in, nothing out."""
    return Node(
        id=Identifier.from_string(DESTINATION_ID),
        kind=DestinationKind(),
        inputs={"left": 0, "right": 1},
    )


def create_oscillator_node(id: IdLike) -> Node:
    """Oscillator at 440 Hz sine; ``frequency`` and ``detune`` are modulation inputs."""
    return Node(
        id=as_identifier(id),
        kind=OscillatorKind(),
        params={
            "detune": ValueParam(value=0.0),
            "frequency": FrequencyParam(value=440.0),
            "waveform": WaveformParam(value="sine"),
        },
        inputs={"frequency": 0, "detune": 1},
        outputs={"audio": 0},
    )


def create_gain_node(id: IdLike) -> Node:
    """Unity gain; ``audio`` in, ``gain`` modulation in, ``audio`` out."""
    return Node(
        id=as_identifier(id),
        kind=GainKind(),
        params={"gain": ValueParam(value=1.0)},
        inputs={"audio": 0, "gain": 1},
        outputs={"audio": 0},
    )


def create_custom_node(
    kind_name: str,
    params: Mapping[str, Param],
    inputs: Mapping[str, int],
    outputs: Mapping[str, int],
    id: IdLike,
) -> Node:
    """Build a node of a user-defined kind from caller-supplied maps.

    The kind name is carried through to the encoded ``type`` field; nothing
    in this package interprets it.
    """
    return Node(
        id=as_identifier(id),
        kind=CustomKind(name=kind_name),
        params=dict(params),
        inputs=dict(inputs),
        outputs=dict(outputs),
    )


# ---------------------------------------------------------------------------
# Accessors
# ---------------------------------------------------------------------------


def get_id(node: Node) -> Identifier:
    return node.id


def get_kind(node: Node) -> NodeKind:
    return node.kind


def get_param(node: Node, name: str) -> Optional[Param]:
    return node.params.get(name)


def get_input_channel(node: Node, name: str) -> int:
    return node.inputs.get(name, NO_CHANNEL)


def get_output_channel(node: Node, name: str) -> int:
    return node.outputs.get(name, NO_CHANNEL)


# ---------------------------------------------------------------------------
# Updates
# ---------------------------------------------------------------------------


def _replace(node: Node, **changes: object) -> Node:
    """Build a validated copy of *node* with some fields swapped out."""
    return Node(**{**dict(node), **changes})


def set_param(node: Node, name: str, value: Param) -> Node:
    """Return a copy of *node* with param *name* set to *value*.

    Only existing params are replaced: an unknown *name* returns *node*
    unchanged, so the param set never grows through this path.
    """
    if name not in node.params:
        _LOGGER.debug("set_param: node %s has no param %r, ignoring", node.id, name)
        return node
    return _replace(node, params={**node.params, name: value})


def set_params(node: Node, params: Mapping[str, Param]) -> Node:
    return _replace(node, params=dict(params))


def set_inputs(node: Node, inputs: Mapping[str, int]) -> Node:
    return _replace(node, inputs=dict(inputs))


def set_outputs(node: Node, outputs: Mapping[str, int]) -> Node:
    return _replace(node, outputs=dict(outputs))
