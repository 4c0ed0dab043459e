"""Export a graph to a JSON-compatible document for the downstream audio engine.

Document shape::

    {
      "nodes": {"<id>": {"id", "type", "params", "inputs", "outputs"}, ...},
      "connections": [
        {"outputNode", "outputChannel", "inputNode", "inputChannel"}, ...
      ]
    }

Connections keep the graph's order (most recent first). There is no decoder.
"""

from __future__ import annotations

import json
from typing import Any, Optional, Union

from audio_graph.models import (
    Connection,
    CustomKind,
    FrequencyParam,
    Graph,
    Node,
    NodeKind,
    NoteParam,
    Param,
    ValueParam,
)


def encode_kind(kind: NodeKind) -> str:
    """Built-in kinds render as their tag, custom kinds as their carried name."""
    if isinstance(kind, CustomKind):
        return kind.name
    return kind.tag


def encode_param(param: Param) -> Union[float, int, str]:
    if isinstance(param, (ValueParam, FrequencyParam)):
        return float(param.value)
    if isinstance(param, NoteParam):
        return int(param.value)
    return str(param.value)


def encode_node(node: Node) -> dict[str, Any]:
    return {
        "id": str(node.id),
        "type": encode_kind(node.kind),
        "params": {name: encode_param(p) for name, p in node.params.items()},
        "inputs": dict(node.inputs),
        "outputs": dict(node.outputs),
    }


def encode_connection(connection: Connection) -> dict[str, Any]:
    return {
        "outputNode": str(connection.output_node),
        "outputChannel": connection.output_channel,
        "inputNode": str(connection.input_node),
        "inputChannel": connection.input_channel,
    }


def encode_graph(graph: Graph) -> dict[str, Any]:
    """Return the structured document for *graph*."""
    return {
        "nodes": {key: encode_node(node) for key, node in graph.nodes.items()},
        "connections": [encode_connection(c) for c in graph.connections],
    }


def graph_to_json(graph: Graph, indent: Optional[int] = None) -> str:
    """Serialize :func:`encode_graph` output to JSON text."""
    return json.dumps(encode_graph(graph), indent=indent)
