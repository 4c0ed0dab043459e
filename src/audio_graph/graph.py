"""Copy-on-write graph operations.

Every function returns a new :class:`Graph`; the argument graph is never
modified. Lookups signal absence with ``None`` rather than raising.
"""

from __future__ import annotations

import logging
from typing import Optional

from audio_graph.errors import ChannelNotFoundError, NodeNotFoundError
from audio_graph.models import Connection, Graph, IdLike, Node, as_identifier
from audio_graph.nodes import NO_CHANNEL, destination_node, get_input_channel, get_output_channel

_LOGGER = logging.getLogger("audio_graph.graph")


def empty_graph() -> Graph:
    """A graph holding only the destination node."""
    dest = destination_node()
    return Graph(nodes={str(dest.id): dest})


def add_node(graph: Graph, node: Node) -> Graph:
    """Insert *node*, replacing any node with the same id."""
    return Graph(nodes={**graph.nodes, str(node.id): node}, connections=graph.connections)


def get_node(graph: Graph, id: IdLike) -> Optional[Node]:
    return graph.nodes.get(str(as_identifier(id)))


def remove_node(graph: Graph, id: IdLike) -> Graph:
    """Drop the node keyed by *id*.

    Connections referencing the node are left in place.
    """
    key = str(as_identifier(id))
    if key not in graph.nodes:
        _LOGGER.debug("remove_node: no node %r, ignoring", key)
        return graph
    nodes = {k: n for k, n in graph.nodes.items() if k != key}
    return Graph(nodes=nodes, connections=graph.connections)


def add_connection(graph: Graph, connection: Connection) -> Graph:
    """Prepend *connection*. Endpoints are not checked and duplicates are kept."""
    return Graph(nodes=graph.nodes, connections=(connection, *graph.connections))


def remove_connection(graph: Graph, connection: Connection) -> Graph:
    """Drop every connection equal to *connection*."""
    kept = tuple(c for c in graph.connections if c != connection)
    if len(kept) == len(graph.connections):
        _LOGGER.debug("remove_connection: %r not present, ignoring", connection)
        return graph
    return Graph(nodes=graph.nodes, connections=kept)


def connect(
    graph: Graph,
    output_id: IdLike,
    output_name: str,
    input_id: IdLike,
    input_name: str,
) -> Graph:
    """Connect two nodes by channel label instead of channel index.

    ``connect(g, "osc", "audio", "gain", "audio")`` looks up the ``audio``
    output of ``osc`` and the ``audio`` input of ``gain`` and prepends the
    resulting :class:`Connection`.

    Raises NodeNotFoundError if either node is missing, ChannelNotFoundError
    if either label is not declared on its node.
    """
    source = get_node(graph, output_id)
    if source is None:
        raise NodeNotFoundError(f"Output node '{as_identifier(output_id)}' not in graph")
    target = get_node(graph, input_id)
    if target is None:
        raise NodeNotFoundError(f"Input node '{as_identifier(input_id)}' not in graph")

    out_ch = get_output_channel(source, output_name)
    if out_ch == NO_CHANNEL:
        raise ChannelNotFoundError(f"Node '{source.id}' has no output '{output_name}'")
    in_ch = get_input_channel(target, input_name)
    if in_ch == NO_CHANNEL:
        raise ChannelNotFoundError(f"Node '{target.id}' has no input '{input_name}'")

    conn = Connection(
        output_node=source.id,
        output_channel=out_ch,
        input_node=target.id,
        input_channel=in_ch,
    )
    return add_connection(graph, conn)
