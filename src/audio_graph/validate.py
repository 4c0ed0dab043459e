"""Optional strict checks for graphs.

The graph operations are deliberately permissive (dangling connections,
duplicate connections and undeclared channels are all representable).
:func:`validate_graph` reports those conditions for callers that want to
reject them before handing a document to the audio engine.
"""

from __future__ import annotations

from collections import Counter
from typing import Mapping

from audio_graph.models import Graph, Node
from audio_graph.nodes import DESTINATION_ID


class GraphValidationError(str):
    """A structured validation error that behaves as a plain string.

    Subclasses ``str`` so callers can compare, join and print errors
    directly while still inspecting ``kind``/``node_id``/``severity``.
    """

    kind: str
    node_id: str | None
    field_name: str | None
    severity: str  # "error" | "warning"

    def __new__(
        cls,
        kind: str,
        message: str,
        *,
        node_id: str | None = None,
        field_name: str | None = None,
        severity: str = "error",
    ) -> GraphValidationError:
        return super().__new__(cls, message)

    def __init__(
        self,
        kind: str,
        message: str,
        *,
        node_id: str | None = None,
        field_name: str | None = None,
        severity: str = "error",
    ) -> None:
        self.kind = kind
        self.node_id = node_id
        self.field_name = field_name
        self.severity = severity


def _check_routing_map(node: Node, field_name: str, errors: list[GraphValidationError]) -> None:
    """Flag channel indices claimed by more than one label."""
    routing: Mapping[str, int] = getattr(node, field_name)
    counts = Counter(routing.values())
    for channel in sorted(ch for ch, n in counts.items() if n > 1):
        labels = sorted(label for label, ch in routing.items() if ch == channel)
        errors.append(
            GraphValidationError(
                "duplicate_channel",
                f"Node '{node.id}' {field_name} channel {channel} is shared by "
                f"{', '.join(repr(lb) for lb in labels)}",
                node_id=str(node.id),
                field_name=field_name,
            )
        )


def validate_graph(graph: Graph) -> list[GraphValidationError]:
    """Validate an audio graph and return a list of errors (empty = valid).

    Warnings (``severity == "warning"``) are appended after all errors.
    """
    errors: list[GraphValidationError] = []
    warnings: list[GraphValidationError] = []

    # 1. Destination present
    if DESTINATION_ID not in graph.nodes:
        errors.append(
            GraphValidationError(
                "missing_destination",
                f"Graph has no destination node '{DESTINATION_ID}'",
                node_id=DESTINATION_ID,
            )
        )

    # 2. Node keys agree with node ids, routing maps are unambiguous
    for key, node in graph.nodes.items():
        if key != str(node.id):
            errors.append(
                GraphValidationError(
                    "key_mismatch",
                    f"Node '{node.id}' is stored under key '{key}'",
                    node_id=str(node.id),
                )
            )
        _check_routing_map(node, "inputs", errors)
        _check_routing_map(node, "outputs", errors)

    # 3. Connection endpoints resolve to declared nodes and channels
    for conn in graph.connections:
        src = graph.nodes.get(str(conn.output_node))
        dst = graph.nodes.get(str(conn.input_node))
        if src is None:
            errors.append(
                GraphValidationError(
                    "dangling_connection",
                    f"Connection references unknown output node '{conn.output_node}'",
                    node_id=str(conn.output_node),
                    field_name="output_node",
                )
            )
        elif conn.output_channel not in src.outputs.values():
            errors.append(
                GraphValidationError(
                    "unknown_channel",
                    f"Node '{src.id}' has no output channel {conn.output_channel}",
                    node_id=str(src.id),
                    field_name="output_channel",
                )
            )
        if dst is None:
            errors.append(
                GraphValidationError(
                    "dangling_connection",
                    f"Connection references unknown input node '{conn.input_node}'",
                    node_id=str(conn.input_node),
                    field_name="input_node",
                )
            )
        elif conn.input_channel not in dst.inputs.values():
            errors.append(
                GraphValidationError(
                    "unknown_channel",
                    f"Node '{dst.id}' has no input channel {conn.input_channel}",
                    node_id=str(dst.id),
                    field_name="input_channel",
                )
            )

    # 4. Repeated connections
    for conn, count in Counter(graph.connections).items():
        if count > 1:
            warnings.append(
                GraphValidationError(
                    "duplicate_connection",
                    f"Connection {conn.output_node}:{conn.output_channel} -> "
                    f"{conn.input_node}:{conn.input_channel} appears {count} times",
                    node_id=str(conn.output_node),
                    severity="warning",
                )
            )

    errors.extend(warnings)
    return errors
