"""audio-graph: build audio-processing topologies and export them as JSON documents."""

from audio_graph.conversions import A4_FREQUENCY, A4_NOTE, frequency_to_note, note_to_frequency
from audio_graph.encode import (
    encode_connection,
    encode_graph,
    encode_kind,
    encode_node,
    encode_param,
    graph_to_json,
)
from audio_graph.errors import AudioGraphError, ChannelNotFoundError, NodeNotFoundError
from audio_graph.graph import (
    add_connection,
    add_node,
    connect,
    empty_graph,
    get_node,
    remove_connection,
    remove_node,
)
from audio_graph.models import (
    Connection,
    CustomKind,
    DestinationKind,
    FrequencyParam,
    GainKind,
    Graph,
    Identifier,
    IdLike,
    Node,
    NodeKind,
    NoteParam,
    OscillatorKind,
    Param,
    ValueParam,
    WaveformParam,
    as_identifier,
)
from audio_graph.nodes import (
    DESTINATION_ID,
    NO_CHANNEL,
    create_custom_node,
    create_gain_node,
    create_oscillator_node,
    destination_node,
    get_id,
    get_input_channel,
    get_kind,
    get_output_channel,
    get_param,
    set_inputs,
    set_outputs,
    set_param,
    set_params,
)
from audio_graph.units import Channel, ControlValue, Frequency, NoteNumber
from audio_graph.validate import GraphValidationError, validate_graph

__all__ = [
    "A4_FREQUENCY",
    "A4_NOTE",
    "DESTINATION_ID",
    "NO_CHANNEL",
    "AudioGraphError",
    "Channel",
    "ChannelNotFoundError",
    "Connection",
    "ControlValue",
    "CustomKind",
    "DestinationKind",
    "Frequency",
    "FrequencyParam",
    "GainKind",
    "Graph",
    "GraphValidationError",
    "IdLike",
    "Identifier",
    "Node",
    "NodeKind",
    "NodeNotFoundError",
    "NoteNumber",
    "NoteParam",
    "OscillatorKind",
    "Param",
    "ValueParam",
    "WaveformParam",
    "add_connection",
    "add_node",
    "as_identifier",
    "connect",
    "create_custom_node",
    "create_gain_node",
    "create_oscillator_node",
    "destination_node",
    "empty_graph",
    "encode_connection",
    "encode_graph",
    "encode_kind",
    "encode_node",
    "encode_param",
    "frequency_to_note",
    "get_id",
    "get_input_channel",
    "get_kind",
    "get_node",
    "get_output_channel",
    "get_param",
    "graph_to_json",
    "note_to_frequency",
    "remove_connection",
    "remove_node",
    "set_inputs",
    "set_outputs",
    "set_param",
    "set_params",
    "validate_graph",
]
