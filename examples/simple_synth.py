"""Oscillator through a gain stage into both destination channels."""

from audio_graph import (
    FrequencyParam,
    ValueParam,
    add_node,
    connect,
    create_gain_node,
    create_oscillator_node,
    empty_graph,
    graph_to_json,
    note_to_frequency,
    set_param,
    validate_graph,
)

osc = create_oscillator_node("oscA")
osc = set_param(osc, "frequency", FrequencyParam(value=note_to_frequency(57)))
gain = set_param(create_gain_node("gain"), "gain", ValueParam(value=0.5))

graph = empty_graph()
graph = add_node(graph, osc)
graph = add_node(graph, gain)
graph = connect(graph, "oscA", "audio", "gain", "audio")
graph = connect(graph, "gain", "audio", "_destination", "left")
graph = connect(graph, "gain", "audio", "_destination", "right")

if __name__ == "__main__":
    errors = validate_graph(graph)
    if errors:
        print("Validation errors:")
        for e in errors:
            print(f"  - {e}")
    else:
        print("Graph is valid.")
    print()
    print(graph_to_json(graph, indent=2))
