from __future__ import annotations


class AudioGraphError(ValueError):
    """Base error for audio-graph helpers."""


class NodeNotFoundError(AudioGraphError):
    """Raised when a helper needs a node that is not in the graph."""


class ChannelNotFoundError(AudioGraphError):
    """Raised when a channel label is not declared on a node."""
