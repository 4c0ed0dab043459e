"""Semantic aliases for the scalar values flowing through a graph."""

from __future__ import annotations

# Hertz.
Frequency = float

# Routing index on a node; always non-negative.
Channel = int

# Free-form control level (gain, detune, ...).
ControlValue = float

# MIDI note number.
NoteNumber = int
