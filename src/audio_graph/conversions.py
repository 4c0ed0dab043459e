"""MIDI note <-> frequency helpers (12-tone equal temperament)."""

from __future__ import annotations

import math

from audio_graph.units import Frequency, NoteNumber

A4_NOTE = 69
A4_FREQUENCY = 440.0


def note_to_frequency(note: NoteNumber, *, reference: Frequency = A4_FREQUENCY) -> Frequency:
    """Return the frequency in Hz of MIDI *note*, tuned so A4 = *reference*."""
    return reference * 2.0 ** ((note - A4_NOTE) / 12.0)


def frequency_to_note(frequency: Frequency, *, reference: Frequency = A4_FREQUENCY) -> NoteNumber:
    """Return the MIDI note nearest to *frequency*.

    Raises ValueError for non-positive frequencies.
    """
    if frequency <= 0.0:
        raise ValueError(f"Frequency must be positive, got {frequency}")
    return round(A4_NOTE + 12.0 * math.log2(frequency / reference))
