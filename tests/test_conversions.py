from __future__ import annotations

import pytest

from audio_graph import frequency_to_note, note_to_frequency


class TestNoteToFrequency:
    def test_a4(self) -> None:
        assert note_to_frequency(69) == pytest.approx(440.0)

    def test_octaves(self) -> None:
        assert note_to_frequency(57) == pytest.approx(220.0)
        assert note_to_frequency(81) == pytest.approx(880.0)

    def test_middle_c(self) -> None:
        assert note_to_frequency(60) == pytest.approx(261.6256, rel=1e-6)

    def test_reference(self) -> None:
        assert note_to_frequency(69, reference=432.0) == pytest.approx(432.0)


class TestFrequencyToNote:
    def test_a4(self) -> None:
        assert frequency_to_note(440.0) == 69

    def test_nearest(self) -> None:
        assert frequency_to_note(262.0) == 60
        assert frequency_to_note(225.0) == 57

    def test_reference(self) -> None:
        assert frequency_to_note(432.0, reference=432.0) == 69

    @pytest.mark.parametrize("note", [0, 21, 60, 69, 108, 127])
    def test_inverse_of_note_to_frequency(self, note: int) -> None:
        assert frequency_to_note(note_to_frequency(note)) == note

    @pytest.mark.parametrize("freq", [0.0, -10.0])
    def test_non_positive_rejected(self, freq: float) -> None:
        with pytest.raises(ValueError, match="positive"):
            frequency_to_note(freq)
