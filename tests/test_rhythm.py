import pytest

import metronomes.rhythm


def test_parse_x_notation () -> None:

	"""Drum-grid notation maps x to notes and . to rests."""

	assert metronomes.rhythm.parse("x..x x.x.") == [1, 0, 0, 1, 1, 0, 1, 0]


def test_parse_binary_notation_with_separators () -> None:

	"""Digits work too, and bar lines, commas and whitespace are ignored."""

	assert metronomes.rhythm.parse("1110 | 1010,\n0010") == [1, 1, 1, 0, 1, 0, 1, 0, 0, 0, 1, 0]


def test_parse_alternative_rest_symbols () -> None:

	"""~ and - are rests, X is a note."""

	assert metronomes.rhythm.parse("X~-.") == [1, 0, 0, 0]


def test_parse_unknown_symbol () -> None:

	"""Unknown characters raise RhythmNotationError naming the symbol."""

	with pytest.raises(metronomes.rhythm.RhythmNotationError, match="'k'"):
		metronomes.rhythm.parse("x.k.")


def test_parse_empty () -> None:

	"""A notation with no steps is rejected."""

	with pytest.raises(metronomes.rhythm.RhythmNotationError):
		metronomes.rhythm.parse(" | ")


def test_notation_error_is_value_error () -> None:

	"""RhythmNotationError can be caught as a ValueError."""

	assert issubclass(metronomes.rhythm.RhythmNotationError, ValueError)


def test_to_notation_groups () -> None:

	"""Steps are grouped in fours by default."""

	assert metronomes.rhythm.to_notation([1, 1, 1, 0, 1, 0]) == "xxx. x."


def test_to_notation_ungrouped () -> None:

	"""A group size of 0 renders one unbroken string."""

	assert metronomes.rhythm.to_notation([1, 0, 1], group=0) == "x.x"


def test_to_notation_parses_back (sample_rhythm) -> None:

	"""Rendered notation parses back to the same rhythm."""

	assert metronomes.rhythm.parse(metronomes.rhythm.to_notation(sample_rhythm)) == sample_rhythm


def test_validate_returns_list () -> None:

	"""Tuples and booleans become a list of ints."""

	assert metronomes.rhythm.validate((True, 0, 1)) == [1, 0, 1]


def test_validate_rejects_empty () -> None:

	"""An empty rhythm is an error."""

	with pytest.raises(ValueError, match="empty"):
		metronomes.rhythm.validate([])


def test_validate_reports_beat () -> None:

	"""The 1-based beat of the bad value is named."""

	with pytest.raises(ValueError, match="beat 3"):
		metronomes.rhythm.validate([1, 0, 7])


def test_sequence_to_indices () -> None:

	"""Extract indices of notes."""

	assert metronomes.rhythm.sequence_to_indices([1, 0, 0, 1, 1]) == [0, 3, 4]
	assert metronomes.rhythm.sequence_to_indices([0, 0]) == []


def test_divisors () -> None:

	"""Divisors are returned in ascending order."""

	assert metronomes.rhythm.divisors(32) == [1, 2, 4, 8, 16, 32]
	assert metronomes.rhythm.divisors(12) == [1, 2, 3, 4, 6, 12]
	assert metronomes.rhythm.divisors(7) == [1, 7]
	assert metronomes.rhythm.divisors(1) == [1]


def test_divisors_rejects_non_positive () -> None:

	"""Zero has no meaningful list of intervals."""

	with pytest.raises(ValueError):
		metronomes.rhythm.divisors(0)


def test_metronome_beats () -> None:

	"""Tick indices run from the start beat to the end of the rhythm."""

	assert metronomes.rhythm.metronome_beats(16, 3, 4) == [2, 6, 10, 14]
	assert metronomes.rhythm.metronome_beats(8, 8, 8) == [7]


def test_metronome_beats_rejects_non_positive_interval () -> None:

	"""An interval of 0 would never advance."""

	with pytest.raises(ValueError):
		metronomes.rhythm.metronome_beats(8, 1, 0)
