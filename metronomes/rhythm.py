"""Binary rhythm helpers: validation, text notation and step arithmetic.

A rhythm is a list of equal-length steps where ``1`` is a note and ``0`` is
a rest.  The text notation reads the same way a drum grid does::

	"x..x x.x."        ->  [1, 0, 0, 1, 1, 0, 1, 0]
	"1110 1010 | 0010" ->  [1, 1, 1, 0, 1, 0, 1, 0, 0, 0, 1, 0]

Whitespace, ``|`` and ``,`` only separate groups and are ignored.
"""

import typing


_NOTE_SYMBOLS = frozenset("1xX")
_REST_SYMBOLS = frozenset("0.~-")
_SEPARATORS = frozenset(" \t\r\n|,")


class RhythmNotationError (ValueError):
	pass


def validate (rhythm: typing.Iterable[typing.Any]) -> typing.List[int]:

	"""
	Return the rhythm as a list of ints, rejecting anything that is not 0 or 1.

	Booleans are accepted and converted.

	Raises:
		ValueError: If the rhythm is empty or a value is not 0 or 1.
	"""

	notes: typing.List[int] = []

	for position, value in enumerate(rhythm):

		if isinstance(value, bool):
			value = int(value)

		if not isinstance(value, int) or value not in (0, 1):
			raise ValueError(f"Rhythm values must be 0 or 1, got {value!r} at beat {position + 1}")

		notes.append(value)

	if not notes:
		raise ValueError("Rhythm cannot be empty")

	return notes


def parse (notation: str) -> typing.List[int]:

	"""
	Parse a text rhythm into a list of 0/1 steps.

	``1``, ``x`` and ``X`` are notes.  ``0``, ``.``, ``~`` and ``-`` are rests.

	Raises:
		RhythmNotationError: On an unknown symbol, or if no steps are found.
	"""

	steps: typing.List[int] = []

	for char in notation:

		if char in _SEPARATORS:
			continue

		if char in _NOTE_SYMBOLS:
			steps.append(1)
		elif char in _REST_SYMBOLS:
			steps.append(0)
		else:
			raise RhythmNotationError(f"Unknown rhythm symbol {char!r} in {notation!r}")

	if not steps:
		raise RhythmNotationError(f"No steps found in {notation!r}")

	return steps


def to_notation (rhythm: typing.Sequence[int], group: int = 4) -> str:

	"""Render a rhythm as ``x``/``.`` text, split into groups of ``group`` steps."""

	chars = ["x" if value else "." for value in rhythm]

	if group <= 0:
		return "".join(chars)

	return " ".join("".join(chars[i:i + group]) for i in range(0, len(chars), group))


def sequence_to_indices (rhythm: typing.Sequence[int]) -> typing.List[int]:

	"""Extract step indices where notes occur in a binary rhythm."""

	return [i for i, v in enumerate(rhythm) if v]


def divisors (n: int) -> typing.List[int]:

	"""
	Return every divisor of ``n`` in ascending order.

	These are the metronome intervals that stay in phase when a rhythm of
	length ``n`` loops.
	"""

	if n <= 0:
		raise ValueError(f"Length must be positive, got {n}")

	return [i for i in range(1, n + 1) if n % i == 0]


def metronome_beats (length: int, start_beat: int, interval: int) -> typing.List[int]:

	"""Return the 0-based step indices a metronome ticks on within ``length`` steps."""

	if interval <= 0:
		raise ValueError(f"Interval must be positive, got {interval}")

	return list(range(start_beat - 1, length, interval))
