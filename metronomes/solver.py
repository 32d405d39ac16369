"""Greedy metronome coverage of a looping binary rhythm.

A metronome is a periodic tick pattern described by the beat it starts on and
the interval between ticks.  It "works" for a rhythm when every tick lands on
a note.  ``solve()`` finds a set of working metronomes that together cover
every note, trying the smallest intervals first and, within an interval, the
earliest start beats first.

Only intervals that divide the rhythm length are considered, so each
metronome keeps the same phase when the rhythm loops.

```python
result = metronomes.solver.solve([1, 0, 1, 0, 1, 1, 1, 0])
result.metronome_count  # 2
result.solution         # [1, 0, 1, 0, 1, 2, 1, 0]
```
"""

import dataclasses
import typing

import metronomes.rhythm


class InvalidCandidate (ValueError):

	"""A metronome candidate that can never describe a real tick pattern."""

	def __init__ (self, message: str, start_beat: int, interval: int) -> None:

		super().__init__(f"{message} (start beat: {start_beat}, interval: {interval})")

		self.start_beat = start_beat
		self.interval = interval


@dataclasses.dataclass(frozen=True)
class Metronome:

	"""
	A metronome chosen by the solver.

	Attributes:
		number: 1-based id, as written into ``CoverResult.solution``.
		start_beat: 1-based beat of the first tick.
		interval: Beats between consecutive ticks.
		beats: 0-based rhythm indices the metronome covers.
	"""

	number: int
	start_beat: int
	interval: int
	beats: typing.Tuple[int, ...]


@dataclasses.dataclass
class CoverResult:

	"""Outcome of ``solve()``."""

	metronome_count: int
	solution: typing.List[int]
	metronomes: typing.List[Metronome] = dataclasses.field(default_factory=list)


def _check_candidate (start_beat: int, interval: int) -> None:

	if start_beat > interval:
		raise InvalidCandidate("The starting beat is larger than the metronome interval", start_beat, interval)

	if interval <= 0:
		raise InvalidCandidate("The interval must be greater than 0", start_beat, interval)

	if start_beat < 1:
		raise InvalidCandidate("The starting beat must be at least 1", start_beat, interval)


def check_metronome_works (notes: typing.Sequence[int], start_beat: int, interval: int) -> bool:

	"""
	Return True if every tick of the metronome lands on a note.

	Ticks fall on indices ``start_beat - 1``, ``start_beat - 1 + interval``
	and so on up to the end of ``notes``.  The interval does not have to
	divide the length of ``notes``.

	Raises:
		InvalidCandidate: If ``start_beat`` is outside 1 to ``interval``, or
			``interval <= 0``.
	"""

	_check_candidate(start_beat, interval)

	for i in range(start_beat - 1, len(notes), interval):
		if not notes[i]:
			return False

	return True


def apply_metronome (notes: typing.List[int], value: int, start_beat: int, interval: int) -> typing.List[int]:

	"""
	Set every index the metronome ticks on to ``value``.

	``notes`` is modified in place and also returned.

	Raises:
		InvalidCandidate: If ``start_beat`` is outside 1 to ``interval``, or
			``interval <= 0``.
	"""

	_check_candidate(start_beat, interval)

	for i in range(start_beat - 1, len(notes), interval):
		notes[i] = value

	return notes


def solve (
	rhythm: typing.Sequence[int],
	on_metronome: typing.Optional[typing.Callable[[Metronome], None]] = None,
) -> CoverResult:

	"""
	Cover every note of a looping rhythm with as few metronomes as the greedy search finds.

	Intervals are tried in ascending order, skipping any that do not divide
	the rhythm length.  For each interval, start beats 1 to ``interval`` are
	tried in ascending order.  Each candidate whose ticks all land on
	still-uncovered notes is accepted and its notes are marked as covered,
	so no note is ever claimed by two metronomes.  Interval ``N`` always
	succeeds for a lone uncovered note, so every note ends up covered.

	This is a heuristic, not an exhaustive minimum set cover.

	Parameters:
		rhythm: Sequence of 0 (rest) and 1 (note) values.
		on_metronome: Optional callback, called with each ``Metronome`` as
			soon as it is accepted.

	Returns:
		A ``CoverResult`` with the metronome count, the per-step solution
		(metronome id or 0 for rests) and the accepted metronomes.

	Raises:
		ValueError: If the rhythm is empty or contains values other than 0 and 1.
	"""

	notes = metronomes.rhythm.validate(rhythm)
	length = len(notes)

	# Covered notes are zeroed here so later candidates treat them as rests.
	remaining = list(notes)
	solution = [0] * length
	found: typing.List[Metronome] = []

	for interval in metronomes.rhythm.divisors(length):

		for start_beat in range(1, interval + 1):

			if not check_metronome_works(remaining, start_beat, interval):
				continue

			number = len(found) + 1

			apply_metronome(remaining, 0, start_beat, interval)
			apply_metronome(solution, number, start_beat, interval)

			metronome = Metronome(
				number = number,
				start_beat = start_beat,
				interval = interval,
				beats = tuple(metronomes.rhythm.metronome_beats(length, start_beat, interval)),
			)
			found.append(metronome)

			if on_metronome is not None:
				on_metronome(metronome)

	return CoverResult(metronome_count=len(found), solution=solution, metronomes=found)
