"""Text presentation of solver results.

The solver never prints anything.  This module turns its results into log
lines, either one metronome at a time while solving (pass ``log_metronome``
as the ``on_metronome`` callback) or as a full report afterwards.

The grid shows the rhythm on the first row and one row per metronome::

	rhythm      |x x x . x . x .|
	1 (1/2)     |X . X . X . X .|
	2 (2/8)     |. X . . . . . .|
"""

import logging
import typing

import metronomes.rhythm
import metronomes.solver


logger = logging.getLogger(__name__)

_LABEL_WIDTH = 12


def describe_metronome (metronome: metronomes.solver.Metronome) -> str:

	"""One-line description of a metronome, e.g. for progress output."""

	ticks = len(metronome.beats)
	plural = "beat" if ticks == 1 else "beats"

	return (
		f"metronome {metronome.number} starts on beat {metronome.start_beat} "
		f"with an interval of {metronome.interval} ({ticks} {plural})"
	)


def log_metronome (metronome: metronomes.solver.Metronome) -> None:

	"""Log a metronome as soon as the solver finds it."""

	logger.info(f"Found {describe_metronome(metronome)}")


def _row (label: str, cells: typing.Iterable[str]) -> str:

	label = label[:_LABEL_WIDTH].ljust(_LABEL_WIDTH)
	return f"{label}|{' '.join(cells)}|"


def render_grid (rhythm: typing.Sequence[int], result: metronomes.solver.CoverResult) -> typing.List[str]:

	"""
	Render the rhythm and each metronome as rows of an ASCII grid.

	The rhythm row shows ``x`` for notes and ``.`` for rests.  Each
	metronome row shows ``X`` on the steps it covers.  Labels are
	``number (start/interval)``.
	"""

	lines = [_row("rhythm", ("x" if value else "." for value in rhythm))]

	for metronome in result.metronomes:

		cells = ["X" if number == metronome.number else "." for number in result.solution]
		lines.append(_row(f"{metronome.number} ({metronome.start_beat}/{metronome.interval})", cells))

	return lines


def report (rhythm: typing.Sequence[int], result: metronomes.solver.CoverResult) -> None:

	"""Log the note and metronome counts, the solution and the grid."""

	note_count = len(metronomes.rhythm.sequence_to_indices(rhythm))

	logger.info(f"Solved {note_count} notes using {result.metronome_count} metronomes. Solution: {result.solution}")

	for line in render_grid(rhythm, result):
		logger.info(line)
