"""Render a metronome solution to a standard MIDI file.

Each metronome gets its own percussion sound, so playing the file back lets
you hear the rhythm split into its metronomes.  Each rhythm step lasts
``1 / steps_per_beat`` of a beat (16th notes by default) and the whole rhythm
repeats ``loops`` times.
"""

import logging
import typing

import mido

import metronomes.constants.gm_drums
import metronomes.constants.pulses
import metronomes.solver


logger = logging.getLogger(__name__)

MidiEvent = typing.Tuple[int, mido.Message]


def _pulses_per_step (steps_per_beat: int) -> int:

	"""Return the pulse length of one rhythm step, rejecting uneven subdivisions."""

	quarter = metronomes.constants.pulses.MIDI_QUARTER_NOTE

	if steps_per_beat <= 0 or quarter % steps_per_beat != 0:
		raise ValueError(f"steps_per_beat must be a positive divisor of {quarter}, got {steps_per_beat}")

	return quarter // steps_per_beat


def click_note (number: int, notes: typing.Optional[typing.Sequence[int]] = None) -> int:

	"""Return the MIDI note for a 1-based metronome number, cycling through the palette."""

	palette = notes if notes else metronomes.constants.gm_drums.CLICK_PALETTE

	return palette[(number - 1) % len(palette)]


def build_events (
	result: metronomes.solver.CoverResult,
	steps_per_beat: int = 4,
	loops: int = 1,
	notes: typing.Optional[typing.Sequence[int]] = None,
	velocity: int = 100,
	channel: int = metronomes.constants.gm_drums.GM_DRUM_CHANNEL,
) -> typing.List[MidiEvent]:

	"""
	Build ``(pulse, message)`` pairs for every metronome tick.

	Each tick is a note_on at the start of its step and a note_off one step
	later.  Events are sorted by pulse, with note_off before note_on at the
	same pulse so back-to-back ticks of one sound retrigger cleanly.

	Parameters:
		result: Output of ``metronomes.solver.solve()``.
		steps_per_beat: Rhythm steps per quarter note (4 = 16th notes).
		loops: Number of times the rhythm repeats.
		notes: Optional MIDI notes to use instead of the GM click palette.
		velocity: Note-on velocity for every tick.
		channel: 0-based MIDI channel (9 = GM percussion).
	"""

	pulses_per_step = _pulses_per_step(steps_per_beat)

	if loops <= 0:
		raise ValueError(f"loops must be positive, got {loops}")

	length = len(result.solution)
	events: typing.List[MidiEvent] = []

	for loop in range(loops):

		loop_start = loop * length * pulses_per_step

		for step, number in enumerate(result.solution):

			if number == 0:
				continue

			note = click_note(number, notes)
			pulse = loop_start + step * pulses_per_step

			events.append((pulse, mido.Message('note_on', channel=channel, note=note, velocity=velocity)))
			events.append((pulse + pulses_per_step, mido.Message('note_off', channel=channel, note=note, velocity=0)))

	events.sort(key=lambda event: (event[0], 0 if event[1].type == 'note_off' else 1))

	return events


def save_midi (
	result: metronomes.solver.CoverResult,
	filename: str,
	bpm: float = 120,
	steps_per_beat: int = 4,
	loops: int = 1,
	notes: typing.Optional[typing.Sequence[int]] = None,
	velocity: int = 100,
	channel: int = metronomes.constants.gm_drums.GM_DRUM_CHANNEL,
) -> mido.MidiFile:

	"""
	Write the solution as a Type 1 MIDI file and return the ``MidiFile``.

	The file runs at 480 ticks per beat, with a tempo event at the start.

	Raises:
		ValueError: For a non-positive ``bpm`` or ``loops``, or an uneven ``steps_per_beat``.
		OSError: If the file cannot be written.
	"""

	if bpm <= 0:
		raise ValueError(f"bpm must be positive, got {bpm}")

	events = build_events(
		result,
		steps_per_beat = steps_per_beat,
		loops = loops,
		notes = notes,
		velocity = velocity,
		channel = channel,
	)

	logger.info(f"Saving {result.metronome_count} metronomes ({len(events)} events) to {filename}...")

	mid = mido.MidiFile(type=1)
	mid.ticks_per_beat = metronomes.constants.pulses.MIDI_FILE_TICKS_PER_BEAT
	track = mido.MidiTrack()
	mid.tracks.append(track)

	track.append(mido.MetaMessage('set_tempo', tempo=mido.bpm2tempo(bpm), time=0))

	ticks_per_pulse = metronomes.constants.pulses.MIDI_FILE_TICKS_PER_PULSE
	last_pulse = 0

	for pulse, message in events:
		track.append(message.copy(time=(pulse - last_pulse) * ticks_per_pulse))
		last_pulse = pulse

	try:
		mid.save(filename)
	except OSError as e:
		logger.error(f"Failed to save MIDI file: {e}")
		raise

	logger.info(f"Saved {filename}")

	return mid
