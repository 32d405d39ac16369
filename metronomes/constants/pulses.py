"""Pulse-based MIDI timing constants.

Rendering uses **24 pulses per quarter note** (PPQN = 24) as its time base,
scaled up to 480 ticks per beat when written to a MIDI file.
"""

# MIDI Standards - number of pulses in each

MIDI_THIRTYSECOND_NOTE = 3
MIDI_SIXTEENTH_NOTE = 6
MIDI_EIGHTH_NOTE = 12
MIDI_QUARTER_NOTE = 24
MIDI_HALF_NOTE = 48
MIDI_WHOLE_NOTE = 96

MIDI_FILE_TICKS_PER_BEAT = 480
MIDI_FILE_TICKS_PER_PULSE = MIDI_FILE_TICKS_PER_BEAT // MIDI_QUARTER_NOTE
