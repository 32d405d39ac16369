"""General MIDI Level 1 percussion notes used for metronome clicks.

Standard MIDI percussion assignments for channel 10 (0-indexed channel 9).
Only the short, clearly pitched sounds that work as clicks are listed.
"""

import typing


GM_DRUM_CHANNEL = 9

STICKS = 31
SQUARE_CLICK = 32
METRONOME_CLICK = 33
METRONOME_BELL = 34
SIDE_STICK = 37
COWBELL = 56
HIGH_BONGO = 60
LOW_BONGO = 61
HIGH_TIMBALE = 65
LOW_TIMBALE = 66
HIGH_AGOGO = 67
LOW_AGOGO = 68
CLAVES = 75
HIGH_WOODBLOCK = 76
LOW_WOODBLOCK = 77
MUTE_TRIANGLE = 80


# One click sound per metronome, in the order metronomes are found.
# Sounds are reused from the start when a solution needs more metronomes.

CLICK_PALETTE: typing.List[int] = [
	METRONOME_CLICK,
	HIGH_WOODBLOCK,
	LOW_WOODBLOCK,
	CLAVES,
	SIDE_STICK,
	COWBELL,
	HIGH_AGOGO,
	LOW_AGOGO,
	HIGH_BONGO,
	LOW_BONGO,
	HIGH_TIMBALE,
	LOW_TIMBALE,
	METRONOME_BELL,
	STICKS,
	SQUARE_CLICK,
	MUTE_TRIANGLE,
]
