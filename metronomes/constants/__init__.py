"""Constants for metronomes.

- ``metronomes.constants.pulses`` - Pulse-based MIDI timing used when rendering solutions
- ``metronomes.constants.gm_drums`` - General MIDI percussion notes used as metronome clicks
- ``metronomes.constants.rhythms`` - Example rhythms
"""
