"""Example rhythms.

Each step is the same note value.  ``SAMPLE_RHYTHM`` is two bars of 16th
notes and 16th rests, written one quarter note per line.
"""

SAMPLE_RHYTHM = (
	1, 1, 1, 0,
	1, 0, 1, 0,
	1, 0, 1, 0,
	1, 0, 1, 0,
	0, 0, 0, 0,
	0, 0, 1, 0,
	0, 0, 1, 0,
	1, 0, 1, 0,
)
