"""
metronomes - split a looping rhythm into the fewest metronomes that play it.

Take a rhythm written as equal steps of notes and rests, for example two bars
of 16th notes.  Could a group of metronomes, each ticking at a steady interval
and all started together, play exactly that rhythm on a loop?  Always - in the
worst case every note gets its own metronome.  The interesting question is how
few are needed.

- **Greedy cover.** ``solve()`` tries the smallest intervals first, only
  intervals that divide the rhythm length (so every metronome stays in
  phase when the rhythm loops), and accepts every metronome whose ticks all
  land on notes that are not yet covered.  Deterministic, and always
  succeeds.
- **Text notation.** ``metronomes.rhythm.parse("x..x x.x.")`` or
  ``"1001 1010"``.
- **Presentation.** ``metronomes.display`` logs each metronome as it is
  found and draws an ASCII grid of the result.
- **MIDI.** ``metronomes.midi_export.save_midi()`` writes the solution as a
  MIDI file with one percussion sound per metronome.
- **CLI.** ``python -m metronomes --rhythm "xxx. x.x." --midi out.mid``.

Minimal example:

    ```python
    import metronomes

    result = metronomes.solve([1, 0, 1, 0, 1, 1, 1, 0])
    result.metronome_count  # 2
    result.solution         # [1, 0, 1, 0, 1, 2, 1, 0]
    ```

Package-level exports: ``solve``, ``CoverResult``, ``Metronome``,
``InvalidCandidate``, ``SAMPLE_RHYTHM``.
"""

import metronomes.constants.rhythms
import metronomes.solver


solve = metronomes.solver.solve
CoverResult = metronomes.solver.CoverResult
Metronome = metronomes.solver.Metronome
InvalidCandidate = metronomes.solver.InvalidCandidate
SAMPLE_RHYTHM = metronomes.constants.rhythms.SAMPLE_RHYTHM
