import logging

import metronomes
import metronomes.display
import metronomes.midi_export
import metronomes.rhythm

logging.basicConfig(level=logging.INFO)

# Two bars of 16th notes. Each group of four is one quarter note.
rhythm = metronomes.rhythm.parse("xxx. x.x. x.x. x.x. .... ..x. ..x. x.x.")

result = metronomes.solve(rhythm, on_metronome=metronomes.display.log_metronome)

metronomes.display.report(rhythm, result)

# Four loops at 100 BPM, one percussion sound per metronome.
metronomes.midi_export.save_midi(result, "sample_rhythm.mid", bpm=100, loops=4)
