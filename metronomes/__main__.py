import argparse
import logging
import os
import typing

import yaml

import metronomes.constants.gm_drums
import metronomes.constants.rhythms
import metronomes.display
import metronomes.midi_export
import metronomes.rhythm
import metronomes.solver


logger = logging.getLogger(__name__)


def load_config (config_path: str = 'config.yaml') -> dict:

	"""
	Load configuration from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		return yaml.safe_load(f) or {}


def resolve_rhythm (value: typing.Any) -> typing.List[int]:

	"""Turn a configured rhythm (text notation or list of steps) into a validated list."""

	if value is None:
		return list(metronomes.constants.rhythms.SAMPLE_RHYTHM)

	if isinstance(value, str):
		return metronomes.rhythm.parse(value)

	if not isinstance(value, (list, tuple)):
		raise ValueError(f"Rhythm must be notation text or a list of steps, got {value!r}")

	return metronomes.rhythm.validate(value)


def _number (value: typing.Any, name: str, kind: typing.Callable[[typing.Any], typing.Any]) -> typing.Any:

	"""Convert a configured MIDI setting, raising ValueError for anything non-numeric."""

	if isinstance(value, bool):
		raise ValueError(f"{name} must be a number, got {value!r}")

	try:
		return kind(value)
	except (TypeError, ValueError):
		raise ValueError(f"{name} must be a number, got {value!r}") from None


def resolve_midi_settings (midi_config: typing.Any, args: argparse.Namespace) -> dict:

	"""
	Merge the ``midi`` config section with command-line flags into ``save_midi`` keyword arguments.

	Raises:
		ValueError: If the section is not a mapping or a setting is not a number.
	"""

	if midi_config is None:
		midi_config = {}

	if not isinstance(midi_config, dict):
		raise ValueError(f"The midi section must be a mapping, got {midi_config!r}")

	return {
		"bpm": _number(args.bpm if args.bpm is not None else midi_config.get('bpm', 120), "bpm", float),
		"steps_per_beat": _number(midi_config.get('steps_per_beat', 4), "steps_per_beat", int),
		"loops": _number(args.loops if args.loops is not None else midi_config.get('loops', 4), "loops", int),
		"channel": _number(midi_config.get('channel', metronomes.constants.gm_drums.GM_DRUM_CHANNEL), "channel", int),
	}


def build_parser () -> argparse.ArgumentParser:

	parser = argparse.ArgumentParser(
		prog = "metronomes",
		description = "Find the fewest looping metronomes that together play a rhythm",
	)
	parser.add_argument("--config", default="config.yaml", help="YAML config file (default: config.yaml)")
	parser.add_argument("--rhythm", help="Rhythm notation, e.g. 'x.x. xx.x' or '1010 1101'")
	parser.add_argument("--midi", help="Write the solution to this MIDI file")
	parser.add_argument("--bpm", type=float, help="Tempo for the MIDI file")
	parser.add_argument("--loops", type=int, help="Times to repeat the rhythm in the MIDI file")
	parser.add_argument("--quiet", action="store_true", help="Only log the final report")

	return parser


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Main entry point: solve a rhythm, report it and optionally render MIDI.

	Command-line flags override values from the config file.
	"""

	args = build_parser().parse_args(argv)
	config = load_config(args.config)

	if not isinstance(config, dict):
		logger.error(f"Invalid config: {args.config} must contain a mapping")
		return 2

	midi_config = config.get('midi')

	try:
		rhythm = resolve_rhythm(args.rhythm if args.rhythm is not None else config.get('rhythm'))
	except ValueError as e:
		logger.error(f"Invalid rhythm: {e}")
		return 2

	logger.info(f"Solving {len(rhythm)}-step rhythm: {metronomes.rhythm.to_notation(rhythm)}")

	on_metronome = None if args.quiet else metronomes.display.log_metronome
	result = metronomes.solver.solve(rhythm, on_metronome=on_metronome)

	metronomes.display.report(rhythm, result)

	midi_output = args.midi

	if midi_output is None and isinstance(midi_config, dict) and midi_config.get('output'):
		midi_output = str(midi_config['output'])

	if midi_output:
		try:
			settings = resolve_midi_settings(midi_config, args)
			metronomes.midi_export.save_midi(result, midi_output, **settings)
		except ValueError as e:
			logger.error(f"Invalid MIDI settings: {e}")
			return 2
		except OSError:
			return 1

	return 0


def run () -> None:

	"""Console script entry point."""

	logging.basicConfig(level=logging.INFO)
	raise SystemExit(main())


if __name__ == "__main__":
	run()
