import typing

import pytest

import metronomes.constants.rhythms
import metronomes.solver


@pytest.fixture
def sample_rhythm () -> typing.List[int]:

	"""A fresh copy of the 32-step example rhythm."""

	return list(metronomes.constants.rhythms.SAMPLE_RHYTHM)


@pytest.fixture
def sample_result (sample_rhythm: typing.List[int]) -> metronomes.solver.CoverResult:

	"""The solver's result for the example rhythm."""

	return metronomes.solver.solve(sample_rhythm)
