"""
Customization functions for pytest.
"""

import os
from pathlib import Path
from typing import Generator

import pytest

from regnal.numerals import RomanNumeralConverter
from regnal.reporting import CollectingReporter

pytest.register_assert_rewrite("helpers")

@pytest.fixture
def reporter() -> CollectingReporter:
	"""
	Return a reporter that remembers every failure reported to it.
	"""
	return CollectingReporter()

@pytest.fixture
def converter(reporter: CollectingReporter) -> RomanNumeralConverter:
	"""
	Return a fresh converter with an empty cache, reporting to the `reporter` fixture.
	"""
	return RomanNumeralConverter(reporter)

@pytest.fixture
def work__directory(tmp_path: Path) -> Generator:
	"""Return the Path object for a temporary working directory. The current working
	directory is updated to this temporary directory until the test returns.
	"""
	old_working_directory = os.getcwd()
	os.chdir(tmp_path)
	yield tmp_path
	os.chdir(old_working_directory)
