"""
Tests for sorting royal names.
"""

import pytest

import regnal
from regnal.numerals import RomanNumeralConverter
from regnal.sorting import RoyalName, RoyalNamesSorter, parse_royal_name, sort_royal_names

SORTED_NAMES = [
	([], []),
	(["Louis IX", "Louis VIII"], ["Louis VIII", "Louis IX"]),
	(["Philippe I", "Philip II"], ["Philip II", "Philippe I"]),
	(["George VI", "Elizabeth II", "George V", "Elizabeth I"], ["Elizabeth I", "Elizabeth II", "George V", "George VI"]),
	(["Louis XL", "Louis IX", "Louis L", "Louis XIV"], ["Louis IX", "Louis XIV", "Louis XL", "Louis L"]),
	# Names compare by code point, so uppercase sorts before lowercase
	(["adam I", "Zed I"], ["Zed I", "adam I"]),
]

@pytest.mark.parametrize("names, expected", SORTED_NAMES)
def test_sort(names: list, expected: list):
	"""
	Verify that names sort by name, then by regnal number.
	"""
	assert sort_royal_names(names) == expected

def test_sort_returns_input_strings():
	"""
	Verify that the output is exactly the input strings, reordered.
	"""
	names = ["Louis IX", "Charles II", "Louis VIII", "Charles I", "Louis XIV"]

	result = sort_royal_names(names)

	assert sorted(result) == sorted(names)
	assert all(any(name is original for original in names) for name in result)

def test_sort_does_not_modify_input():
	"""
	Verify that the input list is left alone.
	"""
	names = ["Louis IX", "Louis VIII"]

	sort_royal_names(names)

	assert names == ["Louis IX", "Louis VIII"]

def test_sort_is_stable():
	"""
	Verify that names with identical keys keep their input order.
	"""
	names = ["Louis IIV", "Louis V"]

	assert sort_royal_names(names) == ["Louis IIV", "Louis V"]
	assert sort_royal_names(list(reversed(names))) == ["Louis V", "Louis IIV"]

def test_sort_accepts_any_iterable():
	"""
	Verify that generators can be sorted.
	"""
	assert sort_royal_names(name for name in ["Louis IX", "Louis VIII"]) == ["Louis VIII", "Louis IX"]

@pytest.mark.parametrize("names, exception_class", [
	(["Louis IX", "Louis IIII"], regnal.TooManyRepetitionsException),
	(["Louis VV"], regnal.IllegalRepetitionException),
	(["Louis XIV", "Charles C"], regnal.UnrecognizedSymbolException),
])
def test_sort_invalid_numeral(names: list, exception_class: type):
	"""
	Verify that an invalid numeral aborts the whole sort.
	"""
	with pytest.raises(exception_class):
		sort_royal_names(names)

def test_sort_missing_numeral():
	"""
	Verify that a name without a numeral is rejected.
	"""
	with pytest.raises(regnal.InvalidInputException) as excinfo:
		sort_royal_names(["Louis"])

	assert "Not a royal name" in str(excinfo.value)

def test_sorter_uses_its_converter(converter: RomanNumeralConverter):
	"""
	Verify that the sorter resolves numerals through the converter it was given.
	"""
	sorter = RoyalNamesSorter(converter)

	assert sorter.sort(["Louis XIV", "Louis IX"]) == ["Louis IX", "Louis XIV"]
	assert converter.cache["XIV"] == 14
	assert converter.cache["IX"] == 9

def test_parse_royal_name(converter: RomanNumeralConverter):
	"""
	Verify that a royal name is split at its first space.
	"""
	assert parse_royal_name("Louis XIV", converter) == RoyalName("Louis XIV", "Louis", "XIV", 14)
