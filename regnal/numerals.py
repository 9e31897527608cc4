"""
Conversion of Roman numerals to integers.

Only the symbols I, V, X and L are supported, which covers the ordinals 1 through 50.
"""

import threading
from typing import Dict, Optional

from rich.markup import escape

import regnal
from regnal.reporting import Reporter, raise_error

ROMAN_SYMBOLS = {
	"I": 1,
	"V": 5,
	"X": 10,
	"L": 50
}

# Only these may appear more than once in a row, and never more than 3 times
REPEATABLE_SYMBOLS = ("I", "X")
MAX_REPETITIONS = 3

UNRECOGNIZED_SYMBOL_MESSAGE = "This Roman letter cannot be recognized as part of valid numeral"
ILLEGAL_REPETITION_MESSAGE = "Having more than 1 occurrence of this Roman letter is not allowed"
TOO_MANY_REPETITIONS_MESSAGE = f"Having more than {MAX_REPETITIONS} occurrences of this Roman letter is not allowed"

class RomanNumeralConverter:
	"""
	Convert Roman numerals to integers, remembering every numeral that has been
	successfully converted.

	Numerals that fail validation are never remembered, so they fail again each time
	they're converted. The cache is protected by a lock, so a single converter can be
	shared between threads.
	"""

	def __init__(self, reporter: Optional[Reporter] = None):
		self._reporter = reporter if reporter else raise_error
		self._cache: Dict[str, int] = dict(ROMAN_SYMBOLS)
		self._lock = threading.Lock()

	@property
	def cache(self) -> Dict[str, int]:
		"""
		A copy of the numerals converted so far, including the single symbols.
		"""

		with self._lock:
			return dict(self._cache)

	def convert(self, numeral: str) -> int:
		"""
		Convert a Roman numeral to an integer.

		INPUTS
		numeral: A non-empty, uppercase Roman numeral, like `XIV`

		OUTPUTS
		The integer value of the numeral.

		Raises `regnal.InvalidInputException` for an empty numeral, and one of
		`regnal.UnrecognizedSymbolException`, `regnal.IllegalRepetitionException` or
		`regnal.TooManyRepetitionsException` after reporting a grammar violation.
		"""

		if not numeral:
			raise regnal.InvalidInputException("Empty Roman numeral.")

		with self._lock:
			if numeral in self._cache:
				return self._cache[numeral]

		value = self._scan(numeral)

		# Another thread may have converted the same numeral in the meantime; the first value in wins
		with self._lock:
			return self._cache.setdefault(numeral, value)

	def _scan(self, numeral: str) -> int:
		"""
		Walk the numeral left to right, comparing each symbol to the one after it.

		Only adjacent pairs are checked, so combinations like `IIV` are accepted.
		"""

		total = 0
		repetitions = 1

		for index, symbol in enumerate(numeral):
			value = self._get_symbol_value(numeral, symbol)

			# The last symbol is always added
			if index + 1 == len(numeral):
				total += value
				break

			next_symbol = numeral[index + 1]
			next_value = self._get_symbol_value(numeral, next_symbol)

			if symbol == next_symbol:
				if symbol not in REPEATABLE_SYMBOLS:
					self._fail(regnal.IllegalRepetitionException(f"{ILLEGAL_REPETITION_MESSAGE}: [numeral]{escape(symbol)}[/].", symbol, numeral))

				if repetitions == MAX_REPETITIONS:
					self._fail(regnal.TooManyRepetitionsException(f"{TOO_MANY_REPETITIONS_MESSAGE}: [numeral]{escape(symbol)}[/].", symbol, numeral))

				# Keep counting until the run of identical symbols ends
				repetitions += 1
				total += value
				continue

			if value > next_value:
				total += value
			else:
				total -= value

			repetitions = 1

		return total

	def _get_symbol_value(self, numeral: str, symbol: str) -> int:
		if symbol not in ROMAN_SYMBOLS:
			self._fail(regnal.UnrecognizedSymbolException(f"{UNRECOGNIZED_SYMBOL_MESSAGE}: [numeral]{escape(symbol)}[/], from provided [numeral]{escape(numeral)}[/].", symbol, numeral))

		return ROMAN_SYMBOLS[symbol]

	def _fail(self, ex: regnal.InvalidRomanNumeralException) -> None:
		self._reporter(ex)

		# Reporters that return normally still abort the conversion
		raise ex

_default_converter = RomanNumeralConverter()

def roman_to_int(numeral: str) -> int:
	"""
	Convert a Roman numeral to an integer using a converter shared by the whole process.
	"""

	return _default_converter.convert(numeral)
