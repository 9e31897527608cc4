"""
Sorting of royal names, like `Louis XIV`, by name and then by regnal number.
"""

from typing import Iterable, List, NamedTuple, Optional

from rich.markup import escape

import regnal
from regnal.numerals import RomanNumeralConverter

class RoyalName(NamedTuple):
	"""
	A royal name split into its parts, used as a sort key.
	"""

	full_name: str
	name: str
	numeral: str
	ordinal: int

def parse_royal_name(full_name: str, converter: RomanNumeralConverter) -> RoyalName:
	"""
	Split a royal name at its first space and resolve the Roman numeral that follows it.

	INPUTS
	full_name: A string like `Louis XIV`
	converter: The converter used to resolve the numeral

	OUTPUTS
	A RoyalName tuple.
	"""

	name, separator, numeral = full_name.partition(" ")

	if not separator:
		raise regnal.InvalidInputException(f"Not a royal name: [name]{escape(full_name)}[/].")

	return RoyalName(full_name, name, numeral, converter.convert(numeral))

class RoyalNamesSorter:
	"""
	Sort royal names alphabetically by name, then numerically by their regnal number.
	"""

	def __init__(self, converter: Optional[RomanNumeralConverter] = None):
		self.converter = converter if converter else RomanNumeralConverter()

	def sort(self, names: Iterable[str]) -> List[str]:
		"""
		Return a new list of the given royal names, in order.

		The returned strings are the exact strings that were passed in. Any invalid
		numeral aborts the whole sort.
		"""

		royal_names = [parse_royal_name(full_name, self.converter) for full_name in names]

		if not royal_names:
			return []

		return [royal_name.full_name for royal_name in sorted(royal_names, key=lambda royal_name: (royal_name.name, royal_name.ordinal))]

def sort_royal_names(names: Iterable[str], converter: Optional[RomanNumeralConverter] = None) -> List[str]:
	"""
	Sort royal names alphabetically by name, then numerically by their regnal number.
	"""

	return RoyalNamesSorter(converter).sort(names)
