"""
Failure reporters for Roman numeral validation.

A reporter is any callable that accepts the `regnal.InvalidRomanNumeralException`
describing a grammar violation. The converter hands every violation to its reporter and
then raises the exception itself, so reporting a failure always aborts the conversion
regardless of what the reporter does with it.
"""

from typing import Callable, List

import regnal

Reporter = Callable[[regnal.InvalidRomanNumeralException], None]

def raise_error(ex: regnal.InvalidRomanNumeralException) -> None:
	"""
	The default reporter: raise the exception as soon as it's reported.
	"""

	raise ex

class ConsoleReporter:
	"""
	Print each reported failure to the console before the conversion is aborted.
	"""

	def __init__(self, plain_output: bool = False):
		self.plain_output = plain_output

	def __call__(self, ex: regnal.InvalidRomanNumeralException) -> None:
		regnal.print_error(ex, plain_output=self.plain_output)

class CollectingReporter:
	"""
	Keep every reported failure, in the order they were reported.
	"""

	def __init__(self):
		self.failures: List[regnal.InvalidRomanNumeralException] = []

	def __call__(self, ex: regnal.InvalidRomanNumeralException) -> None:
		self.failures.append(ex)

	def clear(self) -> None:
		"""
		Forget all of the failures reported so far.
		"""

		self.failures.clear()
