"""
This module implements the `regnal sort-names` command.
"""

import argparse
import os
import sys
from typing import List

from rich.markup import escape

import regnal
from regnal.reporting import ConsoleReporter
from regnal.numerals import RomanNumeralConverter
from regnal.sorting import RoyalNamesSorter


def _read_counted_lines(lines: List[str]) -> List[str]:
	"""
	Read input where the first line is the number of royal names that follow it.
	"""

	if not lines:
		raise regnal.InvalidInputException("Missing count of royal names.")

	try:
		count = int(lines[0].strip())
	except ValueError as ex:
		raise regnal.InvalidInputException(f"Not a count of royal names: [text]{escape(lines[0])}[/].") from ex

	if count < 0 or count > len(lines) - 1:
		raise regnal.InvalidInputException(f"Expected [text]{count}[/] royal names, but found [text]{len(lines) - 1}[/].")

	return lines[1:count + 1]

def sort_names(plain_output: bool) -> int:
	"""
	Entry point for `regnal sort-names`
	"""

	parser = argparse.ArgumentParser(description="Sort royal names like “Louis XIV” by name, then by regnal number. Names are read from the arguments and from stdin, one per line.")
	parser.add_argument("-c", "--counted", action="store_true", help="stdin starts with a line containing the number of royal names that follow it")
	parser.add_argument("-o", "--output", metavar="FILE", help=f"append the sorted names to FILE instead of printing them; defaults to the value of the {regnal.OUTPUT_PATH_VARIABLE} environment variable, if set")
	parser.add_argument("names", metavar="NAME", nargs="*", help="a royal name, like “Louis XIV”")
	args = parser.parse_args()

	lines = []

	if not sys.stdin.isatty():
		for line in sys.stdin:
			lines.append(line.rstrip("\r\n"))

	if lines:
		lines[0] = regnal.strip_bom(lines[0])

	try:
		if args.counted:
			lines = _read_counted_lines(lines)
		else:
			lines = [line for line in lines if line.strip()]

		lines = lines + args.names

		sorter = RoyalNamesSorter(RomanNumeralConverter(ConsoleReporter(plain_output)))
		sorted_names = sorter.sort(lines)

	except regnal.InvalidRomanNumeralException as ex:
		# Already printed by the reporter
		return ex.code

	except regnal.RegnalException as ex:
		regnal.print_error(ex, plain_output=plain_output)
		return ex.code

	output_path = args.output or os.environ.get(regnal.OUTPUT_PATH_VARIABLE)

	if output_path:
		try:
			with open(output_path, "a", encoding="utf-8") as file:
				file.write("\n".join(sorted_names) + "\n")
		except OSError as ex:
			regnal.print_error(f"Couldn’t write to file: [path]{escape(output_path)}[/]. Exception: {ex}", plain_output=plain_output)
			return regnal.InvalidArgumentsException.code
	else:
		for name in sorted_names:
			print(name)

	return 0
