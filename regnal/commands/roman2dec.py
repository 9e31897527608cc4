"""
This module implements the `regnal roman2dec` command.
"""

import argparse
import sys

import regnal
from regnal.numerals import RomanNumeralConverter


def roman2dec(plain_output: bool) -> int:
	"""
	Entry point for `regnal roman2dec`
	"""

	parser = argparse.ArgumentParser(description="Convert a Roman numeral made of I, V, X, and L to a decimal number.")
	parser.add_argument("-n", "--no-newline", dest="newline", action="store_false", help="don’t end output with a newline")
	parser.add_argument("numbers", metavar="NUMERAL", nargs="*", help="a Roman numeral")
	args = parser.parse_args()

	converter = RomanNumeralConverter()
	lines = []

	if not sys.stdin.isatty():
		for line in sys.stdin:
			lines.append(regnal.strip_bom(line.rstrip("\r\n")))

	for line in args.numbers:
		lines.append(line)

	for line in lines:
		try:
			if args.newline:
				print(converter.convert(line))
			else:
				print(converter.convert(line), end="")
		except regnal.InvalidInputException as ex:
			regnal.print_error(ex, plain_output=plain_output)
			return ex.code

	return 0
