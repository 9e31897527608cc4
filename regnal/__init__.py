#!/usr/bin/env python3
"""
Defines various package-level constants and helper functions.
"""

import sys
from typing import Union, Optional

from rich.console import Console
from rich.theme import Theme
import regex

VERSION = "1.0.0"
UNICODE_BOM = "\ufeff"
OUTPUT_PATH_VARIABLE = "OUTPUT_PATH"
RICH_THEME = Theme({
	"numeral": "bright_blue",
	"name": "bright_blue",
	"path": "bright_blue",
	"text": "bright_blue",
	"bash": "bright_blue"
})

class RegnalException(Exception):
	""" Wrapper class for regnal exceptions """

	code = 0

# Note that we skip error codes 1 and 2 as they have special meanings:
# http://www.tldp.org/LDP/abs/html/exitcodes.html

class InvalidInputException(RegnalException):
	""" Invalid input """
	code = 3

class InvalidRomanNumeralException(InvalidInputException):
	""" Roman numeral outside of the supported grammar """
	code = 4

	def __init__(self, message: str, symbol: str, numeral: Optional[str] = None):
		super().__init__(message)
		self.symbol = symbol
		self.numeral = numeral

class UnrecognizedSymbolException(InvalidRomanNumeralException):
	""" A character that is not one of I, V, X, L """

class IllegalRepetitionException(InvalidRomanNumeralException):
	""" V or L next to itself """

class TooManyRepetitionsException(InvalidRomanNumeralException):
	""" I or X four or more times in a row """

class InvalidArgumentsException(RegnalException):
	""" Invalid arguments """
	code = 5

def strip_bom(string: str) -> str:
	"""
	Remove the Unicode Byte Order Mark from a string.

	INPUTS
	string: A Unicode string

	OUTPUTS
	The input string with the Byte Order Mark removed
	"""

	if string.startswith(UNICODE_BOM):
		string = string[1:]

	return string

def prep_output(message: str, plain_output: bool = False) -> str:
	"""
	Return a message formatted for the chosen output style, i.e., color or plain.

	User text in messages is escaped with `rich.markup.escape()`, so escaped brackets are left alone.
	"""

	if plain_output:
		# Replace color markup with `
		message = regex.sub(r"(?<!\\)((?:\\\\)*)\[(?:/|numeral|name|path|text|bash|link)(?:=[^\]]*?)*\]", r"\1`", message)
		message = regex.sub(r"`+", "`", message)

	return message

def print_error(message: Union[RegnalException, str], plain_output: bool = False) -> None:
	"""
	Helper function to print a colored error message to stderr.

	Allowed BBCode tags:
	[link=foo]bar[/] - Hyperlink
	[numeral] - A Roman numeral or one of its symbols
	[name] - A royal name
	[path] - Filesystem path
	[text] - Non-semantic text that requires color
	[bash] - A command or flag of a command
	"""

	message = str(message)

	console = Console(file=sys.stderr, highlight=False, theme=RICH_THEME) # Syntax highlighting will do weird things when printing numerals

	if plain_output:
		console.print(f"[Error] {prep_output(message, True)}")
	else:
		console.print(f"[white on red bold] Error [/] {message}")
