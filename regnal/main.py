"""
This file contains the entry point for the `regnal` command.
"""

import argparse
import importlib
import pkgutil
import sys
from typing import List, Tuple

import regnal
import regnal.commands


def get_commands() -> List[str]:
	"""
	Return the sorted names of the subcommands in the regnal.commands package, like `sort-names`.
	"""

	return sorted(module_info.name.replace("_", "-") for module_info in pkgutil.iter_modules(regnal.commands.__path__))

def split_arguments(arguments: List[str]) -> Tuple[List[str], List[str]]:
	"""
	Split the command line at the subcommand name.

	OUTPUTS
	A tuple of (global arguments up to and including the subcommand, the subcommand and its own arguments)
	"""

	for index, argument in enumerate(arguments):
		if not argument.startswith("-"):
			return (arguments[:index + 1], arguments[index:])

	return (arguments, [])

def main() -> None:
	"""
	Entry point for the main `regnal` executable.

	Each subcommand, like `regnal sort-names`, lives in its own module under `regnal.commands`
	and parses its own arguments from `sys.argv`.
	"""

	commands = get_commands()

	parser = argparse.ArgumentParser(description="Convert Roman numerals and sort royal names.")
	parser.add_argument("-p", "--plain", dest="plain_output", action="store_true", help="print errors as plain text, without colors")
	parser.add_argument("-v", "--version", action="version", version=regnal.VERSION, help="print version number and exit")
	parser.add_argument("command", metavar="COMMAND", choices=commands, help="one of: " + " ".join(commands))
	parser.add_argument("arguments", metavar="ARGS", nargs="*", help="arguments for the subcommand")

	main_args, sys.argv = split_arguments(sys.argv[1:])
	args = parser.parse_args(main_args)

	command_name = args.command.replace("-", "_")

	# help() is a built-in
	command_function = "regnal_help" if command_name == "help" else command_name

	module = importlib.import_module(f"regnal.commands.{command_name}")

	try:
		sys.exit(getattr(module, command_function)(args.plain_output))
	except KeyboardInterrupt:
		sys.exit(130) # See http://www.tldp.org/LDP/abs/html/exitcodes.html
