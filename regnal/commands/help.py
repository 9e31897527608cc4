"""
This module implements the `regnal help` command.
"""

import regnal
from regnal.main import get_commands


def regnal_help(plain_output: bool) -> int: # pylint: disable=unused-argument
	"""
	Entry point for `regnal help`
	"""

	print(f"regnal {regnal.VERSION}")
	print("The following commands are available:")

	for command in get_commands():
		print(command)

	print("Run `regnal COMMAND --help` for the options of a command.")

	return 0
