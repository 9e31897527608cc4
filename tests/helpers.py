"""
Common helper functions for tests.
"""

import shlex
import subprocess
import os
from typing import Dict, Optional

import pytest

def run(cmd: str, stdin: str = "", env: Optional[Dict[str, str]] = None) -> subprocess.CompletedProcess:
	"""
	Run the provided shell string as a command in a subprocess, feeding it `stdin`.
	Returns a status object when the command completes.
	"""
	args = shlex.split(cmd)
	current_environment = os.environ.copy()
	current_environment["COLUMNS"] = "1000000"
	current_environment.pop("OUTPUT_PATH", None)
	if env:
		current_environment.update(env)
	return subprocess.run(args, input=stdin.encode("utf-8"), stdout=subprocess.PIPE, stderr=subprocess.PIPE, check=False, env=current_environment)

def must_run(cmd: str, stdin: str = "", env: Optional[Dict[str, str]] = None) -> str:
	"""
	Run the provided shell string as a command in a subprocess. Forces a
	test failure if the command fails. Returns the command's stdout.
	"""
	result = run(cmd, stdin, env)
	if result.returncode == 0:
		if not result.stderr:
			return result.stdout.decode()
		pytest.fail(f"stderr was not empty after command '{cmd}'\n{result.stderr.decode()}")
	else:
		fail_msg = f"error code {result.returncode} from command '{cmd}'"
		if result.stderr:
			fail_msg += "\n" + result.stderr.decode()
		pytest.fail(fail_msg)

	return ""

def must_fail(cmd: str, code: int, stdin: str = "", env: Optional[Dict[str, str]] = None) -> str:
	"""
	Run the provided shell string as a command in a subprocess. Forces a
	test failure unless the command exits with `code`. Returns the command's stderr.
	"""
	result = run(cmd, stdin, env)
	if result.returncode != code:
		pytest.fail(f"expected error code {code} but got {result.returncode} from command '{cmd}'\n{result.stderr.decode()}")

	return result.stderr.decode()
