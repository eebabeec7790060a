"""Invocation of the Qcontacts executable."""

import logging
import pathlib
import subprocess
from collections.abc import Mapping

logger = logging.getLogger(__name__)


def format_arguments(arguments: Mapping[str, str]) -> str:
  """Render flags as space-joined `flag value` pairs, in insertion order."""
  return " ".join(f"{flag} {value}" for flag, value in arguments.items())


def build_command(executable: str, arguments: Mapping[str, str]) -> list[str]:
  """Build the argument vector for `subprocess.run`."""
  command = [executable]
  for flag, value in arguments.items():
    command.extend([flag, str(value)])
  return command


def run_process(
  executable: str,
  arguments: Mapping[str, str],
  working_dir: str | pathlib.Path,
) -> int:
  """Run Qcontacts and wait for it to exit.

  A non-zero exit status is logged but not raised: the output files will be
  missing or incomplete, and parsing reports that.

  Args:
      executable: Path or PATH name of the Qcontacts binary.
      arguments: Flags as returned by `build_arguments`.
      working_dir: Directory receiving the output files. The process itself
          runs in the caller's directory, so relative input paths resolve there.

  Returns:
      The exit status of the process.

  """
  command = build_command(executable, arguments)
  logger.debug("Running: %s %s", executable, format_arguments(arguments))
  logger.debug("Writing output to %s", working_dir)

  completed = subprocess.run(  # noqa: S603
    command,
    capture_output=True,
    text=True,
    check=False,
  )

  if completed.stdout:
    logger.debug("Qcontacts stdout:\n%s", completed.stdout)
  if completed.stderr:
    logger.debug("Qcontacts stderr:\n%s", completed.stderr)
  if completed.returncode != 0:
    logger.warning("Qcontacts exited with status %d", completed.returncode)

  return completed.returncode
