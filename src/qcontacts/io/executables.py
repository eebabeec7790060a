"""Lookup of the Qcontacts executable."""

import logging
import os
import pathlib
import shutil

from qcontacts.io.parsing.registry import InvalidExecutable

logger = logging.getLogger(__name__)


def is_executable(candidate: str | pathlib.Path) -> bool:
  """Check whether `candidate` can be run.

  Args:
      candidate: A path to a file, or a program name to look up in PATH.

  Returns:
      True if `candidate` is an existing executable file or resolves to one
      through PATH, False otherwise.

  """
  candidate = str(candidate)
  if not candidate:
    return False
  if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
    return True
  return shutil.which(candidate) is not None


def resolve_executable(candidate: str | pathlib.Path) -> str:
  """Resolve `candidate` to the path that will be invoked.

  Raises:
      InvalidExecutable: If `candidate` is not executable and not in PATH.

  """
  candidate = str(candidate)
  if candidate and os.path.isfile(candidate) and os.access(candidate, os.X_OK):
    return str(pathlib.Path(candidate).resolve())

  found = shutil.which(candidate) if candidate else None
  if found is None:
    error = InvalidExecutable(candidate)
    logger.error(str(error))
    raise error

  logger.debug("Resolved %s to %s", candidate, found)
  return found
