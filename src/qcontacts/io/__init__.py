"""Executable lookup, process invocation and structure inspection."""

from qcontacts.io.executables import is_executable, resolve_executable
from qcontacts.io.process import build_command, format_arguments, run_process
from qcontacts.io.structure import list_chains

__all__ = [
  "build_command",
  "format_arguments",
  "is_executable",
  "list_chains",
  "resolve_executable",
  "run_process",
]
