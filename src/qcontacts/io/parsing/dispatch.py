"""Unified dispatch for parsing Qcontacts output files."""

from __future__ import annotations

import pathlib
from collections.abc import Iterator
from typing import Any

# Importing the module registers the by-atom and by-res parsers.
from qcontacts.io.parsing import vor
from qcontacts.io.parsing.registry import FormatNotSupportedError, get_parser


def _infer_format(path: pathlib.Path) -> str | None:
  """Infer the output format from the file name."""
  name = path.name.lower()
  if name.endswith(vor.BY_ATOM_SUFFIX):
    return "by-atom"
  if name.endswith(vor.BY_RESIDUE_SUFFIX):
    return "by-res"
  return None


def load_contacts(
  file_path: str | pathlib.Path,
  file_format: str | None = None,
) -> Iterator[Any]:
  """Load contacts from a saved Qcontacts output file.

  Args:
      file_path: Path to a `-by-atom.vor` or `-by-res.vor` file.
      file_format: "by-atom" or "by-res". If None, inferred from the file name.

  Returns:
      An iterator of AtomContact or ResidueContact records.

  Raises:
      FormatNotSupportedError: If the format is unknown or cannot be inferred.

  """
  path = pathlib.Path(file_path)

  if file_format is None:
    file_format = _infer_format(path)

  if file_format is None:
    msg = f"Failed to infer output format for: {file_path}"
    raise FormatNotSupportedError(msg)

  parser = get_parser(file_format)
  if not parser:
    msg = f"Failed to parse contacts from source: {file_path}. Unsupported format: {file_format}"
    raise FormatNotSupportedError(msg)

  return parser(path)

