"""Parsers for the Qcontacts `.vor` output files.

Qcontacts writes two whitespace-delimited files per run, `<prefix>-by-atom.vor`
with one atom-atom contact per line and `<prefix>-by-res.vor` with one
residue-residue contact per line. Columns are positional; the atom file adds a
variable set of trailing columns whose meaning depends on the contact type
code in column 1.
"""

import logging
import pathlib
import re
from collections.abc import Callable, Iterator
from typing import TypeVar

from qcontacts.core.containers import (
  AtomContact,
  AtomDescriptor,
  ResidueContact,
  ResidueDescriptor,
)
from qcontacts.io.parsing.registry import (
  MalformedOutputLine,
  OutputFileMissing,
  UnknownContactType,
  register_parser,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

BY_ATOM_SUFFIX = "-by-atom.vor"
BY_RESIDUE_SUFFIX = "-by-res.vor"

# Contact type -> (column, field) pairs for the type-dependent columns.
# Column 13 is always the contact area.
ATOM_TYPE_COLUMNS: dict[str, tuple[tuple[int, str], ...]] = {
  "V": ((13, "area"),),
  "H": ((13, "area"), (14, "angle"), (15, "Rno")),
  "I": ((13, "area"), (14, "Rno")),
  "S": ((13, "area"), (15, "dGhb"), (17, "dGip"), (18, "angle"), (19, "Rno")),
}

ATOM_BASE_FIELDS = 13
RESIDUE_BASE_FIELDS = 9

_RESIDUE_NUMBER = re.compile(r"^(-?\d+)([A-Za-z]?)$")


def _split_residue_number(text: str, line: str) -> tuple[int, str]:
  """Split a residue number such as "52A" into (52, "A")."""
  match = _RESIDUE_NUMBER.match(text)
  if match is None:
    msg = f"invalid residue number {text!r}"
    raise MalformedOutputLine(msg, line)
  return int(match.group(1)), match.group(2)


def _to_int(text: str, line: str) -> int:
  try:
    return int(text)
  except ValueError:
    msg = f"invalid integer {text!r}"
    raise MalformedOutputLine(msg, line) from None


def _to_float(text: str, line: str) -> float:
  try:
    return float(text)
  except ValueError:
    msg = f"invalid number {text!r}"
    raise MalformedOutputLine(msg, line) from None


def _is_number(text: str) -> bool:
  try:
    float(text)
  except ValueError:
    return False
  return True


def _is_count(text: str) -> bool:
  return text.isdigit()


def _require_fields(fields: list[str], count: int, line: str) -> None:
  if len(fields) < count:
    msg = f"expected at least {count} fields, found {len(fields)}"
    raise MalformedOutputLine(msg, line)


def _atom_descriptor(fields: list[str], offset: int, line: str) -> AtomDescriptor:
  """Read the residue number/name and atom number/name starting at `offset`."""
  residue_number, insertion_code = _split_residue_number(fields[offset], line)
  return AtomDescriptor(
    residue_number=residue_number,
    insertion_code=insertion_code,
    residue_name=fields[offset + 1],
    atom_number=_to_int(fields[offset + 3], line),
    atom_name=fields[offset + 4],
  )


def parse_atom_line(line: str) -> AtomContact:
  """Parse one line of a `-by-atom.vor` file.

  Args:
      line: The raw line.

  Returns:
      The atom contact described by the line.

  Raises:
      UnknownContactType: If the type code has no column mapping.
      MalformedOutputLine: If a column the type needs is absent or not numeric.

  """
  fields = line.split()
  _require_fields(fields, ATOM_BASE_FIELDS, line)

  contact_type = fields[1]
  columns = ATOM_TYPE_COLUMNS.get(contact_type)
  if columns is None:
    raise UnknownContactType(contact_type, line)
  _require_fields(fields, max(column for column, _ in columns) + 1, line)

  # Column 8 is provisionally the area; the type columns always replace it.
  values = {"area": fields[8]}
  for column, name in columns:
    values[name] = fields[column].replace(")", "")

  return AtomContact(
    atom1=_atom_descriptor(fields, 2, line),
    atom2=_atom_descriptor(fields, 8, line),
    type=contact_type,  # type: ignore[arg-type]
    **{name: _to_float(text, line) for name, text in values.items()},
  )


def parse_residue_line(line: str) -> ResidueContact:
  """Parse one line of a `-by-res.vor` file.

  Raises:
      MalformedOutputLine: If the line has fewer than nine fields.

  """
  fields = line.split()
  _require_fields(fields, RESIDUE_BASE_FIELDS, line)

  res1_number, res1_code = _split_residue_number(fields[1], line)
  res2_number, res2_code = _split_residue_number(fields[5], line)

  # Some builds print an integer contact count before the area.
  area_text = fields[8]
  if len(fields) > RESIDUE_BASE_FIELDS and _is_count(fields[8]) and _is_number(fields[9]):
    area_text = fields[9]

  return ResidueContact(
    res1=ResidueDescriptor(number=res1_number, name=fields[2], insertion_code=res1_code),
    res2=ResidueDescriptor(number=res2_number, name=fields[6], insertion_code=res2_code),
    area=_to_float(area_text, line),
  )


def _check_output_file(file_path: str | pathlib.Path) -> pathlib.Path:
  path = pathlib.Path(file_path)
  if not path.is_file():
    error = OutputFileMissing(path)
    logger.error(str(error))
    raise error
  return path


def _iter_records(path: pathlib.Path, parse_line: Callable[[str], T]) -> Iterator[T]:
  logger.debug("Parsing %s", path)
  with path.open() as f:
    for line_number, line in enumerate(f, start=1):
      if not line.strip():
        continue
      try:
        yield parse_line(line)
      except MalformedOutputLine as e:
        error = e.located(path, line_number)
        logger.error(str(error))
        raise error from e


@register_parser(["by-atom"])
def parse_atom_file(file_path: str | pathlib.Path) -> Iterator[AtomContact]:
  """Parse a `-by-atom.vor` file.

  The file is checked for existence immediately; lines are read lazily, one
  contact per non-empty line.

  Args:
      file_path: Path to the output file.

  Returns:
      An iterator over the atom contacts, in file order.

  Raises:
      OutputFileMissing: If the file does not exist.

  """
  return _iter_records(_check_output_file(file_path), parse_atom_line)


@register_parser(["by-res"])
def parse_residue_file(file_path: str | pathlib.Path) -> Iterator[ResidueContact]:
  """Parse a `-by-res.vor` file, lazily, one contact per non-empty line.

  Raises:
      OutputFileMissing: If the file does not exist.

  """
  return _iter_records(_check_output_file(file_path), parse_residue_line)
