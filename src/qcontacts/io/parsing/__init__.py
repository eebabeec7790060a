"""Parsing utilities for Qcontacts output files."""

from qcontacts.io.parsing.dispatch import load_contacts
from qcontacts.io.parsing.registry import (
  FormatNotSupportedError,
  InvalidExecutable,
  MalformedOutputLine,
  OutputFileMissing,
  ParserFunc,
  ParsingError,
  QContactsError,
  UnknownContactType,
  register_parser,
)
from qcontacts.io.parsing.vor import (
  parse_atom_file,
  parse_atom_line,
  parse_residue_file,
  parse_residue_line,
)

__all__ = [
  "load_contacts",
  "parse_atom_file",
  "parse_atom_line",
  "parse_residue_file",
  "parse_residue_line",
  "register_parser",
  "QContactsError",
  "InvalidExecutable",
  "ParsingError",
  "OutputFileMissing",
  "MalformedOutputLine",
  "UnknownContactType",
  "FormatNotSupportedError",
  "ParserFunc",
]
