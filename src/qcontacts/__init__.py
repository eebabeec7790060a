"""qcontacts: a wrapper for the Qcontacts protein-protein contact program.

This package runs the external Qcontacts executable on a PDB file and parses
its per-atom and per-residue output files into contact records.
"""

from qcontacts.core.config import (
  QContactsConfig,
  build_arguments,
  derive_arguments,
)
from qcontacts.core.containers import (
  AtomContact,
  AtomDescriptor,
  ResidueContact,
  ResidueDescriptor,
)
from qcontacts.io.executables import is_executable, resolve_executable
from qcontacts.io.parsing import (
  FormatNotSupportedError,
  InvalidExecutable,
  MalformedOutputLine,
  OutputFileMissing,
  ParsingError,
  QContactsError,
  UnknownContactType,
  load_contacts,
  parse_atom_file,
  parse_residue_file,
)
from qcontacts.io.structure import list_chains
from qcontacts.ops.tables import (
  atom_contacts_to_arrays,
  residue_contacts_to_arrays,
  summarize_by_type,
)
from qcontacts.runner import QContacts, run

__version__ = "0.1.0"

__all__ = [
  # Running
  "QContacts",
  "QContactsConfig",
  "run",
  "build_arguments",
  "derive_arguments",
  "is_executable",
  "resolve_executable",
  # Parsing
  "parse_atom_file",
  "parse_residue_file",
  "load_contacts",
  # Records
  "AtomContact",
  "AtomDescriptor",
  "ResidueContact",
  "ResidueDescriptor",
  # Tables
  "atom_contacts_to_arrays",
  "residue_contacts_to_arrays",
  "summarize_by_type",
  # Structure
  "list_chains",
  # Errors
  "QContactsError",
  "InvalidExecutable",
  "ParsingError",
  "OutputFileMissing",
  "MalformedOutputLine",
  "UnknownContactType",
  "FormatNotSupportedError",
]
