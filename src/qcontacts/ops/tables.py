"""Column-oriented views of parsed contacts.

Records are convenient for iteration; numpy columns are convenient for
filtering and plotting. Unset type-dependent fields become NaN.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

import numpy as np

from qcontacts.core.containers import OPTIONAL_ATOM_FIELDS, AtomContact, ResidueContact

if TYPE_CHECKING:
  from qcontacts.types import ContactNames, ContactNumbers, ContactTable, ContactValues


def _values(values: Iterable[float | None]) -> ContactValues:
  return np.array([np.nan if v is None else v for v in values], dtype=np.float64)


def _numbers(values: Iterable[int]) -> ContactNumbers:
  return np.array(list(values), dtype=np.int64)


def _names(values: Iterable[str]) -> ContactNames:
  return np.array(list(values), dtype=str)


def atom_contacts_to_arrays(contacts: Sequence[AtomContact]) -> ContactTable:
  """Convert atom contacts into a dict of equal-length numpy columns.

  Args:
    contacts: Parsed atom contacts.

  Returns:
    Columns `type`, `area`, `angle`, `Rno`, `dGhb`, `dGip` and, for each of
    `atom1` and `atom2`, `<side>_number`, `<side>_name`,
    `<side>_residue_name`, `<side>_residue_number`.

  """
  table: ContactTable = {
    "type": _names(c.type for c in contacts),
    "area": _values(c.area for c in contacts),
  }
  for name in OPTIONAL_ATOM_FIELDS:
    table[name] = _values(getattr(c, name) for c in contacts)
  for side in ("atom1", "atom2"):
    atoms = [getattr(c, side) for c in contacts]
    table[f"{side}_number"] = _numbers(a.atom_number for a in atoms)
    table[f"{side}_name"] = _names(a.atom_name for a in atoms)
    table[f"{side}_residue_name"] = _names(a.residue_name for a in atoms)
    table[f"{side}_residue_number"] = _numbers(a.residue_number for a in atoms)
  return table


def residue_contacts_to_arrays(contacts: Sequence[ResidueContact]) -> ContactTable:
  """Convert residue contacts into a dict of equal-length numpy columns."""
  table: ContactTable = {"area": _values(c.area for c in contacts)}
  for side in ("res1", "res2"):
    residues = [getattr(c, side) for c in contacts]
    table[f"{side}_number"] = _numbers(r.number for r in residues)
    table[f"{side}_name"] = _names(r.name for r in residues)
  return table


def summarize_by_type(contacts: Iterable[AtomContact]) -> dict[str, tuple[int, float]]:
  """Count contacts and sum their areas per contact type.

  Returns:
    Mapping from type code to `(count, total_area)`, in order of first
    appearance.

  """
  summary: dict[str, tuple[int, float]] = {}
  for contact in contacts:
    count, total = summary.get(contact.type, (0, 0.0))
    summary[contact.type] = (count + 1, total + contact.area)
  return summary
