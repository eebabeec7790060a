"""Dataclasses for Qcontacts contact records.

This module defines:
- AtomDescriptor, AtomContact: one line of the by-atom output
- ResidueDescriptor, ResidueContact: one line of the by-residue output
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

ContactType = Literal["V", "H", "S", "I"]

CONTACT_TYPE_NAMES: dict[str, str] = {
  "V": "Van der Waals (packing interaction)",
  "H": "Hydrogen bond",
  "I": "Ion pair",
  "S": "Salt bridge (hydrogen-bonded ion pair)",
}

OPTIONAL_ATOM_FIELDS = ("angle", "Rno", "dGhb", "dGip")


@dataclass(frozen=True, kw_only=True)
class AtomDescriptor:
  """One side of an atom-atom contact.

  Attributes:
    atom_number: Atom serial number in the input PDB file.
    atom_name: PDB atom name (e.g. "CB", "OG").
    residue_name: Three-letter name of the parent residue.
    residue_number: Sequence number of the parent residue.
    insertion_code: PDB insertion code of the parent residue, if any.

  """

  atom_number: int
  atom_name: str
  residue_name: str
  residue_number: int
  insertion_code: str = ""


@dataclass(frozen=True, kw_only=True)
class AtomContact:
  """An atom-atom contact across the interface.

  `atom1` belongs to the first chain passed to Qcontacts and `atom2` to the
  second. Every contact carries an `area` in square Angstroms. N-O contacts
  (I, S, H) also carry `Rno`, the N-O distance; directional contacts (S, H)
  carry the contact `angle`; salt bridges add the hydrogen bond (`dGhb`) and
  ion pair (`dGip`) free energy estimates.

  """

  atom1: AtomDescriptor
  atom2: AtomDescriptor
  type: ContactType
  area: float
  angle: float | None = None
  Rno: float | None = None  # noqa: N815
  dGhb: float | None = None  # noqa: N815
  dGip: float | None = None  # noqa: N815

  @property
  def present_fields(self) -> tuple[str, ...]:
    """Names of the type-dependent fields set on this contact, always led by area."""
    return ("area", *(name for name in OPTIONAL_ATOM_FIELDS if getattr(self, name) is not None))

  def as_dict(self) -> dict[str, Any]:
    """Render the contact as nested dicts; insertion codes appear only when set."""
    result: dict[str, Any] = {
      "atom1": _atom_as_dict(self.atom1),
      "atom2": _atom_as_dict(self.atom2),
      "type": self.type,
    }
    for name in self.present_fields:
      result[name] = getattr(self, name)
    return result


@dataclass(frozen=True, kw_only=True)
class ResidueDescriptor:
  """One side of a residue-residue contact."""

  number: int
  name: str
  insertion_code: str = ""

  @property
  def residue_number(self) -> int:
    return self.number

  @property
  def residue_name(self) -> str:
    return self.name


@dataclass(frozen=True, kw_only=True)
class ResidueContact:
  """A residue-residue contact.

  The area is the sum over every atom-atom contact the residue pair has, so
  no contact type is given.
  """

  res1: ResidueDescriptor
  res2: ResidueDescriptor
  area: float

  def as_dict(self) -> dict[str, Any]:
    """Render the contact as nested dicts; insertion codes appear only when set."""
    return {
      "res1": _residue_as_dict(self.res1),
      "res2": _residue_as_dict(self.res2),
      "area": self.area,
    }


def _atom_as_dict(atom: AtomDescriptor) -> dict[str, Any]:
  result: dict[str, Any] = {
    "number": atom.atom_number,
    "name": atom.atom_name,
    "res_name": atom.residue_name,
    "res_number": atom.residue_number,
  }
  if atom.insertion_code:
    result["insertion_code"] = atom.insertion_code
  return result


def _residue_as_dict(residue: ResidueDescriptor) -> dict[str, Any]:
  result: dict[str, Any] = {"number": residue.number, "name": residue.name}
  if residue.insertion_code:
    result["insertion_code"] = residue.insertion_code
  return result
