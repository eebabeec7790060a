"""Inspection of the input structure before a run."""

import logging
import pathlib

from biotite.structure import get_chains
from biotite.structure.io.pdb import PDBFile

logger = logging.getLogger(__name__)


def list_chains(pdb_path: str | pathlib.Path) -> list[str]:
  """List the chain IDs of the first model of a PDB file.

  Handy for picking the `chains` pair of a run. The chains are returned in
  order of appearance.

  Args:
      pdb_path: Path to the PDB file.

  Returns:
      The chain IDs.

  """
  pdb_file = PDBFile.read(str(pdb_path))
  atom_array = pdb_file.get_structure(model=1)
  chains = [str(chain) for chain in get_chains(atom_array)]
  logger.debug("Found chains %s in %s", chains, pdb_path)
  return chains
