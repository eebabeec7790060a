"""Running Qcontacts and collecting its contacts.

Qcontacts implements the Polyhedra algorithm for protein-protein contacts
(Fischer, T. et al., Assessing methods for identifying pair-wise atomic
contacts across binding interfaces, J. Struct. Biol. 153, 103-112, 2006).
Given a PDB file and two chain IDs it reports every contact between the
chains, classified as packing interaction, hydrogen bond, ion pair or salt
bridge.

Example:
    >>> from qcontacts import QContacts
    >>> q = QContacts(file="complex.pdb", chains=("A", "B"))
    >>> by_atom, by_residue = q.run()

"""

from __future__ import annotations

import logging
import pathlib
import tempfile
from collections.abc import Sequence

from qcontacts.core.config import (
  DEFAULT_CHAINS,
  DEFAULT_PROBE_RADIUS,
  DEFAULT_PROGRAM_NAME,
  QContactsConfig,
  build_arguments,
)
from qcontacts.core.containers import AtomContact, ResidueContact
from qcontacts.io.executables import resolve_executable
from qcontacts.io.process import run_process
from qcontacts.io.parsing.vor import (
  BY_ATOM_SUFFIX,
  BY_RESIDUE_SUFFIX,
  parse_atom_file,
  parse_residue_file,
)

logger = logging.getLogger(__name__)


def run(config: QContactsConfig) -> tuple[list[AtomContact], list[ResidueContact]]:
  """Run Qcontacts for `config` and parse both output files.

  The output is written to a fresh temporary directory that is removed when
  this function returns or raises.

  Args:
      config: A validated run configuration.

  Returns:
      The atom-atom contacts and the residue-residue contacts, in file order.

  Raises:
      OutputFileMissing: If Qcontacts did not write one of its output files.
      MalformedOutputLine: If an output line cannot be parsed.

  """
  logger.info(
    "Running Qcontacts on %s (chains %r, probe radius %s)",
    config.file,
    config.chains,
    config.probe_radius,
  )
  with tempfile.TemporaryDirectory(prefix="qcontacts-") as working_dir:
    arguments = build_arguments(config, working_dir)
    run_process(resolve_executable(config.executable_path), arguments, working_dir)

    prefix = arguments["-prefOut"]
    by_atom = list(parse_atom_file(pathlib.Path(prefix + BY_ATOM_SUFFIX)))
    by_residue = list(parse_residue_file(pathlib.Path(prefix + BY_RESIDUE_SUFFIX)))

  logger.info(
    "Qcontacts found %d atom contacts and %d residue contacts",
    len(by_atom),
    len(by_residue),
  )
  return by_atom, by_residue


class QContacts:
  """Object interface to a Qcontacts run.

  Options can be set at construction or assigned afterwards; the executable is
  validated when the configuration is built.

  Attributes:
      file: PDB file with the structures to analyze.
      chains: Pair of chain IDs whose contacts are computed.
      probe_radius: Probe radius in Angstroms.
      executable: Path to the Qcontacts binary, or a name to look up in PATH.
      program_dir: Optional directory the executable lives in.

  """

  program_name = DEFAULT_PROGRAM_NAME

  def __init__(
    self,
    file: str | pathlib.Path | None = None,
    chains: Sequence[str] = DEFAULT_CHAINS,
    probe_radius: float = DEFAULT_PROBE_RADIUS,
    executable: str | None = None,
    program_dir: str | pathlib.Path | None = None,
  ) -> None:
    self.file = file
    self.chains = chains
    self.probe_radius = probe_radius
    self.executable = executable or self.program_name
    self.program_dir = program_dir

  @property
  def config(self) -> QContactsConfig:
    """Build the validated configuration for the current options.

    Raises:
        ValueError: If no input file has been set.
        InvalidExecutable: If the executable cannot be found.

    """
    if self.file is None:
      msg = "No input file set; assign a PDB path to `file` first."
      logger.error(msg)
      raise ValueError(msg)
    return QContactsConfig(
      file=self.file,
      chains=self.chains,
      probe_radius=self.probe_radius,
      executable=self.executable,
      program_dir=self.program_dir,
    )

  @property
  def arguments(self) -> dict[str, str]:
    """The configuration-time flags for the current options."""
    return self.config.arguments

  def run(self) -> tuple[list[AtomContact], list[ResidueContact]]:
    """Run Qcontacts; see `qcontacts.runner.run`."""
    return run(self.config)
