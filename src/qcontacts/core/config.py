"""Run configuration and command-line argument derivation."""

from __future__ import annotations

import logging
import pathlib
from collections.abc import Sequence
from dataclasses import dataclass, field

from qcontacts.io.executables import is_executable
from qcontacts.io.parsing.registry import InvalidExecutable

logger = logging.getLogger(__name__)

DEFAULT_PROGRAM_NAME = "Qcontacts"
DEFAULT_PROBE_RADIUS = 1.4
DEFAULT_CHAINS = ("", "")


@dataclass(frozen=True, kw_only=True)
class QContactsConfig:
  """Options for one Qcontacts run.

  Attributes:
    file: PDB file with the structures to analyze.
    chains: Chain IDs of the two subunits whose contacts are computed. Empty
      strings are passed through to the program unchanged.
    probe_radius: Probe radius used for the exposed and buried surfaces, in
      Angstroms. Leave it at 1.4 unless there is a strong reason not to.
    executable: Path to the Qcontacts binary, or a name to look up in PATH.
    program_dir: Optional directory the executable lives in.
    arguments: Flags derived from the fields above, see `derive_arguments`.

  Raises:
    InvalidExecutable: If the executable cannot be found or is not runnable.

  """

  file: str | pathlib.Path
  chains: Sequence[str] = DEFAULT_CHAINS
  probe_radius: float = DEFAULT_PROBE_RADIUS
  executable: str = DEFAULT_PROGRAM_NAME
  program_dir: str | pathlib.Path | None = None
  arguments: dict[str, str] = field(init=False, repr=False, compare=False)

  def __post_init__(self) -> None:
    if isinstance(self.chains, str):
      msg = f"Expected a pair of chain IDs such as (\"A\", \"B\"), got the string {self.chains!r}."
      logger.error(msg)
      raise TypeError(msg)
    chains = tuple(self.chains)
    if len(chains) != 2:  # noqa: PLR2004
      msg = f"Expected a pair of chain IDs, got {chains!r}."
      logger.error(msg)
      raise ValueError(msg)
    object.__setattr__(self, "chains", chains)

    if not is_executable(self.executable_path):
      error = InvalidExecutable(self.executable_path)
      logger.error(str(error))
      raise error

    object.__setattr__(self, "arguments", derive_arguments(self))

  @property
  def executable_path(self) -> str:
    """The executable joined onto `program_dir` when one is set."""
    if self.program_dir is None:
      return str(self.executable)
    return str(pathlib.Path(self.program_dir) / self.executable)


def derive_arguments(config: QContactsConfig) -> dict[str, str]:
  """Build the configuration-time flags passed to Qcontacts.

  Values are taken verbatim from the configuration. The output prefix is only
  known once a working directory exists, see `build_arguments`.
  """
  first, second = config.chains
  return {
    "-c1": first,
    "-c2": second,
    "-i": str(config.file),
    "-probe": str(config.probe_radius),
  }


def build_arguments(
  config: QContactsConfig,
  working_dir: str | pathlib.Path,
) -> dict[str, str]:
  """Complete the flags for a run writing its output into `working_dir`."""
  arguments = dict(config.arguments)
  arguments["-prefOut"] = f"{working_dir}/"
  return arguments
