"""Shared test fixtures."""

import pathlib
import stat
from collections.abc import Callable

import pytest

BY_ATOM_VOR = """\
A V 318 ASN A 2226 CB B 59 SER B 461 OG 0.400
A H 320 ASP A 2240 OD1 B 61 LYS B 480 NZ 0.250 32.1 2.80)
A I 321 GLU A 2250 OE2 B 62 ARG B 490 NH1 1.100 3.75
A S 322 GLU A 2260 OE1 B 63 ARG B 500 NH2 2.500 Ghb -1.20 Gip -0.85) 21.4 2.95)
"""

BY_RES_VOR = """\
A 318 ASN - B 59 SER - 20.033
A 10 ALA - B 59 SER - 0 20.033 -
A 322 GLU - B 63 ARG - 2.500
"""

PDB_TWO_CHAINS = """\
ATOM      1  N   MET A   1      27.340  24.430   2.614  1.00  9.67           N
ATOM      2  CA  MET A   1      26.266  25.413   2.842  1.00 10.38           C
ATOM      3  N   GLN B   2      26.335  27.770   3.258  1.00  9.27           N
ATOM      4  CA  GLN B   2      26.850  29.021   3.898  1.00  9.07           C
END
"""

FAKE_QCONTACTS = """\
#!/bin/sh
out=""
input=""
while [ $# -gt 0 ]; do
  if [ "$1" = "-prefOut" ]; then
    out="$2"
  fi
  if [ "$1" = "-i" ]; then
    input="$2"
  fi
  shift
done
echo "$out" > "{log}"
if [ ! -f "$input" ]; then
  echo "cannot open $input" >&2
  exit 2
fi
cat > "${{out}}-by-atom.vor" <<'EOF'
{by_atom}EOF
cat > "${{out}}-by-res.vor" <<'EOF'
{by_res}EOF
"""

FAILING_QCONTACTS = """\
#!/bin/sh
out=""
while [ $# -gt 0 ]; do
  if [ "$1" = "-prefOut" ]; then
    out="$2"
  fi
  shift
done
echo "$out" > "{log}"
echo "Segmentation fault" >&2
exit 1
"""


def _write_executable(path: pathlib.Path, content: str) -> pathlib.Path:
  path.write_text(content)
  path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
  return path


@pytest.fixture
def pdb_file(tmp_path: pathlib.Path) -> pathlib.Path:
  """A small PDB file with chains A and B."""
  path = tmp_path / "complex.pdb"
  path.write_text(PDB_TWO_CHAINS)
  return path


@pytest.fixture
def by_atom_file(tmp_path: pathlib.Path) -> pathlib.Path:
  """A by-atom output file with one contact of each type."""
  path = tmp_path / "run-by-atom.vor"
  path.write_text(BY_ATOM_VOR)
  return path


@pytest.fixture
def by_res_file(tmp_path: pathlib.Path) -> pathlib.Path:
  """A by-residue output file."""
  path = tmp_path / "run-by-res.vor"
  path.write_text(BY_RES_VOR)
  return path


@pytest.fixture
def prefix_log(tmp_path: pathlib.Path) -> pathlib.Path:
  """File in which fake executables record the -prefOut they received."""
  return tmp_path / "prefout.log"


@pytest.fixture
def write_fake_qcontacts(prefix_log: pathlib.Path) -> Callable[[pathlib.Path], pathlib.Path]:
  """Factory writing the fake executable to a chosen path; it exits 2 if -i is missing."""
  script = FAKE_QCONTACTS.format(log=prefix_log, by_atom=BY_ATOM_VOR, by_res=BY_RES_VOR)

  def _write(path: pathlib.Path) -> pathlib.Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    return _write_executable(path, script)

  return _write


@pytest.fixture
def fake_qcontacts(
  tmp_path: pathlib.Path,
  write_fake_qcontacts: Callable[[pathlib.Path], pathlib.Path],
) -> pathlib.Path:
  """An executable that writes the fixture output files to -prefOut."""
  return write_fake_qcontacts(tmp_path / "fake_qcontacts")


@pytest.fixture
def failing_qcontacts(tmp_path: pathlib.Path, prefix_log: pathlib.Path) -> pathlib.Path:
  """An executable that writes nothing and exits with status 1."""
  script = FAILING_QCONTACTS.format(log=prefix_log)
  return _write_executable(tmp_path / "failing_qcontacts", script)
