"""Tests for run configuration and argument derivation."""

import dataclasses
import pathlib

import pytest

from qcontacts.core.config import QContactsConfig, build_arguments, derive_arguments
from qcontacts.io.parsing.registry import InvalidExecutable


def test_defaults(fake_qcontacts: pathlib.Path) -> None:
  config = QContactsConfig(file="complex.pdb", executable=str(fake_qcontacts))

  assert config.chains == ("", "")
  assert config.probe_radius == 1.4
  assert config.program_dir is None


def test_derive_arguments(fake_qcontacts: pathlib.Path) -> None:
  config = QContactsConfig(
    file="complex.pdb",
    chains=["A", "B"],
    probe_radius=1.2,
    executable=str(fake_qcontacts),
  )

  arguments = derive_arguments(config)

  assert list(arguments) == ["-c1", "-c2", "-i", "-probe"]
  assert arguments == {"-c1": "A", "-c2": "B", "-i": "complex.pdb", "-probe": "1.2"}
  assert config.arguments == arguments


def test_empty_chains_pass_through(fake_qcontacts: pathlib.Path) -> None:
  config = QContactsConfig(file="complex.pdb", executable=str(fake_qcontacts))

  assert config.arguments["-c1"] == ""
  assert config.arguments["-c2"] == ""
  assert config.arguments["-probe"] == "1.4"


def test_build_arguments_adds_output_prefix(
  fake_qcontacts: pathlib.Path,
  tmp_path: pathlib.Path,
) -> None:
  config = QContactsConfig(file="complex.pdb", chains=("A", "B"), executable=str(fake_qcontacts))

  arguments = build_arguments(config, tmp_path)

  assert list(arguments) == ["-c1", "-c2", "-i", "-probe", "-prefOut"]
  assert arguments["-prefOut"] == f"{tmp_path}/"
  assert "-prefOut" not in config.arguments


def test_invalid_executable() -> None:
  with pytest.raises(InvalidExecutable) as excinfo:
    QContactsConfig(file="complex.pdb", executable="definitely-not-a-qcontacts-binary")

  assert excinfo.value.candidate == "definitely-not-a-qcontacts-binary"
  assert "cannot find `definitely-not-a-qcontacts-binary` in PATH" in str(excinfo.value)


def test_program_dir(fake_qcontacts: pathlib.Path) -> None:
  config = QContactsConfig(
    file="complex.pdb",
    executable=fake_qcontacts.name,
    program_dir=fake_qcontacts.parent,
  )

  assert config.executable_path == str(fake_qcontacts)


def test_program_dir_without_program(tmp_path: pathlib.Path) -> None:
  with pytest.raises(InvalidExecutable) as excinfo:
    QContactsConfig(file="complex.pdb", executable="Qcontacts", program_dir=tmp_path)

  assert excinfo.value.candidate == str(tmp_path / "Qcontacts")


def test_chains_must_be_a_pair(fake_qcontacts: pathlib.Path) -> None:
  with pytest.raises(ValueError, match="pair of chain IDs"):
    QContactsConfig(file="complex.pdb", chains=("A",), executable=str(fake_qcontacts))


def test_config_is_frozen(fake_qcontacts: pathlib.Path) -> None:
  config = QContactsConfig(file="complex.pdb", executable=str(fake_qcontacts))

  with pytest.raises(dataclasses.FrozenInstanceError):
    config.probe_radius = 2.0  # type: ignore[misc]


@pytest.mark.parametrize("chains", ["AB", "A", ""])
def test_chains_as_string_rejected(fake_qcontacts: pathlib.Path, chains: str) -> None:
  with pytest.raises(TypeError, match="got the string"):
    QContactsConfig(file="complex.pdb", chains=chains, executable=str(fake_qcontacts))
