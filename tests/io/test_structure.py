"""Tests for structure inspection."""

import pathlib

from qcontacts.io.structure import list_chains


def test_list_chains(pdb_file: pathlib.Path) -> None:
  assert list_chains(pdb_file) == ["A", "B"]


def test_list_chains_accepts_str(pdb_file: pathlib.Path) -> None:
  assert list_chains(str(pdb_file)) == ["A", "B"]
