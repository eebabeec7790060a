"""Output-file parser registry and custom exceptions."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

# --- Exception Hierarchy ---


class QContactsError(Exception):
  """Base class for all qcontacts exceptions."""


class InvalidExecutable(QContactsError):  # noqa: N818
  """Error raised when the Qcontacts executable cannot be found or run."""

  def __init__(self, candidate: str) -> None:
    self.candidate = candidate
    super().__init__(f"cannot find `{candidate}` in PATH or it is not executable")


class ParsingError(QContactsError):
  """Error raised when parsing fails."""


class OutputFileMissing(ParsingError):  # noqa: N818
  """Error raised when an expected Qcontacts output file does not exist."""

  def __init__(self, path: Any) -> None:  # noqa: ANN401
    self.path = path
    super().__init__(f"Qcontacts output file not found: {path}")


class MalformedOutputLine(ParsingError):  # noqa: N818
  """Error raised when an output line lacks the columns the parser reads.

  Attributes:
    path: File the line came from, if known.
    line_number: 1-based line number, if known.
    line: The offending line, stripped of its newline.

  """

  def __init__(
    self,
    reason: str,
    line: str,
    *,
    path: Any = None,  # noqa: ANN401
    line_number: int | None = None,
  ) -> None:
    self.reason = reason
    self.line = line.rstrip("\n")
    self.path = path
    self.line_number = line_number
    location = ""
    if path is not None:
      location = f"{path}:{line_number}: " if line_number is not None else f"{path}: "
    super().__init__(f"{location}{reason}: {self.line!r}")

  def located(self, path: Any, line_number: int) -> MalformedOutputLine:  # noqa: ANN401
    """Return a copy of this error that records where the line was read."""
    return type(self)(self.reason, self.line, path=path, line_number=line_number)


class UnknownContactType(MalformedOutputLine):
  """Error raised for an atom contact whose type code has no column mapping."""

  def __init__(
    self,
    contact_type: str,
    line: str,
    *,
    path: Any = None,  # noqa: ANN401
    line_number: int | None = None,
  ) -> None:
    self.contact_type = contact_type
    super().__init__(
      f"unknown contact type {contact_type!r}",
      line,
      path=path,
      line_number=line_number,
    )

  def located(self, path: Any, line_number: int) -> UnknownContactType:  # noqa: ANN401
    """Return a copy of this error that records where the line was read."""
    return type(self)(self.contact_type, self.line, path=path, line_number=line_number)


class FormatNotSupportedError(QContactsError):
  """Error raised when an output file format is not supported."""


# --- Registry ---

# Parser function signature:
# (file_path: str | pathlib.Path) -> Iterator[AtomContact] | Iterator[ResidueContact]
ParserFunc = Callable[..., Iterator[Any]]

_PARSER_REGISTRY: dict[str, ParserFunc] = {}


def register_parser(formats: list[str]) -> Callable[[ParserFunc], ParserFunc]:
  """Decorator to register a parser function for specific output formats."""

  def decorator(fn: ParserFunc) -> ParserFunc:
    for fmt in formats:
      _PARSER_REGISTRY[fmt] = fn
    return fn

  return decorator


def get_parser(fmt: str) -> ParserFunc | None:
  """Get a parser function for a specific format."""
  return _PARSER_REGISTRY.get(fmt)


def list_supported_formats() -> list[str]:
  """List all supported formats."""
  return sorted(_PARSER_REGISTRY.keys())
