"""
Bulk import domain models: parsed input lines and per-line outcomes.
"""

from dataclasses import dataclass, field
from enum import StrEnum


@dataclass(frozen=True, kw_only=True)
class HashTriple:
    """A file described by name, size and SHA-256 hash."""

    filename: str
    size: int
    sha256: str


@dataclass(frozen=True, kw_only=True)
class ShareLink:
    """A file described by its public share link."""

    quick_key: str


ImportLine = HashTriple | ShareLink


class OutcomeKind(StrEnum):
    """Kind of per-line import outcome."""

    SUCCESS = "success"
    ALREADY_OWNED = "already_owned"
    NOT_FOUND = "not_found"
    FAILED = "failed"
    FATAL = "fatal"


@dataclass(frozen=True, kw_only=True)
class Success:
    """The file was added to the account."""

    quick_key: str
    filename: str
    link: str
    kind: OutcomeKind = field(default=OutcomeKind.SUCCESS, init=False)


@dataclass(frozen=True, kw_only=True)
class AlreadyOwned:
    """The account already holds this file."""

    filename: str
    kind: OutcomeKind = field(default=OutcomeKind.ALREADY_OWNED, init=False)


@dataclass(frozen=True, kw_only=True)
class NotFound:
    """No file with this hash is hosted."""

    filename: str
    kind: OutcomeKind = field(default=OutcomeKind.NOT_FOUND, init=False)


@dataclass(frozen=True, kw_only=True)
class Failed:
    """The line failed; processing continues."""

    identifier: str
    message: str
    kind: OutcomeKind = field(default=OutcomeKind.FAILED, init=False)


@dataclass(frozen=True, kw_only=True)
class Fatal:
    """The line failed; the rest of the batch is abandoned."""

    identifier: str
    message: str
    kind: OutcomeKind = field(default=OutcomeKind.FATAL, init=False)


ImportOutcome = Success | AlreadyOwned | NotFound | Failed | Fatal


@dataclass(kw_only=True)
class ImportReport:
    """
    Result of one bulk import run.

    Attributes:
        outcomes: Outcomes in input order.
        skipped: Number of empty or unrecognized lines.
        aborted: Whether a fatal outcome stopped the run early.
    """

    outcomes: list[ImportOutcome] = field(default_factory=list)
    skipped: int = 0
    aborted: bool = False

    def of_kind(self, kind: OutcomeKind) -> list[ImportOutcome]:
        return [outcome for outcome in self.outcomes if outcome.kind == kind]

    @property
    def added(self) -> list[Success]:
        return [outcome for outcome in self.outcomes if isinstance(outcome, Success)]


@dataclass(frozen=True, kw_only=True)
class FileInfo:
    """Metadata of a stored file, as returned by ``file/get_info``."""

    quick_key: str
    filename: str
    size: int
    sha256: str
