"""Delete compiled executables whose Rust source sits in the same directory."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Literal

from rs_clean.utils.paths import is_regular_file, strip_suffix

LOGGER = logging.getLogger(__name__)

SOURCE_SUFFIX = ".rs"
START_NOTICE = "Removing compiled executables..."
COMPLETE_NOTICE = "Cleanup complete!"

CandidateOutcome = Literal["deleted", "absent", "not_regular", "failed"]
StatusCallback = Callable[[str], None]


class FatalListingError(RuntimeError):
    """Raised when the target directory cannot be enumerated."""

    def __init__(self, directory: Path, reason: str) -> None:
        super().__init__(f"cannot list directory {directory}: {reason}")
        self.directory = directory
        self.reason = reason


@dataclass(frozen=True, slots=True)
class Candidate:
    """A source filename paired with the executable name derived from it."""

    source_name: str
    executable_name: str


@dataclass(frozen=True, slots=True)
class DeletionError:
    """An executable that passed the regular-file check but could not be removed."""

    executable_name: str
    path: Path
    message: str


@dataclass(frozen=True, slots=True)
class CandidateResult:
    """Outcome of processing one candidate."""

    candidate: Candidate
    outcome: CandidateOutcome
    error: DeletionError | None = None


@dataclass(frozen=True, slots=True)
class CleanupResult:
    """Return object for one cleanup run."""

    directory: Path
    candidates_total: int
    deleted: tuple[str, ...]
    errors: tuple[DeletionError, ...]

    @property
    def deleted_count(self) -> int:
        return len(self.deleted)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    def summary(self) -> dict[str, Any]:
        """Return run counters as a plain dictionary."""

        return {
            "directory": str(self.directory),
            "candidates_total": self.candidates_total,
            "deleted_count": self.deleted_count,
            "error_count": self.error_count,
        }


def derive_candidate(source_name: str) -> Candidate | None:
    """Build a candidate from a filename, or None when it is not a Rust source name."""

    executable_name = strip_suffix(source_name, SOURCE_SUFFIX)
    if executable_name is None:
        return None
    return Candidate(source_name=source_name, executable_name=executable_name)


def discover_candidates(directory: Path) -> list[Candidate]:
    """List source files directly inside directory and pair each with its executable name."""

    try:
        entries = sorted(directory.iterdir(), key=lambda entry: entry.name)
    except OSError as exc:
        raise FatalListingError(directory, exc.strerror or str(exc)) from exc

    candidates: list[Candidate] = []
    for entry in entries:
        candidate = derive_candidate(entry.name)
        if candidate is None or not entry.is_file():
            continue
        candidates.append(candidate)
    return candidates


def process_candidate(
    directory: Path,
    candidate: Candidate,
    logger: logging.Logger | None = None,
) -> CandidateResult:
    """Remove the candidate's executable if it exists as a regular file."""

    effective_logger = logger or LOGGER
    executable_path = directory / candidate.executable_name
    try:
        if not is_regular_file(executable_path):
            outcome: CandidateOutcome = (
                "not_regular" if executable_path.exists() or executable_path.is_symlink() else "absent"
            )
            effective_logger.debug(
                "cleanup.skipped source=%s executable=%s outcome=%s",
                candidate.source_name,
                candidate.executable_name,
                outcome,
            )
            return CandidateResult(candidate=candidate, outcome=outcome)
        executable_path.unlink()
    except OSError as exc:
        error = DeletionError(
            executable_name=candidate.executable_name,
            path=executable_path,
            message=exc.strerror or str(exc),
        )
        effective_logger.info(
            "cleanup.delete_failed executable=%s error=%s",
            executable_path,
            error.message,
        )
        return CandidateResult(candidate=candidate, outcome="failed", error=error)

    effective_logger.info("cleanup.deleted executable=%s source=%s", executable_path, candidate.source_name)
    return CandidateResult(candidate=candidate, outcome="deleted")


def run_cleanup(
    directory: Path,
    *,
    on_status: StatusCallback | None = None,
    logger: logging.Logger | None = None,
) -> CleanupResult:
    """Delete every executable in directory that has a matching ``.rs`` source.

    The start notice is emitted before listing and the completion notice after
    every candidate has been processed. Deletion failures are collected in the
    result; a directory that cannot be listed raises ``FatalListingError``.
    """

    effective_logger = logger or LOGGER
    started = time.perf_counter()

    def _notify(message: str) -> None:
        effective_logger.info("cleanup.status message=%s", message)
        if on_status is not None:
            on_status(message)

    _notify(START_NOTICE)
    candidates = discover_candidates(directory)
    effective_logger.info("cleanup.discovered directory=%s candidates=%s", directory, len(candidates))

    deleted: list[str] = []
    errors: list[DeletionError] = []
    for candidate in candidates:
        result = process_candidate(directory, candidate, logger=effective_logger)
        if result.outcome == "deleted":
            deleted.append(candidate.executable_name)
        elif result.error is not None:
            errors.append(result.error)

    _notify(COMPLETE_NOTICE)
    cleanup_result = CleanupResult(
        directory=directory,
        candidates_total=len(candidates),
        deleted=tuple(deleted),
        errors=tuple(errors),
    )
    summary = cleanup_result.summary()
    effective_logger.info(
        "cleanup.summary directory=%s candidates=%s deleted=%s errors=%s duration_s=%.3f",
        summary["directory"],
        summary["candidates_total"],
        summary["deleted_count"],
        summary["error_count"],
        time.perf_counter() - started,
    )
    return cleanup_result
