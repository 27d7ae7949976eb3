"""Exception types.

Convention:
- Missing files and folders are not exceptions; callers get an empty result
  and a logged warning.
- ``WrsyncError`` subclasses mark conditions a command reports to the user and
  then either skips (per-file sync failures) or stops on (a cancelled
  creation flow).
- ``OSError`` from writing a new source file is never wrapped; it propagates.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class WrsyncError(Exception):
    """Base class for wrsync errors."""


class AmbiguousBackingFileError(WrsyncError):
    """Raised when an asset folder holds several candidate backing files."""

    def __init__(self, folder: str, candidates: list[Path]) -> None:
        self.folder = folder
        self.candidates = candidates
        names = ", ".join(p.name for p in candidates)
        super().__init__(
            f"Asset folder {folder} holds {len(candidates)} candidate files ({names}); "
            "set FileName in its descriptor to pick one"
        )


class CreationCancelledError(WrsyncError):
    """Raised when the creation flow stops without writing anything."""


class NoAssetFoldersError(CreationCancelledError):
    """Raised when there is no asset folder to map a new source file to."""
