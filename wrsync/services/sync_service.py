"""Sync service: copy compiled artifacts into their mapped asset folders."""

from __future__ import annotations

import hashlib
import logging
import shutil
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import TYPE_CHECKING

from wrsync.exceptions import AmbiguousBackingFileError

if TYPE_CHECKING:
    from pathlib import Path

    from wrsync.config import Settings
    from wrsync.filesystem.assets import AssetScanner
    from wrsync.filesystem.mapping_store import MappingStore

logger = logging.getLogger(__name__)


@dataclass
class SyncedFile:
    source_key: str
    artifact: Path
    target: Path
    changed: bool


@dataclass
class SyncReport:
    """What one sync run did, file by file."""

    synced: list[SyncedFile] = field(default_factory=list)
    unmapped: list[str] = field(default_factory=list)
    pruned: dict[str, str] = field(default_factory=dict)  # source key -> vanished folder
    skipped: list[str] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)  # source key -> error message

    @property
    def synced_count(self) -> int:
        return len(self.synced)

    @property
    def changed_count(self) -> int:
        return sum(1 for entry in self.synced if entry.changed)


def hash_file(path: Path) -> str:
    """Compute SHA-256 hash of a file."""
    sha = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            sha.update(chunk)
    return sha.hexdigest()


def discover_artifacts(dist_dir: Path, compiled_ext: str) -> list[Path]:
    """Recursively discover compiled files under the build-output root, sorted by path."""
    if not dist_dir.is_dir():
        logger.warning("No build output directory at %s. Run the compiler first.", dist_dir)
        return []
    return sorted(p for p in dist_dir.rglob(f"*{compiled_ext}") if p.is_file())


def source_key_for(artifact: Path, dist_dir: Path, source_ext: str, compiled_ext: str) -> str:
    """Mapping key for a compiled artifact.

    ``dist/forms/account.js`` becomes ``forms/account.ts``: the path relative
    to the build-output root with only the trailing extension swapped.
    """
    relative = PurePosixPath(artifact.relative_to(dist_dir).as_posix())
    name = relative.name
    if name.endswith(compiled_ext):
        name = name[: -len(compiled_ext)] + source_ext
    return str(relative.with_name(name))


def resolve_backing_file(scanner: AssetScanner, folder: str) -> Path | None:
    """The single deployable file in an asset folder.

    Several candidates are only acceptable when the descriptor's ``FileName``
    names one of them.
    """
    candidates = scanner.backing_files(folder)
    if not candidates:
        return None
    if len(candidates) == 1:
        return candidates[0]
    info = scanner.read_asset_info(folder)
    if info is not None and info.file_name:
        wanted = PurePosixPath(info.file_name.replace("\\", "/")).name
        for candidate in candidates:
            if candidate.name == wanted:
                return candidate
    raise AmbiguousBackingFileError(folder, candidates)


class SyncService:
    """Copies every mapped compiled artifact over its asset's backing file."""

    def __init__(self, settings: Settings, scanner: AssetScanner, store: MappingStore) -> None:
        self.settings = settings
        self.scanner = scanner
        self.store = store

    def sync(self) -> SyncReport:
        report = SyncReport()
        mapping = self.store.load()
        dist_dir = self.settings.dist_dir

        for artifact in discover_artifacts(dist_dir, self.settings.compiled_ext):
            key = source_key_for(
                artifact, dist_dir, self.settings.source_ext, self.settings.compiled_ext
            )
            folder = mapping.get(key)
            if folder is None:
                logger.warning(
                    "No mapping found for %s. Use 'wrsync-new' to create a mapping.", key
                )
                report.unmapped.append(key)
                continue

            if not self.scanner.folder_exists(folder):
                logger.warning(
                    "Mapped web resource directory not found: %s (removing mapping for %s)",
                    folder,
                    key,
                )
                del mapping[key]
                report.pruned[key] = folder
                continue

            try:
                target = resolve_backing_file(self.scanner, folder)
                if target is None:
                    logger.warning(
                        "No %s files found in %s, skipping %s",
                        self.settings.compiled_ext,
                        folder,
                        key,
                    )
                    report.skipped.append(key)
                    continue
                changed = hash_file(target) != hash_file(artifact)
                shutil.copyfile(artifact, target)
            except (OSError, AmbiguousBackingFileError) as exc:
                logger.error("Failed to sync %s: %s", artifact.name, exc)
                report.failed[key] = str(exc)
                continue

            logger.info("Synced %s -> %s/%s", artifact.name, folder, target.name)
            report.synced.append(
                SyncedFile(source_key=key, artifact=artifact, target=target, changed=changed)
            )

        self.store.save(mapping)
        return report
