"""Asset folder scanner and descriptor reader."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import PurePath
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from wrsync.config import Settings

logger = logging.getLogger(__name__)

DESCRIPTOR_KEYS: frozenset[str] = frozenset({"Name", "DisplayName", "FileName"})


@dataclass(frozen=True)
class AssetInfo:
    """Metadata for one asset folder, rebuilt on every scan."""

    folder: str
    name: str | None = None
    display_name: str | None = None
    file_name: str | None = None

    @property
    def short_name(self) -> str:
        return self.name or self.folder

    @property
    def label(self) -> str:
        """Menu label: logical name, display name and folder."""
        display = self.display_name or "No display name"
        return f"{self.short_name} - {display} ({self.folder})"


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
        return value[1:-1].strip()
    return value


def parse_descriptor(text: str) -> dict[str, str]:
    """Extract ``Name``, ``DisplayName`` and ``FileName`` from descriptor text.

    Lines are read as ``Key: value``. Indentation and a leading ``- `` list
    marker are ignored, so nested or listed keys are found too. The first
    non-empty value for a key wins; unrecognised lines are skipped without
    complaint.
    """
    fields: dict[str, str] = {}
    for line in text.splitlines():
        stripped = line.strip()
        if stripped.startswith("- "):
            stripped = stripped[2:].lstrip()
        key, sep, value = stripped.partition(":")
        if not sep:
            continue
        key = key.strip()
        if key not in DESCRIPTOR_KEYS or key in fields:
            continue
        value = _unquote(value.strip())
        if value:
            fields[key] = value
    return fields


def _is_safe_local_path(root: Path, name: str) -> Path | None:
    """Join *name* onto *root*, returning None for absolute names or '..' parts.

    The check is lexical; symlinks inside the root are not followed.
    """
    relative = PurePath(name)
    if relative.anchor or ".." in relative.parts or not relative.parts:
        return None
    return root / relative


class AssetScanner:
    """Reads the asset root: one sub-folder per deployed web resource."""

    def __init__(self, settings: Settings) -> None:
        self.assets_dir = settings.assets_dir
        self.descriptor_name = settings.descriptor_name
        self.compiled_ext = settings.compiled_ext

    def list_asset_folders(self) -> list[str]:
        """Return the names of all immediate sub-directories of the asset root."""
        if not self.assets_dir.is_dir():
            logger.warning("Web resources directory not found: %s", self.assets_dir)
            return []
        return sorted(entry.name for entry in self.assets_dir.iterdir() if entry.is_dir())

    def asset_path(self, folder: str) -> Path | None:
        """Path of an asset folder, or None if *folder* points outside the root."""
        if not folder:
            return None
        return _is_safe_local_path(self.assets_dir, folder)

    def folder_exists(self, folder: str) -> bool:
        path = self.asset_path(folder)
        return path is not None and path.is_dir()

    def read_asset_info(self, folder: str) -> AssetInfo | None:
        """Read the folder's descriptor; None when there is none."""
        path = self.asset_path(folder)
        if path is None:
            return None
        descriptor = path / self.descriptor_name
        if not descriptor.is_file():
            return None
        fields = parse_descriptor(descriptor.read_text(encoding="utf-8", errors="replace"))
        return AssetInfo(
            folder=folder,
            name=fields.get("Name"),
            display_name=fields.get("DisplayName"),
            file_name=fields.get("FileName"),
        )

    def scan(self) -> list[AssetInfo]:
        """Info for every asset folder; folders without a descriptor get a bare entry."""
        return [
            self.read_asset_info(folder) or AssetInfo(folder=folder)
            for folder in self.list_asset_folders()
        ]

    def backing_files(self, folder: str) -> list[Path]:
        """Files in the asset folder that carry the compiled extension."""
        path = self.asset_path(folder)
        if path is None or not path.is_dir():
            return []
        return sorted(
            entry
            for entry in path.iterdir()
            if entry.is_file() and entry.name.endswith(self.compiled_ext)
        )
