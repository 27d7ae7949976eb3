"""Interactive creation of a TypeScript source mapped to an asset folder."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from wrsync.exceptions import CreationCancelledError, NoAssetFoldersError
from wrsync.prompts import Choice, ConfirmQuestion, SelectQuestion, TextQuestion
from wrsync.services.templates import default_template, wrap_existing

if TYPE_CHECKING:
    from pathlib import Path

    from wrsync.config import Settings
    from wrsync.filesystem.assets import AssetInfo, AssetScanner
    from wrsync.filesystem.mapping_store import MappingStore
    from wrsync.prompts import Prompter

logger = logging.getLogger(__name__)

_SOURCE_NAME_RE = re.compile(r"[a-zA-Z0-9_-]+")


def validate_source_name(value: str) -> str | None:
    """Return an error message for an unusable base name, None when it is fine."""
    stripped = value.strip()
    if not stripped:
        return "File name is required"
    if not _SOURCE_NAME_RE.fullmatch(stripped):
        return "File name can only contain letters, numbers, underscores, and hyphens"
    return None


def suggest_source_name(info: AssetInfo | None, publisher_prefix: str) -> str:
    """Suggest a base name from the asset's logical name minus its publisher prefix."""
    if info is None or not info.name:
        return "webresource"
    name = info.name
    if publisher_prefix:
        name = name.removeprefix(publisher_prefix)
    # Logical names often carry a path ("co_/forms/account.js"); keep the stem.
    name = name.rsplit("/", maxsplit=1)[-1].rsplit(".", maxsplit=1)[0]
    if validate_source_name(name) is not None:
        return "webresource"
    return name


@dataclass
class CreationResult:
    """Outcome of one creation run."""

    source_key: str
    source_path: Path
    asset: AssetInfo
    seeded_from: Path | None = None
    previous_folder: str | None = None


class CreationService:
    """Walks the user through creating a source file and its mapping."""

    def __init__(
        self,
        settings: Settings,
        scanner: AssetScanner,
        store: MappingStore,
        prompter: Prompter,
    ) -> None:
        self.settings = settings
        self.scanner = scanner
        self.store = store
        self.prompter = prompter

    def run(self) -> CreationResult:
        assets = self.scanner.scan()
        if not assets:
            raise NoAssetFoldersError(
                "No web resource directories found! "
                "Make sure you have pulled the latest changes from Power Platform."
            )
        by_folder = {info.folder: info for info in assets}

        folder = self.prompter.select(
            SelectQuestion(
                message="Select the web resource to create TypeScript mapping for:",
                choices=[Choice(label=info.label, value=info.folder) for info in assets],
            )
        )
        asset = by_folder[folder]

        base_name = self.prompter.text(
            TextQuestion(
                message=f"Enter the TypeScript file name (without {self.settings.source_ext} "
                "extension):",
                default=suggest_source_name(asset, self.settings.publisher_prefix),
                validate=validate_source_name,
            )
        ).strip()
        source_key = f"{base_name}{self.settings.source_ext}"
        source_path = self.settings.source_dir / source_key

        if source_path.exists():
            overwrite = self.prompter.confirm(
                ConfirmQuestion(
                    message=f"TypeScript file {source_key} already exists. Overwrite?",
                    default=False,
                )
            )
            if not overwrite:
                raise CreationCancelledError("Operation cancelled.")

        seed_existing = self.prompter.confirm(
            ConfirmQuestion(
                message="Convert existing JavaScript content to TypeScript?",
                default=True,
            )
        )
        seeded_from: Path | None = None
        content = default_template()
        if seed_existing:
            candidates = self.scanner.backing_files(folder)
            if candidates:
                seeded_from = candidates[0]
                content = wrap_existing(
                    seeded_from.name, seeded_from.read_text(encoding="utf-8", errors="replace")
                )
            else:
                logger.info(
                    "No %s file in %s, using the default template",
                    self.settings.compiled_ext,
                    folder,
                )

        source_path.parent.mkdir(parents=True, exist_ok=True)
        source_path.write_text(content, encoding="utf-8")

        mapping = self.store.load()
        previous_folder = mapping.get(source_key)
        if previous_folder is not None and previous_folder != folder:
            logger.warning(
                "%s was mapped to %s; remapping it to %s", source_key, previous_folder, folder
            )
        mapping[source_key] = folder
        self.store.save(mapping)

        return CreationResult(
            source_key=source_key,
            source_path=source_path,
            asset=asset,
            seeded_from=seeded_from,
            previous_folder=previous_folder,
        )
