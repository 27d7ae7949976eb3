"""JSON reader/writer for the source-to-asset mapping table."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from pydantic import TypeAdapter, ValidationError

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

_MAPPING_ADAPTER: TypeAdapter[dict[str, str]] = TypeAdapter(dict[str, str])


class MappingStore:
    """Loads and saves the mapping of source file names to asset folders.

    The table is flat: keys are source file names relative to the source
    directory (``forms/account.ts``), values are asset folder names.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> dict[str, str]:
        """Read the mapping table.

        A missing file yields an empty table. A file that is not a JSON object
        of strings is logged and also yields an empty table, which the next
        ``save`` will overwrite.
        """
        if not self.path.exists():
            logger.debug("No mapping file at %s, starting with an empty mapping", self.path)
            return {}
        try:
            text = self.path.read_text(encoding="utf-8")
            return _MAPPING_ADAPTER.validate_json(text, strict=True)
        except (OSError, UnicodeDecodeError, ValidationError) as exc:
            logger.error("Error reading mapping file %s: %s", self.path, exc)
            return {}

    def save(self, mapping: dict[str, str]) -> None:
        """Overwrite the mapping file with the full table."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(mapping, indent=2, ensure_ascii=False)
        self.path.write_text(payload + "\n", encoding="utf-8")
