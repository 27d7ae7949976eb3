"""Shared test fixtures for wrsync."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import pytest

from wrsync.config import Settings
from wrsync.filesystem.assets import AssetScanner
from wrsync.filesystem.mapping_store import MappingStore

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from wrsync.prompts import ConfirmQuestion, SelectQuestion, TextQuestion


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings rooted in a temporary project with an empty asset root."""
    s = Settings(
        _env_file=None,
        assets_dir=tmp_path / "src" / "webresources",
        source_dir=tmp_path / "typescript",
        dist_dir=tmp_path / "dist",
        mapping_file=tmp_path / "webresource-mapping.json",
    )
    s.assets_dir.mkdir(parents=True)
    return s


@pytest.fixture
def scanner(settings: Settings) -> AssetScanner:
    return AssetScanner(settings)


@pytest.fixture
def store(settings: Settings) -> MappingStore:
    return MappingStore(settings.mapping_file)


def write_descriptor(
    name: str | None = None,
    display_name: str | None = None,
    file_name: str | None = None,
) -> str:
    lines = ["WebResource:"]
    if name is not None:
        lines.append(f"  Name: {name}")
    if display_name is not None:
        lines.append(f"  DisplayName: {display_name}")
    if file_name is not None:
        lines.append(f"  FileName: {file_name}")
    lines.append("  WebResourceType: 3")
    return "\n".join(lines) + "\n"


@pytest.fixture
def make_asset(settings: Settings) -> Callable[..., Path]:
    """Create an asset folder with an optional descriptor and files."""

    def _make(
        folder: str,
        *,
        descriptor: str | None = None,
        files: dict[str, str] | None = None,
    ) -> Path:
        path = settings.assets_dir / folder
        path.mkdir(parents=True)
        if descriptor is not None:
            (path / settings.descriptor_name).write_text(descriptor, encoding="utf-8")
        for name, content in (files or {}).items():
            (path / name).write_text(content, encoding="utf-8")
        return path

    return _make


@pytest.fixture
def make_artifact(settings: Settings) -> Callable[[str, str], Path]:
    """Create a compiled file under the build-output root."""

    def _make(relative: str, content: str) -> Path:
        path = settings.dist_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _make


@dataclass
class ScriptedPrompter:
    """Answers questions from a fixed script and records what was asked.

    Text answers rejected by the question's validator are skipped, the way a
    user re-enters a value after seeing the error.
    """

    selections: list[str] = field(default_factory=list)
    texts: list[str] = field(default_factory=list)
    confirms: list[bool] = field(default_factory=list)
    asked: list[object] = field(default_factory=list)
    rejected: list[tuple[str, str]] = field(default_factory=list)

    def select(self, question: SelectQuestion) -> str:
        self.asked.append(question)
        return self.selections.pop(0)

    def text(self, question: TextQuestion) -> str:
        self.asked.append(question)
        while True:
            answer = self.texts.pop(0)
            if not answer.strip() and question.default:
                answer = question.default
            error = question.validate(answer) if question.validate else None
            if error is None:
                return answer
            self.rejected.append((answer, error))

    def confirm(self, question: ConfirmQuestion) -> bool:
        self.asked.append(question)
        return self.confirms.pop(0)
