"""Tests for the wrsync command-line entry points."""

from __future__ import annotations

import json
import logging
import sys
from typing import TYPE_CHECKING

import pytest

from cli import list_webresources, new_webresource, sync_webresources
from cli.logging_setup import configure_logging
from tests.conftest import ScriptedPrompter, write_descriptor

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A project directory using the default relative paths."""
    monkeypatch.chdir(tmp_path)
    for name in ("ASSETS_DIR", "SOURCE_DIR", "DIST_DIR", "MAPPING_FILE", "DEBUG"):
        monkeypatch.delenv(f"WRSYNC_{name}", raising=False)
    for module in (list_webresources, new_webresource, sync_webresources):
        monkeypatch.setattr(module, "configure_logging", lambda debug: None)
    asset = tmp_path / "src" / "webresources" / "folder-123"
    asset.mkdir(parents=True)
    (asset / "webresource.yml").write_text(
        write_descriptor(name="co_widget", display_name="Widget Form", file_name="co_widget.js"),
        encoding="utf-8",
    )
    (asset / "co_widget.js").write_text("old();", encoding="utf-8")
    return tmp_path


def test_configure_logging_writes_to_stdout() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging(debug=True)
        assert root.level == logging.DEBUG
        assert any(
            isinstance(h, logging.StreamHandler) and h.stream is sys.stdout for h in root.handlers
        )
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


class TestSyncCommand:
    def test_help_documents_exit_status(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            sync_webresources.main(["--help"])

        assert exc_info.value.code == 0
        assert "Exits with status 1 when any file failed to copy" in capsys.readouterr().out

    def test_syncs_and_prints_count(
        self, project: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (project / "dist").mkdir()
        (project / "dist" / "widgetForm.js").write_text("compiled();", encoding="utf-8")
        (project / "webresource-mapping.json").write_text(
            json.dumps({"widgetForm.ts": "folder-123"}), encoding="utf-8"
        )

        assert sync_webresources.main([]) == 0

        out = capsys.readouterr().out
        assert "Sync complete! 1 file(s) synced." in out
        assert "git add ." in out
        target = project / "src" / "webresources" / "folder-123" / "co_widget.js"
        assert target.read_text(encoding="utf-8") == "compiled();"

    def test_reports_pruned_mapping(
        self, project: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (project / "dist").mkdir()
        (project / "dist" / "gone.js").write_text("x", encoding="utf-8")
        mapping_file = project / "webresource-mapping.json"
        mapping_file.write_text(json.dumps({"gone.ts": "folder-999"}), encoding="utf-8")

        assert sync_webresources.main([]) == 0

        out = capsys.readouterr().out
        assert "Sync complete! 0 file(s) synced." in out
        assert "gone.ts (was folder-999)" in out
        assert "git add ." not in out
        assert json.loads(mapping_file.read_text(encoding="utf-8")) == {}

    def test_copy_failure_sets_exit_code(
        self, project: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        asset = project / "src" / "webresources" / "folder-123"
        (asset / "extra.js").write_text("", encoding="utf-8")
        (asset / "webresource.yml").write_text(write_descriptor(name="co_widget"), encoding="utf-8")
        (project / "dist").mkdir()
        (project / "dist" / "widgetForm.js").write_text("compiled();", encoding="utf-8")
        (project / "webresource-mapping.json").write_text(
            json.dumps({"widgetForm.ts": "folder-123"}), encoding="utf-8"
        )

        assert sync_webresources.main([]) == 1
        assert "! widgetForm.ts:" in capsys.readouterr().out


class TestNewCommand:
    def test_creates_file_and_prints_summary(
        self, project: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        prompter = ScriptedPrompter(selections=["folder-123"], texts=[""], confirms=[True])

        assert new_webresource.main([], prompter=prompter) == 0

        out = capsys.readouterr().out
        assert "Created TypeScript file: widget.ts" in out
        assert "Mapped to web resource: folder-123" in out
        assert "Display Name: Widget Form" in out
        assert "Seeded from: co_widget.js" in out
        source = project / "typescript" / "widget.ts"
        assert "old();" in source.read_text(encoding="utf-8")
        mapping = json.loads((project / "webresource-mapping.json").read_text(encoding="utf-8"))
        assert mapping == {"widget.ts": "folder-123"}

    def test_no_assets_exits_with_message(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(new_webresource, "configure_logging", lambda debug: None)

        assert new_webresource.main([], prompter=ScriptedPrompter()) == 1
        assert "No web resource directories found!" in capsys.readouterr().out

    def test_declined_overwrite_exits_cleanly(
        self, project: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        source = project / "typescript" / "widget.ts"
        source.parent.mkdir()
        source.write_text("// keep me", encoding="utf-8")
        prompter = ScriptedPrompter(selections=["folder-123"], texts=["widget"], confirms=[False])

        assert new_webresource.main([], prompter=prompter) == 0

        assert "Operation cancelled." in capsys.readouterr().out
        assert source.read_text(encoding="utf-8") == "// keep me"
        assert not (project / "webresource-mapping.json").exists()


class TestListCommand:
    def test_lists_assets_and_mapping_status(
        self, project: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (project / "webresource-mapping.json").write_text(
            json.dumps({"widget.ts": "folder-123", "old.ts": "folder-999"}), encoding="utf-8"
        )

        assert list_webresources.main([]) == 0

        out = capsys.readouterr().out
        assert "1. co_widget - Widget Form (folder-123)" in out
        assert "file: co_widget.js" in out
        assert "widget.ts -> folder-123 [ok]" in out
        assert "old.ts -> folder-999 [missing]" in out
