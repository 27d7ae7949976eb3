"""List web-resource folders and the current source mappings."""

from __future__ import annotations

import argparse

from cli.logging_setup import configure_logging
from wrsync.config import Settings
from wrsync.filesystem.assets import AssetScanner
from wrsync.filesystem.mapping_store import MappingStore


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="wrsync-list",
        description="Show available web resources and which TypeScript files map to them",
    )
    parser.parse_args(argv)

    settings = Settings()
    configure_logging(settings.debug)
    scanner = AssetScanner(settings)
    mapping = MappingStore(settings.mapping_file).load()

    assets = scanner.scan()
    print(f"Available web resources ({len(assets)}):")
    for index, info in enumerate(assets, start=1):
        print(f"{index}. {info.label}")
        if info.file_name:
            print(f"     file: {info.file_name}")

    print()
    print(f"Mappings ({len(mapping)}):")
    for key in sorted(mapping):
        folder = mapping[key]
        status = "ok" if scanner.folder_exists(folder) else "missing"
        print(f"  {key} -> {folder} [{status}]")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
