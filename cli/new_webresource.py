"""Create a TypeScript source file and map it to a web-resource folder.

Exits 1 when there is no asset folder to map to. Declining to overwrite an
existing source file stops the command with exit status 0.
"""

from __future__ import annotations

import argparse

from cli.logging_setup import configure_logging
from wrsync.config import Settings
from wrsync.exceptions import CreationCancelledError, NoAssetFoldersError
from wrsync.filesystem.assets import AssetScanner
from wrsync.filesystem.mapping_store import MappingStore
from wrsync.prompts import ConsolePrompter, Prompter
from wrsync.services.creation_service import CreationResult, CreationService


def print_summary(result: CreationResult) -> None:
    print()
    print(f"Created TypeScript file: {result.source_key}")
    print(f"Mapped to web resource: {result.asset.folder}")
    if result.seeded_from is not None:
        print(f"Seeded from: {result.seeded_from.name}")
    if result.previous_folder is not None and result.previous_folder != result.asset.folder:
        print(f"Replaced previous mapping to: {result.previous_folder}")

    print()
    print("Web Resource Info:")
    print(f"  Name: {result.asset.name}")
    print(f"  Display Name: {result.asset.display_name}")
    print(f"  File: {result.asset.file_name}")

    print()
    print("Next steps:")
    print(f"1. Edit your TypeScript file: {result.source_path}")
    print("2. Compile: npx tsc")
    print("3. Sync: wrsync-sync")
    print('4. Commit: git add .; git commit -m "Updated web resource"; git push')


def main(argv: list[str] | None = None, prompter: Prompter | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="wrsync-new",
        description="Create a TypeScript file mapped to an existing web resource",
    )
    parser.parse_args(argv)

    settings = Settings()
    configure_logging(settings.debug)

    print("Create new TypeScript web resource mapping")
    print()
    service = CreationService(
        settings,
        AssetScanner(settings),
        MappingStore(settings.mapping_file),
        prompter if prompter is not None else ConsolePrompter(),
    )
    try:
        result = service.run()
    except NoAssetFoldersError as exc:
        print(exc)
        return 1
    except CreationCancelledError as exc:
        print(exc)
        return 0
    print_summary(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
