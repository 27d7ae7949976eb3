"""Copy compiled TypeScript output into the mapped web-resource folders."""

from __future__ import annotations

import argparse

from cli.logging_setup import configure_logging
from wrsync.config import Settings
from wrsync.filesystem.assets import AssetScanner
from wrsync.filesystem.mapping_store import MappingStore
from wrsync.services.sync_service import SyncReport, SyncService


def print_report(report: SyncReport) -> None:
    print()
    print(f"Sync complete! {report.synced_count} file(s) synced.")
    if report.synced_count:
        print(f"  Changed:   {report.changed_count}")
    if report.unmapped:
        print(f"  Unmapped:  {len(report.unmapped)}")
    if report.pruned:
        print(f"  Pruned:    {len(report.pruned)}")
        for key, folder in report.pruned.items():
            print(f"    - {key} (was {folder})")
    if report.skipped:
        print(f"  Skipped:   {len(report.skipped)}")
    if report.failed:
        print(f"  Failed:    {len(report.failed)}")
        for key, message in report.failed.items():
            print(f"    ! {key}: {message}")

    if report.synced_count > 0:
        print()
        print("To commit changes:")
        print('git add .; git commit -m "Updated web resources"; git push')


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="wrsync-sync",
        description="Copy compiled files from the build output into their mapped web resources",
        epilog="Exits with status 1 when any file failed to copy, 0 otherwise.",
    )
    parser.parse_args(argv)

    settings = Settings()
    configure_logging(settings.debug)

    print("Syncing compiled TypeScript files to web resources...")
    print()
    service = SyncService(settings, AssetScanner(settings), MappingStore(settings.mapping_file))
    report = service.sync()
    print_report(report)
    return 1 if report.failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
