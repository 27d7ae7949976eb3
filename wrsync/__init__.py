"""Sync compiled TypeScript into platform-managed web-resource folders."""
