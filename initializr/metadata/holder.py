"""Atomic publication of metadata snapshots.

Conversions read the catalog once through :meth:`MetadataHolder.get` and
keep that snapshot for the whole call. A refresh builds a complete new
catalog first and only then swaps the reference, so no reader ever sees a
half-updated catalog.
"""

from __future__ import annotations

from pathlib import Path

from initializr.utils import console

from .loader import load_metadata
from .models import InitializrMetadata


class MetadataHolder:
    """Holds the current catalog snapshot."""

    def __init__(self, metadata: InitializrMetadata) -> None:
        self._metadata = metadata

    def get(self) -> InitializrMetadata:
        """Return the current snapshot."""
        return self._metadata

    def update(self, metadata: InitializrMetadata) -> InitializrMetadata:
        """Publish *metadata* and return the snapshot it replaced."""
        previous = self._metadata
        self._metadata = metadata
        return previous

    def refresh(self, path: str | Path) -> InitializrMetadata:
        """Reload the catalog from *path* and publish it.

        The current snapshot is left in place if loading fails.

        Raises:
            MetadataLoadError: If the document cannot be loaded.
        """
        metadata = load_metadata(path)
        self.update(metadata)
        console.print(
            f"[dim]Metadata refreshed from {path} "
            f"({len(metadata.types.content)} types, "
            f"{len(metadata.dependencies.all())} dependencies)[/dim]"
        )
        return metadata
