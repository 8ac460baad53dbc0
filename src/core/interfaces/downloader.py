"""Download capability used for boilerplate assets."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class AssetDownloader(Protocol):
    def fetch(self, url: str) -> bytes:
        """Return the exact body served at `url`; raise `DownloadError` otherwise."""

        ...
