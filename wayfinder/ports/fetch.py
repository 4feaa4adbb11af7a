"""Fetch port - Abstraction over where table text comes from.

The ingestion pipeline only ever sees strings. Where they come from (a
local data directory, a web server) is decided by the adapter injected
into the graph repository.
"""

from __future__ import annotations

from typing import Protocol


class TextFetcherPort(Protocol):
    """Port for retrieving raw text.

    Implementations:
    - adapters/fetch/local_file.py (LocalFileFetcher)
    - adapters/fetch/http_fetcher.py (HttpTextFetcher)
    """

    def fetch_text(self, location: str) -> str:
        """Return the full text stored at ``location``.

        Args:
            location: File path or URL.

        Returns:
            The decoded text.

        Raises:
            FetchError: If the text cannot be retrieved.
        """
        ...
