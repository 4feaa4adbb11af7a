"""Fetch adapters - Implementations of TextFetcherPort.

Available implementations:
- LocalFileFetcher: Reads tables from the local filesystem
- HttpTextFetcher: Downloads tables over HTTP
"""

from .http_fetcher import HttpTextFetcher, google_drive_url
from .local_file import LocalFileFetcher

__all__ = ["LocalFileFetcher", "HttpTextFetcher", "google_drive_url"]
