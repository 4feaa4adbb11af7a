"""HTTP fetcher adapter.

Downloads table text over HTTP(S) with a shared requests session, a
configured timeout and user agent.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import requests

from ...config import FetchConfig
from ...domain.errors import FetchError

GOOGLE_DRIVE_DOWNLOAD_URL = "https://drive.google.com/uc?export=download&id={file_id}"


def google_drive_url(file_id: str) -> str:
    """Direct download URL of a publicly shared Google Drive file."""
    return GOOGLE_DRIVE_DOWNLOAD_URL.format(file_id=file_id)


@dataclass
class HttpTextFetcher:
    """Text fetcher downloading over HTTP.

    This adapter implements TextFetcherPort. It does not retry; a failed
    request surfaces as a FetchError.

    Attributes:
        config: Fetch configuration (timeout, user agent, encoding)
        session: requests session reused across downloads
    """

    config: FetchConfig = field(default_factory=FetchConfig)
    session: requests.Session = field(default_factory=requests.Session, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self.session.headers.update({"User-Agent": self.config.user_agent})

    def fetch_text(self, location: str) -> str:
        """Download ``location`` and decode it.

        Raises:
            FetchError: On network errors, HTTP error statuses, or bytes
                that do not decode with the configured encoding.
        """
        self._logger.debug(
            "Downloading table",
            extra={"url": location, "timeout": self.config.timeout_seconds},
        )
        try:
            response = self.session.get(location, timeout=self.config.timeout_seconds)
            response.raise_for_status()
            return response.content.decode(self.config.encoding)
        except requests.RequestException as e:
            self._logger.warning(
                "Download failed",
                extra={"url": location, "error": str(e)},
            )
            raise FetchError(
                f"Failed to download {location}",
                location=location,
                cause=e,
            )
        except UnicodeDecodeError as e:
            raise FetchError(
                f"Could not decode {location} as {self.config.encoding}",
                location=location,
                cause=e,
            )
