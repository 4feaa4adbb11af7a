"""Local file fetcher adapter.

Reads table text from disk, relative to an optional base directory.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ...config import FetchConfig
from ...domain.errors import FetchError


@dataclass
class LocalFileFetcher:
    """Text fetcher reading from the local filesystem.

    This adapter implements TextFetcherPort.

    Attributes:
        config: Fetch configuration (encoding)
        base_dir: Directory that relative locations are resolved against
    """

    config: FetchConfig = field(default_factory=FetchConfig)
    base_dir: Optional[Path] = None
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def resolve(self, location: str) -> Path:
        path = Path(location)
        if self.base_dir is not None and not path.is_absolute():
            path = self.base_dir / path
        return path

    def fetch_text(self, location: str) -> str:
        """Read the file at ``location``.

        Raises:
            FetchError: If the file cannot be read or decoded.
        """
        path = self.resolve(location)
        self._logger.debug("Reading table", extra={"path": str(path)})
        try:
            return path.read_text(encoding=self.config.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise FetchError(
                f"Failed to read {path}",
                location=str(path),
                cause=e,
            )
