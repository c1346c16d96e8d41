"""Thumbnail resolution and cleanup.

The thumbnail directory is a cache keyed by content id: every image in it
is derived from a content file's ``thumbnail`` field (a remote URL or an
inline data URI). Files not referenced during a run are removed by
:meth:`ThumbnailStore.cleanup`.
"""

import base64
import binascii
import logging
import re
from pathlib import Path, PurePosixPath
from typing import Dict, Iterable, List, Optional, Set, Tuple
from urllib.parse import urlparse

import requests

logger = logging.getLogger(__name__)

DATA_URI_PATTERN = re.compile(r'^data:image/([a-zA-Z0-9]+);base64,(.+)$', re.DOTALL)
DEFAULT_EXTENSION = "png"


class ThumbnailStore:
    """Materializes thumbnail references as files named ``<id>.<ext>``.

    Tracks which file names were used during the run; the set is the
    ground truth for :meth:`cleanup`.
    """

    def __init__(
        self,
        directory: Path,
        url_prefix: str = "assets/img/thumbnails/",
        session: Optional[requests.Session] = None,
        timeout: float = 30,
    ):
        """Initialize ThumbnailStore.

        Args:
            directory: Directory the thumbnail files live in
            url_prefix: Site-relative path of that directory, used both for
                the references written to pages and to recognize references
                that already point into the store
            session: HTTP session used for remote thumbnails
            timeout: Seconds to wait for a remote thumbnail
        """
        self.directory = Path(directory)
        self.url_prefix = url_prefix.rstrip('/') + '/'
        self.session = session or requests.Session()
        self.timeout = timeout
        self.used: Set[str] = set()
        self._resolved: Dict[Tuple[str, str], str] = {}

    def resolve(self, reference: str, item_id: str) -> str:
        """Turn a thumbnail reference into a site-relative local path.

        Args:
            reference: ``thumbnail`` front matter value (may be empty)
            item_id: Content id the thumbnail file is named after

        Returns:
            Local reference, the reference unchanged if it is neither remote,
            inline nor in the store, or "" when it could not be materialized.
            Each (id, reference) pair is resolved once per run; a failure
            is not retried.
        """
        if not reference:
            return ""

        key = (item_id, reference)
        if key in self._resolved:
            return self._resolved[key]

        if reference.startswith("data:"):
            resolved = self._from_data_uri(reference, item_id)
        elif reference.startswith("http"):
            resolved = self._download(reference, item_id)
        elif self.url_prefix in reference:
            self.mark_used(PurePosixPath(reference).name)
            resolved = reference
        else:
            resolved = reference

        self._resolved[key] = resolved
        return resolved

    def mark_used(self, filename: str) -> None:
        if filename:
            self.used.add(filename)

    def mark_references(self, references: Iterable[str]) -> None:
        """Mark every reference that points into the store as used."""
        for reference in references:
            if reference and self.url_prefix in reference:
                self.mark_used(PurePosixPath(reference).name)

    def cleanup(self) -> List[Path]:
        """Delete files in the store that were not used during the run.

        Returns:
            Paths of the removed files
        """
        removed: List[Path] = []
        if not self.directory.exists():
            return removed

        for path in sorted(self.directory.iterdir()):
            if not path.is_file() or path.name in self.used:
                continue
            logger.info("Removing unused thumbnail: %s", path.name)
            path.unlink()
            removed.append(path)
        return removed

    def _from_data_uri(self, reference: str, item_id: str) -> str:
        match = DATA_URI_PATTERN.match(reference)
        if not match:
            logger.error("Unsupported inline thumbnail for %s", item_id)
            return ""

        subtype, payload = match.groups()
        ext = "jpg" if subtype.lower() == "jpeg" else subtype.lower()
        try:
            data = base64.b64decode(payload, validate=False)
        except (binascii.Error, ValueError) as e:
            logger.error("Failed to decode thumbnail for %s: %s", item_id, e)
            return ""
        return self._write(item_id, ext, data)

    def _download(self, url: str, item_id: str) -> str:
        logger.info("Downloading thumbnail for %s from %s", item_id, url)
        try:
            ext = self.extension_for(url)
            response = self.session.get(url, timeout=self.timeout)
        except (requests.RequestException, ValueError) as e:
            logger.error("Failed to fetch thumbnail for %s: %s", item_id, e)
            return ""

        if not response.ok:
            logger.error(
                "Failed to fetch thumbnail for %s: %s %s",
                item_id, response.status_code, response.reason,
            )
            return ""
        return self._write(item_id, ext, response.content)

    def _write(self, item_id: str, ext: str, data: bytes) -> str:
        filename = f"{item_id}.{ext}"
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            (self.directory / filename).write_bytes(data)
        except OSError as e:
            logger.error("Failed to write thumbnail %s: %s", filename, e)
            return ""
        self.mark_used(filename)
        return f"{self.url_prefix}{filename}"

    @staticmethod
    def extension_for(url: str) -> str:
        """Image extension taken from a URL path, ``png`` if it has none."""
        suffix = PurePosixPath(urlparse(url).path).suffix
        return suffix[1:].lower() if len(suffix) > 1 else DEFAULT_EXTENSION
