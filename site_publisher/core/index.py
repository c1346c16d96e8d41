"""Published list JSON files."""

import json
import logging
from pathlib import Path
from typing import Dict, List, Tuple

from site_publisher.core.dates import parse_datetime
from site_publisher.core.models import IndexRecord

logger = logging.getLogger(__name__)


def date_sort_key(record: IndexRecord) -> Tuple[int, float]:
    """Sort key placing newer timestamps first and unparsable dates last."""
    parsed = parse_datetime(record.date)
    if parsed is None:
        return (1, 0.0)
    return (0, -parsed.timestamp())


class IndexBuilder:
    """Accumulates index records for one list file during a run.

    Records are keyed by id, so adding a record for an id that is already
    present replaces the earlier one.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._records: Dict[str, IndexRecord] = {}

    def __len__(self) -> int:
        return len(self._records)

    def add(self, record: IndexRecord) -> None:
        self._records[record.id] = record

    def sorted_records(self) -> List[IndexRecord]:
        """Records ordered by date, newest first.

        The sort is stable, so records with equal or unparsable dates keep
        the order they were added in.
        """
        return sorted(self._records.values(), key=date_sort_key)

    def to_json(self) -> str:
        records = [r.to_dict() for r in self.sorted_records()]
        return json.dumps(records, indent=2, ensure_ascii=False, default=str)

    def write(self) -> Path:
        """Replace the list file with the current records."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(self.to_json(), encoding='utf-8')
        logger.info("updated: %s", self.path)
        return self.path


def read_thumbnails(path: Path) -> List[str]:
    """Thumbnail references listed in a published list file.

    Returns an empty list if the file is missing or not a JSON list.
    """
    if not Path(path).exists():
        return []
    try:
        data = json.loads(Path(path).read_text(encoding='utf-8'))
    except (OSError, ValueError) as e:
        logger.warning("Failed to read %s: %s", path, e)
        return []
    if not isinstance(data, list):
        return []
    return [str(entry.get('thumbnail') or "") for entry in data if isinstance(entry, dict)]
