"""
Modification history ledger.

Every key-code overwrite made by a merge or a fine-tune session is appended
here. Entries are never removed, reordered or collapsed, so repeated edits
to one feature show up as separate records.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterator, List, Tuple

from .types import ModificationRecordDict


@dataclass(frozen=True)
class ModificationRecord:
    """One key-code change."""

    feature_name: str
    old_key_code: int
    new_key_code: int
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> ModificationRecordDict:
        return {
            "feature_name": self.feature_name,
            "old_key_code": self.old_key_code,
            "new_key_code": self.new_key_code,
            "timestamp": self.timestamp.isoformat(),
        }


class ModificationHistory:
    """Append-only sequence of ModificationRecord."""

    def __init__(self) -> None:
        self._records: List[ModificationRecord] = []

    def append(self, record: ModificationRecord) -> None:
        self._records.append(record)

    def all(self) -> Tuple[ModificationRecord, ...]:
        """All records in the order they were appended."""
        return tuple(self._records)

    def to_dicts(self) -> List[ModificationRecordDict]:
        return [record.to_dict() for record in self._records]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ModificationRecord]:
        return iter(tuple(self._records))
