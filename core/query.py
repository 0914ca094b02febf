from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Iterable, List, Optional

from core.records import FILTER_DIMENSIONS, JobRecord


@dataclass(frozen=True)
class FilterQuery:
    """
    Current search text plus the selected filter values.
    None or "" on a dimension means no constraint.
    """
    search: str = ""
    location: Optional[str] = None
    company: Optional[str] = None
    region: Optional[str] = None

    def with_search(self, text: str) -> "FilterQuery":
        return replace(self, search=text or "")

    def with_filter(self, dimension: str, value: Optional[str]) -> "FilterQuery":
        if dimension not in FILTER_DIMENSIONS:
            raise ValueError(f"unknown filter dimension: {dimension!r}")
        return replace(self, **{dimension: value or None})

    @property
    def is_empty(self) -> bool:
        return not self.search and not any(getattr(self, d) for d in FILTER_DIMENSIONS)


def _matches_search(record: JobRecord, needle: str) -> bool:
    return any(needle in value for value in record.folded)


def matches(record: JobRecord, query: FilterQuery) -> bool:
    """True when `record` satisfies every active predicate of `query`."""
    if query.search and not _matches_search(record, query.search.lower()):
        return False
    for dim in FILTER_DIMENSIONS:
        wanted = getattr(query, dim)
        if wanted and getattr(record, dim) != wanted:
            return False
    return True


def evaluate(records: Iterable[JobRecord], query: FilterQuery) -> List[JobRecord]:
    """Return the records matching `query`, keeping their input order."""
    return [rec for rec in records if matches(rec, query)]
