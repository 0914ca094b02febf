from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from core.records import FILTER_DIMENSIONS, JobRecord


@dataclass(frozen=True)
class FilterIndex:
    """Distinct values per filterable dimension, each sorted ascending."""
    location: Tuple[str, ...] = ()
    company: Tuple[str, ...] = ()
    region: Tuple[str, ...] = ()

    def options(self, dimension: str) -> Tuple[str, ...]:
        if dimension not in FILTER_DIMENSIONS:
            raise ValueError(f"unknown filter dimension: {dimension!r}")
        return getattr(self, dimension)

    def as_dict(self) -> Dict[str, List[str]]:
        return {dim: list(self.options(dim)) for dim in FILTER_DIMENSIONS}


def build_filter_index(records: Iterable[JobRecord]) -> FilterIndex:
    """
    Collect the unique location/company/region values across `records`.
    Empty strings are kept as an option when present in the data.
    """
    seen: Dict[str, set] = {dim: set() for dim in FILTER_DIMENSIONS}
    for rec in records:
        for dim in FILTER_DIMENSIONS:
            seen[dim].add(getattr(rec, dim))
    return FilterIndex(**{dim: tuple(sorted(vals)) for dim, vals in seen.items()})
