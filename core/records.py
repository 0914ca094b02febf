# core/records.py
from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

FILTER_DIMENSIONS = ("location", "company", "region")

# header (lowercased) -> known field
HEADER_ALIASES: Dict[str, str] = {
    "title": "title",
    "azienda": "company",
    "company": "company",
    "luogo": "location",
    "location": "location",
    "regione": "region",
    "region": "region",
    "link_posizione": "apply_link",
    "apply link": "apply_link",
    "apply_link": "apply_link",
    "link": "apply_link",
    "featured image": "image_url",
    "image": "image_url",
    "image_url": "image_url",
    "logo": "image_url",
}


def canonical_field(header: str) -> Optional[str]:
    """Return the known field a header maps to, or None for unrecognised columns."""
    return HEADER_ALIASES.get(header.strip().lower())


@dataclass(frozen=True)
class JobRecord:
    """
    One parsed job posting.

    Known columns land on named fields; anything else is exposed through `extra`
    under its original header. `columns` keeps one (header, value) pair per distinct
    header in source order so search can scan the full row; a repeated header keeps
    its first position and its last value. `folded` holds the lowercase copy of
    those values computed once at construction.
    """
    index: int
    title: str = ""
    company: str = ""
    location: str = ""
    region: str = ""
    apply_link: str = ""
    image_url: str = ""
    extra_columns: Tuple[Tuple[str, str], ...] = ()
    columns: Tuple[Tuple[str, str], ...] = ()
    folded: Tuple[str, ...] = field(default=(), repr=False, compare=False)

    def __post_init__(self) -> None:
        # folded always mirrors columns
        object.__setattr__(self, "folded", tuple(v.lower() for _, v in self.columns))

    @classmethod
    def from_row(cls, index: int, headers: Sequence[str], values: Sequence[str]) -> "JobRecord":
        row: Dict[str, str] = {}
        for pos, header in enumerate(headers):
            row[header] = values[pos] if pos < len(values) else ""
        known: Dict[str, str] = {}
        extra: List[Tuple[str, str]] = []
        for header, value in row.items():
            name = canonical_field(header)
            if name:
                known[name] = value
            else:
                extra.append((header, value))
        return cls(index=index, extra_columns=tuple(extra), columns=tuple(row.items()), **known)

    @property
    def extra(self) -> Mapping[str, str]:
        return MappingProxyType(dict(self.extra_columns))

    @property
    def headers(self) -> List[str]:
        return [h for h, _ in self.columns]

    def values(self) -> List[str]:
        return [v for _, v in self.columns]

    def to_dict(self) -> Dict[str, object]:
        return {
            "index": self.index,
            "title": self.title,
            "company": self.company,
            "location": self.location,
            "region": self.region,
            "apply_link": self.apply_link,
            "image_url": self.image_url,
            "extra": dict(self.extra),
            "columns": [[h, v] for h, v in self.columns],
        }
