# core/controller.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence, Tuple, Type

from core.debounce import Debouncer, Scheduler
from core.filter_index import FilterIndex, build_filter_index
from core.parse_listings import load_listings_async
from core.query import FilterQuery, evaluate
from core.records import FILTER_DIMENSIONS, JobRecord
from core.settings import get_settings

logger = logging.getLogger(__name__)


class RenderAdapter(Protocol):
    def render_records(self, records: Sequence[JobRecord]) -> None: ...
    def render_filter_options(self, index: FilterIndex) -> None: ...
    def render_empty_state(self) -> None: ...


@dataclass(frozen=True)
class ListingSession:
    """The full record set for one run, loaded once and never mutated."""
    records: Tuple[JobRecord, ...] = ()
    index: FilterIndex = field(default_factory=FilterIndex)

    @classmethod
    def from_records(cls, records: Sequence[JobRecord]) -> "ListingSession":
        records = tuple(records)
        return cls(records=records, index=build_filter_index(records))

    @classmethod
    async def load(cls, source: Optional[str] = None) -> "ListingSession":
        return cls.from_records(await load_listings_async(source))

    @property
    def is_empty(self) -> bool:
        return not self.records


# ---------------------------
# Events
# ---------------------------
@dataclass(frozen=True)
class SearchTextChanged:
    text: str


@dataclass(frozen=True)
class FilterChanged:
    dimension: str
    value: Optional[str]

    def __post_init__(self) -> None:
        if self.dimension not in FILTER_DIMENSIONS:
            raise ValueError(f"unknown filter dimension: {self.dimension!r}")


class InteractionController:
    """
    Turns UI events into re-evaluations of the session's records.

    Search edits are debounced; filter changes re-render right away. Every
    evaluation runs over the full session, never over a previous result.
    Without a scheduler there is no timer to wait on and search edits also
    apply immediately, for hosts whose text widgets only report committed input.
    """

    def __init__(
        self,
        session: ListingSession,
        renderer: RenderAdapter,
        scheduler: Optional[Scheduler] = None,
        debounce_seconds: Optional[float] = None,
    ):
        if debounce_seconds is None:
            debounce_seconds = get_settings().search_debounce_seconds
        self.session = session
        self.renderer = renderer
        self.query = FilterQuery()
        self.debouncer: Optional[Debouncer] = None
        if scheduler is not None:
            self.debouncer = Debouncer(debounce_seconds, scheduler)
        self._handlers: Dict[Type[Any], Callable[[Any], None]] = {}
        self.register(SearchTextChanged, self.on_search_text_changed)
        self.register(FilterChanged, self.on_filter_changed)

    def register(self, event_type: Type[Any], handler: Callable[[Any], None]) -> None:
        self._handlers[event_type] = handler

    def dispatch(self, event: Any) -> None:
        handler = self._handlers.get(type(event))
        if handler is None:
            raise TypeError(f"no handler registered for {type(event).__name__}")
        handler(event)

    def start(self) -> None:
        if self.session.is_empty:
            logger.info("No jobs to display.")
            self.renderer.render_empty_state()
            return
        self.renderer.render_filter_options(self.session.index)
        self.renderer.render_records(self.session.records)

    def on_search_text_changed(self, event: SearchTextChanged) -> None:
        self.query = self.query.with_search(event.text)
        if self.debouncer is None:
            self.refresh()
        else:
            self.debouncer.schedule(self.refresh)

    def on_filter_changed(self, event: FilterChanged) -> None:
        self.query = self.query.with_filter(event.dimension, event.value)
        # the immediate refresh already uses the latest search text
        if self.debouncer is not None:
            self.debouncer.cancel()
        self.refresh()

    def refresh(self) -> List[JobRecord]:
        results = evaluate(self.session.records, self.query)
        logger.debug("Query %s matched %d/%d", self.query, len(results), len(self.session.records))
        self.renderer.render_records(results)
        return results
