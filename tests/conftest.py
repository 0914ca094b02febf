import heapq
import itertools

import pytest

from core.settings import get_settings

SCENARIO_CSV = (
    "Title,Azienda,Luogo,Regione,link_posizione\n"
    "Backend Dev,Acme,Milan,Lombardy,http://a\n"
    "Designer,Beta,Rome,Lazio,http://b"
)


class FakeHandle:
    def __init__(self):
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class FakeScheduler:
    """Virtual clock with asyncio's call_later shape; time only moves via advance_to."""

    def __init__(self):
        self.now = 0.0
        self._queue = []
        self._seq = itertools.count()

    def call_later(self, delay, callback):
        handle = FakeHandle()
        heapq.heappush(self._queue, (self.now + delay, next(self._seq), handle, callback))
        return handle

    def advance_to(self, t):
        while self._queue and self._queue[0][0] <= t:
            when, _, handle, callback = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self.now = when
            callback()
        self.now = t

    @property
    def live_timers(self):
        return sum(1 for _, _, h, _ in self._queue if not h.cancelled)


class RecordingRenderer:
    def __init__(self, scheduler=None):
        self.scheduler = scheduler
        self.calls = []

    def render_records(self, records):
        at = self.scheduler.now if self.scheduler else None
        self.calls.append(("records", [r.title for r in records], at))

    def render_filter_options(self, index):
        self.calls.append(("filters", index.as_dict(), None))

    def render_empty_state(self):
        self.calls.append(("empty", None, None))

    def record_renders(self):
        return [c for c in self.calls if c[0] == "records"]


@pytest.fixture
def scenario_csv():
    return SCENARIO_CSV


@pytest.fixture
def scenario_records():
    from core.parse_listings import parse_listings
    return parse_listings(SCENARIO_CSV)


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def renderer(scheduler):
    return RecordingRenderer(scheduler)


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
