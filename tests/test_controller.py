import asyncio

import pytest

from core.controller import FilterChanged, InteractionController, ListingSession, SearchTextChanged
from core.parse_listings import parse_listings


@pytest.fixture
def session(scenario_records):
    return ListingSession.from_records(scenario_records)


@pytest.fixture
def controller(session, renderer, scheduler):
    return InteractionController(session, renderer, scheduler=scheduler, debounce_seconds=0.2)


def test_start_renders_filters_then_records(controller, renderer):
    controller.start()
    assert renderer.calls[0] == (
        "filters",
        {"location": ["Milan", "Rome"], "company": ["Acme", "Beta"], "region": ["Lazio", "Lombardy"]},
        None,
    )
    assert renderer.calls[1][:2] == ("records", ["Backend Dev", "Designer"])


def test_empty_session_renders_empty_state(renderer, scheduler):
    ctl = InteractionController(ListingSession.from_records(parse_listings("")), renderer, scheduler=scheduler)
    ctl.start()
    assert renderer.calls == [("empty", None, None)]


def test_search_burst_debounced_to_one_evaluation(controller, renderer, scheduler):
    for t, text in [(0.0, "d"), (0.05, "de"), (0.1, "dev")]:
        scheduler.advance_to(t)
        controller.dispatch(SearchTextChanged(text))
    scheduler.advance_to(0.29)
    assert renderer.record_renders() == []
    scheduler.advance_to(2.0)
    renders = renderer.record_renders()
    assert len(renders) == 1
    _, shown, at = renders[0]
    assert shown == ["Backend Dev"]
    assert at == pytest.approx(0.3)


def test_filter_change_is_immediate(controller, renderer):
    controller.dispatch(FilterChanged("region", "Lazio"))
    assert renderer.record_renders() == [("records", ["Designer"], 0.0)]


def test_filter_change_uses_latest_search_and_cancels_pending(controller, renderer, scheduler):
    controller.dispatch(SearchTextChanged("dev"))
    controller.dispatch(FilterChanged("region", "Lazio"))
    assert renderer.record_renders() == [("records", [], 0.0)]
    assert not controller.debouncer.pending
    scheduler.advance_to(1.0)
    assert len(renderer.record_renders()) == 1


def test_clearing_filter_evaluates_full_set(controller, renderer):
    controller.dispatch(FilterChanged("region", "Lazio"))
    controller.dispatch(FilterChanged("region", None))
    assert renderer.record_renders()[-1][1] == ["Backend Dev", "Designer"]


def test_evaluation_always_runs_over_full_session(controller, renderer, scheduler):
    controller.dispatch(FilterChanged("location", "Rome"))
    controller.dispatch(FilterChanged("location", "Milan"))
    assert renderer.record_renders()[-1][1] == ["Backend Dev"]
    controller.dispatch(SearchTextChanged(""))
    scheduler.advance_to(1.0)
    assert renderer.record_renders()[-1][1] == ["Backend Dev"]
    assert len(controller.session.records) == 2


def test_unknown_filter_dimension_rejected():
    with pytest.raises(ValueError):
        FilterChanged("salary", "10")


def test_unregistered_event_type(controller):
    with pytest.raises(TypeError):
        controller.dispatch(object())


def test_custom_handler_registration(controller):
    seen = []

    class Reset:
        pass

    controller.register(Reset, seen.append)
    ev = Reset()
    controller.dispatch(ev)
    assert seen == [ev]


def test_debounce_defaults_from_settings(monkeypatch, session, renderer, scheduler):
    monkeypatch.setenv("SEARCH_DEBOUNCE_MS", "450")
    ctl = InteractionController(session, renderer, scheduler=scheduler)
    assert ctl.debouncer.delay == pytest.approx(0.45)


def test_session_load_from_missing_source(tmp_path):
    session = asyncio.run(ListingSession.load(str(tmp_path / "missing.csv")))
    assert session.is_empty
    assert session.index.as_dict() == {"location": [], "company": [], "region": []}


def test_without_scheduler_search_applies_immediately(session, renderer):
    ctl = InteractionController(session, renderer)
    assert ctl.debouncer is None
    ctl.dispatch(SearchTextChanged("dev"))
    ctl.dispatch(SearchTextChanged("design"))
    assert [c[1] for c in renderer.record_renders()] == [["Backend Dev"], ["Designer"]]
    ctl.dispatch(FilterChanged("region", "Lombardy"))
    assert renderer.record_renders()[-1][1] == []
