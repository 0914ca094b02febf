# ui/streamlit_app.py
import logging
import os
from typing import List, Optional

import requests
import streamlit as st

from core.controller import FilterChanged, InteractionController, ListingSession, SearchTextChanged
from core.parse_listings import load_listings
from core.records import JobRecord
from core.settings import get_settings
from ui.render import StreamlitRenderAdapter


# ----------------- helpers: safe secrets/env -----------------
def safe_secret(key: str, default=None):
    """
    Read from Streamlit secrets first (if present), else from env, else default.
    """
    try:
        return st.secrets.get(key, os.environ.get(key, default))  # type: ignore[attr-defined]
    except Exception:
        return os.environ.get(key, default)


# ----------------- configuration -----------------
settings = get_settings()
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

st.set_page_config(page_title="Job Board", layout="wide")
st.title("Job Board")

API_BASE = (safe_secret("API_BASE", settings.api_base) or "").rstrip("/")
LISTINGS_SOURCE = safe_secret("LISTINGS_SOURCE", settings.listings_source)


# ----------------- loading -----------------
def _records_from_api(api_base: str, timeout: float) -> List[JobRecord]:
    r = requests.get(f"{api_base}/listings", headers={"Accept": "application/json"}, timeout=timeout)
    r.raise_for_status()
    records = []
    for item in r.json().get("listings", []):
        cols = item.get("columns") or []
        records.append(JobRecord.from_row(int(item["index"]), [c[0] for c in cols], [c[1] for c in cols]))
    return records


@st.cache_resource(show_spinner="Loading listings…")
def load_session(api_base: str, source: str) -> ListingSession:
    if api_base:
        return ListingSession.from_records(_records_from_api(api_base, settings.fetch_timeout))
    return ListingSession.from_records(load_listings(source))


def get_session() -> ListingSession:
    try:
        return load_session(API_BASE, LISTINGS_SOURCE)
    except Exception as e:
        logger.warning("Listings request failed: %s", e)
        return ListingSession()


# ----------------- page -----------------
session = get_session()
search_text: Optional[str] = None
if not session.is_empty:
    search_text = st.text_input("Search", placeholder="Search title, company, location…", key="search")

renderer = StreamlitRenderAdapter(list_area=st.empty(), default_image=settings.default_image)
# st.text_input only reports committed text, so there is no timer to wait on
controller = InteractionController(session, renderer)
controller.start()

if not session.is_empty:
    for dim, value in renderer.selected.items():
        if value is not None:
            controller.dispatch(FilterChanged(dim, value))
    if search_text:
        controller.dispatch(SearchTextChanged(search_text))

st.sidebar.caption(f"API: {API_BASE}" if API_BASE else f"Source: {LISTINGS_SOURCE}")
