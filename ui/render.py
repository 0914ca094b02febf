# ui/render.py
from __future__ import annotations

import html
from typing import Dict, Optional, Sequence

import streamlit as st

from core.filter_index import FilterIndex
from core.records import FILTER_DIMENSIONS, JobRecord

DIMENSION_LABELS = {"location": "Location", "company": "Company", "region": "Region"}


def render_record_html(rec: JobRecord, default_image: str) -> str:
    """
    HTML card for one listing. The image swaps to `default_image` when the
    record has none or the browser fails to load it.
    """
    esc = html.escape
    img = esc(rec.image_url or default_image, quote=True)
    fallback = esc(default_image, quote=True)
    alt = esc(f"{rec.company} Logo", quote=True)
    return (
        '<div class="job" style="display:flex;gap:16px;margin-bottom:16px">'
        f'<img src="{img}" alt="{alt}" width="64" '
        f"onerror=\"this.onerror=null;this.src='{fallback}'\"/>"
        '<div class="job-details">'
        f"<h3>{esc(rec.title)}</h3>"
        f"<p>Company: {esc(rec.company)}</p>"
        f"<p>Location: {esc(rec.location)}</p>"
        f"<p>Region: {esc(rec.region)}</p>"
        f'<a href="{esc(rec.apply_link, quote=True)}" target="_blank" rel="noopener noreferrer">Apply Here</a>'
        "</div></div>"
    )


def _option_label(value: Optional[str]) -> str:
    if value is None:
        return "All"
    return value or "(blank)"


class StreamlitRenderAdapter:
    """Draws listings into a placeholder so each render replaces the previous one."""

    def __init__(self, list_area=None, filter_area=None, default_image: str = "default-logo.png"):
        self.list_area = list_area if list_area is not None else st.empty()
        self.filter_area = filter_area if filter_area is not None else st.sidebar
        self.default_image = default_image
        self.selected: Dict[str, Optional[str]] = {dim: None for dim in FILTER_DIMENSIONS}

    def render_filter_options(self, index: FilterIndex) -> None:
        with self.filter_area:
            st.subheader("Filters")
            for dim in FILTER_DIMENSIONS:
                self.selected[dim] = st.selectbox(
                    DIMENSION_LABELS[dim],
                    options=[None, *index.options(dim)],
                    format_func=_option_label,
                    key=f"filter_{dim}",
                )

    def render_records(self, records: Sequence[JobRecord]) -> None:
        with self.list_area.container():
            st.caption(f"{len(records)} listing(s)")
            for rec in records:
                st.markdown(render_record_html(rec, self.default_image), unsafe_allow_html=True)

    def render_empty_state(self) -> None:
        self.list_area.info("No job listings available.")
