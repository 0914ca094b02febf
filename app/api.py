# app/api.py
"""FastAPI application serving the loaded job listings read-only.

Filtering happens in the client; this API only hands out the full record set and
the distinct filter options.
"""
import logging
from functools import lru_cache

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.controller import ListingSession
from core.parse_listings import load_listings
from core.settings import get_settings

from .schemas import FilterOptionsResponse, JobListing, ListingsResponse

logging.basicConfig(level=get_settings().log_level)
logger = logging.getLogger(__name__)


app = FastAPI(title="Job Board API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def get_session() -> ListingSession:
    """Load the listings source once per process."""
    session = ListingSession.from_records(load_listings(get_settings().listings_source))
    if session.is_empty:
        logger.info("No job listings available.")
    return session


@app.get("/")
def root():
    return {"ok": True}

@app.get("/healthz")
def healthz():
    return {"status": "ok"}

@app.get("/listings", response_model=ListingsResponse)
def listings(session: ListingSession = Depends(get_session)) -> ListingsResponse:
    items = [JobListing(**rec.to_dict()) for rec in session.records]
    return ListingsResponse(count=len(items), listings=items)

@app.get("/filters", response_model=FilterOptionsResponse)
def filters(session: ListingSession = Depends(get_session)) -> FilterOptionsResponse:
    return FilterOptionsResponse(**session.index.as_dict())
