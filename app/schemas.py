# app/schemas.py
from typing import Dict, List
from pydantic import BaseModel, Field

class JobListing(BaseModel):
    index: int
    title: str = ""
    company: str = ""
    location: str = ""
    region: str = ""
    apply_link: str = ""
    image_url: str = ""
    extra: Dict[str, str] = Field(default_factory=dict, description="Columns without a known meaning")
    columns: List[List[str]] = Field(default_factory=list, description="[header, value] pairs in source order")

class ListingsResponse(BaseModel):
    count: int
    listings: List[JobListing]

class FilterOptionsResponse(BaseModel):
    # sorted ascending; "" is a real option when present in the data
    location: List[str]
    company: List[str]
    region: List[str]
