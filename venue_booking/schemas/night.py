"""
Pydantic schemas for night responses.
"""

from typing import Optional
from pydantic import BaseModel


class NightResponse(BaseModel):
    id: int
    short_id: str
    title: str
    date: str
    time: str
    color: str
    hover_color: str
    is_active: Optional[bool] = None

    model_config = {"from_attributes": True}


class NightListResponse(BaseModel):
    nights: list[NightResponse]
    total: int
    cached: bool = False
