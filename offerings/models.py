from __future__ import annotations

from datetime import date
from typing import List, Optional
from pydantic import BaseModel, Field

from .rules import PLACEHOLDER


class OfferingView(BaseModel):
    program_name: str
    ficha: str = PLACEHOLDER
    start_date: str = PLACEHOLDER
    end_date: str = PLACEHOLDER
    closing_date: str = PLACEHOLDER
    schedule: str = PLACEHOLDER
    start_time: str = PLACEHOLDER
    end_time: str = PLACEHOLDER
    environment: str = PLACEHOLDER
    observation: str
    enrollment_url: str


class OfferingsResponse(BaseModel):
    reference_date: date
    count: int = 0
    items: List[OfferingView] = Field(default_factory=list)
    message: Optional[str] = Field(default=None, examples=["No hay fichas vigentes."])


class ErrorResponse(BaseModel):
    detail: str


class HealthResponse(BaseModel):
    ok: bool = True
