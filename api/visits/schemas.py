"""
Visit API schemas (request/response models).
"""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, Field

from pets.schemas import PetResponse
from vets.schemas import VetResponse

from .records import MAX_DESCRIPTION_LENGTH


class MakeVisitRequest(BaseModel):
    date: dt.date
    description: str = Field(default="", max_length=MAX_DESCRIPTION_LENGTH)


class VisitResponse(BaseModel):
    id: int
    pet: PetResponse
    vet: VetResponse
    date: dt.date
    description: str
