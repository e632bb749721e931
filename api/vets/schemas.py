"""
Vet API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from .records import MAX_NAME_LENGTH, Specialty


class CreateVetRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    specialty: Specialty


class UpdateVetRequest(CreateVetRequest):
    pass


class VetResponse(BaseModel):
    id: int
    name: str
    specialty: Specialty
