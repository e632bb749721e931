"""
Pet API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from .records import MAX_AGE, MAX_NAME_LENGTH, Species


class CreatePetRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    age: int = Field(..., ge=0, le=MAX_AGE)
    species: Species


class UpdatePetRequest(CreatePetRequest):
    """
    Same fields as creation; the identifier comes from the path.
    """


class PetResponse(BaseModel):
    id: int
    name: str
    age: int
    species: Species
