"""
Translation between vet transport models and domain records.
"""

from __future__ import annotations

from . import schemas
from .records import CreateVet, UpdateVet, Vet


def to_create_vet(request: schemas.CreateVetRequest) -> CreateVet:
    return CreateVet(name=request.name, specialty=request.specialty)


def to_update_vet(vet_id: int, request: schemas.UpdateVetRequest) -> UpdateVet:
    return UpdateVet(id=vet_id, name=request.name, specialty=request.specialty)


def to_response(vet: Vet) -> schemas.VetResponse:
    return schemas.VetResponse(id=vet.id, name=vet.name, specialty=vet.specialty)
