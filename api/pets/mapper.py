"""
Translation between pet transport models and domain records.
"""

from __future__ import annotations

from . import schemas
from .records import CreatePet, Pet, UpdatePet


def to_create_pet(request: schemas.CreatePetRequest) -> CreatePet:
    return CreatePet(name=request.name, age=request.age, species=request.species)


def to_update_pet(pet_id: int, request: schemas.UpdatePetRequest) -> UpdatePet:
    return UpdatePet(id=pet_id, name=request.name, age=request.age, species=request.species)


def to_response(pet: Pet) -> schemas.PetResponse:
    return schemas.PetResponse(id=pet.id, name=pet.name, age=pet.age, species=pet.species)
