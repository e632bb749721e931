"""
Pet API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from core.responses import unwrap

from . import mapper, schemas
from .dependencies import get_pet_manager
from .service import PetManager

router = APIRouter(prefix="/pets")


@router.get("", response_model=list[schemas.PetResponse])
async def get_all_pets(
    manager: PetManager = Depends(get_pet_manager),
) -> list[schemas.PetResponse]:
    pets = await manager.get_all_pets()
    return [mapper.to_response(pet) for pet in pets]


@router.get("/{pet_id}", response_model=schemas.PetResponse)
async def get_pet(
    pet_id: int,
    manager: PetManager = Depends(get_pet_manager),
) -> schemas.PetResponse:
    pet = await manager.get_pet(pet_id)
    if pet is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pet not found.")
    return mapper.to_response(pet)


@router.put("", response_model=schemas.PetResponse)
async def create_pet(
    request: schemas.CreatePetRequest,
    manager: PetManager = Depends(get_pet_manager),
) -> schemas.PetResponse:
    result = await manager.create_pet(mapper.to_create_pet(request))
    return mapper.to_response(unwrap(result, entity="pet", action="created"))


@router.post("/{pet_id}", response_model=schemas.PetResponse)
async def update_pet(
    pet_id: int,
    request: schemas.UpdatePetRequest,
    manager: PetManager = Depends(get_pet_manager),
) -> schemas.PetResponse:
    result = await manager.update_pet(mapper.to_update_pet(pet_id, request))
    return mapper.to_response(unwrap(result, entity="pet", action="updated"))
