"""
Vet API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from core.responses import unwrap

from . import mapper, schemas
from .dependencies import get_vet_manager
from .service import VetManager

router = APIRouter(prefix="/vets")


@router.get("", response_model=list[schemas.VetResponse])
async def get_all_vets(
    manager: VetManager = Depends(get_vet_manager),
) -> list[schemas.VetResponse]:
    vets = await manager.get_all_vets()
    return [mapper.to_response(vet) for vet in vets]


@router.get("/{vet_id}", response_model=schemas.VetResponse)
async def get_vet(
    vet_id: int,
    manager: VetManager = Depends(get_vet_manager),
) -> schemas.VetResponse:
    vet = await manager.get_vet(vet_id)
    if vet is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Vet not found.")
    return mapper.to_response(vet)


@router.put("", response_model=schemas.VetResponse)
async def create_vet(
    request: schemas.CreateVetRequest,
    manager: VetManager = Depends(get_vet_manager),
) -> schemas.VetResponse:
    result = await manager.create_vet(mapper.to_create_vet(request))
    return mapper.to_response(unwrap(result, entity="vet", action="created"))


@router.post("/{vet_id}", response_model=schemas.VetResponse)
async def update_vet(
    vet_id: int,
    request: schemas.UpdateVetRequest,
    manager: VetManager = Depends(get_vet_manager),
) -> schemas.VetResponse:
    result = await manager.update_vet(mapper.to_update_vet(vet_id, request))
    return mapper.to_response(unwrap(result, entity="vet", action="updated"))
