"""
Visit API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from core.responses import unwrap
from pets.dependencies import get_pet_manager
from pets.service import PetManager
from vets.dependencies import get_vet_manager
from vets.service import VetManager

from . import mapper, schemas
from .dependencies import get_visit_manager
from .service import VisitManager

router = APIRouter(prefix="/visits")


@router.put("/pets/{pet_id}/vets/{vet_id}", response_model=schemas.VisitResponse)
async def make_visit(
    pet_id: int,
    vet_id: int,
    request: schemas.MakeVisitRequest,
    visit_manager: VisitManager = Depends(get_visit_manager),
    pet_manager: PetManager = Depends(get_pet_manager),
    vet_manager: VetManager = Depends(get_vet_manager),
) -> schemas.VisitResponse:
    # Missing pet/vet raises ReferentialFailure -> 400 (see main.py).
    result = await visit_manager.make_visit(mapper.to_make_visit(pet_id, vet_id, request))
    visit = unwrap(result, entity="visit", action="created")
    return await mapper.to_view(visit, pet_manager, vet_manager)


@router.get("/pets/{pet_id}", response_model=list[schemas.VisitResponse])
async def get_pet_visits(
    pet_id: int,
    visit_manager: VisitManager = Depends(get_visit_manager),
    pet_manager: PetManager = Depends(get_pet_manager),
    vet_manager: VetManager = Depends(get_vet_manager),
) -> list[schemas.VisitResponse]:
    if await pet_manager.get_pet(pet_id) is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Pet does not exist.")

    visits = await visit_manager.get_pet_visits(pet_id)
    return await mapper.to_views(visits, pet_manager, vet_manager)
