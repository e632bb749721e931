"""
Cross-entity mapping for visits.

Building a `VisitResponse` resolves the visit's pet and vet through their
managers. Nothing here writes, and nothing is kept between calls.
"""

from __future__ import annotations

from core.errors import NotFoundError
from pets import mapper as pet_mapper
from pets.records import Pet
from pets.service import PetManager
from vets import mapper as vet_mapper
from vets.records import Vet
from vets.service import VetManager

from . import schemas
from .records import MakeVisit, Visit


def to_make_visit(pet_id: int, vet_id: int, request: schemas.MakeVisitRequest) -> MakeVisit:
    return MakeVisit(
        pet_id=pet_id,
        vet_id=vet_id,
        date=request.date,
        description=request.description,
    )


def _build_view(visit: Visit, pet: Pet, vet: Vet) -> schemas.VisitResponse:
    return schemas.VisitResponse(
        id=visit.id,
        pet=pet_mapper.to_response(pet),
        vet=vet_mapper.to_response(vet),
        date=visit.date,
        description=visit.description,
    )


async def to_view(
    visit: Visit,
    pet_manager: PetManager,
    vet_manager: VetManager,
) -> schemas.VisitResponse:
    """
    Raises NotFoundError if the pet or vet can no longer be resolved.
    """
    pet = await pet_manager.get_pet(visit.pet_id)
    if pet is None:
        raise NotFoundError("pet", visit.pet_id)
    vet = await vet_manager.get_vet(visit.vet_id)
    if vet is None:
        raise NotFoundError("vet", visit.vet_id)
    return _build_view(visit, pet, vet)


async def to_views(
    visits: list[Visit],
    pet_manager: PetManager,
    vet_manager: VetManager,
) -> list[schemas.VisitResponse]:
    """
    Like `to_view` for a list; each pet and vet is fetched once per call.
    """
    pets: dict[int, Pet] = {}
    vets: dict[int, Vet] = {}
    views: list[schemas.VisitResponse] = []
    for visit in visits:
        if visit.pet_id not in pets:
            pet = await pet_manager.get_pet(visit.pet_id)
            if pet is None:
                raise NotFoundError("pet", visit.pet_id)
            pets[visit.pet_id] = pet
        if visit.vet_id not in vets:
            vet = await vet_manager.get_vet(visit.vet_id)
            if vet is None:
                raise NotFoundError("vet", visit.vet_id)
            vets[visit.vet_id] = vet
        views.append(_build_view(visit, pets[visit.pet_id], vets[visit.vet_id]))
    return views
