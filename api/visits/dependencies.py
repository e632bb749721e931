"""
Visit dependencies for FastAPI routes.
"""

from __future__ import annotations

from fastapi import Depends

from pets.dependencies import get_pet_manager
from pets.service import PetManager
from vets.dependencies import get_vet_manager
from vets.service import VetManager

from .service import VisitManager


def get_visit_manager(
    pet_manager: PetManager = Depends(get_pet_manager),
    vet_manager: VetManager = Depends(get_vet_manager),
) -> VisitManager:
    return VisitManager(pet_manager=pet_manager, vet_manager=vet_manager)
