"""
Visit business logic.

`VisitManager` guards the referential rule itself: a visit is written only
after both the pet and the vet have been found through their managers.
Those managers are used read-only.
"""

from __future__ import annotations

import logging
from types import ModuleType
from typing import Any

from core.errors import ReferentialFailure, StorageError
from core.results import Saved, StorageFailure, WriteResult
from pets.service import PetManager
from vets.service import VetManager

from . import repository as visit_repository
from .records import MakeVisit, Visit, validate_make_visit, visit_from_row

logger = logging.getLogger(__name__)


class VisitManager:
    def __init__(
        self,
        *,
        pet_manager: PetManager,
        vet_manager: VetManager,
        repository: ModuleType | Any = visit_repository,
    ) -> None:
        self._pet_manager = pet_manager
        self._vet_manager = vet_manager
        self._repository = repository

    async def _ensure_references(self, make: MakeVisit) -> None:
        if await self._pet_manager.get_pet(make.pet_id) is None:
            logger.warning("visit_rejected reason=missing_pet pet_id=%s", make.pet_id)
            raise ReferentialFailure("pet", make.pet_id)
        if await self._vet_manager.get_vet(make.vet_id) is None:
            logger.warning("visit_rejected reason=missing_vet vet_id=%s", make.vet_id)
            raise ReferentialFailure("vet", make.vet_id)

    async def make_visit(self, make: MakeVisit) -> WriteResult:
        """
        Record a visit.

        Raises ValidationFailure for bad input and ReferentialFailure when the
        pet or vet does not exist; storage errors come back as StorageFailure.
        """
        make = validate_make_visit(make)
        await self._ensure_references(make)
        try:
            row = await self._repository.insert_visit(
                pet_id=make.pet_id,
                vet_id=make.vet_id,
                date=make.date,
                description=make.description,
            )
        except StorageError as exc:
            logger.error(
                "visit_create_failed pet_id=%s vet_id=%s error=%s",
                make.pet_id,
                make.vet_id,
                exc,
            )
            return StorageFailure(str(exc))

        if row is None:
            return StorageFailure("Insert returned no row.")

        visit = visit_from_row(row)
        logger.info("visit_created visit_id=%s pet_id=%s vet_id=%s", visit.id, visit.pet_id, visit.vet_id)
        return Saved(visit)

    async def get_pet_visits(self, pet_id: int) -> list[Visit]:
        # Callers check that the pet exists; an unknown id yields [].
        rows = await self._repository.list_pet_visits(pet_id)
        return [visit_from_row(row) for row in rows]
