"""
Pet business logic.

`PetManager` is the only place that validates pet input and talks to the
pet repository. It holds no state besides the repository handle, so one
instance can serve concurrent requests.
"""

from __future__ import annotations

import logging
from types import ModuleType
from typing import Any

from core.errors import StorageError, UniqueViolation
from core.results import DuplicateName, NotFound, Saved, StorageFailure, WriteResult

from . import repository as pet_repository
from .records import CreatePet, Pet, UpdatePet, pet_from_row, validate_create_pet, validate_update_pet

logger = logging.getLogger(__name__)


class PetManager:
    def __init__(self, repository: ModuleType | Any = pet_repository) -> None:
        self._repository = repository

    async def get_pet(self, pet_id: int) -> Pet | None:
        row = await self._repository.get_pet(pet_id)
        return pet_from_row(row) if row is not None else None

    async def get_all_pets(self) -> list[Pet]:
        rows = await self._repository.list_pets()
        return [pet_from_row(row) for row in rows]

    async def find_pet_by_name(self, name: str) -> Pet | None:
        row = await self._repository.get_pet_by_name(name.strip())
        return pet_from_row(row) if row is not None else None

    async def create_pet(self, create: CreatePet) -> WriteResult:
        """
        Validate and insert a pet.

        Raises ValidationFailure before touching storage; a taken name comes
        back as DuplicateName, any other write error as StorageFailure.
        """
        create = validate_create_pet(create)
        try:
            row = await self._repository.insert_pet(
                name=create.name,
                age=create.age,
                species=create.species.value,
            )
        except UniqueViolation:
            logger.info("pet_create_rejected reason=duplicate_name name=%r", create.name)
            return DuplicateName(create.name)
        except StorageError as exc:
            logger.error("pet_create_failed name=%r error=%s", create.name, exc)
            return StorageFailure(str(exc))

        if row is None:
            return StorageFailure("Insert returned no row.")

        pet = pet_from_row(row)
        logger.info("pet_created pet_id=%s species=%s", pet.id, pet.species.value)
        return Saved(pet)

    async def update_pet(self, update: UpdatePet) -> WriteResult:
        update = validate_update_pet(update)
        try:
            row = await self._repository.update_pet(
                pet_id=update.id,
                name=update.name,
                age=update.age,
                species=update.species.value,
            )
        except UniqueViolation:
            logger.info("pet_update_rejected reason=duplicate_name pet_id=%s", update.id)
            return DuplicateName(update.name)
        except StorageError as exc:
            logger.error("pet_update_failed pet_id=%s error=%s", update.id, exc)
            return StorageFailure(str(exc))

        if row is None:
            logger.info("pet_update_rejected reason=not_found pet_id=%s", update.id)
            return NotFound("pet", update.id)

        pet = pet_from_row(row)
        logger.info("pet_updated pet_id=%s", pet.id)
        return Saved(pet)
