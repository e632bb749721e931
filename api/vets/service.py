"""
Vet business logic.
"""

from __future__ import annotations

import logging
from types import ModuleType
from typing import Any

from core.errors import StorageError
from core.results import NotFound, Saved, StorageFailure, WriteResult

from . import repository as vet_repository
from .records import CreateVet, UpdateVet, Vet, validate_create_vet, validate_update_vet, vet_from_row

logger = logging.getLogger(__name__)


class VetManager:
    def __init__(self, repository: ModuleType | Any = vet_repository) -> None:
        self._repository = repository

    async def get_vet(self, vet_id: int) -> Vet | None:
        row = await self._repository.get_vet(vet_id)
        return vet_from_row(row) if row is not None else None

    async def get_all_vets(self) -> list[Vet]:
        rows = await self._repository.list_vets()
        return [vet_from_row(row) for row in rows]

    async def create_vet(self, create: CreateVet) -> WriteResult:
        create = validate_create_vet(create)
        try:
            row = await self._repository.insert_vet(
                name=create.name,
                specialty=create.specialty.value,
            )
        except StorageError as exc:
            logger.error("vet_create_failed name=%r error=%s", create.name, exc)
            return StorageFailure(str(exc))

        if row is None:
            return StorageFailure("Insert returned no row.")

        vet = vet_from_row(row)
        logger.info("vet_created vet_id=%s specialty=%s", vet.id, vet.specialty.value)
        return Saved(vet)

    async def update_vet(self, update: UpdateVet) -> WriteResult:
        update = validate_update_vet(update)
        try:
            row = await self._repository.update_vet(
                vet_id=update.id,
                name=update.name,
                specialty=update.specialty.value,
            )
        except StorageError as exc:
            logger.error("vet_update_failed vet_id=%s error=%s", update.id, exc)
            return StorageFailure(str(exc))

        if row is None:
            logger.info("vet_update_rejected reason=not_found vet_id=%s", update.id)
            return NotFound("vet", update.id)

        vet = vet_from_row(row)
        logger.info("vet_updated vet_id=%s", vet.id)
        return Saved(vet)
