"""
Shared fixtures: in-memory repositories that honour the storage gateway
contract, managers wired to them, and an HTTP client with the managers
injected.
"""

from __future__ import annotations

import datetime as dt

import pytest
from fastapi.testclient import TestClient

from core.errors import StorageError, UniqueViolation
from main import app
from pets.dependencies import get_pet_manager
from pets.records import Species
from pets.service import PetManager
from vets.dependencies import get_vet_manager
from vets.records import Specialty
from vets.service import VetManager
from visits.dependencies import get_visit_manager
from visits.service import VisitManager


class InMemoryRepository:
    """
    Rows are dicts keyed by id; ids are handed out in insertion order.
    Set `fail_writes` to make every write raise StorageError.
    """

    def __init__(self) -> None:
        self.rows: dict[int, dict] = {}
        self._next_id = 1
        self.fail_writes = False
        self.calls: list[str] = []

    def _check_write(self) -> None:
        if self.fail_writes:
            raise StorageError("connection reset")

    def _insert(self, **values) -> dict:
        row = {"id": self._next_id, **values}
        self.rows[self._next_id] = row
        self._next_id += 1
        return dict(row)

    def _get(self, row_id: int) -> dict | None:
        row = self.rows.get(row_id)
        return dict(row) if row is not None else None

    def _all(self) -> list[dict]:
        return [dict(self.rows[key]) for key in sorted(self.rows)]


class InMemoryPetRepository(InMemoryRepository):
    async def get_pet(self, pet_id: int) -> dict | None:
        return self._get(pet_id)

    async def get_pet_by_name(self, name: str) -> dict | None:
        for row in self._all():
            if row["name"] == name:
                return row
        return None

    async def list_pets(self) -> list[dict]:
        return self._all()

    def _ensure_unique(self, name: str, *, ignore_id: int | None = None) -> None:
        for row in self.rows.values():
            if row["name"] == name and row["id"] != ignore_id:
                raise UniqueViolation("pets_name_key")

    async def insert_pet(self, *, name: str, age: int, species: str) -> dict | None:
        self.calls.append("insert_pet")
        self._check_write()
        self._ensure_unique(name)
        return self._insert(name=name, age=age, species=species)

    async def update_pet(self, *, pet_id: int, name: str, age: int, species: str) -> dict | None:
        self.calls.append("update_pet")
        self._check_write()
        if pet_id not in self.rows:
            return None
        self._ensure_unique(name, ignore_id=pet_id)
        self.rows[pet_id].update(name=name, age=age, species=species)
        return self._get(pet_id)


class InMemoryVetRepository(InMemoryRepository):
    async def get_vet(self, vet_id: int) -> dict | None:
        return self._get(vet_id)

    async def list_vets(self) -> list[dict]:
        return self._all()

    async def insert_vet(self, *, name: str, specialty: str) -> dict | None:
        self.calls.append("insert_vet")
        self._check_write()
        return self._insert(name=name, specialty=specialty)

    async def update_vet(self, *, vet_id: int, name: str, specialty: str) -> dict | None:
        self.calls.append("update_vet")
        self._check_write()
        if vet_id not in self.rows:
            return None
        self.rows[vet_id].update(name=name, specialty=specialty)
        return self._get(vet_id)


class InMemoryVisitRepository(InMemoryRepository):
    async def insert_visit(self, *, pet_id: int, vet_id: int, date: dt.date, description: str) -> dict | None:
        self.calls.append("insert_visit")
        self._check_write()
        return self._insert(pet_id=pet_id, vet_id=vet_id, date=date, description=description)

    async def list_pet_visits(self, pet_id: int) -> list[dict]:
        return [row for row in self._all() if row["pet_id"] == pet_id]


@pytest.fixture
def pet_repository() -> InMemoryPetRepository:
    return InMemoryPetRepository()


@pytest.fixture
def vet_repository() -> InMemoryVetRepository:
    return InMemoryVetRepository()


@pytest.fixture
def visit_repository() -> InMemoryVisitRepository:
    return InMemoryVisitRepository()


@pytest.fixture
def pet_manager(pet_repository) -> PetManager:
    return PetManager(repository=pet_repository)


@pytest.fixture
def vet_manager(vet_repository) -> VetManager:
    return VetManager(repository=vet_repository)


@pytest.fixture
def visit_manager(pet_manager, vet_manager, visit_repository) -> VisitManager:
    return VisitManager(
        pet_manager=pet_manager,
        vet_manager=vet_manager,
        repository=visit_repository,
    )


@pytest.fixture
def add_pet(pet_repository):
    """
    Seed a pet row directly, bypassing the manager.
    """

    def _add(name: str, age: int, species: Species) -> dict:
        return pet_repository._insert(name=name, age=age, species=species.value)

    return _add


@pytest.fixture
def add_vet(vet_repository):
    def _add(name: str, specialty: Specialty) -> dict:
        return vet_repository._insert(name=name, specialty=specialty.value)

    return _add


@pytest.fixture
def client(pet_manager, vet_manager, visit_manager):
    app.dependency_overrides[get_pet_manager] = lambda: pet_manager
    app.dependency_overrides[get_vet_manager] = lambda: vet_manager
    app.dependency_overrides[get_visit_manager] = lambda: visit_manager
    try:
        # No `with`: the lifespan (and its DB pool) is not started.
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
