"""
Error taxonomy shared by managers, the storage gateway and handlers.
"""

from __future__ import annotations


class PetclinicError(RuntimeError):
    pass


class ValidationFailure(PetclinicError):
    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class NotFoundError(PetclinicError):
    def __init__(self, entity: str, entity_id: int) -> None:
        super().__init__(f"{entity.capitalize()} not found.")
        self.entity = entity
        self.entity_id = entity_id


class ReferentialFailure(PetclinicError):
    """
    A visit references a pet or vet that does not exist.
    """

    def __init__(self, entity: str, entity_id: int) -> None:
        super().__init__(f"{entity.capitalize()} does not exist.")
        self.entity = entity
        self.entity_id = entity_id


class StorageError(PetclinicError):
    """
    Raised by `core.db` when a statement fails.
    """


class UniqueViolation(StorageError):
    def __init__(self, constraint: str | None, message: str = "") -> None:
        super().__init__(message or f"Unique constraint violated: {constraint}")
        self.constraint = constraint
