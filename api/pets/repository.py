"""
Pet persistence (raw SQL).
"""

from __future__ import annotations

from core import db


async def get_pet(pet_id: int) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, name, age, species
        FROM pets
        WHERE id = $1
        """,
        pet_id,
    )


async def get_pet_by_name(name: str) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, name, age, species
        FROM pets
        WHERE name = $1
        """,
        name,
    )


async def list_pets() -> list[dict]:
    return await db.fetch_all(
        """
        SELECT id, name, age, species
        FROM pets
        ORDER BY id ASC
        """
    )


async def insert_pet(*, name: str, age: int, species: str) -> dict | None:
    """
    Insert a pet and return the stored row.

    Raises `UniqueViolation` when the name is already taken.
    """
    return await db.fetch_one(
        """
        INSERT INTO pets (name, age, species)
        VALUES ($1, $2, $3)
        RETURNING id, name, age, species
        """,
        name,
        age,
        species,
    )


async def update_pet(*, pet_id: int, name: str, age: int, species: str) -> dict | None:
    """
    Replace name/age/species of a pet. Returns None when no row matched.
    """
    return await db.fetch_one(
        """
        UPDATE pets
        SET name = $2,
            age = $3,
            species = $4
        WHERE id = $1
        RETURNING id, name, age, species
        """,
        pet_id,
        name,
        age,
        species,
    )
