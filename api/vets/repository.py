"""
Vet persistence (raw SQL).
"""

from __future__ import annotations

from core import db


async def get_vet(vet_id: int) -> dict | None:
    return await db.fetch_one(
        """
        SELECT id, name, specialty
        FROM vets
        WHERE id = $1
        """,
        vet_id,
    )


async def list_vets() -> list[dict]:
    return await db.fetch_all(
        """
        SELECT id, name, specialty
        FROM vets
        ORDER BY id ASC
        """
    )


async def insert_vet(*, name: str, specialty: str) -> dict | None:
    return await db.fetch_one(
        """
        INSERT INTO vets (name, specialty)
        VALUES ($1, $2)
        RETURNING id, name, specialty
        """,
        name,
        specialty,
    )


async def update_vet(*, vet_id: int, name: str, specialty: str) -> dict | None:
    return await db.fetch_one(
        """
        UPDATE vets
        SET name = $2,
            specialty = $3
        WHERE id = $1
        RETURNING id, name, specialty
        """,
        vet_id,
        name,
        specialty,
    )
