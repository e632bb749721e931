"""
Visit persistence (raw SQL).
"""

from __future__ import annotations

import datetime as dt

from core import db


async def insert_visit(*, pet_id: int, vet_id: int, date: dt.date, description: str) -> dict | None:
    return await db.fetch_one(
        """
        INSERT INTO visits (pet_id, vet_id, date, description)
        VALUES ($1, $2, $3, $4)
        RETURNING id, pet_id, vet_id, date, description
        """,
        pet_id,
        vet_id,
        date,
        description,
    )


async def list_pet_visits(pet_id: int) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT id, pet_id, vet_id, date, description
        FROM visits
        WHERE pet_id = $1
        ORDER BY id ASC
        """,
        pet_id,
    )
