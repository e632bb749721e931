"""
Visit domain records.

Visits are append-only: there is no update record.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass

from core.errors import ValidationFailure

MAX_DESCRIPTION_LENGTH = 1000


@dataclass(frozen=True)
class Visit:
    id: int
    pet_id: int
    vet_id: int
    date: dt.date
    description: str


@dataclass(frozen=True)
class MakeVisit:
    pet_id: int
    vet_id: int
    date: dt.date
    description: str = ""


def validate_make_visit(make: MakeVisit) -> MakeVisit:
    if not isinstance(make.date, dt.date):
        raise ValidationFailure("date", "must be a date")
    description = (make.description or "").strip()
    if len(description) > MAX_DESCRIPTION_LENGTH:
        raise ValidationFailure("description", f"must be at most {MAX_DESCRIPTION_LENGTH} characters")
    return MakeVisit(
        # Unknown ids, including non-positive ones, are left to the existence check.
        pet_id=make.pet_id,
        vet_id=make.vet_id,
        # datetime is a date subclass; keep only the calendar part.
        date=make.date.date() if isinstance(make.date, dt.datetime) else make.date,
        description=description,
    )


def visit_from_row(row: dict) -> Visit:
    return Visit(
        id=int(row["id"]),
        pet_id=int(row["pet_id"]),
        vet_id=int(row["vet_id"]),
        date=row["date"],
        description=str(row["description"] or ""),
    )
