"""
Vet domain records and their field rules.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from core.errors import ValidationFailure

MAX_NAME_LENGTH = 100


class Specialty(str, Enum):
    GENERAL = "GENERAL"
    SURGERY = "SURGERY"
    DENTISTRY = "DENTISTRY"
    DERMATOLOGY = "DERMATOLOGY"
    CARDIOLOGY = "CARDIOLOGY"
    RADIOLOGY = "RADIOLOGY"


@dataclass(frozen=True)
class Vet:
    id: int
    name: str
    specialty: Specialty


@dataclass(frozen=True)
class CreateVet:
    name: str
    specialty: Specialty


@dataclass(frozen=True)
class UpdateVet:
    id: int
    name: str
    specialty: Specialty


def validate_name(name: str | None) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationFailure("name", "must not be empty")
    if len(cleaned) > MAX_NAME_LENGTH:
        raise ValidationFailure("name", f"must be at most {MAX_NAME_LENGTH} characters")
    return cleaned


def validate_specialty(specialty: Specialty | str) -> Specialty:
    try:
        return Specialty(specialty)
    except ValueError as exc:
        raise ValidationFailure("specialty", f"unknown specialty {specialty!r}") from exc


def validate_create_vet(create: CreateVet) -> CreateVet:
    return CreateVet(
        name=validate_name(create.name),
        specialty=validate_specialty(create.specialty),
    )


def validate_update_vet(update: UpdateVet) -> UpdateVet:
    return UpdateVet(
        id=update.id,
        name=validate_name(update.name),
        specialty=validate_specialty(update.specialty),
    )


def vet_from_row(row: dict) -> Vet:
    return Vet(
        id=int(row["id"]),
        name=str(row["name"]),
        specialty=Specialty(row["specialty"]),
    )
