"""
Pet domain records and their field rules.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from core.errors import ValidationFailure

MAX_NAME_LENGTH = 100
MAX_AGE = 1000


class Species(str, Enum):
    CAT = "CAT"
    DOG = "DOG"
    PARROT = "PARROT"
    RABBIT = "RABBIT"
    HAMSTER = "HAMSTER"
    TURTLE = "TURTLE"


@dataclass(frozen=True)
class Pet:
    id: int
    name: str
    age: int
    species: Species


@dataclass(frozen=True)
class CreatePet:
    name: str
    age: int
    species: Species


@dataclass(frozen=True)
class UpdatePet:
    id: int
    name: str
    age: int
    species: Species


def normalize_name(name: str | None) -> str:
    return (name or "").strip()


def validate_name(name: str | None) -> str:
    cleaned = normalize_name(name)
    if not cleaned:
        raise ValidationFailure("name", "must not be empty")
    if len(cleaned) > MAX_NAME_LENGTH:
        raise ValidationFailure("name", f"must be at most {MAX_NAME_LENGTH} characters")
    return cleaned


def validate_age(age: int) -> int:
    # bool is an int subclass; reject it explicitly.
    if isinstance(age, bool) or not isinstance(age, int):
        raise ValidationFailure("age", "must be an integer")
    if age < 0:
        raise ValidationFailure("age", "must not be negative")
    if age > MAX_AGE:
        raise ValidationFailure("age", f"must be at most {MAX_AGE}")
    return age


def validate_species(species: Species | str) -> Species:
    try:
        return Species(species)
    except ValueError as exc:
        raise ValidationFailure("species", f"unknown species {species!r}") from exc


def validate_create_pet(create: CreatePet) -> CreatePet:
    """
    Return a cleaned copy of `create` or raise ValidationFailure.
    """
    return CreatePet(
        name=validate_name(create.name),
        age=validate_age(create.age),
        species=validate_species(create.species),
    )


def validate_update_pet(update: UpdatePet) -> UpdatePet:
    return UpdatePet(
        id=update.id,
        name=validate_name(update.name),
        age=validate_age(update.age),
        species=validate_species(update.species),
    )


def pet_from_row(row: dict) -> Pet:
    return Pet(
        id=int(row["id"]),
        name=str(row["name"]),
        age=int(row["age"]),
        species=Species(row["species"]),
    )
