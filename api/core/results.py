"""
Tagged outcomes of manager write operations.

Handlers branch on the concrete type; callers that only care about the
record can use `.record`, which is None for every non-`Saved` outcome.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Saved:
    value: Any

    @property
    def record(self) -> Any:
        return self.value


@dataclass(frozen=True)
class NotFound:
    entity: str
    entity_id: int

    @property
    def record(self) -> None:
        return None


@dataclass(frozen=True)
class DuplicateName:
    name: str

    @property
    def record(self) -> None:
        return None


@dataclass(frozen=True)
class StorageFailure:
    reason: str

    @property
    def record(self) -> None:
        return None


WriteResult = Union[Saved, NotFound, DuplicateName, StorageFailure]
