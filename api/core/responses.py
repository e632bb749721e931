"""
Map manager write outcomes onto HTTP errors.
"""

from __future__ import annotations

from typing import Any

from fastapi import HTTPException, status

from .results import DuplicateName, NotFound, Saved, WriteResult


def unwrap(result: WriteResult, *, entity: str, action: str) -> Any:
    """
    Return the saved record or raise the matching HTTPException.
    """
    if isinstance(result, Saved):
        return result.record
    if isinstance(result, NotFound):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{entity.capitalize()} not found.",
        )
    if isinstance(result, DuplicateName):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"{entity.capitalize()} name '{result.name}' is already in use.",
        )
    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"{entity.capitalize()} could not be {action}.",
    )
