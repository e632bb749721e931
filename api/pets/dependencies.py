"""
Pet dependencies for FastAPI routes.
"""

from __future__ import annotations

from functools import lru_cache

from .service import PetManager


@lru_cache(maxsize=1)
def get_pet_manager() -> PetManager:
    return PetManager()
