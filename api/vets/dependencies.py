"""
Vet dependencies for FastAPI routes.
"""

from __future__ import annotations

from functools import lru_cache

from .service import VetManager


@lru_cache(maxsize=1)
def get_vet_manager() -> VetManager:
    return VetManager()
