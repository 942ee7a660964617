"""Preference service for process-wide settings."""

import logging
from dataclasses import dataclass
from typing import Protocol

from hydration_tracker.domain.errors import InvalidCupSize, StoreUnavailable
from hydration_tracker.domain.hydration import DEFAULT_CUP_SIZE_OZ

CUP_SIZE_KEY = "cup_size_oz"

logger = logging.getLogger(__name__)


class PreferenceRepository(Protocol):
    """Persistence interface for scalar preferences."""

    def get_int(self, key: str, default: int) -> int:
        """Return the stored integer or the default when unset."""

    def set_int(self, key: str, value: int) -> None:
        """Store an integer preference."""


@dataclass
class PreferenceService:
    """Service for the cup size preference."""

    repository: PreferenceRepository

    def get_cup_size(self) -> int:
        """Return the cup size in ounces, falling back to the default."""
        try:
            return self.repository.get_int(CUP_SIZE_KEY, DEFAULT_CUP_SIZE_OZ)
        except StoreUnavailable:
            logger.exception("Error getting cup size preference")
            return DEFAULT_CUP_SIZE_OZ

    def set_cup_size(self, ounces: int) -> None:
        """Persist a new cup size; past totals are unaffected."""
        if ounces <= 0:
            raise InvalidCupSize(ounces)
        self.repository.set_int(CUP_SIZE_KEY, ounces)
