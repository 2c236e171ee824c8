"""Current profile slot persistence."""

import logging
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError

from diet_planner.domain.errors import ProfileNotFoundError
from diet_planner.domain.profile import UserProfile

_logger = logging.getLogger(__name__)


class ProfileStore(Protocol):
    """Storage for the single current-profile slot."""

    def load(self) -> dict[str, object] | None:
        """Return the stored payload, if any."""

    def save(self, payload: dict[str, object]) -> None:
        """Overwrite the slot with payload."""

    def clear(self) -> None:
        """Remove the stored payload."""


@dataclass
class ProfileService:
    """Loads, saves and resets the user's profile."""

    store: ProfileStore

    def load(self) -> UserProfile | None:
        """Return the stored profile, discarding one that no longer validates."""
        payload = self.store.load()
        if payload is None:
            return None
        try:
            return UserProfile.model_validate(payload)
        except ValidationError as exc:
            _logger.warning(
                "Stored profile is incomplete or outdated, removing (%s errors)",
                exc.error_count(),
            )
            self.store.clear()
            return None

    def require(self) -> UserProfile:
        """Return the stored profile or raise ProfileNotFoundError."""
        profile = self.load()
        if profile is None:
            raise ProfileNotFoundError("No profile has been saved yet")
        return profile

    def save(self, profile: UserProfile) -> UserProfile:
        """Persist a profile, replacing the previous one."""
        self.store.save(profile.to_storage())
        return profile

    def reset(self) -> None:
        """Delete the stored profile."""
        self.store.clear()
