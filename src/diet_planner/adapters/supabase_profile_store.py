"""Supabase-backed profile store."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from diet_planner.services.profiles import ProfileStore

CURRENT_SLOT = "current"


@dataclass
class SupabaseProfileStore(ProfileStore):
    """Keeps the current profile in the `profiles` table under one slot."""

    client: Client
    slot: str = CURRENT_SLOT

    def load(self) -> dict[str, object] | None:
        """Return the profile payload stored in the slot."""
        response = (
            self.client.table("profiles")
            .select("payload")
            .eq("slot", self.slot)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        payload = response.data[0].get("payload")
        return payload if isinstance(payload, dict) else None

    def save(self, payload: dict[str, object]) -> None:
        """Upsert the slot row with the new payload."""
        self.client.table("profiles").upsert(
            {
                "slot": self.slot,
                "payload": payload,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="slot",
        ).execute()

    def clear(self) -> None:
        """Delete the slot row."""
        self.client.table("profiles").delete().eq("slot", self.slot).execute()
