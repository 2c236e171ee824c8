"""Tests for current profile persistence."""

import json
from pathlib import Path

import pytest

from diet_planner.adapters.json_profile_store import JsonFileProfileStore
from diet_planner.domain.errors import ProfileNotFoundError
from diet_planner.domain.profile import UserProfile
from diet_planner.services.profiles import ProfileService
from tests.conftest import InMemoryProfileStore


def test_load_returns_none_when_empty() -> None:
    service = ProfileService(InMemoryProfileStore())

    assert service.load() is None
    with pytest.raises(ProfileNotFoundError):
        service.require()


def test_save_then_load_round_trips(profile: UserProfile) -> None:
    store = InMemoryProfileStore()
    service = ProfileService(store)

    service.save(profile)

    assert store.payload == profile.to_storage()
    assert service.load() == profile


def test_save_overwrites_previous_profile(profile: UserProfile) -> None:
    service = ProfileService(InMemoryProfileStore())
    service.save(profile)

    service.save(profile.model_copy(update={"weight": 58.5}))

    loaded = service.require()
    assert loaded.weight == 58.5


def test_outdated_stored_shape_is_discarded(profile: UserProfile) -> None:
    payload = profile.to_storage()
    payload.pop("planType")
    payload.pop("startDate")
    store = InMemoryProfileStore(payload=payload)
    service = ProfileService(store)

    assert service.load() is None
    assert store.payload is None
    assert store.cleared == 1


def test_legacy_spaced_values_still_load(profile: UserProfile) -> None:
    payload = profile.to_storage()
    payload["activityLevel"] = "moderately active"
    payload["browserLanguage"] = payload.pop("locale")
    service = ProfileService(InMemoryProfileStore(payload=payload))

    assert service.load() == profile


def test_reset_clears_slot(profile: UserProfile) -> None:
    store = InMemoryProfileStore()
    service = ProfileService(store)
    service.save(profile)

    service.reset()

    assert service.load() is None


def test_json_file_store_round_trip(tmp_path: Path, profile: UserProfile) -> None:
    path = tmp_path / "nested" / "profile.json"
    service = ProfileService(JsonFileProfileStore(path))

    service.save(profile)

    assert json.loads(path.read_text(encoding="utf-8"))["name"] == "Ayse"
    assert ProfileService(JsonFileProfileStore(path)).load() == profile

    service.reset()
    assert not path.exists()
    service.reset()


def test_json_file_store_ignores_corrupt_file(tmp_path: Path) -> None:
    path = tmp_path / "profile.json"
    path.write_text("{not json", encoding="utf-8")

    assert JsonFileProfileStore(path).load() is None


def test_json_file_store_ignores_non_object(tmp_path: Path) -> None:
    path = tmp_path / "profile.json"
    path.write_text("[1, 2]", encoding="utf-8")

    assert JsonFileProfileStore(path).load() is None
