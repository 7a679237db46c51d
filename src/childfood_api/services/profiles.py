"""Parent and child profile service."""

import logging
from uuid import uuid4

from childfood_api.core.exceptions import NotFoundError
from childfood_api.db.ports import KeyValueStore
from childfood_api.models.profile import (
    ChildProfile,
    ChildProfileCreate,
    HealthCondition,
    UserProfile,
)

logger = logging.getLogger(__name__)

PROFILE_KEY = "userProfile"
ACTIVE_CHILD_KEY = "activeChildId"

DEFAULT_PROFILE_NAME = "Parent"


def _new_id() -> str:
    return uuid4().hex[:12]


def build_conditions(
    names: list[str],
    existing: list[HealthCondition] | None = None,
) -> list[HealthCondition]:
    """
    Turn condition names into HealthCondition entries.

    Names are unique case-insensitively (first spelling wins); ids of
    conditions that already exist are kept.
    """
    known = {c.name.casefold(): c for c in existing or []}
    conditions: list[HealthCondition] = []
    seen: set[str] = set()
    for raw in names:
        name = raw.strip()
        key = name.casefold()
        if not name or key in seen:
            continue
        seen.add(key)
        conditions.append(known.get(key) or HealthCondition(id=_new_id(), name=name))
    return conditions


class ProfileService:
    """
    Service for the parent profile and its children.

    Usage:
        service = ProfileService(store)
        child = await service.add_child(ChildProfileCreate(name="Ava", ageGroup="0-2"))
        await service.set_active_child(child.id)
    """

    def __init__(self, store: KeyValueStore):
        """
        Initialize profile service.

        Args:
            store: Key-value store holding the profile
        """
        self.store = store

    async def get_profile(self) -> UserProfile:
        """Get the stored profile (an empty default if none exists)."""
        data = await self.store.get(PROFILE_KEY)
        if data is None:
            return UserProfile(name=DEFAULT_PROFILE_NAME)
        return UserProfile.model_validate(data)

    async def update_profile(self, profile: UserProfile) -> UserProfile:
        """Replace the stored profile."""
        await self.store.set(PROFILE_KEY, profile.model_dump(mode="json", by_alias=True))
        return profile

    async def get_child(self, child_id: str) -> ChildProfile:
        """
        Get a child by id.

        Raises:
            NotFoundError: If the child does not exist
        """
        profile = await self.get_profile()
        for child in profile.children:
            if child.id == child_id:
                return child
        raise NotFoundError("Child", child_id)

    async def add_child(self, data: ChildProfileCreate) -> ChildProfile:
        """Add a child to the profile."""
        profile = await self.get_profile()
        child = ChildProfile(
            id=_new_id(),
            name=data.name.strip(),
            age_group=data.age_group,
            health_conditions=build_conditions(data.health_conditions),
            date_of_birth=data.date_of_birth,
        )
        profile.children.append(child)
        await self.update_profile(profile)
        logger.info(f"Added child {child.id}")
        return child

    async def update_child(self, child_id: str, data: ChildProfileCreate) -> ChildProfile:
        """
        Update a child's details.

        Raises:
            NotFoundError: If the child does not exist
        """
        profile = await self.get_profile()
        for index, child in enumerate(profile.children):
            if child.id != child_id:
                continue
            updated = ChildProfile(
                id=child.id,
                name=data.name.strip(),
                age_group=data.age_group,
                health_conditions=build_conditions(
                    data.health_conditions, existing=child.health_conditions
                ),
                date_of_birth=data.date_of_birth,
            )
            profile.children[index] = updated
            await self.update_profile(profile)
            return updated
        raise NotFoundError("Child", child_id)

    async def remove_child(self, child_id: str) -> None:
        """
        Remove a child (and clear it as the active child).

        Raises:
            NotFoundError: If the child does not exist
        """
        profile = await self.get_profile()
        remaining = [c for c in profile.children if c.id != child_id]
        if len(remaining) == len(profile.children):
            raise NotFoundError("Child", child_id)

        profile.children = remaining
        await self.update_profile(profile)

        if await self.store.get(ACTIVE_CHILD_KEY) == child_id:
            await self.store.delete(ACTIVE_CHILD_KEY)

    async def get_active_child(self) -> ChildProfile | None:
        """Get the selected child, or None if none is selected."""
        child_id = await self.store.get(ACTIVE_CHILD_KEY)
        if not child_id:
            return None
        try:
            return await self.get_child(child_id)
        except NotFoundError:
            return None

    async def set_active_child(self, child_id: str | None) -> ChildProfile | None:
        """
        Select the child analyses are personalized for (None clears it).

        Raises:
            NotFoundError: If the child does not exist
        """
        if child_id is None:
            await self.store.delete(ACTIVE_CHILD_KEY)
            return None

        child = await self.get_child(child_id)
        await self.store.set(ACTIVE_CHILD_KEY, child_id)
        return child
