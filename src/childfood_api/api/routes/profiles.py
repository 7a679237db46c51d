"""Parent and child profile API routes."""

from fastapi import APIRouter, status

from childfood_api.api.dependencies import ProfileServiceDep
from childfood_api.models.profile import (
    ActiveChild,
    ChildProfile,
    ChildProfileCreate,
    UserProfile,
)

router = APIRouter()


@router.get("", response_model=UserProfile)
async def get_profile(service: ProfileServiceDep):
    """Get the parent profile with all children."""
    return await service.get_profile()


@router.put("", response_model=UserProfile)
async def update_profile(profile: UserProfile, service: ProfileServiceDep):
    """Replace the parent profile."""
    return await service.update_profile(profile)


@router.post(
    "/children",
    response_model=ChildProfile,
    status_code=status.HTTP_201_CREATED,
)
async def add_child(child: ChildProfileCreate, service: ProfileServiceDep):
    """
    Add a child.

    - **name**: Child's name
    - **ageGroup**: "0-2", "3-6" or "7-10"
    - **healthConditions**: Condition names (duplicates ignored)
    """
    return await service.add_child(child)


@router.put("/children/{child_id}", response_model=ChildProfile)
async def update_child(
    child_id: str,
    child: ChildProfileCreate,
    service: ProfileServiceDep,
):
    """Update a child's details."""
    return await service.update_child(child_id, child)


@router.delete("/children/{child_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_child(child_id: str, service: ProfileServiceDep):
    """Remove a child."""
    await service.remove_child(child_id)


@router.get("/active-child", response_model=ChildProfile | None)
async def get_active_child(service: ProfileServiceDep):
    """Get the child analyses are currently personalized for."""
    return await service.get_active_child()


@router.put("/active-child", response_model=ChildProfile | None)
async def set_active_child(selection: ActiveChild, service: ProfileServiceDep):
    """Select a child (or clear the selection with `childId: null`)."""
    return await service.set_active_child(selection.child_id)
