"""Profile API routes."""

from fastapi import APIRouter, Depends

from api.dependencies.auth import CurrentUser
from api.dependencies.services import get_profile_service
from api.schemas.common import MessageResponse
from api.schemas.profile import (
    EducationCreate,
    ExperienceCreate,
    ProfileRequest,
    ProfileResponse,
)
from domain.entities.profile import Profile, ProfileWithOwner
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/profile", tags=["profile"])


def _owned(profile: Profile) -> ProfileResponse:
    return ProfileResponse.from_entity(ProfileWithOwner(profile=profile, owner=None))


@router.get(
    "/me",
    response_model=ProfileResponse,
    summary="Get my profile",
    responses={404: {"description": "The caller has no profile yet"}},
)
async def get_my_profile(
    user: CurrentUser,
    profile_service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    item = await profile_service.get_mine(user)
    return ProfileResponse.from_entity(item)


@router.post(
    "",
    response_model=ProfileResponse,
    summary="Create or update my profile",
)
async def upsert_profile(
    data: ProfileRequest,
    user: CurrentUser,
    profile_service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """
    Create the caller's profile, or merge the submitted fields into it.

    Blank fields leave the stored values untouched; social links are merged
    network by network.
    """
    profile = await profile_service.upsert(user, data.to_input())
    return _owned(profile)


@router.get(
    "",
    response_model=list[ProfileResponse],
    summary="List all profiles",
)
async def list_profiles(
    profile_service: ProfileService = Depends(get_profile_service),
) -> list[ProfileResponse]:
    items = await profile_service.list_all()
    return [ProfileResponse.from_entity(item) for item in items]


@router.get(
    "/user/{user_id}",
    response_model=ProfileResponse,
    summary="Get a user's profile",
    responses={404: {"description": "Profile not found"}},
)
async def get_profile_by_user(
    user_id: str,
    profile_service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    item = await profile_service.get_by_user(user_id)
    return ProfileResponse.from_entity(item)


@router.delete(
    "",
    response_model=MessageResponse,
    summary="Delete my account",
)
async def delete_account(
    user: CurrentUser,
    profile_service: ProfileService = Depends(get_profile_service),
) -> MessageResponse:
    """Delete the caller's posts, profile and user record."""
    await profile_service.delete_account(user)
    return MessageResponse(msg="User deleted")


@router.put(
    "/experience",
    response_model=ProfileResponse,
    summary="Add experience",
    responses={404: {"description": "The caller has no profile yet"}},
)
async def add_experience(
    data: ExperienceCreate,
    user: CurrentUser,
    profile_service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    profile = await profile_service.add_experience(user, data.to_entity())
    return _owned(profile)


@router.delete(
    "/experience/{exp_id}",
    response_model=ProfileResponse,
    summary="Remove experience",
    responses={404: {"description": "Profile or experience entry not found"}},
)
async def remove_experience(
    exp_id: str,
    user: CurrentUser,
    profile_service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    profile = await profile_service.remove_experience(user, exp_id)
    return _owned(profile)


@router.put(
    "/education",
    response_model=ProfileResponse,
    summary="Add education",
    responses={404: {"description": "The caller has no profile yet"}},
)
async def add_education(
    data: EducationCreate,
    user: CurrentUser,
    profile_service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    profile = await profile_service.add_education(user, data.to_entity())
    return _owned(profile)


@router.delete(
    "/education/{edu_id}",
    response_model=ProfileResponse,
    summary="Remove education",
    responses={404: {"description": "Profile or education entry not found"}},
)
async def remove_education(
    edu_id: str,
    user: CurrentUser,
    profile_service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    profile = await profile_service.remove_education(user, edu_id)
    return _owned(profile)
