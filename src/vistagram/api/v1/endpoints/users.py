# src/vistagram/api/v1/endpoints/users.py
"""Profile endpoints for the signed-in user."""

from fastapi import APIRouter, HTTPException, status

from vistagram.api.v1.dependencies import CurrentUserDep, SessionDep
from vistagram.schemas.user import ProfileUpdateRequest, ProfileUpdateResponse, UserResponse
from vistagram.services.users import update_profile

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserResponse)
async def get_my_profile(current_user: CurrentUserDep) -> UserResponse:
    """Return the signed-in user's profile."""
    return UserResponse.model_validate(current_user)


@router.post("/me/profile", response_model=ProfileUpdateResponse)
async def update_my_profile(
    body: ProfileUpdateRequest,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> ProfileUpdateResponse:
    """Update name, avatar and bio for the signed-in user."""
    try:
        user = update_profile(
            db,
            current_user,
            name=body.name,
            image=body.image,
            bio=body.bio,
        )
    except ValueError as err:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err)) from err
    return ProfileUpdateResponse(user=UserResponse.model_validate(user))
