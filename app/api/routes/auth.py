from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_caller_id, get_current_user, get_db
from app.models.user import User
from app.schemas.user import UserProfile, UserRead
from app.services.user_service import UserService

router = APIRouter()


@router.get("/user", response_model=UserRead)
def get_auth_user(user: User = Depends(get_current_user)) -> User:
    """Current caller's user record."""
    return user


@router.put("/user", response_model=UserRead)
def sync_auth_user(
    profile: UserProfile,
    caller_id: str = Depends(get_caller_id),
    db: Session = Depends(get_db),
) -> User:
    """
    Create or refresh the caller's profile after login.

    New callers are stored as citizens; existing authority users keep their
    employee attributes.
    """
    return UserService.sync_profile(db, caller_id, profile)
