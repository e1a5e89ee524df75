from sqlalchemy.orm import Session

from app.core.errors import ForbiddenError
from app.models.user import Authority, User


def require_authority(db: Session, caller_id: str) -> Authority:
    """
    Load the caller and allow only authority users.

    Only the user type is checked; other attributes (including is_active) do
    not grant or deny access.
    """
    user = db.get(User, caller_id) if caller_id else None
    if not isinstance(user, Authority):
        raise ForbiddenError("Forbidden: Authority access required")
    return user
