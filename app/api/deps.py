from typing import Generator, Optional

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from app.db.session import SessionLocal
from app.models.user import Authority, User
from app.services.access_policy import require_authority
from app.services.assistant_service import AssistantService
from app.services.user_service import UserService


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_caller_id(x_user_id: Optional[str] = Header(None)) -> str:
    """Caller id resolved by the upstream authentication proxy"""
    if not x_user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return x_user_id


def get_current_user(
    caller_id: str = Depends(get_caller_id),
    db: Session = Depends(get_db),
) -> User:
    user = UserService.get_user(db, caller_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unknown user")
    return user


def get_authority_user(
    caller_id: str = Depends(get_caller_id),
    db: Session = Depends(get_db),
) -> Authority:
    return require_authority(db, caller_id)


def get_assistant_service() -> AssistantService:
    return AssistantService()
