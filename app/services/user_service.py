"""
User records: insert-or-replace upserts, authority employees, soft delete.
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional, Union

from sqlalchemy import inspect
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import NotFoundError, PersistenceError
from app.db.session import commit_or_raise
from app.models.enums import UserTypeEnum
from app.models.user import Authority, User
from app.schemas.user import AuthorityUpsert, CitizenUpsert, EmployeeUpsert, UserProfile

logger = logging.getLogger(__name__)

# Dialects with INSERT .. ON CONFLICT DO UPDATE
UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}

AUTHORITY_FIELDS = ("employee_id", "role", "department", "is_active")


class UserService:

    @staticmethod
    def get_user(db: Session, user_id: str) -> Optional[User]:
        return db.get(User, user_id)

    @staticmethod
    def upsert_user(db: Session, payload: Union[CitizenUpsert, AuthorityUpsert]) -> User:
        """
        Insert the user or replace every attribute of the existing row.

        Citizens are written with the authority columns cleared so a demoted
        user keeps no employee attributes.
        """
        dialect = db.get_bind().dialect.name
        insert = UPSERT_INSERTS.get(dialect)
        if insert is None:
            raise PersistenceError(f"Upsert is not supported on '{dialect}'")

        values = payload.model_dump()
        if payload.user_type == UserTypeEnum.CITIZEN.value:
            values.update({field: None for field in AUTHORITY_FIELDS})

        now = datetime.now(timezone.utc)
        table = User.__table__
        stmt = insert(table).values(**values, created_at=now, updated_at=now)
        replaced = {key: stmt.excluded[key] for key in values if key != "id"}
        replaced["updated_at"] = now
        stmt = stmt.on_conflict_do_update(index_elements=[table.c.id], set_=replaced)

        try:
            db.execute(stmt)
        except SQLAlchemyError as e:
            db.rollback()
            logger.exception("❌ Upsert failed for user %s", payload.id)
            raise PersistenceError(f"Storage failure: {e.__class__.__name__}") from e
        commit_or_raise(db)

        # The cached instance may be of the other variant now
        key = inspect(User).identity_key_from_primary_key((payload.id,))
        stale = db.identity_map.get(key)
        if stale is not None:
            db.expunge(stale)

        return db.get(User, payload.id)

    @staticmethod
    def sync_profile(db: Session, user_id: str, profile: UserProfile) -> User:
        """Upsert the caller's own profile, keeping their current variant"""
        existing = db.get(User, user_id)
        fields = profile.model_dump()

        if isinstance(existing, Authority):
            payload = AuthorityUpsert(
                id=user_id,
                employee_id=existing.employee_id,
                role=existing.role,
                department=existing.department,
                is_active=existing.is_active if existing.is_active is not None else True,
                **fields,
            )
        else:
            payload = CitizenUpsert(id=user_id, **fields)

        return UserService.upsert_user(db, payload)

    @staticmethod
    def upsert_employee(db: Session, user_id: str, payload: EmployeeUpsert) -> User:
        return UserService.upsert_user(
            db, AuthorityUpsert(id=user_id, **payload.model_dump())
        )

    @staticmethod
    def list_employees(db: Session) -> List[Authority]:
        return db.query(Authority).order_by(Authority.created_at).all()

    @staticmethod
    def deactivate(db: Session, user_id: str) -> Authority:
        """Soft delete: authority rows are flagged inactive, never removed"""
        user = db.get(User, user_id)
        if not isinstance(user, Authority):
            raise NotFoundError("Employee not found")

        user.is_active = False
        commit_or_raise(db)
        db.refresh(user)
        logger.info("🚫 Employee %s deactivated", user_id)
        return user
