import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ["OPENAI_API_KEY"] = ""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401  registers every table on Base.metadata
from app.api.deps import get_db
from app.db.base import Base
from app.main import app as fastapi_app
from app.models.enums import EmployeeRoleEnum, IssueCategoryEnum
from app.schemas.user import AuthorityUpsert, CitizenUpsert
from app.services.report_service import ReportService
from app.services.user_service import UserService

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture
def db():
    Base.metadata.create_all(engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(engine)


@pytest.fixture
def client(db):
    def override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    fastapi_app.dependency_overrides[get_db] = override_get_db
    with TestClient(fastapi_app) as test_client:
        yield test_client
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def citizen(db):
    return UserService.upsert_user(
        db, CitizenUpsert(id="citizen-1", email="asha@example.org", first_name="Asha")
    )


@pytest.fixture
def other_citizen(db):
    return UserService.upsert_user(
        db, CitizenUpsert(id="citizen-2", email="ravi@example.org", first_name="Ravi")
    )


@pytest.fixture
def authority(db):
    return UserService.upsert_user(
        db,
        AuthorityUpsert(
            id="officer-1",
            email="officer@municipal.example.org",
            employee_id="EMP-001",
            role=EmployeeRoleEnum.SUPERVISOR,
            department=IssueCategoryEnum.POTHOLE,
        ),
    )


@pytest.fixture
def make_report(db):
    def _make(user, category="pothole", latitude=28.6, longitude=77.2, **kwargs):
        return ReportService.create_report(
            db,
            user_id=user.id,
            category=category,
            latitude=latitude,
            longitude=longitude,
            **kwargs,
        )
    return _make
