from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, get_db
from app.models.user import User
from app.schemas.report import ReportCreate, ReportRead, UserReportStats
from app.services.report_service import ReportService
from app.services.stats_service import StatsService

router = APIRouter()


@router.post("", response_model=ReportRead, status_code=status.HTTP_201_CREATED)
def create_report(
    payload: ReportCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    File a new civic issue report

    The photo must already be stored; only its reference is recorded here.
    """
    return ReportService.create_report(
        db=db,
        user_id=user.id,
        **payload.model_dump(),
    )


@router.get("", response_model=List[ReportRead])
def list_my_reports(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Caller's reports, newest first."""
    return ReportService.list_reports_for_user(db, user.id)


@router.get("/stats", response_model=UserReportStats)
def get_my_stats(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return StatsService.get_user_stats(db, user.id)


@router.get("/{report_id}", response_model=ReportRead)
def get_report(
    report_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return ReportService.get_report_by_id(db, report_id)
