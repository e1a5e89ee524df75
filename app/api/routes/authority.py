# app/api/routes/authority.py
import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_authority_user, get_db
from app.models.user import Authority
from app.schemas.report import (
    CategoryStats,
    EmployeePerformanceRead,
    LocationCount,
    ReportAssign,
    ReportRead,
    ReportStatusUpdate,
    SystemReportStats,
)
from app.schemas.user import EmployeeUpsert, UserRead
from app.services.report_service import ReportService
from app.services.stats_service import StatsService
from app.services.user_service import UserService

logger = logging.getLogger(__name__)

# Every route here requires an authority caller
router = APIRouter(dependencies=[Depends(get_authority_user)])


# ─────────────────────────────────────────────────────────────────────────────
# REPORTS
# ─────────────────────────────────────────────────────────────────────────────

@router.get("/reports", response_model=List[ReportRead])
def list_all_reports(db: Session = Depends(get_db)):
    """All reports, newest first (no pagination)."""
    return ReportService.list_all_reports(db)


@router.patch("/reports/{report_id}/status", response_model=ReportRead)
def update_report_status(
    report_id: str,
    payload: ReportStatusUpdate,
    caller: Authority = Depends(get_authority_user),
    db: Session = Depends(get_db),
):
    """Move a report to any status; there are no transition guards."""
    report = ReportService.update_status(db, report_id, payload.status)
    logger.info("🔄 %s set report %s to %s", caller.id, report.report_id, report.status.value)
    return report


@router.post("/reports/{report_id}/assign", response_model=ReportRead)
def assign_report(
    report_id: str,
    payload: ReportAssign,
    db: Session = Depends(get_db),
):
    """Assign a report to an employee; the report becomes in_progress."""
    return ReportService.assign_report(
        db,
        report_id,
        payload.employee_id,
        priority=payload.priority,
        estimated_completion=payload.estimated_completion,
    )


# ─────────────────────────────────────────────────────────────────────────────
# STATS
# ─────────────────────────────────────────────────────────────────────────────

@router.get("/stats", response_model=SystemReportStats)
def get_system_stats(db: Session = Depends(get_db)):
    return StatsService.get_system_stats(db)


@router.get("/stats/categories", response_model=CategoryStats)
def get_stats_by_category(db: Session = Depends(get_db)):
    return StatsService.get_stats_by_category(db)


@router.get("/stats/locations", response_model=List[LocationCount])
def get_location_density(db: Session = Depends(get_db)):
    """Report counts per exact coordinate pair, for the heat map."""
    return StatsService.get_location_density(db)


# ─────────────────────────────────────────────────────────────────────────────
# EMPLOYEES
# ─────────────────────────────────────────────────────────────────────────────

@router.get("/employees", response_model=List[UserRead])
def list_employees(db: Session = Depends(get_db)):
    return UserService.list_employees(db)


@router.put("/employees/{user_id}", response_model=UserRead)
def upsert_employee(
    user_id: str,
    payload: EmployeeUpsert,
    db: Session = Depends(get_db),
):
    """Create an employee or replace their record (promotes citizens)."""
    return UserService.upsert_employee(db, user_id, payload)


@router.delete("/employees/{user_id}", response_model=UserRead)
def deactivate_employee(user_id: str, db: Session = Depends(get_db)):
    """Soft delete: the employee is flagged inactive, the row is kept."""
    return UserService.deactivate(db, user_id)


@router.get("/employees/{employee_id}/performance", response_model=EmployeePerformanceRead)
def get_employee_performance(employee_id: str, db: Session = Depends(get_db)):
    return StatsService.get_employee_performance(db, employee_id)
