"""
Report lifecycle: creation, status transitions and authority assignment.

Status transitions are unconditional: any status may move to any other one,
and assignment always (re)opens the report as in_progress.
"""
import logging
from typing import List, Optional, Union
from datetime import datetime, timezone
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.errors import NotFoundError, PersistenceError, ValidationError
from app.db.session import commit_or_raise
from app.models import Report
from app.models.enums import IssueCategoryEnum, IssueStatusEnum, PriorityEnum
from app.services.utils.report_helpers import generate_report_number

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ReportService:

    @staticmethod
    def create_report(
        db: Session,
        user_id: str,
        category: Union[IssueCategoryEnum, str, None],
        latitude: Optional[float],
        longitude: Optional[float],
        description: Optional[str] = None,
        photo_url: Optional[str] = None,
        address: Optional[str] = None,
    ) -> Report:
        """Create a pending, unassigned report with a fresh public id."""
        missing = [
            name for name, value in (
                ("category", category), ("latitude", latitude), ("longitude", longitude)
            )
            if value is None or value == ""
        ]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        try:
            category = IssueCategoryEnum(category)
        except ValueError:
            raise ValidationError(f"Unknown category '{category}'")

        try:
            latitude = float(latitude)
            longitude = float(longitude)
        except (TypeError, ValueError):
            raise ValidationError("latitude and longitude must be numbers")

        report = Report(
            report_id=ReportService._next_report_number(db),
            user_id=user_id,
            category=category,
            description=description or None,
            photo_url=photo_url or None,
            latitude=latitude,
            longitude=longitude,
            address=address or None,
            status=IssueStatusEnum.PENDING,
        )
        db.add(report)
        commit_or_raise(db)
        db.refresh(report)
        logger.info("📝 Report %s created by %s (%s)", report.report_id, user_id, category.value)
        return report

    @staticmethod
    def _next_report_number(db: Session) -> str:
        """Draw public ids until one is not already stored."""
        for _ in range(settings.REPORT_ID_MAX_ATTEMPTS):
            candidate = generate_report_number()
            taken = db.query(Report.id).filter(Report.report_id == candidate).first()
            if not taken:
                return candidate
            logger.warning("⚠️ Public report id %s already taken, drawing again", candidate)
        raise PersistenceError("Could not allocate a unique public report id")

    @staticmethod
    def get_report_by_id(db: Session, report_id: str) -> Report:
        report = db.query(Report).filter(Report.id == report_id).first()
        if not report:
            raise NotFoundError("Report not found")
        return report

    @staticmethod
    def list_reports_for_user(db: Session, user_id: str) -> List[Report]:
        return db.query(Report).filter(
            Report.user_id == user_id
        ).order_by(Report.created_at.desc()).all()

    @staticmethod
    def list_all_reports(db: Session) -> List[Report]:
        return db.query(Report).order_by(Report.created_at.desc()).all()

    @staticmethod
    def update_status(
        db: Session, report_id: str, new_status: Union[IssueStatusEnum, str]
    ) -> Report:
        try:
            new_status = IssueStatusEnum(new_status)
        except ValueError:
            raise ValidationError(f"Unknown status '{new_status}'")

        report = ReportService.get_report_by_id(db, report_id)
        report.status = new_status
        report.updated_at = _utcnow()

        commit_or_raise(db)
        db.refresh(report)
        return report

    @staticmethod
    def assign_report(
        db: Session,
        report_id: str,
        employee_id: str,
        priority: Union[PriorityEnum, str, None] = None,
        estimated_completion: Optional[datetime] = None,
    ) -> Report:
        """
        Assign a report to an employee and force it to in_progress.

        The employee id is stored as given; callers decide whether it must
        reference an active authority user.
        """
        if not employee_id:
            raise ValidationError("employee_id is required")
        if priority is not None:
            try:
                priority = PriorityEnum(priority)
            except ValueError:
                raise ValidationError(f"Unknown priority '{priority}'")

        report = ReportService.get_report_by_id(db, report_id)
        now = _utcnow()
        report.assigned_to = employee_id
        report.assigned_at = now
        report.status = IssueStatusEnum.IN_PROGRESS
        report.updated_at = now
        if priority is not None:
            report.priority = priority.value
        if estimated_completion is not None:
            report.estimated_completion = estimated_completion

        commit_or_raise(db)
        db.refresh(report)
        logger.info("👷 Report %s assigned to %s", report.report_id, employee_id)
        return report
