# app/services/stats_service.py
from typing import Dict, List, Any
from sqlalchemy.orm import Session
from app.models.report import Report
from app.models.enums import IssueCategoryEnum, IssueStatusEnum

# Stand-ins until feedback aggregation exists; not derived from report_feedback
PLACEHOLDER_FLAGGED_REPORTS = 0
PLACEHOLDER_AVERAGE_RATING = 4.2
PLACEHOLDER_SATISFACTION_RATE = 85.5


def _count_status(reports: List[Report], status: IssueStatusEnum) -> int:
    return sum(1 for r in reports if r.status == status)


class StatsService:
    """
    Report counters computed in memory over full table scans.

    Rejected reports count towards totals but have no bucket of their own, so
    pending + in_progress + resolved can be lower than total.
    """

    @staticmethod
    def get_user_stats(db: Session, user_id: str) -> Dict[str, int]:
        """Status breakdown of the reports filed by one user"""
        reports = db.query(Report).filter(Report.user_id == user_id).all()
        
        return {
            "total": len(reports),
            "pending": _count_status(reports, IssueStatusEnum.PENDING),
            "in_progress": _count_status(reports, IssueStatusEnum.IN_PROGRESS),
            "resolved": _count_status(reports, IssueStatusEnum.RESOLVED),
        }
    
    @staticmethod
    def get_system_stats(db: Session) -> Dict[str, int]:
        """Status breakdown over every report"""
        reports = db.query(Report).all()
        
        return {
            "total_reports": len(reports),
            "pending_reports": _count_status(reports, IssueStatusEnum.PENDING),
            "in_progress_reports": _count_status(reports, IssueStatusEnum.IN_PROGRESS),
            "resolved_reports": _count_status(reports, IssueStatusEnum.RESOLVED),
        }
    
    @staticmethod
    def get_stats_by_category(db: Session) -> Dict[str, int]:
        """Report count per category, regardless of status"""
        reports = db.query(Report).all()
        
        return {
            category.value: sum(1 for r in reports if r.category == category)
            for category in IssueCategoryEnum
        }
    
    @staticmethod
    def get_location_density(db: Session) -> List[Dict[str, Any]]:
        """
        Count reports per exact (latitude, longitude) pair.

        Nearby but unequal coordinates stay separate entries; there is no
        proximity clustering.
        """
        reports = db.query(Report).all()
        
        locations: Dict[tuple, Dict[str, Any]] = {}
        for r in reports:
            key = (r.latitude, r.longitude)
            if key in locations:
                locations[key]["count"] += 1
            else:
                locations[key] = {"lat": r.latitude, "lng": r.longitude, "count": 1}
        
        return list(locations.values())
    
    @staticmethod
    def get_employee_performance(db: Session, employee_id: str) -> Dict[str, Any]:
        """Live counts of the employee's assigned reports plus placeholder ratings"""
        assigned = db.query(Report).filter(Report.assigned_to == employee_id).all()
        
        return {
            "active_reports": _count_status(assigned, IssueStatusEnum.IN_PROGRESS),
            "resolved_reports": _count_status(assigned, IssueStatusEnum.RESOLVED),
            "flagged_reports": PLACEHOLDER_FLAGGED_REPORTS,
            "average_rating": PLACEHOLDER_AVERAGE_RATING,
            "satisfaction_rate": PLACEHOLDER_SATISFACTION_RATE,
        }
