from .user import User, Citizen, Authority
from .report import Report
from .report_feedback import ReportFeedback
from .employee_performance import EmployeePerformance

__all__ = [
    "User", "Citizen", "Authority", "Report",
    "ReportFeedback", "EmployeePerformance"
]
