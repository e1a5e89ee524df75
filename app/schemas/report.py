# app/schemas/report.py
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from app.models.enums import IssueCategoryEnum, IssueStatusEnum, PriorityEnum


class ReportCreate(BaseModel):
    category: IssueCategoryEnum
    latitude: float
    longitude: float
    description: Optional[str] = None
    photo_url: Optional[str] = Field(None, max_length=500)
    address: Optional[str] = None


class ReportStatusUpdate(BaseModel):
    status: IssueStatusEnum


class ReportAssign(BaseModel):
    employee_id: str = Field(..., min_length=1)
    priority: Optional[PriorityEnum] = None
    estimated_completion: Optional[datetime] = None


class ReportRead(BaseModel):
    id: str
    report_id: str
    user_id: str
    assigned_to: Optional[str] = None
    category: IssueCategoryEnum
    description: Optional[str] = None
    photo_url: Optional[str] = None
    latitude: float
    longitude: float
    address: Optional[str] = None
    status: IssueStatusEnum
    priority: Optional[str] = None
    estimated_completion: Optional[datetime] = None
    assigned_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class UserReportStats(BaseModel):
    total: int
    pending: int
    in_progress: int
    resolved: int


class SystemReportStats(BaseModel):
    total_reports: int
    pending_reports: int
    in_progress_reports: int
    resolved_reports: int


class CategoryStats(BaseModel):
    drainage: int
    pothole: int
    wire: int
    garbage: int
    street_light: int


class LocationCount(BaseModel):
    lat: float
    lng: float
    count: int


class EmployeePerformanceRead(BaseModel):
    active_reports: int
    resolved_reports: int
    flagged_reports: int
    average_rating: float
    satisfaction_rate: float
