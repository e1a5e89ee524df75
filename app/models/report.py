
import uuid
from datetime import datetime, timezone
from sqlalchemy import (
    Column, String, Text, DateTime, Float, ForeignKey, Enum as SQLEnum,
)
from sqlalchemy.orm import relationship
from app.db.base import Base

from app.models.enums import IssueCategoryEnum, IssueStatusEnum, enum_values



class Report(Base):
    """Geotagged civic issue reports filed by citizens"""
    __tablename__ = 'reports'
    
    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    report_id = Column(String(20), nullable=False, unique=True, index=True, comment="Public id, e.g. SW2024004821")
    user_id = Column(String(36), ForeignKey('users.id', ondelete='RESTRICT'), nullable=False, index=True)
    assigned_to = Column(String(36), ForeignKey('users.id', ondelete='RESTRICT'), index=True)
    category = Column(SQLEnum(IssueCategoryEnum, name='issue_category', values_callable=enum_values), nullable=False, index=True)
    description = Column(Text)
    photo_url = Column(String(500), comment="Reference to an externally stored photo")
    latitude = Column(Float(precision=53), nullable=False)
    longitude = Column(Float(precision=53), nullable=False)
    address = Column(Text, comment="Reverse geocoded address")
    status = Column(SQLEnum(IssueStatusEnum, name='issue_status', values_callable=enum_values), nullable=False, default=IssueStatusEnum.PENDING, index=True)
    priority = Column(String(20), default='medium', comment="low|medium|high|urgent")
    estimated_completion = Column(DateTime)
    assigned_at = Column(DateTime)
    created_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc), index=True)
    updated_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
    
    # Relationships
    reporter = relationship("User", foreign_keys=[user_id], back_populates="reports")
    assignee = relationship("Authority", foreign_keys=[assigned_to], back_populates="assigned_reports")
    feedback = relationship("ReportFeedback", back_populates="report")
    
    def __repr__(self):
        return f"<Report(id={self.id}, report_id='{self.report_id}', status='{self.status}')>"
