import uuid
from datetime import datetime, timezone
from sqlalchemy import (
    Column, Integer, String, Text, DateTime, ForeignKey, CheckConstraint, Enum as SQLEnum,
)
from sqlalchemy.orm import relationship
from app.db.base import Base

from app.models.enums import SatisfactionLevelEnum, enum_values


class ReportFeedback(Base):
    """Citizen ratings of how a report was handled"""
    __tablename__ = 'report_feedback'
    
    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    report_id = Column(String(36), ForeignKey('reports.id', ondelete='CASCADE'), nullable=False, index=True)
    user_id = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    rating = Column(Integer, nullable=False, comment="1-5 stars")
    satisfaction_level = Column(SQLEnum(SatisfactionLevelEnum, name='satisfaction_level', native_enum=False, length=20, values_callable=enum_values))
    comment = Column(Text)
    service_quality = Column(Integer, comment="1-5")
    response_time = Column(Integer, comment="1-5")
    created_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))
    
    # Relationships
    report = relationship("Report", back_populates="feedback")
    
    # Constraints
    __table_args__ = (
        CheckConstraint('rating BETWEEN 1 AND 5', name='check_feedback_rating'),
        CheckConstraint('service_quality IS NULL OR service_quality BETWEEN 1 AND 5', name='check_feedback_service_quality'),
        CheckConstraint('response_time IS NULL OR response_time BETWEEN 1 AND 5', name='check_feedback_response_time'),
    )
    
    def __repr__(self):
        return f"<ReportFeedback(id={self.id}, report_id={self.report_id}, rating={self.rating})>"
