import uuid
from datetime import datetime, timezone
from sqlalchemy import (
    Column, Integer, String, Float, DateTime, ForeignKey, Index,
)
from app.db.base import Base


class EmployeePerformance(Base):
    """Monthly performance snapshot per authority employee (not computed yet)"""
    __tablename__ = 'employee_performance'
    
    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    employee_id = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    month = Column(Integer, nullable=False)
    year = Column(Integer, nullable=False)
    total_assigned = Column(Integer, default=0)
    total_resolved = Column(Integer, default=0)
    total_pending = Column(Integer, default=0)
    average_rating = Column(Float)
    satisfaction_rate = Column(Float, comment="Percentage of satisfied users")
    average_response_time = Column(Float, comment="Hours")
    created_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
    
    __table_args__ = (
        Index('idx_employee_performance_period', 'employee_id', 'year', 'month'),
    )
    
    def __repr__(self):
        return f"<EmployeePerformance(employee_id={self.employee_id}, {self.year}-{self.month:02d})>"
