import uuid
from datetime import datetime, timezone
from sqlalchemy import (
    Column, String, Boolean, DateTime, Enum as SQLEnum,
)
from sqlalchemy.orm import relationship
from app.db.base import Base

from app.models.enums import EmployeeRoleEnum, IssueCategoryEnum, UserTypeEnum, enum_values


class User(Base):
    """Application users; the concrete variant is picked by user_type"""
    __tablename__ = 'users'
    
    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String(255), unique=True, index=True)
    first_name = Column(String(100))
    last_name = Column(String(100))
    profile_image_url = Column(String(500))
    user_type = Column(String(20), nullable=False, index=True, comment="citizen|authority")
    created_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
    
    # Relationships
    reports = relationship("Report", foreign_keys="Report.user_id", back_populates="reporter")
    
    __mapper_args__ = {
        "polymorphic_on": user_type,
    }
    
    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', type='{self.user_type}')>"


class Citizen(User):
    """Residents who file reports"""
    __mapper_args__ = {"polymorphic_identity": UserTypeEnum.CITIZEN.value}


class Authority(User):
    """Municipal staff; the only users carrying employee attributes"""
    employee_id = Column(String(50), unique=True, index=True)
    role = Column(SQLEnum(EmployeeRoleEnum, name='employee_role', values_callable=enum_values))
    department = Column(SQLEnum(IssueCategoryEnum, name='issue_category', values_callable=enum_values))
    is_active = Column(Boolean, default=True, index=True)
    
    assigned_reports = relationship("Report", foreign_keys="Report.assigned_to", back_populates="assignee")
    
    __mapper_args__ = {"polymorphic_identity": UserTypeEnum.AUTHORITY.value}
    
    def __repr__(self):
        return f"<Authority(id={self.id}, employee_id='{self.employee_id}', role='{self.role}')>"
