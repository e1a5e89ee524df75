from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

from app.models.enums import EmployeeRoleEnum, IssueCategoryEnum


class UserProfile(BaseModel):
    email: Optional[str] = Field(None, max_length=255)
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    profile_image_url: Optional[str] = Field(None, max_length=500)


class AuthorityFields(BaseModel):
    employee_id: Optional[str] = Field(None, max_length=50)
    role: Optional[EmployeeRoleEnum] = None
    department: Optional[IssueCategoryEnum] = None
    is_active: bool = True


class CitizenUpsert(UserProfile):
    id: str = Field(..., min_length=1, max_length=36)
    user_type: Literal["citizen"] = "citizen"


class AuthorityUpsert(UserProfile, AuthorityFields):
    id: str = Field(..., min_length=1, max_length=36)
    user_type: Literal["authority"] = "authority"



class EmployeeUpsert(UserProfile, AuthorityFields):
    """Body of PUT /authority/employees/{user_id}; the id comes from the path"""
    pass


class UserRead(UserProfile):
    id: str
    user_type: str
    created_at: datetime
    updated_at: datetime
    # Authority only
    employee_id: Optional[str] = None
    role: Optional[EmployeeRoleEnum] = None
    department: Optional[IssueCategoryEnum] = None
    is_active: Optional[bool] = None

    class Config:
        from_attributes = True
