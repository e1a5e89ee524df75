import enum

class IssueCategoryEnum(str, enum.Enum):
    """Civic issue categories (also used as authority departments)"""
    DRAINAGE = "drainage"
    POTHOLE = "pothole"
    WIRE = "wire"
    GARBAGE = "garbage"
    STREET_LIGHT = "street_light"


class IssueStatusEnum(str, enum.Enum):
    """Report lifecycle status"""
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"
    REJECTED = "rejected"


class EmployeeRoleEnum(str, enum.Enum):
    """Role within the authority organisation"""
    ADMIN = "admin"
    SUPERVISOR = "supervisor"
    FIELD_WORKER = "field_worker"


class UserTypeEnum(str, enum.Enum):
    CITIZEN = "citizen"
    AUTHORITY = "authority"


class PriorityEnum(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class SatisfactionLevelEnum(str, enum.Enum):
    VERY_POOR = "very_poor"
    POOR = "poor"
    AVERAGE = "average"
    GOOD = "good"
    EXCELLENT = "excellent"


def enum_values(enum_cls):
    """Persist enum values (not member names) in SQL enum columns"""
    return [member.value for member in enum_cls]
