import random
from datetime import datetime
from typing import Optional

REPORT_NUMBER_PREFIX = "SW"
REPORT_NUMBER_PATTERN = r"^SW\d{4}\d{6}$"


def generate_report_number(now: Optional[datetime] = None) -> str:
    """Public report id: SW + year + 6-digit zero-padded random draw (e.g. SW2024004821)"""
    year = (now or datetime.now()).year
    return f"{REPORT_NUMBER_PREFIX}{year}{random.randrange(999999):06d}"
