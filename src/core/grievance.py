"""Grievance records built from a submission and its analysis"""
from __future__ import annotations

import random
import re
import time
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, FrozenSet, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from src.core.models import Department, SupportedLanguage, Urgency

UserRole = Literal["citizen", "department_admin", "super_admin"]
AdminRole = Literal["department_admin", "super_admin"]
ADMIN_ROLES: FrozenSet[str] = frozenset({"department_admin", "super_admin"})
USER_ROLES: FrozenSet[str] = ADMIN_ROLES | {"citizen"}

TRACKING_ID_DIGITS = 6


class GrievanceStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"
    REJECTED = "rejected"


# resolved and rejected are terminal
STATUS_TRANSITIONS: Dict[GrievanceStatus, FrozenSet[GrievanceStatus]] = {
    GrievanceStatus.PENDING: frozenset({GrievanceStatus.IN_PROGRESS, GrievanceStatus.REJECTED}),
    GrievanceStatus.IN_PROGRESS: frozenset({GrievanceStatus.RESOLVED, GrievanceStatus.REJECTED}),
    GrievanceStatus.RESOLVED: frozenset(),
    GrievanceStatus.REJECTED: frozenset(),
}


def can_transition(current: GrievanceStatus, new: GrievanceStatus) -> bool:
    return GrievanceStatus(new) in STATUS_TRANSITIONS[GrievanceStatus(current)]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def generate_tracking_id(
    prefix: str = "GR",
    now_ms: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Generate a public tracking ID such as 'GR482913'

    The digits are the last four digits of the millisecond timestamp
    followed by two random digits.

    Args:
        prefix: Literal prefix of the ID (default 'GR')
        now_ms: Timestamp in milliseconds, current time when omitted
        rng: Random source, module-level random when omitted

    Returns:
        prefix followed by 6 digits
    """
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    rng = rng or random
    timestamp = str(now_ms)[-4:].rjust(4, "0")
    padding = str(rng.randrange(100)).rjust(2, "0")
    return f"{prefix}{timestamp}{padding}"


def is_valid_tracking_id(value: str, prefix: str = "GR") -> bool:
    """Check that value is prefix followed by exactly 6 digits"""
    pattern = rf"{re.escape(prefix)}[0-9]{{{TRACKING_ID_DIGITS}}}"
    return isinstance(value, str) and re.fullmatch(pattern, value) is not None


class GrievanceSubmission(BaseModel):
    """Form fields of a new grievance"""
    subject: str
    description: str
    category: Optional[str] = None
    state: Optional[str] = None
    district: Optional[str] = None
    address: Optional[str] = None

    @field_validator("subject", "description")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class StatusUpdate(BaseModel):
    status: GrievanceStatus
    updated_by: str
    updated_by_role: AdminRole
    comments: Optional[str] = None
    updated_at: datetime = Field(default_factory=_utcnow)


class Comment(BaseModel):
    user_id: str
    user_role: UserRole
    text: str
    created_at: datetime = Field(default_factory=_utcnow)


class GrievanceRecord(BaseModel):
    """Grievance as handed to the storage layer"""
    tracking_id: str
    user_id: str
    subject: str
    description: str
    category: Optional[str] = None
    state: Optional[str] = None
    district: Optional[str] = None
    address: Optional[str] = None

    original_language: SupportedLanguage
    translated_description: Optional[str] = None

    # Analysis results
    department: Department
    department_code: str
    department_name: str
    tags: List[str] = Field(default_factory=list)
    sentiment_score: Optional[float] = None
    urgency: Urgency = "medium"
    confidence_score: Optional[float] = None
    similar_grievances: List[str] = Field(
        default_factory=list,
        description="IDs of prior complaints detected as similar"
    )
    analysis_error: Optional[str] = Field(
        None,
        description="Summary of analysis stages that fell back to their defaults"
    )

    status: GrievanceStatus = GrievanceStatus.PENDING
    status_history: List[StatusUpdate] = Field(default_factory=list)
    comments: List[Comment] = Field(default_factory=list)

    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)
