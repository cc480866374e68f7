from enum import Enum
from typing import Dict, FrozenSet, Optional
from pydantic import BaseModel, EmailStr


class EnrollmentStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    COMPLETED = "completed"


class EnrollmentSource(str, Enum):
    WHATSAPP = "whatsapp"
    SOCIAL_MEDIA = "social_media"
    WEBSITE = "website"
    MANUAL = "manual"
    PHONE = "phone"
    REFERRAL = "referral"


# Allowed status moves; nothing returns to pending and completed is terminal
TRANSITIONS: Dict[EnrollmentStatus, FrozenSet[EnrollmentStatus]] = {
    EnrollmentStatus.PENDING: frozenset({EnrollmentStatus.APPROVED, EnrollmentStatus.REJECTED}),
    EnrollmentStatus.APPROVED: frozenset({EnrollmentStatus.COMPLETED, EnrollmentStatus.REJECTED}),
    EnrollmentStatus.REJECTED: frozenset({EnrollmentStatus.APPROVED}),
    EnrollmentStatus.COMPLETED: frozenset(),
}

# Statuses that occupy a seat in the training
SEAT_HOLDING = frozenset({EnrollmentStatus.APPROVED, EnrollmentStatus.COMPLETED})


class InvalidTransition(ValueError):
    def __init__(self, current: EnrollmentStatus, target: EnrollmentStatus):
        self.current = current
        self.target = target
        if current == target:
            message = f"Enrollment is already {target.value}"
        else:
            message = f"Cannot change enrollment status from {current.value} to {target.value}"
        super().__init__(message)


def can_transition(current: EnrollmentStatus, target: EnrollmentStatus) -> bool:
    return target in TRANSITIONS[current]


def check_transition(current: EnrollmentStatus, target: EnrollmentStatus) -> None:
    if not can_transition(current, target):
        raise InvalidTransition(current, target)


def seat_delta(current: EnrollmentStatus, target: EnrollmentStatus) -> int:
    """Change to the training's currentEnrollments caused by a status move"""
    return int(target in SEAT_HOLDING) - int(current in SEAT_HOLDING)


class Enrollment(BaseModel):
    enrollmentId: str
    studentName: str
    email: EmailStr
    phone: str
    whatsappNumber: Optional[str] = None
    trainingId: str
    status: EnrollmentStatus = EnrollmentStatus.PENDING
    source: EnrollmentSource = EnrollmentSource.MANUAL
    notes: Optional[str] = None
    adminNotes: Optional[str] = None
    enrolledBy: Optional[str] = None
    approvedAt: Optional[str] = None
    completedAt: Optional[str] = None
    createdAt: str
    updatedAt: str
