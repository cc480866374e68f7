from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from models.enrollment import EnrollmentSource, EnrollmentStatus


class _ContactFields(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    @field_validator("email", mode="before", check_fields=False)
    @classmethod
    def lower_email(cls, value):
        return value.strip().lower() if isinstance(value, str) else value


class EnrollmentSubmit(_ContactFields):
    """Enrollment request from the public enroll page"""
    studentName: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    phone: str = Field(..., min_length=1, max_length=30)
    whatsappNumber: Optional[str] = Field(None, max_length=30)
    trainingId: str = Field(..., min_length=1)
    notes: Optional[str] = Field(None, max_length=2000)


class EnrollmentCreate(EnrollmentSubmit):
    """Manual enrollment recorded by an admin"""
    source: EnrollmentSource = EnrollmentSource.MANUAL
    adminNotes: Optional[str] = Field(None, max_length=2000)


class EnrollmentUpdate(_ContactFields):
    studentName: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, min_length=1, max_length=30)
    whatsappNumber: Optional[str] = Field(None, max_length=30)
    trainingId: Optional[str] = Field(None, min_length=1)
    source: Optional[EnrollmentSource] = None
    notes: Optional[str] = Field(None, max_length=2000)
    adminNotes: Optional[str] = Field(None, max_length=2000)
    status: Optional[EnrollmentStatus] = None


class EnrollmentAction(BaseModel):
    adminNotes: Optional[str] = None


class EnrollmentFilters(BaseModel):
    status: Optional[EnrollmentStatus] = None
    trainingId: Optional[str] = None
    source: Optional[EnrollmentSource] = None
    search: Optional[str] = None
