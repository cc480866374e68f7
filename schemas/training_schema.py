from typing import List, Optional
from pydantic import BaseModel, Field

from models.training import (
    CurriculumItem,
    FaqItem,
    PracticalExposure,
    TrainingCategory,
    TrainingFields,
    TrainingLevel,
    TrainingMode,
    TrainingTestimonial,
)


class TrainingCreate(TrainingFields):
    pass


class TrainingUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = None
    aboutProgram: Optional[str] = None
    level: Optional[TrainingLevel] = None
    category: Optional[TrainingCategory] = None
    mode: Optional[TrainingMode] = None
    language: Optional[str] = None
    duration: Optional[str] = Field(None, min_length=1)
    price: Optional[float] = Field(None, ge=0)
    originalPrice: Optional[float] = None
    features: Optional[List[str]] = None
    coverImage: Optional[str] = None
    maxParticipants: Optional[int] = Field(None, ge=0)
    startDate: Optional[str] = None
    endDate: Optional[str] = None
    instructor: Optional[str] = None
    instructorBio: Optional[str] = None
    instructorImage: Optional[str] = None
    instructorDesignation: Optional[str] = None
    location: Optional[str] = None
    topics: Optional[List[str]] = None
    icon: Optional[str] = None
    popular: Optional[bool] = None
    isActive: Optional[bool] = None
    isPublished: Optional[bool] = None
    curriculum: Optional[List[CurriculumItem]] = None
    rating: Optional[float] = None
    totalReviews: Optional[int] = None
    certificationTitle: Optional[str] = None
    certificationDescription: Optional[str] = None
    certificationImage: Optional[str] = None
    faq: Optional[List[FaqItem]] = None
    testimonials: Optional[List[TrainingTestimonial]] = None
    practicalExposure: Optional[PracticalExposure] = None
    brochureUrl: Optional[str] = None
    facilityVideoUrl: Optional[str] = None
