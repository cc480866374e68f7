from typing import List, Literal, Optional
from pydantic import BaseModel, Field

TrainingLevel = Literal["Beginner", "Intermediate", "Advanced", "Professional"]
TrainingCategory = Literal[
    "Saffron Cultivation", "Advanced Techniques", "Business & Marketing", "R&D", "Custom"
]
TrainingMode = Literal["Offline", "Online", "Hybrid"]


class CurriculumItem(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    duration: Optional[str] = None
    topics: List[str] = []


class FaqItem(BaseModel):
    question: Optional[str] = None
    answer: Optional[str] = None


class TrainingTestimonial(BaseModel):
    name: Optional[str] = None
    city: Optional[str] = None
    image: Optional[str] = None
    review: Optional[str] = None
    rating: int = 5


class PracticalExposure(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    points: List[str] = []
    images: List[str] = []


class TrainingFields(BaseModel):
    """Editable training fields shared by the stored document and payloads"""
    title: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1)
    content: Optional[str] = None
    aboutProgram: Optional[str] = None
    level: TrainingLevel = "Beginner"
    category: TrainingCategory = "Saffron Cultivation"
    mode: TrainingMode = "Offline"
    language: str = "Hindi & English"
    duration: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    originalPrice: Optional[float] = None
    features: List[str] = []
    coverImage: str = "no-photo.jpg"
    maxParticipants: Optional[int] = Field(None, ge=0)
    startDate: Optional[str] = None
    endDate: Optional[str] = None
    instructor: Optional[str] = None
    instructorBio: Optional[str] = None
    instructorImage: Optional[str] = None
    instructorDesignation: Optional[str] = None
    location: Optional[str] = None
    topics: List[str] = []
    icon: str = "Sprout"
    popular: bool = False
    isActive: bool = True
    isPublished: bool = False
    curriculum: List[CurriculumItem] = []
    rating: float = 0
    totalReviews: int = 0
    certificationTitle: Optional[str] = None
    certificationDescription: Optional[str] = None
    certificationImage: Optional[str] = None
    faq: List[FaqItem] = []
    testimonials: List[TrainingTestimonial] = []
    practicalExposure: Optional[PracticalExposure] = None
    brochureUrl: Optional[str] = None
    facilityVideoUrl: Optional[str] = None


class Training(TrainingFields):
    trainingId: str
    slug: str
    currentEnrollments: int = 0
    createdAt: str
    updatedAt: str

    @property
    def is_full(self) -> bool:
        return bool(self.maxParticipants) and self.currentEnrollments >= self.maxParticipants

    @property
    def is_available(self) -> bool:
        return self.isActive and self.isPublished
