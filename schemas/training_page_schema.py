from typing import List, Optional
from pydantic import BaseModel

from models.training_page_settings import (
    CourseModule,
    CtaSection,
    CustomSection,
    FeaturedCourseSection,
    HeroSection,
    ImpactStat,
    PageTestimonial,
    StandoutSection,
    Template,
)


class TrainingPageSettingsUpdate(BaseModel):
    """Partial update; each section given replaces the stored one"""
    hero: Optional[HeroSection] = None
    featuredCourse: Optional[FeaturedCourseSection] = None
    standout: Optional[StandoutSection] = None
    modules: Optional[List[CourseModule]] = None
    testimonials: Optional[List[PageTestimonial]] = None
    impactStats: Optional[List[ImpactStat]] = None
    cta: Optional[CtaSection] = None
    sections: Optional[List[CustomSection]] = None
    selectedTemplate: Optional[Template] = None
