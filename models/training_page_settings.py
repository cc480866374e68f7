from typing import List, Literal, Optional
from pydantic import BaseModel, Field

from helpers.dynamodb_helper import new_id

TRAINING_PAGE_SETTINGS_ID = "training-page"

Template = Literal["classic", "modern", "minimal", "bold"]


class Stat(BaseModel):
    value: Optional[str] = None
    label: Optional[str] = None


class IconCard(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    icon: Optional[str] = None


class HeroSection(BaseModel):
    title: str = "Master the Art of Saffron"
    subtitle: str = (
        "From cultivation to quality testing, become an expert in the world's most precious "
        "spice with our comprehensive training programs."
    )
    badge: str = "Saffron Training Academy"
    backgroundImage: str = "/saffron-field.jpg"
    stats: List[Stat] = []


class FeaturedCourseSection(BaseModel):
    isVisible: bool = True
    badge: str = "Featured Course"
    title: str = "3-Day Saffron Cultivation Course"
    subtitle: str = (
        "Crack the code to successfully cultivating the world's most precious spice at the "
        "Institute of Horticulture Technology"
    )
    gains: List[str] = []
    benefits: List[IconCard] = []


class StandoutSection(BaseModel):
    isVisible: bool = True
    title: str = "Why This Course Stands Out"
    description: Optional[str] = None
    additionalText: Optional[str] = None
    highlights: List[IconCard] = []


class CourseModule(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    icon: str = "Leaf"
    topics: List[str] = []


class PageTestimonial(BaseModel):
    name: Optional[str] = None
    role: Optional[str] = None
    rating: int = Field(5, ge=1, le=5)
    text: Optional[str] = None


class ImpactStat(BaseModel):
    value: Optional[str] = None
    label: Optional[str] = None
    icon: str = "Target"


class CtaSection(BaseModel):
    isVisible: bool = True
    title: str = "Corporate & Group Training"
    description: str = (
        "Customized training programs for businesses, agricultural cooperatives, and "
        "educational institutions. Contact us for group discounts."
    )
    buttonText: str = "Contact for Group Training"


class CustomSection(BaseModel):
    """Admin-defined block rendered below the fixed sections"""
    sectionId: str = Field(default_factory=new_id)
    title: Optional[str] = None
    content: Optional[str] = None  # Rich HTML content
    backgroundColor: str = "#ffffff"
    textColor: str = "#000000"
    order: int = 0
    isVisible: bool = True
    template: Template = "classic"


class TrainingPageSettings(BaseModel):
    settingsId: str = TRAINING_PAGE_SETTINGS_ID
    hero: HeroSection = HeroSection()
    featuredCourse: FeaturedCourseSection = FeaturedCourseSection()
    standout: StandoutSection = StandoutSection()
    modules: List[CourseModule] = []
    testimonials: List[PageTestimonial] = []
    impactStats: List[ImpactStat] = []
    cta: CtaSection = CtaSection()
    sections: List[CustomSection] = []
    selectedTemplate: Template = "classic"
    createdAt: Optional[str] = None
    updatedAt: Optional[str] = None


def default_training_page_settings() -> TrainingPageSettings:
    """Fully populated page used to initialize the singleton"""
    return TrainingPageSettings(
        hero=HeroSection(stats=[
            Stat(value="500+", label="Students Trained"),
            Stat(value="50+", label="Workshops Conducted"),
            Stat(value="15+", label="Expert Instructors"),
            Stat(value="98%", label="Success Rate"),
        ]),
        featuredCourse=FeaturedCourseSection(
            gains=[
                "Learn modern methods and techniques for protected farming",
                "Understand the best growing mediums and how to prepare them",
                "Study precise nutrient and water management systems tailored for saffron",
                "Master best practices for saffron growth and strategies for disease prevention",
                "Gain valuable tips on efficient harvesting and processing for maximum quality and profit",
            ],
            benefits=[
                IconCard(
                    title="In-Campus Stay",
                    description="Convenient access to classrooms, labs, and library. Save commute time "
                                "and foster a deeper campus experience with full immersion in learning.",
                    icon="Home",
                ),
                IconCard(
                    title="Practical Training",
                    description="Hands-on sessions demonstrating setup and maintenance of cultivation "
                                "systems, nutrient solutions, and comprehensive plant care techniques.",
                    icon="BookOpen",
                ),
                IconCard(
                    title="Certification",
                    description="Receive recognized credentials upon completion to validate your "
                                "expertise and enhance your professional credibility in saffron cultivation.",
                    icon="Trophy",
                ),
            ],
        ),
        standout=StandoutSection(
            description="Discover the science and success behind saffron cultivation through a program "
                        "backed by our breakthrough achievement of successfully cultivating saffron at "
                        "our state-of-the-art center near Shimla.",
            additionalText="This course offers practical insights rooted in real-world results. You'll "
                           "gain proven techniques, a deeper understanding of saffron's lifecycle, and "
                           "explore its potential for commercial farming.",
            highlights=[
                IconCard(title="Aspiring Entrepreneurs",
                         description="Eye the lucrative saffron market with confidence", icon="Users"),
                IconCard(title="Traditional Farmers",
                         description="Expand and adopt modern cultivation methods", icon="Sprout"),
                IconCard(title="Students & Researchers",
                         description="Passionate about innovative agriculture", icon="GraduationCap"),
            ],
        ),
        modules=[
            CourseModule(title="Protected Farming Methods",
                         description="Learn modern techniques for controlled environment agriculture",
                         icon="Home",
                         topics=["Greenhouse setup", "Climate control", "Light management", "Ventilation systems"]),
            CourseModule(title="Growing Medium Preparation",
                         description="Master the art of preparing optimal soil conditions",
                         icon="Leaf",
                         topics=["Soil composition", "pH management", "Organic amendments", "Drainage systems"]),
            CourseModule(title="Nutrient & Water Management",
                         description="Precise systems tailored specifically for saffron",
                         icon="Droplets",
                         topics=["Fertilization schedules", "Irrigation techniques", "Water quality",
                                 "Nutrient monitoring"]),
            CourseModule(title="Disease Prevention",
                         description="Strategies to protect your saffron crop",
                         icon="Bug",
                         topics=["Common diseases", "Pest control", "Organic solutions", "Preventive measures"]),
            CourseModule(title="Harvesting & Processing",
                         description="Maximize quality and profit with efficient techniques",
                         icon="Scissors",
                         topics=["Optimal harvest timing", "Stigma separation", "Drying methods",
                                 "Quality preservation"]),
            CourseModule(title="Commercial Farming",
                         description="Turn your knowledge into a profitable venture",
                         icon="TrendingUp",
                         topics=["Market analysis", "Pricing strategies", "Scaling operations",
                                 "Export opportunities"]),
        ],
        testimonials=[
            PageTestimonial(name="Rajesh Kumar", role="Saffron Farmer, Kashmir",
                            text="The training program transformed my farming approach. I've increased my "
                                 "yield by 40% and the quality has improved significantly."),
            PageTestimonial(name="Priya Sharma", role="Agricultural Entrepreneur",
                            text="As someone new to saffron cultivation, this course gave me the confidence "
                                 "to start my own farm. The instructors are knowledgeable."),
            PageTestimonial(name="Dr. Amit Patel", role="Horticulture Researcher",
                            text="The scientific approach and modern techniques taught here are "
                                 "cutting-edge. This is the most comprehensive saffron cultivation program."),
        ],
        impactStats=[
            ImpactStat(value="95%", label="Student Success Rate", icon="Target"),
            ImpactStat(value="40%", label="Average Yield Increase", icon="TrendingUp"),
            ImpactStat(value="500+", label="Farmers Trained", icon="Users"),
            ImpactStat(value="15+", label="Years of Expertise", icon="Award"),
        ],
        cta=CtaSection(),
        sections=[],
        selectedTemplate="classic",
    )
