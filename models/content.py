from typing import List, Optional
from pydantic import BaseModel, Field


class BlogPostFields(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    excerpt: str = ""
    content: str = ""
    coverImage: Optional[str] = None
    tags: List[str] = []
    author: Optional[str] = None
    isPublished: bool = False
    publishedAt: Optional[str] = None


class BlogPost(BlogPostFields):
    """Blog posts for the marketing site"""
    blogId: str
    slug: str
    createdAt: str
    updatedAt: str


class ProductFields(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    price: float = Field(0, ge=0)
    images: List[str] = []
    category: Optional[str] = None
    isActive: bool = True


class Product(ProductFields):
    """Products listed on the pharmacy pages"""
    productId: str
    slug: str
    createdAt: str
    updatedAt: str
