from typing import List, Optional
from pydantic import BaseModel, Field

from models.content import BlogPostFields, ProductFields


class BlogPostCreate(BlogPostFields):
    pass


class BlogPostUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    excerpt: Optional[str] = None
    content: Optional[str] = None
    coverImage: Optional[str] = None
    tags: Optional[List[str]] = None
    author: Optional[str] = None
    isPublished: Optional[bool] = None
    publishedAt: Optional[str] = None


class ProductCreate(ProductFields):
    pass


class ProductUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    images: Optional[List[str]] = None
    category: Optional[str] = None
    isActive: Optional[bool] = None
