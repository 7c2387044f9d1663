from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import Optional, List, Dict


# =========================
# CATEGORY SCHEMAS
# =========================
class CategoryBase(BaseModel):
    name: str
    slug: Optional[str] = None
    description: Optional[str] = None
    icon: str = "store"
    color: str = "#3b82f6"


class CategoryCreate(CategoryBase):
    pass


class CategoryResponse(CategoryBase):
    id: int
    slug: str
    created_at: datetime

    model_config = {"from_attributes": True}


# =========================
# BUSINESS SCHEMAS
# =========================
class BusinessBase(BaseModel):
    category_id: int
    name: str
    description: str = ""
    address: str = ""
    city: str
    state: str = ""
    zip_code: str = ""
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    featured: bool = False
    verified: bool = False
    active: bool = True


class BusinessCreate(BusinessBase):
    slug: Optional[str] = None


class BusinessUpdate(BaseModel):
    category_id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    featured: Optional[bool] = None
    verified: Optional[bool] = None
    active: Optional[bool] = None
    average_rating: Optional[float] = Field(default=None, ge=0, le=5)
    total_reviews: Optional[int] = Field(default=None, ge=0)

    # Omitting a field leaves it unchanged; an explicit null is only valid for the contact columns
    @field_validator(
        "category_id", "name", "description", "address", "city", "state", "zip_code",
        "featured", "verified", "active", "average_rating", "total_reviews",
    )
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value


class BusinessResponse(BusinessBase):
    id: int
    slug: str
    average_rating: float = 0.0
    total_reviews: int = 0
    created_at: datetime
    updated_at: datetime
    category: Optional[CategoryResponse] = None

    model_config = {"from_attributes": True}


# =========================
# STATS SCHEMAS
# =========================
class BusinessStats(BaseModel):
    total_businesses: int
    active_businesses: int
    featured_businesses: int
    verified_businesses: int
    total_categories: int
    businesses_by_city: Dict[str, int]


class CacheStats(BaseModel):
    size: int
    default_ttl_seconds: float
    hits: int
    misses: int
    expired: int
    keys: List[str]
    sweeper_running: bool


class CacheInvalidationResult(BaseModel):
    removed: int
