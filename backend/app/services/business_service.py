"""
Business listing service.

Read paths for the homepage (featured and random listings, categories and
directory stats) go through the business cache first and only hit the
database on a miss. Every write to businesses invalidates the cached
listings so the next read is rebuilt from the database.
"""
from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from app.cache import BusinessCache, business_stats_key, categories_key
from app.models.models import Business, Category
from app.schemas.schemas import (
    BusinessCreate,
    BusinessResponse,
    BusinessUpdate,
    CategoryCreate,
    CategoryResponse,
)

logger = logging.getLogger(__name__)

DEFAULT_FEATURED_LIMIT = 6
DEFAULT_RANDOM_LIMIT = 9


class BusinessNotFoundError(LookupError):
    pass


class CategoryNotFoundError(LookupError):
    pass


class DuplicateCategoryError(ValueError):
    pass


def slugify(value: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", value.lower()).strip("-")
    return slug or "business"


def _unique_slug(db: Session, model, base: str, exclude_id: Optional[int] = None) -> str:
    slug = base
    suffix = 2
    while True:
        query = db.query(model.id).filter(model.slug == slug)
        if exclude_id is not None:
            query = query.filter(model.id != exclude_id)
        if query.first() is None:
            return slug
        slug = f"{base}-{suffix}"
        suffix += 1


def _serialize(businesses: List[Business]) -> List[Dict[str, Any]]:
    # Cached as plain dicts so entries outlive the session that loaded them
    return [BusinessResponse.model_validate(b).model_dump(mode="json") for b in businesses]


def _invalidate_after_write(cache: BusinessCache) -> None:
    removed = cache.invalidate_business_caches()
    cache.delete(business_stats_key())
    logger.info(f"Business write invalidated {removed} cached listings")


# =========================
# CACHED READS
# =========================
def get_featured_businesses(
    db: Session, cache: BusinessCache, limit: int = DEFAULT_FEATURED_LIMIT
) -> List[Dict[str, Any]]:
    """Active featured businesses, best rated first."""
    cached = cache.get_featured_businesses(limit)
    if cached is not None:
        return cached

    rows = (
        db.query(Business)
        .options(joinedload(Business.category))
        .filter(Business.active.is_(True), Business.featured.is_(True))
        .order_by(Business.average_rating.desc(), Business.id)
        .limit(limit)
        .all()
    )
    businesses = _serialize(rows)
    cache.set_featured_businesses(businesses, limit)
    return businesses


def get_random_businesses(
    db: Session, cache: BusinessCache, limit: int = DEFAULT_RANDOM_LIMIT
) -> List[Dict[str, Any]]:
    """A random sample of active businesses, held for the random-listing TTL."""
    cached = cache.get_random_businesses(limit)
    if cached is not None:
        return cached

    rows = (
        db.query(Business)
        .options(joinedload(Business.category))
        .filter(Business.active.is_(True))
        .order_by(func.random())
        .limit(limit)
        .all()
    )
    businesses = _serialize(rows)
    cache.set_random_businesses(businesses, limit)
    return businesses


def list_categories(db: Session, cache: BusinessCache) -> List[Dict[str, Any]]:
    cached = cache.get_categories()
    if cached is not None:
        return cached

    rows = db.query(Category).order_by(Category.name).all()
    categories = [CategoryResponse.model_validate(c).model_dump(mode="json") for c in rows]
    cache.set_categories(categories)
    return categories


def get_business_stats(db: Session, cache: BusinessCache) -> Dict[str, Any]:
    """Directory-wide counts for the admin dashboard."""
    cached = cache.get_business_stats()
    if cached is not None:
        return cached

    by_city = dict(
        db.query(Business.city, func.count(Business.id))
        .filter(Business.active.is_(True))
        .group_by(Business.city)
        .all()
    )
    stats = {
        "total_businesses": db.query(Business).count(),
        "active_businesses": db.query(Business).filter(Business.active.is_(True)).count(),
        "featured_businesses": db.query(Business).filter(Business.featured.is_(True)).count(),
        "verified_businesses": db.query(Business).filter(Business.verified.is_(True)).count(),
        "total_categories": db.query(Category).count(),
        "businesses_by_city": by_city,
    }
    cache.set_business_stats(stats)
    return stats


# =========================
# WRITES
# =========================
def create_category(db: Session, cache: BusinessCache, payload: CategoryCreate) -> Category:
    if db.query(Category.id).filter(Category.name == payload.name).first() is not None:
        raise DuplicateCategoryError(f"Category '{payload.name}' already exists")

    data = payload.model_dump()
    data["slug"] = _unique_slug(db, Category, slugify(payload.slug or payload.name))

    category = Category(**data)
    db.add(category)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise DuplicateCategoryError(f"Category '{payload.name}' already exists") from e
    db.refresh(category)

    cache.delete(categories_key())
    cache.delete(business_stats_key())
    return category


def _require_category(db: Session, category_id: int) -> None:
    if db.query(Category.id).filter(Category.id == category_id).first() is None:
        raise CategoryNotFoundError(f"Category {category_id} not found")


def get_business(db: Session, business_id: int) -> Business:
    business = (
        db.query(Business)
        .options(joinedload(Business.category))
        .filter(Business.id == business_id)
        .first()
    )
    if business is None:
        raise BusinessNotFoundError(f"Business {business_id} not found")
    return business


def create_business(db: Session, cache: BusinessCache, payload: BusinessCreate) -> Business:
    _require_category(db, payload.category_id)

    data = payload.model_dump()
    data["slug"] = _unique_slug(db, Business, slugify(payload.slug or payload.name))

    business = Business(**data)
    db.add(business)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise

    _invalidate_after_write(cache)
    return get_business(db, business.id)


def update_business(
    db: Session, cache: BusinessCache, business_id: int, payload: BusinessUpdate
) -> Business:
    business = get_business(db, business_id)
    changes = payload.model_dump(exclude_unset=True)

    if "category_id" in changes:
        _require_category(db, changes["category_id"])
    if "name" in changes:
        business.slug = _unique_slug(db, Business, slugify(changes["name"]), exclude_id=business.id)

    for field, value in changes.items():
        setattr(business, field, value)

    try:
        db.commit()
    except Exception:
        db.rollback()
        raise

    _invalidate_after_write(cache)
    return get_business(db, business.id)


def delete_business(db: Session, cache: BusinessCache, business_id: int) -> None:
    business = get_business(db, business_id)
    db.delete(business)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise

    _invalidate_after_write(cache)
