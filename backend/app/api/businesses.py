from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session
from typing import List

from app.api.deps import get_business_cache
from app.cache import BusinessCache
from app.db.database import get_db
from app.schemas.schemas import (
    BusinessCreate,
    BusinessResponse,
    BusinessStats,
    BusinessUpdate,
    CategoryCreate,
    CategoryResponse,
)
from app.services import business_service
from app.services.business_service import (
    BusinessNotFoundError,
    CategoryNotFoundError,
    DuplicateCategoryError,
    DEFAULT_FEATURED_LIMIT,
    DEFAULT_RANDOM_LIMIT,
)

# Router
router = APIRouter(prefix="/api", tags=["businesses"])


# =========================
# HOMEPAGE LISTINGS (cached)
# =========================
@router.get("/businesses/featured", response_model=List[BusinessResponse])
def featured_businesses(
    limit: int = Query(DEFAULT_FEATURED_LIMIT, ge=1, le=100),
    db: Session = Depends(get_db),
    cache: BusinessCache = Depends(get_business_cache),
):
    return business_service.get_featured_businesses(db, cache, limit)


@router.get("/businesses/random", response_model=List[BusinessResponse])
def random_businesses(
    limit: int = Query(DEFAULT_RANDOM_LIMIT, ge=1, le=100),
    db: Session = Depends(get_db),
    cache: BusinessCache = Depends(get_business_cache),
):
    return business_service.get_random_businesses(db, cache, limit)


@router.get("/businesses/stats", response_model=BusinessStats)
def business_stats(
    db: Session = Depends(get_db),
    cache: BusinessCache = Depends(get_business_cache),
):
    return business_service.get_business_stats(db, cache)


# =========================
# BUSINESS CRUD
# =========================
@router.post("/businesses", response_model=BusinessResponse, status_code=201)
def create_business(
    business: BusinessCreate,
    db: Session = Depends(get_db),
    cache: BusinessCache = Depends(get_business_cache),
):
    try:
        return business_service.create_business(db, cache, business)
    except CategoryNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/businesses/{business_id}", response_model=BusinessResponse)
def get_business(business_id: int, db: Session = Depends(get_db)):
    try:
        return business_service.get_business(db, business_id)
    except BusinessNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.patch("/businesses/{business_id}", response_model=BusinessResponse)
def update_business(
    business_id: int,
    changes: BusinessUpdate,
    db: Session = Depends(get_db),
    cache: BusinessCache = Depends(get_business_cache),
):
    try:
        return business_service.update_business(db, cache, business_id, changes)
    except (BusinessNotFoundError, CategoryNotFoundError) as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/businesses/{business_id}", status_code=204)
def delete_business(
    business_id: int,
    db: Session = Depends(get_db),
    cache: BusinessCache = Depends(get_business_cache),
):
    try:
        business_service.delete_business(db, cache, business_id)
    except BusinessNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)


# =========================
# CATEGORIES
# =========================
@router.get("/categories", response_model=List[CategoryResponse])
def list_categories(
    db: Session = Depends(get_db),
    cache: BusinessCache = Depends(get_business_cache),
):
    return business_service.list_categories(db, cache)


@router.post("/categories", response_model=CategoryResponse, status_code=201)
def create_category(
    category: CategoryCreate,
    db: Session = Depends(get_db),
    cache: BusinessCache = Depends(get_business_cache),
):
    try:
        return business_service.create_category(db, cache, category)
    except DuplicateCategoryError as e:
        raise HTTPException(status_code=409, detail=str(e))
