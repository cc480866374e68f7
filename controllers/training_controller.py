from fastapi import APIRouter, Depends, Query
from typing import Optional

from config.app_config import MAX_PAGE_LIMIT
from helpers import content_helper, enrollment_helper, training_helper
from helpers.dynamodb_helper import paginate
from middleware.auth_middleware import get_current_admin
from models.training import TrainingCategory, TrainingLevel, TrainingMode
from schemas.training_schema import TrainingCreate, TrainingUpdate

# Public routes, mounted at /api/trainings
router = APIRouter()

# Admin routes, mounted at /api/admin/trainings
admin_router = APIRouter(dependencies=[Depends(get_current_admin)])


@router.get("")
def list_trainings(
    category: Optional[TrainingCategory] = None,
    mode: Optional[TrainingMode] = None,
    level: Optional[TrainingLevel] = None,
):
    """Active and published trainings, cheapest first"""
    trainings = training_helper.list_published(category, mode, level)
    return {"success": True, "count": len(trainings), "data": trainings}


@router.get("/id/{training_id}")
def get_training_by_id(training_id: str):
    return {"success": True, "data": training_helper.get_published(training_id=training_id)}


@router.get("/{slug}")
def get_training_by_slug(slug: str):
    return {"success": True, "data": training_helper.get_published(slug=slug)}


@admin_router.get("/stats")
def training_stats():
    trainings = content_helper.list_all("training")
    counts = enrollment_helper.status_counts()
    return {
        "success": True,
        "data": {
            "totalTrainings": len(trainings),
            "activeTrainings": sum(1 for t in trainings if t.get("isActive")),
            "totalEnrollments": counts["total"],
            "pendingEnrollments": counts["pending"],
        }
    }


@admin_router.get("")
def list_all_trainings(
    category: Optional[TrainingCategory] = None,
    mode: Optional[TrainingMode] = None,
    level: Optional[TrainingLevel] = None,
    isPublished: Optional[bool] = None,
    search: Optional[str] = None,
    page: int = Query(1, ge=1),
    limit: int = Query(50, ge=1, le=MAX_PAGE_LIMIT),
):
    """All trainings including drafts, newest first"""
    trainings = training_helper.list_for_admin(category, mode, level, isPublished, search)
    page_items, pagination = paginate(trainings, page, limit)
    return {"success": True, "data": {"trainings": page_items, "pagination": pagination}}


@admin_router.post("", status_code=201)
def create_training(payload: TrainingCreate):
    training = training_helper.create_training(payload.model_dump(mode="json"))
    return {"success": True, "data": training}


@admin_router.get("/{training_id}")
def get_training(training_id: str):
    return {"success": True, "data": content_helper.get_by_id("training", training_id)}


@admin_router.put("/{training_id}")
def update_training(training_id: str, payload: TrainingUpdate):
    changes = payload.model_dump(mode="json", exclude_unset=True)
    return {"success": True, "data": training_helper.update_training(training_id, changes)}


@admin_router.delete("/{training_id}")
def delete_training(training_id: str):
    training_helper.delete_training(training_id)
    return {"success": True, "data": {}, "message": "Training deleted successfully"}
