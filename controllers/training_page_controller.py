from fastapi import APIRouter, Depends

from helpers import training_page_helper
from middleware.auth_middleware import get_current_admin
from schemas.training_page_schema import TrainingPageSettingsUpdate

# Public route, mounted at /api/training-page
router = APIRouter()

# Admin routes, mounted at /api/admin/training-page
admin_router = APIRouter(dependencies=[Depends(get_current_admin)])


@router.get("")
def get_training_page():
    """Published landing page settings; data is null until initialized"""
    return {"success": True, "data": training_page_helper.get_public_settings()}


@admin_router.get("")
def get_training_page_settings():
    return {"success": True, "data": training_page_helper.get_admin_settings()}


@admin_router.put("")
def update_training_page_settings(payload: TrainingPageSettingsUpdate):
    settings = training_page_helper.update_training_page_settings(payload)
    return {
        "success": True,
        "data": settings,
        "message": "Training page settings updated successfully"
    }
