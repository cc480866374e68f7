from fastapi import APIRouter, Depends, Query
from fastapi.responses import StreamingResponse
from typing import Optional
import logging
import time

from config.app_config import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT, get_admin_identity
from helpers import enrollment_helper
from helpers.csv_helper import iter_enrollments_csv
from helpers.dynamodb_helper import paginate
from helpers.student_helper import group_students
from middleware.auth_middleware import get_current_admin, get_current_admin_for_download
from models.enrollment import EnrollmentSource, EnrollmentStatus
from schemas.enrollment_schema import (
    EnrollmentAction,
    EnrollmentCreate,
    EnrollmentFilters,
    EnrollmentSubmit,
    EnrollmentUpdate,
)

logger = logging.getLogger(__name__)

# Public routes, mounted at /api/enrollments
router = APIRouter()

# Admin routes, mounted at /api/admin/enrollments
admin_router = APIRouter()


def enrollment_filters(
    status: Optional[EnrollmentStatus] = None,
    trainingId: Optional[str] = None,
    source: Optional[EnrollmentSource] = None,
    search: Optional[str] = None,
) -> EnrollmentFilters:
    return EnrollmentFilters(status=status, trainingId=trainingId, source=source, search=search)


@router.post("", status_code=201)
def submit_enrollment(payload: EnrollmentSubmit):
    """Enrollment request from the public site; always starts pending"""
    data = enrollment_helper.submit_enrollment(payload)
    return {
        "success": True,
        "message": "Enrollment request submitted successfully. We will contact you soon.",
        "data": data
    }


@admin_router.get("")
def list_enrollments(
    filters: EnrollmentFilters = Depends(enrollment_filters),
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT),
    admin: dict = Depends(get_current_admin),
):
    enrollments = enrollment_helper.find_enrollments(filters)
    page_items, pagination = paginate(enrollments, page, limit)
    return {
        "success": True,
        "data": {
            "enrollments": enrollment_helper.attach_trainings(page_items),
            "pagination": pagination,
            "stats": enrollment_helper.status_counts(),
        }
    }


@admin_router.get("/download")
def download_enrollments(
    filters: EnrollmentFilters = Depends(enrollment_filters),
    admin: dict = Depends(get_current_admin_for_download),
):
    """Every matching enrollment as a CSV attachment"""
    enrollments = enrollment_helper.attach_trainings(enrollment_helper.find_enrollments(filters))
    identity = get_admin_identity()
    admin_names = {identity["adminId"]: identity["name"]}
    filename = f"enrollments-{int(time.time() * 1000)}.csv"
    logger.info(f"Exporting {len(enrollments)} enrollments to {filename}")

    return StreamingResponse(
        iter_enrollments_csv(enrollments, admin_names),
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"}
    )


@admin_router.get("/students")
def list_students(
    filters: EnrollmentFilters = Depends(enrollment_filters),
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT),
    admin: dict = Depends(get_current_admin),
):
    """Enrollments grouped per student, most recently enrolled first"""
    enrollments = enrollment_helper.attach_trainings(enrollment_helper.find_enrollments(filters))
    page_items, pagination = paginate(group_students(enrollments), page, limit)
    return {"success": True, "data": {"students": page_items, "pagination": pagination}}


@admin_router.get("/{enrollment_id}")
def get_enrollment(enrollment_id: str, admin: dict = Depends(get_current_admin)):
    enrollment = enrollment_helper.get_enrollment(enrollment_id)
    return {"success": True, "data": enrollment_helper.attach_trainings([enrollment])[0]}


@admin_router.post("", status_code=201)
def create_enrollment(payload: EnrollmentCreate, admin: dict = Depends(get_current_admin)):
    enrollment = enrollment_helper.create_enrollment(payload, admin)
    return {"success": True, "data": enrollment_helper.attach_trainings([enrollment])[0]}


@admin_router.put("/{enrollment_id}")
def update_enrollment(enrollment_id: str, payload: EnrollmentUpdate,
                      admin: dict = Depends(get_current_admin)):
    enrollment = enrollment_helper.update_enrollment(enrollment_id, payload)
    return {"success": True, "data": enrollment_helper.attach_trainings([enrollment])[0]}


def _change_status(enrollment_id: str, status: EnrollmentStatus, action: Optional[EnrollmentAction]):
    notes = action.adminNotes if action else None
    enrollment = enrollment_helper.change_status(enrollment_id, status, notes)
    return {"success": True, "data": enrollment_helper.attach_trainings([enrollment])[0]}


@admin_router.put("/{enrollment_id}/approve")
def approve_enrollment(enrollment_id: str, action: Optional[EnrollmentAction] = None,
                       admin: dict = Depends(get_current_admin)):
    return _change_status(enrollment_id, EnrollmentStatus.APPROVED, action)


@admin_router.put("/{enrollment_id}/reject")
def reject_enrollment(enrollment_id: str, action: Optional[EnrollmentAction] = None,
                      admin: dict = Depends(get_current_admin)):
    return _change_status(enrollment_id, EnrollmentStatus.REJECTED, action)


@admin_router.put("/{enrollment_id}/complete")
def complete_enrollment(enrollment_id: str, action: Optional[EnrollmentAction] = None,
                        admin: dict = Depends(get_current_admin)):
    return _change_status(enrollment_id, EnrollmentStatus.COMPLETED, action)


@admin_router.delete("/{enrollment_id}")
def delete_enrollment(enrollment_id: str, admin: dict = Depends(get_current_admin)):
    enrollment_helper.delete_enrollment(enrollment_id)
    return {"success": True, "data": {}, "message": "Enrollment deleted successfully"}
