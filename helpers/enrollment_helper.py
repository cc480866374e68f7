"""
Enrollment workflow: public submissions, admin moderation through the status
state machine, filtered listings and seat accounting on the training.
"""
import logging
from typing import Any, Dict, List, Optional

from botocore.exceptions import ClientError

from config.db_config import ENROLLMENTS_TABLE, get_table
from helpers import content_helper, training_helper
from helpers.dynamodb_helper import (
    get_item,
    is_condition_failure,
    matches_search,
    new_id,
    put_item,
    scan_all,
    sort_newest_first,
    update_fields,
    utc_now_iso,
)
from helpers.errors import NotFoundError, ValidationFailure
from models.enrollment import (
    Enrollment,
    EnrollmentSource,
    EnrollmentStatus,
    InvalidTransition,
    SEAT_HOLDING,
    check_transition,
    seat_delta,
)
from models.training import Training
from schemas.enrollment_schema import (
    EnrollmentCreate,
    EnrollmentFilters,
    EnrollmentSubmit,
    EnrollmentUpdate,
)

logger = logging.getLogger(__name__)

ENROLLMENT_NOT_FOUND = "Enrollment not found"
SEARCH_FIELDS = ['studentName', 'email', 'phone']


def _table():
    return get_table(ENROLLMENTS_TABLE)


def _store(enrollment: Enrollment) -> Dict[str, Any]:
    return put_item(_table(), enrollment.model_dump(mode="json"))


def get_enrollment(enrollment_id: str) -> Dict[str, Any]:
    item = get_item(_table(), {'enrollmentId': enrollment_id})
    if item is None:
        raise NotFoundError(ENROLLMENT_NOT_FOUND)
    return item


def submit_enrollment(payload: EnrollmentSubmit) -> Dict[str, Any]:
    """
    Record a pending enrollment from the public site. The training must be
    active, published and not fully booked. Repeat submissions are allowed.
    """
    stored = content_helper.find_by_id("training", payload.trainingId)
    training = Training(**stored) if stored else None
    if training is None or not training.is_available:
        raise NotFoundError(training_helper.UNAVAILABLE)
    if training.is_full:
        raise ValidationFailure("This training program is fully booked")

    timestamp = utc_now_iso()
    enrollment = Enrollment(
        enrollmentId=new_id(),
        studentName=payload.studentName,
        email=payload.email,
        phone=payload.phone,
        whatsappNumber=payload.whatsappNumber or payload.phone,
        trainingId=payload.trainingId,
        notes=payload.notes,
        source=EnrollmentSource.WEBSITE,
        status=EnrollmentStatus.PENDING,
        createdAt=timestamp,
        updatedAt=timestamp,
    )
    item = _store(enrollment)
    logger.info(f"Enrollment {enrollment.enrollmentId} submitted for training {training.trainingId}")
    return {
        'enrollmentId': item['enrollmentId'],
        'studentName': item['studentName'],
        'trainingTitle': training.title,
        'status': item['status'],
    }


def create_enrollment(payload: EnrollmentCreate, admin: Dict[str, Any]) -> Dict[str, Any]:
    """Manual enrollment recorded by an admin; starts pending like any other"""
    training = Training(**content_helper.get_by_id("training", payload.trainingId))
    if training.is_full:
        raise ValidationFailure("Training program is full")

    timestamp = utc_now_iso()
    enrollment = Enrollment(
        enrollmentId=new_id(),
        **payload.model_dump(),
        status=EnrollmentStatus.PENDING,
        enrolledBy=admin['adminId'],
        createdAt=timestamp,
        updatedAt=timestamp,
    )
    logger.info(f"Admin {admin['adminId']} recorded enrollment {enrollment.enrollmentId}")
    return _store(enrollment)


def _apply_status(item: Dict[str, Any], target: EnrollmentStatus, timestamp: str) -> int:
    """Move item to target in place. Returns the seat change for its training."""
    current = EnrollmentStatus(item['status'])
    try:
        check_transition(current, target)
    except InvalidTransition as e:
        raise ValidationFailure(str(e))

    item['status'] = target.value
    if target == EnrollmentStatus.APPROVED:
        item['approvedAt'] = timestamp
    elif target == EnrollmentStatus.COMPLETED:
        item['completedAt'] = timestamp
    return seat_delta(current, target)


def _write_existing(item: Dict[str, Any]) -> Dict[str, Any]:
    """Write item's attributes back unless the enrollment was deleted meanwhile"""
    fields = {k: v for k, v in item.items() if k != 'enrollmentId'}
    try:
        return update_fields(_table(), {'enrollmentId': item['enrollmentId']}, fields)
    except ClientError as e:
        if is_condition_failure(e):
            raise NotFoundError(ENROLLMENT_NOT_FOUND)
        raise


def change_status(enrollment_id: str, target: EnrollmentStatus,
                  admin_notes: Optional[str] = None) -> Dict[str, Any]:
    """Approve, reject or complete an enrollment"""
    item = get_enrollment(enrollment_id)
    timestamp = utc_now_iso()
    delta = _apply_status(item, target, timestamp)
    if admin_notes:
        item['adminNotes'] = admin_notes
    item['updatedAt'] = timestamp

    item = _write_existing(item)
    training_helper.adjust_enrollment_count(item['trainingId'], delta)
    logger.info(f"Enrollment {enrollment_id} is now {target.value}")
    return item


def update_enrollment(enrollment_id: str, payload: EnrollmentUpdate) -> Dict[str, Any]:
    """Partial update; a status change goes through the state machine"""
    item = get_enrollment(enrollment_id)
    changes = payload.model_dump(mode="json", exclude_unset=True)
    target = changes.pop('status', None)
    timestamp = utc_now_iso()
    previous_status = EnrollmentStatus(item['status'])
    previous_training = item['trainingId']

    new_training = changes.get('trainingId')
    if new_training and new_training != previous_training:
        content_helper.get_by_id("training", new_training)

    item.update(changes)
    delta = 0
    if target is not None:
        delta = _apply_status(item, EnrollmentStatus(target), timestamp)
    item['updatedAt'] = timestamp
    # Validate the merged document before writing it back
    Enrollment(**item)
    item = _write_existing(item)

    if item['trainingId'] != previous_training:
        # The seat moves with the enrollment
        training_helper.adjust_enrollment_count(
            previous_training, -int(previous_status in SEAT_HOLDING))
        training_helper.adjust_enrollment_count(
            item['trainingId'], int(EnrollmentStatus(item['status']) in SEAT_HOLDING))
    else:
        training_helper.adjust_enrollment_count(item['trainingId'], delta)
    logger.info(f"Updated enrollment {enrollment_id}")
    return item


def delete_enrollment(enrollment_id: str) -> Dict[str, Any]:
    item = get_enrollment(enrollment_id)
    _table().delete_item(Key={'enrollmentId': enrollment_id})
    released = seat_delta(EnrollmentStatus(item['status']), EnrollmentStatus.PENDING)
    training_helper.adjust_enrollment_count(item['trainingId'], released)
    logger.info(f"Deleted enrollment {enrollment_id}")
    return item


def _matches(item: Dict[str, Any], filters: EnrollmentFilters) -> bool:
    if filters.status and item.get('status') != filters.status.value:
        return False
    if filters.trainingId and item.get('trainingId') != filters.trainingId:
        return False
    if filters.source and item.get('source') != filters.source.value:
        return False
    if filters.search and not matches_search(item, filters.search, SEARCH_FIELDS):
        return False
    return True


def find_enrollments(filters: EnrollmentFilters) -> List[Dict[str, Any]]:
    """Every enrollment matching the filters, newest first"""
    items = [item for item in scan_all(_table()) if _matches(item, filters)]
    return sort_newest_first(items)


def status_counts(items: Optional[List[Dict[str, Any]]] = None) -> Dict[str, int]:
    if items is None:
        items = scan_all(_table(), ProjectionExpression='#s', ExpressionAttributeNames={'#s': 'status'})
    counts = {'total': len(items)}
    for status in EnrollmentStatus:
        counts[status.value] = sum(1 for item in items if item.get('status') == status.value)
    return counts


def attach_trainings(items: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Join each enrollment with a {trainingId, title, slug} reference"""
    trainings = content_helper.summaries_by_id("training", (i.get('trainingId') for i in items))
    for item in items:
        item['training'] = trainings.get(item.get('trainingId'))
    return items
