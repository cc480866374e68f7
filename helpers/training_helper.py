import logging
from typing import Any, Dict, List, Optional

from botocore.exceptions import ClientError

from config.db_config import TRAININGS_TABLE, get_table
from helpers import content_helper
from helpers.dynamodb_helper import is_condition_failure, matches_search, sort_newest_first
from helpers.errors import NotFoundError
from models.training import Training

logger = logging.getLogger(__name__)

UNAVAILABLE = "Training program not found or not available"


def _matches(training: Dict[str, Any], category=None, mode=None, level=None) -> bool:
    return (
        (not category or training.get('category') == category)
        and (not mode or training.get('mode') == mode)
        and (not level or training.get('level') == level)
    )


def list_published(category: Optional[str] = None, mode: Optional[str] = None,
                   level: Optional[str] = None) -> List[Dict[str, Any]]:
    """Active and published trainings, cheapest first"""
    trainings = [
        t for t in content_helper.list_all("training")
        if t.get('isActive') and t.get('isPublished') and _matches(t, category, mode, level)
    ]
    return sorted(trainings, key=lambda t: t.get('price') or 0)


def get_published(training_id: Optional[str] = None, slug: Optional[str] = None) -> Dict[str, Any]:
    if slug is not None:
        training = content_helper.find_by_slug("training", slug)
    else:
        training = content_helper.find_by_id("training", training_id)
    if training is None or not Training(**training).is_available:
        raise NotFoundError("Training program not found")
    return training


def list_for_admin(category=None, mode=None, level=None, is_published: Optional[bool] = None,
                   search: Optional[str] = None) -> List[Dict[str, Any]]:
    """All trainings including drafts and inactive ones, newest first"""
    trainings = [
        t for t in content_helper.list_all("training")
        if _matches(t, category, mode, level)
        and (is_published is None or bool(t.get('isPublished')) == is_published)
        and (not search or matches_search(t, search, ['title', 'description']))
    ]
    return sort_newest_first(trainings)


def create_training(fields: Dict[str, Any]) -> Dict[str, Any]:
    return content_helper.create_item("training", {**fields, 'currentEnrollments': 0})


def update_training(training_id: str, changes: Dict[str, Any]) -> Dict[str, Any]:
    return content_helper.update_item("training", training_id, changes)


def delete_training(training_id: str) -> Dict[str, Any]:
    return content_helper.delete_item("training", training_id)


def adjust_enrollment_count(training_id: str, delta: int) -> None:
    """Move the training's currentEnrollments counter by delta"""
    if not delta:
        return
    try:
        get_table(TRAININGS_TABLE).update_item(
            Key={'trainingId': training_id},
            UpdateExpression='ADD currentEnrollments :delta',
            ConditionExpression='attribute_exists(trainingId)',
            ExpressionAttributeValues={':delta': delta}
        )
    except ClientError as e:
        if is_condition_failure(e):
            logger.warning(f"Training {training_id} no longer exists, seat count not adjusted")
            return
        raise
