"""
Training landing page settings, stored as a single document under a fixed key.

The document is written by ensure_training_page_settings() during explicit
initialization (seed script or application startup). Reads never write.
"""
import logging
from typing import Any, Dict, Optional

from botocore.exceptions import ClientError

from config.db_config import TRAINING_PAGE_SETTINGS_TABLE, get_table
from helpers.dynamodb_helper import get_item, put_item, utc_now_iso
from models.training_page_settings import (
    TRAINING_PAGE_SETTINGS_ID,
    TrainingPageSettings,
    default_training_page_settings,
)
from schemas.training_page_schema import TrainingPageSettingsUpdate

logger = logging.getLogger(__name__)


def _table():
    return get_table(TRAINING_PAGE_SETTINGS_TABLE)


def _dump(settings: TrainingPageSettings) -> Dict[str, Any]:
    return settings.model_dump(mode="json")


def load_training_page_settings() -> Optional[Dict[str, Any]]:
    return get_item(_table(), {'settingsId': TRAINING_PAGE_SETTINGS_ID})


def ensure_training_page_settings() -> bool:
    """
    Write the default settings unless a document already exists.
    Returns True when the default was written.
    """
    timestamp = utc_now_iso()
    settings = default_training_page_settings()
    settings.createdAt = timestamp
    settings.updatedAt = timestamp
    try:
        put_item(
            _table(),
            _dump(settings),
            ConditionExpression='attribute_not_exists(settingsId)'
        )
    except ClientError as e:
        if e.response['Error']['Code'] == 'ConditionalCheckFailedException':
            logger.info("Training page settings already initialized")
            return False
        raise
    logger.info("Initialized training page settings with defaults")
    return True


def get_admin_settings() -> Dict[str, Any]:
    """Stored settings, or the unsaved default when initialization has not run"""
    stored = load_training_page_settings()
    if stored is None:
        logger.warning("Training page settings not initialized, serving defaults")
        return _dump(default_training_page_settings())
    return stored


def get_public_settings() -> Optional[Dict[str, Any]]:
    """Stored settings with only visible custom sections, in display order"""
    stored = load_training_page_settings()
    if stored is None:
        return None
    sections = [s for s in stored.get('sections', []) if s.get('isVisible', True)]
    stored['sections'] = sorted(sections, key=lambda s: s.get('order', 0))
    return stored


def update_training_page_settings(payload: TrainingPageSettingsUpdate) -> Dict[str, Any]:
    """
    Replace every section present in the payload and keep the rest.
    Concurrent updates are last-write-wins.
    """
    stored = load_training_page_settings()
    base = stored if stored is not None else _dump(TrainingPageSettings())
    changes = payload.model_dump(mode="json", exclude_unset=True, exclude_none=True)

    timestamp = utc_now_iso()
    merged = TrainingPageSettings(**{
        **base,
        **changes,
        'settingsId': TRAINING_PAGE_SETTINGS_ID,
        'createdAt': base.get('createdAt') or timestamp,
        'updatedAt': timestamp,
    })
    item = _dump(merged)
    put_item(_table(), item)
    logger.info(f"Updated training page settings: {', '.join(changes) or 'no sections'}")
    return item
