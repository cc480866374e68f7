"""
Storage for the slugged content collections: blog posts, products and trainings.

Each collection is described once in COLLECTIONS; every lookup goes through the
table's partition key or its SlugIndex.
"""
import logging
from typing import Any, Dict, List, NamedTuple, Optional, Type

from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError
from pydantic import BaseModel

from config.db_config import (
    BLOG_POSTS_TABLE,
    PRODUCTS_TABLE,
    SLUG_INDEX,
    TRAININGS_TABLE,
    get_table,
)
from helpers.dynamodb_helper import (
    get_item,
    is_condition_failure,
    new_id,
    put_item,
    query_all,
    scan_all,
    slugify,
    update_fields,
    utc_now_iso,
)
from helpers.errors import NotFoundError, ValidationFailure
from models.content import BlogPost, Product
from models.training import Training

logger = logging.getLogger(__name__)


class Collection(NamedTuple):
    table: str
    key: str
    title_field: str
    not_found: str
    model: Type[BaseModel]


COLLECTIONS = {
    "blog": Collection(BLOG_POSTS_TABLE, "blogId", "title", "Blog not found", BlogPost),
    "product": Collection(PRODUCTS_TABLE, "productId", "name", "Product not found", Product),
    "training": Collection(TRAININGS_TABLE, "trainingId", "title", "Training program not found", Training),
}


def _collection(kind: str) -> Collection:
    return COLLECTIONS[kind]


def find_by_id(kind: str, item_id: str) -> Optional[Dict[str, Any]]:
    collection = _collection(kind)
    return get_item(get_table(collection.table), {collection.key: item_id})


def get_by_id(kind: str, item_id: str) -> Dict[str, Any]:
    item = find_by_id(kind, item_id)
    if item is None:
        raise NotFoundError(_collection(kind).not_found)
    return item


def find_by_slug(kind: str, slug: str) -> Optional[Dict[str, Any]]:
    collection = _collection(kind)
    items = query_all(
        get_table(collection.table),
        IndexName=SLUG_INDEX,
        KeyConditionExpression=Key('slug').eq(slug)
    )
    return items[0] if items else None


def get_by_slug(kind: str, slug: str) -> Dict[str, Any]:
    item = find_by_slug(kind, slug)
    if item is None:
        raise NotFoundError(_collection(kind).not_found)
    return item


def list_all(kind: str, **scan_kwargs) -> List[Dict[str, Any]]:
    return scan_all(get_table(_collection(kind).table), **scan_kwargs)


def _ensure_slug_free(kind: str, slug: str, item_id: Optional[str] = None):
    existing = find_by_slug(kind, slug)
    if existing and existing[_collection(kind).key] != item_id:
        raise ValidationFailure(f"Slug '{slug}' is already in use")


def create_item(kind: str, fields: Dict[str, Any]) -> Dict[str, Any]:
    """Store a new document with a generated id and a slug from its title"""
    collection = _collection(kind)
    slug = slugify(fields[collection.title_field])
    _ensure_slug_free(kind, slug)

    timestamp = utc_now_iso()
    item = {
        **fields,
        collection.key: new_id(),
        'slug': slug,
        'createdAt': timestamp,
        'updatedAt': timestamp,
    }
    put_item(get_table(collection.table), item)
    logger.info(f"Created {kind} {item[collection.key]} ({slug})")
    return item


def update_item(kind: str, item_id: str, changes: Dict[str, Any]) -> Dict[str, Any]:
    """
    Apply a partial update; a new title re-derives the slug. Only the changed
    attributes are written, so counters such as currentEnrollments are untouched.
    """
    collection = _collection(kind)
    item = get_by_id(kind, item_id)

    if not changes:
        return item

    fields = {**changes, 'updatedAt': utc_now_iso()}
    title = changes.get(collection.title_field)
    if title and title != item.get(collection.title_field):
        fields['slug'] = slugify(title)
        _ensure_slug_free(kind, fields['slug'], item_id)

    # Validate the merged document before writing it back
    collection.model(**{**item, **fields})
    try:
        updated = update_fields(get_table(collection.table), {collection.key: item_id}, fields)
    except ClientError as e:
        if is_condition_failure(e):
            raise NotFoundError(collection.not_found)
        raise
    logger.info(f"Updated {kind} {item_id}")
    return updated


def delete_item(kind: str, item_id: str) -> Dict[str, Any]:
    collection = _collection(kind)
    item = get_by_id(kind, item_id)
    get_table(collection.table).delete_item(Key={collection.key: item_id})
    logger.info(f"Deleted {kind} {item_id}")
    return item


def summarize(kind: str, item: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Reference view used when joining a document into another one"""
    if item is None:
        return None
    collection = _collection(kind)
    return {
        collection.key: item[collection.key],
        collection.title_field: item.get(collection.title_field),
        'slug': item.get('slug'),
    }


def summaries_by_id(kind: str, item_ids) -> Dict[str, Dict[str, Any]]:
    """Fetch reference views for a set of ids, skipping ids that no longer exist"""
    summaries = {}
    for item_id in set(item_ids):
        if not item_id:
            continue
        summary = summarize(kind, find_by_id(kind, item_id))
        if summary is not None:
            summaries[item_id] = summary
    return summaries
