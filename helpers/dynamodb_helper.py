import math
import re
import uuid
import logging
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Tuple

from botocore.exceptions import ClientError

logger = logging.getLogger(__name__)


def new_id() -> str:
    return str(uuid.uuid4())


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def slugify(text: str) -> str:
    """Lower-case, hyphen-separated slug from a title"""
    slug = re.sub(r"[^a-z0-9\s-]", "", text.lower())
    slug = re.sub(r"[\s_-]+", "-", slug).strip("-")
    return slug or new_id()[:8]


def to_dynamodb(value: Any) -> Any:
    """
    Convert various data types to DynamoDB-compatible types.
    """
    if isinstance(value, bool):
        return value  # Handle booleans first to prevent conversion to Decimal
    elif isinstance(value, (int, float)):
        try:
            return Decimal(str(value))
        except InvalidOperation:
            logger.error(f"Failed to convert numeric value: {value}")
            raise
    elif isinstance(value, dict):
        return {k: to_dynamodb(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [to_dynamodb(item) for item in value]
    return value


def from_dynamodb(value: Any) -> Any:
    """
    Convert DynamoDB values back to plain Python types (Decimal -> int/float).
    """
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    elif isinstance(value, dict):
        return {k: from_dynamodb(v) for k, v in value.items()}
    elif isinstance(value, (list, set)):
        return [from_dynamodb(item) for item in value]
    return value


def get_item(table, key: Dict[str, str]):
    response = table.get_item(Key=key)
    item = response.get('Item')
    return from_dynamodb(item) if item is not None else None


def put_item(table, item: Dict[str, Any], **kwargs) -> Dict[str, Any]:
    table.put_item(Item=to_dynamodb(item), **kwargs)
    return item


def update_fields(table, key: Dict[str, str], fields: Dict[str, Any]) -> Dict[str, Any]:
    """
    SET the given attributes on an existing item and return the updated item.
    Raises ClientError (ConditionalCheckFailedException) when the item is gone.
    """
    key_name = next(iter(key))
    expression_attribute_names = {'#pk': key_name}
    expression_attribute_values = {}
    update_expression = 'SET '

    for attr_name, attr_value in fields.items():
        expression_attribute_names[f'#{attr_name}'] = attr_name
        expression_attribute_values[f':{attr_name}'] = to_dynamodb(attr_value)
        update_expression += f'#{attr_name} = :{attr_name}, '

    response = table.update_item(
        Key=key,
        UpdateExpression=update_expression.rstrip(', '),
        ConditionExpression='attribute_exists(#pk)',
        ExpressionAttributeNames=expression_attribute_names,
        ExpressionAttributeValues=expression_attribute_values,
        ReturnValues='ALL_NEW'
    )
    return from_dynamodb(response['Attributes'])


def is_condition_failure(error: ClientError) -> bool:
    return error.response.get('Error', {}).get('Code') == 'ConditionalCheckFailedException'


def scan_all(table, **kwargs) -> List[Dict[str, Any]]:
    """Scan a whole table, following LastEvaluatedKey"""
    items = []
    while True:
        response = table.scan(**kwargs)
        items.extend(response.get('Items', []))
        last_key = response.get('LastEvaluatedKey')
        if not last_key:
            break
        kwargs['ExclusiveStartKey'] = last_key
    return [from_dynamodb(item) for item in items]


def query_all(table, **kwargs) -> List[Dict[str, Any]]:
    """Run a query to completion, following LastEvaluatedKey"""
    items = []
    while True:
        response = table.query(**kwargs)
        items.extend(response.get('Items', []))
        last_key = response.get('LastEvaluatedKey')
        if not last_key:
            break
        kwargs['ExclusiveStartKey'] = last_key
    return [from_dynamodb(item) for item in items]


def sort_newest_first(items: List[Dict[str, Any]], field: str = 'createdAt') -> List[Dict[str, Any]]:
    return sorted(items, key=lambda item: item.get(field) or '', reverse=True)


def paginate(items: List[Any], page: int, limit: int) -> Tuple[List[Any], Dict[str, int]]:
    """Slice one page out of items and describe it"""
    total = len(items)
    start = (page - 1) * limit
    pagination = {
        "currentPage": page,
        "totalPages": math.ceil(total / limit) if limit else 0,
        "totalItems": total,
        "itemsPerPage": limit,
    }
    return items[start:start + limit], pagination


def matches_search(item: Dict[str, Any], search: str, fields: List[str]) -> bool:
    """Case-insensitive substring match over the given fields"""
    needle = search.strip().lower()
    if not needle:
        return True
    return any(needle in str(item.get(field) or '').lower() for field in fields)
