"""
Comment moderation for blog posts and products.

Comments and replies share the Comments table. A reply always points at a
top-level comment on the same target, so threads are exactly two levels deep.
Nothing submitted by the public is visible until an admin approves it.
"""
import logging
from typing import Any, Dict, List, Optional

from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from config.db_config import COMMENTS_TABLE, TARGET_INDEX, get_table
from helpers import content_helper
from helpers.dynamodb_helper import (
    get_item,
    is_condition_failure,
    new_id,
    put_item,
    query_all,
    scan_all,
    sort_newest_first,
    update_fields,
    utc_now_iso,
)
from helpers.errors import NotFoundError
from models.comment import Comment
from schemas.comment_schema import CommentCreate

logger = logging.getLogger(__name__)

COMMENT_NOT_FOUND = "Comment not found"

# Fields shown on the public site; e-mail addresses stay private
PUBLIC_FIELDS = ('commentId', 'parentCommentId', 'name', 'comment', 'createdAt')


def _table():
    return get_table(COMMENTS_TABLE)


def _store(comment: Comment) -> Dict[str, Any]:
    return put_item(_table(), comment.model_dump(mode="json"))


def get_comment(comment_id: str, target_type: str) -> Dict[str, Any]:
    """Comment of the given target type, or NotFoundError"""
    item = get_item(_table(), {'commentId': comment_id})
    if item is None or item.get('targetType') != target_type:
        raise NotFoundError(COMMENT_NOT_FOUND)
    return item


def submit_comment(target_type: str, slug: str, payload: CommentCreate) -> Dict[str, Any]:
    """Create an unapproved top-level comment on the target with this slug"""
    target = content_helper.get_by_slug(target_type, slug)
    key = content_helper.COLLECTIONS[target_type].key
    timestamp = utc_now_iso()
    comment = Comment(
        commentId=new_id(),
        targetType=target_type,
        targetId=target[key],
        name=payload.name,
        email=payload.email,
        comment=payload.comment,
        parentCommentId=None,
        isApproved=False,
        createdAt=timestamp,
        updatedAt=timestamp,
    )
    logger.info(f"New {target_type} comment {comment.commentId} on {slug} awaiting approval")
    return _store(comment)


def reply_to_comment(target_type: str, parent_id: str, payload: CommentCreate) -> Dict[str, Any]:
    """
    Create an unapproved reply. Replying to a reply joins the thread of its
    top-level comment.
    """
    parent = Comment(**get_comment(parent_id, target_type))
    root_id = parent.parentCommentId if parent.is_reply else parent.commentId
    timestamp = utc_now_iso()
    reply = Comment(
        commentId=new_id(),
        targetType=parent.targetType,
        targetId=parent.targetId,
        name=payload.name,
        email=payload.email,
        comment=payload.comment,
        parentCommentId=root_id,
        isApproved=False,
        createdAt=timestamp,
        updatedAt=timestamp,
    )
    logger.info(f"New reply {reply.commentId} to comment {root_id} awaiting approval")
    return _store(reply)


def _public_view(item: Dict[str, Any]) -> Dict[str, Any]:
    return {field: item.get(field) for field in PUBLIC_FIELDS}


def build_threads(items: List[Dict[str, Any]]) -> Dict[str, List[Dict[str, Any]]]:
    """
    Group approved comments into threads.

    Returns top-level comments newest first, each with its replies oldest
    first, alongside the flat list of approved replies oldest first.
    Replies whose top-level comment is not approved are not shown.
    """
    approved = [item for item in items if item.get('isApproved') is True]
    top_level = sort_newest_first([i for i in approved if not i.get('parentCommentId')])
    replies = sorted(
        (i for i in approved if i.get('parentCommentId')),
        key=lambda i: i.get('createdAt') or ''
    )

    threads = []
    visible_ids = set()
    for comment in top_level:
        view = _public_view(comment)
        view['replies'] = [
            _public_view(r) for r in replies if r['parentCommentId'] == comment['commentId']
        ]
        visible_ids.add(comment['commentId'])
        threads.append(view)

    return {
        'comments': threads,
        'replies': [_public_view(r) for r in replies if r['parentCommentId'] in visible_ids],
    }


def list_public_comments(target_type: str, slug: str) -> Dict[str, List[Dict[str, Any]]]:
    target = content_helper.get_by_slug(target_type, slug)
    key = content_helper.COLLECTIONS[target_type].key
    items = query_all(
        _table(),
        IndexName=TARGET_INDEX,
        KeyConditionExpression=Key('targetId').eq(target[key]),
        FilterExpression=Attr('isApproved').eq(True)
    )
    return build_threads(items)


def list_admin_comments(target_type: str, target_id: Optional[str] = None,
                        is_approved: Optional[bool] = None) -> List[Dict[str, Any]]:
    """All comments of a type in any approval state, newest first, joined with their target"""
    condition = Attr('targetType').eq(target_type)
    if target_id:
        condition = condition & Attr('targetId').eq(target_id)
    if is_approved is not None:
        condition = condition & Attr('isApproved').eq(is_approved)

    items = sort_newest_first(scan_all(_table(), FilterExpression=condition))

    targets = content_helper.summaries_by_id(target_type, (i['targetId'] for i in items))
    for item in items:
        item[target_type] = targets.get(item['targetId'])
    return items


def approve_comment(comment_id: str, target_type: str) -> Dict[str, Any]:
    get_comment(comment_id, target_type)
    try:
        comment = update_fields(
            _table(), {'commentId': comment_id}, {'isApproved': True, 'updatedAt': utc_now_iso()}
        )
    except ClientError as e:
        if is_condition_failure(e):
            # Deleted since it was read
            raise NotFoundError(COMMENT_NOT_FOUND)
        raise
    logger.info(f"Approved {target_type} comment {comment_id}")
    return comment


def delete_comment(comment_id: str, target_type: str) -> List[str]:
    """Delete a comment and the replies it owns. Returns the deleted ids."""
    comment = get_comment(comment_id, target_type)
    deleted = [comment_id]
    if not comment.get('parentCommentId'):
        replies = scan_all(
            _table(),
            FilterExpression=Attr('parentCommentId').eq(comment_id),
            ProjectionExpression='commentId'
        )
        deleted.extend(reply['commentId'] for reply in replies)

    with _table().batch_writer() as batch:
        for item_id in deleted:
            batch.delete_item(Key={'commentId': item_id})
    logger.info(f"Deleted {target_type} comment {comment_id} with {len(deleted) - 1} replies")
    return deleted
