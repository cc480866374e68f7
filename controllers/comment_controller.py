from fastapi import APIRouter, Depends, Query
from typing import Optional

from config.app_config import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT
from helpers import comment_helper
from helpers.dynamodb_helper import paginate
from middleware.auth_middleware import get_current_admin
from models.comment import TargetType as CommentType
from schemas.comment_schema import CommentCreate

# Public routes, mounted at /api/comments
router = APIRouter()

# Moderation routes, mounted at /api/admin/comments
admin_router = APIRouter(dependencies=[Depends(get_current_admin)])


@router.get("/{target_type}/{slug}")
def list_comments(target_type: CommentType, slug: str):
    """Approved comments for a blog post or product, with their approved replies"""
    data = comment_helper.list_public_comments(target_type, slug)
    return {"success": True, "data": data}


@router.post("/{target_type}/reply/{comment_id}", status_code=201)
def reply_to_comment(target_type: CommentType, comment_id: str, payload: CommentCreate):
    reply = comment_helper.reply_to_comment(target_type, comment_id, payload)
    return {"success": True, "data": reply, "message": "Reply submitted for approval"}


@router.post("/{target_type}/{slug}", status_code=201)
def submit_comment(target_type: CommentType, slug: str, payload: CommentCreate):
    comment = comment_helper.submit_comment(target_type, slug, payload)
    return {"success": True, "data": comment, "message": "Comment submitted for approval"}


@admin_router.get("")
def list_all_comments(
    type: Optional[CommentType] = None,
    blog: Optional[str] = None,
    product: Optional[str] = None,
    isApproved: Optional[bool] = None,
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT),
):
    """Comments in any approval state, newest first"""
    if type == "product" or (type is None and product):
        comments = comment_helper.list_admin_comments("product", product, isApproved)
    else:
        comments = comment_helper.list_admin_comments("blog", blog, isApproved)

    page_items, pagination = paginate(comments, page, limit)
    return {"success": True, "data": {"comments": page_items, "pagination": pagination}}


@admin_router.put("/{comment_id}/approve")
def approve_comment(comment_id: str, type: CommentType = "blog"):
    comment = comment_helper.approve_comment(comment_id, type)
    return {"success": True, "data": comment, "message": "Comment approved successfully"}


@admin_router.delete("/{comment_id}")
def delete_comment(comment_id: str, type: CommentType = "blog"):
    comment_helper.delete_comment(comment_id, type)
    return {"success": True, "message": "Comment deleted successfully"}
