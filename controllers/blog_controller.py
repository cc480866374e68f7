from fastapi import APIRouter, Depends, Query

from config.app_config import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT
from helpers import content_helper
from helpers.dynamodb_helper import paginate, sort_newest_first, utc_now_iso
from helpers.errors import NotFoundError
from middleware.auth_middleware import get_current_admin
from schemas.content_schema import BlogPostCreate, BlogPostUpdate

# Public routes, mounted at /api/blogs
router = APIRouter()

# Admin routes, mounted at /api/admin/blogs
admin_router = APIRouter(dependencies=[Depends(get_current_admin)])


@router.get("")
def list_published_posts(
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT),
):
    posts = [p for p in content_helper.list_all("blog") if p.get("isPublished")]
    page_items, pagination = paginate(sort_newest_first(posts, "publishedAt"), page, limit)
    return {"success": True, "data": {"blogs": page_items, "pagination": pagination}}


@router.get("/{slug}")
def get_published_post(slug: str):
    post = content_helper.find_by_slug("blog", slug)
    if post is None or not post.get("isPublished"):
        raise NotFoundError("Blog not found")
    return {"success": True, "data": post}


@admin_router.get("")
def list_posts(
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT),
):
    posts = sort_newest_first(content_helper.list_all("blog"))
    page_items, pagination = paginate(posts, page, limit)
    return {"success": True, "data": {"blogs": page_items, "pagination": pagination}}


@admin_router.post("", status_code=201)
def create_post(payload: BlogPostCreate):
    fields = payload.model_dump(mode="json")
    if fields["isPublished"] and not fields["publishedAt"]:
        fields["publishedAt"] = utc_now_iso()
    return {"success": True, "data": content_helper.create_item("blog", fields)}


@admin_router.get("/{blog_id}")
def get_post(blog_id: str):
    return {"success": True, "data": content_helper.get_by_id("blog", blog_id)}


@admin_router.put("/{blog_id}")
def update_post(blog_id: str, payload: BlogPostUpdate):
    changes = payload.model_dump(mode="json", exclude_unset=True)
    if changes.get("isPublished") and not changes.get("publishedAt"):
        current = content_helper.get_by_id("blog", blog_id)
        changes["publishedAt"] = current.get("publishedAt") or utc_now_iso()
    return {"success": True, "data": content_helper.update_item("blog", blog_id, changes)}


@admin_router.delete("/{blog_id}")
def delete_post(blog_id: str):
    content_helper.delete_item("blog", blog_id)
    return {"success": True, "data": {}, "message": "Blog deleted successfully"}
