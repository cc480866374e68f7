from fastapi import APIRouter, Depends, Query

from config.app_config import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT
from helpers import content_helper
from helpers.dynamodb_helper import paginate, sort_newest_first
from helpers.errors import NotFoundError
from middleware.auth_middleware import get_current_admin
from schemas.content_schema import ProductCreate, ProductUpdate

# Public routes, mounted at /api/products
router = APIRouter()

# Admin routes, mounted at /api/admin/products
admin_router = APIRouter(dependencies=[Depends(get_current_admin)])


@router.get("")
def list_active_products():
    products = [p for p in content_helper.list_all("product") if p.get("isActive")]
    return {"success": True, "count": len(products), "data": sorted(products, key=lambda p: p.get("name") or "")}


@router.get("/{slug}")
def get_active_product(slug: str):
    product = content_helper.find_by_slug("product", slug)
    if product is None or not product.get("isActive"):
        raise NotFoundError("Product not found")
    return {"success": True, "data": product}


@admin_router.get("")
def list_products(
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT),
):
    products = sort_newest_first(content_helper.list_all("product"))
    page_items, pagination = paginate(products, page, limit)
    return {"success": True, "data": {"products": page_items, "pagination": pagination}}


@admin_router.post("", status_code=201)
def create_product(payload: ProductCreate):
    return {"success": True, "data": content_helper.create_item("product", payload.model_dump(mode="json"))}


@admin_router.get("/{product_id}")
def get_product(product_id: str):
    return {"success": True, "data": content_helper.get_by_id("product", product_id)}


@admin_router.put("/{product_id}")
def update_product(product_id: str, payload: ProductUpdate):
    changes = payload.model_dump(mode="json", exclude_unset=True)
    return {"success": True, "data": content_helper.update_item("product", product_id, changes)}


@admin_router.delete("/{product_id}")
def delete_product(product_id: str):
    content_helper.delete_item("product", product_id)
    return {"success": True, "data": {}, "message": "Product deleted successfully"}
