# backend/routers/products_router.py
import logging
from typing import Any, Dict, List, Optional, Tuple, Type

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from gateway.error_handlers import server_error
from schemas.common import success_response
from schemas.products import ProductCreateForm, ProductUpdateForm
from services.auth_service import CurrentUser, get_current_user
from services.catalog_repository import CatalogRepository
from services.dependencies import get_catalog_repository, get_product_repository
from services.product_repository import ProductRepository
from services.product_service import create_product, delete_product, get_product, list_products, update_product
from services.upload_service import UploadService, get_upload_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["products"])


async def _read_form(request: Request, model: Type[BaseModel]) -> Tuple[Any, List[UploadFile], Dict[str, Any]]:
    """Multipart body -> (validated model, uploaded images, raw fields)."""
    form = await request.form()
    fields: Dict[str, Any] = {}
    images: List[UploadFile] = []
    for key, value in form.multi_items():
        if isinstance(value, UploadFile):
            if key == "images" and value.filename:
                images.append(value)
            continue
        fields[key] = value
    try:
        return model.model_validate(fields), images, fields
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False))


# ---------- lookups (before /{product_id}) ----------

@router.get("/getAllProductTypes")
def get_all_product_types(current: CurrentUser = Depends(get_current_user),
                          catalog: CatalogRepository = Depends(get_catalog_repository)):
    rows = catalog.get_all_product_types()
    return success_response("Product types retrieved successfully", data=rows, count=len(rows))


@router.get("/getAllCategories")
def get_all_categories(current: CurrentUser = Depends(get_current_user),
                       catalog: CatalogRepository = Depends(get_catalog_repository)):
    rows = catalog.get_all_categories()
    return success_response("Categories retrieved successfully", data=rows, count=len(rows))


@router.get("/getAllBrands")
def get_all_brands(current: CurrentUser = Depends(get_current_user),
                   catalog: CatalogRepository = Depends(get_catalog_repository)):
    rows = catalog.get_all_brands()
    return success_response("Brands retrieved successfully", data=rows, count=len(rows))


# ---------- products ----------

@router.post("", status_code=201)
async def create_product_route(request: Request,
                               current: CurrentUser = Depends(get_current_user),
                               products: ProductRepository = Depends(get_product_repository),
                               catalog: CatalogRepository = Depends(get_catalog_repository),
                               uploads: UploadService = Depends(get_upload_service)):
    form, images, raw = await _read_form(request, ProductCreateForm)
    user_id = int(raw["user_id"]) if str(raw.get("user_id", "")).isdigit() else current.userId
    try:
        result = await run_in_threadpool(create_product, form, user_id, images, products, catalog, uploads)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Error creating product")
        raise server_error("Failed to create product", e)

    return success_response("Product created successfully", data=result["product"],
                            imagesUploaded=result["imagesUploaded"], warnings=result["warnings"])


@router.get("")
def get_products(user_id: Optional[int] = Query(None),
                 page: int = Query(1, ge=1),
                 limit: int = Query(10, ge=1, le=100),
                 is_active: Optional[bool] = Query(None),
                 productId: Optional[int] = Query(None),
                 current: CurrentUser = Depends(get_current_user),
                 products: ProductRepository = Depends(get_product_repository)):
    if user_id is None:
        raise HTTPException(status_code=400, detail="user_id is required")
    try:
        result = list_products(products, user_id, page, limit, is_active, productId)
    except Exception as e:
        logger.exception("Error fetching products for user %s", user_id)
        raise server_error("Failed to retrieve products", e)
    return success_response("Products retrieved successfully", data=result["products"],
                            count=len(result["products"]), pagination=result["pagination"])


@router.get("/{product_id}")
def get_product_by_id(product_id: int,
                      current: CurrentUser = Depends(get_current_user),
                      products: ProductRepository = Depends(get_product_repository)):
    product = get_product(products, product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return success_response("Product retrieved successfully", data=product)


@router.put("/{product_id}")
async def update_product_route(product_id: int, request: Request,
                               current: CurrentUser = Depends(get_current_user),
                               products: ProductRepository = Depends(get_product_repository),
                               catalog: CatalogRepository = Depends(get_catalog_repository),
                               uploads: UploadService = Depends(get_upload_service)):
    form, images, _ = await _read_form(request, ProductUpdateForm)
    try:
        result = await run_in_threadpool(update_product, product_id, form, images, products, catalog, uploads)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Error updating product %s", product_id)
        raise server_error("Failed to update product", e)

    return success_response("Product updated successfully", data=result["product"],
                            imagesUploaded=result["imagesUploaded"], warnings=result["warnings"])


@router.delete("/{product_id}")
def delete_product_route(product_id: int,
                         current: CurrentUser = Depends(get_current_user),
                         products: ProductRepository = Depends(get_product_repository),
                         uploads: UploadService = Depends(get_upload_service)):
    try:
        warnings = delete_product(product_id, products, uploads)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Error deleting product %s", product_id)
        raise server_error("Failed to delete product", e)
    return success_response("Product deleted successfully", warnings=warnings)
