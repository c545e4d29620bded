# backend/services/product_service.py
import logging
import math
from typing import Any, Dict, List, Optional

from fastapi import HTTPException, UploadFile

from queries.product_queries import COMPLIANCE_COLUMNS, PRODUCT_COLUMNS
from schemas.products import ProductCreateForm, ProductFields, ProductUpdateForm
from services.catalog_repository import CatalogRepository
from services.product_repository import ProductRepository
from services.upload_service import UploadService
from services.workflow_steps import best_effort

logger = logging.getLogger(__name__)

DEFAULT_CURRENCY = "INR"
PRICE_KEYS = ("currency_code", "price_mrp", "price_sale", "valid_from", "valid_to")


def _numeric_id(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


def resolve_brand_id(catalog: CatalogRepository, brand: Any) -> Optional[int]:
    """Name or id -> existing brand id. Brands are never created implicitly."""
    if brand is None or (isinstance(brand, str) and not brand.strip()):
        return None
    brand_id = _numeric_id(brand)
    if brand_id is not None:
        if not catalog.get_brand_by_id(brand_id):
            raise HTTPException(status_code=400, detail=f"Brand with ID {brand_id} not found")
        return brand_id
    name = str(brand).strip()
    row = catalog.get_brand_by_name(name)
    if not row:
        raise HTTPException(status_code=400, detail=f'Brand "{name}" not found. Please create the brand first.')
    return row["id"]


def resolve_category_id(catalog: CatalogRepository, category: Any) -> Optional[int]:
    if category is None or (isinstance(category, str) and not category.strip()):
        return None
    category_id = _numeric_id(category)
    if category_id is not None:
        if not catalog.get_category_by_id(category_id):
            raise HTTPException(status_code=400, detail=f"Category with ID {category_id} not found")
        return category_id
    name = str(category).strip()
    row = catalog.get_category_by_name(name)
    if not row:
        raise HTTPException(status_code=400, detail=f'Category "{name}" not found. Please create the category first.')
    return row["id"]


def shape_product(row: Dict[str, Any], images: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
    """Flat joined row -> product with nested price and compliance."""
    product = {name: row.get(name) for name in ("id",) + PRODUCT_COLUMNS + ("created_at", "updated_at")}
    product["brand_name"] = row.get("brand_name")
    product["category_name"] = row.get("category_name")
    product["primary_image"] = row.get("primary_image")
    product["price"] = None
    if row.get("price_id") is not None:
        product["price"] = {
            "id": row["price_id"],
            "product_type": row.get("price_product_type"),
            "is_active": row.get("price_is_active"),
            **{key: row.get(key) for key in PRICE_KEYS},
        }
    product["compliance"] = None
    if row.get("compliance_id") is not None:
        product["compliance"] = {"id": row["compliance_id"], **{key: row.get(key) for key in COMPLIANCE_COLUMNS}}
    if images is not None:
        product["images"] = images
    return product


def get_product(products: ProductRepository, product_id: int) -> Optional[Dict[str, Any]]:
    row = products.get_product_by_id(product_id)
    if not row:
        return None
    return shape_product(row, products.get_product_images(product_id))


def list_products(products: ProductRepository, user_id: int, page: int, limit: int,
                  is_active: Optional[bool] = None, product_id: Optional[int] = None) -> Dict[str, Any]:
    offset = (page - 1) * limit
    rows = products.get_all_products(user_id, limit, offset, is_active, product_id)
    total = products.count_products(user_id, is_active, product_id)
    return {
        "products": [shape_product(r) for r in rows],
        "pagination": {
            "page": page,
            "limit": limit,
            "total": total,
            "totalPages": math.ceil(total / limit) if limit else 0,
        },
    }


def _store_images(products: ProductRepository, uploads: UploadService, product_id: int,
                  images: List[UploadFile], warnings: List[str]) -> int:
    stored = 0
    for index, image in enumerate(images):
        def _save(image=image, index=index):
            saved = uploads.save_image(image, "products", product_id)
            return products.insert_product_image(product_id, saved["url"], is_primary=index == 0)
        if best_effort(warnings, f"image '{image.filename}'", _save) is not None:
            stored += 1
    return stored


def _resolve_references(catalog: CatalogRepository, form: ProductFields, partial: bool) -> Dict[str, Any]:
    refs: Dict[str, Any] = {}
    provided = form.model_fields_set
    if not partial or "brand" in provided:
        refs["brand_id"] = resolve_brand_id(catalog, form.brand)
    if not partial or "category" in provided:
        refs["category_id"] = resolve_category_id(catalog, form.category)
    if partial:
        refs = {k: v for k, v in refs.items() if v is not None}
    return refs


def create_product(form: ProductCreateForm, user_id: int, images: List[UploadFile],
                   products: ProductRepository, catalog: CatalogRepository,
                   uploads: UploadService) -> Dict[str, Any]:
    # resolution errors stop the request before anything is written
    refs = _resolve_references(catalog, form, partial=False)

    fields = form.product_values()
    fields.update({k: v for k, v in refs.items() if v is not None})
    product_id = products.insert_product(fields)  # REQUIRED
    logger.info("Product %s created by user %s", product_id, user_id)

    warnings: List[str] = []
    best_effort(warnings, "user product mapping", lambda: products.insert_user_product(user_id, product_id))

    price = form.price_values()
    price.setdefault("currency_code", DEFAULT_CURRENCY)
    best_effort(warnings, "price", lambda: products.insert_product_price(product_id, price))

    compliance = form.compliance_values()
    if compliance:
        best_effort(warnings, "compliance", lambda: products.insert_product_compliance(product_id, compliance))

    images_stored = _store_images(products, uploads, product_id, images, warnings)

    return {
        "product": get_product(products, product_id),
        "imagesUploaded": images_stored,
        "warnings": warnings,
    }


def update_product(product_id: int, form: ProductUpdateForm, images: List[UploadFile],
                   products: ProductRepository, catalog: CatalogRepository,
                   uploads: UploadService) -> Dict[str, Any]:
    existing = products.get_product_by_id(product_id)
    if not existing:
        raise HTTPException(status_code=404, detail="Product not found")

    price = form.price_values(partial=True)
    mrp = price.get("price_mrp", existing.get("price_mrp"))
    sale = price.get("price_sale", existing.get("price_sale"))
    if mrp is not None and sale is not None and sale >= mrp:
        raise HTTPException(status_code=400, detail="Sale price must be less than MRP")

    refs = _resolve_references(catalog, form, partial=True)
    fields = form.product_values(partial=True)
    fields.update(refs)
    if fields:
        products.update_product(product_id, fields)  # REQUIRED

    warnings: List[str] = []
    if price:
        if existing.get("price_id") is not None:
            best_effort(warnings, "price", lambda: products.update_product_price(product_id, price))
        elif "price_mrp" in price:
            price.setdefault("currency_code", DEFAULT_CURRENCY)
            best_effort(warnings, "price", lambda: products.insert_product_price(product_id, price))
        else:
            warnings.append("price failed: price_mrp is required to create a price")

    compliance = form.compliance_values()
    if compliance:
        if existing.get("compliance_id") is not None:
            best_effort(warnings, "compliance", lambda: products.update_product_compliance(product_id, compliance))
        else:
            best_effort(warnings, "compliance", lambda: products.insert_product_compliance(product_id, compliance))

    images_stored = 0
    if images:
        # full replace; the old rows go first
        old_images = products.get_product_images(product_id)
        products.delete_product_images(product_id)
        for img in old_images:
            uploads.delete_file(img["url"])
        images_stored = _store_images(products, uploads, product_id, images, warnings)

    return {
        "product": get_product(products, product_id),
        "imagesUploaded": images_stored,
        "warnings": warnings,
    }


def delete_product(product_id: int, products: ProductRepository, uploads: UploadService) -> List[str]:
    if not products.get_product_by_id(product_id):
        raise HTTPException(status_code=404, detail="Product not found")

    warnings: List[str] = []

    def _delete_images():
        old_images = products.get_product_images(product_id)
        result = products.delete_product_images(product_id)
        for img in old_images:
            uploads.delete_file(img["url"])
        return result

    best_effort(warnings, "images", _delete_images)
    best_effort(warnings, "compliance", lambda: products.delete_product_compliance(product_id))
    best_effort(warnings, "price", lambda: products.delete_product_price(product_id))
    best_effort(warnings, "user product mapping", lambda: products.delete_user_product(product_id))

    result = products.delete_product(product_id)  # REQUIRED
    if result.affected == 0:
        raise HTTPException(status_code=404, detail="Product not found")
    return warnings
