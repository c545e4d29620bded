# backend/queries/product_queries.py
from typing import Any, Dict

from sqlalchemy import delete, func, insert, select, true, update

from models.product_model import (
    Brand, Category, Product, ProductCompliance, ProductImage, ProductPrice, UserProduct,
)
from queries.sql_template import now, sql_templates

products = Product.__table__
prices = ProductPrice.__table__
compliance = ProductCompliance.__table__
images = ProductImage.__table__
user_products = UserProduct.__table__
brands = Brand.__table__
categories = Category.__table__

PRODUCT_COLUMNS = tuple(c.name for c in products.columns if c.name not in {"id", "created_at", "updated_at"})
PRICE_COLUMNS = ("product_type", "currency_code", "price_mrp", "price_sale", "valid_from", "valid_to", "is_active")
COMPLIANCE_COLUMNS = (
    "country_of_origin", "manufacturer_details", "packer_details",
    "importer_details", "mfg_month_year", "customer_care",
)


def _product_detail_select():
    primary_image = (
        select(images.c.url)
        .where(images.c.product_id == products.c.id, images.c.is_primary == true())
        .order_by(images.c.id)
        .limit(1)
        .scalar_subquery()
    )
    return (
        select(
            products,
            brands.c.name.label("brand_name"),
            categories.c.name.label("category_name"),
            prices.c.id.label("price_id"),
            prices.c.product_type.label("price_product_type"),
            prices.c.currency_code,
            prices.c.price_mrp,
            prices.c.price_sale,
            prices.c.valid_from,
            prices.c.valid_to,
            prices.c.is_active.label("price_is_active"),
            compliance.c.id.label("compliance_id"),
            *(compliance.c[name] for name in COMPLIANCE_COLUMNS),
            primary_image.label("primary_image"),
        )
        .select_from(
            products
            .outerjoin(brands, brands.c.id == products.c.brand_id)
            .outerjoin(categories, categories.c.id == products.c.category_id)
            .outerjoin(prices, prices.c.product_id == products.c.id)
            .outerjoin(compliance, compliance.c.product_id == products.c.id)
        )
    )


@sql_templates.template("InsertProduct")
def insert_product(v: Dict[str, Any]):
    ts = now()
    return (
        insert(products)
        .values(**v["fields"], created_at=ts, updated_at=ts)
        .returning(products.c.id)
    )


@sql_templates.template("GetProductById")
def get_product_by_id(v: Dict[str, Any]):
    return _product_detail_select().where(products.c.id == v["id"])


def _user_products_filter(stmt, v: Dict[str, Any]):
    owned = select(user_products.c.product_id).where(user_products.c.user_id == v["userId"])
    stmt = stmt.where(products.c.id.in_(owned))
    if v.get("isActive") is not None:
        stmt = stmt.where(products.c.is_active == bool(v["isActive"]))
    if v.get("productId") is not None:
        stmt = stmt.where(products.c.id == v["productId"])
    return stmt


@sql_templates.template("GetAllProducts")
def get_all_products(v: Dict[str, Any]):
    stmt = _user_products_filter(_product_detail_select(), v)
    return (
        stmt.order_by(products.c.created_at.desc(), products.c.id.desc())
        .limit(v["limit"])
        .offset(v["offset"])
    )


@sql_templates.template("CountProducts")
def count_products(v: Dict[str, Any]):
    return _user_products_filter(select(func.count(products.c.id).label("total")), v)


@sql_templates.template("UpdateProduct")
def update_product(v: Dict[str, Any]):
    return update(products).where(products.c.id == v["id"]).values(**v["fields"], updated_at=now())


@sql_templates.template("DeleteProduct")
def delete_product(v: Dict[str, Any]):
    return delete(products).where(products.c.id == v["id"])


@sql_templates.template("InsertProductPrice")
def insert_product_price(v: Dict[str, Any]):
    ts = now()
    return (
        insert(prices)
        .values(**v["fields"], product_id=v["productId"], created_at=ts, updated_at=ts)
        .returning(prices.c.id)
    )


@sql_templates.template("UpdateProductPrice")
def update_product_price(v: Dict[str, Any]):
    return (
        update(prices)
        .where(prices.c.product_id == v["productId"])
        .values(**v["fields"], updated_at=now())
    )


@sql_templates.template("DeleteProductPrice")
def delete_product_price(v: Dict[str, Any]):
    return delete(prices).where(prices.c.product_id == v["productId"])


@sql_templates.template("InsertProductCompliance")
def insert_product_compliance(v: Dict[str, Any]):
    return (
        insert(compliance)
        .values(**v["fields"], product_id=v["productId"])
        .returning(compliance.c.id)
    )


@sql_templates.template("UpdateProductCompliance")
def update_product_compliance(v: Dict[str, Any]):
    return update(compliance).where(compliance.c.product_id == v["productId"]).values(**v["fields"])


@sql_templates.template("DeleteProductCompliance")
def delete_product_compliance(v: Dict[str, Any]):
    return delete(compliance).where(compliance.c.product_id == v["productId"])


@sql_templates.template("InsertProductImage")
def insert_product_image(v: Dict[str, Any]):
    return (
        insert(images)
        .values(product_id=v["productId"], url=v["url"], is_primary=bool(v["isPrimary"]), created_at=now())
        .returning(images.c.id)
    )


@sql_templates.template("GetProductImages")
def get_product_images(v: Dict[str, Any]):
    return (
        select(images)
        .where(images.c.product_id == v["productId"])
        .order_by(images.c.is_primary.desc(), images.c.id)
    )


@sql_templates.template("DeleteProductImages")
def delete_product_images(v: Dict[str, Any]):
    return delete(images).where(images.c.product_id == v["productId"])


@sql_templates.template("InsertUserProduct")
def insert_user_product(v: Dict[str, Any]):
    return (
        insert(user_products)
        .values(user_id=v["userId"], product_id=v["productId"], created_at=now())
        .returning(user_products.c.id)
    )


@sql_templates.template("DeleteUserProduct")
def delete_user_product(v: Dict[str, Any]):
    return delete(user_products).where(user_products.c.product_id == v["productId"])
