# backend/queries/catalog_queries.py
from typing import Any, Dict

from sqlalchemy import select, true

from models.product_model import Brand, Category, ProductType
from queries.sql_template import sql_templates

brands = Brand.__table__
categories = Category.__table__
product_types = ProductType.__table__


@sql_templates.template("GetBrandById")
def get_brand_by_id(v: Dict[str, Any]):
    return select(brands).where(brands.c.id == v["id"])


@sql_templates.template("GetBrandByName")
def get_brand_by_name(v: Dict[str, Any]):
    return select(brands).where(brands.c.name == v["name"])


@sql_templates.template("GetAllBrands")
def get_all_brands(v: Dict[str, Any]):
    return select(brands).where(brands.c.is_active == true()).order_by(brands.c.name)


@sql_templates.template("GetCategoryById")
def get_category_by_id(v: Dict[str, Any]):
    return select(categories).where(categories.c.id == v["id"])


@sql_templates.template("GetCategoryByName")
def get_category_by_name(v: Dict[str, Any]):
    return select(categories).where(categories.c.name == v["name"])


@sql_templates.template("GetAllCategories")
def get_all_categories(v: Dict[str, Any]):
    return select(categories).where(categories.c.is_active == true()).order_by(categories.c.name)


@sql_templates.template("GetAllProductTypes")
def get_all_product_types(v: Dict[str, Any]):
    return (
        select(product_types)
        .where(product_types.c.is_active == true())
        .order_by(product_types.c.name)
    )
