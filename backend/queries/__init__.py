# backend/queries/__init__.py
# importing the modules registers their templates
from .sql_template import sql_templates, render_literal, sql_value, build_update_values, UnknownColumnError
from . import (  # noqa: F401
    user_queries,
    business_queries,
    catalog_queries,
    product_queries,
    order_queries,
    address_queries,
    measurement_queries,
)
