# backend/models/product_model.py
from sqlalchemy import Column, Integer, Boolean, Date, DateTime, ForeignKey, Numeric
from sqlalchemy.types import Unicode, UnicodeText

from database.session import Base


class Brand(Base):
    __tablename__ = "brands"
    id         = Column(Integer, primary_key=True, autoincrement=True)
    name       = Column(Unicode(100), unique=True, nullable=False)
    is_active  = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime)


class Category(Base):
    __tablename__ = "categories"
    id         = Column(Integer, primary_key=True, autoincrement=True)
    name       = Column(Unicode(100), unique=True, nullable=False)
    is_active  = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime)


class ProductType(Base):
    __tablename__ = "ProductTypes"
    id        = Column(Integer, primary_key=True, autoincrement=True)
    name      = Column(Unicode(100), unique=True, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)


class Product(Base):
    __tablename__ = "products"
    id                = Column(Integer, primary_key=True, autoincrement=True)
    title             = Column(Unicode(255), nullable=False)
    brand_id          = Column(Integer, ForeignKey("brands.id"))
    category_id       = Column(Integer, ForeignKey("categories.id"))
    sku               = Column(Unicode(100))
    style_code        = Column(Unicode(100))
    model_name        = Column(Unicode(255))
    product_type      = Column(Unicode(100))
    color             = Column(Unicode(50))
    brand_color       = Column(Unicode(50))
    fabric            = Column(Unicode(100))
    fabric_purity     = Column(Unicode(100))
    composition       = Column(Unicode(255))
    pattern           = Column(Unicode(100))
    stitching_type    = Column(Unicode(100))
    ideal_for         = Column(Unicode(50))
    unit              = Column(Unicode(20))
    top_length_value  = Column(Numeric(10, 2, asdecimal=False))
    top_length_unit   = Column(Unicode(20))
    sales_package     = Column(Unicode(255))
    short_description = Column(Unicode(500))
    long_description  = Column(UnicodeText)
    is_active         = Column(Boolean, nullable=False, default=True)
    created_at        = Column(DateTime)
    updated_at        = Column(DateTime)


class ProductPrice(Base):
    __tablename__ = "product_prices"
    id            = Column(Integer, primary_key=True, autoincrement=True)
    product_id    = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), unique=True, nullable=False)
    product_type  = Column(Unicode(100))
    currency_code = Column(Unicode(3), nullable=False, default="INR")
    price_mrp     = Column(Numeric(12, 2, asdecimal=False), nullable=False)
    price_sale    = Column(Numeric(12, 2, asdecimal=False))
    valid_from    = Column(Date)
    valid_to      = Column(Date)
    is_active     = Column(Boolean, nullable=False, default=True)
    created_at    = Column(DateTime)
    updated_at    = Column(DateTime)


class ProductCompliance(Base):
    __tablename__ = "product_compliance"
    id                   = Column(Integer, primary_key=True, autoincrement=True)
    product_id           = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), unique=True, nullable=False)
    country_of_origin    = Column(Unicode(100))
    manufacturer_details = Column(Unicode(500))
    packer_details       = Column(Unicode(500))
    importer_details     = Column(Unicode(500))
    mfg_month_year       = Column(Unicode(20))
    customer_care        = Column(Unicode(255))


class ProductImage(Base):
    __tablename__ = "product_images"
    id         = Column(Integer, primary_key=True, autoincrement=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)
    url        = Column(Unicode(500), nullable=False)
    is_primary = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime)


class UserProduct(Base):
    __tablename__ = "user_products"
    id         = Column(Integer, primary_key=True, autoincrement=True)
    user_id    = Column(Integer, ForeignKey("Users.userId"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime)
