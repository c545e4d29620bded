# backend/schemas/products.py
from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from queries.product_queries import COMPLIANCE_COLUMNS, PRICE_COLUMNS

PRODUCT_FORM_FIELDS = (
    "title", "sku", "style_code", "model_name", "product_type", "color", "brand_color",
    "fabric", "fabric_purity", "composition", "pattern", "stitching_type", "ideal_for",
    "unit", "top_length_value", "top_length_unit", "sales_package", "short_description",
    "long_description", "is_active",
)


class ProductFields(BaseModel):
    """Multipart form body shared by create and update."""

    brand: Optional[str] = None
    category: Optional[str] = None
    sku: Optional[str] = Field(default=None, max_length=120)
    style_code: Optional[str] = Field(default=None, max_length=160)
    model_name: Optional[str] = Field(default=None, max_length=160)
    color: Optional[str] = Field(default=None, max_length=80)
    brand_color: Optional[str] = Field(default=None, max_length=50)
    fabric: Optional[str] = None
    fabric_purity: Optional[str] = None
    composition: Optional[str] = None
    pattern: Optional[str] = None
    stitching_type: Optional[str] = None
    ideal_for: Optional[str] = None
    unit: Optional[str] = None
    top_length_value: Optional[float] = Field(default=None, ge=0)
    top_length_unit: Optional[str] = None
    sales_package: Optional[str] = None
    short_description: Optional[str] = Field(default=None, max_length=500)
    long_description: Optional[str] = Field(default=None, max_length=5000)
    is_active: Optional[bool] = None

    # price
    price_sale: Optional[float] = Field(default=None, ge=0)
    currency_code: Optional[str] = None
    valid_from: Optional[date] = None
    valid_to: Optional[date] = None

    # compliance
    country_of_origin: Optional[str] = None
    manufacturer_details: Optional[str] = None
    packer_details: Optional[str] = None
    importer_details: Optional[str] = None
    mfg_month_year: Optional[str] = None
    customer_care: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def blank_to_none(cls, data):
        # multipart forms send empty strings for untouched inputs
        if isinstance(data, dict):
            return {k: (None if v == "" else v) for k, v in data.items()}
        return data

    @field_validator("brand", "category")
    @classmethod
    def validate_reference(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        return value or None

    @field_validator("currency_code")
    @classmethod
    def validate_currency(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        if len(value) != 3:
            raise ValueError("Currency code must be exactly 3 characters")
        if value != value.upper():
            raise ValueError("Currency code must be uppercase")
        return value

    @model_validator(mode="after")
    def validate_price_window(self):
        price_mrp = getattr(self, "price_mrp", None)
        if self.price_sale is not None and price_mrp is not None and self.price_sale >= price_mrp:
            raise ValueError("Sale price must be less than MRP")
        if self.valid_from and self.valid_to and self.valid_to <= self.valid_from:
            raise ValueError("Valid to date must be after valid from date")
        return self

    def _values(self, partial: bool) -> dict:
        if partial:
            return self.model_dump(exclude_unset=True)
        return {k: v for k, v in self.model_dump().items() if v is not None}

    def product_values(self, partial: bool = False) -> dict:
        data = self._values(partial)
        return {k: data[k] for k in PRODUCT_FORM_FIELDS if k in data}

    def price_values(self, partial: bool = False) -> dict:
        data = self._values(partial)
        return {k: data[k] for k in PRICE_COLUMNS if k in data and k != "is_active"}

    def compliance_values(self) -> dict:
        data = self.model_dump()
        return {k: data[k] for k in COMPLIANCE_COLUMNS if data.get(k) not in (None, "")}


class ProductCreateForm(ProductFields):
    title: str = Field(min_length=3, max_length=255)
    price_mrp: float = Field(ge=0)
    product_type: Optional[str] = Field(default="UnstitchedFabricProduct", max_length=80)

    @field_validator("title")
    @classmethod
    def validate_title(cls, value: str) -> str:
        value = value.strip()
        if len(value) < 3:
            raise ValueError("Product title must be between 3 and 255 characters")
        return value


class ProductUpdateForm(ProductFields):
    title: Optional[str] = Field(default=None, min_length=3, max_length=255)
    price_mrp: Optional[float] = Field(default=None, ge=0)
    product_type: Optional[str] = Field(default=None, max_length=80)
