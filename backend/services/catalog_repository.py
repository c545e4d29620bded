# backend/services/catalog_repository.py
from typing import Any, Dict, List, Optional

from services.base_repository import BaseRepository


class CatalogRepository(BaseRepository):
    """Brands, categories and product types (lookup tables)."""

    def get_brand_by_id(self, brand_id: int) -> Optional[Dict[str, Any]]:
        return self.first("GetBrandById", {"id": brand_id})

    def get_brand_by_name(self, name: str) -> Optional[Dict[str, Any]]:
        return self.first("GetBrandByName", {"name": name})

    def get_all_brands(self) -> List[Dict[str, Any]]:
        return self.all("GetAllBrands")

    def get_category_by_id(self, category_id: int) -> Optional[Dict[str, Any]]:
        return self.first("GetCategoryById", {"id": category_id})

    def get_category_by_name(self, name: str) -> Optional[Dict[str, Any]]:
        return self.first("GetCategoryByName", {"name": name})

    def get_all_categories(self) -> List[Dict[str, Any]]:
        return self.all("GetAllCategories")

    def get_all_product_types(self) -> List[Dict[str, Any]]:
        return self.all("GetAllProductTypes")
