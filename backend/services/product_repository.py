# backend/services/product_repository.py
from typing import Any, Dict, List, Optional

from database.executor import QueryResult
from services.base_repository import BaseRepository


class ProductRepository(BaseRepository):
    def insert_product(self, fields: Dict[str, Any]) -> int:
        return self.insert("InsertProduct", {"fields": fields})

    def get_product_by_id(self, product_id: int) -> Optional[Dict[str, Any]]:
        return self.first("GetProductById", {"id": product_id})

    def get_all_products(self, user_id: int, limit: int, offset: int, is_active: Optional[bool] = None,
                         product_id: Optional[int] = None) -> List[Dict[str, Any]]:
        return self.all("GetAllProducts", {
            "userId": user_id, "limit": limit, "offset": offset,
            "isActive": is_active, "productId": product_id,
        })

    def count_products(self, user_id: int, is_active: Optional[bool] = None,
                       product_id: Optional[int] = None) -> int:
        row = self.first("CountProducts", {"userId": user_id, "isActive": is_active, "productId": product_id})
        return int(row["total"]) if row else 0

    def update_product(self, product_id: int, fields: Dict[str, Any]) -> QueryResult:
        return self.run("UpdateProduct", {"id": product_id, "fields": fields})

    def delete_product(self, product_id: int) -> QueryResult:
        return self.run("DeleteProduct", {"id": product_id})

    def insert_product_price(self, product_id: int, fields: Dict[str, Any]) -> int:
        return self.insert("InsertProductPrice", {"productId": product_id, "fields": fields})

    def update_product_price(self, product_id: int, fields: Dict[str, Any]) -> QueryResult:
        return self.run("UpdateProductPrice", {"productId": product_id, "fields": fields})

    def delete_product_price(self, product_id: int) -> QueryResult:
        return self.run("DeleteProductPrice", {"productId": product_id})

    def insert_product_compliance(self, product_id: int, fields: Dict[str, Any]) -> int:
        return self.insert("InsertProductCompliance", {"productId": product_id, "fields": fields})

    def update_product_compliance(self, product_id: int, fields: Dict[str, Any]) -> QueryResult:
        return self.run("UpdateProductCompliance", {"productId": product_id, "fields": fields})

    def delete_product_compliance(self, product_id: int) -> QueryResult:
        return self.run("DeleteProductCompliance", {"productId": product_id})

    def insert_product_image(self, product_id: int, url: str, is_primary: bool) -> int:
        return self.insert("InsertProductImage", {"productId": product_id, "url": url, "isPrimary": is_primary})

    def get_product_images(self, product_id: int) -> List[Dict[str, Any]]:
        return self.all("GetProductImages", {"productId": product_id})

    def delete_product_images(self, product_id: int) -> QueryResult:
        return self.run("DeleteProductImages", {"productId": product_id})

    def insert_user_product(self, user_id: int, product_id: int) -> int:
        return self.insert("InsertUserProduct", {"userId": user_id, "productId": product_id})

    def delete_user_product(self, product_id: int) -> QueryResult:
        return self.run("DeleteUserProduct", {"productId": product_id})
