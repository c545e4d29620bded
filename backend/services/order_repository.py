# backend/services/order_repository.py
from datetime import date
from typing import Any, Dict, List, Optional

from database.executor import QueryResult
from services.base_repository import BaseRepository


class OrderRepository(BaseRepository):
    def insert_order(self, fields: Dict[str, Any]) -> int:
        return self.insert("InsertOrder", {"fields": fields})

    def get_order_by_id(self, order_id: int) -> Optional[Dict[str, Any]]:
        return self.first("GetOrderById", {"orderId": order_id})

    def get_all_orders(self, limit: int, offset: int, order_by: str = "orderDate",
                       descending: bool = False) -> List[Dict[str, Any]]:
        return self.all("GetAllOrders", {
            "limit": limit, "offset": offset, "orderBy": order_by, "descending": descending,
        })

    def get_orders_by_customer_id(self, customer_id: int) -> List[Dict[str, Any]]:
        return self.all("GetOrdersByCustomerId", {"customerId": customer_id})

    def update_order(self, order_id: int, fields: Dict[str, Any]) -> QueryResult:
        return self.run("UpdateOrder", {"orderId": order_id, "fields": fields})

    def delete_order(self, order_id: int) -> QueryResult:
        return self.run("DeleteOrder", {"orderId": order_id})

    def insert_order_item(self, order_id: int, fields: Dict[str, Any]) -> int:
        return self.insert("InsertOrderItem", {"orderId": order_id, "fields": fields})

    def get_order_items_by_order_id(self, order_id: int) -> List[Dict[str, Any]]:
        return self.all("GetOrderItemsByOrderId", {"orderId": order_id})

    def get_order_item_by_id(self, order_item_id: int) -> Optional[Dict[str, Any]]:
        return self.first("GetOrderItemById", {"orderItemId": order_item_id})

    def update_order_item(self, order_id: int, order_item_id: int, fields: Dict[str, Any]) -> QueryResult:
        return self.run("UpdateOrderItem", {"orderId": order_id, "orderItemId": order_item_id, "fields": fields})

    def delete_order_item(self, order_id: int, order_item_id: int) -> QueryResult:
        return self.run("DeleteOrderItem", {"orderId": order_id, "orderItemId": order_item_id})

    def get_orders_by_tailor_id(self, business_id: int, day: Optional[date] = None) -> List[Dict[str, Any]]:
        return self.all("GetOrdersByTailorId", {"businessId": business_id, "date": day})

    def get_orders_by_shop_id(self, business_id: int, day: Optional[date] = None) -> List[Dict[str, Any]]:
        return self.all("GetOrdersByShopId", {"businessId": business_id, "date": day})

    def get_orders_by_date_and_business_id(self, business_id: int, day: date) -> List[Dict[str, Any]]:
        return self.all("GetOrdersByDateAndBusinessId", {"businessId": business_id, "date": day})

    def get_orders_by_measurement_boy_id(self, user_id: int) -> List[Dict[str, Any]]:
        return self.all("GetOrdersByMeasurementBoyId", {"measurementBoyId": user_id})

    def update_order_items_measurement_done(self, order_id: int) -> QueryResult:
        return self.run("UpdateOrderItemsMeasurementDone", {"orderId": order_id})
