# backend/services/address_repository.py
from typing import Any, Dict, List, Optional

from database.executor import QueryResult
from services.base_repository import BaseRepository


class AddressRepository(BaseRepository):
    def insert_delivery_address(self, user_id: int, fields: Dict[str, Any]) -> int:
        return self.insert("InsertDeliveryAddress", {"userId": user_id, "fields": fields})

    def get_delivery_addresses_by_user_id(self, user_id: int) -> List[Dict[str, Any]]:
        return self.all("GetDeliveryAddressesByUserId", {"userId": user_id})

    def get_delivery_address_by_id(self, address_id: int) -> Optional[Dict[str, Any]]:
        return self.first("GetDeliveryAddressById", {"deliveryAddressId": address_id})

    def get_delivery_address_by_order_id(self, order_id: int,
                                         address_type: Optional[str] = None) -> List[Dict[str, Any]]:
        return self.all("GetDeliveryAddressByOrderId", {"orderId": order_id, "deliveryAddressType": address_type})

    def update_delivery_address(self, address_id: int, fields: Dict[str, Any]) -> QueryResult:
        return self.run("UpdateDeliveryAddress", {"deliveryAddressId": address_id, "fields": fields})

    def delete_delivery_address(self, address_id: int) -> QueryResult:
        return self.run("DeleteDeliveryAddress", {"deliveryAddressId": address_id})

    def insert_order_delivery_address_mapping(self, order_id: int, address_id: int,
                                              address_type: str = "Delivery") -> int:
        return self.insert("InsertOrderDeliveryAddressMapping", {
            "orderId": order_id, "deliveryAddressId": address_id, "deliveryAddressType": address_type,
        })
