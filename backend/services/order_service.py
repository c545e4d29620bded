# backend/services/order_service.py
import logging
from typing import Any, Dict, List, Optional

from fastapi import HTTPException

from database.executor import QueryExecutor
from queries.sql_template import now
from schemas.orders import AddressIn, OrderAddressCreate, OrderCreate
from services.address_repository import AddressRepository
from services.order_repository import OrderRepository

logger = logging.getLogger(__name__)


def compute_total(items: List[Dict[str, Any]], supplied: Optional[float]) -> float:
    if items:
        return round(sum(item.get("quantity", 1) * item.get("unitPrice", 0) for item in items), 2)
    return supplied or 0


def _attach_address(addresses: AddressRepository, order_id: int, user_id: int,
                    address_id: Optional[int], address: Optional[AddressIn], kind: str) -> Optional[int]:
    if address_id:
        if not addresses.get_delivery_address_by_id(address_id):
            raise HTTPException(status_code=400, detail=f"{kind} address {address_id} not found")
    elif address is not None:
        address_id = addresses.insert_delivery_address(user_id, address.model_dump())
    else:
        return None
    addresses.insert_order_delivery_address_mapping(order_id, address_id, kind)
    return address_id


def create_order(payload: OrderCreate, user_id: int, executor: QueryExecutor) -> Dict[str, Any]:
    """Order, items, addresses and mappings as one unit of work."""
    customer_id = payload.customerId or user_id
    items = [item.model_dump() for item in payload.orderItems]
    total = compute_total(items, payload.totalAmount)
    fields = {
        "customerId": customer_id,
        "orderDate": payload.orderDate or now(),
        "orderType": payload.orderType,
        "totalAmount": total,
        "paymentStatus": payload.paymentStatus or "Pending",
        "advancePaid": payload.advancePaid or 0,
        "deliveryDate": payload.deliveryDate,
        "notes": payload.notes,
        "createdBy": user_id,
    }

    with executor.transaction() as tx:
        orders = OrderRepository(tx)
        addresses = AddressRepository(tx)
        order_id = orders.insert_order(fields)
        item_ids = [orders.insert_order_item(order_id, item) for item in items]
        delivery_id = _attach_address(addresses, order_id, customer_id,
                                      payload.deliveryAddressId, payload.deliveryAddress, "Delivery")
        measurement_id = _attach_address(addresses, order_id, customer_id,
                                         payload.measurementAddressId, payload.measurementAddress, "Measurement")

    logger.info("Order %s created with %d items", order_id, len(item_ids))
    return {
        "orderId": order_id,
        "customerId": customer_id,
        "totalAmount": total,
        "orderItemIds": item_ids,
        "deliveryAddressId": delivery_id,
        "measurementAddressId": measurement_id,
    }


def add_order_address(order_id: int, payload: OrderAddressCreate, user_id: int,
                      executor: QueryExecutor) -> Dict[str, Any]:
    if not payload.deliveryAddressId and payload.address is None:
        raise HTTPException(status_code=400, detail="deliveryAddressId or address is required")

    with executor.transaction() as tx:
        if not OrderRepository(tx).get_order_by_id(order_id):
            raise HTTPException(status_code=404, detail="Order not found")
        address_id = _attach_address(AddressRepository(tx), order_id, user_id,
                                     payload.deliveryAddressId, payload.address, payload.deliveryAddressType)

    return {"orderId": order_id, "deliveryAddressId": address_id,
            "deliveryAddressType": payload.deliveryAddressType}
