# backend/routers/orders_router.py
import logging
import re
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from database.executor import QueryExecutor, get_executor
from gateway.error_handlers import server_error
from queries.address_queries import ADDRESS_COLUMNS
from queries.order_queries import ORDER_COLUMNS, ORDER_ITEM_COLUMNS, ORDER_SORT_COLUMNS
from queries.sql_template import build_update_values
from schemas.common import success_response
from schemas.orders import (
    AddressIn, AddressUpdate, OrderAddressCreate, OrderCreate, OrderItemIn, OrderItemUpdate, OrderUpdate,
)
from services.address_repository import AddressRepository
from services.auth_service import CurrentUser, get_current_user
from services.business_repository import BusinessRepository
from services.dependencies import (
    get_address_repository, get_business_repository, get_order_repository, get_user_repository,
)
from services.order_repository import OrderRepository
from services.order_service import add_order_address, create_order
from services.order_visibility import attach_items, get_my_orders
from services.user_repository import UserRepository

logger = logging.getLogger(__name__)

router = APIRouter(tags=["orders"])

ORDER_BY_RE = re.compile(r"^\s*(\w+)(?:\s+(ASC|DESC))?\s*$", re.IGNORECASE)


def _order_or_404(orders: OrderRepository, order_id: int):
    order = orders.get_order_by_id(order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order


def _parse_order_by(order_by: Optional[str]):
    if not order_by:
        return "orderDate", True
    match = ORDER_BY_RE.match(order_by)
    if not match or match.group(1) not in ORDER_SORT_COLUMNS:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid orderBy. Allowed columns: {', '.join(ORDER_SORT_COLUMNS)}",
        )
    return match.group(1), (match.group(2) or "ASC").upper() == "DESC"


# ---------- orders ----------

@router.post("/createOrder", status_code=201)
def create_order_route(body: OrderCreate,
                       current: CurrentUser = Depends(get_current_user),
                       executor: QueryExecutor = Depends(get_executor)):
    try:
        data = create_order(body, current.userId, executor)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Error creating order")
        raise server_error("Failed to create order", e)
    return success_response("Order created successfully", data=data)


@router.get("/orders/customer/{customer_id}")
def get_customer_orders(customer_id: int,
                        current: CurrentUser = Depends(get_current_user),
                        orders: OrderRepository = Depends(get_order_repository)):
    rows = orders.get_orders_by_customer_id(customer_id)
    return success_response("Customer orders retrieved successfully", data=rows, count=len(rows))


@router.get("/orders/{order_id}")
def get_order(order_id: int,
              current: CurrentUser = Depends(get_current_user),
              orders: OrderRepository = Depends(get_order_repository),
              addresses: AddressRepository = Depends(get_address_repository)):
    order = _order_or_404(orders, order_id)
    data = dict(
        order,
        orderItems=orders.get_order_items_by_order_id(order_id),
        addresses=addresses.get_delivery_address_by_order_id(order_id),
    )
    return success_response("Order retrieved successfully", data=data)


@router.get("/orders")
def get_orders(limit: int = Query(50, ge=1, le=500),
               offset: int = Query(0, ge=0),
               orderBy: Optional[str] = Query(None),
               current: CurrentUser = Depends(get_current_user),
               orders: OrderRepository = Depends(get_order_repository)):
    column, descending = _parse_order_by(orderBy)
    try:
        rows = orders.get_all_orders(limit, offset, column, descending)
    except Exception as e:
        logger.exception("Error fetching orders")
        raise server_error("Failed to retrieve orders", e)
    return success_response("Orders retrieved successfully", data=rows, count=len(rows))


@router.put("/orders/{order_id}")
def update_order(order_id: int, body: OrderUpdate,
                 current: CurrentUser = Depends(get_current_user),
                 orders: OrderRepository = Depends(get_order_repository)):
    fields = build_update_values(body.model_dump(exclude_unset=True), ORDER_COLUMNS)
    if not fields:
        raise HTTPException(status_code=400, detail="No fields provided to update")
    result = orders.update_order(order_id, fields)
    if result.affected == 0:
        raise HTTPException(status_code=404, detail="Order not found")
    return success_response("Order updated successfully", data=orders.get_order_by_id(order_id))


@router.delete("/orders/{order_id}")
def delete_order(order_id: int,
                 current: CurrentUser = Depends(get_current_user),
                 orders: OrderRepository = Depends(get_order_repository)):
    result = orders.delete_order(order_id)
    if result.affected == 0:
        raise HTTPException(status_code=404, detail="Order not found")
    return success_response("Order deleted successfully")


# ---------- order items ----------

@router.post("/orders/{order_id}/items", status_code=201)
def add_order_item(order_id: int, body: OrderItemIn,
                   current: CurrentUser = Depends(get_current_user),
                   orders: OrderRepository = Depends(get_order_repository)):
    _order_or_404(orders, order_id)
    item_id = orders.insert_order_item(order_id, body.model_dump())
    return success_response("Order item added successfully", data=orders.get_order_item_by_id(item_id))


@router.get("/orders/{order_id}/items")
def get_order_items(order_id: int,
                    current: CurrentUser = Depends(get_current_user),
                    orders: OrderRepository = Depends(get_order_repository)):
    rows = orders.get_order_items_by_order_id(order_id)
    return success_response("Order items retrieved successfully", data=rows, count=len(rows))


@router.put("/orders/{order_id}/items/{order_item_id}")
def update_order_item(order_id: int, order_item_id: int, body: OrderItemUpdate,
                      current: CurrentUser = Depends(get_current_user),
                      orders: OrderRepository = Depends(get_order_repository)):
    fields = build_update_values(body.model_dump(exclude_unset=True), ORDER_ITEM_COLUMNS)
    if not fields:
        raise HTTPException(status_code=400, detail="No fields provided to update")
    result = orders.update_order_item(order_id, order_item_id, fields)
    if result.affected == 0:
        raise HTTPException(status_code=404, detail="Order item not found")
    return success_response("Order item updated successfully", data=orders.get_order_item_by_id(order_item_id))


@router.delete("/orders/{order_id}/items/{order_item_id}")
def delete_order_item(order_id: int, order_item_id: int,
                      current: CurrentUser = Depends(get_current_user),
                      orders: OrderRepository = Depends(get_order_repository)):
    result = orders.delete_order_item(order_id, order_item_id)
    if result.affected == 0:
        raise HTTPException(status_code=404, detail="Order item not found")
    return success_response("Order item deleted successfully")


# ---------- delivery addresses ----------

@router.get("/my-delivery-addresses")
def get_my_delivery_addresses(current: CurrentUser = Depends(get_current_user),
                              addresses: AddressRepository = Depends(get_address_repository)):
    rows = addresses.get_delivery_addresses_by_user_id(current.userId)
    return success_response("Delivery addresses retrieved successfully", data=rows, count=len(rows))


@router.post("/my-delivery-addresses", status_code=201)
def create_my_delivery_address(body: AddressIn,
                               current: CurrentUser = Depends(get_current_user),
                               addresses: AddressRepository = Depends(get_address_repository)):
    address_id = addresses.insert_delivery_address(current.userId, body.model_dump())
    return success_response("Delivery address created successfully",
                            data=addresses.get_delivery_address_by_id(address_id))


@router.get("/delivery-addresses/user/{user_id}")
def get_user_delivery_addresses(user_id: int,
                                current: CurrentUser = Depends(get_current_user),
                                addresses: AddressRepository = Depends(get_address_repository)):
    rows = addresses.get_delivery_addresses_by_user_id(user_id)
    return success_response("Delivery addresses retrieved successfully", data=rows, count=len(rows))


@router.get("/orders/{order_id}/delivery-address")
def get_order_delivery_address(order_id: int,
                               address_type: Optional[str] = Query(None, alias="type", pattern="^(Delivery|Measurement)$"),
                               current: CurrentUser = Depends(get_current_user),
                               addresses: AddressRepository = Depends(get_address_repository)):
    rows = addresses.get_delivery_address_by_order_id(order_id, address_type)
    if not rows:
        raise HTTPException(status_code=404, detail="No delivery address found for this order")
    return success_response("Delivery address retrieved successfully", data=rows, count=len(rows))


@router.post("/orders/{order_id}/delivery-address", status_code=201)
def add_order_delivery_address(order_id: int, body: OrderAddressCreate,
                               current: CurrentUser = Depends(get_current_user),
                               executor: QueryExecutor = Depends(get_executor)):
    try:
        data = add_order_address(order_id, body, current.userId, executor)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Error adding address to order %s", order_id)
        raise server_error("Failed to add delivery address", e)
    return success_response("Delivery address added to order successfully", data=data)


@router.put("/delivery-addresses/{address_id}")
def update_delivery_address(address_id: int, body: AddressUpdate,
                            current: CurrentUser = Depends(get_current_user),
                            addresses: AddressRepository = Depends(get_address_repository)):
    fields = build_update_values(body.model_dump(exclude_unset=True), ADDRESS_COLUMNS)
    if not fields:
        raise HTTPException(status_code=400, detail="No fields provided to update")
    result = addresses.update_delivery_address(address_id, fields)
    if result.affected == 0:
        raise HTTPException(status_code=404, detail="Delivery address not found")
    return success_response("Delivery address updated successfully",
                            data=addresses.get_delivery_address_by_id(address_id))


@router.delete("/delivery-addresses/{address_id}")
def delete_delivery_address(address_id: int,
                            current: CurrentUser = Depends(get_current_user),
                            addresses: AddressRepository = Depends(get_address_repository)):
    result = addresses.delete_delivery_address(address_id)
    if result.affected == 0:
        raise HTTPException(status_code=404, detail="Delivery address not found")
    return success_response("Delivery address deleted successfully")


# ---------- role-based views ----------

@router.get("/my-orders")
def my_orders(day: Optional[date] = Query(None, alias="date"),
              current: CurrentUser = Depends(get_current_user),
              users: UserRepository = Depends(get_user_repository),
              businesses: BusinessRepository = Depends(get_business_repository),
              orders: OrderRepository = Depends(get_order_repository)):
    try:
        data = get_my_orders(current.userId, day, users, businesses, orders)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Error fetching orders for user %s", current.userId)
        raise server_error("Failed to retrieve orders", e)
    return success_response("Orders retrieved successfully", data=data, count=data["totalOrders"])


@router.get("/orders-per-day/{business_id}/details")
def orders_per_day(business_id: int,
                   day: date = Query(..., alias="date"),
                   current: CurrentUser = Depends(get_current_user),
                   orders: OrderRepository = Depends(get_order_repository)):
    try:
        rows = attach_items(orders, orders.get_orders_by_date_and_business_id(business_id, day))
    except Exception as e:
        logger.exception("Error fetching orders for business %s on %s", business_id, day)
        raise server_error("Failed to retrieve orders", e)
    return success_response("Orders retrieved successfully",
                            data={"businessId": business_id, "date": day, "orders": rows},
                            count=len(rows))
