# backend/queries/order_queries.py
from datetime import date, datetime, time, timedelta
from typing import Any, Dict, Optional

from sqlalchemy import delete, exists, insert, or_, select, update

from models.measurement_model import OrderMeasurementBoyAssignment
from models.order_model import Order, OrderItem
from models.user_model import User
from queries.sql_template import now, sql_templates

orders = Order.__table__
order_items = OrderItem.__table__
assignments = OrderMeasurementBoyAssignment.__table__
users = User.__table__

ORDER_COLUMNS = (
    "customerId", "orderDate", "orderType", "totalAmount", "paymentStatus",
    "advancePaid", "deliveryDate", "notes", "createdBy",
)
# itemTotal is computed by the database and never written
ORDER_ITEM_COLUMNS = (
    "itemType", "productCode", "description", "shopId", "tailorId", "quantity", "unit",
    "unitPrice", "status", "notes", "measurementDate", "measurementSlot", "stitchingDate",
    "isMeasurementDone",
)
ORDER_SORT_COLUMNS = ("orderId", "orderDate", "createdAt", "updatedAt", "totalAmount", "deliveryDate")


def _on_day(column, day: Optional[date]):
    if day is None:
        return None
    start = datetime.combine(day, time.min)
    return (column >= start) & (column < start + timedelta(days=1))


def _orders_with_customer():
    return (
        select(
            orders,
            users.c.firstName.label("customerFirstName"),
            users.c.lastName.label("customerLastName"),
            users.c.email.label("customerEmail"),
            users.c.phoneNumber.label("customerPhone"),
        )
        .select_from(orders.outerjoin(users, users.c.userId == orders.c.customerId))
    )


def _orders_for_business(item_filter, day: Optional[date]):
    stmt = (
        _orders_with_customer()
        .where(exists().where(order_items.c.orderId == orders.c.orderId, item_filter))
    )
    day_filter = _on_day(orders.c.orderDate, day)
    if day_filter is not None:
        stmt = stmt.where(day_filter)
    return stmt.order_by(orders.c.orderDate.desc(), orders.c.orderId.desc())


@sql_templates.template("InsertOrder")
def insert_order(v: Dict[str, Any]):
    ts = now()
    return (
        insert(orders)
        .values(**v["fields"], createdAt=ts, updatedAt=ts)
        .returning(orders.c.orderId)
    )


@sql_templates.template("GetOrderById")
def get_order_by_id(v: Dict[str, Any]):
    return _orders_with_customer().where(orders.c.orderId == v["orderId"])


@sql_templates.template("GetAllOrders")
def get_all_orders(v: Dict[str, Any]):
    column = orders.c[v.get("orderBy") or "orderDate"]
    ordering = column.desc() if v.get("descending") else column.asc()
    return (
        _orders_with_customer()
        .order_by(ordering, orders.c.orderId)
        .limit(v["limit"])
        .offset(v["offset"])
    )


@sql_templates.template("GetOrdersByCustomerId")
def get_orders_by_customer_id(v: Dict[str, Any]):
    return (
        _orders_with_customer()
        .where(orders.c.customerId == v["customerId"])
        .order_by(orders.c.orderDate.desc(), orders.c.orderId.desc())
    )


@sql_templates.template("UpdateOrder")
def update_order(v: Dict[str, Any]):
    return update(orders).where(orders.c.orderId == v["orderId"]).values(**v["fields"], updatedAt=now())


@sql_templates.template("DeleteOrder")
def delete_order(v: Dict[str, Any]):
    return delete(orders).where(orders.c.orderId == v["orderId"])


@sql_templates.template("InsertOrderItem")
def insert_order_item(v: Dict[str, Any]):
    ts = now()
    return (
        insert(order_items)
        .values(**v["fields"], orderId=v["orderId"], createdAt=ts, updatedAt=ts)
        .returning(order_items.c.orderItemId)
    )


@sql_templates.template("GetOrderItemsByOrderId")
def get_order_items_by_order_id(v: Dict[str, Any]):
    return (
        select(order_items)
        .where(order_items.c.orderId == v["orderId"])
        .order_by(order_items.c.orderItemId)
    )


@sql_templates.template("GetOrderItemById")
def get_order_item_by_id(v: Dict[str, Any]):
    return select(order_items).where(order_items.c.orderItemId == v["orderItemId"])


@sql_templates.template("UpdateOrderItem")
def update_order_item(v: Dict[str, Any]):
    return (
        update(order_items)
        .where(order_items.c.orderItemId == v["orderItemId"], order_items.c.orderId == v["orderId"])
        .values(**v["fields"], updatedAt=now())
    )


@sql_templates.template("DeleteOrderItem")
def delete_order_item(v: Dict[str, Any]):
    return delete(order_items).where(
        order_items.c.orderItemId == v["orderItemId"],
        order_items.c.orderId == v["orderId"],
    )


@sql_templates.template("GetOrdersByTailorId")
def get_orders_by_tailor_id(v: Dict[str, Any]):
    return _orders_for_business(order_items.c.tailorId == v["businessId"], v.get("date"))


@sql_templates.template("GetOrdersByShopId")
def get_orders_by_shop_id(v: Dict[str, Any]):
    return _orders_for_business(order_items.c.shopId == v["businessId"], v.get("date"))


@sql_templates.template("GetOrdersByDateAndBusinessId")
def get_orders_by_date_and_business_id(v: Dict[str, Any]):
    return _orders_for_business(
        or_(order_items.c.shopId == v["businessId"], order_items.c.tailorId == v["businessId"]),
        v["date"],
    )


@sql_templates.template("UpdateOrderItemsMeasurementDone")
def update_order_items_measurement_done(v: Dict[str, Any]):
    return (
        update(order_items)
        .where(order_items.c.orderId == v["orderId"])
        .values(isMeasurementDone=True, updatedAt=now())
    )


@sql_templates.template("GetOrdersByMeasurementBoyId")
def get_orders_by_measurement_boy_id(v: Dict[str, Any]):
    return (
        select(
            orders,
            assignments.c.assignmentId,
            assignments.c.assignmentStatus,
            assignments.c.assignedAt,
            assignments.c.startedAt,
            assignments.c.completedAt,
            users.c.firstName.label("customerFirstName"),
            users.c.lastName.label("customerLastName"),
            users.c.phoneNumber.label("customerPhone"),
        )
        .select_from(
            assignments
            .join(orders, orders.c.orderId == assignments.c.orderId)
            .outerjoin(users, users.c.userId == orders.c.customerId)
        )
        .where(assignments.c.measurementBoyId == v["measurementBoyId"])
        .order_by(assignments.c.assignedAt.desc(), orders.c.orderId.desc())
    )
