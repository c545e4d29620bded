# backend/queries/measurement_queries.py
from typing import Any, Dict

from sqlalchemy import exists, func, insert, select, update

from models.measurement_model import ItemTypeMeasurementKey, Measurement
from models.order_model import OrderItem
from queries.sql_template import now, sql_templates

measurements = Measurement.__table__
required_keys = ItemTypeMeasurementKey.__table__
order_items = OrderItem.__table__


@sql_templates.template("GetMeasurementByOrderItemIdAndKey")
def get_measurement_by_order_item_id_and_key(v: Dict[str, Any]):
    return select(measurements).where(
        measurements.c.orderItemId == v["orderItemId"],
        measurements.c.measurementKey == v["measurementKey"],
    )


@sql_templates.template("InsertMeasurement")
def insert_measurement(v: Dict[str, Any]):
    ts = now()
    return (
        insert(measurements)
        .values(
            orderItemId=v["orderItemId"],
            measurementKey=v["measurementKey"],
            measurementValue=v["measurementValue"],
            notes=v.get("notes"),
            createdAt=ts,
            updatedAt=ts,
        )
        .returning(measurements.c.measurementId)
    )


@sql_templates.template("UpdateMeasurement")
def update_measurement(v: Dict[str, Any]):
    return (
        update(measurements)
        .where(measurements.c.measurementId == v["measurementId"])
        .values(measurementValue=v["measurementValue"], notes=v.get("notes"), updatedAt=now())
    )


@sql_templates.template("GetMeasurementsByOrderItemId")
def get_measurements_by_order_item_id(v: Dict[str, Any]):
    return (
        select(measurements)
        .where(measurements.c.orderItemId == v["orderItemId"])
        .order_by(measurements.c.measurementKey)
    )


@sql_templates.template("GetMeasurementsByOrderId")
def get_measurements_by_order_id(v: Dict[str, Any]):
    return (
        select(measurements)
        .select_from(measurements.join(order_items, order_items.c.orderItemId == measurements.c.orderItemId))
        .where(order_items.c.orderId == v["orderId"])
        .order_by(measurements.c.orderItemId, measurements.c.measurementKey)
    )


@sql_templates.template("CheckAllMeasurementsDone")
def check_all_measurements_done(v: Dict[str, Any]):
    order_id = v["orderId"]
    item_count = (
        select(func.count(order_items.c.orderItemId))
        .where(order_items.c.orderId == order_id)
        .scalar_subquery()
    )
    # (item, required key) pairs with no non-empty value yet
    missing_required = (
        select(func.count())
        .select_from(order_items.join(required_keys, required_keys.c.itemType == order_items.c.itemType))
        .where(
            order_items.c.orderId == order_id,
            ~exists().where(
                measurements.c.orderItemId == order_items.c.orderItemId,
                measurements.c.measurementKey == required_keys.c.measurementKey,
                measurements.c.measurementValue != "",
            ),
        )
        .scalar_subquery()
    )
    items_without_measurements = (
        select(func.count(order_items.c.orderItemId))
        .where(
            order_items.c.orderId == order_id,
            ~exists().where(measurements.c.orderItemId == order_items.c.orderItemId),
        )
        .scalar_subquery()
    )
    return select(
        item_count.label("itemCount"),
        missing_required.label("missingRequired"),
        items_without_measurements.label("itemsWithoutMeasurements"),
    )

