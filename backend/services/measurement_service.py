# backend/services/measurement_service.py
import logging
from collections import defaultdict
from typing import Any, Dict, List, Optional

from fastapi import HTTPException
from sqlalchemy.exc import SQLAlchemyError

from database.errors import DatabaseConnectionError, InsertFailedError
from services.address_repository import AddressRepository
from services.fanout import fan_out
from services.measurement_repository import MeasurementRepository
from services.order_repository import OrderRepository
from services.user_repository import UserRepository
from services.workflow_steps import describe_error

logger = logging.getLogger(__name__)

MEASUREMENT_BOY_ROLE = "MeasurementBoy"
RESERVED_FIELDS = {"orderId", "orderItemId", "itemType", "notes"}


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


def require_measurement_boy(users: UserRepository, user_id: int) -> List[str]:
    roles = users.get_role_names(user_id)
    if MEASUREMENT_BOY_ROLE not in roles:
        raise HTTPException(status_code=403, detail="Access denied. MeasurementBoy role required")
    return roles


def submit_measurements(user_id: int, data: Optional[Dict[str, Any]], users: UserRepository,
                        orders_repo: OrderRepository, measurements: MeasurementRepository) -> Dict[str, Any]:
    if not isinstance(data, dict) or not data:
        raise HTTPException(status_code=400, detail="Measurements object is required")

    if _is_empty(data.get("orderItemId")):
        raise HTTPException(status_code=400, detail="orderItemId is required")
    order_item_id = _as_int(data["orderItemId"])
    if order_item_id is None:
        raise HTTPException(status_code=400, detail="orderItemId must be a number")

    require_measurement_boy(users, user_id)

    fields = {k: v for k, v in data.items() if k not in RESERVED_FIELDS}
    if not fields:
        raise HTTPException(status_code=400, detail="No measurement fields provided")

    notes = data.get("notes")
    saved: List[Dict[str, Any]] = []
    errors: List[Dict[str, str]] = []

    for field_name, raw_value in fields.items():
        if _is_empty(raw_value):
            continue
        key = field_name.upper()
        value = str(raw_value)
        try:
            existing = measurements.get_measurement_by_order_item_id_and_key(order_item_id, key)
            if existing:
                measurements.update_measurement(existing["measurementId"], value, notes)
                measurement_id, action = existing["measurementId"], "updated"
            else:
                measurement_id = measurements.insert_measurement(order_item_id, key, value, notes)
                action = "inserted"
        except (SQLAlchemyError, InsertFailedError) as e:
            logger.error("Saving measurement %s for item %s failed: %s", key, order_item_id, e)
            errors.append({"field": field_name, "error": describe_error(e)})
            continue
        saved.append({
            "measurementId": measurement_id,
            "measurementKey": key,
            "measurementValue": value,
            "action": action,
        })

    if not saved:
        raise HTTPException(status_code=400, detail={
            "message": "No measurements were saved",
            "errors": errors,
        })

    order_id = _as_int(data.get("orderId"))
    all_done = False
    warnings: List[str] = []
    if order_id is not None:
        try:
            all_done = measurements.check_all_measurements_done(order_id)
            if all_done:
                orders_repo.update_order_items_measurement_done(order_id)
        except (SQLAlchemyError, DatabaseConnectionError) as e:
            logger.error("Measurement completion check for order %s failed: %s", order_id, e)
            warnings.append(f"Measurement completion check failed: {describe_error(e)}")
            all_done = False

    result: Dict[str, Any] = {
        "orderId": order_id,
        "orderItemId": order_item_id,
        "itemType": data.get("itemType"),
        "totalMeasurements": len(saved),
        "measurements": saved,
        "allMeasurementsDone": all_done,
    }
    if errors:
        result["errors"] = errors
    if warnings:
        result["warnings"] = warnings
    return result


def get_measurement_boy_orders(user_id: int, is_done: Optional[bool], users: UserRepository,
                               orders_repo: OrderRepository, addresses: AddressRepository,
                               measurements: MeasurementRepository) -> List[Dict[str, Any]]:
    require_measurement_boy(users, user_id)
    assigned = orders_repo.get_orders_by_measurement_boy_id(user_id)

    def _details(order: Dict[str, Any]) -> Dict[str, Any]:
        order_id = order["orderId"]
        items = orders_repo.get_order_items_by_order_id(order_id)
        by_item = defaultdict(list)
        for m in measurements.get_measurements_by_order_id(order_id):
            by_item[m["orderItemId"]].append(m)
        measurement_address = addresses.get_delivery_address_by_order_id(order_id, "Measurement")
        return dict(
            order,
            measurementAddress=measurement_address[0] if measurement_address else None,
            orderItems=[dict(item, measurements=by_item.get(item["orderItemId"], [])) for item in items],
            isOrderMeasurementDone=bool(items) and all(item["isMeasurementDone"] for item in items),
        )

    detailed = fan_out(_details, assigned)
    if is_done is not None:
        detailed = [o for o in detailed if o["isOrderMeasurementDone"] == is_done]
    return detailed
