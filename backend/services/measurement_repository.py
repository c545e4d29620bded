# backend/services/measurement_repository.py
from typing import Any, Dict, List, Optional

from database.executor import QueryResult
from services.base_repository import BaseRepository


class MeasurementRepository(BaseRepository):
    def get_measurement_by_order_item_id_and_key(self, order_item_id: int, key: str) -> Optional[Dict[str, Any]]:
        return self.first("GetMeasurementByOrderItemIdAndKey", {"orderItemId": order_item_id, "measurementKey": key})

    def insert_measurement(self, order_item_id: int, key: str, value: str, notes: Optional[str] = None) -> int:
        return self.insert("InsertMeasurement", {
            "orderItemId": order_item_id, "measurementKey": key,
            "measurementValue": value, "notes": notes,
        })

    def update_measurement(self, measurement_id: int, value: str, notes: Optional[str] = None) -> QueryResult:
        return self.run("UpdateMeasurement", {
            "measurementId": measurement_id, "measurementValue": value, "notes": notes,
        })

    def get_measurements_by_order_item_id(self, order_item_id: int) -> List[Dict[str, Any]]:
        return self.all("GetMeasurementsByOrderItemId", {"orderItemId": order_item_id})

    def get_measurements_by_order_id(self, order_id: int) -> List[Dict[str, Any]]:
        return self.all("GetMeasurementsByOrderId", {"orderId": order_id})

    def check_all_measurements_done(self, order_id: int) -> bool:
        row = self.first("CheckAllMeasurementsDone", {"orderId": order_id}) or {}
        return (
            (row.get("itemCount") or 0) > 0
            and (row.get("missingRequired") or 0) == 0
            and (row.get("itemsWithoutMeasurements") or 0) == 0
        )
