# backend/services/business_repository.py
from datetime import date
from typing import Any, Dict, List, Optional

from database.executor import QueryResult
from services.base_repository import BaseRepository


class BusinessRepository(BaseRepository):
    def get_business_by_user_id(self, user_id: int) -> Optional[Dict[str, Any]]:
        return self.first("GetBusinessByUserId", {"userId": user_id})

    def get_business_by_id(self, business_id: int) -> Optional[Dict[str, Any]]:
        return self.first("GetBusinessById", {"businessId": business_id})

    def get_all_businesses(self) -> List[Dict[str, Any]]:
        return self.all("GetAllBusinesses")

    def check_business_exists(self, user_id: int) -> Optional[int]:
        row = self.first("CheckBusinessExists", {"userId": user_id})
        return row["businessId"] if row else None

    def insert_business_information(self, user_id: int, fields: Dict[str, Any]) -> int:
        return self.insert("InsertBusinessInformation", {"userId": user_id, "fields": fields})

    def update_business_information(self, user_id: int, fields: Dict[str, Any]) -> QueryResult:
        return self.run("UpdateBusinessInformation", {"userId": user_id, "fields": fields})

    def update_business_by_business_id(self, business_id: int, fields: Dict[str, Any]) -> QueryResult:
        return self.run("UpdateBusinessByBusinessId", {"businessId": business_id, "fields": fields})

    def update_business_logo(self, business_id: int, logo_url: str) -> QueryResult:
        return self.run("UpdateBusinessLogo", {"businessId": business_id, "businessLogo": logo_url})

    def delete_business_information(self, user_id: int) -> QueryResult:
        return self.run("DeleteBusinessInformation", {"userId": user_id})

    # ---------- tailor availability ----------

    def get_tailor_availability(self, business_id: int, from_date: Optional[date] = None,
                                to_date: Optional[date] = None) -> List[Dict[str, Any]]:
        return self.all("GetTailorAvailability", {
            "businessId": business_id, "fromDate": from_date, "toDate": to_date,
        })

    def upsert_tailor_availability(self, business_id: int, availability_date: date,
                                   is_closed: bool) -> Dict[str, Any]:
        """Insert or update the row keyed by (businessId, date)."""
        existing = self.first("GetTailorAvailabilityByDate", {
            "businessId": business_id, "availabilityDate": availability_date,
        })
        if existing:
            self.run("UpdateTailorAvailability", {
                "availabilityId": existing["availabilityId"], "isClosed": is_closed,
            })
            return {"availabilityId": existing["availabilityId"], "action": "updated"}

        new_id = self.insert("InsertTailorAvailability", {
            "businessId": business_id, "availabilityDate": availability_date, "isClosed": is_closed,
        })
        return {"availabilityId": new_id, "action": "inserted"}

    # ---------- tailor item prices ----------

    def get_tailor_item_prices(self, business_id: int) -> List[Dict[str, Any]]:
        return self.all("GetTailorItemPrices", {"businessId": business_id})

    def upsert_tailor_item_price(self, business_id: int, item: Dict[str, Any]) -> Dict[str, Any]:
        """Insert or update the row keyed by (businessId, itemId)."""
        values = dict(item, businessId=business_id)
        existing = self.first("GetTailorItemPrice", {"businessId": business_id, "itemId": item["itemId"]})
        if existing:
            self.run("UpdateTailorItemPrice", dict(values, tailorItemPriceId=existing["tailorItemPriceId"]))
            return {"itemId": item["itemId"], "tailorItemPriceId": existing["tailorItemPriceId"], "action": "updated"}

        new_id = self.insert("InsertTailorItemPrice", values)
        return {"itemId": item["itemId"], "tailorItemPriceId": new_id, "action": "inserted"}
