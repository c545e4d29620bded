# backend/services/business_service.py
import logging
from typing import Any, Dict, List, Optional, Tuple

from fastapi import HTTPException

from queries.business_queries import BUSINESS_COLUMNS
from queries.sql_template import build_update_values
from schemas.business import BusinessPayload, BusinessUpdate
from services.business_repository import BusinessRepository
from services.fanout import fan_out
from services.workflow_steps import BEST_EFFORT_ERRORS, describe_error

logger = logging.getLogger(__name__)


def save_business(payload: BusinessPayload, user_id: int,
                  repo: BusinessRepository) -> Tuple[bool, Optional[Dict[str, Any]]]:
    """Create or update the business owned by ``user_id``. Returns (created, business)."""
    fields = payload.model_dump(exclude_unset=True, exclude={"userId"})
    fields["businessName"] = payload.businessName

    business_id = repo.check_business_exists(user_id)
    if business_id:
        repo.update_business_information(user_id, fields)
        return False, repo.get_business_by_id(business_id)

    business_id = repo.insert_business_information(user_id, fields)
    logger.info("Business %s created for user %s", business_id, user_id)
    return True, repo.get_business_by_id(business_id)


def sync_item_prices(repo: BusinessRepository, business_id: int,
                     items: List[Dict[str, Any]]) -> Tuple[List[Dict[str, Any]], List[str]]:
    """Concurrent upserts; a failed item becomes a warning."""
    def _upsert(item: Dict[str, Any]):
        try:
            return repo.upsert_tailor_item_price(business_id, item), None
        except BEST_EFFORT_ERRORS as e:
            logger.warning("Tailor item price %s for business %s failed: %s", item.get("itemId"), business_id, e)
            return None, f"itemId {item.get('itemId')} failed: {describe_error(e)}"

    results, warnings = [], []
    for result, warning in fan_out(_upsert, items):
        if result is not None:
            results.append(result)
        if warning:
            warnings.append(warning)
    return results, warnings


def update_business(business_id: int, payload: BusinessUpdate,
                    repo: BusinessRepository) -> Dict[str, Any]:
    raw = payload.model_dump(exclude_unset=True)
    prices = raw.pop("tailorItemPrices", None)
    fields = build_update_values(raw, BUSINESS_COLUMNS)
    if not fields and not prices:
        raise HTTPException(status_code=400, detail="No fields provided to update")

    if fields:
        result = repo.update_business_by_business_id(business_id, fields)  # REQUIRED
        if result.affected == 0:
            raise HTTPException(status_code=404, detail="Business not found")
    elif not repo.get_business_by_id(business_id):
        raise HTTPException(status_code=404, detail="Business not found")

    synced: List[Dict[str, Any]] = []
    warnings: List[str] = []
    if prices:
        synced, warnings = sync_item_prices(repo, business_id, prices)  # BEST-EFFORT

    return {
        "business": repo.get_business_by_id(business_id),
        "tailorItemPrices": synced,
        "warnings": warnings,
    }
