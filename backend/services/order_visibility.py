# backend/services/order_visibility.py
import logging
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from fastapi import HTTPException

from services.business_repository import BusinessRepository
from services.fanout import fan_out
from services.order_repository import OrderRepository
from services.user_repository import UserRepository

logger = logging.getLogger(__name__)

TAILOR_ROLES = {"Tailor", "Taylorseller"}
SELLER_ROLES = {"Seller", "Taylorseller"}


def merge_orders(tailor_orders: Iterable[Dict[str, Any]],
                 seller_orders: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Tailor-sourced orders first; a seller order is added only if its id is unseen."""
    merged = [dict(o, orderSource="Tailor") for o in tailor_orders]
    seen = {o["orderId"] for o in merged}
    for order in seller_orders:
        if order["orderId"] not in seen:
            seen.add(order["orderId"])
            merged.append(dict(order, orderSource="Seller"))

    # the per-role queries can repeat an order themselves
    unique: List[Dict[str, Any]] = []
    kept = set()
    for order in merged:
        if order["orderId"] in kept:
            continue
        kept.add(order["orderId"])
        unique.append(order)
    return unique


def attach_items(orders_repo: OrderRepository, orders: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    items = fan_out(lambda o: orders_repo.get_order_items_by_order_id(o["orderId"]), orders)
    return [dict(order, orderItems=order_items) for order, order_items in zip(orders, items)]


def get_my_orders(user_id: int, day: Optional[date], users: UserRepository,
                  businesses: BusinessRepository, orders_repo: OrderRepository) -> Dict[str, Any]:
    roles = users.get_role_names(user_id)
    if not roles:
        raise HTTPException(status_code=403, detail="No roles assigned to this user")

    is_tailor = bool(TAILOR_ROLES.intersection(roles))
    is_seller = bool(SELLER_ROLES.intersection(roles))
    if not (is_tailor or is_seller):
        raise HTTPException(status_code=403, detail="Access denied. Tailor or Seller role required")

    business = businesses.get_business_by_user_id(user_id)
    if not business:
        raise HTTPException(status_code=404, detail="Business information not found for this user")
    business_id = business["businessId"]

    tailor_orders = orders_repo.get_orders_by_tailor_id(business_id, day) if is_tailor else []
    seller_orders = orders_repo.get_orders_by_shop_id(business_id, day) if is_seller else []
    merged = merge_orders(tailor_orders, seller_orders)
    logger.info("my-orders user=%s tailor=%d seller=%d merged=%d",
                user_id, len(tailor_orders), len(seller_orders), len(merged))

    return {
        "roles": roles,
        "businessId": business_id,
        "businessName": business.get("businessName"),
        "totalOrders": len(merged),
        "orders": attach_items(orders_repo, merged),
    }
