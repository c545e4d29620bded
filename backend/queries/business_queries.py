# backend/queries/business_queries.py
from typing import Any, Dict

from sqlalchemy import false, insert, select, update

from models.business_model import BusinessInformation, TailorDateAvailability, TailorItemPrice
from queries.sql_template import now, sql_templates

business = BusinessInformation.__table__
availability = TailorDateAvailability.__table__
item_prices = TailorItemPrice.__table__

# columns a caller may write through the profile endpoints
BUSINESS_COLUMNS = tuple(
    c.name for c in business.columns
    if c.name not in {"businessId", "userId", "isDeleted", "createdAt", "updatedAt"}
)


def _active():
    return business.c.isDeleted == false()


@sql_templates.template("GetBusinessByUserId")
def get_business_by_user_id(v: Dict[str, Any]):
    return select(business).where(business.c.userId == v["userId"], _active())


@sql_templates.template("GetBusinessById")
def get_business_by_id(v: Dict[str, Any]):
    return select(business).where(business.c.businessId == v["businessId"], _active())


@sql_templates.template("GetAllBusinesses")
def get_all_businesses(v: Dict[str, Any]):
    return select(business).where(_active()).order_by(business.c.businessName)


@sql_templates.template("CheckBusinessExists")
def check_business_exists(v: Dict[str, Any]):
    return select(business.c.businessId).where(business.c.userId == v["userId"], _active())


@sql_templates.template("InsertBusinessInformation")
def insert_business_information(v: Dict[str, Any]):
    ts = now()
    return (
        insert(business)
        .values(**v["fields"], userId=v["userId"], isDeleted=False, createdAt=ts, updatedAt=ts)
        .returning(business.c.businessId)
    )


@sql_templates.template("UpdateBusinessInformation")
def update_business_information(v: Dict[str, Any]):
    return (
        update(business)
        .where(business.c.userId == v["userId"], _active())
        .values(**v["fields"], updatedAt=now())
    )


@sql_templates.template("UpdateBusinessByBusinessId")
def update_business_by_business_id(v: Dict[str, Any]):
    return (
        update(business)
        .where(business.c.businessId == v["businessId"], _active())
        .values(**v["fields"], updatedAt=now())
    )


@sql_templates.template("UpdateBusinessLogo")
def update_business_logo(v: Dict[str, Any]):
    return (
        update(business)
        .where(business.c.businessId == v["businessId"], _active())
        .values(businessLogo=v["businessLogo"], updatedAt=now())
    )


@sql_templates.template("DeleteBusinessInformation")
def delete_business_information(v: Dict[str, Any]):
    # soft delete
    return (
        update(business)
        .where(business.c.userId == v["userId"], _active())
        .values(isDeleted=True, updatedAt=now())
    )


@sql_templates.template("GetTailorAvailability")
def get_tailor_availability(v: Dict[str, Any]):
    stmt = select(availability).where(availability.c.businessId == v["businessId"])
    if v.get("fromDate") is not None:
        stmt = stmt.where(availability.c.availabilityDate >= v["fromDate"])
    if v.get("toDate") is not None:
        stmt = stmt.where(availability.c.availabilityDate <= v["toDate"])
    return stmt.order_by(availability.c.availabilityDate)


@sql_templates.template("GetTailorAvailabilityByDate")
def get_tailor_availability_by_date(v: Dict[str, Any]):
    return select(availability).where(
        availability.c.businessId == v["businessId"],
        availability.c.availabilityDate == v["availabilityDate"],
    )


@sql_templates.template("InsertTailorAvailability")
def insert_tailor_availability(v: Dict[str, Any]):
    ts = now()
    return (
        insert(availability)
        .values(
            businessId=v["businessId"],
            availabilityDate=v["availabilityDate"],
            isClosed=bool(v["isClosed"]),
            createdAt=ts,
            updatedAt=ts,
        )
        .returning(availability.c.availabilityId)
    )


@sql_templates.template("UpdateTailorAvailability")
def update_tailor_availability(v: Dict[str, Any]):
    return (
        update(availability)
        .where(availability.c.availabilityId == v["availabilityId"])
        .values(isClosed=bool(v["isClosed"]), updatedAt=now())
    )


@sql_templates.template("GetTailorItemPrices")
def get_tailor_item_prices(v: Dict[str, Any]):
    return (
        select(item_prices)
        .where(item_prices.c.businessId == v["businessId"])
        .order_by(item_prices.c.itemId)
    )


@sql_templates.template("GetTailorItemPrice")
def get_tailor_item_price(v: Dict[str, Any]):
    return select(item_prices).where(
        item_prices.c.businessId == v["businessId"],
        item_prices.c.itemId == v["itemId"],
    )


@sql_templates.template("InsertTailorItemPrice")
def insert_tailor_item_price(v: Dict[str, Any]):
    ts = now()
    return (
        insert(item_prices)
        .values(
            businessId=v["businessId"],
            itemId=v["itemId"],
            price=v["price"],
            isAvailable=v.get("isAvailable", True),
            estimatedDays=v.get("estimatedDays"),
            createdAt=ts,
            updatedAt=ts,
        )
        .returning(item_prices.c.tailorItemPriceId)
    )


@sql_templates.template("UpdateTailorItemPrice")
def update_tailor_item_price(v: Dict[str, Any]):
    return (
        update(item_prices)
        .where(item_prices.c.tailorItemPriceId == v["tailorItemPriceId"])
        .values(
            price=v["price"],
            isAvailable=v.get("isAvailable", True),
            estimatedDays=v.get("estimatedDays"),
            updatedAt=now(),
        )
    )
