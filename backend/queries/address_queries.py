# backend/queries/address_queries.py
from typing import Any, Dict

from sqlalchemy import delete, insert, select, update

from models.address_model import DeliveryAddress, OrderDeliveryAddressMapping
from queries.sql_template import now, sql_templates

addresses = DeliveryAddress.__table__
mappings = OrderDeliveryAddressMapping.__table__

ADDRESS_COLUMNS = (
    "fullName", "phoneNumber", "alternatePhone", "addressLine1", "addressLine2", "landmark",
    "city", "state", "pincode", "addressType", "deliveryInstructions", "googleMapLink",
)


@sql_templates.template("InsertDeliveryAddress")
def insert_delivery_address(v: Dict[str, Any]):
    ts = now()
    return (
        insert(addresses)
        .values(**v["fields"], userId=v["userId"], createdAt=ts, updatedAt=ts)
        .returning(addresses.c.deliveryAddressId)
    )


@sql_templates.template("GetDeliveryAddressesByUserId")
def get_delivery_addresses_by_user_id(v: Dict[str, Any]):
    return (
        select(addresses)
        .where(addresses.c.userId == v["userId"])
        .order_by(addresses.c.createdAt.desc(), addresses.c.deliveryAddressId.desc())
    )


@sql_templates.template("GetDeliveryAddressById")
def get_delivery_address_by_id(v: Dict[str, Any]):
    return select(addresses).where(addresses.c.deliveryAddressId == v["deliveryAddressId"])


@sql_templates.template("GetDeliveryAddressByOrderId")
def get_delivery_address_by_order_id(v: Dict[str, Any]):
    stmt = (
        select(addresses, mappings.c.mappingId, mappings.c.deliveryAddressType)
        .select_from(mappings.join(addresses, addresses.c.deliveryAddressId == mappings.c.deliveryAddressId))
        .where(mappings.c.orderId == v["orderId"])
    )
    if v.get("deliveryAddressType"):
        stmt = stmt.where(mappings.c.deliveryAddressType == v["deliveryAddressType"])
    return stmt.order_by(mappings.c.mappingId)


@sql_templates.template("UpdateDeliveryAddress")
def update_delivery_address(v: Dict[str, Any]):
    return (
        update(addresses)
        .where(addresses.c.deliveryAddressId == v["deliveryAddressId"])
        .values(**v["fields"], updatedAt=now())
    )


@sql_templates.template("DeleteDeliveryAddress")
def delete_delivery_address(v: Dict[str, Any]):
    return delete(addresses).where(addresses.c.deliveryAddressId == v["deliveryAddressId"])


@sql_templates.template("InsertOrderDeliveryAddressMapping")
def insert_order_delivery_address_mapping(v: Dict[str, Any]):
    return (
        insert(mappings)
        .values(
            orderId=v["orderId"],
            deliveryAddressId=v["deliveryAddressId"],
            deliveryAddressType=v.get("deliveryAddressType") or "Delivery",
            createdAt=now(),
        )
        .returning(mappings.c.mappingId)
    )
