import pytest
from sqlalchemy import func, select

import models

ADDRESS = {
    "fullName": "Priya Sharma",
    "phoneNumber": "9876543210",
    "addressLine1": "12 MG Road",
    "city": "Pune",
    "state": "Maharashtra",
    "pincode": "411001",
}


@pytest.fixture
def tailor(client, make_user):
    user_id, headers = make_user("Tailor")
    business = client.post("/api/business", json={"businessName": "Needle Works"}, headers=headers).json()["data"]
    return user_id, headers, business["businessId"]


def _order(business_id, **extra):
    body = {
        "orderDate": "2026-03-15T10:00:00",
        "orderType": "Stitching",
        "orderItems": [
            {"itemType": "Shirt", "quantity": 2, "unitPrice": 500, "tailorId": business_id, "itemTotal": 9999},
            {"itemType": "Trouser", "quantity": 1, "unitPrice": 700, "tailorId": business_id},
        ],
    }
    body.update(extra)
    return body


def test_create_order_computes_totals(client, make_user, tailor):
    _, headers = make_user("Customer")
    res = client.post("/api/createOrder", json=_order(tailor[2], totalAmount=1), headers=headers)
    assert res.status_code == 201
    data = res.json()["data"]
    assert data["totalAmount"] == 1700
    assert len(data["orderItemIds"]) == 2

    order = client.get(f"/api/orders/{data['orderId']}", headers=headers).json()["data"]
    assert order["totalAmount"] == 1700
    assert [item["itemTotal"] for item in order["orderItems"]] == [1000, 700]


def test_create_order_with_new_addresses(client, make_user, tailor):
    customer_id, headers = make_user("Customer")
    res = client.post("/api/createOrder",
                      json=_order(tailor[2], deliveryAddress=ADDRESS, measurementAddress=ADDRESS),
                      headers=headers)
    assert res.status_code == 201
    order_id = res.json()["data"]["orderId"]

    mapped = client.get(f"/api/orders/{order_id}/delivery-address", headers=headers).json()["data"]
    assert sorted(a["deliveryAddressType"] for a in mapped) == ["Delivery", "Measurement"]

    measurement = client.get(f"/api/orders/{order_id}/delivery-address", params={"type": "Measurement"},
                             headers=headers).json()["data"]
    assert len(measurement) == 1

    mine = client.get("/api/my-delivery-addresses", headers=headers).json()
    assert mine["count"] == 2
    assert all(a["userId"] == customer_id for a in mine["data"])


def test_unknown_address_rolls_back_the_order(client, make_user, tailor):
    customer_id, headers = make_user("Customer")
    res = client.post("/api/createOrder",
                      json=_order(tailor[2], deliveryAddress=ADDRESS, measurementAddressId=999),
                      headers=headers)
    assert res.status_code == 400
    assert res.json()["message"] == "Measurement address 999 not found"

    assert client.get(f"/api/orders/customer/{customer_id}", headers=headers).json()["count"] == 0
    assert client.get("/api/my-delivery-addresses", headers=headers).json()["count"] == 0


def test_add_existing_address_to_order(client, make_user, tailor):
    _, headers = make_user("Customer")
    order_id = client.post("/api/createOrder", json=_order(tailor[2]), headers=headers).json()["data"]["orderId"]
    address_id = client.post("/api/my-delivery-addresses", json=ADDRESS, headers=headers).json()["data"]["deliveryAddressId"]

    res = client.post(f"/api/orders/{order_id}/delivery-address",
                      json={"deliveryAddressId": address_id, "deliveryAddressType": "Measurement"},
                      headers=headers)
    assert res.status_code == 201
    assert res.json()["data"]["deliveryAddressType"] == "Measurement"

    res = client.post("/api/orders/999/delivery-address", json={"address": ADDRESS}, headers=headers)
    assert res.status_code == 404


def test_order_listing_sort_allow_list(client, make_user, tailor):
    _, headers = make_user("Customer")
    client.post("/api/createOrder", json=_order(tailor[2]), headers=headers)

    assert client.get("/api/orders", params={"orderBy": "totalAmount DESC"}, headers=headers).status_code == 200
    res = client.get("/api/orders", params={"orderBy": "totalAmount; DROP TABLE Orders"}, headers=headers)
    assert res.status_code == 400
    assert client.get("/api/orders", params={"orderBy": "passwordHash"}, headers=headers).status_code == 400


def test_update_and_delete_order(client, make_user, tailor):
    _, headers = make_user("Customer")
    order_id = client.post("/api/createOrder", json=_order(tailor[2]), headers=headers).json()["data"]["orderId"]

    res = client.put(f"/api/orders/{order_id}", json={"paymentStatus": "Paid"}, headers=headers)
    assert res.status_code == 200
    assert res.json()["data"]["paymentStatus"] == "Paid"
    assert client.put(f"/api/orders/{order_id}", json={"orderId": 5}, headers=headers).status_code == 400

    assert client.delete(f"/api/orders/{order_id}", headers=headers).status_code == 200
    assert client.get(f"/api/orders/{order_id}", headers=headers).status_code == 404


def test_order_item_crud(client, make_user, tailor):
    _, headers = make_user("Customer")
    order_id = client.post("/api/createOrder", json=_order(tailor[2]), headers=headers).json()["data"]["orderId"]

    res = client.post(f"/api/orders/{order_id}/items", json={"itemType": "Kurta", "quantity": 3, "unitPrice": 100},
                      headers=headers)
    assert res.status_code == 201
    item = res.json()["data"]
    assert item["itemTotal"] == 300

    res = client.put(f"/api/orders/{order_id}/items/{item['orderItemId']}", json={"quantity": 4}, headers=headers)
    assert res.json()["data"]["itemTotal"] == 400

    assert client.delete(f"/api/orders/{order_id}/items/{item['orderItemId']}", headers=headers).status_code == 200
    assert client.get(f"/api/orders/{order_id}/items", headers=headers).json()["count"] == 2
    assert client.post("/api/orders/999/items", json={"itemType": "Kurta"}, headers=headers).status_code == 404


def test_my_orders_for_tailor(client, make_user, tailor):
    _, customer = make_user("Customer")
    _, tailor_headers, business_id = tailor
    client.post("/api/createOrder", json=_order(business_id), headers=customer)

    res = client.get("/api/my-orders", params={"date": "2026-03-15"}, headers=tailor_headers)
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["businessId"] == business_id
    assert data["totalOrders"] == 1
    assert data["orders"][0]["orderSource"] == "Tailor"
    assert len(data["orders"][0]["orderItems"]) == 2

    other_day = client.get("/api/my-orders", params={"date": "2026-03-16"}, headers=tailor_headers)
    assert other_day.json()["data"]["totalOrders"] == 0


def test_my_orders_requires_tailor_or_seller(client, make_user):
    _, headers = make_user("Customer")
    assert client.get("/api/my-orders", headers=headers).status_code == 403
    _, no_roles = make_user()
    assert client.get("/api/my-orders", headers=no_roles).status_code == 403
    _, admin = make_user("Admin")
    assert client.get("/api/my-orders", headers=admin).status_code == 403


def test_my_orders_without_business_is_404(client, make_user):
    _, headers = make_user("Seller")
    assert client.get("/api/my-orders", headers=headers).status_code == 404


def test_orders_per_day(client, make_user, tailor):
    _, customer = make_user("Customer")
    _, tailor_headers, business_id = tailor
    client.post("/api/createOrder", json=_order(business_id), headers=customer)

    url = f"/api/orders-per-day/{business_id}/details"
    assert client.get(url, headers=tailor_headers).status_code == 400
    res = client.get(url, params={"date": "2026-03-15"}, headers=tailor_headers)
    assert res.json()["count"] == 1
    assert len(res.json()["data"]["orders"][0]["orderItems"]) == 2


def test_delete_order_removes_its_items(client, engine, make_user, tailor):
    _, headers = make_user("Customer")
    body = _order(tailor[2], deliveryAddress=ADDRESS)
    order_id = client.post("/api/createOrder", json=body, headers=headers).json()["data"]["orderId"]

    assert client.delete(f"/api/orders/{order_id}", headers=headers).status_code == 200
    with engine.connect() as conn:
        items = conn.execute(select(func.count()).select_from(models.OrderItem.__table__)
                             .where(models.OrderItem.__table__.c.orderId == order_id)).scalar()
        mappings = conn.execute(select(func.count()).select_from(models.OrderDeliveryAddressMapping.__table__)
                                .where(models.OrderDeliveryAddressMapping.__table__.c.orderId == order_id)).scalar()
    assert items == 0
    assert mappings == 0


def test_my_orders_for_tailor_seller_lists_order_once(client, make_user):
    _, headers = make_user("Taylorseller")
    business_id = client.post("/api/business", json={"businessName": "Stitch & Sell"},
                              headers=headers).json()["data"]["businessId"]
    _, customer = make_user("Customer")
    body = {
        "orderDate": "2026-03-15T10:00:00",
        "orderItems": [{"itemType": "Shirt", "quantity": 1, "unitPrice": 900,
                        "tailorId": business_id, "shopId": business_id}],
    }
    assert client.post("/api/createOrder", json=body, headers=customer).status_code == 201

    res = client.get("/api/my-orders", headers=headers)
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["totalOrders"] == 1
    assert data["orders"][0]["orderSource"] == "Tailor"
    assert len(data["orders"][0]["orderItems"]) == 1
