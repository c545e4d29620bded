import pytest
from sqlalchemy import insert
from sqlalchemy.exc import OperationalError

import models
from services.measurement_repository import MeasurementRepository
from services.measurement_service import submit_measurements
from services.order_repository import OrderRepository
from services.user_repository import UserRepository


@pytest.fixture
def shirt_order(client, make_user):
    _, customer = make_user("Customer")
    body = {"orderItems": [{"itemType": "Shirt", "quantity": 1, "unitPrice": 800}]}
    data = client.post("/api/createOrder", json=body, headers=customer).json()["data"]
    return data["orderId"], data["orderItemIds"][0]


def _submit(client, headers, **measurements):
    return client.post("/api/measurement-boy/submit-measurement", json={"measurements": measurements},
                       headers=headers)


def test_submit_skips_empty_values_and_uppercases_keys(client, make_user, shirt_order):
    order_id, item_id = shirt_order
    _, headers = make_user("MeasurementBoy")

    res = _submit(client, headers, orderId=order_id, orderItemId=item_id, itemType="Shirt", chest="40", waist="")
    assert res.status_code == 201
    data = res.json()["data"]
    assert data["totalMeasurements"] == 1
    assert data["measurements"][0]["measurementKey"] == "CHEST"
    assert data["measurements"][0]["action"] == "inserted"
    assert data["allMeasurementsDone"] is False

    res = _submit(client, headers, orderId=order_id, orderItemId=str(item_id), chest="41", waist="34")
    data = res.json()["data"]
    assert [m["action"] for m in data["measurements"]] == ["updated", "inserted"]
    assert data["allMeasurementsDone"] is True

    items = client.get(f"/api/orders/{order_id}/items", headers=headers).json()["data"]
    assert items[0]["isMeasurementDone"] is True


def test_submit_validation(client, make_user, shirt_order):
    _, item_id = shirt_order
    _, boy = make_user("MeasurementBoy")
    _, customer = make_user("Customer")

    missing = client.post("/api/measurement-boy/submit-measurement", json={}, headers=boy)
    assert missing.status_code == 400
    assert missing.json()["message"] == "Measurements object is required"

    assert _submit(client, boy, chest="40").json()["message"] == "orderItemId is required"
    assert _submit(client, boy, orderItemId="abc", chest="40").json()["message"] == "orderItemId must be a number"
    assert _submit(client, customer, orderItemId=item_id, chest="40").status_code == 403
    assert _submit(client, boy, orderItemId=item_id, notes="x").json()["message"] == "No measurement fields provided"

    res = _submit(client, boy, orderItemId=item_id, chest="", waist=None)
    assert res.status_code == 400
    assert res.json()["message"] == "No measurements were saved"


def test_completion_flag_written_once(executor, make_user, shirt_order, monkeypatch):
    order_id, item_id = shirt_order
    boy_id, _ = make_user("MeasurementBoy")
    calls = []
    original = OrderRepository.update_order_items_measurement_done

    def _counting(self, oid):
        calls.append(oid)
        return original(self, oid)

    monkeypatch.setattr(OrderRepository, "update_order_items_measurement_done", _counting)

    result = submit_measurements(
        boy_id,
        {"orderId": order_id, "orderItemId": item_id, "chest": "40", "waist": "32", "sleeve": "24"},
        UserRepository(executor), OrderRepository(executor), MeasurementRepository(executor),
    )
    assert result["allMeasurementsDone"] is True
    assert calls == [order_id]


def test_measurement_boy_orders(client, engine, make_user, shirt_order):
    order_id, item_id = shirt_order
    boy_id, headers = make_user("MeasurementBoy")
    with engine.begin() as conn:
        conn.execute(insert(models.OrderMeasurementBoyAssignment.__table__).values(
            orderId=order_id, measurementBoyId=boy_id, assignmentStatus="Assigned"))

    pending = client.get("/api/measurement-boy/orders", params={"isOrderMeasurementDone": 0}, headers=headers).json()
    assert pending["count"] == 1
    assert pending["data"][0]["isOrderMeasurementDone"] is False

    _submit(client, headers, orderId=order_id, orderItemId=item_id, chest="40", waist="32")

    done = client.get("/api/measurement-boy/orders", params={"isOrderMeasurementDone": 1}, headers=headers).json()
    assert done["count"] == 1
    order = done["data"][0]
    assert {m["measurementKey"] for m in order["orderItems"][0]["measurements"]} == {"CHEST", "WAIST"}
    assert client.get("/api/measurement-boy/orders", params={"isOrderMeasurementDone": 0},
                      headers=headers).json()["count"] == 0


def test_orders_endpoint_requires_measurement_boy(client, make_user):
    _, headers = make_user("Tailor")
    assert client.get("/api/measurement-boy/orders", headers=headers).status_code == 403


def test_unknown_order_item_saves_nothing(client, make_user):
    _, headers = make_user("MeasurementBoy")
    res = _submit(client, headers, orderItemId=424242, chest="40")
    assert res.status_code == 400
    body = res.json()
    assert body["message"] == "No measurements were saved"
    assert body["errors"][0]["field"] == "chest"


def test_failing_field_is_reported_and_others_saved(client, make_user, shirt_order, monkeypatch):
    order_id, item_id = shirt_order
    _, headers = make_user("MeasurementBoy")
    original = MeasurementRepository.insert_measurement

    def _insert(self, order_item_id, key, value, notes=None):
        if key == "WAIST":
            raise OperationalError("INSERT INTO Measurements", {}, Exception("disk I/O error"))
        return original(self, order_item_id, key, value, notes)

    monkeypatch.setattr(MeasurementRepository, "insert_measurement", _insert)

    res = _submit(client, headers, orderId=order_id, orderItemId=item_id, chest="40", waist="32")
    assert res.status_code == 201
    data = res.json()["data"]
    assert data["totalMeasurements"] == 1
    assert data["measurements"][0]["measurementKey"] == "CHEST"
    assert [e["field"] for e in data["errors"]] == ["waist"]
    assert data["allMeasurementsDone"] is False


def test_completion_check_failure_becomes_warning(client, make_user, shirt_order, monkeypatch):
    order_id, item_id = shirt_order
    _, headers = make_user("MeasurementBoy")

    def _locked(self, oid):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr(MeasurementRepository, "check_all_measurements_done", _locked)

    res = _submit(client, headers, orderId=order_id, orderItemId=item_id, chest="40", waist="32")
    assert res.status_code == 201
    body = res.json()
    assert body["data"]["totalMeasurements"] == 2
    assert body["data"]["allMeasurementsDone"] is False
    assert body["warnings"][0].startswith("Measurement completion check failed")


def test_whitespace_value_is_stored(client, make_user, shirt_order):
    _, item_id = shirt_order
    _, headers = make_user("MeasurementBoy")
    res = _submit(client, headers, orderItemId=item_id, chest=" ", waist="")
    assert res.status_code == 201
    data = res.json()["data"]
    assert data["totalMeasurements"] == 1
    assert data["measurements"][0]["measurementValue"] == " "
