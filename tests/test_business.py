PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


def _create_business(client, headers, name="Stitch Studio"):
    res = client.post("/api/business", json={"businessName": name, "workingCity": "Pune"}, headers=headers)
    assert res.status_code in (200, 201)
    return res.json()["data"]


def test_create_then_update_business(client, make_user):
    user_id, headers = make_user("Tailor")
    res = client.post("/api/business", json={"businessName": "Stitch Studio"}, headers=headers)
    assert res.status_code == 201
    assert res.json()["data"]["userId"] == user_id

    res = client.post("/api/business", json={"businessName": "Stitch Studio 2"}, headers=headers)
    assert res.status_code == 200
    assert res.json()["data"]["businessName"] == "Stitch Studio 2"


def test_update_by_business_id_rejects_unknown_field(client, make_user):
    _, headers = make_user("Tailor")
    business = _create_business(client, headers)

    res = client.put(f"/api/business/{business['businessId']}", json={"bogus": 1}, headers=headers)
    assert res.status_code == 400
    assert res.json()["fields"] == ["bogus"]

    res = client.put(f"/api/business/{business['businessId']}", json={"specialization": "Sherwani"}, headers=headers)
    assert res.status_code == 200
    assert res.json()["data"]["specialization"] == "Sherwani"


def test_update_missing_business_is_404(client, make_user):
    _, headers = make_user("Tailor")
    res = client.put("/api/business/999", json={"specialization": "Kurta"}, headers=headers)
    assert res.status_code == 404


def test_soft_delete_hides_business(client, make_user):
    user_id, headers = make_user("Seller")
    _create_business(client, headers)

    assert client.delete(f"/api/business/{user_id}", headers=headers).status_code == 200
    assert client.get(f"/api/business/{user_id}", headers=headers).status_code == 404
    listed = client.get("/api/businesses", headers=headers).json()
    assert listed["count"] == 0


def test_availability_upsert_is_idempotent(client, make_user):
    _, headers = make_user("Tailor")
    business_id = _create_business(client, headers)["businessId"]
    url = f"/api/business/{business_id}/availability"

    first = client.post(url, json={"date": "2026-03-15", "isClosed": True}, headers=headers)
    assert first.status_code == 201
    second = client.post(url, json={"availabilityDate": "2026-03-15", "isClosed": False}, headers=headers)
    assert second.status_code == 200
    assert second.json()["data"]["availabilityId"] == first.json()["data"]["availabilityId"]

    rows = client.get(url, headers=headers).json()["data"]
    assert len(rows) == 1
    assert rows[0]["isClosed"] is False


def test_item_prices_upsert(client, make_user):
    _, headers = make_user("Tailor")
    business_id = _create_business(client, headers)["businessId"]
    url = f"/api/business/{business_id}/item-prices"

    res = client.post(url, json={"tailorItemPrices": [{"itemId": 1, "price": 450}, {"itemId": 2, "price": 900}]},
                      headers=headers)
    assert res.status_code == 200
    assert [r["action"] for r in res.json()["data"]] == ["inserted", "inserted"]

    res = client.post(url, json={"tailorItemPrices": [{"itemId": 1, "price": 500}]}, headers=headers)
    assert res.json()["data"][0]["action"] == "updated"
    prices = {r["itemId"]: r["price"] for r in client.get(url, headers=headers).json()["data"]}
    assert prices == {1: 500, 2: 900}


def test_logo_upload(client, make_user, uploads):
    _, headers = make_user("Seller")
    business_id = _create_business(client, headers)["businessId"]

    res = client.post(f"/api/business/{business_id}/upload-logo",
                      files={"logo": ("logo.png", PNG, "image/png")}, headers=headers)
    assert res.status_code == 200
    url = res.json()["data"]["businessLogo"]
    assert url.startswith("/uploads/business/")
    assert (uploads.root / url[len("/uploads/"):]).exists()

    res = client.post(f"/api/business/{business_id}/upload-logo",
                      files={"logo": ("logo.txt", b"plain text file", "text/plain")}, headers=headers)
    assert res.status_code == 400
