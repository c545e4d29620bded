from sqlalchemy.exc import OperationalError

from services.product_repository import ProductRepository

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32

FORM = {
    "title": "Premium Cotton Shirting",
    "brand": "Raymond",
    "category": "Shirting",
    "price_mrp": "1200",
    "price_sale": "999",
    "fabric": "Cotton",
}


def test_create_product_with_price_and_image(client, make_user, uploads):
    user_id, headers = make_user("Seller")
    res = client.post("/api/products", data=FORM, files=[("images", ("front.png", PNG, "image/png"))],
                      headers=headers)
    assert res.status_code == 201
    body = res.json()
    product = body["data"]
    assert product["brand_name"] == "Raymond"
    assert product["category_name"] == "Shirting"
    assert product["price"]["price_mrp"] == 1200
    assert product["price"]["price_sale"] == 999
    assert product["price"]["currency_code"] == "INR"
    assert body["imagesUploaded"] == 1
    assert "warnings" not in body
    assert product["images"][0]["is_primary"] is True

    listed = client.get("/api/products", params={"user_id": user_id}, headers=headers).json()
    assert listed["count"] == 1
    assert listed["pagination"]["total"] == 1


def test_sale_price_must_be_below_mrp(client, make_user):
    _, headers = make_user("Seller")
    res = client.post("/api/products", data=dict(FORM, price_sale="1500"), headers=headers)
    assert res.status_code == 400
    assert res.json()["errors"][0]["message"] == "Sale price must be less than MRP"


def test_unknown_brand_name_is_rejected(client, make_user):
    _, headers = make_user("Seller")
    res = client.post("/api/products", data=dict(FORM, brand="Acme"), headers=headers)
    assert res.status_code == 400
    assert res.json()["message"] == 'Brand "Acme" not found. Please create the brand first.'


def test_numeric_brand_resolves_by_id(client, make_user):
    _, headers = make_user("Seller")
    res = client.post("/api/products", data=dict(FORM, brand="1"), headers=headers)
    assert res.status_code == 201
    assert res.json()["data"]["brand_id"] == 1

    res = client.post("/api/products", data=dict(FORM, brand="99"), headers=headers)
    assert res.status_code == 400
    assert res.json()["message"] == "Brand with ID 99 not found"


def test_bad_image_becomes_warning(client, make_user):
    _, headers = make_user("Seller")
    res = client.post("/api/products", data=FORM, files=[("images", ("notes.txt", b"not an image at all", "text/plain"))],
                      headers=headers)
    assert res.status_code == 201
    body = res.json()
    assert body["imagesUploaded"] == 0
    assert body["warnings"][0].startswith("image 'notes.txt' failed")


def test_update_checks_sale_against_stored_mrp(client, make_user):
    _, headers = make_user("Seller")
    product_id = client.post("/api/products", data=FORM, headers=headers).json()["data"]["id"]

    res = client.put(f"/api/products/{product_id}", data={"price_sale": "1300"}, headers=headers)
    assert res.status_code == 400

    res = client.put(f"/api/products/{product_id}", data={"price_sale": "899", "color": "Blue"}, headers=headers)
    assert res.status_code == 200
    product = res.json()["data"]
    assert product["price"]["price_sale"] == 899
    assert product["color"] == "Blue"
    assert product["title"] == FORM["title"]


def test_delete_product(client, make_user):
    user_id, headers = make_user("Seller")
    product_id = client.post("/api/products", data=FORM, headers=headers).json()["data"]["id"]

    res = client.delete(f"/api/products/{product_id}", headers=headers)
    assert res.status_code == 200
    assert client.get(f"/api/products/{product_id}", headers=headers).status_code == 404
    assert client.get("/api/products", params={"user_id": user_id}, headers=headers).json()["count"] == 0
    assert client.delete(f"/api/products/{product_id}", headers=headers).status_code == 404


def test_delete_product_when_price_step_fails(client, make_user, monkeypatch):
    _, headers = make_user("Seller")
    product_id = client.post("/api/products", data=FORM, headers=headers).json()["data"]["id"]

    def _failing(self, pid):
        raise OperationalError("DELETE FROM product_prices", {}, Exception("database is locked"))

    monkeypatch.setattr(ProductRepository, "delete_product_price", _failing)

    res = client.delete(f"/api/products/{product_id}", headers=headers)
    assert res.status_code == 200
    assert res.json()["warnings"][0].startswith("price failed: ")
    assert client.get(f"/api/products/{product_id}", headers=headers).status_code == 404


def test_list_requires_user_id(client, make_user):
    _, headers = make_user("Seller")
    assert client.get("/api/products", headers=headers).status_code == 400


def test_lookups(client, make_user):
    _, headers = make_user("Seller")
    brands = client.get("/api/products/getAllBrands", headers=headers).json()
    assert [b["name"] for b in brands["data"]] == ["Raymond"]
    types = client.get("/api/products/getAllProductTypes", headers=headers).json()
    assert "UnstitchedFabricProduct" in [t["name"] for t in types["data"]]
