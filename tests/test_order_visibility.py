from services.order_visibility import merge_orders


def test_tailor_orders_win_and_duplicates_collapse():
    tailor = [{"orderId": 1, "x": "t"}, {"orderId": 2, "x": "t"}, {"orderId": 2, "x": "t-dup"}]
    seller = [{"orderId": 2, "x": "s"}, {"orderId": 3, "x": "s"}, {"orderId": 3, "x": "s-dup"}]

    merged = merge_orders(tailor, seller)

    assert [o["orderId"] for o in merged] == [1, 2, 3]
    assert [o["orderSource"] for o in merged] == ["Tailor", "Tailor", "Seller"]
    assert merged[1]["x"] == "t"
    assert merged[2]["x"] == "s"


def test_merge_of_nothing_is_empty():
    assert merge_orders([], []) == []
