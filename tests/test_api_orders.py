import pytest

SHIPPING = {
    "shippingAddress": "1 Main St",
    "shippingCity": "Springfield",
    "shippingState": "IL",
    "shippingZipCode": "62701",
    "shippingCountry": "US",
    "paymentMethod": "credit_card",
}


@pytest.fixture
def filled_cart(user_client, dress, jacket):
    user_client.post("/api/cart", json={"productId": dress.id, "quantity": 2})
    user_client.post("/api/cart", json={"productId": jacket.id, "quantity": 1})


def test_place_order(user_client, filled_cart, dress, jacket, user):
    response = user_client.post("/api/orders", json=SHIPPING)

    assert response.status_code == 201
    order = response.json()
    assert order["userId"] == user.id
    assert order["total"] == 169.97
    assert order["status"] == "pending"
    assert order["shippingCity"] == "Springfield"
    prices = {item["productId"]: item["price"] for item in order["items"]}
    assert prices == {dress.id: 49.99, jacket.id: 69.99}
    assert all(item["product"] is not None for item in order["items"])
    assert user_client.get("/api/cart").json() == []


def test_order_survives_price_change(user_client, admin_client, filled_cart, dress):
    order_id = user_client.post("/api/orders", json=SHIPPING).json()["id"]
    admin_client.put(f"/api/admin/products/{dress.id}", json={"price": 5.0, "salePrice": 4.0})

    order = user_client.get(f"/api/orders/{order_id}").json()
    assert order["total"] == 169.97
    assert sorted(item["price"] for item in order["items"]) == [49.99, 69.99]


def test_empty_cart(user_client, storage):
    response = user_client.post("/api/orders", json=SHIPPING)
    assert response.status_code == 400
    assert response.json() == {"message": "Cart is empty"}
    assert storage.get_all_orders() == []


@pytest.mark.parametrize("field", sorted(SHIPPING))
def test_blank_shipping_field_keeps_cart(user_client, filled_cart, storage, field):
    response = user_client.post("/api/orders", json=dict(SHIPPING, **{field: "   "}))
    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == f"body.{field}"
    assert len(user_client.get("/api/cart").json()) == 2
    assert storage.get_all_orders() == []


def test_missing_product_keeps_cart(user_client, admin_client, filled_cart, dress, storage):
    admin_client.delete(f"/api/admin/products/{dress.id}")

    response = user_client.post("/api/orders", json=SHIPPING)
    assert response.status_code == 404
    assert response.json() == {"message": f"Product with ID {dress.id} not found"}
    assert len(user_client.get("/api/cart").json()) == 2
    assert storage.get_all_orders() == []


def test_list_own_orders(user_client, other_client, filled_cart, dress):
    user_client.post("/api/orders", json=SHIPPING)
    other_client.post("/api/cart", json={"productId": dress.id})
    other_client.post("/api/orders", json=SHIPPING)

    mine = user_client.get("/api/orders").json()
    assert len(mine) == 1
    assert len(mine[0]["items"]) == 2


def test_order_visibility(user_client, other_client, admin_client, filled_cart):
    order_id = user_client.post("/api/orders", json=SHIPPING).json()["id"]

    assert user_client.get(f"/api/orders/{order_id}").status_code == 200
    assert admin_client.get(f"/api/orders/{order_id}").status_code == 200
    assert other_client.get(f"/api/orders/{order_id}").status_code == 403
    assert user_client.get("/api/orders/999").status_code == 404


def test_orders_require_session(client):
    assert client.get("/api/orders").status_code == 401
    assert client.post("/api/orders", json=SHIPPING).status_code == 401
