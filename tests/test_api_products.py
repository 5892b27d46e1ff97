from conftest import make_product


def test_list_all(client, dress, jacket, scarf):
    response = client.get("/api/products")
    assert response.status_code == 200
    assert [p["name"] for p in response.json()] == [dress.name, jacket.name, scarf.name]


def test_product_json_is_camel_case(client, jacket):
    body = client.get(f"/api/products/{jacket.id}").json()
    assert body["salePrice"] == 69.99
    assert body["subCategory"] == "shirts"
    assert body["imageUrls"] == ["https://img.example.com/1.jpg"]
    assert body["isFeatured"] is True
    assert body["inStock"] is True
    assert "createdAt" in body


def test_filters(client, dress, jacket, scarf):
    def names(**params):
        return [p["name"] for p in client.get("/api/products", params=params).json()]

    assert names(category="mens") == [jacket.name]
    assert names(subCategory="scarves") == [scarf.name]
    assert names(featured="true") == [jacket.name]
    assert names(newItems="true") == [scarf.name]
    assert names(category="shoes") == []


def test_category_takes_precedence_over_search(client, dress, jacket):
    response = client.get("/api/products", params={"category": "womens", "search": "denim"})
    assert [p["name"] for p in response.json()] == [dress.name]


def test_search_denim(client, jacket, scarf):
    response = client.get("/api/products", params={"search": "denim"})
    assert [p["name"] for p in response.json()] == ["Classic Denim Jacket"]


def test_get_missing_product(client):
    response = client.get("/api/products/404")
    assert response.status_code == 404
    assert response.json() == {"message": "Product not found"}


def test_get_product_bad_id(client):
    response = client.get("/api/products/abc")
    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "path.product_id"


def test_reviews_flow(client, user_client, dress):
    created = user_client.post(f"/api/products/{dress.id}/reviews", json={"rating": 5, "comment": "Lovely"})
    assert created.status_code == 201
    assert created.json()["productId"] == dress.id

    listed = client.get(f"/api/products/{dress.id}/reviews").json()
    assert [r["comment"] for r in listed] == ["Lovely"]


def test_review_requires_session(client, dress):
    assert client.post(f"/api/products/{dress.id}/reviews", json={"rating": 5}).status_code == 401


def test_review_rating_bounds(user_client, dress):
    assert user_client.post(f"/api/products/{dress.id}/reviews", json={"rating": 6}).status_code == 400
    assert user_client.post(f"/api/products/{dress.id}/reviews", json={"rating": 0}).status_code == 400


def test_review_unknown_product(user_client):
    assert user_client.post("/api/products/77/reviews", json={"rating": 4}).status_code == 404


def test_delete_review_by_author_other_and_admin(user_client, other_client, admin_client, dress, storage):
    review_id = user_client.post(f"/api/products/{dress.id}/reviews", json={"rating": 4}).json()["id"]
    path = f"/api/products/{dress.id}/reviews/{review_id}"

    assert other_client.delete(path).status_code == 403
    assert user_client.delete(path).status_code == 204
    assert storage.get_review(review_id) is None
    assert user_client.delete(path).status_code == 404

    second = user_client.post(f"/api/products/{dress.id}/reviews", json={"rating": 2}).json()["id"]
    assert admin_client.delete(f"/api/products/{dress.id}/reviews/{second}").status_code == 204


def test_admin_creates_product(admin_client, client):
    payload = {
        "name": "Leather Tote Bag",
        "description": "Spacious tote.",
        "price": 119.99,
        "category": "accessories",
        "subCategory": "bags",
        "imageUrls": ["https://img.example.com/tote.jpg"],
        "isNew": True,
    }
    response = admin_client.post("/api/admin/products", json=payload)
    assert response.status_code == 201
    body = response.json()
    assert body["id"] == 1
    assert body["salePrice"] is None
    assert client.get("/api/products/1").json()["name"] == "Leather Tote Bag"


def test_admin_create_product_validation(admin_client):
    response = admin_client.post("/api/admin/products", json={"name": "Nameless", "price": -1})
    assert response.status_code == 400
    fields = {err["field"] for err in response.json()["errors"]}
    assert {"body.price", "body.category", "body.imageUrls"} <= fields


def test_admin_updates_product(admin_client, jacket):
    response = admin_client.put(f"/api/admin/products/{jacket.id}", json={"price": 79.99, "salePrice": None})
    assert response.status_code == 200
    body = response.json()
    assert body["price"] == 79.99
    assert body["salePrice"] is None
    assert body["name"] == jacket.name


def test_admin_update_ignores_null_for_required_fields(admin_client, jacket):
    response = admin_client.put(f"/api/admin/products/{jacket.id}", json={"name": None})
    assert response.status_code == 200
    assert response.json()["name"] == jacket.name


def test_admin_update_missing_product(admin_client):
    assert admin_client.put("/api/admin/products/9", json={"price": 1}).status_code == 404


def test_admin_deletes_product(admin_client, client, dress):
    assert admin_client.delete(f"/api/admin/products/{dress.id}").status_code == 204
    assert client.get(f"/api/products/{dress.id}").status_code == 404


def test_delete_missing_product_is_404(admin_client):
    response = admin_client.delete("/api/admin/products/1234")
    assert response.status_code == 404
    assert response.json() == {"message": "Product not found"}


def test_product_admin_routes_need_admin(client, user_client, storage):
    product = make_product(storage, "Hat", 34.99)
    assert client.post("/api/admin/products", json={}).status_code == 401
    assert user_client.delete(f"/api/admin/products/{product.id}").status_code == 403
    assert storage.get_product(product.id) is not None
