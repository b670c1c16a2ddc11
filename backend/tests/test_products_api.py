def test_health(http):
    assert http.get("/").json() == {"status": "ok"}


def test_list_products(http):
    response = http.get("/api/products")
    body = response.json()

    assert response.status_code == 200
    assert body["success"] is True
    assert body["message"] == "Successfully retrieved 3 products"
    assert body["errors"] == {}
    first = body["data"][0]
    assert first["name"] == "Laptop Computer"
    assert first["stockQuantity"] == 15
    assert first["price"] == 1299.99


def test_get_missing_product(http):
    response = http.get("/api/products/999")
    body = response.json()

    assert response.status_code == 404
    assert body["success"] is False
    assert body["statusCode"] == 404
    assert body["message"] == "Product with ID 999 not found"
    assert body["data"] is None


def test_non_positive_ids_are_rejected(http):
    for method in ("GET", "PUT", "DELETE"):
        kwargs = {"json": {}} if method == "PUT" else {}
        response = http.request(method, "/api/products/0", **kwargs)
        body = response.json()
        assert response.status_code == 400
        assert body["message"] == "Invalid product ID"
        assert "id" in body["errors"]


def test_non_integer_id_is_rejected(http):
    response = http.get("/api/products/abc")
    body = response.json()

    assert response.status_code == 400
    assert body["message"] == "Invalid product data"
    assert "product_id" in body["errors"]


def test_create_product(http):
    response = http.post(
        "/api/products",
        json={"name": "Widget", "price": 9.99, "stockQuantity": 0, "reorderLevel": 1, "category": "Parts"},
    )
    body = response.json()

    assert response.status_code == 201
    assert body["message"] == "Product created successfully"
    assert body["data"]["id"] == 4
    assert body["data"]["isActive"] is True
    assert response.headers["location"] == "/api/products/4"
    assert http.get("/api/products/4").json()["data"]["name"] == "Widget"


def test_create_reports_name_before_price(http):
    response = http.post("/api/products", json={"name": "", "price": 0})
    body = response.json()

    assert response.status_code == 400
    assert body["success"] is False
    assert body["message"] == "Product name is required"
    assert body["errors"] == {"name": ["Product name is required"]}
    assert len(http.get("/api/products").json()["data"]) == 3


def test_create_rejects_non_positive_price(http):
    response = http.post("/api/products", json={"name": "Widget", "price": 0})
    body = response.json()

    assert response.status_code == 400
    assert body["message"] == "Product price must be greater than 0"
    assert body["errors"] == {"price": ["Product price must be greater than 0"]}


def test_create_rejects_missing_fields(http):
    response = http.post("/api/products", json={"description": "no name or price"})
    body = response.json()

    assert response.status_code == 400
    assert body["message"] == "Invalid product data"
    assert set(body["errors"]) == {"name", "price"}


def test_create_rejects_short_name(http):
    response = http.post("/api/products", json={"name": "X", "price": 1})
    assert response.status_code == 400
    assert response.json()["errors"]["name"] == ["Product name must be between 2 and 100 characters"]


def test_update_product(http):
    response = http.put("/api/products/2", json={"stockQuantity": 1})
    body = response.json()

    assert response.status_code == 200
    assert body["data"]["stockQuantity"] == 1
    assert body["data"]["name"] == "Office Chair"
    assert body["data"]["lastUpdatedDate"] is not None


def test_update_rejects_over_long_text(http):
    response = http.put(
        "/api/products/1",
        json={"name": "X" * 300, "description": "d" * 2000, "category": "c" * 400},
    )
    body = response.json()

    assert response.status_code == 400
    assert body["message"] == "Invalid product data"
    assert set(body["errors"]) == {"name", "description", "category"}
    stored = http.get("/api/products/1").json()["data"]
    assert stored["name"] == "Laptop Computer"
    assert stored["category"] == "Electronics"


def test_update_rejects_short_name_but_ignores_blank_name(http):
    short = http.put("/api/products/1", json={"name": "X"})
    blank = http.put("/api/products/1", json={"name": "  ", "stockQuantity": 4})

    assert short.status_code == 400
    assert short.json()["errors"]["name"] == ["Product name must be between 2 and 100 characters"]
    assert blank.status_code == 200
    assert blank.json()["data"]["name"] == "Laptop Computer"
    assert blank.json()["data"]["stockQuantity"] == 4


def test_malformed_body_is_reported_before_invalid_id(http):
    """The body is validated before the route runs, so its errors win over the id check."""
    response = http.put("/api/products/0", json={"price": "not a number"})
    body = response.json()

    assert response.status_code == 400
    assert body["message"] == "Invalid product data"
    assert "price" in body["errors"]


def test_update_missing_product(http):
    response = http.put("/api/products/999", json={"name": "Ghost"})
    assert response.status_code == 404


def test_delete_product(http):
    first = http.delete("/api/products/1")
    second = http.delete("/api/products/1")

    assert first.status_code == 200
    assert first.json()["data"] is True
    assert second.status_code == 404
    assert http.get("/api/products/1").status_code == 404
    assert [p["id"] for p in http.get("/api/products").json()["data"]] == [2, 3]


def test_low_stock_list(http):
    response = http.get("/api/products/low-stock/list")
    body = response.json()

    assert response.status_code == 200
    assert body["message"] == "Found 1 products with low stock"
    assert [p["name"] for p in body["data"]] == ["Wireless Mouse"]


def test_cors_allows_other_origins(http):
    response = http.options(
        "/api/products",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
