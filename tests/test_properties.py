def test_requires_authentication(client):
    response = client.get("/api/properties")
    assert response.status_code == 401
    assert response.json()["detail"] == "Unauthorized. Please sign in."


def test_create_and_list(client, auth_headers, villa):
    assert villa["id"]
    assert villa["createdAt"] == villa["updatedAt"]
    assert villa["images"] == []
    assert villa["features"] == []
    assert villa["status"] == "available"

    response = client.get("/api/properties", headers=auth_headers)
    assert response.status_code == 200
    assert [p["id"] for p in response.json()] == [villa["id"]]


def test_missing_name_is_rejected(client, auth_headers, store):
    response = client.post(
        "/api/properties",
        json={"type": "villa", "location": "Muscat", "price": 50000, "area": 300},
        headers=auth_headers,
    )

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["errors"] == ["Property name is required"]
    assert store.load()["properties"] == []


def test_all_violations_reported_together(client, auth_headers):
    response = client.post(
        "/api/properties",
        json={"name": "  ", "price": 0, "area": -5},
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert response.json()["errors"] == [
        "Property name is required",
        "Property type is required",
        "Location is required",
        "Price must be greater than 0",
        "Area must be greater than 0",
    ]
    assert response.json()["detail"].startswith("Property name is required, Property type")


def test_extra_fields_are_kept(client, auth_headers):
    response = client.post(
        "/api/properties",
        json={
            "name": "Flat 3", "type": "apartment", "location": "Seeb",
            "price": 120, "area": 90, "bedrooms": 2,
        },
        headers=auth_headers,
    )

    assert response.status_code == 201
    assert response.json()["bedrooms"] == 2


def test_get_update_delete(client, auth_headers, villa):
    url = f"/api/properties/{villa['id']}"

    assert client.get(url, headers=auth_headers).json()["name"] == "Villa A"

    updated = client.put(url, json={"status": "rented", "price": 55000}, headers=auth_headers)
    assert updated.status_code == 200
    assert updated.json()["status"] == "rented"
    assert updated.json()["price"] == 55000
    assert updated.json()["location"] == "Muscat"

    assert client.delete(url, headers=auth_headers).json() == {"success": True}
    missing = client.get(url, headers=auth_headers)
    assert missing.status_code == 404
    assert missing.json()["detail"] == "Property not found"


def test_update_unknown_id(client, auth_headers):
    response = client.put("/api/properties/nope", json={"name": "X"}, headers=auth_headers)
    assert response.status_code == 404


def test_non_numeric_price_reported_with_other_violations(client, auth_headers, store):
    response = client.post(
        "/api/properties",
        json={"type": "villa", "location": "Muscat", "price": "abc", "area": "300"},
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert response.json()["errors"] == ["Property name is required", "Price must be greater than 0"]
    assert store.load()["properties"] == []


def test_numeric_strings_are_stored_as_numbers(client, auth_headers):
    response = client.post(
        "/api/properties",
        json={"name": "Flat 7", "type": "apartment", "location": "Seeb", "price": "120.5", "area": "90"},
        headers=auth_headers,
    )

    assert response.status_code == 201
    assert response.json()["price"] == 120.5
    assert response.json()["area"] == 90


def test_duplicate_id_rejected(client, auth_headers, villa):
    response = client.post(
        "/api/properties",
        json={"id": villa["id"], "name": "Copy", "type": "villa", "location": "Muscat", "price": 1, "area": 1},
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert response.json()["errors"] == ["Property with this ID already exists"]
    assert len(client.get("/api/properties", headers=auth_headers).json()) == 1
