"""Storage units, boxes and items outside the inventory module."""


async def _post(client, url, payload, headers):
    response = await client.post(url, json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


async def test_storage_unit_crud(client, auth_headers):
    unit = await _post(client, "/api/storageunits", {"name": "Garage", "type": "Shelf"}, auth_headers)
    assert unit["type"] == "Shelf"

    updated = await client.put(
        f"/api/storageunits/{unit['id']}", json={"name": "Garage", "type": None}, headers=auth_headers
    )
    assert updated.status_code == 204
    fetched = (await client.get(f"/api/storageunits/{unit['id']}", headers=auth_headers)).json()
    assert fetched["type"] is None


async def test_storage_unit_type_limit(client, auth_headers):
    response = await client.post(
        "/api/storageunits", json={"name": "Garage", "type": "t" * 101}, headers=auth_headers
    )
    assert response.status_code == 400


async def test_box_in_storage_unit(client, auth_headers):
    unit = await _post(client, "/api/storageunits", {"name": "Attic"}, auth_headers)
    box = await _post(client, "/api/boxes", {"number": 7, "storageUnitId": unit["id"]}, auth_headers)
    assert box["number"] == 7
    assert box["storageUnitId"] == unit["id"]


async def test_box_number_must_be_positive(client, auth_headers):
    for number in (0, -3):
        response = await client.post("/api/boxes", json={"number": number}, headers=auth_headers)
        assert response.status_code == 400


async def test_box_with_unknown_storage_unit(client, auth_headers):
    response = await client.post("/api/boxes", json={"number": 1, "storageUnitId": 404}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Invalid storage unit ID."


async def test_item_references(client, auth_headers):
    unit = await _post(client, "/api/storageunits", {"name": "Basement"}, auth_headers)
    box = await _post(client, "/api/boxes", {"number": 1, "storageUnitId": unit["id"]}, auth_headers)
    item = await _post(
        client,
        "/api/items",
        {"name": "Drill", "description": "Cordless", "boxId": box["id"], "storageUnitId": unit["id"]},
        auth_headers,
    )
    assert item["boxId"] == box["id"]
    assert item["description"] == "Cordless"

    bad_box = await client.post("/api/items", json={"name": "Saw", "boxId": 999}, headers=auth_headers)
    assert bad_box.status_code == 400
    assert bad_box.json()["error"]["message"] == "Invalid box ID."


async def test_item_description_limit(client, auth_headers):
    response = await client.post(
        "/api/items", json={"name": "Saw", "description": "d" * 1001}, headers=auth_headers
    )
    assert response.status_code == 400


async def test_storage_unit_delete_is_unconditional(client, auth_headers):
    unit = await _post(client, "/api/storageunits", {"name": "Shed"}, auth_headers)
    await _post(client, "/api/boxes", {"number": 3, "storageUnitId": unit["id"]}, auth_headers)

    response = await client.delete(f"/api/storageunits/{unit['id']}", headers=auth_headers)
    assert response.status_code == 204


async def test_box_number_upper_bound(client, auth_headers):
    largest = await client.post("/api/boxes", json={"number": 2147483647}, headers=auth_headers)
    assert largest.status_code == 201
    assert largest.json()["number"] == 2147483647

    overflow = await client.post("/api/boxes", json={"number": 2147483648}, headers=auth_headers)
    assert overflow.status_code == 400
    assert "number" in overflow.json()["error"]["details"]
