"""Inventory collections: reference checks, delete conflicts and box detaching."""

UNITS = "/api/inventory-storage-units"
BOXES = "/api/inventory-boxes"
ITEMS = "/api/inventory-items"


async def _post(client, url, payload, headers):
    response = await client.post(url, json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


async def test_storage_unit_location_header(client, auth_headers):
    response = await client.post(UNITS, json={"name": "Rack A"}, headers=auth_headers)
    assert response.status_code == 201
    assert response.headers["Location"] == f"{UNITS}/{response.json()['id']}"


async def test_delete_empty_storage_unit(client, auth_headers):
    unit = await _post(client, UNITS, {"name": "Rack A"}, auth_headers)
    assert (await client.delete(f"{UNITS}/{unit['id']}", headers=auth_headers)).status_code == 204
    assert (await client.get(f"{UNITS}/{unit['id']}", headers=auth_headers)).status_code == 404


async def test_delete_storage_unit_with_live_box_conflicts(client, auth_headers):
    unit = await _post(client, UNITS, {"name": "Rack A"}, auth_headers)
    box = await _post(client, BOXES, {"number": 1, "storageUnitId": unit["id"]}, auth_headers)

    response = await client.delete(f"{UNITS}/{unit['id']}", headers=auth_headers)
    assert response.status_code == 409
    assert response.json()["error"]["type"] == "conflict"
    assert (await client.get(f"{UNITS}/{unit['id']}", headers=auth_headers)).status_code == 200

    assert (await client.delete(f"{BOXES}/{box['id']}", headers=auth_headers)).status_code == 204
    assert (await client.delete(f"{UNITS}/{unit['id']}", headers=auth_headers)).status_code == 204


async def test_delete_storage_unit_with_live_item_conflicts(client, auth_headers):
    unit = await _post(client, UNITS, {"name": "Rack B"}, auth_headers)
    item = await _post(client, ITEMS, {"name": "Lamp", "storageUnitId": unit["id"]}, auth_headers)

    assert (await client.delete(f"{UNITS}/{unit['id']}", headers=auth_headers)).status_code == 409

    assert (await client.delete(f"{ITEMS}/{item['id']}", headers=auth_headers)).status_code == 204
    assert (await client.delete(f"{UNITS}/{unit['id']}", headers=auth_headers)).status_code == 204


async def test_deleting_box_detaches_items(client, auth_headers):
    unit = await _post(client, UNITS, {"name": "Rack C"}, auth_headers)
    box = await _post(client, BOXES, {"number": 5, "storageUnitId": unit["id"]}, auth_headers)
    item = await _post(
        client, ITEMS, {"name": "Cable", "boxId": box["id"], "storageUnitId": unit["id"]}, auth_headers
    )

    assert (await client.delete(f"{BOXES}/{box['id']}", headers=auth_headers)).status_code == 204

    fetched = (await client.get(f"{ITEMS}/{item['id']}", headers=auth_headers)).json()
    assert fetched["boxId"] is None
    assert fetched["storageUnitId"] == unit["id"]
    assert fetched["modifiedOn"] is not None
    assert fetched["deletedOn"] is None


async def test_box_rejects_deleted_storage_unit(client, auth_headers):
    unit = await _post(client, UNITS, {"name": "Rack D"}, auth_headers)
    await client.delete(f"{UNITS}/{unit['id']}", headers=auth_headers)

    response = await client.post(BOXES, json={"number": 2, "storageUnitId": unit["id"]}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Invalid storage unit ID."


async def test_item_rejects_deleted_box(client, auth_headers):
    box = await _post(client, BOXES, {"number": 9}, auth_headers)
    await client.delete(f"{BOXES}/{box['id']}", headers=auth_headers)

    response = await client.post(ITEMS, json={"name": "Fuse", "boxId": box["id"]}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Invalid box ID."


async def test_update_checks_references(client, auth_headers):
    item = await _post(client, ITEMS, {"name": "Fuse"}, auth_headers)
    response = await client.put(
        f"{ITEMS}/{item['id']}", json={"name": "Fuse", "storageUnitId": 12345}, headers=auth_headers
    )
    assert response.status_code == 400


async def test_update_missing_row_is_404_before_reference_check(client, auth_headers):
    response = await client.put(f"{ITEMS}/777", json={"name": "Fuse", "boxId": 12345}, headers=auth_headers)
    assert response.status_code == 404


async def test_unreferenced_item_is_allowed(client, auth_headers):
    item = await _post(client, ITEMS, {"name": "Loose screw"}, auth_headers)
    assert item["boxId"] is None
    assert item["storageUnitId"] is None
