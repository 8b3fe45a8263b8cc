async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"message": "Healthy"}


async def test_alive(client):
    response = await client.get("/alive")
    assert response.status_code == 200
    assert response.json() == {"message": "Alive"}


async def test_correlation_id_is_echoed(client):
    response = await client.get("/health", headers={"X-Correlation-ID": "abc-123"})
    assert response.headers["X-Correlation-ID"] == "abc-123"


async def test_correlation_id_is_generated(client):
    response = await client.get("/health")
    assert response.headers.get("X-Correlation-ID")
