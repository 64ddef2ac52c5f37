import uuid

import pytest
from httpx import AsyncClient

from orders_api.core.config import settings
from orders_api.main import app
from orders_api.repositories import InMemoryOrderRepository


def order_payload(**overrides):
    payload = {
        "customer_name": "Alice",
        "email": "a@b.com",
        "items": [{"name": "Widget", "qty": 2, "unit_price_cents": 500}],
    }
    payload.update(overrides)
    return payload


@pytest.mark.asyncio
async def test_create_order_success(client: AsyncClient):
    response = await client.post("/orders", json=order_payload())

    assert response.status_code == 201
    data = response.json()

    assert set(data) == {"id", "status"}
    assert data["status"] == "Pending"
    uuid.UUID(data["id"])


@pytest.mark.asyncio
async def test_get_order_success(client: AsyncClient):
    create_response = await client.post("/orders", json=order_payload(items=[
        {"name": "A", "qty": 2, "unit_price_cents": 500},
        {"name": "B", "qty": 1, "unit_price_cents": 250},
    ]))
    order_id = create_response.json()["id"]

    response = await client.get(f"/orders/{order_id}")

    assert response.status_code == 200
    data = response.json()

    assert data["id"] == order_id
    assert data["customer_name"] == "Alice"
    assert data["email"] == "a@b.com"
    assert data["total_cents"] == 1250
    assert data["status"] == "Pending"
    assert data["created_at"] == data["updated_at"]
    assert data["items"] == [
        {"name": "A", "qty": 2, "unit_price_cents": 500},
        {"name": "B", "qty": 1, "unit_price_cents": 250},
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides",
    [
        {"items": []},
        {"customer_name": ""},
        {"customer_name": "   "},
        {"email": "not-an-email"},
        {"items": [{"name": "Widget", "qty": 0, "unit_price_cents": 500}]},
        {"items": [{"name": "Widget", "qty": -1, "unit_price_cents": 500}]},
    ]
)
async def test_create_order_invalid(client: AsyncClient, overrides):
    response = await client.post("/orders", json=order_payload(**overrides))

    assert response.status_code == 400
    assert set(response.json()) == {"error"}

    listed = await client.get("/orders")
    assert listed.json() == []


@pytest.mark.asyncio
async def test_create_order_missing_field(client: AsyncClient):
    response = await client.post("/orders", json={"customer_name": "Alice", "items": []})

    assert response.status_code == 400
    assert "email" in response.json()["error"]


@pytest.mark.asyncio
async def test_list_orders(client: AsyncClient):
    assert (await client.get("/orders")).json() == []

    first = (await client.post("/orders", json=order_payload(customer_name="One"))).json()["id"]
    second = (await client.post("/orders", json=order_payload(customer_name="Two"))).json()["id"]

    response = await client.get("/orders")

    assert response.status_code == 200
    assert {o["id"] for o in response.json()} == {first, second}


@pytest.mark.asyncio
async def test_update_status(client: AsyncClient):
    order_id = (await client.post("/orders", json=order_payload())).json()["id"]
    before = (await client.get(f"/orders/{order_id}")).json()

    response = await client.patch(f"/orders/{order_id}/status", json={"status": "Shipped"})

    assert response.status_code == 200
    assert response.json()["status"] == "Shipped"

    fetched = (await client.get(f"/orders/{order_id}")).json()
    assert fetched["status"] == "Shipped"
    assert fetched["updated_at"] != before["updated_at"]
    assert fetched["created_at"] == before["created_at"]


@pytest.mark.asyncio
async def test_update_status_unknown_value(client: AsyncClient):
    order_id = (await client.post("/orders", json=order_payload())).json()["id"]

    response = await client.patch(f"/orders/{order_id}/status", json={"status": "Lost"})

    assert response.status_code == 400
    assert "error" in response.json()


@pytest.mark.asyncio
async def test_delete_order(client: AsyncClient):
    order_id = (await client.post("/orders", json=order_payload())).json()["id"]

    response = await client.delete(f"/orders/{order_id}")

    assert response.status_code == 204
    assert response.content == b""

    again = await client.delete(f"/orders/{order_id}")
    assert again.status_code == 404
    assert again.json() == {"error": f"order {order_id}"}

    assert (await client.get(f"/orders/{order_id}")).status_code == 404
    assert (await client.get("/orders")).json() == []


@pytest.mark.asyncio
async def test_unknown_order_not_found(client: AsyncClient):
    missing_id = str(uuid.uuid4())

    get_response = await client.get(f"/orders/{missing_id}")
    patch_response = await client.patch(f"/orders/{missing_id}/status", json={"status": "Shipped"})
    delete_response = await client.delete(f"/orders/{missing_id}")

    for response in (get_response, patch_response, delete_response):
        assert response.status_code == 404
        assert response.json() == {"error": f"order {missing_id}"}


@pytest.mark.asyncio
async def test_malformed_order_id(client: AsyncClient):
    get_response = await client.get("/orders/not-a-uuid")
    patch_response = await client.patch("/orders/not-a-uuid/status", json={"status": "Shipped"})
    delete_response = await client.delete("/orders/not-a-uuid")

    for response in (get_response, patch_response, delete_response):
        assert response.status_code == 400
        assert response.json() == {"error": "invalid order id: not-a-uuid"}


@pytest.mark.asyncio
async def test_storage_failure_is_opaque(failing_client: AsyncClient):
    create_response = await failing_client.post("/orders", json=order_payload())
    list_response = await failing_client.get("/orders")

    for response in (create_response, list_response):
        assert response.status_code == 500
        assert response.json() == {"error": "internal error"}


@pytest.mark.asyncio
async def test_unknown_route_uses_error_shape(client: AsyncClient):
    missing_route = await client.get("/does-not-exist")
    wrong_method = await client.put("/orders")

    assert missing_route.status_code == 404
    assert missing_route.json() == {"error": "Not Found"}
    assert wrong_method.status_code == 405
    assert wrong_method.json() == {"error": "Method Not Allowed"}
    assert "allow" in wrong_method.headers


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_request_id_header(client: AsyncClient):
    response = await client.get("/health")

    uuid.UUID(response.headers["X-Request-ID"])


@pytest.mark.asyncio
async def test_lifespan_builds_in_memory_repository(monkeypatch):
    monkeypatch.setattr(settings, "database_url", None)

    async with app.router.lifespan_context(app):
        assert isinstance(app.state.repository, InMemoryOrderRepository)
