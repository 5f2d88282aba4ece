"""Integration tests for checkout and admin order management."""

import pytest
from services.store_service.models import Order, OrderStatus
from sqlalchemy import select
from tests.factories import OrderFactory, order_payload
from tests.stubs import FakeMailTransport

# ---------------------------------------------------------------------------
# POST /api/orders
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.integration
async def test_place_order_stores_pending_order(client, admin_client):
    items = [
        {"id": 3, "name": "Coastline Slide", "price": 45, "qty": 2, "image": "x.jpg"},
        {"id": 7, "name": "Harbor Sneaker", "price": 120, "qty": 1},
    ]
    response = await client.post(
        "/api/orders", json=order_payload(items=items, total_amount=210)
    )

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Order placed successfully!"
    order_id = body["orderId"]

    listed = (await admin_client.get("/api/orders")).json()
    assert len(listed) == 1
    assert listed[0]["id"] == order_id
    assert listed[0]["status"] == OrderStatus.PENDING.value
    assert listed[0]["total_amount"] == 210
    assert listed[0]["items"] == items


@pytest.mark.asyncio
@pytest.mark.integration
async def test_place_order_trusts_submitted_total(client, db_session):
    response = await client.post(
        "/api/orders",
        json=order_payload(items=[{"name": "A", "price": 10, "qty": 2}], total_amount=1),
    )

    assert response.status_code == 200
    order = await db_session.get(Order, response.json()["orderId"])
    assert float(order.total_amount) == 1.0


@pytest.mark.asyncio
@pytest.mark.integration
async def test_submitted_total_is_not_rounded(client, admin_client):
    response = await client.post("/api/orders", json=order_payload(total_amount=19.999))

    assert response.status_code == 200
    listed = (await admin_client.get("/api/orders")).json()
    assert listed[0]["total_amount"] == 19.999


@pytest.mark.asyncio
@pytest.mark.integration
@pytest.mark.parametrize(
    "overrides",
    [
        {"items": []},
        {"customer_name": ""},
        {"phone": ""},
        {"total_amount": -5},
        {"items": [{"name": "A", "price": 10, "qty": 0}]},
    ],
)
async def test_place_order_rejects_invalid_payload(client, db_session, overrides):
    response = await client.post("/api/orders", json=order_payload(**overrides))

    assert response.status_code == 422
    assert (await db_session.execute(select(Order))).first() is None


class TestOrderNotification:
    @pytest.fixture
    def mail_transport(self):
        return FakeMailTransport()

    @pytest.mark.asyncio
    @pytest.mark.integration
    async def test_operator_receives_order_email(self, client, mail_transport):
        response = await client.post("/api/orders", json=order_payload())

        assert response.status_code == 200
        order_id = response.json()["orderId"]
        assert len(mail_transport.sent) == 1
        message = mail_transport.sent[0]
        assert message.to_email == "orders@veloce.test"
        assert message.subject == f"New Order #{order_id} - Ada Customer"
        assert "2x A - $20.00" in message.body
        assert "Total: $20.00" in message.body


class TestOrderNotificationFailure:
    @pytest.fixture
    def mail_transport(self):
        return FakeMailTransport(fail=True)

    @pytest.mark.asyncio
    @pytest.mark.integration
    async def test_mail_failure_does_not_fail_checkout(
        self, client, db_session, mail_transport
    ):
        response = await client.post("/api/orders", json=order_payload())

        assert response.status_code == 200
        assert mail_transport.attempts == 1
        assert mail_transport.sent == []
        order = await db_session.get(Order, response.json()["orderId"])
        assert order is not None
        assert order.status == OrderStatus.PENDING.value


# ---------------------------------------------------------------------------
# GET /api/orders
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.integration
async def test_list_orders_requires_admin(client, db_session):
    db_session.add(OrderFactory.create())
    await db_session.commit()

    response = await client.get("/api/orders")

    assert response.status_code == 401
    assert response.json() == {"detail": "Unauthorized"}


@pytest.mark.asyncio
@pytest.mark.integration
async def test_list_orders_empty(admin_client):
    response = await admin_client.get("/api/orders")

    assert response.status_code == 200
    assert response.json() == []


# ---------------------------------------------------------------------------
# PUT /api/orders/{id}/status
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.integration
async def test_update_order_status(admin_client, db_session):
    order = OrderFactory.create()
    db_session.add(order)
    await db_session.commit()

    response = await admin_client.put(
        f"/api/orders/{order.id}/status", json={"status": "Shipped"}
    )

    assert response.status_code == 200
    assert response.json() == {
        "message": "Status updated",
        "id": order.id,
        "status": "Shipped",
    }
    await db_session.refresh(order)
    assert order.status == OrderStatus.SHIPPED.value


@pytest.mark.asyncio
@pytest.mark.integration
async def test_update_order_status_allows_any_transition(admin_client, db_session):
    order = OrderFactory.create(status=OrderStatus.CANCELLED.value)
    db_session.add(order)
    await db_session.commit()

    response = await admin_client.put(
        f"/api/orders/{order.id}/status", json={"status": "Pending"}
    )

    assert response.status_code == 200
    await db_session.refresh(order)
    assert order.status == OrderStatus.PENDING.value


@pytest.mark.asyncio
@pytest.mark.integration
@pytest.mark.parametrize(
    "body",
    [
        {"status": "Lost"},
        {"status": "shipped"},
        {"status": ""},
        {},
        {"status": None},
        {"status": 5},
    ],
)
async def test_update_order_status_rejects_unknown_value(admin_client, db_session, body):
    order = OrderFactory.create()
    db_session.add(order)
    await db_session.commit()

    response = await admin_client.put(
        f"/api/orders/{order.id}/status", json=body
    )

    assert response.status_code == 400
    assert response.json() == {"detail": "Invalid status"}
    await db_session.refresh(order)
    assert order.status == OrderStatus.PENDING.value


@pytest.mark.asyncio
@pytest.mark.integration
async def test_update_status_of_missing_order_is_not_found(admin_client):
    response = await admin_client.put("/api/orders/424242/status", json={"status": "Completed"})

    assert response.status_code == 404


@pytest.mark.asyncio
@pytest.mark.integration
async def test_update_order_status_requires_admin(client, db_session):
    order = OrderFactory.create()
    db_session.add(order)
    await db_session.commit()

    response = await client.put(f"/api/orders/{order.id}/status", json={"status": "Shipped"})

    assert response.status_code == 401
    await db_session.refresh(order)
    assert order.status == OrderStatus.PENDING.value
