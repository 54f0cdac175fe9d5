"""Integration tests for notification inbox endpoints."""

import pytest


@pytest.mark.asyncio
async def test_list_notifications(client, seed, auth):
    await seed.notification("u1", "A")
    await seed.notification("u1", "B", is_read=True)

    response = await client.get("/api/v1/notifications?unreadOnly=true", headers=auth("u1"))

    assert response.status_code == 200
    data = response.json()
    assert [n["title"] for n in data["notifications"]] == ["A"]
    assert data["unreadCount"] == 1
    assert data["notifications"][0]["isRead"] is False


@pytest.mark.asyncio
async def test_mark_read_and_delete(client, seed, auth):
    notification_id = await seed.notification("u1")

    foreign = await client.patch(f"/api/v1/notifications/{notification_id}", headers=auth("u2"))
    marked = await client.patch(f"/api/v1/notifications/{notification_id}", headers=auth("u1"))
    deleted = await client.delete(f"/api/v1/notifications/{notification_id}", headers=auth("u1"))

    assert foreign.status_code == 404
    assert foreign.json() == {"error": "Notification not found"}
    assert marked.json()["isRead"] is True
    assert deleted.json() == {"message": "Notification deleted"}
    assert await seed.notifications("u1") == []


@pytest.mark.asyncio
async def test_mark_all_read(client, seed, auth):
    await seed.notification("u1", "A")
    await seed.notification("u1", "B")

    response = await client.post("/api/v1/notifications/mark-all-read", headers=auth("u1"))

    assert response.status_code == 200
    assert response.json() == {"message": "All notifications marked as read", "count": 2}


@pytest.mark.asyncio
async def test_cancel_produces_unread_notification(client, seed, auth):
    order_id = await seed.order(user_id="u1")
    await client.post(f"/api/v1/orders/{order_id}/cancel", json={"reason": "changed mind"}, headers=auth("u1"))

    response = await client.get("/api/v1/notifications", headers=auth("u1"))

    titles = [n["title"] for n in response.json()["notifications"]]
    assert titles == ["Order Cancelled"]
    assert response.json()["unreadCount"] == 1
