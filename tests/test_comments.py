# tests/test_comments.py
import uuid

from fastapi.testclient import TestClient
from app.main import app

client = TestClient(app)


def create_ticket(ticket_payload):
    r = client.post("/tickets", json=ticket_payload)
    assert r.status_code == 201
    return r.json()["data"]["id"]


def test_comment_scenario(ticket_payload):
    tid = create_ticket(ticket_payload)

    r = client.post(f"/tickets/{tid}/comments", json={"authorName": "Ana", "message": "Still happening"})
    assert r.status_code == 201
    comment = r.json()["data"]
    assert comment["ticketId"] == tid
    assert comment["authorName"] == "Ana"
    assert comment["createdAt"]

    r2 = client.get(f"/tickets/{tid}/comments")
    assert r2.status_code == 200
    body = r2.json()
    assert len(body["data"]) == 1
    assert body["data"][0]["authorName"] == "Ana"
    assert body["pagination"] == {"page": 1, "limit": 10, "total": 1, "totalPages": 1}

    r3 = client.get(f"/tickets/{uuid.uuid4()}/comments")
    assert r3.status_code == 404
    assert r3.json()["success"] is False


def test_author_name_is_optional(ticket_payload):
    tid = create_ticket(ticket_payload)
    r = client.post(f"/tickets/{tid}/comments", json={"message": "Anonymous note"})
    assert r.status_code == 201
    assert r.json()["data"]["authorName"] is None


def test_create_comment_on_missing_ticket_creates_nothing(ticket_payload):
    r = client.post(f"/tickets/{uuid.uuid4()}/comments", json={"authorName": "Ana", "message": "Hello"})
    assert r.status_code == 404
    assert r.json()["message"] == "Ticket not found"


def test_comment_message_validation(ticket_payload):
    tid = create_ticket(ticket_payload)

    assert client.post(f"/tickets/{tid}/comments", json={"authorName": "Ana"}).status_code == 400
    assert client.post(f"/tickets/{tid}/comments", json={"message": ""}).status_code == 400
    assert client.post(f"/tickets/{tid}/comments", json={"message": "   "}).status_code == 400
    assert client.post(f"/tickets/{tid}/comments", json={"message": "m" * 501}).status_code == 400
    assert client.post(f"/tickets/{tid}/comments", json={"message": "m" * 500}).status_code == 201

    assert client.get(f"/tickets/{tid}/comments").json()["pagination"]["total"] == 1


def test_comments_newest_first_and_paginated(ticket_payload):
    tid = create_ticket(ticket_payload)
    for i in range(5):
        client.post(f"/tickets/{tid}/comments", json={"message": f"reply {i}"})

    r = client.get(f"/tickets/{tid}/comments", params={"limit": 2})
    body = r.json()
    assert [c["message"] for c in body["data"]] == ["reply 4", "reply 3"]
    assert body["pagination"] == {"page": 1, "limit": 2, "total": 5, "totalPages": 3}

    r = client.get(f"/tickets/{tid}/comments", params={"limit": 2, "page": 3})
    assert [c["message"] for c in r.json()["data"]] == ["reply 0"]

    r = client.get(f"/tickets/{tid}/comments", params={"limit": 2, "page": 4})
    assert r.status_code == 200
    assert r.json()["data"] == []


def test_comments_are_scoped_to_their_ticket(ticket_payload):
    first = create_ticket(ticket_payload)
    second = create_ticket(ticket_payload)
    client.post(f"/tickets/{first}/comments", json={"message": "on first"})

    assert client.get(f"/tickets/{second}/comments").json()["data"] == []


def test_deleted_ticket_hides_its_comments(ticket_payload):
    tid = create_ticket(ticket_payload)
    client.post(f"/tickets/{tid}/comments", json={"message": "before delete"})
    assert client.delete(f"/tickets/{tid}").status_code == 200

    assert client.get(f"/tickets/{tid}/comments").status_code == 404
    assert client.post(f"/tickets/{tid}/comments", json={"message": "after"}).status_code == 404


def test_comment_page_far_past_the_end_is_empty(ticket_payload):
    tid = create_ticket(ticket_payload)
    client.post(f"/tickets/{tid}/comments", json={"message": "only reply"})

    r = client.get(f"/tickets/{tid}/comments", params={"page": "99999999999999999999"})
    assert r.status_code == 200
    assert r.json()["data"] == []
    assert r.json()["pagination"]["total"] == 1
