import uuid

import pytest


def _uid():
    return str(uuid.uuid4())


@pytest.fixture()
def direct(client, auth_headers):
    """Factory: create a direct conversation over HTTP and return its JSON."""

    def _create(owner, *others):
        res = client.post(
            "/conversations",
            headers=auth_headers(owner),
            json={"kind": "direct", "participant_ids": [owner, *others]},
        )
        assert res.status_code == 201, res.text
        return res.json()

    return _create


def _send(client, auth_headers, conversation_id, user, text="hi", **extra):
    return client.post(
        f"/conversations/{conversation_id}/messages",
        headers=auth_headers(user),
        json={"text": text, **extra},
    )


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "healthy"}


def test_correlation_id_is_echoed(client):
    res = client.get("/health", headers={"X-Correlation-ID": "abc-123"})
    assert res.headers["X-Correlation-ID"] == "abc-123"


def test_missing_token_is_rejected(client):
    res = client.get("/conversations")
    assert res.status_code in (401, 403)
    assert "error" in res.json()


def test_expired_token_is_rejected(client, service_token):
    token = service_token(_uid(), expires_in=-60)
    res = client.get("/conversations", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401
    assert res.json() == {"error": "Token has expired"}


def test_non_uuid_subject_is_rejected(client, service_token):
    token = service_token("someone@example.com")
    res = client.get("/conversations", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401


def test_create_and_get_conversation(client, auth_headers, direct):
    alice, bob = _uid(), _uid()
    created = direct(alice, bob)

    assert created["kind"] == "direct"
    assert {p["user_id"] for p in created["participants"]} == {alice, bob}

    res = client.get(f"/conversations/{created['id']}", headers=auth_headers(alice))
    assert res.status_code == 200
    assert res.json()["id"] == created["id"]


def test_group_without_name_returns_400(client, auth_headers):
    alice = _uid()
    res = client.post(
        "/conversations",
        headers=auth_headers(alice),
        json={"kind": "group", "participant_ids": [alice]},
    )
    assert res.status_code == 400
    assert res.json() == {"error": "Group conversations require a name"}


def test_unknown_kind_is_validation_error(client, auth_headers):
    alice = _uid()
    res = client.post(
        "/conversations",
        headers=auth_headers(alice),
        json={"kind": "channel", "participant_ids": [alice]},
    )
    assert res.status_code == 400
    assert res.json()["error"] == "Validation error"


def test_malformed_id_returns_400(client, auth_headers):
    res = client.get("/conversations/not-a-uuid", headers=auth_headers(_uid()))
    assert res.status_code == 400


def test_missing_conversation_returns_404(client, auth_headers):
    res = client.get(f"/conversations/{_uid()}", headers=auth_headers(_uid()))
    assert res.status_code == 404
    assert res.json() == {"error": "Conversation not found"}


def test_list_conversations_for_caller(client, auth_headers, direct):
    alice, bob = _uid(), _uid()
    created = direct(alice, bob)
    direct(bob)

    res = client.get("/conversations", headers=auth_headers(alice))

    assert res.status_code == 200
    assert [c["id"] for c in res.json()] == [created["id"]]


def test_message_flow(client, auth_headers, direct):
    alice, bob = _uid(), _uid()
    conversation = direct(alice, bob)
    conv_id = conversation["id"]

    sent = _send(client, auth_headers, conv_id, alice, text="hello")
    assert sent.status_code == 201
    assert sent.json()["sender_user_id"] == alice

    reply = _send(
        client, auth_headers, conv_id, bob, text="hey", reply_to_message_id=sent.json()["id"]
    )
    assert reply.status_code == 201

    res = client.get(
        f"/conversations/{conv_id}/messages",
        headers=auth_headers(bob),
        params={"limit": "1"},
    )
    assert res.status_code == 200
    assert [m["text"] for m in res.json()] == ["hey"]

    res = client.get(
        f"/conversations/{conv_id}/messages",
        headers=auth_headers(bob),
        params={"before": reply.json()["id"], "limit": "abc"},
    )
    assert [m["text"] for m in res.json()] == ["hello"]


def test_outsider_gets_403(client, auth_headers, direct):
    alice = _uid()
    conversation = direct(alice)

    res = _send(client, auth_headers, conversation["id"], _uid())

    assert res.status_code == 403
    assert res.json() == {"error": "You are not authorized to access this conversation"}


def test_participant_join_and_leave(client, auth_headers, direct):
    alice, carol = _uid(), _uid()
    conv_id = direct(alice)["id"]

    res = client.post(
        f"/conversations/{conv_id}/participants",
        headers=auth_headers(alice),
        json={"user_id": carol, "role": "admin"},
    )
    assert res.status_code == 201
    assert res.json()["role"] == "admin"

    again = client.post(
        f"/conversations/{conv_id}/participants",
        headers=auth_headers(alice),
        json={"user_id": carol},
    )
    assert again.status_code == 400

    res = client.delete(
        f"/conversations/{conv_id}/participants/{carol}", headers=auth_headers(alice)
    )
    assert res.status_code == 200
    assert res.json()["left_at"] is not None

    history = client.get(f"/conversations/{conv_id}/messages", headers=auth_headers(alice))
    assert [m["system_event"] for m in history.json()] == ["leave", "join"]
    assert history.json()[1]["text"] == f"{carol} joined"

    res = client.get(f"/conversations/{conv_id}/messages", headers=auth_headers(carol))
    assert res.status_code == 403


def test_read_receipts(client, auth_headers, direct):
    alice, bob = _uid(), _uid()
    conv_id = direct(alice, bob)["id"]
    first = _send(client, auth_headers, conv_id, alice).json()
    _send(client, auth_headers, conv_id, alice)

    res = client.get(f"/conversations/{conv_id}/unread-count", headers=auth_headers(bob))
    assert res.json() == {"unread_count": 2}

    res = client.post(
        f"/conversations/{conv_id}/read",
        headers=auth_headers(bob),
        json={"last_read_message_id": first["id"]},
    )
    assert res.status_code == 200
    assert res.json()["status"] == "ok"
    assert res.json()["read"]["last_read_message_id"] == first["id"]

    res = client.get(f"/conversations/{conv_id}/unread-count", headers=auth_headers(bob))
    assert res.json() == {"unread_count": 1}


def test_delete_message_permissions(client, auth_headers, direct):
    alice, bob = _uid(), _uid()
    conv_id = direct(alice, bob)["id"]
    message = _send(client, auth_headers, conv_id, alice, text="bye").json()

    res = client.delete(f"/messages/{message['id']}", headers=auth_headers(bob))
    assert res.status_code == 403

    res = client.delete(f"/messages/{message['id']}", headers=auth_headers(alice))
    assert res.status_code == 200
    assert res.json() == {"success": True}

    history = client.get(f"/conversations/{conv_id}/messages", headers=auth_headers(bob))
    assert history.json()[0]["text"] is None
    assert history.json()[0]["deleted_at"] is not None

    res = client.delete(f"/messages/{_uid()}", headers=auth_headers(alice))
    assert res.status_code == 404


def test_reactions_over_http(client, auth_headers, direct):
    alice, bob = _uid(), _uid()
    conv_id = direct(alice, bob)["id"]
    message = _send(client, auth_headers, conv_id, alice).json()

    res = client.post(
        f"/messages/{message['id']}/reactions",
        headers=auth_headers(bob),
        json={"emoji": "👍"},
    )
    assert res.status_code == 201

    res = client.get(f"/messages/{message['id']}/reactions", headers=auth_headers(alice))
    assert res.status_code == 200
    assert [(r["user_id"], r["emoji"]) for r in res.json()] == [(bob, "👍")]

    res = client.delete(
        f"/messages/{message['id']}/reactions/👍", headers=auth_headers(bob)
    )
    assert res.status_code == 200

    res = client.delete(
        f"/messages/{message['id']}/reactions/👍", headers=auth_headers(bob)
    )
    assert res.status_code == 404


def test_bookmarks_over_http(client, auth_headers, direct):
    alice, bob = _uid(), _uid()
    conv_id = direct(alice, bob)["id"]
    message = _send(client, auth_headers, conv_id, alice, text="keep").json()

    res = client.post(f"/messages/{message['id']}/bookmark", headers=auth_headers(bob))
    assert res.status_code == 201
    assert res.json()["status"] == "bookmarked"

    res = client.get("/bookmarks", headers=auth_headers(bob))
    assert res.status_code == 200
    assert [(b["message_id"], b["text"]) for b in res.json()] == [(message["id"], "keep")]

    res = client.delete(f"/messages/{message['id']}/bookmark", headers=auth_headers(bob))
    assert res.json() == {"status": "unbookmarked"}
    assert client.get("/bookmarks", headers=auth_headers(bob)).json() == []
