"""API tests for /notes endpoints."""

import uuid

from sqlalchemy.exc import OperationalError

from src.notekeep.core.repositories.note_repository import NoteRepository


async def _create(client, headers, title="T", body="B"):
    resp = await client.post("/notes/create", json={"title": title, "body": body}, headers=headers)
    assert resp.status_code == 200, resp.text
    return resp.json()["note"]


async def test_notes_require_auth(client):
    assert (await client.get("/notes/")).status_code == 401
    assert (await client.post("/notes/create", json={"title": "T", "body": "B"})).status_code == 401
    assert (await client.get(f"/notes/{uuid.uuid4()}")).status_code == 401


async def test_create_and_list(client, alice_headers):
    resp = await client.post(
        "/notes/create", json={"title": "T", "body": "B"}, headers=alice_headers
    )
    assert resp.status_code == 200
    assert resp.json()["message"] == "A new note has been added"

    resp = await client.get("/notes/", headers=alice_headers)
    assert resp.status_code == 200
    notes = resp.json()
    assert len(notes) == 1
    assert notes[0]["username"] == "Alice"


async def test_owner_comes_from_token(client, alice_headers):
    resp = await client.post(
        "/notes/create",
        json={"title": "T", "body": "B", "username": "Bob"},
        headers=alice_headers,
    )
    assert resp.json()["note"]["username"] == "Alice"


async def test_get_by_id(client, alice_headers, bob_headers):
    note = await _create(client, alice_headers)

    resp = await client.get(f"/notes/{note['id']}", headers=alice_headers)
    assert resp.status_code == 200
    assert resp.json()["title"] == "T"

    resp = await client.get(f"/notes/{note['id']}", headers=bob_headers)
    assert resp.status_code == 403

    resp = await client.get(f"/notes/{uuid.uuid4()}", headers=alice_headers)
    assert resp.status_code == 404


async def test_get_with_malformed_id(client, alice_headers):
    resp = await client.get("/notes/not-a-uuid", headers=alice_headers)
    assert resp.status_code == 422


async def test_update(client, alice_headers, bob_headers):
    note = await _create(client, alice_headers)

    resp = await client.patch(
        f"/notes/update/{note['id']}", json={"title": "Hacked"}, headers=bob_headers
    )
    assert resp.status_code == 403

    resp = await client.patch(
        f"/notes/update/{note['id']}", json={"body": "B2"}, headers=alice_headers
    )
    assert resp.status_code == 200
    assert resp.json()["message"] == "Note has been updated"
    assert resp.json()["note"]["title"] == "T"
    assert resp.json()["note"]["body"] == "B2"


async def test_update_without_fields(client, alice_headers):
    note = await _create(client, alice_headers)

    resp = await client.patch(f"/notes/update/{note['id']}", json={}, headers=alice_headers)
    assert resp.status_code == 422


async def test_delete(client, alice_headers, bob_headers):
    note = await _create(client, alice_headers)

    assert (await client.delete(f"/notes/delete/{note['id']}", headers=bob_headers)).status_code == 403

    resp = await client.delete(f"/notes/delete/{note['id']}", headers=alice_headers)
    assert resp.status_code == 200
    assert resp.json()["message"] == "Note has been deleted"

    resp = await client.delete(f"/notes/delete/{note['id']}", headers=alice_headers)
    assert resp.status_code == 404


async def test_rate_limit(client, alice_headers, rate_limiter):
    rate_limiter.limit = 2

    assert (await client.get("/notes/", headers=alice_headers)).status_code == 200
    assert (await client.get("/notes/", headers=alice_headers)).status_code == 200

    resp = await client.get("/notes/", headers=alice_headers)
    assert resp.status_code == 429
    assert int(resp.headers["retry-after"]) >= 1


async def test_rate_limit_is_per_user(client, alice_headers, bob_headers, rate_limiter):
    rate_limiter.limit = 1

    assert (await client.get("/notes/", headers=alice_headers)).status_code == 200
    assert (await client.get("/notes/", headers=alice_headers)).status_code == 429
    assert (await client.get("/notes/", headers=bob_headers)).status_code == 200


async def test_store_error_is_bad_request(client, alice_headers, monkeypatch):
    async def broken_create(self, note_data):
        raise OperationalError("INSERT", {}, Exception("disk full"))

    monkeypatch.setattr(NoteRepository, "create_note", broken_create)

    resp = await client.post(
        "/notes/create", json={"title": "T", "body": "B"}, headers=alice_headers
    )
    assert resp.status_code == 400
    assert resp.json() == {"detail": "The request could not be completed"}
