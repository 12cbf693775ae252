"""
End-to-end walk through registration, login, note ownership and logout.
"""


async def test_alice_and_bob(client):
    alice = {"name": "Alice", "email": "a@x.com", "pass": "Abcd123!"}
    bob = {"name": "Bob", "email": "b@x.com", "pass": "Wxyz789$"}

    # Registration
    resp = await client.post("/users/register", json=alice)
    assert resp.status_code == 200
    resp = await client.post("/users/register", json=alice)
    assert resp.status_code == 400
    assert "already exists" in resp.json()["detail"]
    resp = await client.post("/users/register", json=bob)
    assert resp.status_code == 200

    # Login
    resp = await client.post("/users/login", json={"email": "a@x.com", "pass": "wrong"})
    assert resp.status_code == 401
    assert resp.json()["detail"] == "please check your password"

    resp = await client.post("/users/login", json={"email": "a@x.com", "pass": "Abcd123!"})
    assert resp.status_code == 200
    alice_headers = {"Authorization": f"Bearer {resp.json()['access_token']}"}

    resp = await client.post("/users/login", json={"email": "b@x.com", "pass": "Wxyz789$"})
    bob_headers = {"Authorization": f"Bearer {resp.json()['access_token']}"}

    # Alice creates a note; a smuggled username is ignored
    resp = await client.post(
        "/notes/create",
        json={"title": "T", "body": "B", "username": "Bob"},
        headers=alice_headers,
    )
    assert resp.status_code == 200
    note_id = resp.json()["note"]["id"]

    resp = await client.get("/notes/", headers=alice_headers)
    assert [n["id"] for n in resp.json()] == [note_id]
    resp = await client.get("/notes/", headers=bob_headers)
    assert resp.json() == []

    # Bob cannot touch it
    resp = await client.patch(
        f"/notes/update/{note_id}", json={"title": "Mine now"}, headers=bob_headers
    )
    assert resp.status_code == 403
    resp = await client.delete(f"/notes/delete/{note_id}", headers=bob_headers)
    assert resp.status_code == 403

    resp = await client.get(f"/notes/{note_id}", headers=alice_headers)
    assert resp.json()["title"] == "T"
    assert resp.json()["body"] == "B"

    # Alice deletes it, then it is gone
    resp = await client.delete(f"/notes/delete/{note_id}", headers=alice_headers)
    assert resp.status_code == 200
    resp = await client.get(f"/notes/{note_id}", headers=alice_headers)
    assert resp.status_code == 404
    resp = await client.delete(f"/notes/delete/{note_id}", headers=alice_headers)
    assert resp.status_code == 404

    # Logout revokes only Alice's token
    resp = await client.get("/users/logout", headers=alice_headers)
    assert resp.status_code == 200
    resp = await client.get("/notes/", headers=alice_headers)
    assert resp.status_code == 401
    resp = await client.get("/notes/", headers=bob_headers)
    assert resp.status_code == 200

    # A fresh login works again
    resp = await client.post("/users/login", json={"email": "a@x.com", "pass": "Abcd123!"})
    fresh = {"Authorization": f"Bearer {resp.json()['access_token']}"}
    resp = await client.get("/notes/", headers=fresh)
    assert resp.status_code == 200
