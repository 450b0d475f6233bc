"""Session & Profile Routes — login, rename, profile page and search over HTTP.

Tests cover:
    - POST /session creates or returns the identity (201)
    - Invalid names are 400 with the message envelope
    - Rename: 200, 409 when taken, 403 for someone else's path
    - Profile page gate and camelCase payload
    - Search results
"""


async def test_login_creates_and_returns_identifier(client):
    first = await client.post("/api/v1/session", json={"name": "alice"})
    again = await client.post("/api/v1/session", json={"name": "alice"})
    assert first.status_code == 201
    assert again.status_code == 201
    assert first.json()["identifier"] == again.json()["identifier"]


async def test_login_invalid_name_is_400(client):
    res = await client.post("/api/v1/session", json={"name": "a b"})
    assert res.status_code == 400
    assert res.json()["message"].startswith("Bad Request")


async def test_login_missing_body_is_400(client):
    res = await client.post("/api/v1/session", json={})
    assert res.status_code == 400


async def test_rename(client, login):
    uid, headers = await login("alice")
    res = await client.put(
        f"/api/v1/user/{uid}/update-username", json={"name": "alicia"}, headers=headers,
    )
    assert res.status_code == 200
    assert res.json() == {"message": "Username updated"}

    again = await client.post("/api/v1/session", json={"name": "alicia"})
    assert again.json()["identifier"] == uid


async def test_rename_to_taken_name_is_409(client, login):
    uid, headers = await login("alice")
    await login("bob")
    res = await client.put(
        f"/api/v1/user/{uid}/update-username", json={"name": "bob"}, headers=headers,
    )
    assert res.status_code == 409


async def test_rename_someone_else_is_403(client, login):
    _, headers = await login("alice")
    bob, _ = await login("bob")
    res = await client.put(
        f"/api/v1/user/{bob}/update-username", json={"name": "hacked"}, headers=headers,
    )
    assert res.status_code == 403
    assert res.json() == {"message": "The path tokens and the auth token aren't equal"}


async def test_profile_page_payload(client, login, upload):
    alice, a_headers = await login("alice")
    bob, b_headers = await login("bob")
    await upload(bob, b_headers)
    await client.put(f"/api/v1/user/{alice}/follow/bob", headers=a_headers)

    res = await client.get(f"/api/v1/user/{alice}/profile-page/bob", headers=a_headers)

    assert res.status_code == 200
    body = res.json()
    assert body["identifier"] == bob
    assert body["username"] == "bob"
    assert body["numberOfPhotos"] == 1
    assert body["numberOfFollowers"] == 1
    assert body["numberOfFollowing"] == 0
    assert body["isFollowed"] is True
    assert body["isOwner"] is False
    assert body["isBanned"] is False
    assert body["photos"][0]["ownerUsername"] == "bob"


async def test_profile_page_of_banner_is_403(client, login):
    alice, a_headers = await login("alice")
    bob, b_headers = await login("bob")
    await client.put(f"/api/v1/user/{bob}/ban/alice", headers=b_headers)

    res = await client.get(f"/api/v1/user/{alice}/profile-page/bob", headers=a_headers)
    assert res.status_code == 403


async def test_profile_page_unknown_user_is_404(client, login):
    alice, headers = await login("alice")
    res = await client.get(f"/api/v1/user/{alice}/profile-page/ghost", headers=headers)
    assert res.status_code == 404


async def test_search(client, login):
    alice, headers = await login("alice")
    await login("carol")
    await login("Carolina")
    res = await client.get(f"/api/v1/user/{alice}/search/aro", headers=headers)
    assert res.status_code == 200
    assert res.json() == ["Carolina", "carol"]


async def test_search_invalid_fragment_is_400(client, login):
    alice, headers = await login("alice")
    res = await client.get(f"/api/v1/user/{alice}/search/a", headers=headers)
    assert res.status_code == 400
