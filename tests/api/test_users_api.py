"""
Tests for the /users endpoints.
"""
import pytest


async def _create_user(client, user_name="alice", **extra):
    response = await client.post("/users", json={"user_name": user_name, **extra})
    assert response.status_code == 201
    return response.json()


class TestUserEndpoints:
    """Tests for user CRUD over HTTP."""

    @pytest.mark.asyncio
    async def test_create_user(self, client):
        data = await _create_user(client, email="alice@example.com")

        assert data["user_name"] == "alice"
        assert data["normalized_user_name"] == "ALICE"
        assert data["email"] == "alice@example.com"

    @pytest.mark.asyncio
    async def test_invalid_email_returns_422(self, client):
        response = await client.post("/users", json={"user_name": "alice", "email": "not-an-email"})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_create_duplicate_returns_409(self, client):
        await _create_user(client)

        response = await client.post("/users", json={"user_name": "alice"})

        assert response.status_code == 409
        assert response.json()["detail"] == "User name 'alice' is already taken."

    @pytest.mark.asyncio
    async def test_lookup_by_normalized_name(self, client):
        created = await _create_user(client)

        response = await client.get("/users/by-name/ALICE")

        assert response.json()["id"] == created["id"]

    @pytest.mark.asyncio
    async def test_update_email(self, client):
        created = await _create_user(client)

        response = await client.put(
            f"/users/{created['id']}",
            json={"user_name": "alice", "email": "alice@example.org"},
        )

        assert response.json()["email"] == "alice@example.org"

    @pytest.mark.asyncio
    async def test_delete_user(self, client):
        created = await _create_user(client)

        assert (await client.delete(f"/users/{created['id']}")).status_code == 204
        assert (await client.get("/users")).json() == []


class TestUserClaimEndpoints:
    """Tests for /users/{id}/claims."""

    @pytest.mark.asyncio
    async def test_add_claims_batch(self, client):
        user = await _create_user(client)
        url = f"/users/{user['id']}/claims"

        response = await client.post(url, json=[
            {"type": "dept", "value": "eng"},
            {"type": "dept", "value": "eng"},
            {"type": "scope", "value": "read"},
        ])

        assert response.status_code == 201
        assert response.json() == [
            {"type": "dept", "value": "eng"},
            {"type": "scope", "value": "read"},
        ]
        assert (await client.get(f"/users/{user['id']}")).json()["claims"] == response.json()

    @pytest.mark.asyncio
    async def test_remove_claim(self, client):
        user = await _create_user(client)
        url = f"/users/{user['id']}/claims"
        await client.post(url, json=[{"type": "dept", "value": "eng"}])

        response = await client.delete(url, params={"type": "dept", "value": "eng"})

        assert response.json() == []

    @pytest.mark.asyncio
    async def test_blank_claim_type_returns_422(self, client):
        user = await _create_user(client)

        response = await client.post(f"/users/{user['id']}/claims", json=[{"type": "", "value": "x"}])

        assert response.status_code == 422


class TestUserLookupErrors:

    @pytest.mark.asyncio
    async def test_ambiguous_normalized_name_returns_409(self, client, identity_context):
        await identity_context.users.insert_many([
            {"_id": "u1", "user_name": "Bob", "normalized_user_name": "BOB", "claims": []},
            {"_id": "u2", "user_name": "bob", "normalized_user_name": "BOB", "claims": []},
        ])

        response = await client.get("/users/by-name/BOB")

        assert response.status_code == 409
        assert "More than one" in response.json()["detail"]["message"]
