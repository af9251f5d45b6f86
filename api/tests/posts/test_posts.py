"""
Tests for post endpoints:
- POST /api/posts
- GET /api/posts
- GET /api/posts/{post_id}
- DELETE /api/posts/{post_id}
"""

import uuid

import pytest
from httpx import AsyncClient


async def _create_post(client: AsyncClient, headers: dict, text: str = "Hello world") -> dict:
    response = await client.post("/api/posts", json={"text": text}, headers=headers)
    assert response.status_code == 200
    return response.json()


class TestCreatePost:
    """POST /api/posts tests."""

    async def test_create_post_copies_author(
        self, async_client: AsyncClient, test_user: dict, auth_headers
    ):
        """Post carries the author's id, name and avatar."""
        post = await _create_post(async_client, auth_headers(test_user["token"]))
        assert post["text"] == "Hello world"
        assert post["user_id"] == test_user["user_id"]
        assert post["name"] == test_user["name"]
        assert post["avatar"].startswith("https://www.gravatar.com/avatar/")

    @pytest.mark.parametrize("payload", [{}, {"text": ""}, {"text": "   "}])
    async def test_text_is_required(
        self, async_client: AsyncClient, test_user: dict, auth_headers, payload: dict
    ):
        """Empty or missing text returns 400."""
        response = await async_client.post(
            "/api/posts", json=payload, headers=auth_headers(test_user["token"])
        )
        assert response.status_code == 400

    async def test_requires_auth(self, async_client: AsyncClient):
        """No token returns 401."""
        response = await async_client.post("/api/posts", json={"text": "hi"})
        assert response.status_code == 401


class TestReadPosts:
    """GET /api/posts and GET /api/posts/{post_id} tests."""

    async def test_list_newest_first(
        self, async_client: AsyncClient, test_user: dict, auth_headers
    ):
        """Posts are listed newest first."""
        headers = auth_headers(test_user["token"])
        for text in ["one", "two", "three"]:
            await _create_post(async_client, headers, text)

        response = await async_client.get("/api/posts", headers=headers)
        assert response.status_code == 200
        assert [p["text"] for p in response.json()] == ["three", "two", "one"]

    async def test_get_post_by_id(
        self, async_client: AsyncClient, test_user: dict, auth_headers
    ):
        """A single post can be fetched by id."""
        headers = auth_headers(test_user["token"])
        post = await _create_post(async_client, headers)

        response = await async_client.get(f"/api/posts/{post['id']}", headers=headers)
        assert response.status_code == 200
        assert response.json()["id"] == post["id"]

    @pytest.mark.parametrize("post_id", [str(uuid.uuid4()), "not-an-id"])
    async def test_missing_post_returns_404(
        self, async_client: AsyncClient, test_user: dict, auth_headers, post_id: str
    ):
        """Unknown and malformed ids return 404."""
        response = await async_client.get(
            f"/api/posts/{post_id}", headers=auth_headers(test_user["token"])
        )
        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Post not found"


class TestDeletePost:
    """DELETE /api/posts/{post_id} tests."""

    async def test_owner_can_delete(
        self, async_client: AsyncClient, test_user: dict, auth_headers
    ):
        """Owner deletes the post and it is gone."""
        headers = auth_headers(test_user["token"])
        post = await _create_post(async_client, headers)

        response = await async_client.delete(f"/api/posts/{post['id']}", headers=headers)
        assert response.status_code == 200
        assert response.json() == {"msg": "Post removed"}

        lookup = await async_client.get(f"/api/posts/{post['id']}", headers=headers)
        assert lookup.status_code == 404

    async def test_other_user_cannot_delete(
        self,
        async_client: AsyncClient,
        test_user: dict,
        second_user: dict,
        auth_headers,
    ):
        """Deleting someone else's post returns 401."""
        post = await _create_post(async_client, auth_headers(test_user["token"]))

        response = await async_client.delete(
            f"/api/posts/{post['id']}", headers=auth_headers(second_user["token"])
        )
        assert response.status_code == 401
        assert response.json()["error"]["message"] == "User not authorized"

    async def test_delete_missing_post_returns_404(
        self, async_client: AsyncClient, test_user: dict, auth_headers
    ):
        """Unknown id returns 404."""
        response = await async_client.delete(
            f"/api/posts/{uuid.uuid4()}", headers=auth_headers(test_user["token"])
        )
        assert response.status_code == 404
