"""
Tests for post create/delete endpoints.
"""

from unittest.mock import AsyncMock, patch

from conftest import CREATED_AT


def _post_row(post_id: int = 10, **overrides) -> dict:
    row = {
        "id": post_id,
        "title": "Morning Walk",
        "content": "Saw some robins chirping!",
        "created_at": CREATED_AT,
        "author_id": 1,
        "author_username": "robin",
        "author_bio": "Love birdwatching",
    }
    row.update(overrides)
    return row


class TestCreatePost:
    def test_success_trims_and_shapes_post(self, client, current_user):
        with patch("posts.repository.create_post", new=AsyncMock(return_value=_post_row())) as create_post:
            response = client.post(
                "/api/posts/create",
                json={"title": "  Morning Walk ", "content": "Saw some robins chirping!\n"},
            )

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Post created successfully"
        post = data["post"]
        assert post["id"] == 10
        assert post["author"] == {"id": 1, "username": "robin", "bio": "Love birdwatching"}
        assert post["comments"] == []
        assert post["createdAt"].startswith("2024-05-01T12:00:00")
        create_post.assert_awaited_once_with(
            author_id=1,
            title="Morning Walk",
            content="Saw some robins chirping!",
        )

    def test_missing_content(self, client, current_user):
        response = client.post("/api/posts/create", json={"title": "Hello"})
        assert response.status_code == 400
        assert response.json()["detail"] == "Title and content are required"

    def test_blank_title(self, client, current_user):
        response = client.post("/api/posts/create", json={"title": "   ", "content": "x"})
        assert response.status_code == 400
        assert response.json()["detail"] == "Title and content are required"

    def test_title_too_long(self, client, current_user):
        response = client.post("/api/posts/create", json={"title": "t" * 101, "content": "x"})
        assert response.status_code == 400
        assert response.json()["detail"] == "Title must be 100 characters or less"

    def test_content_too_long(self, client, current_user):
        response = client.post("/api/posts/create", json={"title": "t", "content": "c" * 1001})
        assert response.status_code == 400
        assert response.json()["detail"] == "Content must be 1000 characters or less"

    def test_requires_token(self, client):
        response = client.post("/api/posts/create", json={"title": "t", "content": "c"})
        assert response.status_code == 401


class TestDeletePost:
    def _delete(self, client, body):
        return client.request("DELETE", "/api/posts/delete", json=body)

    def test_author_can_delete(self, client, current_user):
        with patch("posts.repository.get_post_owner", new=AsyncMock(return_value={"id": 10, "author_id": 1})), patch(
            "posts.repository.delete_post", new=AsyncMock(return_value=True)
        ) as delete_post:
            response = self._delete(client, {"postId": 10})

        assert response.status_code == 200
        assert response.json() == {"message": "Post deleted successfully"}
        delete_post.assert_awaited_once_with(10)

    def test_accepts_numeric_string_id(self, client, current_user):
        with patch("posts.repository.get_post_owner", new=AsyncMock(return_value={"id": 10, "author_id": 1})), patch(
            "posts.repository.delete_post", new=AsyncMock(return_value=True)
        ) as delete_post:
            response = self._delete(client, {"postId": "10"})

        assert response.status_code == 200
        delete_post.assert_awaited_once_with(10)

    def test_other_users_post_forbidden(self, client, current_user):
        with patch("posts.repository.get_post_owner", new=AsyncMock(return_value={"id": 10, "author_id": 2})), patch(
            "posts.repository.delete_post", new=AsyncMock()
        ) as delete_post:
            response = self._delete(client, {"postId": 10})

        assert response.status_code == 403
        assert response.json()["detail"] == "You can only delete your own posts"
        delete_post.assert_not_awaited()

    def test_missing_post(self, client, current_user):
        with patch("posts.repository.get_post_owner", new=AsyncMock(return_value=None)):
            response = self._delete(client, {"postId": 99})

        assert response.status_code == 404
        assert response.json()["detail"] == "Post not found"

    def test_missing_id(self, client, current_user):
        response = self._delete(client, {})
        assert response.status_code == 400
        assert response.json()["detail"] == "Post ID is required"

    def test_non_numeric_id(self, client, current_user):
        response = self._delete(client, {"postId": "abc"})
        assert response.status_code == 400
        assert "postId" in response.json()["detail"]


class TestPostRequestsWithoutBody:
    def test_create_without_body(self, client, current_user):
        response = client.post("/api/posts/create")
        assert response.status_code == 400
        assert response.json()["detail"] == "Title and content are required"

    def test_delete_without_body(self, client, current_user):
        response = client.request("DELETE", "/api/posts/delete")
        assert response.status_code == 400
        assert response.json()["detail"] == "Post ID is required"

    def test_id_beyond_integer_column(self, client, current_user):
        with patch("posts.repository.get_post_owner", new=AsyncMock()) as get_post_owner:
            response = client.request("DELETE", "/api/posts/delete", json={"postId": 2**31})

        assert response.status_code == 400
        assert "postId" in response.json()["detail"]
        get_post_owner.assert_not_awaited()
