# tests/v1/test_engagement.py
"""Tests for like, share and status endpoints."""

from fastapi import status


def test_like_post(client, auth_token, test_post) -> None:
    response = client.post(f"/api/v1/posts/{test_post.id}/like", headers=auth_token)
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"like_count": 1, "is_liked": True}


def test_like_twice_conflicts(client, auth_token, test_post) -> None:
    client.post(f"/api/v1/posts/{test_post.id}/like", headers=auth_token)
    response = client.post(f"/api/v1/posts/{test_post.id}/like", headers=auth_token)

    assert response.status_code == status.HTTP_409_CONFLICT
    assert "already liked" in response.json()["detail"]

    status_response = client.get(f"/api/v1/posts/{test_post.id}/status")
    assert status_response.json()["like_count"] == 1


def test_like_requires_authentication(client, test_post) -> None:
    response = client.post(f"/api/v1/posts/{test_post.id}/like")
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_like_with_invalid_token(client, test_post) -> None:
    response = client.post(
        f"/api/v1/posts/{test_post.id}/like",
        headers={"Authorization": "Bearer not-a-jwt"},
    )
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_like_nonexistent_post(client, auth_token) -> None:
    response = client.post("/api/v1/posts/99999/like", headers=auth_token)
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_like_malformed_post_id(client, auth_token) -> None:
    response = client.post("/api/v1/posts/not-a-number/like", headers=auth_token)
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT


def test_unlike_post(client, auth_token, test_post) -> None:
    client.post(f"/api/v1/posts/{test_post.id}/like", headers=auth_token)
    response = client.delete(f"/api/v1/posts/{test_post.id}/like", headers=auth_token)

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"like_count": 0, "is_liked": False}


def test_unlike_without_like_conflicts(client, auth_token, test_post) -> None:
    response = client.delete(f"/api/v1/posts/{test_post.id}/like", headers=auth_token)
    assert response.status_code == status.HTTP_409_CONFLICT
    assert "not liked" in response.json()["detail"]


def test_unlike_requires_authentication(client, test_post) -> None:
    response = client.delete(f"/api/v1/posts/{test_post.id}/like")
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_two_users_like_same_post(client, auth_token, other_auth_token, test_post) -> None:
    first = client.post(f"/api/v1/posts/{test_post.id}/like", headers=auth_token)
    second = client.post(f"/api/v1/posts/{test_post.id}/like", headers=other_auth_token)

    assert first.status_code == second.status_code == status.HTTP_200_OK
    assert second.json()["like_count"] == 2


def test_status_anonymous_and_signed_in(client, auth_token, test_post) -> None:
    client.post(f"/api/v1/posts/{test_post.id}/like", headers=auth_token)
    client.post(f"/api/v1/posts/{test_post.id}/share", headers=auth_token)

    anonymous = client.get(f"/api/v1/posts/{test_post.id}/status")
    assert anonymous.status_code == status.HTTP_200_OK
    assert anonymous.json() == {"like_count": 1, "share_count": 1, "is_liked": False}

    signed_in = client.get(f"/api/v1/posts/{test_post.id}/status", headers=auth_token)
    assert signed_in.json() == {"like_count": 1, "share_count": 1, "is_liked": True}


def test_status_round_trip(client, auth_token, test_post) -> None:
    before = client.get(f"/api/v1/posts/{test_post.id}/status", headers=auth_token).json()
    client.post(f"/api/v1/posts/{test_post.id}/like", headers=auth_token)
    client.delete(f"/api/v1/posts/{test_post.id}/like", headers=auth_token)
    after = client.get(f"/api/v1/posts/{test_post.id}/status", headers=auth_token).json()

    assert after["like_count"] == before["like_count"]
    assert after["is_liked"] is False


def test_status_nonexistent_post(client) -> None:
    response = client.get("/api/v1/posts/99999/status")
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_share_post(client, auth_token, test_post) -> None:
    response = client.post(f"/api/v1/posts/{test_post.id}/share", headers=auth_token)

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["share_count"] == 1
    assert data["is_shared"] is True
    assert 0 < len(data["short_code"]) <= 10


def test_share_twice_returns_same_code(client, auth_token, test_post) -> None:
    first = client.post(f"/api/v1/posts/{test_post.id}/share", headers=auth_token).json()
    second = client.post(f"/api/v1/posts/{test_post.id}/share", headers=auth_token).json()

    assert second["short_code"] == first["short_code"]
    assert second["share_count"] == first["share_count"] == 1


def test_share_requires_authentication(client, test_post) -> None:
    response = client.post(f"/api/v1/posts/{test_post.id}/share")
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_share_nonexistent_post(client, auth_token) -> None:
    response = client.post("/api/v1/posts/99999/share", headers=auth_token)
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_share_code_exhaustion_is_server_error(app, client, auth_token, other_auth_token, test_post, db_session) -> None:
    from vistagram.api.v1.endpoints import engagement as engagement_endpoints
    from vistagram.services.shares import ShareLedger

    taken = client.post(f"/api/v1/posts/{test_post.id}/share", headers=other_auth_token).json()
    app.dependency_overrides[engagement_endpoints.get_share_ledger] = lambda: ShareLedger(
        db_session,
        code_generator=lambda: taken["short_code"],
    )
    try:
        response = client.post(f"/api/v1/posts/{test_post.id}/share", headers=auth_token)
    finally:
        app.dependency_overrides.pop(engagement_endpoints.get_share_ledger, None)

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert "unique share code" in response.json()["detail"]

    status_response = client.get(f"/api/v1/posts/{test_post.id}/status")
    assert status_response.json()["share_count"] == 1
