import math
from datetime import datetime, timedelta, timezone

import pytest

from tests.test_db import TestingSessionLocal, auth_headers, create_user, create_video
from app.services.likes.like_service import like_video
from app.services.videos.feed_service import get_feed


BASE_TIME = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


async def _seed_videos(user_id, count):
    """Crea `count` videos, uno por minuto; devuelve sus ids del más nuevo al más viejo."""
    ids = []
    for i in range(count):
        video = await create_video(user_id, created_at=BASE_TIME + timedelta(minutes=i), title=f"Clip {i}")
        ids.append(video.id)
    return list(reversed(ids))


async def _walk_feed(client, limit, headers=None):
    seen, cursor, pages = [], None, 0
    while True:
        params = {"limit": limit}
        if cursor:
            params["cursor"] = cursor
        response = await client.get("/api/videos/feed", params=params, headers=headers or {})
        assert response.status_code == 200
        data = response.json()["data"]
        seen.extend(v["id"] for v in data["videos"])
        pages += 1
        cursor = data["next_cursor"]
        if cursor is None:
            return seen, pages


@pytest.mark.asyncio
async def test_feed_pages_in_reverse_chronological_order(client):
    owner = await create_user("owner@example.com")
    expected = await _seed_videos(owner.id, 25)

    first = await client.get("/api/videos/feed")
    assert first.status_code == 200
    data = first.json()["data"]
    assert [v["id"] for v in data["videos"]] == expected[:10]
    assert data["next_cursor"] == expected[9]

    second = await client.get("/api/videos/feed", params={"cursor": data["next_cursor"], "limit": 10})
    data = second.json()["data"]
    assert [v["id"] for v in data["videos"]] == expected[10:20]

    third = await client.get("/api/videos/feed", params={"cursor": data["next_cursor"], "limit": 10})
    data = third.json()["data"]
    assert [v["id"] for v in data["videos"]] == expected[20:]
    assert data["next_cursor"] is None


@pytest.mark.asyncio
@pytest.mark.parametrize("limit", [1, 3, 7, 20])
async def test_feed_walk_has_no_gaps_or_duplicates(client, limit):
    owner = await create_user("owner@example.com")
    expected = await _seed_videos(owner.id, 12)

    seen, pages = await _walk_feed(client, limit)

    assert seen == expected
    assert pages == math.ceil(12 / limit)


@pytest.mark.asyncio
async def test_feed_breaks_created_at_ties_by_id(client):
    owner = await create_user("owner@example.com")
    same_time = [
        (await create_video(owner.id, created_at=BASE_TIME)).id
        for _ in range(5)
    ]

    seen, _ = await _walk_feed(client, 2)

    assert seen == sorted(same_time, reverse=True)


@pytest.mark.asyncio
async def test_feed_exact_page_ends_with_null_cursor(client):
    owner = await create_user("owner@example.com")
    expected = await _seed_videos(owner.id, 10)

    response = await client.get("/api/videos/feed", params={"limit": 10})
    data = response.json()["data"]

    assert [v["id"] for v in data["videos"]] == expected
    assert data["next_cursor"] is None


@pytest.mark.asyncio
async def test_empty_feed(client):
    response = await client.get("/api/videos/feed")

    assert response.status_code == 200
    assert response.json()["data"] == {"videos": [], "next_cursor": None}


@pytest.mark.asyncio
async def test_feed_unknown_cursor_returns_empty_page(client):
    owner = await create_user("owner@example.com")
    await _seed_videos(owner.id, 3)

    response = await client.get("/api/videos/feed", params={"cursor": "missing-id"})

    assert response.status_code == 200
    assert response.json()["data"] == {"videos": [], "next_cursor": None}


@pytest.mark.asyncio
@pytest.mark.parametrize("limit", [0, 21, -1])
async def test_feed_rejects_out_of_range_limit(client, limit):
    response = await client.get("/api/videos/feed", params={"limit": limit})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_feed_marks_liked_videos_for_viewer(client):
    owner = await create_user("owner@example.com", name="Owner")
    viewer = await create_user("viewer@example.com")
    expected = await _seed_videos(owner.id, 4)
    liked = {expected[0], expected[2]}

    for video_id in liked:
        async with TestingSessionLocal() as session:
            await like_video(session, viewer.id, video_id)

    response = await client.get("/api/videos/feed", headers=auth_headers(viewer))
    videos = response.json()["data"]["videos"]
    for video in videos:
        assert video["is_liked"] == (video["id"] in liked)
        assert video["like_count"] == (1 if video["id"] in liked else 0)
        assert video["user"]["name"] == "Owner"

    # Anónimo: mismo orden y contadores, sin likes propios
    anonymous = (await client.get("/api/videos/feed")).json()["data"]["videos"]
    assert [v["id"] for v in anonymous] == [v["id"] for v in videos]
    assert [v["like_count"] for v in anonymous] == [v["like_count"] for v in videos]
    assert not any(v["is_liked"] for v in anonymous)

    # Otro usuario no ve los likes del primero
    other = await create_user("other@example.com")
    others_view = (await client.get("/api/videos/feed", headers=auth_headers(other))).json()["data"]["videos"]
    assert not any(v["is_liked"] for v in others_view)


@pytest.mark.asyncio
async def test_feed_with_invalid_token_is_anonymous(client):
    owner = await create_user("owner@example.com")
    await _seed_videos(owner.id, 2)

    response = await client.get("/api/videos/feed", headers={"Authorization": "Bearer broken"})

    assert response.status_code == 200
    assert len(response.json()["data"]["videos"]) == 2


@pytest.mark.asyncio
async def test_get_feed_clamps_limit():
    owner = await create_user("owner@example.com")
    await _seed_videos(owner.id, 25)

    async with TestingSessionLocal() as session:
        page = await get_feed(session, limit=100)
        assert len(page["videos"]) == 20

        page = await get_feed(session, limit=0)
        assert len(page["videos"]) == 1

        page = await get_feed(session)
        assert len(page["videos"]) == 10
