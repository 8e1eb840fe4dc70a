"""
Integration tests against the real esa API.

Only read-only endpoints are exercised. Set ESA_RUN_INTEGRATION=true together
with ESA_ACCESS_TOKEN and ESA_TEAM_NAME (in the environment or .env.local) to
run them.
"""

import os

import pytest
import pytest_asyncio

from esa_client import EsaApiError, EsaClient, paginate

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        not (
            os.getenv("ESA_RUN_INTEGRATION", "").lower() == "true"
            and os.getenv("ESA_ACCESS_TOKEN")
            and os.getenv("ESA_TEAM_NAME")
        ),
        reason="ESA_RUN_INTEGRATION, ESA_ACCESS_TOKEN and ESA_TEAM_NAME must be set",
    ),
]


@pytest_asyncio.fixture
async def live_client():
    async with EsaClient.from_env() as client:
        yield client


@pytest.mark.asyncio
async def test_authenticated_user(live_client):
    user = await live_client.get_authenticated_user(include_teams=True)

    assert user["screen_name"]
    assert any(team["name"] == live_client.get_team_name() for team in user["teams"])


@pytest.mark.asyncio
async def test_team_and_stats(live_client):
    team = await live_client.get_team()
    stats = await live_client.get_team_stats()

    assert team["name"] == live_client.get_team_name()
    assert stats["members"] >= 1


@pytest.mark.asyncio
async def test_posts_listing(live_client):
    page = await live_client.get_posts(per_page=2)

    assert "posts" in page
    assert page["per_page"] == 2


@pytest.mark.asyncio
async def test_paginate_posts(live_client):
    posts = [
        post
        async for post in paginate(
            live_client.get_posts, "posts", max_pages=2, per_page=1
        )
    ]

    assert len(posts) <= 2


@pytest.mark.asyncio
async def test_missing_post_is_not_found(live_client):
    with pytest.raises(EsaApiError) as exc_info:
        await live_client.get_post(999999999)

    assert exc_info.value.status == 404
