"""
Stars and Watch API Client for esa.

Provides starring of posts and comments and watching of posts.
"""

from typing import Optional, cast

from ..responses import StargazersResponse, WatchersResponse
from .base_client import EsaRemoteAPIClient, Params


class StarsAPIClient(EsaRemoteAPIClient):
    """Client for star and watch operations."""

    async def get_post_stargazers(
        self,
        post_number: int,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        team_name: Optional[str] = None,
    ) -> StargazersResponse:
        """List users who starred a post."""
        return cast(
            StargazersResponse,
            await self.get(
                f"/teams/:team_name/posts/{post_number}/stargazers",
                {"page": page, "per_page": per_page},
                team_name,
            ),
        )

    async def star_post(
        self,
        post_number: int,
        params: Params = None,
        team_name: Optional[str] = None,
    ) -> None:
        """Star a post.

        Args:
            post_number: Post number within the team
            params: Optional ``CreateStarParams`` with a star comment body
            team_name: Team override
        """
        await self.post(
            f"/teams/:team_name/posts/{post_number}/star", params, team_name
        )

    async def unstar_post(
        self, post_number: int, team_name: Optional[str] = None
    ) -> None:
        await self.delete(
            f"/teams/:team_name/posts/{post_number}/star", team_name=team_name
        )

    async def get_comment_stargazers(
        self,
        comment_id: int,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        team_name: Optional[str] = None,
    ) -> StargazersResponse:
        """List users who starred a comment."""
        return cast(
            StargazersResponse,
            await self.get(
                f"/teams/:team_name/comments/{comment_id}/stargazers",
                {"page": page, "per_page": per_page},
                team_name,
            ),
        )

    async def star_comment(
        self,
        comment_id: int,
        params: Params = None,
        team_name: Optional[str] = None,
    ) -> None:
        await self.post(
            f"/teams/:team_name/comments/{comment_id}/star", params, team_name
        )

    async def unstar_comment(
        self, comment_id: int, team_name: Optional[str] = None
    ) -> None:
        await self.delete(
            f"/teams/:team_name/comments/{comment_id}/star", team_name=team_name
        )

    async def get_post_watchers(
        self,
        post_number: int,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        team_name: Optional[str] = None,
    ) -> WatchersResponse:
        """List users watching a post."""
        return cast(
            WatchersResponse,
            await self.get(
                f"/teams/:team_name/posts/{post_number}/watchers",
                {"page": page, "per_page": per_page},
                team_name,
            ),
        )

    async def watch_post(self, post_number: int, team_name: Optional[str] = None) -> None:
        await self.post(
            f"/teams/:team_name/posts/{post_number}/watch", team_name=team_name
        )

    async def unwatch_post(
        self, post_number: int, team_name: Optional[str] = None
    ) -> None:
        await self.delete(
            f"/teams/:team_name/posts/{post_number}/watch", team_name=team_name
        )
