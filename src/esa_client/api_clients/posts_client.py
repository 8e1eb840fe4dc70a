"""
Posts API Client for esa.

Provides post listing, search and CRUD operations.
"""

import logging
from typing import Literal, Optional, cast

from ..responses import Post, PostsResponse
from .base_client import EsaRemoteAPIClient, Params

logger = logging.getLogger(__name__)

PostSort = Literal[
    "updated", "created", "number", "stars", "watches", "comments", "best_match"
]


class PostsAPIClient(EsaRemoteAPIClient):
    """Client for post operations."""

    async def get_posts(
        self,
        q: Optional[str] = None,
        include: Optional[str] = None,
        sort: Optional[PostSort] = None,
        order: Optional[Literal["desc", "asc"]] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        team_name: Optional[str] = None,
    ) -> PostsResponse:
        """List posts of a team.

        Args:
            q: esa search query (e.g. ``in:docs wip:false``)
            include: Extra data to embed, e.g. ``comments`` or ``stargazers``
            sort: Sort key
            order: Sort direction
            page: Page number (1-based)
            per_page: Items per page
            team_name: Team override

        Returns:
            Paginated post listing
        """
        params = {
            "q": q,
            "include": include,
            "sort": sort,
            "order": order,
            "page": page,
            "per_page": per_page,
        }
        return cast(
            PostsResponse, await self.get("/teams/:team_name/posts", params, team_name)
        )

    async def search_posts(
        self,
        query: str,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        team_name: Optional[str] = None,
    ) -> PostsResponse:
        """Search posts with an esa search query."""
        return await self.get_posts(
            q=query, page=page, per_page=per_page, team_name=team_name
        )

    async def get_post(
        self,
        post_number: int,
        include: Optional[str] = None,
        team_name: Optional[str] = None,
    ) -> Post:
        """Get a post.

        Args:
            post_number: Post number within the team
            include: ``comments``, ``comments,comments.stargazers`` or ``stargazers``
            team_name: Team override
        """
        return cast(
            Post,
            await self.get(
                f"/teams/:team_name/posts/{post_number}", {"include": include}, team_name
            ),
        )

    async def create_post(
        self, params: Params, team_name: Optional[str] = None
    ) -> Post:
        """Create a post.

        Args:
            params: ``CreatePostParams`` or an equivalent mapping
            team_name: Team override

        Returns:
            The created post
        """
        payload = {"post": self._to_payload(params)}
        return cast(Post, await self.post("/teams/:team_name/posts", payload, team_name))

    async def update_post(
        self, post_number: int, params: Params, team_name: Optional[str] = None
    ) -> Post:
        """Update a post.

        Args:
            post_number: Post number within the team
            params: ``UpdatePostParams`` or an equivalent mapping
            team_name: Team override

        Returns:
            The updated post; ``overlapped`` is true when esa merged a conflict
        """
        payload = {"post": self._to_payload(params)}
        return cast(
            Post,
            await self.patch(f"/teams/:team_name/posts/{post_number}", payload, team_name),
        )

    async def delete_post(self, post_number: int, team_name: Optional[str] = None) -> None:
        await self.delete(f"/teams/:team_name/posts/{post_number}", team_name=team_name)
