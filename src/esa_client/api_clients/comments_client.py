"""
Comments API Client for esa.

Provides comment listing and CRUD operations for posts and teams.
"""

from typing import Literal, Optional, cast

from ..responses import Comment, CommentsResponse
from .base_client import EsaRemoteAPIClient, Params


class CommentsAPIClient(EsaRemoteAPIClient):
    """Client for comment operations."""

    async def get_post_comments(
        self,
        post_number: int,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        team_name: Optional[str] = None,
    ) -> CommentsResponse:
        """List comments on a post.

        Args:
            post_number: Post number within the team
            page: Page number (1-based)
            per_page: Items per page
            team_name: Team override
        """
        return cast(
            CommentsResponse,
            await self.get(
                f"/teams/:team_name/posts/{post_number}/comments",
                {"page": page, "per_page": per_page},
                team_name,
            ),
        )

    async def get_all_comments(
        self,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        team_name: Optional[str] = None,
    ) -> CommentsResponse:
        """List every comment in the team, newest first."""
        return cast(
            CommentsResponse,
            await self.get(
                "/teams/:team_name/comments",
                {"page": page, "per_page": per_page},
                team_name,
            ),
        )

    async def get_comment(
        self,
        comment_id: int,
        include: Optional[Literal["stargazers"]] = None,
        team_name: Optional[str] = None,
    ) -> Comment:
        return cast(
            Comment,
            await self.get(
                f"/teams/:team_name/comments/{comment_id}",
                {"include": include},
                team_name,
            ),
        )

    async def create_comment(
        self, post_number: int, params: Params, team_name: Optional[str] = None
    ) -> Comment:
        """Comment on a post.

        Args:
            post_number: Post number within the team
            params: ``CreateCommentParams`` or an equivalent mapping
            team_name: Team override

        Returns:
            The created comment
        """
        return cast(
            Comment,
            await self.post(
                f"/teams/:team_name/posts/{post_number}/comments",
                {"comment": self._to_payload(params)},
                team_name,
            ),
        )

    async def update_comment(
        self, comment_id: int, params: Params, team_name: Optional[str] = None
    ) -> Comment:
        """Update a comment with ``UpdateCommentParams`` or a mapping."""
        return cast(
            Comment,
            await self.patch(
                f"/teams/:team_name/comments/{comment_id}",
                {"comment": self._to_payload(params)},
                team_name,
            ),
        )

    async def delete_comment(
        self, comment_id: int, team_name: Optional[str] = None
    ) -> None:
        await self.delete(
            f"/teams/:team_name/comments/{comment_id}", team_name=team_name
        )
