"""
Categories and Tags API Client for esa.
"""

from typing import Optional, cast

from ..responses import BatchMoveResponse, TagsResponse
from .base_client import EsaRemoteAPIClient, Params


class CategoriesAPIClient(EsaRemoteAPIClient):
    """Client for category and tag operations."""

    async def batch_move_category(
        self, params: Params, team_name: Optional[str] = None
    ) -> BatchMoveResponse:
        """Move every post of a category (and its subcategories) to another one.

        Args:
            params: ``BatchMoveCategoryParams`` or a ``{"from": ..., "to": ...}`` mapping
            team_name: Team override

        Returns:
            Number of moved posts with the source and destination paths
        """
        return cast(
            BatchMoveResponse,
            await self.post(
                "/teams/:team_name/categories/batch_move", params, team_name
            ),
        )

    async def get_tags(
        self,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        team_name: Optional[str] = None,
    ) -> TagsResponse:
        """List tags with their post counts."""
        return cast(
            TagsResponse,
            await self.get(
                "/teams/:team_name/tags", {"page": page, "per_page": per_page}, team_name
            ),
        )
