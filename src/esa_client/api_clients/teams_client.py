"""
Teams API Client for esa.

Provides team, team statistics and member operations.
"""

import logging
from typing import Literal, Optional, cast

from ..responses import Member, MembersResponse, Stats, TeamResponse, TeamsResponse
from .base_client import EsaRemoteAPIClient

logger = logging.getLogger(__name__)


class TeamsAPIClient(EsaRemoteAPIClient):
    """Client for team and member operations."""

    async def get_teams(
        self, role: Optional[Literal["owner", "member"]] = None
    ) -> TeamsResponse:
        """Get teams the authenticated user belongs to.

        Args:
            role: Only list teams where the user has this role

        Returns:
            Paginated team listing
        """
        return cast(TeamsResponse, await self.get("/teams", {"role": role}))

    async def get_team(self, team_name: Optional[str] = None) -> TeamResponse:
        """Get a team.

        Args:
            team_name: Team override (defaults to the client team)
        """
        return cast(
            TeamResponse, await self.get("/teams/:team_name", team_name=team_name)
        )

    async def get_team_stats(self, team_name: Optional[str] = None) -> Stats:
        """Get member, post, comment, star and active-user counts of a team."""
        return cast(
            Stats, await self.get("/teams/:team_name/stats", team_name=team_name)
        )

    async def get_members(
        self,
        sort: Optional[Literal["posts_count", "joined", "last_accessed"]] = None,
        order: Optional[Literal["desc", "asc"]] = None,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        team_name: Optional[str] = None,
    ) -> MembersResponse:
        """List team members.

        Args:
            sort: Sort key
            order: Sort direction
            page: Page number (1-based)
            per_page: Items per page
            team_name: Team override

        Returns:
            Paginated member listing
        """
        params = {"sort": sort, "order": order, "page": page, "per_page": per_page}
        return cast(
            MembersResponse,
            await self.get("/teams/:team_name/members", params, team_name),
        )

    async def get_member(
        self, screen_name_or_email: str, team_name: Optional[str] = None
    ) -> Member:
        return cast(
            Member,
            await self.get(
                f"/teams/:team_name/members/{screen_name_or_email}",
                team_name=team_name,
            ),
        )

    async def delete_member(
        self, screen_name_or_email: str, team_name: Optional[str] = None
    ) -> None:
        """Remove a member from the team."""
        await self.delete(
            f"/teams/:team_name/members/{screen_name_or_email}", team_name=team_name
        )
