"""
User API Client for esa.
"""

from typing import cast

from ..responses import AuthenticatedUser
from .base_client import EsaRemoteAPIClient


class UserAPIClient(EsaRemoteAPIClient):
    """Client for the authenticated user endpoint."""

    async def get_authenticated_user(
        self, include_teams: bool = False
    ) -> AuthenticatedUser:
        """Get the user owning the access token.

        Args:
            include_teams: Embed the teams the user belongs to

        Returns:
            The authenticated user
        """
        params = {"include": "teams"} if include_teams else {}
        return cast(AuthenticatedUser, await self.get("/user", params))
