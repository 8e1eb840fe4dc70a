"""
Invitations API Client for esa.

Provides the shared invitation URL and per-email invitations.
"""

import logging
from typing import Optional, cast

from ..responses import (
    CreateInvitationsResponse,
    InvitationsResponse,
    InvitationUrlResponse,
)
from .base_client import EsaRemoteAPIClient, Params

logger = logging.getLogger(__name__)


class InvitationsAPIClient(EsaRemoteAPIClient):
    """Client for team invitation operations."""

    async def get_invitation_url(
        self, team_name: Optional[str] = None
    ) -> InvitationUrlResponse:
        """Get the team's shared invitation URL."""
        return cast(
            InvitationUrlResponse,
            await self.get("/teams/:team_name/invitation", team_name=team_name),
        )

    async def regenerate_invitation_url(
        self, team_name: Optional[str] = None
    ) -> InvitationUrlResponse:
        """Invalidate the shared invitation URL and issue a new one."""
        logger.info("Regenerating esa invitation URL")
        return cast(
            InvitationUrlResponse,
            await self.post(
                "/teams/:team_name/invitation_regenerator", team_name=team_name
            ),
        )

    async def invite_members(
        self, params: Params, team_name: Optional[str] = None
    ) -> CreateInvitationsResponse:
        """Invite members by email.

        Args:
            params: ``InviteMembersParams`` or a ``{"emails": [...]}`` mapping
            team_name: Team override

        Returns:
            The created invitations
        """
        return cast(
            CreateInvitationsResponse,
            await self.post(
                "/teams/:team_name/invitations",
                {"member": self._to_payload(params)},
                team_name,
            ),
        )

    async def get_invitations(
        self,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        team_name: Optional[str] = None,
    ) -> InvitationsResponse:
        return cast(
            InvitationsResponse,
            await self.get(
                "/teams/:team_name/invitations",
                {"page": page, "per_page": per_page},
                team_name,
            ),
        )

    async def delete_invitation(self, code: str, team_name: Optional[str] = None) -> None:
        """Revoke a pending email invitation."""
        await self.delete(f"/teams/:team_name/invitations/{code}", team_name=team_name)
