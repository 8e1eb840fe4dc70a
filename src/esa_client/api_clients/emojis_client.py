"""
Emojis API Client for esa.

Provides listing, uploading and deleting team emojis. Uploads are sent as a
multipart form.
"""

import logging
from typing import Any, Awaitable, Mapping, Optional, Union, cast

from ..models import CreateEmojiParams
from ..responses import CreateEmojiResponse, EmojisResponse
from .base_client import EsaRemoteAPIClient
from .request_body import MultipartBody

logger = logging.getLogger(__name__)


class EmojisAPIClient(EsaRemoteAPIClient):
    """Client for team emoji operations."""

    async def get_emojis(
        self, include_all: bool = False, team_name: Optional[str] = None
    ) -> EmojisResponse:
        """List emojis.

        Args:
            include_all: Also list the built-in emojis, not only team ones
            team_name: Team override
        """
        params = {"include": "all"} if include_all else {}
        return cast(
            EmojisResponse,
            await self.get("/teams/:team_name/emojis", params, team_name),
        )

    def create_emoji(
        self,
        params: Union[CreateEmojiParams, Mapping[str, Any]],
        team_name: Optional[str] = None,
    ) -> Awaitable[CreateEmojiResponse]:
        """Upload a team emoji.

        This is a plain method returning an awaitable: the team is checked and
        the form is built when it is called, so a missing team fails before
        anything is sent.

        Args:
            params: ``CreateEmojiParams`` or an equivalent mapping
            team_name: Team override

        Returns:
            Awaitable resolving to the created emoji code

        Raises:
            ConfigurationError: If neither ``team_name`` nor a client team is set
        """
        team = self._require_team(team_name, "creating emoji")
        if not isinstance(params, CreateEmojiParams):
            params = CreateEmojiParams(**params)

        form = MultipartBody()
        form.add_field("emoji[code]", params.code)
        if params.origin_code:
            form.add_field("emoji[origin_code]", params.origin_code)
        if isinstance(params.image, bytes):
            form.add_file(
                "emoji[image]",
                params.image,
                filename=params.image_filename,
                content_type=params.image_content_type,
            )
        elif params.image:
            form.add_field("emoji[image]", params.image)

        logger.debug(f"Uploading emoji :{params.code}: with fields {form.field_names()}")
        return cast(
            Awaitable[CreateEmojiResponse],
            self.request("POST", "/teams/:team_name/emojis", form, team),
        )

    async def delete_emoji(self, code: str, team_name: Optional[str] = None) -> None:
        await self.delete(f"/teams/:team_name/emojis/{code}", team_name=team_name)
