"""Request parameter models for the esa API.

Resource methods accept these models or plain mappings. Models are dumped with
``exclude_none=True`` so unset optional fields are not sent.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class CreatePostParams(BaseModel):
    """Body of ``POST /teams/:team_name/posts`` (wrapped as ``{"post": ...}``)."""

    name: str = Field(..., description="Post title")
    body_md: Optional[str] = Field(None, description="Markdown body")
    tags: Optional[List[str]] = Field(None, description="Tags without the leading #")
    category: Optional[str] = Field(None, description="Category path")
    wip: Optional[bool] = Field(None, description="Whether the post is work in progress")
    message: Optional[str] = Field(None, description="Revision message")
    user: Optional[str] = Field(
        None, description="Screen name to post as (team owners only)"
    )
    template_post_id: Optional[int] = Field(None, description="Template post number")


class OriginalRevision(BaseModel):
    """Revision the update is based on, used by esa for conflict detection."""

    body_md: str
    number: int
    user: str


class UpdatePostParams(BaseModel):
    """Body of ``PATCH /teams/:team_name/posts/{number}``."""

    name: Optional[str] = None
    body_md: Optional[str] = None
    tags: Optional[List[str]] = None
    category: Optional[str] = None
    wip: Optional[bool] = None
    message: Optional[str] = None
    created_by: Optional[str] = None
    updated_by: Optional[str] = None
    original_revision: Optional[OriginalRevision] = None


class CreateCommentParams(BaseModel):
    """Body of a comment create (wrapped as ``{"comment": ...}``)."""

    body_md: str
    user: Optional[str] = None


class UpdateCommentParams(BaseModel):
    """Body of a comment update (wrapped as ``{"comment": ...}``)."""

    body_md: str
    user: Optional[str] = None


class CreateStarParams(BaseModel):
    body: Optional[str] = None


class BatchMoveCategoryParams(BaseModel):
    """Body of ``POST /teams/:team_name/categories/batch_move``.

    ``from`` is a Python keyword, so the field is ``from_`` and is sent as
    ``from``.
    """

    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(..., alias="from", description="Source category path")
    to: str = Field(..., description="Destination category path")


class InviteMembersParams(BaseModel):
    """Body of an email invitation (wrapped as ``{"member": ...}``)."""

    emails: List[str]


class CreateEmojiParams(BaseModel):
    """Fields of the multipart emoji upload.

    ``image`` is either a string sent as a plain form field or raw bytes sent
    as a file attachment named ``image_filename``.
    """

    code: str = Field(..., min_length=1, description="Emoji code without colons")
    origin_code: Optional[str] = Field(
        None, description="Existing emoji code to alias instead of uploading"
    )
    image: Optional[Union[bytes, str]] = None
    image_filename: str = "emoji.png"
    image_content_type: Optional[str] = None
