"""
esa API client combining every resource client.

Example:
    async with EsaClient(access_token="...", team_name="docs") as client:
        posts = await client.get_posts(q="in:handbook", per_page=50)
        post = await client.create_post(CreatePostParams(name="Hello"))
"""

from .api_clients.categories_client import CategoriesAPIClient
from .api_clients.comments_client import CommentsAPIClient
from .api_clients.emojis_client import EmojisAPIClient
from .api_clients.invitations_client import InvitationsAPIClient
from .api_clients.posts_client import PostsAPIClient
from .api_clients.stars_client import StarsAPIClient
from .api_clients.teams_client import TeamsAPIClient
from .api_clients.user_client import UserAPIClient


class EsaClient(
    TeamsAPIClient,
    PostsAPIClient,
    CommentsAPIClient,
    StarsAPIClient,
    CategoriesAPIClient,
    InvitationsAPIClient,
    EmojisAPIClient,
    UserAPIClient,
):
    """Client for the whole esa API v1 surface.

    All resource clients share one session: one token, one default team and one
    underlying ``httpx.AsyncClient``.
    """

    pass
