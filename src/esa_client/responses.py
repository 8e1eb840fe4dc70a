"""Response shapes of the esa API.

These are structural declarations only; the client returns the decoded JSON
unchanged and never validates it against them.
"""

from typing import List, Literal, Optional, TypedDict


class PaginationResponse(TypedDict):
    """Pagination envelope shared by every list endpoint."""

    prev_page: Optional[int]
    next_page: Optional[int]
    total_count: int
    page: int
    per_page: int
    max_per_page: int


class _UserBase(TypedDict):
    myself: bool
    name: str
    screen_name: str
    icon: str


class User(_UserBase, total=False):
    email: str


class Team(TypedDict):
    name: str
    privacy: Literal["closed", "open"]
    description: str
    icon: str
    url: str


class TeamsResponse(PaginationResponse):
    teams: List[Team]


TeamResponse = Team


class Stats(TypedDict):
    members: int
    posts: int
    posts_wip: int
    posts_shipped: int
    comments: int
    stars: int
    daily_active_users: int
    weekly_active_users: int
    monthly_active_users: int


class Member(User):
    role: Literal["owner", "member"]
    posts_count: int
    joined_at: str
    last_accessed_at: str


class MembersResponse(PaginationResponse):
    members: List[Member]


class _PostBase(TypedDict):
    number: int
    name: str
    full_name: str
    wip: bool
    body_md: str
    body_html: str
    created_at: str
    message: str
    url: str
    updated_at: str
    tags: List[str]
    category: Optional[str]
    revision_number: int
    created_by: User
    updated_by: User


class Post(_PostBase, total=False):
    kind: Literal["stock", "flow"]
    comments_count: int
    tasks_count: int
    done_tasks_count: int
    stargazers_count: int
    watchers_count: int
    star: bool
    watch: bool
    overlapped: bool
    comments: List["Comment"]
    stargazers: List["Star"]


class PostsResponse(PaginationResponse):
    posts: List[Post]


class _CommentBase(TypedDict):
    id: int
    body_md: str
    body_html: str
    created_at: str
    updated_at: str
    url: str
    created_by: User
    stargazers_count: int
    star: bool


class Comment(_CommentBase, total=False):
    stargazers: List["Star"]


class CommentsResponse(PaginationResponse):
    comments: List[Comment]


class Star(TypedDict):
    created_at: str
    body: Optional[str]
    user: User


class StargazersResponse(PaginationResponse):
    stargazers: List[Star]


class Watcher(TypedDict):
    created_at: str
    user: User


class WatchersResponse(PaginationResponse):
    watchers: List[Watcher]


BatchMoveResponse = TypedDict(
    "BatchMoveResponse", {"count": int, "from": str, "to": str}
)


class Tag(TypedDict):
    name: str
    posts_count: int


class TagsResponse(PaginationResponse):
    tags: List[Tag]


class InvitationUrlResponse(TypedDict):
    url: str


class Invitation(TypedDict):
    email: str
    code: str
    expires_at: str
    url: str


class InvitationsResponse(PaginationResponse):
    invitations: List[Invitation]


class CreateInvitationsResponse(TypedDict):
    invitations: List[Invitation]


class Emoji(TypedDict):
    code: str
    aliases: List[str]
    category: str
    raw: Optional[str]
    url: str


class EmojisResponse(TypedDict):
    emojis: List[Emoji]


class CreateEmojiResponse(TypedDict):
    code: str


class _AuthenticatedUserBase(TypedDict):
    id: int
    name: str
    screen_name: str
    created_at: str
    updated_at: str
    icon: str
    email: str


class AuthenticatedUser(_AuthenticatedUserBase, total=False):
    teams: List[Team]
