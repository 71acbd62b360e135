"""Pydantic models shared across Lemmy API groups.

These models track the Lemmy 0.19 v3 API. Unknown fields are kept on
responses and accepted on forms so that additions made by newer instances
do not break decoding.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Enumerations
# =============================================================================

SortType = Literal[
    "Active",
    "Hot",
    "New",
    "Old",
    "TopDay",
    "TopWeek",
    "TopMonth",
    "TopYear",
    "TopAll",
    "MostComments",
    "NewComments",
    "TopHour",
    "TopSixHour",
    "TopTwelveHour",
    "TopThreeMonths",
    "TopSixMonths",
    "TopNineMonths",
    "Controversial",
    "Scaled",
]
CommentSortType = Literal["Hot", "Top", "New", "Old", "Controversial"]
ListingType = Literal["All", "Local", "Subscribed", "ModeratorView"]
SearchType = Literal["All", "Comments", "Posts", "Communities", "Users", "Url"]
SubscribedType = Literal["Subscribed", "NotSubscribed", "Pending"]
PostFeatureType = Literal["Local", "Community"]
RegistrationMode = Literal["Closed", "RequireApplication", "Open"]
CommunityVisibility = Literal["Public", "LocalOnly"]
ModlogActionType = Literal[
    "All",
    "ModRemovePost",
    "ModLockPost",
    "ModFeaturePost",
    "ModRemoveComment",
    "ModRemoveCommunity",
    "ModBanFromCommunity",
    "ModAddCommunity",
    "ModTransferCommunity",
    "ModAdd",
    "ModBan",
    "ModHideCommunity",
    "AdminPurgePerson",
    "AdminPurgeCommunity",
    "AdminPurgePost",
    "AdminPurgeComment",
]

# Report, modlog, registration and site views are passed through as plain
# dicts; their shape is owned by the instance.
ReportView = dict[str, Any]


# =============================================================================
# Bases
# =============================================================================


class LemmyForm(BaseModel):
    """Base for request forms.

    Extra fields are allowed so callers can send parameters newer than
    this client.
    """

    model_config = ConfigDict(extra="allow")


class LemmyResponse(BaseModel):
    """Base for decoded responses. Unknown fields are kept."""

    model_config = ConfigDict(extra="allow")


class SuccessResponse(LemmyResponse):
    success: bool


# =============================================================================
# Sources
# =============================================================================


class Person(LemmyResponse):
    id: int
    name: str
    display_name: str | None = None
    avatar: str | None = None
    banned: bool = False
    published: str | None = None
    updated: str | None = None
    actor_id: str | None = None
    bio: str | None = None
    local: bool = True
    banner: str | None = None
    deleted: bool = False
    matrix_user_id: str | None = None
    bot_account: bool = False
    ban_expires: str | None = None
    instance_id: int | None = None


class Community(LemmyResponse):
    id: int
    name: str
    title: str
    description: str | None = None
    removed: bool = False
    published: str | None = None
    updated: str | None = None
    deleted: bool = False
    nsfw: bool = False
    actor_id: str | None = None
    local: bool = True
    icon: str | None = None
    banner: str | None = None
    hidden: bool = False
    posting_restricted_to_mods: bool = False
    instance_id: int | None = None
    visibility: CommunityVisibility | None = None


class Post(LemmyResponse):
    id: int
    name: str
    url: str | None = None
    body: str | None = None
    creator_id: int
    community_id: int
    removed: bool = False
    locked: bool = False
    published: str | None = None
    updated: str | None = None
    deleted: bool = False
    nsfw: bool = False
    embed_title: str | None = None
    embed_description: str | None = None
    thumbnail_url: str | None = None
    ap_id: str | None = None
    local: bool = True
    language_id: int | None = None
    featured_community: bool = False
    featured_local: bool = False
    alt_text: str | None = None


class Comment(LemmyResponse):
    id: int
    creator_id: int
    post_id: int
    content: str
    removed: bool = False
    published: str | None = None
    updated: str | None = None
    deleted: bool = False
    ap_id: str | None = None
    local: bool = True
    path: str | None = None
    distinguished: bool = False
    language_id: int | None = None


class PrivateMessage(LemmyResponse):
    id: int
    creator_id: int
    recipient_id: int
    content: str
    deleted: bool = False
    read: bool = False
    published: str | None = None
    updated: str | None = None
    ap_id: str | None = None
    local: bool = True


class LoginToken(LemmyResponse):
    user_id: int
    published: str
    ip: str | None = None
    user_agent: str | None = None


# =============================================================================
# Views
# =============================================================================


class PersonView(LemmyResponse):
    person: Person
    counts: dict[str, Any] = Field(default_factory=dict)
    is_admin: bool = False


class CommunityView(LemmyResponse):
    community: Community
    subscribed: SubscribedType = "NotSubscribed"
    blocked: bool = False
    counts: dict[str, Any] = Field(default_factory=dict)
    banned_from_community: bool = False


class CommunityModeratorView(LemmyResponse):
    community: Community
    moderator: Person


class PostView(LemmyResponse):
    post: Post
    creator: Person
    community: Community
    image_details: dict[str, Any] | None = None
    creator_banned_from_community: bool = False
    banned_from_community: bool = False
    creator_is_moderator: bool = False
    creator_is_admin: bool = False
    counts: dict[str, Any] = Field(default_factory=dict)
    subscribed: SubscribedType = "NotSubscribed"
    saved: bool = False
    read: bool = False
    hidden: bool = False
    creator_blocked: bool = False
    my_vote: int | None = None
    unread_comments: int = 0


class CommentView(LemmyResponse):
    comment: Comment
    creator: Person
    post: Post
    community: Community
    counts: dict[str, Any] = Field(default_factory=dict)
    creator_banned_from_community: bool = False
    banned_from_community: bool = False
    creator_is_moderator: bool = False
    creator_is_admin: bool = False
    subscribed: SubscribedType = "NotSubscribed"
    saved: bool = False
    creator_blocked: bool = False
    my_vote: int | None = None


class PrivateMessageView(LemmyResponse):
    private_message: PrivateMessage
    creator: Person
    recipient: Person
