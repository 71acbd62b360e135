"""Community models."""

from typing import Any

from pydantic import Field

from lemmy_client.models.common import (
    CommunityModeratorView,
    CommunityView,
    CommunityVisibility,
    LemmyForm,
    LemmyResponse,
    ListingType,
    PersonView,
    SortType,
)

# =============================================================================
# Request Models
# =============================================================================


class CreateCommunity(LemmyForm):
    name: str
    title: str
    description: str | None = None
    icon: str | None = None
    banner: str | None = None
    nsfw: bool | None = None
    posting_restricted_to_mods: bool | None = None
    discussion_languages: list[int] | None = None
    visibility: CommunityVisibility | None = None


class GetCommunity(LemmyForm):
    """Look a community up by id or by name (``name@instance`` for remote)."""

    id: int | None = None
    name: str | None = None


class EditCommunity(LemmyForm):
    community_id: int
    title: str | None = None
    description: str | None = None
    icon: str | None = None
    banner: str | None = None
    nsfw: bool | None = None
    posting_restricted_to_mods: bool | None = None
    discussion_languages: list[int] | None = None
    visibility: CommunityVisibility | None = None


class ListCommunities(LemmyForm):
    type_: ListingType | None = None
    sort: SortType | None = None
    show_nsfw: bool | None = None
    page: int | None = None
    limit: int | None = None


class FollowCommunity(LemmyForm):
    community_id: int
    follow: bool


class BlockCommunity(LemmyForm):
    community_id: int
    block: bool


class DeleteCommunity(LemmyForm):
    community_id: int
    deleted: bool


class RemoveCommunity(LemmyForm):
    community_id: int
    removed: bool
    reason: str | None = None


class TransferCommunity(LemmyForm):
    community_id: int
    person_id: int


class BanFromCommunity(LemmyForm):
    community_id: int
    person_id: int
    ban: bool
    remove_data: bool | None = None
    reason: str | None = None
    expires: int | None = None


class AddModToCommunity(LemmyForm):
    community_id: int
    person_id: int
    added: bool


class HideCommunity(LemmyForm):
    community_id: int
    hidden: bool
    reason: str | None = None


# =============================================================================
# Response Models
# =============================================================================


class CommunityResponse(LemmyResponse):
    community_view: CommunityView
    discussion_languages: list[int] = Field(default_factory=list)


class GetCommunityResponse(LemmyResponse):
    community_view: CommunityView
    site: dict[str, Any] | None = None
    moderators: list[CommunityModeratorView] = Field(default_factory=list)
    discussion_languages: list[int] = Field(default_factory=list)


class ListCommunitiesResponse(LemmyResponse):
    communities: list[CommunityView] = Field(default_factory=list)


class BlockCommunityResponse(LemmyResponse):
    community_view: CommunityView
    blocked: bool


class BanFromCommunityResponse(LemmyResponse):
    person_view: PersonView
    banned: bool


class AddModToCommunityResponse(LemmyResponse):
    moderators: list[CommunityModeratorView] = Field(default_factory=list)
