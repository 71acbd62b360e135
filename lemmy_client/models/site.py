"""Site, search and federation models."""

from typing import Any

from pydantic import Field

from lemmy_client.models.common import (
    CommentView,
    CommunityView,
    LemmyForm,
    LemmyResponse,
    ListingType,
    ModlogActionType,
    PersonView,
    PostView,
    RegistrationMode,
    SearchType,
    SortType,
)

# =============================================================================
# Request Models
# =============================================================================


class CreateSite(LemmyForm):
    name: str
    sidebar: str | None = None
    description: str | None = None
    icon: str | None = None
    banner: str | None = None
    enable_downvotes: bool | None = None
    enable_nsfw: bool | None = None
    community_creation_admin_only: bool | None = None
    require_email_verification: bool | None = None
    application_question: str | None = None
    private_instance: bool | None = None
    default_theme: str | None = None
    default_post_listing_type: ListingType | None = None
    legal_information: str | None = None
    application_email_admins: bool | None = None
    registration_mode: RegistrationMode | None = None
    federation_enabled: bool | None = None
    captcha_enabled: bool | None = None
    captcha_difficulty: str | None = None
    allowed_instances: list[str] | None = None
    blocked_instances: list[str] | None = None
    taglines: list[str] | None = None


class EditSite(LemmyForm):
    """All fields are optional - only provided fields are updated."""

    name: str | None = None
    sidebar: str | None = None
    description: str | None = None
    icon: str | None = None
    banner: str | None = None
    enable_downvotes: bool | None = None
    enable_nsfw: bool | None = None
    community_creation_admin_only: bool | None = None
    require_email_verification: bool | None = None
    application_question: str | None = None
    private_instance: bool | None = None
    default_theme: str | None = None
    default_post_listing_type: ListingType | None = None
    legal_information: str | None = None
    application_email_admins: bool | None = None
    registration_mode: RegistrationMode | None = None
    federation_enabled: bool | None = None
    captcha_enabled: bool | None = None
    captcha_difficulty: str | None = None
    allowed_instances: list[str] | None = None
    blocked_instances: list[str] | None = None
    blocked_urls: list[str] | None = None
    taglines: list[str] | None = None


class GetModlog(LemmyForm):
    mod_person_id: int | None = None
    community_id: int | None = None
    page: int | None = None
    limit: int | None = None
    type_: ModlogActionType | None = None
    other_person_id: int | None = None
    post_id: int | None = None
    comment_id: int | None = None


class Search(LemmyForm):
    q: str
    community_id: int | None = None
    community_name: str | None = None
    creator_id: int | None = None
    type_: SearchType | None = None
    sort: SortType | None = None
    listing_type: ListingType | None = None
    page: int | None = None
    limit: int | None = None


class ResolveObject(LemmyForm):
    """Fetch a remote object by its ActivityPub id."""

    q: str


class BlockInstance(LemmyForm):
    instance_id: int
    block: bool


# =============================================================================
# Response Models
# =============================================================================


class GetSiteResponse(LemmyResponse):
    site_view: dict[str, Any]
    admins: list[PersonView] = Field(default_factory=list)
    version: str
    my_user: dict[str, Any] | None = None
    all_languages: list[dict[str, Any]] = Field(default_factory=list)
    discussion_languages: list[int] = Field(default_factory=list)
    taglines: list[dict[str, Any]] = Field(default_factory=list)
    custom_emojis: list[dict[str, Any]] = Field(default_factory=list)
    blocked_urls: list[dict[str, Any]] = Field(default_factory=list)


class SiteResponse(LemmyResponse):
    site_view: dict[str, Any]
    taglines: list[dict[str, Any]] = Field(default_factory=list)


class GetModlogResponse(LemmyResponse):
    removed_posts: list[dict[str, Any]] = Field(default_factory=list)
    locked_posts: list[dict[str, Any]] = Field(default_factory=list)
    featured_posts: list[dict[str, Any]] = Field(default_factory=list)
    removed_comments: list[dict[str, Any]] = Field(default_factory=list)
    removed_communities: list[dict[str, Any]] = Field(default_factory=list)
    banned_from_community: list[dict[str, Any]] = Field(default_factory=list)
    banned: list[dict[str, Any]] = Field(default_factory=list)
    added_to_community: list[dict[str, Any]] = Field(default_factory=list)
    transferred_to_community: list[dict[str, Any]] = Field(default_factory=list)
    added: list[dict[str, Any]] = Field(default_factory=list)
    admin_purged_persons: list[dict[str, Any]] = Field(default_factory=list)
    admin_purged_communities: list[dict[str, Any]] = Field(default_factory=list)
    admin_purged_posts: list[dict[str, Any]] = Field(default_factory=list)
    admin_purged_comments: list[dict[str, Any]] = Field(default_factory=list)
    hidden_communities: list[dict[str, Any]] = Field(default_factory=list)


class SearchResponse(LemmyResponse):
    type_: SearchType
    comments: list[CommentView] = Field(default_factory=list)
    posts: list[PostView] = Field(default_factory=list)
    communities: list[CommunityView] = Field(default_factory=list)
    users: list[PersonView] = Field(default_factory=list)


class ResolveObjectResponse(LemmyResponse):
    """At most one of the fields is set."""

    comment: CommentView | None = None
    post: PostView | None = None
    community: CommunityView | None = None
    person: PersonView | None = None


class GetFederatedInstancesResponse(LemmyResponse):
    federated_instances: dict[str, Any] | None = None


class BlockInstanceResponse(LemmyResponse):
    blocked: bool
