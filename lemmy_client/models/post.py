"""Post models."""

from typing import Any

from pydantic import Field

from lemmy_client.models.common import (
    CommunityModeratorView,
    CommunityView,
    LemmyForm,
    LemmyResponse,
    ListingType,
    PostFeatureType,
    PostView,
    ReportView,
    SortType,
)

# =============================================================================
# Request Models
# =============================================================================


class CreatePost(LemmyForm):
    name: str
    community_id: int
    url: str | None = None
    body: str | None = None
    alt_text: str | None = None
    honeypot: str | None = None
    nsfw: bool | None = None
    language_id: int | None = None
    custom_thumbnail: str | None = None


class GetPost(LemmyForm):
    """Fetch a post by its id, or the post a comment belongs to."""

    id: int | None = None
    comment_id: int | None = None


class EditPost(LemmyForm):
    post_id: int
    name: str | None = None
    url: str | None = None
    body: str | None = None
    alt_text: str | None = None
    nsfw: bool | None = None
    language_id: int | None = None
    custom_thumbnail: str | None = None


class DeletePost(LemmyForm):
    post_id: int
    deleted: bool


class RemovePost(LemmyForm):
    post_id: int
    removed: bool
    reason: str | None = None


class MarkPostAsRead(LemmyForm):
    post_ids: list[int]
    read: bool


class LockPost(LemmyForm):
    post_id: int
    locked: bool


class FeaturePost(LemmyForm):
    post_id: int
    featured: bool
    feature_type: PostFeatureType


class GetPosts(LemmyForm):
    type_: ListingType | None = None
    sort: SortType | None = None
    page: int | None = None
    limit: int | None = None
    community_id: int | None = None
    community_name: str | None = None
    saved_only: bool | None = None
    liked_only: bool | None = None
    disliked_only: bool | None = None
    show_hidden: bool | None = None
    page_cursor: str | None = None


class CreatePostLike(LemmyForm):
    """``score`` is 1 for an upvote, -1 for a downvote and 0 to clear."""

    post_id: int
    score: int


class ListPostLikes(LemmyForm):
    post_id: int
    page: int | None = None
    limit: int | None = None


class SavePost(LemmyForm):
    post_id: int
    save: bool


class CreatePostReport(LemmyForm):
    post_id: int
    reason: str


class ResolvePostReport(LemmyForm):
    report_id: int
    resolved: bool


class ListPostReports(LemmyForm):
    page: int | None = None
    limit: int | None = None
    unresolved_only: bool | None = None
    community_id: int | None = None
    post_id: int | None = None


class GetSiteMetadata(LemmyForm):
    url: str


# =============================================================================
# Response Models
# =============================================================================


class PostResponse(LemmyResponse):
    post_view: PostView


class GetPostResponse(LemmyResponse):
    post_view: PostView
    community_view: CommunityView
    moderators: list[CommunityModeratorView] = Field(default_factory=list)
    cross_posts: list[PostView] = Field(default_factory=list)


class GetPostsResponse(LemmyResponse):
    posts: list[PostView] = Field(default_factory=list)
    next_page: str | None = None


class ListPostLikesResponse(LemmyResponse):
    post_likes: list[dict[str, Any]] = Field(default_factory=list)


class PostReportResponse(LemmyResponse):
    post_report_view: ReportView


class ListPostReportsResponse(LemmyResponse):
    post_reports: list[ReportView] = Field(default_factory=list)


class GetSiteMetadataResponse(LemmyResponse):
    metadata: dict[str, Any]
