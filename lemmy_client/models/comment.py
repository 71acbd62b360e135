"""Comment models."""

from typing import Any

from pydantic import Field

from lemmy_client.models.common import (
    CommentSortType,
    CommentView,
    LemmyForm,
    LemmyResponse,
    ListingType,
    ReportView,
)

# =============================================================================
# Request Models
# =============================================================================


class CreateComment(LemmyForm):
    content: str
    post_id: int
    parent_id: int | None = None
    language_id: int | None = None


class EditComment(LemmyForm):
    comment_id: int
    content: str | None = None
    language_id: int | None = None


class DeleteComment(LemmyForm):
    comment_id: int
    deleted: bool


class RemoveComment(LemmyForm):
    comment_id: int
    removed: bool
    reason: str | None = None


class MarkCommentReplyAsRead(LemmyForm):
    comment_reply_id: int
    read: bool


class DistinguishComment(LemmyForm):
    comment_id: int
    distinguished: bool


class CreateCommentLike(LemmyForm):
    comment_id: int
    score: int


class ListCommentLikes(LemmyForm):
    comment_id: int
    page: int | None = None
    limit: int | None = None


class SaveComment(LemmyForm):
    comment_id: int
    save: bool


class GetComments(LemmyForm):
    type_: ListingType | None = None
    sort: CommentSortType | None = None
    max_depth: int | None = None
    page: int | None = None
    limit: int | None = None
    community_id: int | None = None
    community_name: str | None = None
    post_id: int | None = None
    parent_id: int | None = None
    saved_only: bool | None = None
    liked_only: bool | None = None
    disliked_only: bool | None = None


class GetComment(LemmyForm):
    id: int


class CreateCommentReport(LemmyForm):
    comment_id: int
    reason: str


class ResolveCommentReport(LemmyForm):
    report_id: int
    resolved: bool


class ListCommentReports(LemmyForm):
    comment_id: int | None = None
    page: int | None = None
    limit: int | None = None
    unresolved_only: bool | None = None
    community_id: int | None = None


# =============================================================================
# Response Models
# =============================================================================


class CommentResponse(LemmyResponse):
    comment_view: CommentView
    recipient_ids: list[int] = Field(default_factory=list)


class CommentReplyResponse(LemmyResponse):
    comment_reply_view: dict[str, Any]


class GetCommentsResponse(LemmyResponse):
    comments: list[CommentView] = Field(default_factory=list)


class ListCommentLikesResponse(LemmyResponse):
    comment_likes: list[dict[str, Any]] = Field(default_factory=list)


class CommentReportResponse(LemmyResponse):
    comment_report_view: ReportView


class ListCommentReportsResponse(LemmyResponse):
    comment_reports: list[ReportView] = Field(default_factory=list)
