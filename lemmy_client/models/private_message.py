"""Private message models."""

from pydantic import Field

from lemmy_client.models.common import (
    LemmyForm,
    LemmyResponse,
    PrivateMessageView,
    ReportView,
)

# =============================================================================
# Request Models
# =============================================================================


class GetPrivateMessages(LemmyForm):
    unread_only: bool | None = None
    page: int | None = None
    limit: int | None = None
    creator_id: int | None = None


class CreatePrivateMessage(LemmyForm):
    content: str
    recipient_id: int


class EditPrivateMessage(LemmyForm):
    private_message_id: int
    content: str


class DeletePrivateMessage(LemmyForm):
    private_message_id: int
    deleted: bool


class MarkPrivateMessageAsRead(LemmyForm):
    private_message_id: int
    read: bool


class CreatePrivateMessageReport(LemmyForm):
    private_message_id: int
    reason: str


class ResolvePrivateMessageReport(LemmyForm):
    report_id: int
    resolved: bool


class ListPrivateMessageReports(LemmyForm):
    page: int | None = None
    limit: int | None = None
    unresolved_only: bool | None = None


# =============================================================================
# Response Models
# =============================================================================


class PrivateMessageResponse(LemmyResponse):
    private_message_view: PrivateMessageView


class PrivateMessagesResponse(LemmyResponse):
    private_messages: list[PrivateMessageView] = Field(default_factory=list)


class PrivateMessageReportResponse(LemmyResponse):
    private_message_report_view: ReportView


class ListPrivateMessageReportsResponse(LemmyResponse):
    private_message_reports: list[ReportView] = Field(default_factory=list)
