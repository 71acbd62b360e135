"""Admin, registration application and custom emoji models."""

from typing import Any

from pydantic import Field

from lemmy_client.models.common import LemmyForm, LemmyResponse, PersonView

# =============================================================================
# Request Models
# =============================================================================


class AddAdmin(LemmyForm):
    person_id: int
    added: bool


class ListRegistrationApplications(LemmyForm):
    unread_only: bool | None = None
    page: int | None = None
    limit: int | None = None


class ApproveRegistrationApplication(LemmyForm):
    id: int
    approve: bool
    deny_reason: str | None = None


class PurgePerson(LemmyForm):
    person_id: int
    reason: str | None = None


class PurgeCommunity(LemmyForm):
    community_id: int
    reason: str | None = None


class PurgePost(LemmyForm):
    post_id: int
    reason: str | None = None


class PurgeComment(LemmyForm):
    comment_id: int
    reason: str | None = None


class CreateCustomEmoji(LemmyForm):
    category: str
    shortcode: str
    image_url: str
    alt_text: str
    keywords: list[str] = Field(default_factory=list)


class EditCustomEmoji(LemmyForm):
    id: int
    category: str
    image_url: str
    alt_text: str
    keywords: list[str] = Field(default_factory=list)


class DeleteCustomEmoji(LemmyForm):
    id: int


# =============================================================================
# Response Models
# =============================================================================


class AddAdminResponse(LemmyResponse):
    admins: list[PersonView] = Field(default_factory=list)


class GetUnreadRegistrationApplicationCountResponse(LemmyResponse):
    registration_applications: int


class ListRegistrationApplicationsResponse(LemmyResponse):
    registration_applications: list[dict[str, Any]] = Field(default_factory=list)


class RegistrationApplicationResponse(LemmyResponse):
    registration_application: dict[str, Any]


class CustomEmojiResponse(LemmyResponse):
    custom_emoji: dict[str, Any]
