"""Account and person models."""

from typing import Any

from pydantic import Field

from lemmy_client.models.common import (
    CommentSortType,
    CommentView,
    CommunityModeratorView,
    LemmyForm,
    LemmyResponse,
    ListingType,
    PersonView,
    PostView,
    SortType,
)

# =============================================================================
# Request Models
# =============================================================================


class Register(LemmyForm):
    username: str
    password: str
    password_verify: str
    show_nsfw: bool | None = None
    email: str | None = None
    captcha_uuid: str | None = None
    captcha_answer: str | None = None
    honeypot: str | None = None
    answer: str | None = None


class Login(LemmyForm):
    """Log in with a username or email address.

    ``totp_2fa_token`` is only needed when two factor auth is enabled.
    """

    username_or_email: str
    password: str
    totp_2fa_token: str | None = None


class GetPersonDetails(LemmyForm):
    person_id: int | None = None
    username: str | None = None
    sort: SortType | None = None
    page: int | None = None
    limit: int | None = None
    community_id: int | None = None
    saved_only: bool | None = None


class GetPersonMentions(LemmyForm):
    sort: CommentSortType | None = None
    page: int | None = None
    limit: int | None = None
    unread_only: bool | None = None


class MarkPersonMentionAsRead(LemmyForm):
    person_mention_id: int
    read: bool


class GetReplies(LemmyForm):
    sort: CommentSortType | None = None
    page: int | None = None
    limit: int | None = None
    unread_only: bool | None = None


class BanPerson(LemmyForm):
    person_id: int
    ban: bool
    remove_data: bool | None = None
    reason: str | None = None
    expires: int | None = None


class BlockPerson(LemmyForm):
    person_id: int
    block: bool


class DeleteAccount(LemmyForm):
    password: str
    delete_content: bool


class PasswordReset(LemmyForm):
    email: str


class PasswordChangeAfterReset(LemmyForm):
    token: str
    password: str
    password_verify: str


class SaveUserSettings(LemmyForm):
    """All fields are optional - only provided fields are updated."""

    show_nsfw: bool | None = None
    blur_nsfw: bool | None = None
    auto_expand: bool | None = None
    theme: str | None = None
    default_sort_type: SortType | None = None
    default_listing_type: ListingType | None = None
    interface_language: str | None = None
    avatar: str | None = None
    banner: str | None = None
    display_name: str | None = None
    email: str | None = None
    bio: str | None = None
    matrix_user_id: str | None = None
    show_avatars: bool | None = None
    send_notifications_to_email: bool | None = None
    bot_account: bool | None = None
    show_bot_accounts: bool | None = None
    show_read_posts: bool | None = None
    discussion_languages: list[int] | None = None
    open_links_in_new_tab: bool | None = None
    infinite_scroll_enabled: bool | None = None
    post_listing_mode: str | None = None
    enable_keyboard_navigation: bool | None = None
    enable_animated_images: bool | None = None
    collapse_bot_comments: bool | None = None
    show_scores: bool | None = None
    show_upvotes: bool | None = None
    show_downvotes: bool | None = None
    show_upvote_percentage: bool | None = None


class ChangePassword(LemmyForm):
    new_password: str
    new_password_verify: str
    old_password: str


class GetReportCount(LemmyForm):
    community_id: int | None = None


class VerifyEmail(LemmyForm):
    token: str


class UpdateTotp(LemmyForm):
    totp_token: str
    enabled: bool


# =============================================================================
# Response Models
# =============================================================================


class LoginResponse(LemmyResponse):
    """``jwt`` is None when registration needs an application or email check."""

    jwt: str | None = None
    registration_created: bool = False
    verify_email_sent: bool = False


class GetPersonDetailsResponse(LemmyResponse):
    person_view: PersonView
    site: dict[str, Any] | None = None
    comments: list[CommentView] = Field(default_factory=list)
    posts: list[PostView] = Field(default_factory=list)
    moderates: list[CommunityModeratorView] = Field(default_factory=list)


class GetPersonMentionsResponse(LemmyResponse):
    mentions: list[dict[str, Any]] = Field(default_factory=list)


class PersonMentionResponse(LemmyResponse):
    person_mention_view: dict[str, Any]


class GetRepliesResponse(LemmyResponse):
    replies: list[dict[str, Any]] = Field(default_factory=list)


class BanPersonResponse(LemmyResponse):
    person_view: PersonView
    banned: bool


class BannedPersonsResponse(LemmyResponse):
    banned: list[PersonView] = Field(default_factory=list)


class BlockPersonResponse(LemmyResponse):
    person_view: PersonView
    blocked: bool


class CaptchaResponse(LemmyResponse):
    png: str
    wav: str
    uuid: str


class GetCaptchaResponse(LemmyResponse):
    """``ok`` is None when captchas are disabled on the instance."""

    ok: CaptchaResponse | None = None


class GetReportCountResponse(LemmyResponse):
    community_id: int | None = None
    comment_reports: int
    post_reports: int
    private_message_reports: int | None = None


class GetUnreadCountResponse(LemmyResponse):
    replies: int
    mentions: int
    private_messages: int


class GenerateTotpSecretResponse(LemmyResponse):
    totp_secret_url: str


class UpdateTotpResponse(LemmyResponse):
    enabled: bool
