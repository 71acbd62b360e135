"""Async client for the Lemmy v3 HTTP API.

Example:
    from lemmy_client import ClientOptions, LemmyClient
    from lemmy_client.models import Login

    async with LemmyClient(ClientOptions(domain="lemmy.ml")) as client:
        result = await client.login(Login(username_or_email="me", password="..."))
        if result.is_ok():
            client.set_jwt(result.value.jwt)
"""

import os
from collections.abc import Mapping
from typing import Any, TypeVar

from lemmy_client._internal.backends import LemmyBackend, Method, default_backend
from lemmy_client.models import (
    AddAdmin,
    AddAdminResponse,
    AddModToCommunity,
    AddModToCommunityResponse,
    ApproveRegistrationApplication,
    BanFromCommunity,
    BanFromCommunityResponse,
    BanPerson,
    BanPersonResponse,
    BannedPersonsResponse,
    BlockCommunity,
    BlockCommunityResponse,
    BlockInstance,
    BlockInstanceResponse,
    BlockPerson,
    BlockPersonResponse,
    ChangePassword,
    CommentReplyResponse,
    CommentReportResponse,
    CommentResponse,
    CommunityResponse,
    CreateComment,
    CreateCommentLike,
    CreateCommentReport,
    CreateCommunity,
    CreateCustomEmoji,
    CreatePost,
    CreatePostLike,
    CreatePostReport,
    CreatePrivateMessage,
    CreatePrivateMessageReport,
    CreateSite,
    CustomEmojiResponse,
    DeleteAccount,
    DeleteComment,
    DeleteCommunity,
    DeleteCustomEmoji,
    DeletePost,
    DeletePrivateMessage,
    DistinguishComment,
    EditComment,
    EditCommunity,
    EditCustomEmoji,
    EditPost,
    EditPrivateMessage,
    EditSite,
    FeaturePost,
    FollowCommunity,
    GenerateTotpSecretResponse,
    GetCaptchaResponse,
    GetComment,
    GetComments,
    GetCommentsResponse,
    GetCommunity,
    GetCommunityResponse,
    GetFederatedInstancesResponse,
    GetModlog,
    GetModlogResponse,
    GetPersonDetails,
    GetPersonDetailsResponse,
    GetPersonMentions,
    GetPersonMentionsResponse,
    GetPost,
    GetPostResponse,
    GetPosts,
    GetPostsResponse,
    GetPrivateMessages,
    GetReplies,
    GetRepliesResponse,
    GetReportCount,
    GetReportCountResponse,
    GetSiteMetadata,
    GetSiteMetadataResponse,
    GetSiteResponse,
    GetUnreadCountResponse,
    GetUnreadRegistrationApplicationCountResponse,
    HideCommunity,
    ListCommentLikes,
    ListCommentLikesResponse,
    ListCommentReports,
    ListCommentReportsResponse,
    ListCommunities,
    ListCommunitiesResponse,
    ListPostLikes,
    ListPostLikesResponse,
    ListPostReports,
    ListPostReportsResponse,
    ListPrivateMessageReports,
    ListPrivateMessageReportsResponse,
    ListRegistrationApplications,
    ListRegistrationApplicationsResponse,
    LockPost,
    Login,
    LoginResponse,
    LoginToken,
    MarkCommentReplyAsRead,
    MarkPersonMentionAsRead,
    MarkPostAsRead,
    MarkPrivateMessageAsRead,
    PasswordChangeAfterReset,
    PasswordReset,
    PersonMentionResponse,
    PostReportResponse,
    PostResponse,
    PrivateMessageReportResponse,
    PrivateMessageResponse,
    PrivateMessagesResponse,
    PurgeComment,
    PurgeCommunity,
    PurgePerson,
    PurgePost,
    Register,
    RegistrationApplicationResponse,
    RemoveComment,
    RemoveCommunity,
    RemovePost,
    ResolveCommentReport,
    ResolveObject,
    ResolveObjectResponse,
    ResolvePostReport,
    ResolvePrivateMessageReport,
    SaveComment,
    SavePost,
    SaveUserSettings,
    Search,
    SearchResponse,
    SiteResponse,
    SuccessResponse,
    TransferCommunity,
    UpdateTotp,
    UpdateTotpResponse,
    VerifyEmail,
)
from lemmy_client.options import ClientOptions
from lemmy_client.request import LemmyRequest, as_request
from lemmy_client.response import LemmyResult

R = TypeVar("R")


class LemmyClient:
    """Client for a single Lemmy instance.

    Every method performs exactly one request and returns a ``LemmyResult``:
    ``Ok`` with the decoded response, or ``Err`` with a ``LemmyApiError``
    (the instance rejected the request) or a ``LemmyOtherError`` (the
    request could not be sent or the response could not be decoded).
    Nothing is retried or cached.

    Methods taking a form accept the bare form or a ``LemmyRequest`` wrapping
    it with a per-call token. Methods without a form accept an optional
    ``LemmyRequest`` for the same purpose.
    """

    def __init__(
        self,
        options: ClientOptions,
        *,
        backend: LemmyBackend | None = None,
        headers: Mapping[str, str] | None = None,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            options: Instance domain, scheme and default token.
            backend: Transport backend, bound to ``options``. A backend
                serves one client; binding it to other options raises
                ``LemmyConfigError``. Defaults to the backend for the
                current platform.
            headers: Headers sent with every request.
            debug: Enable debug logging to stderr.
        """
        self._options = options
        if backend is None:
            backend = default_backend(options, debug=debug)
        backend.bind(options)
        self._backend = backend
        self.headers: dict[str, str] = dict(headers or {})

    @classmethod
    def from_env(cls) -> "LemmyClient":
        """Create a client from environment variables.

        Reads the variables documented on ``ClientOptions.from_env`` plus:
            LEMMY_CLIENT_DEBUG: Set to "1" to enable debug logging.

        Raises:
            LemmyConfigError: If LEMMY_DOMAIN is missing.
        """
        debug = os.environ.get("LEMMY_CLIENT_DEBUG", "") == "1"
        return cls(ClientOptions.from_env(), debug=debug)

    @property
    def options(self) -> ClientOptions:
        """Options shared with the backend. Mutated by ``set_jwt``."""
        return self._options

    def set_jwt(self, jwt: str | None) -> None:
        """Set the default token used by every later request."""
        self._options.with_jwt(jwt)

    async def aclose(self) -> None:
        """Close the backend and any HTTP client it owns."""
        await self._backend.aclose()

    async def __aenter__(self) -> "LemmyClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def _make_request(
        self,
        method: Method,
        path: str,
        request: Any,
        response_type: type[R] | Any,
    ) -> LemmyResult[R]:
        return await self._backend.make_request(
            method, path, as_request(request), self.headers, response_type
        )

    # =========================================================================
    # Site
    # =========================================================================

    async def get_site(
        self, request: LemmyRequest[Any] | None = None
    ) -> LemmyResult[GetSiteResponse]:
        """Get the site and, when logged in, the current user."""
        return await self._make_request("GET", "site", request, GetSiteResponse)

    async def create_site(
        self, request: LemmyRequest[CreateSite] | CreateSite
    ) -> LemmyResult[SiteResponse]:
        """Create the site. Only used once, during setup."""
        return await self._make_request("POST", "site", request, SiteResponse)

    async def edit_site(
        self, request: LemmyRequest[EditSite] | EditSite
    ) -> LemmyResult[SiteResponse]:
        """Edit the site."""
        return await self._make_request("PUT", "site", request, SiteResponse)

    async def leave_admin(
        self, request: LemmyRequest[Any] | None = None
    ) -> LemmyResult[GetSiteResponse]:
        """Leave the admin team."""
        return await self._make_request("POST", "user/leave_admin", request, GetSiteResponse)

    async def get_modlog(
        self, request: LemmyRequest[GetModlog] | GetModlog | None = None
    ) -> LemmyResult[GetModlogResponse]:
        """Get the modlog."""
        return await self._make_request("GET", "modlog", request, GetModlogResponse)

    async def search(self, request: LemmyRequest[Search] | Search) -> LemmyResult[SearchResponse]:
        """Search Lemmy."""
        return await self._make_request("GET", "search", request, SearchResponse)

    async def resolve_object(
        self, request: LemmyRequest[ResolveObject] | ResolveObject
    ) -> LemmyResult[ResolveObjectResponse]:
        """Fetch a non-local object by its ActivityPub id."""
        return await self._make_request("GET", "resolve_object", request, ResolveObjectResponse)

    async def get_federated_instances(
        self, request: LemmyRequest[Any] | None = None
    ) -> LemmyResult[GetFederatedInstancesResponse]:
        """List linked, allowed and blocked instances."""
        return await self._make_request(
            "GET", "federated_instances", request, GetFederatedInstancesResponse
        )

    async def block_instance(
        self, request: LemmyRequest[BlockInstance] | BlockInstance
    ) -> LemmyResult[BlockInstanceResponse]:
        """Block or unblock an instance for the current user."""
        return await self._make_request("POST", "site/block", request, BlockInstanceResponse)

    # =========================================================================
    # Community
    # =========================================================================

    async def create_community(
        self, request: LemmyRequest[CreateCommunity] | CreateCommunity
    ) -> LemmyResult[CommunityResponse]:
        """Create a community."""
        return await self._make_request("POST", "community", request, CommunityResponse)

    async def get_community(
        self, request: LemmyRequest[GetCommunity] | GetCommunity
    ) -> LemmyResult[GetCommunityResponse]:
        """Get a community by id or name."""
        return await self._make_request("GET", "community", request, GetCommunityResponse)

    async def edit_community(
        self, request: LemmyRequest[EditCommunity] | EditCommunity
    ) -> LemmyResult[CommunityResponse]:
        """Edit a community."""
        return await self._make_request("PUT", "community", request, CommunityResponse)

    async def list_communities(
        self, request: LemmyRequest[ListCommunities] | ListCommunities | None = None
    ) -> LemmyResult[ListCommunitiesResponse]:
        """List communities."""
        return await self._make_request("GET", "community/list", request, ListCommunitiesResponse)

    async def follow_community(
        self, request: LemmyRequest[FollowCommunity] | FollowCommunity
    ) -> LemmyResult[CommunityResponse]:
        """Follow or unfollow a community."""
        return await self._make_request("POST", "community/follow", request, CommunityResponse)

    async def block_community(
        self, request: LemmyRequest[BlockCommunity] | BlockCommunity
    ) -> LemmyResult[BlockCommunityResponse]:
        """Block or unblock a community."""
        return await self._make_request("POST", "community/block", request, BlockCommunityResponse)

    async def delete_community(
        self, request: LemmyRequest[DeleteCommunity] | DeleteCommunity
    ) -> LemmyResult[CommunityResponse]:
        """Delete or restore a community. Only the creator can do this."""
        return await self._make_request("POST", "community/delete", request, CommunityResponse)

    async def remove_community(
        self, request: LemmyRequest[RemoveCommunity] | RemoveCommunity
    ) -> LemmyResult[CommunityResponse]:
        """Remove or restore a community as an admin."""
        return await self._make_request("POST", "community/remove", request, CommunityResponse)

    async def transfer_community(
        self, request: LemmyRequest[TransferCommunity] | TransferCommunity
    ) -> LemmyResult[GetCommunityResponse]:
        """Transfer a community to a new owner."""
        return await self._make_request(
            "POST", "community/transfer", request, GetCommunityResponse
        )

    async def ban_from_community(
        self, request: LemmyRequest[BanFromCommunity] | BanFromCommunity
    ) -> LemmyResult[BanFromCommunityResponse]:
        """Ban or unban a user from a community."""
        return await self._make_request(
            "POST", "community/ban_user", request, BanFromCommunityResponse
        )

    async def add_mod_to_community(
        self, request: LemmyRequest[AddModToCommunity] | AddModToCommunity
    ) -> LemmyResult[AddModToCommunityResponse]:
        """Add or remove a community moderator."""
        return await self._make_request(
            "POST", "community/mod", request, AddModToCommunityResponse
        )

    async def hide_community(
        self, request: LemmyRequest[HideCommunity] | HideCommunity
    ) -> LemmyResult[SuccessResponse]:
        """Hide or unhide a community from public listings."""
        return await self._make_request("PUT", "community/hide", request, SuccessResponse)

    # =========================================================================
    # Post
    # =========================================================================

    async def create_post(
        self, request: LemmyRequest[CreatePost] | CreatePost
    ) -> LemmyResult[PostResponse]:
        """Create a post."""
        return await self._make_request("POST", "post", request, PostResponse)

    async def get_post(
        self, request: LemmyRequest[GetPost] | GetPost
    ) -> LemmyResult[GetPostResponse]:
        """Get a post."""
        return await self._make_request("GET", "post", request, GetPostResponse)

    async def edit_post(
        self, request: LemmyRequest[EditPost] | EditPost
    ) -> LemmyResult[PostResponse]:
        """Edit a post."""
        return await self._make_request("PUT", "post", request, PostResponse)

    async def delete_post(
        self, request: LemmyRequest[DeletePost] | DeletePost
    ) -> LemmyResult[PostResponse]:
        """Delete or restore a post."""
        return await self._make_request("POST", "post/delete", request, PostResponse)

    async def remove_post(
        self, request: LemmyRequest[RemovePost] | RemovePost
    ) -> LemmyResult[PostResponse]:
        """Remove or restore a post as a moderator."""
        return await self._make_request("POST", "post/remove", request, PostResponse)

    async def mark_post_as_read(
        self, request: LemmyRequest[MarkPostAsRead] | MarkPostAsRead
    ) -> LemmyResult[SuccessResponse]:
        """Mark posts as read or unread."""
        return await self._make_request("POST", "post/mark_as_read", request, SuccessResponse)

    async def lock_post(
        self, request: LemmyRequest[LockPost] | LockPost
    ) -> LemmyResult[PostResponse]:
        """Lock or unlock a post, preventing new comments."""
        return await self._make_request("POST", "post/lock", request, PostResponse)

    async def feature_post(
        self, request: LemmyRequest[FeaturePost] | FeaturePost
    ) -> LemmyResult[PostResponse]:
        """Feature or unfeature a post in its community or on the site."""
        return await self._make_request("POST", "post/feature", request, PostResponse)

    async def list_posts(
        self, request: LemmyRequest[GetPosts] | GetPosts | None = None
    ) -> LemmyResult[GetPostsResponse]:
        """List posts."""
        return await self._make_request("GET", "post/list", request, GetPostsResponse)

    async def like_post(
        self, request: LemmyRequest[CreatePostLike] | CreatePostLike
    ) -> LemmyResult[PostResponse]:
        """Vote on a post."""
        return await self._make_request("POST", "post/like", request, PostResponse)

    async def list_post_likes(
        self, request: LemmyRequest[ListPostLikes] | ListPostLikes
    ) -> LemmyResult[ListPostLikesResponse]:
        """List the votes on a post. Admins only."""
        return await self._make_request("GET", "post/like/list", request, ListPostLikesResponse)

    async def save_post(
        self, request: LemmyRequest[SavePost] | SavePost
    ) -> LemmyResult[PostResponse]:
        """Save or unsave a post."""
        return await self._make_request("PUT", "post/save", request, PostResponse)

    async def report_post(
        self, request: LemmyRequest[CreatePostReport] | CreatePostReport
    ) -> LemmyResult[PostReportResponse]:
        """Report a post."""
        return await self._make_request("POST", "post/report", request, PostReportResponse)

    async def resolve_post_report(
        self, request: LemmyRequest[ResolvePostReport] | ResolvePostReport
    ) -> LemmyResult[PostReportResponse]:
        """Resolve or reopen a post report."""
        return await self._make_request("PUT", "post/report/resolve", request, PostReportResponse)

    async def list_post_reports(
        self, request: LemmyRequest[ListPostReports] | ListPostReports | None = None
    ) -> LemmyResult[ListPostReportsResponse]:
        """List post reports."""
        return await self._make_request(
            "GET", "post/report/list", request, ListPostReportsResponse
        )

    async def get_site_metadata(
        self, request: LemmyRequest[GetSiteMetadata] | GetSiteMetadata
    ) -> LemmyResult[GetSiteMetadataResponse]:
        """Fetch the title, description and image of a link."""
        return await self._make_request(
            "GET", "post/site_metadata", request, GetSiteMetadataResponse
        )

    # =========================================================================
    # Comment
    # =========================================================================

    async def create_comment(
        self, request: LemmyRequest[CreateComment] | CreateComment
    ) -> LemmyResult[CommentResponse]:
        """Create a comment."""
        return await self._make_request("POST", "comment", request, CommentResponse)

    async def edit_comment(
        self, request: LemmyRequest[EditComment] | EditComment
    ) -> LemmyResult[CommentResponse]:
        """Edit a comment."""
        return await self._make_request("PUT", "comment", request, CommentResponse)

    async def delete_comment(
        self, request: LemmyRequest[DeleteComment] | DeleteComment
    ) -> LemmyResult[CommentResponse]:
        """Delete or restore a comment."""
        return await self._make_request("POST", "comment/delete", request, CommentResponse)

    async def remove_comment(
        self, request: LemmyRequest[RemoveComment] | RemoveComment
    ) -> LemmyResult[CommentResponse]:
        """Remove or restore a comment as a moderator."""
        return await self._make_request("POST", "comment/remove", request, CommentResponse)

    async def mark_reply_as_read(
        self, request: LemmyRequest[MarkCommentReplyAsRead] | MarkCommentReplyAsRead
    ) -> LemmyResult[CommentReplyResponse]:
        """Mark a comment reply as read or unread."""
        return await self._make_request(
            "POST", "comment/mark_as_read", request, CommentReplyResponse
        )

    async def distinguish_comment(
        self, request: LemmyRequest[DistinguishComment] | DistinguishComment
    ) -> LemmyResult[CommentResponse]:
        """Distinguish a comment as a moderator."""
        return await self._make_request("POST", "comment/distinguish", request, CommentResponse)

    async def like_comment(
        self, request: LemmyRequest[CreateCommentLike] | CreateCommentLike
    ) -> LemmyResult[CommentResponse]:
        """Vote on a comment."""
        return await self._make_request("POST", "comment/like", request, CommentResponse)

    async def list_comment_likes(
        self, request: LemmyRequest[ListCommentLikes] | ListCommentLikes
    ) -> LemmyResult[ListCommentLikesResponse]:
        """List the votes on a comment. Admins only."""
        return await self._make_request(
            "GET", "comment/like/list", request, ListCommentLikesResponse
        )

    async def save_comment(
        self, request: LemmyRequest[SaveComment] | SaveComment
    ) -> LemmyResult[CommentResponse]:
        """Save or unsave a comment."""
        return await self._make_request("PUT", "comment/save", request, CommentResponse)

    async def list_comments(
        self, request: LemmyRequest[GetComments] | GetComments | None = None
    ) -> LemmyResult[GetCommentsResponse]:
        """List comments."""
        return await self._make_request("GET", "comment/list", request, GetCommentsResponse)

    async def get_comment(
        self, request: LemmyRequest[GetComment] | GetComment
    ) -> LemmyResult[CommentResponse]:
        """Get a comment."""
        return await self._make_request("GET", "comment", request, CommentResponse)

    async def report_comment(
        self, request: LemmyRequest[CreateCommentReport] | CreateCommentReport
    ) -> LemmyResult[CommentReportResponse]:
        """Report a comment."""
        return await self._make_request("POST", "comment/report", request, CommentReportResponse)

    async def resolve_comment_report(
        self, request: LemmyRequest[ResolveCommentReport] | ResolveCommentReport
    ) -> LemmyResult[CommentReportResponse]:
        """Resolve or reopen a comment report."""
        return await self._make_request(
            "PUT", "comment/report/resolve", request, CommentReportResponse
        )

    async def list_comment_reports(
        self, request: LemmyRequest[ListCommentReports] | ListCommentReports | None = None
    ) -> LemmyResult[ListCommentReportsResponse]:
        """List comment reports."""
        return await self._make_request(
            "GET", "comment/report/list", request, ListCommentReportsResponse
        )

    # =========================================================================
    # Private message
    # =========================================================================

    async def list_private_messages(
        self, request: LemmyRequest[GetPrivateMessages] | GetPrivateMessages | None = None
    ) -> LemmyResult[PrivateMessagesResponse]:
        """List private messages."""
        return await self._make_request(
            "GET", "private_message/list", request, PrivateMessagesResponse
        )

    async def create_private_message(
        self, request: LemmyRequest[CreatePrivateMessage] | CreatePrivateMessage
    ) -> LemmyResult[PrivateMessageResponse]:
        """Send a private message."""
        return await self._make_request("POST", "private_message", request, PrivateMessageResponse)

    async def edit_private_message(
        self, request: LemmyRequest[EditPrivateMessage] | EditPrivateMessage
    ) -> LemmyResult[PrivateMessageResponse]:
        """Edit a private message."""
        return await self._make_request("PUT", "private_message", request, PrivateMessageResponse)

    async def delete_private_message(
        self, request: LemmyRequest[DeletePrivateMessage] | DeletePrivateMessage
    ) -> LemmyResult[PrivateMessageResponse]:
        """Delete or restore a private message."""
        return await self._make_request(
            "POST", "private_message/delete", request, PrivateMessageResponse
        )

    async def mark_private_message_as_read(
        self, request: LemmyRequest[MarkPrivateMessageAsRead] | MarkPrivateMessageAsRead
    ) -> LemmyResult[PrivateMessageResponse]:
        """Mark a private message as read or unread."""
        return await self._make_request(
            "POST", "private_message/mark_as_read", request, PrivateMessageResponse
        )

    async def report_private_message(
        self, request: LemmyRequest[CreatePrivateMessageReport] | CreatePrivateMessageReport
    ) -> LemmyResult[PrivateMessageReportResponse]:
        """Report a private message."""
        return await self._make_request(
            "POST", "private_message/report", request, PrivateMessageReportResponse
        )

    async def resolve_private_message_report(
        self, request: LemmyRequest[ResolvePrivateMessageReport] | ResolvePrivateMessageReport
    ) -> LemmyResult[PrivateMessageReportResponse]:
        """Resolve or reopen a private message report."""
        return await self._make_request(
            "PUT", "private_message/report/resolve", request, PrivateMessageReportResponse
        )

    async def list_private_message_reports(
        self,
        request: LemmyRequest[ListPrivateMessageReports] | ListPrivateMessageReports | None = None,
    ) -> LemmyResult[ListPrivateMessageReportsResponse]:
        """List private message reports."""
        return await self._make_request(
            "GET", "private_message/report/list", request, ListPrivateMessageReportsResponse
        )

    # =========================================================================
    # User
    # =========================================================================

    async def register(
        self, request: LemmyRequest[Register] | Register
    ) -> LemmyResult[LoginResponse]:
        """Register a new account."""
        return await self._make_request("POST", "user/register", request, LoginResponse)

    async def login(self, request: LemmyRequest[Login] | Login) -> LemmyResult[LoginResponse]:
        """Log in and obtain a token.

        The token is not stored; pass it to ``set_jwt`` to use it for later
        requests.

        Args:
            request: Credentials, and the two factor token when enabled.

        Returns:
            ``Ok(LoginResponse)`` on success. A wrong username or password
            yields ``Err(LemmyApiError)`` with kind ``INCORRECT_LOGIN``.
        """
        return await self._make_request("POST", "user/login", request, LoginResponse)

    async def logout(
        self, request: LemmyRequest[Any] | None = None
    ) -> LemmyResult[SuccessResponse]:
        """Invalidate the token of the request.

        The client keeps its default token; call ``set_jwt(None)`` afterwards.
        """
        return await self._make_request("POST", "user/logout", request, SuccessResponse)

    async def get_person(
        self, request: LemmyRequest[GetPersonDetails] | GetPersonDetails
    ) -> LemmyResult[GetPersonDetailsResponse]:
        """Get a person's details, posts and comments."""
        return await self._make_request("GET", "user", request, GetPersonDetailsResponse)

    async def get_person_mentions(
        self, request: LemmyRequest[GetPersonMentions] | GetPersonMentions | None = None
    ) -> LemmyResult[GetPersonMentionsResponse]:
        """Get mentions of the current user."""
        return await self._make_request("GET", "user/mention", request, GetPersonMentionsResponse)

    async def mark_person_mention_as_read(
        self, request: LemmyRequest[MarkPersonMentionAsRead] | MarkPersonMentionAsRead
    ) -> LemmyResult[PersonMentionResponse]:
        """Mark a mention as read or unread."""
        return await self._make_request(
            "POST", "user/mention/mark_as_read", request, PersonMentionResponse
        )

    async def get_replies(
        self, request: LemmyRequest[GetReplies] | GetReplies | None = None
    ) -> LemmyResult[GetRepliesResponse]:
        """Get replies to the current user."""
        return await self._make_request("GET", "user/replies", request, GetRepliesResponse)

    async def ban_person(
        self, request: LemmyRequest[BanPerson] | BanPerson
    ) -> LemmyResult[BanPersonResponse]:
        """Ban or unban a person from the site."""
        return await self._make_request("POST", "user/ban", request, BanPersonResponse)

    async def list_banned_users(
        self, request: LemmyRequest[Any] | None = None
    ) -> LemmyResult[BannedPersonsResponse]:
        """List people banned from the site."""
        return await self._make_request("GET", "user/banned", request, BannedPersonsResponse)

    async def block_person(
        self, request: LemmyRequest[BlockPerson] | BlockPerson
    ) -> LemmyResult[BlockPersonResponse]:
        """Block or unblock a person."""
        return await self._make_request("POST", "user/block", request, BlockPersonResponse)

    async def get_captcha(
        self, request: LemmyRequest[Any] | None = None
    ) -> LemmyResult[GetCaptchaResponse]:
        """Fetch a captcha for registration."""
        return await self._make_request("GET", "user/get_captcha", request, GetCaptchaResponse)

    async def delete_account(
        self, request: LemmyRequest[DeleteAccount] | DeleteAccount
    ) -> LemmyResult[SuccessResponse]:
        """Delete the current account."""
        return await self._make_request("POST", "user/delete_account", request, SuccessResponse)

    async def reset_password(
        self, request: LemmyRequest[PasswordReset] | PasswordReset
    ) -> LemmyResult[SuccessResponse]:
        """Send a password reset email."""
        return await self._make_request("POST", "user/password_reset", request, SuccessResponse)

    async def change_password_after_reset(
        self, request: LemmyRequest[PasswordChangeAfterReset] | PasswordChangeAfterReset
    ) -> LemmyResult[SuccessResponse]:
        """Set a new password with a reset token."""
        return await self._make_request("POST", "user/password_change", request, SuccessResponse)

    async def mark_all_as_read(
        self, request: LemmyRequest[Any] | None = None
    ) -> LemmyResult[GetRepliesResponse]:
        """Mark all replies, mentions and messages as read."""
        return await self._make_request(
            "POST", "user/mark_all_as_read", request, GetRepliesResponse
        )

    async def save_user_settings(
        self, request: LemmyRequest[SaveUserSettings] | SaveUserSettings
    ) -> LemmyResult[SuccessResponse]:
        """Save the current user's settings."""
        return await self._make_request("PUT", "user/save_user_settings", request, SuccessResponse)

    async def change_password(
        self, request: LemmyRequest[ChangePassword] | ChangePassword
    ) -> LemmyResult[LoginResponse]:
        """Change the current user's password."""
        return await self._make_request("PUT", "user/change_password", request, LoginResponse)

    async def report_count(
        self, request: LemmyRequest[GetReportCount] | GetReportCount | None = None
    ) -> LemmyResult[GetReportCountResponse]:
        """Get the number of open reports."""
        return await self._make_request(
            "GET", "user/report_count", request, GetReportCountResponse
        )

    async def unread_count(
        self, request: LemmyRequest[Any] | None = None
    ) -> LemmyResult[GetUnreadCountResponse]:
        """Get the number of unread replies, mentions and messages."""
        return await self._make_request(
            "GET", "user/unread_count", request, GetUnreadCountResponse
        )

    async def verify_email(
        self, request: LemmyRequest[VerifyEmail] | VerifyEmail
    ) -> LemmyResult[SuccessResponse]:
        """Verify an email address with the emailed token."""
        return await self._make_request("POST", "user/verify_email", request, SuccessResponse)

    async def list_logins(
        self, request: LemmyRequest[Any] | None = None
    ) -> LemmyResult[list[LoginToken]]:
        """List the active logins of the current user."""
        return await self._make_request("GET", "user/list_logins", request, list[LoginToken])

    async def validate_auth(
        self, request: LemmyRequest[Any] | None = None
    ) -> LemmyResult[SuccessResponse]:
        """Check that the token is still valid."""
        return await self._make_request("GET", "user/validate_auth", request, SuccessResponse)

    async def generate_totp_secret(
        self, request: LemmyRequest[Any] | None = None
    ) -> LemmyResult[GenerateTotpSecretResponse]:
        """Generate a secret to enable two factor auth."""
        return await self._make_request(
            "POST", "user/totp/generate", request, GenerateTotpSecretResponse
        )

    async def update_totp(
        self, request: LemmyRequest[UpdateTotp] | UpdateTotp
    ) -> LemmyResult[UpdateTotpResponse]:
        """Enable or disable two factor auth."""
        return await self._make_request("POST", "user/totp/update", request, UpdateTotpResponse)

    # =========================================================================
    # Admin
    # =========================================================================

    async def add_admin(
        self, request: LemmyRequest[AddAdmin] | AddAdmin
    ) -> LemmyResult[AddAdminResponse]:
        """Add or remove an admin."""
        return await self._make_request("POST", "admin/add", request, AddAdminResponse)

    async def unread_registration_application_count(
        self, request: LemmyRequest[Any] | None = None
    ) -> LemmyResult[GetUnreadRegistrationApplicationCountResponse]:
        """Get the number of pending registration applications."""
        return await self._make_request(
            "GET",
            "admin/registration_application/count",
            request,
            GetUnreadRegistrationApplicationCountResponse,
        )

    async def list_registration_applications(
        self,
        request: (
            LemmyRequest[ListRegistrationApplications] | ListRegistrationApplications | None
        ) = None,
    ) -> LemmyResult[ListRegistrationApplicationsResponse]:
        """List registration applications."""
        return await self._make_request(
            "GET",
            "admin/registration_application/list",
            request,
            ListRegistrationApplicationsResponse,
        )

    async def approve_registration_application(
        self,
        request: LemmyRequest[ApproveRegistrationApplication] | ApproveRegistrationApplication,
    ) -> LemmyResult[RegistrationApplicationResponse]:
        """Approve or deny a registration application."""
        return await self._make_request(
            "PUT",
            "admin/registration_application/approve",
            request,
            RegistrationApplicationResponse,
        )

    async def purge_person(
        self, request: LemmyRequest[PurgePerson] | PurgePerson
    ) -> LemmyResult[SuccessResponse]:
        """Purge a person and all their content."""
        return await self._make_request("POST", "admin/purge/person", request, SuccessResponse)

    async def purge_community(
        self, request: LemmyRequest[PurgeCommunity] | PurgeCommunity
    ) -> LemmyResult[SuccessResponse]:
        """Purge a community and all its content."""
        return await self._make_request("POST", "admin/purge/community", request, SuccessResponse)

    async def purge_post(
        self, request: LemmyRequest[PurgePost] | PurgePost
    ) -> LemmyResult[SuccessResponse]:
        """Purge a post."""
        return await self._make_request("POST", "admin/purge/post", request, SuccessResponse)

    async def purge_comment(
        self, request: LemmyRequest[PurgeComment] | PurgeComment
    ) -> LemmyResult[SuccessResponse]:
        """Purge a comment."""
        return await self._make_request("POST", "admin/purge/comment", request, SuccessResponse)

    # =========================================================================
    # Custom emoji
    # =========================================================================

    async def create_custom_emoji(
        self, request: LemmyRequest[CreateCustomEmoji] | CreateCustomEmoji
    ) -> LemmyResult[CustomEmojiResponse]:
        """Create a custom emoji."""
        return await self._make_request("POST", "custom_emoji", request, CustomEmojiResponse)

    async def edit_custom_emoji(
        self, request: LemmyRequest[EditCustomEmoji] | EditCustomEmoji
    ) -> LemmyResult[CustomEmojiResponse]:
        """Edit a custom emoji."""
        return await self._make_request("PUT", "custom_emoji", request, CustomEmojiResponse)

    async def delete_custom_emoji(
        self, request: LemmyRequest[DeleteCustomEmoji] | DeleteCustomEmoji
    ) -> LemmyResult[SuccessResponse]:
        """Delete a custom emoji."""
        return await self._make_request("POST", "custom_emoji/delete", request, SuccessResponse)
