"""Request and response models for the Lemmy v3 API.

Importing this package registers every response model as a decodable
response type.
"""

from lemmy_client._internal.registry import register_response_types
from lemmy_client.models.admin import (
    AddAdmin,
    AddAdminResponse,
    ApproveRegistrationApplication,
    CreateCustomEmoji,
    CustomEmojiResponse,
    DeleteCustomEmoji,
    EditCustomEmoji,
    GetUnreadRegistrationApplicationCountResponse,
    ListRegistrationApplications,
    ListRegistrationApplicationsResponse,
    PurgeComment,
    PurgeCommunity,
    PurgePerson,
    PurgePost,
    RegistrationApplicationResponse,
)
from lemmy_client.models.comment import (
    CommentReplyResponse,
    CommentReportResponse,
    CommentResponse,
    CreateComment,
    CreateCommentLike,
    CreateCommentReport,
    DeleteComment,
    DistinguishComment,
    EditComment,
    GetComment,
    GetComments,
    GetCommentsResponse,
    ListCommentLikes,
    ListCommentLikesResponse,
    ListCommentReports,
    ListCommentReportsResponse,
    MarkCommentReplyAsRead,
    RemoveComment,
    ResolveCommentReport,
    SaveComment,
)
from lemmy_client.models.common import (
    Comment,
    CommentSortType,
    CommentView,
    Community,
    CommunityModeratorView,
    CommunityView,
    CommunityVisibility,
    LemmyForm,
    LemmyResponse,
    ListingType,
    LoginToken,
    ModlogActionType,
    Person,
    PersonView,
    Post,
    PostFeatureType,
    PostView,
    PrivateMessage,
    PrivateMessageView,
    RegistrationMode,
    ReportView,
    SearchType,
    SortType,
    SubscribedType,
    SuccessResponse,
)
from lemmy_client.models.community import (
    AddModToCommunity,
    AddModToCommunityResponse,
    BanFromCommunity,
    BanFromCommunityResponse,
    BlockCommunity,
    BlockCommunityResponse,
    CommunityResponse,
    CreateCommunity,
    DeleteCommunity,
    EditCommunity,
    FollowCommunity,
    GetCommunity,
    GetCommunityResponse,
    HideCommunity,
    ListCommunities,
    ListCommunitiesResponse,
    RemoveCommunity,
    TransferCommunity,
)
from lemmy_client.models.errors import (
    ErrorKind,
    LemmyErrorBody,
)
from lemmy_client.models.person import (
    BanPerson,
    BanPersonResponse,
    BannedPersonsResponse,
    BlockPerson,
    BlockPersonResponse,
    CaptchaResponse,
    ChangePassword,
    DeleteAccount,
    GenerateTotpSecretResponse,
    GetCaptchaResponse,
    GetPersonDetails,
    GetPersonDetailsResponse,
    GetPersonMentions,
    GetPersonMentionsResponse,
    GetReplies,
    GetRepliesResponse,
    GetReportCount,
    GetReportCountResponse,
    GetUnreadCountResponse,
    Login,
    LoginResponse,
    MarkPersonMentionAsRead,
    PasswordChangeAfterReset,
    PasswordReset,
    PersonMentionResponse,
    Register,
    SaveUserSettings,
    UpdateTotp,
    UpdateTotpResponse,
    VerifyEmail,
)
from lemmy_client.models.post import (
    CreatePost,
    CreatePostLike,
    CreatePostReport,
    DeletePost,
    EditPost,
    FeaturePost,
    GetPost,
    GetPostResponse,
    GetPosts,
    GetPostsResponse,
    GetSiteMetadata,
    GetSiteMetadataResponse,
    ListPostLikes,
    ListPostLikesResponse,
    ListPostReports,
    ListPostReportsResponse,
    LockPost,
    MarkPostAsRead,
    PostReportResponse,
    PostResponse,
    RemovePost,
    ResolvePostReport,
    SavePost,
)
from lemmy_client.models.private_message import (
    CreatePrivateMessage,
    CreatePrivateMessageReport,
    DeletePrivateMessage,
    EditPrivateMessage,
    GetPrivateMessages,
    ListPrivateMessageReports,
    ListPrivateMessageReportsResponse,
    MarkPrivateMessageAsRead,
    PrivateMessageReportResponse,
    PrivateMessageResponse,
    PrivateMessagesResponse,
    ResolvePrivateMessageReport,
)
from lemmy_client.models.site import (
    BlockInstance,
    BlockInstanceResponse,
    CreateSite,
    EditSite,
    GetFederatedInstancesResponse,
    GetModlog,
    GetModlogResponse,
    GetSiteResponse,
    ResolveObject,
    ResolveObjectResponse,
    Search,
    SearchResponse,
    SiteResponse,
)

register_response_types(
    str,
    list[LoginToken],
    AddAdminResponse,
    AddModToCommunityResponse,
    BanFromCommunityResponse,
    BanPersonResponse,
    BannedPersonsResponse,
    BlockCommunityResponse,
    BlockInstanceResponse,
    BlockPersonResponse,
    CaptchaResponse,
    CommentReplyResponse,
    CommentReportResponse,
    CommentResponse,
    CommunityResponse,
    CustomEmojiResponse,
    GenerateTotpSecretResponse,
    GetCaptchaResponse,
    GetCommentsResponse,
    GetCommunityResponse,
    GetFederatedInstancesResponse,
    GetModlogResponse,
    GetPersonDetailsResponse,
    GetPersonMentionsResponse,
    GetPostResponse,
    GetPostsResponse,
    GetRepliesResponse,
    GetReportCountResponse,
    GetSiteMetadataResponse,
    GetSiteResponse,
    GetUnreadCountResponse,
    GetUnreadRegistrationApplicationCountResponse,
    ListCommentLikesResponse,
    ListCommentReportsResponse,
    ListCommunitiesResponse,
    ListPostLikesResponse,
    ListPostReportsResponse,
    ListPrivateMessageReportsResponse,
    ListRegistrationApplicationsResponse,
    LoginResponse,
    PersonMentionResponse,
    PostReportResponse,
    PostResponse,
    PrivateMessageReportResponse,
    PrivateMessageResponse,
    PrivateMessagesResponse,
    RegistrationApplicationResponse,
    ResolveObjectResponse,
    SearchResponse,
    SiteResponse,
    SuccessResponse,
    UpdateTotpResponse,
)

__all__ = [
    "AddAdmin",
    "AddAdminResponse",
    "AddModToCommunity",
    "AddModToCommunityResponse",
    "ApproveRegistrationApplication",
    "BanFromCommunity",
    "BanFromCommunityResponse",
    "BanPerson",
    "BanPersonResponse",
    "BannedPersonsResponse",
    "BlockCommunity",
    "BlockCommunityResponse",
    "BlockInstance",
    "BlockInstanceResponse",
    "BlockPerson",
    "BlockPersonResponse",
    "CaptchaResponse",
    "ChangePassword",
    "Comment",
    "CommentReplyResponse",
    "CommentReportResponse",
    "CommentResponse",
    "CommentSortType",
    "CommentView",
    "Community",
    "CommunityModeratorView",
    "CommunityResponse",
    "CommunityView",
    "CommunityVisibility",
    "CreateComment",
    "CreateCommentLike",
    "CreateCommentReport",
    "CreateCommunity",
    "CreateCustomEmoji",
    "CreatePost",
    "CreatePostLike",
    "CreatePostReport",
    "CreatePrivateMessage",
    "CreatePrivateMessageReport",
    "CreateSite",
    "CustomEmojiResponse",
    "DeleteAccount",
    "DeleteComment",
    "DeleteCommunity",
    "DeleteCustomEmoji",
    "DeletePost",
    "DeletePrivateMessage",
    "DistinguishComment",
    "EditComment",
    "EditCommunity",
    "EditCustomEmoji",
    "EditPost",
    "EditPrivateMessage",
    "EditSite",
    "ErrorKind",
    "FeaturePost",
    "FollowCommunity",
    "GenerateTotpSecretResponse",
    "GetCaptchaResponse",
    "GetComment",
    "GetComments",
    "GetCommentsResponse",
    "GetCommunity",
    "GetCommunityResponse",
    "GetFederatedInstancesResponse",
    "GetModlog",
    "GetModlogResponse",
    "GetPersonDetails",
    "GetPersonDetailsResponse",
    "GetPersonMentions",
    "GetPersonMentionsResponse",
    "GetPost",
    "GetPostResponse",
    "GetPosts",
    "GetPostsResponse",
    "GetPrivateMessages",
    "GetReplies",
    "GetRepliesResponse",
    "GetReportCount",
    "GetReportCountResponse",
    "GetSiteMetadata",
    "GetSiteMetadataResponse",
    "GetSiteResponse",
    "GetUnreadCountResponse",
    "GetUnreadRegistrationApplicationCountResponse",
    "HideCommunity",
    "LemmyErrorBody",
    "LemmyForm",
    "LemmyResponse",
    "ListCommentLikes",
    "ListCommentLikesResponse",
    "ListCommentReports",
    "ListCommentReportsResponse",
    "ListCommunities",
    "ListCommunitiesResponse",
    "ListPostLikes",
    "ListPostLikesResponse",
    "ListPostReports",
    "ListPostReportsResponse",
    "ListPrivateMessageReports",
    "ListPrivateMessageReportsResponse",
    "ListRegistrationApplications",
    "ListRegistrationApplicationsResponse",
    "ListingType",
    "LockPost",
    "Login",
    "LoginResponse",
    "LoginToken",
    "MarkCommentReplyAsRead",
    "MarkPersonMentionAsRead",
    "MarkPostAsRead",
    "MarkPrivateMessageAsRead",
    "ModlogActionType",
    "PasswordChangeAfterReset",
    "PasswordReset",
    "Person",
    "PersonMentionResponse",
    "PersonView",
    "Post",
    "PostFeatureType",
    "PostReportResponse",
    "PostResponse",
    "PostView",
    "PrivateMessage",
    "PrivateMessageReportResponse",
    "PrivateMessageResponse",
    "PrivateMessageView",
    "PrivateMessagesResponse",
    "PurgeComment",
    "PurgeCommunity",
    "PurgePerson",
    "PurgePost",
    "Register",
    "RegistrationApplicationResponse",
    "RegistrationMode",
    "RemoveComment",
    "RemoveCommunity",
    "RemovePost",
    "ReportView",
    "ResolveCommentReport",
    "ResolveObject",
    "ResolveObjectResponse",
    "ResolvePostReport",
    "ResolvePrivateMessageReport",
    "SaveComment",
    "SavePost",
    "SaveUserSettings",
    "Search",
    "SearchResponse",
    "SearchType",
    "SiteResponse",
    "SortType",
    "SubscribedType",
    "SuccessResponse",
    "TransferCommunity",
    "UpdateTotp",
    "UpdateTotpResponse",
    "VerifyEmail",
]
