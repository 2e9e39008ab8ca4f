"""Permission definitions for the Facebook Graph API.

Every permission the Graph API login dialog accepts is declared here once,
as an immutable record. The wire identifier is the exact string sent in the
``scope`` parameter; it is never case-normalized.

Record fields:
  - identifier: wire name, e.g. "email" or "pages_show_list"
  - category: functional grouping used for filtering and display
  - description: what access the permission grants
  - introduced_in_version: Graph API version that added the permission,
    or None when it predates the earliest tracked version
  - review: whether Facebook reviews how an app uses the permission
"""

from enum import Enum
from typing import NamedTuple, Optional, Tuple


class Category(str, Enum):
    """Functional grouping of permissions."""

    PUBLIC = "PUBLIC"
    USER_DATA = "USER_DATA"
    EVENTS_GROUPS_PAGES = "EVENTS_GROUPS_PAGES"
    OTHER = "OTHER"
    MESSAGING = "MESSAGING"
    INSTAGRAM = "INSTAGRAM"
    LIVE_VIDEO = "LIVE_VIDEO"
    WHATSAPP = "WHATSAPP"


class ReviewRequirement(str, Enum):
    """App Review status attached to a permission."""

    REQUIRED = "required"             # Facebook reviews how the app uses it
    NOT_REQUIRED = "not_required"     # Usable without review
    TESTING_ONLY = "testing_only"     # Limited use, not accepted in review
    UNSPECIFIED = "unspecified"       # Not stated by the platform docs


class PermissionDefinition(NamedTuple):
    """A single catalog entry."""

    identifier: str
    category: Category
    description: str = ""
    introduced_in_version: Optional[str] = None
    review: ReviewRequirement = ReviewRequirement.UNSPECIFIED

    def __str__(self) -> str:
        return self.identifier

    @property
    def requires_review(self) -> bool:
        return self.review is ReviewRequirement.REQUIRED


_REVIEWED = ReviewRequirement.REQUIRED


# Declaration order is the display order of the catalog
PERMISSION_TABLE: Tuple[PermissionDefinition, ...] = (
    PermissionDefinition(
        "public_profile",
        Category.PUBLIC,
        "Access to the subset of a person's profile that is public by default: "
        "id, name, first_name, last_name, link, gender, locale, timezone, "
        "updated_time and verified. Implied on the web, must be requested "
        "explicitly on iOS and Android. gender and locale are only returned for "
        "the app user, friends using the app, or with an app access token or "
        "appsecret_proof.",
        review=ReviewRequirement.NOT_REQUIRED,
    ),
    PermissionDefinition(
        "user_age_range",
        Category.USER_DATA,
        "Access to a person's age range.",
        "3.0",
        _REVIEWED,
    ),
    PermissionDefinition(
        "user_birthday",
        Category.USER_DATA,
        "Access to the date and month of a person's birthday. The year may be "
        "omitted depending on privacy settings and the access token. Most "
        "integrations only need the age range from public_profile.",
        review=_REVIEWED,
    ),
    PermissionDefinition(
        "user_events",
        Category.EVENTS_GROUPS_PAGES,
        "Read-only access to the Events a person is hosting or has RSVP'd to.",
        review=_REVIEWED,
    ),
    PermissionDefinition(
        "user_friends",
        Category.USER_DATA,
        "Access to the list of friends that also use the app, through the "
        "friends edge on the User object. Both people must have granted "
        "user_friends for either to appear in the other's list.",
        review=ReviewRequirement.NOT_REQUIRED,
    ),
    PermissionDefinition(
        "user_gender",
        Category.USER_DATA,
        "Access to a person's gender.",
        "3.0",
        _REVIEWED,
    ),
    PermissionDefinition(
        "user_hometown",
        Category.USER_DATA,
        "Access to a person's hometown through the hometown field on the User "
        "object, as set on their Profile.",
        review=_REVIEWED,
    ),
    PermissionDefinition(
        "user_likes",
        Category.USER_DATA,
        "Access to all Facebook Pages and Open Graph objects a person has liked, "
        "through the likes edge on the User object.",
        review=_REVIEWED,
    ),
    PermissionDefinition(
        "user_link",
        Category.USER_DATA,
        "Access to the Facebook profile URL of another user of the app.",
        "3.0",
        _REVIEWED,
    ),
    PermissionDefinition(
        "user_location",
        Category.USER_DATA,
        "Access to a person's current city through the location field on the "
        "User object. The current city is not necessarily the hometown.",
        review=_REVIEWED,
    ),
    PermissionDefinition(
        "user_managed_groups",
        Category.EVENTS_GROUPS_PAGES,
        "Read the Groups a person administers through the groups edge on the "
        "User object. Deprecated in favour of the Groups API reviewable "
        "feature; usable in development mode for testing only.",
        review=ReviewRequirement.TESTING_ONLY,
    ),
    PermissionDefinition(
        "user_photos",
        Category.USER_DATA,
        "Access to the photos a person has uploaded or been tagged in, through "
        "the photos edge on the User object.",
        review=_REVIEWED,
    ),
    PermissionDefinition(
        "user_posts",
        Category.USER_DATA,
        "Access to the posts on a person's Timeline: their own posts, posts "
        "they are tagged in and posts others make on their Timeline.",
        review=_REVIEWED,
    ),
    PermissionDefinition(
        "user_tagged_places",
        Category.USER_DATA,
        "Access to the Places a person has been tagged at in photos, videos, "
        "statuses and links.",
        review=_REVIEWED,
    ),
    PermissionDefinition(
        "user_videos",
        Category.USER_DATA,
        "Access to the videos a person has uploaded or been tagged in.",
        review=_REVIEWED,
    ),
    PermissionDefinition(
        "ads_management",
        Category.EVENTS_GROUPS_PAGES,
        "Read and manage the ads of ad accounts the person has access to "
        "(Marketing API, Ads Management).",
    ),
    PermissionDefinition(
        "ads_read",
        Category.EVENTS_GROUPS_PAGES,
        "Access to the Ads Insights API to pull ads report information for ad "
        "accounts the person has access to.",
    ),
    PermissionDefinition(
        "attribution_read",
        Category.EVENTS_GROUPS_PAGES,
        "Access to the Attribution API to pull attribution report data for "
        "lines of business the person owns or has been granted access to.",
    ),
    PermissionDefinition(
        "email",
        Category.USER_DATA,
        "Access to a person's primary email address through the email field on "
        "the User object. An address is not guaranteed, for example for "
        "accounts registered with a phone number. Use must comply with "
        "Facebook policies and the CAN-SPAM Act.",
        review=ReviewRequirement.NOT_REQUIRED,
    ),
    PermissionDefinition(
        "pages_manage_ads",
        Category.EVENTS_GROUPS_PAGES,
        "Create and manage ads associated with a Page.",
        review=_REVIEWED,
    ),
    PermissionDefinition(
        "pages_manage_metadata",
        Category.EVENTS_GROUPS_PAGES,
        "Subscribe to webhooks about activity on a Page and update Page "
        "settings.",
        review=_REVIEWED,
    ),
    PermissionDefinition(
        "pages_read_engagement",
        Category.EVENTS_GROUPS_PAGES,
        "Read content posted by a Page (posts, photos, videos, events), "
        "follower data including name, PSID and profile picture, and Page "
        "metadata and insights.",
        review=_REVIEWED,
    ),
    PermissionDefinition(
        "pages_read_user_content",
        Category.EVENTS_GROUPS_PAGES,
        "Read user generated content on a Page such as posts, comments and "
        "ratings, read posts the Page is tagged in, and delete user comments "
        "on Page posts.",
        review=_REVIEWED,
    ),
    PermissionDefinition(
        "pages_manage_cta",
        Category.EVENTS_GROUPS_PAGES,
        "Manage the call to action buttons of Pages the person manages.",
        "2.5",
        _REVIEWED,
    ),
    PermissionDefinition(
        "pages_manage_instant_articles",
        Category.EVENTS_GROUPS_PAGES,
        "Manage Instant Articles on behalf of Pages administered by the person.",
        "2.5",
        _REVIEWED,
    ),
    PermissionDefinition(
        "pages_manage_leads",
        Category.EVENTS_GROUPS_PAGES,
        "Manage leads retrieved from Lead Ads of Pages the person manages.",
        "2.3",
        _REVIEWED,
    ),
    PermissionDefinition(
        "pages_messaging",
        Category.MESSAGING,
        "Send and receive messages through a Page. Not for promotional or "
        "advertising content; conversations start only when a person asks to "
        "receive messages.",
        "2.6",
        _REVIEWED,
    ),
    PermissionDefinition(
        "pages_messaging_phone_number",
        Category.MESSAGING,
        "Send messages through a Page to a person identified by phone number. "
        "Not for promotional or advertising content.",
        "2.6",
        _REVIEWED,
    ),
    PermissionDefinition(
        "pages_show_list",
        Category.EVENTS_GROUPS_PAGES,
        "Show the list of Pages the person manages.",
        "2.5",
        _REVIEWED,
    ),
    PermissionDefinition(
        "pages_manage_posts",
        Category.EVENTS_GROUPS_PAGES,
        "Create, edit and delete Page posts. Together with "
        "pages_read_user_content also deletes posts created by users.",
        review=_REVIEWED,
    ),
    PermissionDefinition(
        "pages_manage_engagement",
        Category.EVENTS_GROUPS_PAGES,
        "Create, edit and delete comments posted on a Page, and create or "
        "delete the Page's likes on Page content. Together with "
        "pages_read_user_content also deletes comments by other Pages.",
        review=_REVIEWED,
    ),
    PermissionDefinition(
        "pages_user_gender",
        Category.EVENTS_GROUPS_PAGES,
        "Access a user's gender through the Page the app is connected to.",
        review=_REVIEWED,
    ),
    PermissionDefinition(
        "pages_user_locale",
        Category.EVENTS_GROUPS_PAGES,
        "Access a user's locale through the Page the app is connected to.",
        review=_REVIEWED,
    ),
    PermissionDefinition(
        "pages_user_timezone",
        Category.EVENTS_GROUPS_PAGES,
        "Access a user's time zone through the Page the app is connected to.",
        review=_REVIEWED,
    ),
    PermissionDefinition(
        "publish_to_groups",
        Category.EVENTS_GROUPS_PAGES,
        "Post content into a group on behalf of a user who granted the "
        "permission.",
        "3.0",
        _REVIEWED,
    ),
    PermissionDefinition(
        "publish_video",
        Category.LIVE_VIDEO,
        "Publish live videos to the app user's timeline.",
        "3.1",
        _REVIEWED,
    ),
    PermissionDefinition(
        "groups_access_member_info",
        Category.EVENTS_GROUPS_PAGES,
        "Receive member-related data on group content when a member has "
        "granted it.",
        "3.0",
        _REVIEWED,
    ),
    PermissionDefinition(
        "read_audience_network_insights",
        Category.OTHER,
        "Read-only access to Audience Network Insights data for apps the "
        "person owns.",
        "2.4",
        _REVIEWED,
    ),
    PermissionDefinition(
        "read_insights",
        Category.OTHER,
        "Read-only access to Insights data for Pages, apps and web domains the "
        "person owns.",
        review=_REVIEWED,
    ),
    PermissionDefinition(
        "rsvp_event",
        Category.EVENTS_GROUPS_PAGES,
        "Set a person's attendee status on Events (attending, maybe, "
        "declined). Does not allow inviting people, updating event details or "
        "creating events.",
        review=_REVIEWED,
    ),
    PermissionDefinition(
        "business_management",
        Category.EVENTS_GROUPS_PAGES,
        "Read and write with the Business Management API.",
        review=_REVIEWED,
    ),
    PermissionDefinition(
        "catalog_management",
        Category.EVENTS_GROUPS_PAGES,
        "Create, read, update and delete business owned product catalogs the "
        "user administers. In development mode only catalogs owned by app "
        "admins are accessible.",
        review=_REVIEWED,
    ),
    PermissionDefinition(
        "leads_retrieval",
        Category.EVENTS_GROUPS_PAGES,
        "Retrieve all information captured within a lead from Lead Ads.",
        "3.1",
        _REVIEWED,
    ),
    PermissionDefinition(
        "pages_messaging_subscriptions",
        Category.MESSAGING,
        "Send and receive messages through a Page outside the 24 hour window "
        "opened by a user action. Not for promotional or advertising content.",
        "2.6",
        _REVIEWED,
    ),
    PermissionDefinition(
        "pages_messaging_payments",
        Category.MESSAGING,
        "Charge users in Messenger conversations on behalf of Pages. Tangible "
        "goods only, not virtual goods or subscriptions.",
        "2.6",
        _REVIEWED,
    ),
    PermissionDefinition(
        "instagram_basic",
        Category.INSTAGRAM,
        "Read Instagram accounts the person has access to.",
        "2.5",
        _REVIEWED,
    ),
    PermissionDefinition(
        "instagram_manage_comments",
        Category.INSTAGRAM,
        "Read and manage comments on Instagram accounts the person has access "
        "to.",
        "2.5",
        _REVIEWED,
    ),
    PermissionDefinition(
        "instagram_manage_insights",
        Category.INSTAGRAM,
        "Read insights of Instagram accounts the person has access to.",
        "2.5",
        _REVIEWED,
    ),
    PermissionDefinition(
        "instagram_content_publish",
        Category.INSTAGRAM,
        "Publish content to Instagram accounts the person has access to.",
        "2.5",
        _REVIEWED,
    ),
    PermissionDefinition(
        "instagram_graph_user_media",
        Category.INSTAGRAM,
        "Read the Media node, an image, video or album, and its edges.",
        review=_REVIEWED,
    ),
    PermissionDefinition(
        "instagram_graph_user_profile",
        Category.INSTAGRAM,
        "Read the app user's Instagram profile.",
        review=_REVIEWED,
    ),
    PermissionDefinition(
        "whatsapp_business_management",
        Category.WHATSAPP,
        "Read and manage WhatsApp business assets the person owns or has been "
        "granted access to: business accounts, phone numbers and message "
        "templates.",
        review=_REVIEWED,
    ),
)
