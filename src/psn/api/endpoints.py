"""
Endpoint Table

Responsibilities:
- Hardcode the PSN hosts and the query strings each endpoint expects
- Describe every operation as data: verb, URL template, query, body shape,
  result type

URL templates and query values are ``str.format`` templates. The fields they
may use are ``account_id`` (the authenticated account), ``online_id`` (the
target user) and whatever extra context the caller passes (``offset``,
``limit``, ``page``, ``np_language``).
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from ..enums import ActivityFilter, BodyShape
from ..schema import ActivityResponse, CompareTrophiesResponse, Profile


USERS_URL = "https://us-prof.np.community.playstation.net/userProfile/v1/users"
MESSAGE_GROUPS_URL = "https://us-gmsg.np.community.playstation.net/groupMessaging/v1/messageGroups"
TROPHY_TITLES_URL = "https://us-tpy.np.community.playstation.net/trophy/v1/trophyTitles"
ACTIVITY_URL = "https://activity.api.np.km.playstation.net/activity/api/v1/users"

PROFILE_FIELDS = ",".join([
    "npId",
    "onlineId",
    "avatarUrls",
    "plus",
    "aboutMe",
    "languagesUsed",
    "trophySummary(@default,progress,earnedTrophies)",
    "isOfficiallyVerified",
    "personalDetail(@default,profilePictureUrls)",
    "personalDetailSharing",
    "personalDetailSharingRequestMessageFlag",
    "primaryOnlineStatus",
    "presences(@titleInfo,hasBroadcastData)",
    "friendRelation",
    "requestMessageFlag",
    "blocking",
    "mutualFriendsCount",
    "following",
    "followerCount",
    "friendsCount",
    "followingUsersCount",
])


@dataclass(frozen=True)
class Operation:
    """
    One call against the PSN API.

    Attributes:
        name: Operation name used in logs
        method: HTTP verb
        url: URL template
        params: Query parameters as (key, value template) pairs; keys may repeat
        body: How the request body is encoded
        result: Model the payload is validated into, None if the operation
                only reports success
        root: Key the result lives under in the payload, if it is wrapped
        needs_account: Whether the URL needs the authenticated account's id
    """
    name: str
    method: str
    url: str
    params: Tuple[Tuple[str, str], ...] = ()
    body: BodyShape = BodyShape.NONE
    result: Optional[type] = None
    root: Optional[str] = None
    needs_account: bool = False

    def format_url(self, context: Dict[str, Any]) -> str:
        """Fill the URL template from context."""
        return self.url.format(**context)

    def format_params(self, context: Dict[str, Any]) -> List[Tuple[str, str]]:
        """Fill every query value template from context, keeping order."""
        return [(key, value.format(**context)) for key, value in self.params]


GET_PROFILE = Operation(
    name="get_profile",
    method="GET",
    url=USERS_URL + "/{online_id}/profile2",
    params=(
        ("fields", PROFILE_FIELDS),
        ("avatarSizes", "m,xl"),
        ("profilePictureSizes", "m,xl"),
        ("languagesUsedLanguageSet", "set3"),
        ("psVitaTitleIcon", "circled"),
        ("titleIconSize", "s"),
    ),
    result=Profile,
    root="profile",
)

ADD_FRIEND = Operation(
    name="add_friend",
    method="POST",
    url=USERS_URL + "/{account_id}/friendList/{online_id}",
    body=BodyShape.JSON,
    needs_account=True,
)

REMOVE_FRIEND = Operation(
    name="remove_friend",
    method="DELETE",
    url=USERS_URL + "/{account_id}/friendList/{online_id}",
    needs_account=True,
)

# The block list only accepts POST, with a null body.
BLOCK = Operation(
    name="block",
    method="POST",
    url=USERS_URL + "/{account_id}/blockList/{online_id}",
    body=BodyShape.NULL,
    needs_account=True,
)

UNBLOCK = Operation(
    name="unblock",
    method="DELETE",
    url=USERS_URL + "/{account_id}/blockList/{online_id}",
    needs_account=True,
)

SEND_MESSAGE = Operation(
    name="send_message",
    method="POST",
    url=MESSAGE_GROUPS_URL,
    body=BodyShape.JSON,
)

COMPARE_TROPHIES = Operation(
    name="compare_trophies",
    method="GET",
    url=TROPHY_TITLES_URL,
    params=(
        ("fields", "@default"),
        ("npLanguage", "{np_language}"),
        ("iconSize", "m"),
        ("platform", "PS3,PSVITA,PS4"),
        ("offset", "{offset}"),
        ("limit", "{limit}"),
        ("comparedUser", "{online_id}"),
    ),
    result=CompareTrophiesResponse,
)

GET_ACTIVITY = Operation(
    name="get_activity",
    method="GET",
    url=ACTIVITY_URL + "/{online_id}/feed/{page}",
    params=(
        ("includeComments", "true"),
        ("includeTaggedItems", "true"),
    ) + tuple(("filters", value) for value in ActivityFilter.values()),
    result=ActivityResponse,
)

OPERATIONS = {
    operation.name: operation
    for operation in (
        GET_PROFILE,
        ADD_FRIEND,
        REMOVE_FRIEND,
        BLOCK,
        UNBLOCK,
        SEND_MESSAGE,
        COMPARE_TROPHIES,
        GET_ACTIVITY,
    )
}
