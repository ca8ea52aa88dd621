"""Profile schemas returned by the userProfile API"""

from typing import List, Optional
from pydantic import Field

from .base import PSNModel


class AvatarUrl(PSNModel):
    """One avatar image at a given size ("m", "xl")"""

    size: Optional[str] = None
    avatar_url: Optional[str] = None


class EarnedTrophies(PSNModel):
    """Trophy counts by grade"""

    platinum: int = 0
    gold: int = 0
    silver: int = 0
    bronze: int = 0


class TrophySummary(PSNModel):
    """Trophy level and overall progress of an account"""

    level: Optional[int] = None
    progress: Optional[int] = None
    earned_trophies: Optional[EarnedTrophies] = None


class ProfilePictureUrl(PSNModel):
    size: Optional[str] = None
    profile_picture_url: Optional[str] = None


class PersonalDetail(PSNModel):
    """Real-name details, only present when shared with the caller"""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_picture_urls: List[ProfilePictureUrl] = Field(default_factory=list)


class Presence(PSNModel):
    """Online presence on one platform"""

    online_status: Optional[str] = None
    platform: Optional[str] = None
    title_name: Optional[str] = None
    np_title_id: Optional[str] = None
    has_broadcast_data: Optional[bool] = None
    last_online_date: Optional[str] = None


class Profile(PSNModel):
    """Snapshot of a remote account

    Only ``online_id`` is guaranteed; everything else depends on the
    requested field list and on what the account shares with the caller.
    Relationship flags (``friend_relation``, ``blocking``, ``following``) are
    relative to the authenticated account at fetch time.
    """

    online_id: str
    np_id: Optional[str] = None
    avatar_urls: List[AvatarUrl] = Field(default_factory=list)
    plus: Optional[int] = None
    about_me: Optional[str] = None
    languages_used: List[str] = Field(default_factory=list)
    trophy_summary: Optional[TrophySummary] = None
    is_officially_verified: Optional[bool] = None
    personal_detail: Optional[PersonalDetail] = None
    personal_detail_sharing: Optional[str] = None
    personal_detail_sharing_request_message_flag: Optional[bool] = None
    primary_online_status: Optional[str] = None
    presences: List[Presence] = Field(default_factory=list)
    friend_relation: Optional[str] = None
    request_message_flag: Optional[bool] = None
    blocking: Optional[bool] = None
    mutual_friends_count: Optional[int] = None
    following: Optional[bool] = None
    follower_count: Optional[int] = None
    friends_count: Optional[int] = None
    following_users_count: Optional[int] = None
