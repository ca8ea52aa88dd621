"""Typed payloads exchanged with the PSN API"""

from .base import PSNModel
from .profile import (
    AvatarUrl,
    EarnedTrophies,
    PersonalDetail,
    Presence,
    Profile,
    ProfilePictureUrl,
    TrophySummary,
)
from .trophy import CompareTrophiesResponse, DefinedTrophies, TrophyTitle, TrophyTitleUser
from .activity import ActivityResponse, FeedEntry
from .message import Message

__all__ = [
    "PSNModel",
    "AvatarUrl",
    "EarnedTrophies",
    "PersonalDetail",
    "Presence",
    "Profile",
    "ProfilePictureUrl",
    "TrophySummary",
    "CompareTrophiesResponse",
    "DefinedTrophies",
    "TrophyTitle",
    "TrophyTitleUser",
    "ActivityResponse",
    "FeedEntry",
    "Message",
]
