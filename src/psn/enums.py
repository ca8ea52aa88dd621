"""Enumeration types for psn"""
from enum import Enum


class MessageType(str, Enum):
    """Kind of content carried by an outgoing message

    Only TEXT can be sent at the moment.
    """

    TEXT = "text"
    AUDIO = "audio"
    IMAGE = "image"


class UserState(str, Enum):
    """Lifecycle of a User entity"""

    UNINITIALIZED = "uninitialized"
    READY = "ready"


class BodyShape(str, Enum):
    """How an operation encodes its request body

    NONE sends no body at all (GET/DELETE). NULL sends the literal JSON
    ``null``, which some POST-only endpoints expect when there is nothing to
    say. JSON sends the object supplied by the caller.
    """

    NONE = "none"
    NULL = "null"
    JSON = "json"


class ActivityFilter(str, Enum):
    """Feed entry categories requested from the activity API"""

    PURCHASED = "PURCHASED"
    RATED = "RATED"
    VIDEO_UPLOAD = "VIDEO_UPLOAD"
    SCREENSHOT_UPLOAD = "SCREENSHOT_UPLOAD"
    PLAYED_GAME = "PLAYED_GAME"
    WATCHED_VIDEO = "WATCHED_VIDEO"
    TROPHY = "TROPHY"
    BROADCASTING = "BROADCASTING"
    LIKED = "LIKED"
    PROFILE_PIC = "PROFILE_PIC"
    FRIENDED = "FRIENDED"
    CONTENT_SHARE = "CONTENT_SHARE"
    IN_GAME_POST = "IN_GAME_POST"
    RENTED = "RENTED"
    SUBSCRIBED = "SUBSCRIBED"
    FIRST_PLAYED_GAME = "FIRST_PLAYED_GAME"
    IN_APP_POST = "IN_APP_POST"
    APP_WATCHED_VIDEO = "APP_WATCHED_VIDEO"
    SHARE_PLAYED_GAME = "SHARE_PLAYED_GAME"
    VIDEO_UPLOAD_VERIFIED = "VIDEO_UPLOAD_VERIFIED"
    SCREENSHOT_UPLOAD_VERIFIED = "SCREENSHOT_UPLOAD_VERIFIED"
    SHARED_EVENT = "SHARED_EVENT"
    JOIN_EVENT = "JOIN_EVENT"
    TROPHY_UPLOAD = "TROPHY_UPLOAD"
    FOLLOWING = "FOLLOWING"
    RESHARE = "RESHARE"

    @classmethod
    def values(cls) -> list[str]:
        """Get all enum values as a list

        Returns:
            List of all filter values, in request order
        """
        return [item.value for item in cls]
