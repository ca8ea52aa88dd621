"""
psn - Python client for the PlayStation Network API

This package binds the private PSN REST API: remote accounts are User
objects whose methods become authenticated HTTP calls.

Main Components:
- PSNClient: Main entry point
- AuthManager: Holds the externally acquired bearer token
- User: A remote account and its operations
- Schemas: Typed Profile, trophy and activity payloads

Usage:
    from psn import AuthManager, PSNClient

    async with PSNClient(AuthManager(token=token, online_id="me")) as psn:
        user = await psn.get_user("someone")
        trophies = await user.compare_trophies(limit=10)
"""

from .auth import AuthManager, CredentialsProvider
from .client import PSNClient
from .enums import ActivityFilter, MessageType, UserState
from .exceptions import (
    PSNError,
    APIError,
    AuthenticationError,
    ResponseValidationError,
    UnsupportedMessageTypeError,
    UserNotReadyError,
)
from .schema import ActivityResponse, CompareTrophiesResponse, Message, Profile
from .user import User

__version__ = "0.1.0"

__all__ = [
    "PSNClient",
    "AuthManager",
    "CredentialsProvider",
    "User",
    "Profile",
    "Message",
    "CompareTrophiesResponse",
    "ActivityResponse",
    "ActivityFilter",
    "MessageType",
    "UserState",
    "PSNError",
    "APIError",
    "AuthenticationError",
    "ResponseValidationError",
    "UnsupportedMessageTypeError",
    "UserNotReadyError",
]
