"""
Credentials

Responsibilities:
- Define the credentials provider capability the request layer reads from
- Hold an externally acquired token and the current account's identity

Token acquisition and refresh happen outside this package. Whoever owns the
login flow pushes new tokens in with ``AuthManager.update_token``; requests
built after that call carry the new token, requests already in flight keep
the old one.
"""

import logging
from typing import Optional, Protocol, runtime_checkable

from .config import Settings, get_settings
from .schema import Profile


logger = logging.getLogger(__name__)


@runtime_checkable
class CredentialsProvider(Protocol):
    """
    Source of the credentials every request needs.

    Both methods are awaited once per request, right before it is built, so
    implementations may hand out a freshly refreshed token each time.
    """

    async def get_token(self) -> Optional[str]:
        """Current bearer token, or None if not authenticated."""
        ...

    async def get_online_id(self) -> Optional[str]:
        """Online id of the authenticated account, or None if unknown."""
        ...


class AuthManager:
    """
    In-memory credentials holder.

    Args:
        token: Bearer token for the authenticated account
        online_id: Online id of the authenticated account
        profile: Profile of the authenticated account, if already known
    """

    def __init__(
        self,
        token: Optional[str] = None,
        online_id: Optional[str] = None,
        profile: Optional[Profile] = None,
    ):
        """Initialize authentication manager."""
        self._token = token
        self._online_id = online_id or (profile.online_id if profile else None)
        self._profile = profile

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "AuthManager":
        """Build a manager from PSN_AUTHORIZATION_TOKEN and PSN_ONLINE_ID."""
        settings = settings or get_settings()
        return cls(token=settings.authorization_token, online_id=settings.online_id)

    async def get_token(self) -> Optional[str]:
        return self._token

    async def get_online_id(self) -> Optional[str]:
        return self._online_id

    @property
    def profile(self) -> Optional[Profile]:
        """Profile of the authenticated account."""
        return self._profile

    def update_token(self, token: Optional[str]) -> None:
        """Replace the bearer token after an external refresh."""
        self._token = token
        logger.debug("Authorization token updated")

    def set_profile(self, profile: Profile) -> None:
        """Record the authenticated account's profile and online id."""
        self._profile = profile
        self._online_id = profile.online_id
        logger.info(f"Authenticated account set to {profile.online_id}")

    def is_authenticated(self) -> bool:
        """
        Check if a token is available.

        Returns:
            True if token exists
        """
        return self._token is not None
