"""
User Entity

Responsibilities:
- Wrap exactly one Profile of a remote account
- Two-phase construction: cheap shell, then an awaited profile fetch
- Expose social, messaging, trophy and activity operations on that account

Each operation is a thin call into ``APIClient.call`` with the matching
entry of the endpoint table; the differences between operations live in
that table, not here.
"""

import asyncio
import logging
from typing import Optional

from .api import endpoints
from .api.base import APIClient
from .enums import MessageType, UserState
from .exceptions import UnsupportedMessageTypeError, UserNotReadyError
from .schema import ActivityResponse, CompareTrophiesResponse, Message, Profile


logger = logging.getLogger(__name__)


class User:
    """
    A remote PSN account.

    A User built from an online id starts UNINITIALIZED and becomes READY
    once ``ready()`` has fetched its profile. A User built from a Profile is
    READY immediately and costs no request.

    Usage:
        user = await User.fetch(api_client, "some_online_id")
        await user.add_friend("hi")

    Args:
        api_client: Client used for every request this user makes
        online_id: Online id to fetch the profile for
        profile: Already fetched profile; skips the fetch
    """

    def __init__(
        self,
        api_client: APIClient,
        online_id: Optional[str] = None,
        profile: Optional[Profile] = None,
    ):
        """Initialize user shell."""
        if online_id is None and profile is None:
            raise ValueError("Either online_id or profile is required")

        self.api_client = api_client
        self._online_id = profile.online_id if profile is not None else online_id
        self._profile: Optional[Profile] = profile
        self._fetch_lock = asyncio.Lock()

    @classmethod
    async def fetch(cls, api_client: APIClient, online_id: str) -> "User":
        """Create a User and wait for its profile."""
        user = cls(api_client, online_id=online_id)
        return await user.ready()

    @classmethod
    def from_profile(cls, api_client: APIClient, profile: Profile) -> "User":
        """Wrap an existing profile without any network call."""
        return cls(api_client, profile=profile)

    @property
    def state(self) -> UserState:
        return UserState.READY if self._profile is not None else UserState.UNINITIALIZED

    @property
    def online_id(self) -> str:
        return self._online_id

    @property
    def profile(self) -> Profile:
        """
        Profile snapshot of this account.

        Raises:
            UserNotReadyError: If the profile has not been fetched yet
        """
        self._require_ready()
        return self._profile

    async def ready(self) -> "User":
        """
        Fetch the profile if it is not there yet.

        Concurrent callers share a single fetch.

        Returns:
            self, now READY
        """
        async with self._fetch_lock:
            if self._profile is None:
                self._profile = await self._get_profile()
        return self

    async def refresh(self) -> Profile:
        """Refetch the profile and replace the current snapshot."""
        async with self._fetch_lock:
            self._profile = await self._get_profile()
        return self._profile

    async def _get_profile(self) -> Profile:
        profile = await self.api_client.call(endpoints.GET_PROFILE, online_id=self._online_id)
        logger.info(f"Fetched profile of {profile.online_id}")
        self._online_id = profile.online_id
        return profile

    def _require_ready(self) -> None:
        if self._profile is None:
            raise UserNotReadyError(
                f"Profile of {self._online_id} not fetched yet; await ready() first"
            )

    # ============================================================================
    # Friends and blocking
    # ============================================================================

    async def add_friend(self, request_message: str = "") -> bool:
        """
        Send a friend request to this user.

        Args:
            request_message: Optional text shown with the request

        Returns:
            True if the request was accepted by the API
        """
        self._require_ready()
        body = {"requestMessage": request_message} if request_message else {}
        return await self.api_client.call(endpoints.ADD_FRIEND, online_id=self.online_id, body=body)

    async def remove_friend(self) -> bool:
        """Remove this user from the authenticated account's friends."""
        self._require_ready()
        return await self.api_client.call(endpoints.REMOVE_FRIEND, online_id=self.online_id)

    async def block(self) -> bool:
        """Block this user."""
        self._require_ready()
        return await self.api_client.call(endpoints.BLOCK, online_id=self.online_id)

    async def unblock(self) -> bool:
        """Unblock this user."""
        self._require_ready()
        return await self.api_client.call(endpoints.UNBLOCK, online_id=self.online_id)

    # ============================================================================
    # Messaging
    # ============================================================================

    async def send_message(self, message: Optional[Message]) -> bool:
        """
        Send a message to this user.

        Args:
            message: Message to send; its receiver is set to this user

        Returns:
            True if sent, False if message is None

        Raises:
            UnsupportedMessageTypeError: For audio and image messages
        """
        if message is None:
            return False

        message.receiver = self

        if message.message_type is not MessageType.TEXT:
            raise UnsupportedMessageTypeError(
                f"Sending {message.message_type.value} messages is not implemented"
            )

        self._require_ready()
        return await self.api_client.call(endpoints.SEND_MESSAGE, body=message.to_request())

    # ============================================================================
    # Trophies and activity
    # ============================================================================

    async def compare_trophies(self, offset: int = 0, limit: int = 36) -> CompareTrophiesResponse:
        """
        Compare this user's trophies with the authenticated account's.

        Args:
            offset: Index of the first title to return
            limit: Maximum number of titles to return

        Returns:
            One page of compared trophy titles
        """
        self._require_ready()
        return await self.api_client.call(
            endpoints.COMPARE_TROPHIES,
            online_id=self.online_id,
            offset=offset,
            limit=limit,
        )

    async def get_activity(self, page: int = 0) -> ActivityResponse:
        """Get one page of this user's activity feed."""
        self._require_ready()
        return await self.api_client.call(endpoints.GET_ACTIVITY, online_id=self.online_id, page=page)

    def __repr__(self) -> str:
        return f"User(online_id={self._online_id!r}, state={self.state.value})"
