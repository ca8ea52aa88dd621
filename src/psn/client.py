"""
PSN Main Client

Responsibilities:
- Client initialization from explicit credentials or from settings
- HTTP client lifecycle management
- Entry point for User creation

This is the main entry point for users of the package.
"""

import logging
from typing import Optional

import httpx

from .api.base import APIClient
from .auth import AuthManager, CredentialsProvider
from .config import Settings, get_settings
from .logging import setup_logging
from .schema import Profile
from .user import User


logger = logging.getLogger(__name__)


class PSNClient:
    """
    Main client for the PSN API.

    Usage:
        async with PSNClient(AuthManager(token="...", online_id="me")) as psn:
            user = await psn.get_user("someone")
            await user.add_friend()

    Args:
        credentials: Provider read for the token and account id on every request
        timeout: HTTP request timeout in seconds (default: 30)
        np_language: Language for localised trophy data (default: en)
        transport: Optional httpx transport, mainly for tests
    """

    def __init__(
        self,
        credentials: CredentialsProvider,
        timeout: float = 30,
        np_language: str = "en",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize PSN client."""
        self.credentials = credentials
        self.api_client = APIClient(
            credentials=credentials,
            timeout=timeout,
            np_language=np_language,
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "PSNClient":
        """
        Build a client from PSN_* environment variables and config.toml.

        Also sets up file logging when ``log_dir`` is configured.
        """
        settings = settings or get_settings()
        if settings.log_dir is not None:
            setup_logging(settings.log_dir, level=settings.log_level)

        logger.info(f"PSNClient configured for account {settings.online_id or '<unknown>'}")
        return cls(
            credentials=AuthManager.from_settings(settings),
            timeout=settings.timeout,
            np_language=settings.np_language,
            transport=transport,
        )

    async def get_user(self, online_id: str) -> User:
        """
        Fetch a user's profile and return a ready User.

        Raises:
            APIError: If the account does not exist or is not visible
        """
        return await User.fetch(self.api_client, online_id)

    def user(self, online_id: str) -> User:
        """Return an uninitialized User; await ``ready()`` before using it."""
        return User(self.api_client, online_id=online_id)

    def user_from_profile(self, profile: Profile) -> User:
        """Wrap an already fetched profile without any request."""
        return User.from_profile(self.api_client, profile)

    async def close(self) -> None:
        await self.api_client.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
