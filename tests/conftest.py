"""Shared fixtures: a fake PSN backend behind httpx.MockTransport."""

import json
from typing import Any, List

import httpx
import pytest

from psn import AuthManager, PSNClient, Profile
from psn.api import APIClient


class FakePSN:
    """Records every request and answers with queued responses."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self._responses: List[Any] = []

    def reply(self, payload: Any = None, status_code: int = 200, content: bytes = None) -> None:
        """Queue a response; a callable or exception may be queued too."""
        if isinstance(payload, BaseException) or callable(payload):
            self._responses.append(payload)
        elif content is not None:
            self._responses.append(httpx.Response(status_code, content=content))
        else:
            self._responses.append(httpx.Response(status_code, json=payload))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            return httpx.Response(200, content=b"")
        response = self._responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        if callable(response):
            return response(request)
        return response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def body(self, index: int = -1) -> Any:
        return json.loads(self.requests[index].content)


@pytest.fixture
def fake_psn() -> FakePSN:
    return FakePSN()


@pytest.fixture
def auth() -> AuthManager:
    return AuthManager(token="token-1", online_id="me")


@pytest.fixture
def api_client(auth: AuthManager, fake_psn: FakePSN) -> APIClient:
    return APIClient(credentials=auth, transport=httpx.MockTransport(fake_psn.handler))


@pytest.fixture
def psn_client(auth: AuthManager, fake_psn: FakePSN) -> PSNClient:
    return PSNClient(auth, transport=httpx.MockTransport(fake_psn.handler))


@pytest.fixture
def profile_payload() -> dict:
    return {
        "onlineId": "target",
        "npId": "dGFyZ2V0QGE2LnVz",
        "avatarUrls": [{"size": "m", "avatarUrl": "http://static-resource.np.community.playstation.net/avatar_m/a.png"}],
        "plus": 1,
        "aboutMe": "",
        "languagesUsed": ["en"],
        "trophySummary": {
            "level": 12,
            "progress": 40,
            "earnedTrophies": {"platinum": 1, "gold": 5, "silver": 20, "bronze": 80},
        },
        "isOfficiallyVerified": False,
        "primaryOnlineStatus": "offline",
        "friendRelation": "no",
        "blocking": False,
        "following": False,
        "followerCount": 0,
    }


@pytest.fixture
def profile(profile_payload: dict) -> Profile:
    return Profile.model_validate(profile_payload)
