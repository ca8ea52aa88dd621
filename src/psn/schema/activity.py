"""Activity feed schemas returned by the activity API"""

from typing import Any, Dict, List, Optional
from pydantic import Field

from .base import PSNModel


class FeedEntry(PSNModel):
    """One story in a user's activity feed

    ``story_type`` is one of the ActivityFilter values. The story body
    (targets, source, condensed stories) varies by type and is left as
    loosely typed data.
    """

    story_id: Optional[str] = None
    story_type: Optional[str] = None
    caption: Optional[str] = None
    date: Optional[str] = None
    source: Optional[Dict[str, Any]] = None
    targets: List[Dict[str, Any]] = Field(default_factory=list)
    like_count: Optional[int] = None
    comment_count: Optional[int] = None
    liked: Optional[bool] = None
    relevant_trophies: List[Dict[str, Any]] = Field(default_factory=list)


class ActivityResponse(PSNModel):
    """A page of a user's activity feed"""

    feed: List[FeedEntry] = Field(default_factory=list)
    next_page: Optional[int] = None
