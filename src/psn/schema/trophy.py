"""Trophy comparison schemas returned by the trophy API"""

from typing import List, Optional
from pydantic import Field

from .base import PSNModel
from .profile import EarnedTrophies


class DefinedTrophies(EarnedTrophies):
    """Trophy counts a title defines, by grade"""
    pass


class TrophyTitleUser(PSNModel):
    """One side of a comparison: an account's progress on a title"""

    online_id: Optional[str] = None
    progress: Optional[int] = None
    earned_trophies: Optional[EarnedTrophies] = None
    last_update_date: Optional[str] = None
    hidden_flag: Optional[bool] = None


class TrophyTitle(PSNModel):
    """A game with trophies, compared between two accounts"""

    np_communication_id: str
    trophy_title_name: Optional[str] = None
    trophy_title_detail: Optional[str] = None
    trophy_title_icon_url: Optional[str] = None
    trophy_title_smaller_icon_url: Optional[str] = None
    # The API spells this key "trophyTitlePlatfrom".
    trophy_title_platform: Optional[str] = Field(default=None, alias="trophyTitlePlatfrom")
    has_trophy_groups: Optional[bool] = None
    defined_trophies: Optional[DefinedTrophies] = None
    compared_user: Optional[TrophyTitleUser] = None
    from_user: Optional[TrophyTitleUser] = None


class CompareTrophiesResponse(PSNModel):
    """A page of titles compared between the caller and another account"""

    total_results: int = 0
    offset: int = 0
    limit: int = 0
    trophy_titles: List[TrophyTitle] = Field(default_factory=list)
