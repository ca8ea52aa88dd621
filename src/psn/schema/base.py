"""Shared base model for PSN payloads"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PSNModel(BaseModel):
    """Base for every payload read from the PSN API

    The API speaks camelCase; fields are snake_case in Python and populated
    through camelCase aliases. Instances are frozen snapshots. Unknown keys
    are kept so newer API fields survive a round trip.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="allow",
    )
