"""Shared base for response models."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Model serialised with camelCase keys for the browser client."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
