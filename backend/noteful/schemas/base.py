"""Shared Pydantic configuration for every API schema."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base schema: snake_case attributes, camelCase on the wire.

    populate_by_name lets services build instances with Python names;
    from_attributes lets response models validate ORM objects directly.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
