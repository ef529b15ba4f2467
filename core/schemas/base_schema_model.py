"""Base pydantic model shared by all API schemas."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchemaModel(BaseModel):
    """Base pydantic model shared by all API schemas.

    Schemas validate from ORM objects (including queryset annotations) and
    accept snake_case or camelCase input keys. Unknown keys such as
    pagination parameters are ignored. String values are kept as stored;
    query schemas opt into whitespace stripping.
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
    )
