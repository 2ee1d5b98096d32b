"""Base classes for persisted models."""

from pydantic import AwareDatetime, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Model persisted and served with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TimestampMixin(CamelModel):
    """Adds created_at and modified_at timestamps."""

    created_at: AwareDatetime
    modified_at: AwareDatetime
