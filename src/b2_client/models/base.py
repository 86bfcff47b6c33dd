from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings, SettingsConfigDict


class StrictBaseModel(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
        use_enum_values=True,
    )


class ApiModel(BaseModel):
    """
    Base for objects exchanged with the B2 API.

    The API uses camelCase keys; fields are snake_case and accept both.
    Keys added by the API in later versions are ignored.
    """

    model_config = ConfigDict(
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )


class StrictBaseSettings(BaseSettings):
    model_config = SettingsConfigDict(
        extra="forbid", validate_assignment=True, use_enum_values=True, env_nested_delimiter="__"
    )
