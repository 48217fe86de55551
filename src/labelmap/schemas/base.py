"""Base Pydantic model shared by the labelmap config schemas."""

from pydantic import BaseModel, ConfigDict


class LabelMapBaseModel(BaseModel):
    """Strict base for LabelMapConfig and LoggingConfig.

    A misspelled key such as ``background`` must fail loudly rather than
    leave the map on its default background, and reassigning
    ``background_value`` on a built config is checked against the label
    dtype again.
    """

    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        use_enum_values=True,
        str_strip_whitespace=True,
    )
