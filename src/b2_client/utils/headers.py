"""Serialization of pydantic models into HTTP request headers."""

from enum import Enum

from pydantic import BaseModel


def _header_value(value) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def model_to_headers(model: BaseModel) -> dict[str, str]:
    """
    Convert a model into a header mapping.

    Header names are taken from the fields' serialization aliases.
    Fields set to ``None`` are left out.

    :param model: the model to serialize
    :return: mapping of header name to header value
    """
    dumped = model.model_dump(by_alias=True, exclude_none=True)
    return {name: _header_value(value) for name, value in dumped.items()}
