"""
https://docs.pydantic.dev/latest/api/config/#pydantic.config.ConfigDict.alias_generator

Base model for HTTP payloads: camelCase on the wire, snake_case in Python.
FastAPI serializes responses by alias, so responses come out camelCase too.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def lower_enum_value(value: Any) -> Any:
    """Case-insensitive enum input for field_validator(mode='before')"""
    return value.lower() if isinstance(value, str) else value
