"""
Shared pydantic configuration for configuration schema models.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class SchemaModel(BaseModel):
    """
    Base class for every configuration schema entity.

    Configuration documents use camelCase keys (``autoArgs``,
    ``environmentVariableName``) while Python code uses snake_case; both are
    accepted. Models are frozen because the tree is never mutated after load,
    and unknown keys are rejected so untagged variants can be told apart.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )


def stringify_scalar(value: Any) -> Any:
    """Convert YAML scalars (numbers, booleans) to their string form.

    Params:
        value: Raw value from the configuration document

    Returns:
        The string form for int/float/bool scalars, otherwise the value unchanged
    """
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)):
        return str(value)
    return value
