"""
Argument binding definitions.

An argument binding describes how a variable surfaces on the command line:
as a bare long flag, as a named flag with optional short form and help text,
or as a positional slot.
"""

from typing import Annotated, Any, Union

from pydantic import Discriminator, Field, Tag, model_validator

from plztree.schema.base import SchemaModel


class ShorthandArgument(SchemaModel):
    """Long flag equal to ``name``; no short form and no help text."""

    name: str

    @model_validator(mode="before")
    @classmethod
    def _from_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"name": data}
        return data


class NamedArgument(SchemaModel):
    """Explicit long flag with an optional one-character short flag and help text."""

    long: str
    short: str | None = Field(default=None, min_length=1, max_length=1)
    description: str | None = None


class PositionalArgument(SchemaModel):
    """Positional slot at a 1-based index."""

    position: int = Field(ge=1)
    description: str | None = None


def _argument_kind(value: Any) -> str | None:
    if isinstance(value, ShorthandArgument) or isinstance(value, str):
        return "shorthand"
    if isinstance(value, NamedArgument):
        return "named"
    if isinstance(value, PositionalArgument):
        return "positional"
    if isinstance(value, dict):
        return "positional" if "position" in value else "named"
    return None


ArgumentBinding = Annotated[
    Union[
        Annotated[ShorthandArgument, Tag("shorthand")],
        Annotated[NamedArgument, Tag("named")],
        Annotated[PositionalArgument, Tag("positional")],
    ],
    Discriminator(_argument_kind),
]
