"""
Variable definitions.

A variable eventually produces exactly one value through the evaluation
engine. The variant decides where that value may come from and whether the
variable can surface as a command-line argument:

- ShorthandLiteralVariable: fixed literal written as a bare scalar
- LiteralVariable: fixed literal, optionally bound to an argument
- ExecutionVariable: output of running something, optionally bound
- PromptVariable: asked interactively, optionally bound
- ArgumentVariable: taken only from the command line, binding mandatory
"""

from typing import Annotated, Any, Union

from pydantic import Discriminator, Field, Tag, field_validator, model_validator

from plztree.schema.actions import ExecutionSpec
from plztree.schema.arguments import ArgumentBinding
from plztree.schema.base import SchemaModel, stringify_scalar


class ShorthandLiteralVariable(SchemaModel):
    """Fixed literal value written as a bare scalar in the document."""

    value: str

    @model_validator(mode="before")
    @classmethod
    def _from_scalar(cls, data: Any) -> Any:
        if isinstance(data, (str, int, float, bool)):
            return {"value": stringify_scalar(data)}
        return data


class LiteralVariable(SchemaModel):
    """Fixed literal value that may also be overridden through an argument."""

    value: str
    argument: ArgumentBinding | None = None
    environment_variable_name: str | None = None

    @field_validator("value", mode="before")
    @classmethod
    def _stringify_value(cls, value: Any) -> Any:
        return stringify_scalar(value)


class ExecutionVariable(SchemaModel):
    """Value obtained by running an execution."""

    execution: ExecutionSpec
    argument: ArgumentBinding | None = None
    environment_variable_name: str | None = None


class PromptOptions(SchemaModel):
    """Prompt message and the optional list of choices to pick from."""

    message: str
    options: list[str] = Field(default_factory=list)


class PromptVariable(SchemaModel):
    """Value asked from the user interactively."""

    prompt: PromptOptions
    argument: ArgumentBinding | None = None
    environment_variable_name: str | None = None


class ArgumentVariable(SchemaModel):
    """Value that only ever comes from the command line."""

    argument: ArgumentBinding


_VARIANT_TAGS = {
    ShorthandLiteralVariable: "shorthand",
    LiteralVariable: "literal",
    ExecutionVariable: "execution",
    PromptVariable: "prompt",
    ArgumentVariable: "argument",
}

_MAPPING_KEY_TAGS = (
    ("value", "literal"),
    ("execution", "execution"),
    ("prompt", "prompt"),
    ("argument", "argument"),
)


def _variable_kind(value: Any) -> str | None:
    tag = _VARIANT_TAGS.get(type(value))
    if tag is not None:
        return tag

    if isinstance(value, dict):
        # `argument` is optional on every other mapping form, so it is checked last
        for key, tag in _MAPPING_KEY_TAGS:
            if key in value:
                return tag
        return None

    if isinstance(value, (str, int, float, bool)):
        return "shorthand"

    return None


VariableDefinition = Annotated[
    Union[
        Annotated[ShorthandLiteralVariable, Tag("shorthand")],
        Annotated[LiteralVariable, Tag("literal")],
        Annotated[ExecutionVariable, Tag("execution")],
        Annotated[PromptVariable, Tag("prompt")],
        Annotated[ArgumentVariable, Tag("argument")],
    ],
    Discriminator(_variable_kind),
]

VariableMap = dict[str, VariableDefinition]


def get_argument_binding(variable: Any) -> ArgumentBinding | None:
    """
    Get the explicit argument binding carried by a variable, if any.

    Params:
        variable: Any variable definition variant

    Returns:
        The declared binding, or None for variants without one

    Raises:
        TypeError: If the value is not a known variable variant
    """
    if isinstance(variable, ShorthandLiteralVariable):
        return None
    if isinstance(variable, (LiteralVariable, ExecutionVariable, PromptVariable)):
        return variable.argument
    if isinstance(variable, ArgumentVariable):
        return variable.argument
    raise TypeError(f"Unknown variable definition: {type(variable).__name__}")


def get_default_value(variable: Any) -> str | None:
    """
    Get the default value a variable contributes to its compiled argument.

    Only literal variants have one; values that come from an execution, a
    prompt or the command line never pre-fill the argument.

    Params:
        variable: Any variable definition variant

    Returns:
        The literal value, or None

    Raises:
        TypeError: If the value is not a known variable variant
    """
    if isinstance(variable, (ShorthandLiteralVariable, LiteralVariable)):
        return variable.value
    if isinstance(variable, (ExecutionVariable, PromptVariable, ArgumentVariable)):
        return None
    raise TypeError(f"Unknown variable definition: {type(variable).__name__}")
