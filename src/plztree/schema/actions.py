"""
Action and execution definitions.

Actions are carried verbatim for the execution engine; the compiler only
needs to know whether a command has an action at all and whether that
action is an alias.
"""

from typing import Annotated, Any, Union

from pydantic import Discriminator, Tag, model_validator

from plztree.schema.base import SchemaModel


class RawCommandExecution(SchemaModel):
    """A raw shell command line. Written as a bare string in the document."""

    command: str

    @model_validator(mode="before")
    @classmethod
    def _from_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"command": data}
        return data


ExecutionSpec = RawCommandExecution


class SingleStepAction(SchemaModel):
    """Run one execution."""

    action: ExecutionSpec

    @model_validator(mode="before")
    @classmethod
    def _from_execution(cls, data: Any) -> Any:
        # `action: echo hi` and `action: {command: ...}` both describe one step
        if isinstance(data, (str, RawCommandExecution)):
            return {"action": data}
        if isinstance(data, dict) and "action" not in data:
            return {"action": data}
        return data


class AliasAction(SchemaModel):
    """Hand control, plus every trailing token, to another program."""

    alias: str


def _action_kind(value: Any) -> str | None:
    if isinstance(value, AliasAction):
        return "alias"
    if isinstance(value, (SingleStepAction, RawCommandExecution, str)):
        return "single"
    if isinstance(value, dict):
        return "alias" if "alias" in value else "single"
    return None


Action = Annotated[
    Union[
        Annotated[SingleStepAction, Tag("single")],
        Annotated[AliasAction, Tag("alias")],
    ],
    Discriminator(_action_kind),
]
