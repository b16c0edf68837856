"""
Command tree definitions.

The configuration root owns a map of commands; each command owns its own
variables and, recursively, its own nested command map. The tree is built
once by the loader and never mutated afterwards.
"""

from enum import Enum

from pydantic import AliasChoices, Field

from plztree.schema.actions import Action
from plztree.schema.base import SchemaModel
from plztree.schema.variables import VariableMap


class Platform(str, Enum):
    """Operating system families a command can be restricted to."""

    LINUX = "linux"
    MACOS = "macos"
    WINDOWS = "windows"


PlatformPredicate = Platform | list[Platform]


class Options(SchemaModel):
    """Global switches.

    Only ``auto_args`` affects compilation; the print toggles are display
    options for the execution engine.
    """

    auto_args: bool = False
    print_commands: bool = False
    print_variables: bool = False


class CommandDefinition(SchemaModel):
    """One named command in the tree.

    A command without ``action`` is a grouping node and needs a subcommand to
    be invoked. ``name`` overrides the map key as the externally visible
    identifier.
    """

    name: str | None = None
    platform: PlatformPredicate | None = Field(
        default=None, validation_alias=AliasChoices("platform", "platforms")
    )
    description: str | None = None
    hidden: bool = False
    variables: VariableMap = Field(default_factory=dict)
    commands: dict[str, "CommandDefinition"] = Field(default_factory=dict)
    action: Action | None = None

    def resolve_name(self, key: str) -> str:
        """
        Get the externally visible name of this command.

        Params:
            key: Map key the command is registered under

        Returns:
            The override name when set, otherwise the key
        """
        return self.name if self.name is not None else key

    def answers_to(self, key: str, name: str) -> bool:
        """Check whether ``name`` identifies this command (override or key)."""
        return (self.name is not None and self.name == name) or key == name


CommandDefinition.model_rebuild()

CommandMap = dict[str, CommandDefinition]


class Configuration(SchemaModel):
    """Root of a configuration document."""

    description: str | None = None
    options: Options = Field(default_factory=Options)
    variables: VariableMap = Field(default_factory=dict)
    commands: CommandMap = Field(default_factory=dict)
    imports: list[str] = Field(default_factory=list)
