"""
Configuration schema for plztree.

This package defines the declarative command tree (commands, variables,
argument bindings, actions and platform predicates) and loads it from YAML.
"""

from plztree.schema.actions import (
    Action,
    AliasAction,
    ExecutionSpec,
    RawCommandExecution,
    SingleStepAction,
)
from plztree.schema.arguments import (
    ArgumentBinding,
    NamedArgument,
    PositionalArgument,
    ShorthandArgument,
)
from plztree.schema.commands import (
    CommandDefinition,
    CommandMap,
    Configuration,
    Options,
    Platform,
    PlatformPredicate,
)
from plztree.schema.loader import find_config_file, load_config, parse_config
from plztree.schema.variables import (
    ArgumentVariable,
    ExecutionVariable,
    LiteralVariable,
    PromptOptions,
    PromptVariable,
    ShorthandLiteralVariable,
    VariableDefinition,
    VariableMap,
    get_argument_binding,
    get_default_value,
)

__all__ = [
    "Action",
    "AliasAction",
    "ExecutionSpec",
    "RawCommandExecution",
    "SingleStepAction",
    "ArgumentBinding",
    "NamedArgument",
    "PositionalArgument",
    "ShorthandArgument",
    "CommandDefinition",
    "CommandMap",
    "Configuration",
    "Options",
    "Platform",
    "PlatformPredicate",
    "ArgumentVariable",
    "ExecutionVariable",
    "LiteralVariable",
    "PromptOptions",
    "PromptVariable",
    "ShorthandLiteralVariable",
    "VariableDefinition",
    "VariableMap",
    "get_argument_binding",
    "get_default_value",
    "find_config_file",
    "load_config",
    "parse_config",
]
