"""
Command tree compilation and matched-command resolution.

The compiler turns the configured command tree into a grammar; the resolver
maps a parse against that grammar back to a command definition and its
variable scope.
"""

from plztree.commands.compiler import (
    ALIAS_ARGS_HELP,
    ROOT_COMMAND_NAME,
    compile_commands,
    compile_root,
    derive_arguments,
    merge_variables,
)
from plztree.commands.resolver import (
    SubcommandSearchResult,
    find_command_by_name,
    find_subcommand,
    matched_path,
)

__all__ = [
    "ALIAS_ARGS_HELP",
    "ROOT_COMMAND_NAME",
    "compile_commands",
    "compile_root",
    "derive_arguments",
    "merge_variables",
    "SubcommandSearchResult",
    "find_command_by_name",
    "find_subcommand",
    "matched_path",
]
