"""
Subcommand resolution.

Walks the matched path of a parsed invocation back down the configuration
tree to find the command to run and every variable visible to it.
"""

import logging
from typing import NamedTuple

from plztree.args import ArgumentResolver, InvocationArgumentResolver
from plztree.commands.compiler import merge_variables
from plztree.exceptions import CommandResolutionError
from plztree.grammar.engine import ParsedInvocation
from plztree.grammar.nodes import GrammarNode
from plztree.schema import CommandDefinition, CommandMap, VariableMap

logger = logging.getLogger(__name__)


class SubcommandSearchResult(NamedTuple):
    """The command to invoke, its variable scope and its parsed arguments."""

    command: CommandDefinition
    variables: VariableMap
    arguments: ArgumentResolver


def find_command_by_name(
    command_name: str,
    commands: CommandMap,
    key: str | None = None,
) -> tuple[str, CommandDefinition] | None:
    """
    Find a command by the name it was invoked with.

    A command answers to its override name and to its map key. Commands that
    share a name on different platforms are told apart by ``key``, the map key
    recorded on the grammar node that was matched.

    Params:
        command_name: Name the command was invoked with
        commands: Commands at this level
        key: Map key of the matched grammar node, if known

    Returns:
        Key and definition of the command, or None
    """
    matches = [
        (command_key, command)
        for command_key, command in commands.items()
        if command.answers_to(command_key, command_name)
    ]

    if key is not None:
        for command_key, command in matches:
            if command_key == key:
                return command_key, command

    return matches[0] if matches else None


def find_subcommand(
    invocation: ParsedInvocation,
    parent_node: GrammarNode,
    commands: CommandMap,
    parent_variables: VariableMap,
) -> SubcommandSearchResult | None:
    """
    Find the most specific command matched by an invocation.

    Params:
        invocation: Parsed invocation at the parent's level
        parent_node: Grammar node the invocation was matched against
        commands: Commands defined under the parent
        parent_variables: Scope visible at the parent's level

    Returns:
        The deepest matched command with its merged scope and local arguments,
        or None when no subcommand was matched at this level

    Raises:
        CommandResolutionError: If the matched name has no grammar node or no
            command definition
    """
    if invocation.subcommand is None:
        return None

    subcommand_name, subcommand_invocation = invocation.subcommand

    subcommand_node = parent_node.find_child(subcommand_name)
    if subcommand_node is None:
        raise CommandResolutionError(subcommand_name, [child.name for child in parent_node.children])

    found = find_command_by_name(subcommand_name, commands, key=subcommand_node.key)
    if found is None:
        raise CommandResolutionError(subcommand_name, list(commands))
    _, command = found

    variables = merge_variables(parent_variables, command.variables)

    matched_subcommand = find_subcommand(
        subcommand_invocation,
        subcommand_node,
        command.commands,
        variables,
    )
    if matched_subcommand is not None:
        return matched_subcommand

    logger.debug("Resolved command '%s'", subcommand_name)
    return SubcommandSearchResult(
        command=command,
        variables=variables,
        arguments=InvocationArgumentResolver.from_invocation(subcommand_invocation),
    )


def matched_path(invocation: ParsedInvocation) -> list[str]:
    """
    List the command names selected along a matched path.

    Params:
        invocation: Root-level parsed invocation

    Returns:
        Names from the first subcommand down to the deepest one
    """
    names = []
    current = invocation
    while current.subcommand is not None:
        name, current = current.subcommand
        names.append(name)
    return names
