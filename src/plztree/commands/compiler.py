"""
Command tree compiler.

Walks the configuration's command tree and emits the equivalent grammar: one
node per command visible on the running platform, each carrying the
arguments derived from every variable in its scope (its own variables merged
over everything inherited from its ancestors).
"""

import logging
from pathlib import Path

from plztree.args import ALIAS_ARGS_NAME
from plztree.exceptions import (
    DuplicateCommandNameError,
    ErrorContext,
    ReservedArgumentError,
)
from plztree.grammar.nodes import GrammarArgument, GrammarNode
from plztree.platform import PlatformProvider, is_current_platform
from plztree.schema import (
    AliasAction,
    CommandDefinition,
    CommandMap,
    Configuration,
    NamedArgument,
    Options,
    PositionalArgument,
    ShorthandArgument,
    VariableMap,
    get_argument_binding,
    get_default_value,
)

logger = logging.getLogger(__name__)

ROOT_COMMAND_NAME = "plz"
ALIAS_ARGS_HELP = "Arguments and options for the aliased command."


def merge_variables(parent_variables: VariableMap, variables: VariableMap) -> VariableMap:
    """
    Overlay a command's own variables on the scope it inherits.

    A key defined at both levels takes the child's definition as a whole;
    fields are never merged between the two definitions.

    Params:
        parent_variables: Scope inherited from the root and parent commands
        variables: The command's own variables

    Returns:
        New mapping; neither input is modified
    """
    merged = dict(parent_variables)
    merged.update(variables)
    return merged


def _argument_from_binding(key: str, binding) -> GrammarArgument:
    # The variable key is the argument id so the parsed value can be linked back to it
    if isinstance(binding, ShorthandArgument):
        return GrammarArgument(id=key, long=binding.name)

    if isinstance(binding, NamedArgument):
        return GrammarArgument(
            id=key,
            long=binding.long,
            short=binding.short,
            help=binding.description,
        )

    if isinstance(binding, PositionalArgument):
        return GrammarArgument(
            id=key,
            position=binding.position,
            help=binding.description,
        )

    raise TypeError(f"Unknown argument binding: {type(binding).__name__}")


def derive_arguments(options: Options, variables: VariableMap) -> list[GrammarArgument]:
    """
    Derive the grammar arguments for a variable scope.

    Variables with an explicit binding always surface as arguments. Variables
    without one surface as a ``--<key>`` flag only when ``auto_args`` is on,
    and are skipped otherwise. Literal variables pre-fill their argument with
    their value.

    Params:
        options: Global options
        variables: Fully merged scope of a command

    Returns:
        Arguments in scope iteration order
    """
    arguments = []

    for key, variable in variables.items():
        binding = get_argument_binding(variable)

        if binding is None and options.auto_args:
            binding = ShorthandArgument(name=key)

        if binding is None:
            continue

        argument = _argument_from_binding(key, binding)
        argument.default = get_default_value(variable)
        arguments.append(argument)

    return arguments


def _alias_argument() -> GrammarArgument:
    return GrammarArgument(
        id=ALIAS_ARGS_NAME,
        help=ALIAS_ARGS_HELP,
        variadic=True,
        allow_hyphen_values=True,
        trailing=True,
    )


def _visible_commands(
    commands: CommandMap,
    platform_provider: PlatformProvider,
) -> list[tuple[str, CommandDefinition]]:
    visible = []

    for key, command in commands.items():
        if command.platform is not None:
            current_platform = platform_provider.get_platform()
            if not is_current_platform(current_platform, command.platform):
                logger.debug("Skipping command '%s': not available on %s", key, current_platform.value)
                continue

        visible.append((key, command))

    return visible


def _check_unique_names(
    visible: list[tuple[str, CommandDefinition]],
    context: ErrorContext,
) -> None:
    keys_by_name: dict[str, list[str]] = {}
    for key, command in visible:
        keys_by_name.setdefault(command.resolve_name(key), []).append(key)

    for name, keys in keys_by_name.items():
        if len(keys) > 1:
            raise DuplicateCommandNameError(name, keys, context)


def compile_commands(
    options: Options,
    commands: CommandMap,
    parent_variables: VariableMap,
    platform_provider: PlatformProvider,
    _command_path: list[str] | None = None,
    _config_path: Path | None = None,
) -> list[GrammarNode]:
    """
    Compile a command map into grammar nodes.

    Commands restricted to other platforms are dropped together with their
    whole subtree. Each remaining command becomes a node whose arguments come
    from its merged scope and whose children are its own commands, compiled
    with that merged scope as their inherited one.

    Params:
        options: Global options
        commands: Commands at this level
        parent_variables: Scope inherited from the root and parent commands
        platform_provider: Reports the running platform

    Returns:
        One grammar node per visible command

    Raises:
        DuplicateCommandNameError: If two visible siblings resolve to the same name
        ReservedArgumentError: If an alias command has a variable named like
            the alias argument in scope
    """
    command_path = _command_path or []
    visible = _visible_commands(commands, platform_provider)
    _check_unique_names(visible, ErrorContext(command_path=command_path, config_path=_config_path))

    nodes = []
    for key, command in visible:
        path = [*command_path, key]
        variables = merge_variables(parent_variables, command.variables)
        arguments = derive_arguments(options, variables)

        children = compile_commands(
            options,
            command.commands,
            variables,
            platform_provider,
            _command_path=path,
            _config_path=_config_path,
        )

        has_action = command.action is not None
        if not has_action and not children:
            logger.debug("Command '%s' has no action and no visible subcommands", " ".join(path))

        if isinstance(command.action, AliasAction):
            if ALIAS_ARGS_NAME in variables:
                raise ReservedArgumentError(
                    ALIAS_ARGS_NAME,
                    ErrorContext(command_path=path, config_path=_config_path),
                )
            arguments.append(_alias_argument())

        nodes.append(
            GrammarNode(
                name=command.resolve_name(key),
                key=key,
                children=children,
                arguments=arguments,
                requires_subcommand=not has_action,
                hidden=command.hidden,
                help=command.description,
            )
        )

    return nodes


def compile_root(
    config: Configuration,
    platform_provider: PlatformProvider,
    program_name: str = ROOT_COMMAND_NAME,
    version: str | None = None,
    config_path: Path | None = None,
) -> GrammarNode:
    """
    Compile a whole configuration into the root grammar node.

    Params:
        config: Loaded configuration
        platform_provider: Reports the running platform
        program_name: Name of the root node
        version: Version reported by ``--version``
        config_path: File the configuration was loaded from, named in errors

    Returns:
        Root node that always requires a subcommand
    """
    arguments = derive_arguments(config.options, config.variables)
    children = compile_commands(
        config.options,
        config.commands,
        config.variables,
        platform_provider,
        _config_path=config_path,
    )

    return GrammarNode(
        name=program_name,
        children=children,
        arguments=arguments,
        requires_subcommand=True,
        help=config.description,
        version=version,
    )
