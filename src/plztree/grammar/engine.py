"""
argparse-backed grammar engine.

Builds an ``argparse.ArgumentParser`` tree from compiled grammar nodes and
turns a parse into a matched-path structure: at every level, the values
supplied for that level's arguments plus the subcommand selected, if any.

Tokens are split between levels before argparse sees them. At each level a
token naming a subcommand selects it as long as no positional value has been
taken yet, and once the positionals are filled a trailing argument captures
everything that follows verbatim, flags included. argparse then only parses
the flags and positional values that belong to that one level.
"""

import argparse
import logging
from collections.abc import Sequence
from typing import Any

from attrs import define, field, frozen

from plztree.exceptions import GrammarParseError
from plztree.grammar.nodes import GrammarArgument, GrammarNode

logger = logging.getLogger(__name__)

_SUBCOMMAND_DEST = "_plztree_subcommand"
_SUBCOMMAND_METAVAR = "COMMAND"
_HELP_FLAGS = ("-h", "--help")
_VERSION_FLAG = "--version"
_END_OF_OPTIONS = "--"


@frozen
class ParsedInvocation:
    """
    One level of a matched command path.

    Params:
        values: Argument values supplied (or defaulted) at this level, keyed by
            argument id; arguments that were neither supplied nor defaulted
            are absent
        subcommand: Name and invocation of the selected subcommand, if any
    """

    values: dict[str, Any] = field(factory=dict)
    subcommand: tuple[str, "ParsedInvocation"] | None = None


class _GrammarArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing usage and exiting."""

    def error(self, message: str):
        raise GrammarParseError(message, usage=self.format_usage())


@define
class _Level:
    """Parsers of one grammar node.

    ``parser`` belongs to the full tree and provides help and usage;
    ``values_parser`` has no subcommands and parses this level's own tokens.
    """

    node: GrammarNode
    parser: argparse.ArgumentParser
    values_parser: argparse.ArgumentParser
    children: dict[str, "_Level"] = field(factory=dict)


@define
class _LevelTokens:
    own: list[str] = field(factory=list)
    trailing: list[str] = field(factory=list)
    child_name: str | None = None
    child_tokens: list[str] = field(factory=list)
    help_requested: bool = False


def _flag_strings(argument: GrammarArgument) -> list[str]:
    flags = []
    if argument.long is not None:
        flags.append(f"--{argument.long}")
    if argument.short is not None:
        flags.append(f"-{argument.short}")
    return flags


def _add_argument(parser: argparse.ArgumentParser, argument: GrammarArgument) -> None:
    kwargs: dict[str, Any] = {}
    if argument.help is not None:
        kwargs["help"] = argument.help
    if argument.default is not None:
        kwargs["default"] = argument.default

    if argument.is_positional:
        nargs = "*" if argument.variadic else "?"
        parser.add_argument(argument.id, nargs=nargs, **kwargs)
        return

    if argument.variadic:
        kwargs["nargs"] = "*"
    parser.add_argument(*_flag_strings(argument), dest=argument.id, **kwargs)


def _positionals(node: GrammarNode) -> list[GrammarArgument]:
    positionals = [a for a in node.arguments if a.is_positional and not a.trailing]
    return sorted(positionals, key=lambda a: a.position or 0)


def _trailing(node: GrammarNode) -> GrammarArgument | None:
    for argument in node.arguments:
        if argument.trailing:
            return argument
    return None


def _add_arguments(parser: argparse.ArgumentParser, node: GrammarNode, include_trailing: bool) -> None:
    if node.version is not None:
        parser.add_argument(_VERSION_FLAG, action="version", version=f"%(prog)s {node.version}")

    for argument in node.arguments:
        if not argument.is_positional:
            _add_argument(parser, argument)

    # argparse matches positionals in declaration order
    for argument in _positionals(node):
        _add_argument(parser, argument)

    trailing = _trailing(node)
    if trailing is not None and include_trailing:
        _add_argument(parser, trailing)


def _build_level(node: GrammarNode, parser: argparse.ArgumentParser) -> _Level:
    _add_arguments(parser, node, include_trailing=True)

    values_parser = _GrammarArgumentParser(
        prog=parser.prog,
        add_help=False,
        allow_abbrev=False,
        argument_default=argparse.SUPPRESS,
    )
    _add_arguments(values_parser, node, include_trailing=False)

    level = _Level(node=node, parser=parser, values_parser=values_parser)

    if not node.children and not node.requires_subcommand:
        return level

    subparsers = parser.add_subparsers(
        dest=_SUBCOMMAND_DEST,
        metavar=_SUBCOMMAND_METAVAR,
        required=node.requires_subcommand,
    )

    for child in node.children:
        child_kwargs: dict[str, Any] = {
            "description": child.help,
            "allow_abbrev": False,
            "argument_default": argparse.SUPPRESS,
        }
        # Children registered without help stay out of the command listing
        if not child.hidden:
            child_kwargs["help"] = child.help or ""

        child_parser = subparsers.add_parser(child.name, **child_kwargs)
        level.children[child.name] = _build_level(child, child_parser)

    return level


def _build_root_level(root: GrammarNode) -> _Level:
    parser = _GrammarArgumentParser(
        prog=root.name,
        description=root.help,
        allow_abbrev=False,
        argument_default=argparse.SUPPRESS,
    )
    return _build_level(root, parser)


def build_parser(root: GrammarNode) -> argparse.ArgumentParser:
    """
    Build an argparse parser tree for a compiled grammar.

    Params:
        root: Root grammar node; its name becomes the program name

    Returns:
        Configured parser whose errors raise GrammarParseError
    """
    return _build_root_level(root).parser


def _split_tokens(level: _Level, tokens: list[str]) -> _LevelTokens:
    node = level.node
    trailing = _trailing(node)
    open_positionals = len(_positionals(node))

    value_flags = set()
    short_value_flags = set()
    for argument in node.arguments:
        if argument.is_positional:
            continue
        value_flags.update(_flag_strings(argument))
        if argument.short is not None:
            short_value_flags.add(f"-{argument.short}")

    switches = {_VERSION_FLAG} if node.version is not None else set()

    split = _LevelTokens()
    flags: list[str] = []
    unknown: list[str] = []
    positional_values: list[str] = []

    index = 0
    while index < len(tokens):
        token = tokens[index]

        if token == _END_OF_OPTIONS:
            rest = tokens[index + 1 :]
            positional_values.extend(rest[:open_positionals])
            rest = rest[open_positionals:]
            if rest and trailing is None:
                level.parser.error(f"unrecognized arguments: {' '.join(unknown + rest)}")
            split.trailing = rest
            break

        if token.startswith("-") and len(token) > 1:
            if token in _HELP_FLAGS:
                split.help_requested = True
                index += 1
                continue

            if token in switches:
                flags.append(token)
                index += 1
                continue

            if token in value_flags:
                flags.extend(tokens[index : index + 2])
                index += 2
                continue

            if token.split("=", 1)[0] in value_flags or token[:2] in short_value_flags:
                flags.append(token)
                index += 1
                continue

            if trailing is not None and trailing.allow_hyphen_values:
                split.trailing = tokens[index:]
                break

            # Left for argparse to reject
            flags.append(token)
            unknown.append(token)
            index += 1
            continue

        if not positional_values and token in level.children:
            split.child_name = token
            split.child_tokens = tokens[index + 1 :]
            break

        if open_positionals:
            positional_values.append(token)
            open_positionals -= 1
            index += 1
            continue

        if trailing is not None:
            split.trailing = tokens[index:]
            break

        if level.children and not unknown and not positional_values:
            choices = ", ".join(repr(child.name) for child in node.children if not child.hidden)
            level.parser.error(
                f"argument {_SUBCOMMAND_METAVAR}: invalid choice: {token!r} (choose from {choices})"
            )
        level.parser.error(f"unrecognized arguments: {' '.join(unknown + tokens[index:])}")

    if any(value.startswith("-") for value in positional_values):
        positional_values.insert(0, _END_OF_OPTIONS)
    split.own = flags + positional_values
    return split


class GrammarEngine:
    """Matches command lines against a compiled grammar."""

    def __init__(self, root: GrammarNode):
        """
        Initialize the engine.

        Params:
            root: Root node produced by the command tree compiler
        """
        self.root = root
        self._root_level = _build_root_level(root)
        self.parser = self._root_level.parser

    def parse(self, argv: Sequence[str]) -> ParsedInvocation:
        """
        Match a command line against the grammar.

        Params:
            argv: Tokens after the program name

        Returns:
            Matched path, starting at the root level

        Raises:
            GrammarParseError: If the tokens do not match the grammar
        """
        invocation = self._parse_level(self._root_level, list(argv))
        logger.debug("Parsed %r into %r", list(argv), invocation)
        return invocation

    def _parse_level(self, level: _Level, tokens: list[str]) -> ParsedInvocation:
        split = _split_tokens(level, tokens)

        if split.help_requested:
            level.parser.print_help()
            level.parser.exit()

        try:
            namespace = level.values_parser.parse_args(split.own)
        except GrammarParseError as e:
            raise GrammarParseError(e.message, usage=level.parser.format_usage()) from e

        values = dict(vars(namespace))

        # Left unset without tokens so that an empty passthrough reads as absent
        trailing = _trailing(level.node)
        if trailing is not None and split.trailing:
            values[trailing.id] = list(split.trailing)

        subcommand = None
        if split.child_name is not None:
            child = level.children[split.child_name]
            subcommand = (split.child_name, self._parse_level(child, split.child_tokens))
        elif level.node.requires_subcommand:
            level.parser.error(f"the following arguments are required: {_SUBCOMMAND_METAVAR}")

        return ParsedInvocation(values=values, subcommand=subcommand)

    def format_help(self) -> str:
        """Get the root help text."""
        return self.parser.format_help()
