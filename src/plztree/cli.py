"""
Dry-run inspection command.

``plztree -- <invocation...>`` loads the nearest plz configuration, matches
the invocation against the compiled grammar and prints the resolved command
and its variable scope as JSON. Nothing is executed.
"""

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from plztree import __version__
from plztree.args import ALIAS_ARGS_NAME
from plztree.commands import (
    SubcommandSearchResult,
    compile_root,
    find_subcommand,
    matched_path,
)
from plztree.exceptions import GrammarParseError, PlzTreeError
from plztree.grammar import GrammarEngine
from plztree.platform import PlatformProvider, StaticPlatformProvider, SystemPlatformProvider
from plztree.schema import AliasAction, Platform, find_config_file, load_config

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_NOT_RESOLVED = 2


def describe_resolution(result: SubcommandSearchResult, path: list[str]) -> dict[str, Any]:
    """
    Build a JSON-serializable description of a resolved command.

    Params:
        result: Resolver output
        path: Command names from the root to the resolved command

    Returns:
        Mapping with the command path, its action and every variable in scope
        together with the argument values bound to it
    """
    command, variables, arguments = result

    description: dict[str, Any] = {
        "command": path,
        "description": command.description,
        "action": command.action.model_dump(mode="json", by_alias=True) if command.action else None,
        "variables": {
            key: {
                "definition": variable.model_dump(mode="json", by_alias=True, exclude_none=True),
                "arguments": arguments.get_many(key),
            }
            for key, variable in variables.items()
        },
    }

    if isinstance(command.action, AliasAction):
        description["aliasArguments"] = arguments.get_many(ALIAS_ARGS_NAME)

    return description


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plztree",
        description="Resolve a plz invocation to its command and variables without running it.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-c", "--config", type=Path, help="Configuration file (default: nearest plz.yaml)")
    parser.add_argument(
        "--platform",
        choices=[platform.value for platform in Platform],
        help="Platform to compile for (default: the running one)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    parser.add_argument("invocation", nargs=argparse.REMAINDER, help="plz arguments to resolve")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """
    Run the inspection command.

    Params:
        argv: Arguments after the program name (default: ``sys.argv[1:]``)

    Returns:
        Process exit code
    """
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    config_path = args.config or find_config_file()
    if config_path is None:
        print("plztree: error: no plz.yaml found in this directory or its parents", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    logger.debug("Using configuration %s", config_path)

    platform_provider: PlatformProvider
    if args.platform is not None:
        platform_provider = StaticPlatformProvider(Platform(args.platform))
    else:
        platform_provider = SystemPlatformProvider()

    try:
        config = load_config(config_path)
        root = compile_root(config, platform_provider, version=__version__, config_path=config_path)
    except PlzTreeError as e:
        print(f"plztree: error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    engine = GrammarEngine(root)

    tokens = list(args.invocation)
    if tokens and tokens[0] == "--":
        tokens = tokens[1:]

    if not tokens:
        print(engine.format_help(), end="")
        return EXIT_NOT_RESOLVED

    try:
        invocation = engine.parse(tokens)
    except GrammarParseError as e:
        if e.usage:
            print(e.usage, end="", file=sys.stderr)
        print(f"{root.name}: error: {e.message}", file=sys.stderr)
        return EXIT_NOT_RESOLVED

    result = find_subcommand(invocation, root, config.commands, config.variables)
    if result is None:
        print(f"{root.name}: error: no command resolved", file=sys.stderr)
        return EXIT_NOT_RESOLVED

    print(json.dumps(describe_resolution(result, matched_path(invocation)), indent=2))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
