"""
plztree - command tree compiler and resolver for the plz command runner

plztree compiles a declarative tree of commands and variables into a
command-line grammar, and maps a parsed invocation back to the command to
run together with every variable visible to it.
"""

from importlib.metadata import version

from plztree.args import ALIAS_ARGS_NAME, ArgumentResolver, InvocationArgumentResolver
from plztree.commands import SubcommandSearchResult, compile_root, find_subcommand
from plztree.grammar import GrammarEngine, GrammarNode, ParsedInvocation
from plztree.platform import PlatformProvider, SystemPlatformProvider
from plztree.schema import Configuration, load_config

__version__ = version("plztree")

__all__ = [
    "__version__",
    "ALIAS_ARGS_NAME",
    "ArgumentResolver",
    "InvocationArgumentResolver",
    "SubcommandSearchResult",
    "compile_root",
    "find_subcommand",
    "GrammarEngine",
    "GrammarNode",
    "ParsedInvocation",
    "PlatformProvider",
    "SystemPlatformProvider",
    "Configuration",
    "load_config",
]
