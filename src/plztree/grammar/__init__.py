"""
Grammar description and the argparse engine that matches invocations against it.
"""

from plztree.grammar.engine import GrammarEngine, ParsedInvocation, build_parser
from plztree.grammar.nodes import GrammarArgument, GrammarNode

__all__ = [
    "GrammarArgument",
    "GrammarNode",
    "GrammarEngine",
    "ParsedInvocation",
    "build_parser",
]
