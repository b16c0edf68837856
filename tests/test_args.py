"""
Tests for the argument resolver adapter.
"""

from plztree.args import InvocationArgumentResolver
from plztree.grammar import GrammarArgument, GrammarEngine, GrammarNode, ParsedInvocation


class TestInvocationArgumentResolver:
    """Test lookups over one level of a parsed invocation."""

    def test_resolves_arg(self):
        """Test a single value supplied on the command line."""
        root = GrammarNode(name="plz", arguments=[GrammarArgument(id="name", long="name")])

        invocation = GrammarEngine(root).parse(["--name", "Alice"])
        arg_resolver = InvocationArgumentResolver.from_invocation(invocation)

        assert arg_resolver.get("name") == "Alice"

    def test_resolves_arg_from_subcommand(self):
        """Test a value supplied to a subcommand."""
        root = GrammarNode(
            name="plz",
            children=[GrammarNode(name="greet", arguments=[GrammarArgument(id="name", long="name")])],
        )

        invocation = GrammarEngine(root).parse(["greet", "--name", "Alice"])
        subcommand_name, subcommand_invocation = invocation.subcommand
        assert subcommand_name == "greet"

        arg_resolver = InvocationArgumentResolver.from_invocation(subcommand_invocation)

        assert arg_resolver.get("name") == "Alice"

    def test_resolves_multiple_args(self):
        """Test a multi-valued argument."""
        root = GrammarNode(
            name="plz",
            children=[
                GrammarNode(
                    name="print",
                    arguments=[GrammarArgument(id="file", long="file", variadic=True)],
                )
            ],
        )

        invocation = GrammarEngine(root).parse(["print", "--file", "first.txt", "second.txt"])
        arg_resolver = InvocationArgumentResolver.from_invocation(invocation.subcommand[1])

        assert arg_resolver.get_many("file") == ["first.txt", "second.txt"]

    def test_absent_and_empty_are_distinct(self):
        """Test that an unset argument and an empty list differ."""
        arg_resolver = InvocationArgumentResolver(ParsedInvocation(values={"ARGS": []}))

        assert arg_resolver.get_many("ARGS") == []
        assert arg_resolver.get_many("missing") is None
        assert arg_resolver.get("missing") is None

    def test_single_value_through_get_many(self):
        """Test that a single value is returned as a one-element list."""
        arg_resolver = InvocationArgumentResolver(ParsedInvocation(values={"name": "Alice"}))

        assert arg_resolver.get_many("name") == ["Alice"]

    def test_get_many_returns_copy(self):
        """Test that callers cannot modify the parsed values."""
        values = {"files": ["a", "b"]}
        arg_resolver = InvocationArgumentResolver(ParsedInvocation(values=values))

        arg_resolver.get_many("files").append("c")

        assert values["files"] == ["a", "b"]

