"""
Engine-facing grammar description.

The compiler emits these plain structures; the grammar engine turns them into
a concrete parser. Keeping them independent from the engine lets the
compiler and resolver be tested without parsing anything.
"""

from dataclasses import dataclass, field


@dataclass
class GrammarArgument:
    """
    One argument of a grammar node.

    Params:
        id: Identifier of the parsed value; equal to the originating variable key
        long: Long flag name without leading dashes
        short: Single-character short flag
        position: 1-based positional index; mutually exclusive with flags
        help: Help text
        default: Value used when the argument is not supplied
        variadic: Accepts one or more values
        allow_hyphen_values: Accepts values that look like flags
        trailing: Stops flag interpretation once the argument starts
    """

    id: str
    long: str | None = None
    short: str | None = None
    position: int | None = None
    help: str | None = None
    default: str | None = None
    variadic: bool = False
    allow_hyphen_values: bool = False
    trailing: bool = False

    @property
    def is_positional(self) -> bool:
        """Check if this argument is matched by position rather than by flag."""
        return self.long is None and self.short is None


@dataclass
class GrammarNode:
    """
    One command of the grammar.

    Params:
        name: Name the command is invoked by
        key: Map key of the originating command definition, if any
        children: Subcommands
        arguments: Arguments accepted at this level
        requires_subcommand: The command cannot be invoked without a subcommand
        hidden: Excluded from help listings but still invocable
        help: Help text
        version: Version string reported by the root node
    """

    name: str
    key: str | None = None
    children: list["GrammarNode"] = field(default_factory=list)
    arguments: list[GrammarArgument] = field(default_factory=list)
    requires_subcommand: bool = False
    hidden: bool = False
    help: str | None = None
    version: str | None = None

    def find_child(self, name: str) -> "GrammarNode | None":
        """
        Find a direct subcommand by name.

        Params:
            name: Name the subcommand is invoked by

        Returns:
            The matching child node, or None
        """
        for child in self.children:
            if child.name == name:
                return child
        return None

    def find_argument(self, argument_id: str) -> GrammarArgument | None:
        """Find an argument of this node by its identifier."""
        for argument in self.arguments:
            if argument.id == argument_id:
                return argument
        return None
