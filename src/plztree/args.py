"""
Argument value lookup over one level of a parsed invocation.

The resolver and the evaluation engine only ever read parsed values through
ArgumentResolver, so neither depends on the grammar engine's result type.
"""

from abc import ABC, abstractmethod

from plztree.grammar.engine import ParsedInvocation

ALIAS_ARGS_NAME = "ARGS"


class ArgumentResolver(ABC):
    """Capable of resolving command-line argument values."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """
        Get the single value bound to ``key``.

        Params:
            key: Argument identifier (the variable key)

        Returns:
            The value, or None when the argument was not set
        """
        pass

    @abstractmethod
    def get_many(self, key: str) -> list[str] | None:
        """
        Get every value bound to a multi-valued argument.

        Params:
            key: Argument identifier (the variable key)

        Returns:
            The values in order, an empty list when the argument was set with no
            values, or None when it was not set at all
        """
        pass


class InvocationArgumentResolver(ArgumentResolver):
    """ArgumentResolver over the local values of one ParsedInvocation level."""

    def __init__(self, invocation: ParsedInvocation):
        self.invocation = invocation

    @classmethod
    def from_invocation(cls, invocation: ParsedInvocation) -> "InvocationArgumentResolver":
        return cls(invocation)

    def get(self, key: str) -> str | None:
        value = self.invocation.values.get(key)
        if value is None:
            return None
        if isinstance(value, list):
            # Multi-valued arguments report their last value
            return value[-1] if value else None
        return value

    def get_many(self, key: str) -> list[str] | None:
        if key not in self.invocation.values:
            return None
        value = self.invocation.values[key]
        if value is None:
            return None
        if isinstance(value, list):
            return list(value)
        return [value]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.invocation.values!r})"
