"""
Shared test fixtures and utilities for the plztree test suite.
"""

from unittest.mock import Mock

import pytest

from plztree.platform import PlatformProvider
from plztree.schema import (
    CommandDefinition,
    Platform,
    RawCommandExecution,
    SingleStepAction,
)


@pytest.fixture
def platform_provider():
    """Mock platform provider reporting Linux.

    Usage:
        def test_something(platform_provider):
            platform_provider.get_platform.return_value = Platform.WINDOWS
    """
    provider = Mock(spec=PlatformProvider)
    provider.get_platform.return_value = Platform.LINUX
    return provider


@pytest.fixture
def echo_action():
    """Single-step action running ``echo "Hello, World!"``."""
    return SingleStepAction(action=RawCommandExecution(command='echo "Hello, World!"'))


@pytest.fixture
def make_command(echo_action):
    """Factory for runnable commands; pass ``action=None`` for a grouping command."""

    def _make_command(**kwargs) -> CommandDefinition:
        kwargs.setdefault("action", echo_action)
        return CommandDefinition(**kwargs)

    return _make_command
