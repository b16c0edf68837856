"""
Running-platform detection and platform predicate matching.
"""

import sys
from abc import ABC, abstractmethod

from plztree.exceptions import UnsupportedPlatformError
from plztree.schema import Platform, PlatformPredicate


class PlatformProvider(ABC):
    """Capable of reporting the platform the process is running on."""

    @abstractmethod
    def get_platform(self) -> Platform:
        """Get the running platform."""
        pass


class SystemPlatformProvider(PlatformProvider):
    """Reports the platform from ``sys.platform``."""

    def __init__(self, platform_name: str | None = None):
        """
        Initialize the provider.

        Params:
            platform_name: Value to interpret instead of ``sys.platform``
        """
        self.platform_name = platform_name if platform_name is not None else sys.platform

    def get_platform(self) -> Platform:
        name = self.platform_name
        if name.startswith("linux"):
            return Platform.LINUX
        if name == "darwin":
            return Platform.MACOS
        if name in ("win32", "cygwin"):
            return Platform.WINDOWS
        raise UnsupportedPlatformError(name)


class StaticPlatformProvider(PlatformProvider):
    """Always reports the same platform."""

    def __init__(self, platform: Platform):
        self.platform = platform

    def get_platform(self) -> Platform:
        return self.platform


def is_current_platform(current: Platform, predicate: PlatformPredicate) -> bool:
    """
    Check whether a platform predicate admits the running platform.

    Params:
        current: The running platform
        predicate: A single platform or a list of platforms

    Returns:
        True when ``current`` equals the single platform or is one of the listed ones
    """
    if isinstance(predicate, Platform):
        return predicate == current
    return current in predicate
